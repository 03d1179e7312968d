from __future__ import annotations


class PaperguideError(Exception):
    """Base class for paperguide errors."""


class UnknownSectionError(PaperguideError, KeyError):
    """Exception raised when a section key is not part of the schema."""

    def __init__(
        self,
        key: object,
        message: str = "Unknown section key.",
    ):
        self.key = key
        super().__init__(f"{message} ({key!r})")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0])


class ConfigError(PaperguideError):
    """Exception raised when a settings file cannot be interpreted."""


class SectionsFileError(PaperguideError):
    """Exception raised when a sections file has an unexpected shape."""

    def __init__(
        self,
        message: str = "Invalid sections file.",
        *,
        path: object | None = None,
    ):
        if path is not None:
            message += f" ({path})"
        super().__init__(message)


__all__ = [
    "PaperguideError",
    "UnknownSectionError",
    "ConfigError",
    "SectionsFileError",
]
