"""Configuration management for paperguide."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Union

import yaml

from .errors import ConfigError
from .layout import DEFAULT_MODE

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

DEFAULT_CONFIG_DIR = Path.home() / ".paperguide"
DEFAULT_SETTINGS_FILE = "paperguide.yaml"

DEFAULT_PACKAGES: tuple[Union[str, dict[str, Any]], ...] = (
    {"name": "inputenc", "options": ["utf8"]},
    "amsmath",
    "graphicx",
    {"name": "hyperref", "options": ["colorlinks=true", "allcolors=blue"]},
)


@dataclass(frozen=True)
class DocumentSettings:
    """Fixed parts of the generated LaTeX document."""

    documentclass: str = "article"
    documentclass_options: tuple[str, ...] = ()
    packages: tuple[Union[str, dict[str, Any]], ...] = DEFAULT_PACKAGES
    author: str = "Your Name"
    date: str = "\\today"
    title_placeholder: str = "Paper Title"
    escape: bool = False
    default_mode: str = DEFAULT_MODE.value
    output_name: str = "paper.tex"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DocumentSettings:
        """
        Build settings from a mapping, keeping defaults for missing keys.

        Parameters
        ----------
        data : dict[str, Any]
            Settings as loaded from YAML.

        Returns
        -------
        DocumentSettings
            Settings with the known keys of `data` applied.

        Raises
        ------
        ConfigError
            If `data` is not a mapping, a list-valued key is not a list, or a
            document class option or package entry has the wrong shape.
        """
        if not isinstance(data, dict):
            raise ConfigError(f"Settings must be a mapping, got {type(data).__name__}")

        known = {field.name for field in fields(cls)}
        for key in data:
            if key not in known:
                logger.warning(f"Ignoring unknown setting: {key}")

        values = {key: value for key, value in data.items() if key in known}
        for key in ("documentclass_options", "packages"):
            if key in values:
                if not isinstance(values[key], list):
                    raise ConfigError(f"{key} must be a list")
                values[key] = tuple(values[key])

        for option in values.get("documentclass_options", ()):
            if not isinstance(option, str):
                raise ConfigError(
                    f"documentclass_options entries must be strings, got {option!r}"
                )
        for package in values.get("packages", ()):
            _validate_package(package)

        return replace(cls(), **values)


def _validate_package(package: Any) -> None:
    """Check that a package entry is a name or a `{name, options}` mapping."""
    if isinstance(package, str):
        return
    if not isinstance(package, dict):
        raise ConfigError(f"Package must be a name or a mapping, got {package!r}")

    name = package.get("name")
    if not isinstance(name, str) or not name:
        raise ConfigError(f"Package name must be a non-empty string: {package!r}")

    options = package.get("options", [])
    if not isinstance(options, list) or not all(
        isinstance(option, str) for option in options
    ):
        raise ConfigError(f"Options of package '{name}' must be a list of strings")


class PaperConfig:
    """Configuration loader for paperguide.

    Reads document settings from a YAML file. When no directory is given the
    default directory is used, and a missing file there falls back to the
    built-in settings.
    """

    def __init__(
        self,
        *,
        config_dir: PathLike | None = None,
        settings_file: str = DEFAULT_SETTINGS_FILE,
    ) -> None:
        """Initialize configuration loader.

        Parameters
        ----------
        config_dir : PathLike, optional
            Directory containing the settings file. If None, uses
            `~/.paperguide`.
        settings_file : str, optional
            Name of the settings file, by default "paperguide.yaml".
        """
        self._explicit = config_dir is not None
        self._config_dir = Path(config_dir) if config_dir else DEFAULT_CONFIG_DIR
        self.settings_file = settings_file
        self._document_settings: DocumentSettings | None = None

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    @property
    def settings_path(self) -> Path:
        return self._config_dir / self.settings_file

    def _load_config_file(self, path: Path) -> dict[str, Any]:
        """Load a YAML configuration file.

        Raises
        ------
        FileNotFoundError
            If the configuration file is not found.
        ConfigError
            If there's an error parsing the YAML file.
        """
        try:
            with open(path, "r", encoding="utf-8") as file:
                result = yaml.safe_load(file)
        except FileNotFoundError as e:
            raise FileNotFoundError(f"Configuration file not found: {path}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Error loading configuration file: {path}") from e

        return result if result is not None else {}

    @property
    def document_settings(self) -> DocumentSettings:
        """Get document settings."""
        if self._document_settings is None:
            path = self.settings_path
            if not self._explicit and not path.exists():
                logger.debug(f"No settings file at {path}, using defaults")
                self._document_settings = DocumentSettings()
            else:
                data = self._load_config_file(path)
                self._document_settings = DocumentSettings.from_dict(data)
                logger.debug(f"Loaded settings from {path}")
        return self._document_settings


__all__ = [
    "DocumentSettings",
    "PaperConfig",
]
