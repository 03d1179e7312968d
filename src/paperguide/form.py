"""Form state of one editing session."""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Union

from .layout import DEFAULT_MODE, StructureMode, form_order
from .sections import SectionKey, template_for

logger = logging.getLogger(__name__)

KeyLike = Union[SectionKey, str]
ModeLike = Union[StructureMode, str]


class FormState:
    """
    Current text of every paper section and the selected structure mode.

    Every `SectionKey` holds a value at all times, starting as the empty
    string. Values are replaced wholesale; they are never trimmed, merged or
    sanitized. Switching the structure mode leaves all values in place, so
    text typed under one layout is still there after switching back.
    """

    def __init__(
        self,
        *,
        mode: ModeLike = DEFAULT_MODE,
    ) -> None:
        self._values: dict[SectionKey, str] = {key: "" for key in SectionKey}
        self._mode: ModeLike = DEFAULT_MODE
        self._dirty = False
        self.set_mode(mode)
        self._dirty = False

    @classmethod
    def from_mapping(
        cls,
        values: Mapping[KeyLike, str],
        *,
        mode: ModeLike = DEFAULT_MODE,
    ) -> FormState:
        """
        Create a form state pre-filled from a mapping.

        Parameters
        ----------
        values : Mapping[SectionKey | str, str]
            Section values keyed by section key or its string value.
        mode : StructureMode | str, optional
            Structure mode, by default `paired`.

        Raises
        ------
        UnknownSectionError
            If a key of `values` is not a section key.
        """
        state = cls(mode=mode)
        state.update(values)
        state.mark_clean()
        return state

    @property
    def mode(self) -> ModeLike:
        """The selected structure mode.

        Unrecognized modes are kept as given and resolve to an empty layout.
        """
        return self._mode

    @property
    def is_dirty(self) -> bool:
        """Whether the form changed since creation or the last export."""
        return self._dirty

    def get_value(self, key: KeyLike) -> str:
        return self._values[SectionKey.parse(key)]

    def set_value(self, key: KeyLike, text: str) -> None:
        """Replace the whole value of a section."""
        self._values[SectionKey.parse(key)] = text
        self._dirty = True

    def set_mode(self, mode: ModeLike) -> None:
        """Select a structure mode without touching any section value."""
        structure_mode = StructureMode.lookup(mode)
        if structure_mode is None:
            logger.debug(f"Unrecognized structure mode: {mode!r}")
            self._mode = mode
        else:
            self._mode = structure_mode
        self._dirty = True

    def insert_template(self, key: KeyLike) -> bool:
        """
        Replace a section's value with its fill-in template.

        Returns
        -------
        bool
            False if the section has no template; its value is left as is.
        """
        section_key = SectionKey.parse(key)
        template = template_for(section_key)
        if template is None:
            return False
        self.set_value(section_key, template)
        return True

    def update(self, values: Mapping[KeyLike, str]) -> None:
        for key, text in values.items():
            self.set_value(key, text)

    def values(self) -> dict[SectionKey, str]:
        """Return a copy of all section values."""
        return dict(self._values)

    def visible_keys(self) -> list[SectionKey]:
        """Return the sections shown for the current mode, top to bottom."""
        return form_order(self._mode)

    def mark_clean(self) -> None:
        self._dirty = False

    def reset(self, *, mode: Optional[ModeLike] = None) -> None:
        """Clear every section and select `mode` (default: `paired`)."""
        self._values = {key: "" for key in SectionKey}
        self._mode = StructureMode.lookup(mode) or mode or DEFAULT_MODE
        self._dirty = False

    def __repr__(self) -> str:
        filled = sum(1 for text in self._values.values() if text)
        mode = self._mode.value if isinstance(self._mode, StructureMode) else self._mode
        return f"FormState(mode={mode!r}, filled={filled}/{len(self._values)})"


__all__ = [
    "FormState",
]
