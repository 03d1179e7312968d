"""Structure modes and the ordering of experiment sections they select."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping, Optional, Union

from .sections import SectionKey


class StructureMode(Enum):
    PAIRED = "paired"
    GROUPED = "grouped"
    MERGE_DISCUSSION = "mergeDiscussion"

    @property
    def label(self) -> str:
        return {
            StructureMode.PAIRED: "Method → Result → Discussion",
            StructureMode.GROUPED: "Methods → Results → Discussions",
            StructureMode.MERGE_DISCUSSION: "Results → Discussion (Grouped)",
        }[self]

    @classmethod
    def lookup(cls, mode: Union[StructureMode, str, None]) -> Optional[StructureMode]:
        """Return the member for `mode`, or None if it is not a known mode."""
        if isinstance(mode, cls):
            return mode
        try:
            return cls(mode)
        except ValueError:
            return None


DEFAULT_MODE: Final = StructureMode.PAIRED

LAYOUTS: Final[Mapping[StructureMode, tuple[SectionKey, ...]]] = MappingProxyType({
    StructureMode.PAIRED: (
        SectionKey.METHOD1,
        SectionKey.RESULT1,
        SectionKey.DISCUSSION1,
        SectionKey.METHOD2,
        SectionKey.RESULT2,
        SectionKey.DISCUSSION2,
    ),
    StructureMode.GROUPED: (
        SectionKey.METHOD1,
        SectionKey.METHOD2,
        SectionKey.RESULT1,
        SectionKey.RESULT2,
        SectionKey.DISCUSSION1,
        SectionKey.DISCUSSION2,
    ),
    StructureMode.MERGE_DISCUSSION: (
        SectionKey.METHOD1,
        SectionKey.METHOD2,
        SectionKey.RESULT1,
        SectionKey.RESULT2,
        SectionKey.RESULT3,
        SectionKey.DISCUSSION2,
    ),
})

FRONT_MATTER: Final = (
    SectionKey.TITLE,
    SectionKey.ABSTRACT,
    SectionKey.INTRODUCTION,
    SectionKey.RELATED_WORK,
)

BACK_MATTER: Final = (SectionKey.CONCLUSION,)


def resolve_layout(mode: Union[StructureMode, str, None]) -> list[SectionKey]:
    """
    Return the ordered experiment sections shown for a structure mode.

    Parameters
    ----------
    mode : StructureMode | str
        Structure mode or its string value.

    Returns
    -------
    list[SectionKey]
        Ordered method/result/discussion keys. Empty for unknown modes.
    """
    structure_mode = StructureMode.lookup(mode)
    if structure_mode is None:
        return []
    return list(LAYOUTS[structure_mode])


def form_order(mode: Union[StructureMode, str, None]) -> list[SectionKey]:
    """Return every section shown in the form for `mode`, top to bottom."""
    return [*FRONT_MATTER, *resolve_layout(mode), *BACK_MATTER]


__all__ = [
    "StructureMode",
    "DEFAULT_MODE",
    "LAYOUTS",
    "resolve_layout",
    "form_order",
]
