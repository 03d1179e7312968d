"""Section schema: section keys, authoring guidance and fill-in templates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping, Optional, Union

from .errors import UnknownSectionError


class BaseType(Enum):
    TITLE = "title"
    ABSTRACT = "abstract"
    INTRODUCTION = "introduction"
    RELATED_WORK = "relatedWork"
    METHOD = "method"
    RESULT = "result"
    DISCUSSION = "discussion"
    CONCLUSION = "conclusion"


class SectionKey(Enum):
    """Identifier of one field of the paper form.

    Each member carries the base type its guidance is looked up by and the
    label shown next to its input.
    """

    TITLE = ("title", BaseType.TITLE, "Title")
    ABSTRACT = ("abstract", BaseType.ABSTRACT, "Abstract")
    INTRODUCTION = ("introduction", BaseType.INTRODUCTION, "Introduction")
    RELATED_WORK = ("relatedWork", BaseType.RELATED_WORK, "Related Work")
    METHOD1 = ("method1", BaseType.METHOD, "Method 1")
    METHOD2 = ("method2", BaseType.METHOD, "Method 2")
    RESULT1 = ("result1", BaseType.RESULT, "Result 1")
    RESULT2 = ("result2", BaseType.RESULT, "Result 2")
    RESULT3 = ("result3", BaseType.RESULT, "Result 3")
    DISCUSSION1 = ("discussion1", BaseType.DISCUSSION, "Discussion 1")
    DISCUSSION2 = ("discussion2", BaseType.DISCUSSION, "Discussion 2")
    CONCLUSION = ("conclusion", BaseType.CONCLUSION, "Conclusion")

    def __new__(cls, key: str, base_type: BaseType, label: str):
        obj = object.__new__(cls)
        obj._value_ = key
        obj.base_type = base_type
        obj.label = label
        return obj

    @classmethod
    def parse(cls, key: Union[SectionKey, str]) -> SectionKey:
        """Return the member for `key`, accepting members or their string value.

        Raises
        ------
        UnknownSectionError
            If `key` does not name a section.
        """
        if isinstance(key, cls):
            return key
        try:
            return cls(key)
        except ValueError:
            raise UnknownSectionError(key) from None


@dataclass(frozen=True)
class SectionGuidance:
    description: str
    template: Optional[str] = None

    @property
    def has_template(self) -> bool:
        return self.template is not None


EMPTY_GUIDANCE: Final = SectionGuidance(description="")

SECTION_GUIDANCE: Final[Mapping[BaseType, SectionGuidance]] = MappingProxyType(
    {
        BaseType.TITLE: SectionGuidance(
            description=(
                "A concise and specific title, e.g., "
                "'A Transformer-Based Approach to Melody Generation'"
            ),
        ),
        BaseType.ABSTRACT: SectionGuidance(
            description=(
                "Summarize background, objectives, methods, main findings, "
                "and conclusion in 150-250 words."
            ),
            template=(
                "This study investigates [research topic]. "
                "We propose [method or approach]. "
                "Experiments show that [main result]. "
                "These findings suggest [conclusion or implication]."
            ),
        ),
        BaseType.INTRODUCTION: SectionGuidance(
            description=(
                "Introduce the topic, present the research question or gap, "
                "and summarize your contributions."
            ),
            template=(
                "Recent studies have shown that [context]. "
                "However, [gap or problem]. "
                "In this paper, we aim to [objective]. "
                "Our main contributions are: (1) ..., (2) ..., (3) ..."
            ),
        ),
        BaseType.RELATED_WORK: SectionGuidance(
            description=(
                "Discuss relevant prior work and how your work differs "
                "or builds on them."
            ),
        ),
        BaseType.METHOD: SectionGuidance(
            description=(
                "Explain what you did, how, and why. "
                "Include algorithms, models, or procedures used."
            ),
            template=(
                "We employed [methodology] using [tools/datasets]. "
                "The procedure involved the following steps: "
                "(1) ..., (2) ..., (3) ..."
            ),
        ),
        BaseType.RESULT: SectionGuidance(
            description=(
                "Present key findings using text, tables, or figures. "
                "Focus on clarity and objectivity."
            ),
            template=(
                "Our model achieved [result] on [dataset]. "
                "Figure X shows [description]. "
                "This indicates that ..."
            ),
        ),
        BaseType.DISCUSSION: SectionGuidance(
            description=(
                "Interpret the results, explain their significance, relate "
                "them to previous work, and discuss limitations."
            ),
            template=(
                "The results demonstrate [interpretation]. "
                "Compared to previous work, our method "
                "[advantage or difference]. "
                "One limitation is ..., which we plan to address in future work."
            ),
        ),
        BaseType.CONCLUSION: SectionGuidance(
            description=(
                "Summarize key takeaways and suggest directions for future work."
            ),
            template=(
                "In summary, we presented [approach]. "
                "Our findings show that [result]. "
                "Future work includes ..."
            ),
        ),
    }
)


def base_type_of(
    key: Union[BaseType, SectionKey, str],
) -> Optional[BaseType]:
    if isinstance(key, BaseType):
        return key
    if isinstance(key, SectionKey):
        return key.base_type
    for enum_cls in (BaseType, SectionKey):
        try:
            member = enum_cls(key)
        except ValueError:
            continue
        return member if isinstance(member, BaseType) else member.base_type
    return None


def guidance_for(key: Union[BaseType, SectionKey, str]) -> SectionGuidance:
    """
    Return the authoring guidance for a section.

    Parameters
    ----------
    key : BaseType | SectionKey | str
        Base type, section key, or the string value of either.

    Returns
    -------
    SectionGuidance
        Guidance of the key's base type, or `EMPTY_GUIDANCE` when the key is
        not part of the schema.
    """
    base_type = base_type_of(key)
    if base_type is None:
        return EMPTY_GUIDANCE
    return SECTION_GUIDANCE.get(base_type, EMPTY_GUIDANCE)


def template_for(key: Union[BaseType, SectionKey, str]) -> Optional[str]:
    """Return the fill-in template of a section, or None if it has none."""
    return guidance_for(key).template


def section_label(key: Union[SectionKey, str]) -> str:
    return SectionKey.parse(key).label


__all__ = [
    "BaseType",
    "SectionKey",
    "SectionGuidance",
    "EMPTY_GUIDANCE",
    "SECTION_GUIDANCE",
    "guidance_for",
    "template_for",
    "section_label",
    "base_type_of",
]
