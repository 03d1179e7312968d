"""Tests for the section schema."""

from __future__ import annotations

import pytest

from paperguide.errors import UnknownSectionError
from paperguide.sections import (
    EMPTY_GUIDANCE,
    SECTION_GUIDANCE,
    BaseType,
    SectionKey,
    base_type_of,
    guidance_for,
    section_label,
    template_for,
)


def test_section_keys_are_closed_set():
    """Test the fixed set of section keys."""
    assert [key.value for key in SectionKey] == [
        "title",
        "abstract",
        "introduction",
        "relatedWork",
        "method1",
        "method2",
        "result1",
        "result2",
        "result3",
        "discussion1",
        "discussion2",
        "conclusion",
    ]


def test_section_key_base_types():
    """Test that numbered keys share the base type of their section kind."""
    assert SectionKey.METHOD1.base_type is BaseType.METHOD
    assert SectionKey.METHOD2.base_type is BaseType.METHOD
    assert SectionKey.RESULT3.base_type is BaseType.RESULT
    assert SectionKey.DISCUSSION2.base_type is BaseType.DISCUSSION
    assert SectionKey.RELATED_WORK.base_type is BaseType.RELATED_WORK


def test_section_key_parse():
    """Test parsing section keys from strings."""
    assert SectionKey.parse("result3") is SectionKey.RESULT3
    assert SectionKey.parse(SectionKey.TITLE) is SectionKey.TITLE

    with pytest.raises(UnknownSectionError):
        SectionKey.parse("method3")


def test_unknown_section_error_is_key_error():
    """Test that unknown keys can be caught as KeyError."""
    with pytest.raises(KeyError, match="method3"):
        SectionKey.parse("method3")


def test_every_base_type_has_guidance():
    """Test that the registry covers every base type."""
    assert set(SECTION_GUIDANCE) == set(BaseType)
    for guidance in SECTION_GUIDANCE.values():
        assert guidance.description


def test_guidance_registry_is_read_only():
    """Test that the registry cannot be modified."""
    with pytest.raises(TypeError):
        SECTION_GUIDANCE[BaseType.TITLE] = EMPTY_GUIDANCE  # type: ignore[index]


def test_guidance_for_section_key():
    """Test that numbered keys resolve to their base type's guidance."""
    assert guidance_for(SectionKey.METHOD2) is SECTION_GUIDANCE[BaseType.METHOD]
    assert guidance_for("discussion1") is SECTION_GUIDANCE[BaseType.DISCUSSION]
    assert guidance_for("result") is SECTION_GUIDANCE[BaseType.RESULT]


def test_guidance_for_unknown_key():
    """Test that unknown keys get empty guidance instead of an error."""
    assert guidance_for("appendix") is EMPTY_GUIDANCE
    assert guidance_for("appendix").description == ""
    assert template_for("appendix") is None


def test_template_for_sections_without_template():
    """Test that title and related work offer no template."""
    assert template_for("title") is None
    assert template_for("relatedWork") is None
    assert not guidance_for(BaseType.TITLE).has_template


def test_template_for_abstract():
    """Test the abstract boilerplate."""
    assert template_for("abstract") == (
        "This study investigates [research topic]. "
        "We propose [method or approach]. "
        "Experiments show that [main result]. "
        "These findings suggest [conclusion or implication]."
    )


def test_template_for_numbered_key():
    """Test that numbered keys share their base type's template."""
    assert template_for("method1") == template_for("method2")
    assert template_for("method1").startswith("We employed [methodology]")


def test_section_label():
    """Test display labels."""
    assert section_label("relatedWork") == "Related Work"
    assert section_label(SectionKey.RESULT3) == "Result 3"


def test_base_type_of():
    """Test base type resolution."""
    assert base_type_of("method2") is BaseType.METHOD
    assert base_type_of(BaseType.TITLE) is BaseType.TITLE
    assert base_type_of("bogus") is None
