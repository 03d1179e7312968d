"""Paperguide: guided paper structure builder.

Collects the textual sections of an academic paper in a fixed form, arranges
the experiment sections according to a structure mode and exports the result
as a LaTeX document.
"""

from __future__ import annotations

import logging

from .config import DocumentSettings, PaperConfig
from .document import DocumentGenerator, escape_latex, generate
from .errors import (
    ConfigError,
    PaperguideError,
    SectionsFileError,
    UnknownSectionError,
)
from .form import FormState
from .layout import StructureMode, form_order, resolve_layout
from .sections import (
    BaseType,
    SectionGuidance,
    SectionKey,
    guidance_for,
    section_label,
    template_for,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BaseType",
    "SectionKey",
    "SectionGuidance",
    "guidance_for",
    "template_for",
    "section_label",
    "StructureMode",
    "resolve_layout",
    "form_order",
    "FormState",
    "PaperConfig",
    "DocumentSettings",
    "DocumentGenerator",
    "escape_latex",
    "generate",
    "PaperguideError",
    "UnknownSectionError",
    "ConfigError",
    "SectionsFileError",
]
