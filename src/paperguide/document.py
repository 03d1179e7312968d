"""LaTeX document generation for paperguide."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Final, Mapping, Optional, Union

from .config import DocumentSettings, PaperConfig
from .form import FormState, KeyLike, ModeLike
from .layout import StructureMode, resolve_layout
from .sections import BaseType, SectionKey

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
FormLike = Union[FormState, Mapping[KeyLike, str]]

LATEX_SPECIAL_CHARS: Final = {
    "\\": "\\textbackslash{}",
    "&": "\\&",
    "%": "\\%",
    "$": "\\$",
    "#": "\\#",
    "_": "\\_",
    "{": "\\{",
    "}": "\\}",
    "~": "\\textasciitilde{}",
    "^": "\\textasciicircum{}",
}

_LATEX_SPECIAL_PATTERN: Final = re.compile(
    "|".join(re.escape(char) for char in LATEX_SPECIAL_CHARS)
)

CONSOLIDATED_SECTIONS: Final = (
    (BaseType.METHOD, "Methods"),
    (BaseType.RESULT, "Results"),
    (BaseType.DISCUSSION, "Discussion"),
)

EXPERIMENT_SECTIONS: Final = (
    (
        "First Experiment",
        (SectionKey.METHOD1, SectionKey.RESULT1, SectionKey.DISCUSSION1),
    ),
    (
        "Second Experiment",
        (SectionKey.METHOD2, SectionKey.RESULT2, SectionKey.DISCUSSION2),
    ),
)

EXPERIMENT_SUBSECTIONS: Final = ("Method", "Results", "Discussion")


def escape_latex(text: str) -> str:
    """Escape characters that have a special meaning in LaTeX."""
    return _LATEX_SPECIAL_PATTERN.sub(
        lambda match: LATEX_SPECIAL_CHARS[match.group()], text
    )


class DocumentGenerator:
    """Serializes a paper form into a LaTeX document.

    The document always has the same skeleton: preamble, title block,
    abstract, introduction, related work, the experiment sections and the
    conclusion. Only the experiment sections depend on the structure mode.
    Section text is inserted verbatim unless escaping is enabled.
    """

    def __init__(
        self,
        config: PaperConfig | None = None,
        *,
        config_dir: PathLike | None = None,
        settings: DocumentSettings | None = None,
    ) -> None:
        """Initialize document generator.

        Parameters
        ----------
        config : PaperConfig, optional
            Configuration instance. If None, creates a new one.
        config_dir : PathLike, optional
            Configuration directory. Used only if config is None.
        settings : DocumentSettings, optional
            Document settings. If given, the configuration is not read.
        """
        if config is None:
            config = PaperConfig(config_dir=config_dir)

        self.config = config
        self._settings = settings

    @property
    def settings(self) -> DocumentSettings:
        if self._settings is None:
            self._settings = self.config.document_settings
        return self._settings

    def generate(
        self,
        form: FormLike,
        mode: Optional[ModeLike] = None,
        *,
        escape: Optional[bool] = None,
    ) -> str:
        """
        Generate the LaTeX source of the paper.

        Parameters
        ----------
        form : FormState | Mapping[SectionKey | str, str]
            Section values. Missing sections are treated as empty.
        mode : StructureMode | str, optional
            Structure mode. If None, uses the mode of `form`, or the
            configured default mode when `form` is a plain mapping.
        escape : bool, optional
            Whether to escape LaTeX special characters in section text. If
            None, uses the configured setting (off by default).

        Returns
        -------
        str
            Complete LaTeX document, from `\\documentclass` to
            `\\end{document}`.
        """
        values = self._collect_values(form)
        if mode is None:
            mode = form.mode if isinstance(form, FormState) else self.settings.default_mode
        if escape is None:
            escape = self.settings.escape
        if escape:
            values = {key: escape_latex(text) for key, text in values.items()}

        logger.debug(f"Generating document (mode={mode!r}, escape={escape})")

        parts = [
            self.generate_preamble(),
            self._generate_front_matter(values),
            *self._generate_experiment_sections(values, mode),
            f"\\section{{Conclusion}}\n{values[SectionKey.CONCLUSION]}",
            "\\end{document}",
        ]
        return "\n\n".join(parts)

    def export(
        self,
        form: FormLike,
        output_path: PathLike | None = None,
        mode: Optional[ModeLike] = None,
        *,
        escape: Optional[bool] = None,
    ) -> Path:
        """
        Generate the document and write it to a file.

        Parameters
        ----------
        form : FormState | Mapping[SectionKey | str, str]
            Section values.
        output_path : PathLike, optional
            Output file path. If None, writes `paper.tex` (or the configured
            output name) in the current directory.
        mode : StructureMode | str, optional
            Structure mode, see `generate`.
        escape : bool, optional
            Whether to escape LaTeX special characters, see `generate`.

        Returns
        -------
        Path
            Path to the written file.
        """
        if output_path is None:
            output_path = self.settings.output_name
        output_path = Path(output_path)

        content = self.generate(form, mode, escape=escape)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)

        if isinstance(form, FormState):
            form.mark_clean()

        logger.info(f"Exported LaTeX document: {output_path}")
        return output_path

    def generate_preamble(self) -> str:
        """Generate the document class and package imports."""
        settings = self.settings
        preamble_parts = []

        if settings.documentclass_options:
            options_str = ",".join(settings.documentclass_options)
            preamble_parts.append(
                f"\\documentclass[{options_str}]{{{settings.documentclass}}}"
            )
        else:
            preamble_parts.append(f"\\documentclass{{{settings.documentclass}}}")

        for package in settings.packages:
            if isinstance(package, str):
                preamble_parts.append(f"\\usepackage{{{package}}}")
            elif isinstance(package, dict):
                pkg_name = package.get("name", "")
                options = package.get("options", [])
                if options:
                    options_str = ", ".join(options)
                    preamble_parts.append(f"\\usepackage[{options_str}]{{{pkg_name}}}")
                else:
                    preamble_parts.append(f"\\usepackage{{{pkg_name}}}")

        return "\n".join(preamble_parts)

    def _collect_values(self, form: FormLike) -> dict[SectionKey, str]:
        if isinstance(form, FormState):
            return form.values()
        values = {key: "" for key in SectionKey}
        for key, text in form.items():
            values[SectionKey.parse(key)] = text or ""
        return values

    def _generate_front_matter(self, values: Mapping[SectionKey, str]) -> str:
        settings = self.settings
        title = values[SectionKey.TITLE] or settings.title_placeholder
        content_parts = [
            f"\\title{{{title}}}",
            f"\\author{{{settings.author}}}",
            f"\\date{{{settings.date}}}",
            "",
            "\\begin{document}",
            "",
            "\\maketitle",
            "",
            "\\begin{abstract}",
            values[SectionKey.ABSTRACT],
            "\\end{abstract}",
            "",
            f"\\section{{Introduction}}\n{values[SectionKey.INTRODUCTION]}",
            "",
            f"\\section{{Related Work}}\n{values[SectionKey.RELATED_WORK]}",
        ]
        return "\n".join(content_parts)

    def _generate_experiment_sections(
        self,
        values: Mapping[SectionKey, str],
        mode: ModeLike,
    ) -> list[str]:
        structure_mode = StructureMode.lookup(mode)

        # Grouped layouts get one section per base type, filled in layout order.
        if structure_mode in (StructureMode.GROUPED, StructureMode.MERGE_DISCUSSION):
            layout = resolve_layout(structure_mode)
            sections = []
            for base_type, heading in CONSOLIDATED_SECTIONS:
                texts = [values[key] for key in layout if key.base_type is base_type]
                sections.append(f"\\section{{{heading}}}\n" + "\n".join(texts))
            return sections

        sections = []
        for heading, keys in EXPERIMENT_SECTIONS:
            subsections = [
                f"\\subsection{{{subheading}}}\n{values[key]}"
                for subheading, key in zip(EXPERIMENT_SUBSECTIONS, keys)
            ]
            sections.append(f"\\section{{{heading}}}\n" + "\n\n".join(subsections))
        return sections


def generate(
    form: FormLike,
    mode: Optional[ModeLike] = None,
    *,
    escape: bool = False,
) -> str:
    """Generate a LaTeX document with the built-in document settings."""
    return DocumentGenerator(settings=DocumentSettings()).generate(
        form, mode, escape=escape
    )


__all__ = [
    "DocumentGenerator",
    "escape_latex",
    "generate",
]
