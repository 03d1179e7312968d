"""Command-line interface for paperguide."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import PaperConfig
from .document import DocumentGenerator
from .errors import PaperguideError, SectionsFileError
from .form import FormState
from .layout import StructureMode, form_order, resolve_layout
from .sections import BaseType, SectionKey, base_type_of, guidance_for

console = Console()

MODE_CHOICES = [mode.value for mode in StructureMode]


def load_sections_file(path: Path) -> tuple[Optional[str], dict[str, str]]:
    """
    Read a sections file.

    Parameters
    ----------
    path : Path
        YAML file with an optional `mode` and a `sections` mapping.

    Returns
    -------
    tuple[str | None, dict[str, str]]
        The mode stored in the file (None if absent) and the section values.

    Raises
    ------
    SectionsFileError
        If the file is not valid YAML or does not have the expected shape.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise SectionsFileError("Invalid YAML in sections file.", path=path) from e

    if not isinstance(data, dict):
        raise SectionsFileError("Sections file must be a mapping.", path=path)

    mode = data.get("mode")
    if mode is not None and not isinstance(mode, str):
        raise SectionsFileError("mode must be a string.", path=path)

    sections = data.get("sections") or {}
    if not isinstance(sections, dict):
        raise SectionsFileError("sections must be a mapping.", path=path)

    values = {}
    for key, text in sections.items():
        if text is None:
            text = ""
        if not isinstance(text, str):
            raise SectionsFileError(f"Value of '{key}' must be text.", path=path)
        values[str(key)] = text
    return mode, values


def dump_sections_file(path: Path, form: FormState) -> None:
    mode = form.mode.value if isinstance(form.mode, StructureMode) else form.mode
    data: dict[str, Any] = {
        "mode": mode,
        "sections": {key.value: text for key, text in form.values().items()},
    }
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)


def init_command(args: argparse.Namespace) -> int:
    """Create a sections file to fill in."""
    sections_path = Path(args.sections_file)

    if sections_path.exists() and not args.force:
        console.print(
            f"Error: {escape(str(sections_path))} already exists", style="bright_red"
        )
        return 1

    mode = args.mode
    if mode is None:
        try:
            mode = PaperConfig(config_dir=args.config_dir).document_settings.default_mode
        except (PaperguideError, OSError) as e:
            console.print(f"Error loading settings: {escape(str(e))}", style="bright_red")
            return 1

    form = FormState(mode=mode)
    if args.with_templates:
        for key in SectionKey:
            form.insert_template(key)

    sections_path.parent.mkdir(parents=True, exist_ok=True)
    dump_sections_file(sections_path, form)

    shown_path = escape(str(sections_path))
    console.print(f"Created sections file: {shown_path}")
    console.print("\nNext steps:")
    console.print(f"1. Fill in the sections in {shown_path}")
    console.print(f"2. Generate the paper with: paperguide build {shown_path}")
    return 0


def build_command(args: argparse.Namespace) -> int:
    """Build paper.tex from a sections file."""
    sections_path = Path(args.sections_file)

    if not sections_path.exists():
        console.print(
            f"Error: Sections file {escape(str(sections_path))} not found",
            style="bright_red",
        )
        return 1

    try:
        doc_gen = DocumentGenerator(config=PaperConfig(config_dir=args.config_dir))
        file_mode, values = load_sections_file(sections_path)
        mode = args.mode or file_mode or doc_gen.settings.default_mode
        form = FormState.from_mapping(values, mode=mode)

        if isinstance(form.mode, str):
            console.print(
                f"Warning: unknown structure mode '{escape(form.mode)}'",
                style="yellow",
            )

        output_path = args.output
        if output_path is None:
            output_path = sections_path.parent / doc_gen.settings.output_name

        result_path = doc_gen.export(
            form,
            output_path,
            escape=True if args.escape else None,
        )
    except (PaperguideError, OSError) as e:
        console.print(f"Error building document: {escape(str(e))}", style="bright_red")
        return 1

    console.print(f"Generated LaTeX document: {escape(str(result_path))}")
    return 0


def guide_command(args: argparse.Namespace) -> int:
    """Show how to write each section."""
    if args.section is None:
        base_types = list(BaseType)
    else:
        base_type = base_type_of(args.section)
        if base_type is None:
            console.print(
                f"Error: unknown section '{escape(args.section)}'", style="bright_red"
            )
            return 1
        base_types = [base_type]

    table = Table(
        show_header=True,
        header_style="bold",
        title="WRITING GUIDE",
        show_lines=True,
    )
    table.add_column("SECTION", justify="left", no_wrap=True)
    table.add_column("HOW TO WRITE", justify="left")
    table.add_column("TEMPLATE", justify="left", style="italic")

    for base_type in base_types:
        guidance = guidance_for(base_type)
        table.add_row(
            base_type.value,
            escape(guidance.description),
            escape(guidance.template or "-"),
        )

    console.print(table)
    return 0


def layout_command(args: argparse.Namespace) -> int:
    """Show the sections shown for a structure mode."""
    mode = StructureMode(args.mode)
    experiment_keys = set(resolve_layout(mode))

    table = Table(
        show_header=True,
        header_style="bold",
        title=f"LAYOUT ({mode.label})",
    )
    table.add_column("#", justify="right")
    table.add_column("KEY", justify="left")
    table.add_column("LABEL", justify="left")

    for index, key in enumerate(form_order(mode), start=1):
        style = "cyan" if key in experiment_keys else None
        table.add_row(str(index), key.value, key.label, style=style)

    console.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paperguide",
        description="Guided paper structure builder with LaTeX export",
    )

    # Global options
    parser.add_argument(
        "--config-dir",
        type=Path,
        help="Configuration directory (default: ~/.paperguide)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    init_parser = subparsers.add_parser(
        "init",
        help="Create a sections file to fill in",
    )
    init_parser.add_argument(
        "sections_file",
        type=Path,
        help="Sections file to create",
    )
    init_parser.add_argument(
        "--mode",
        choices=MODE_CHOICES,
        help="Structure mode (default: the configured default_mode)",
    )
    init_parser.add_argument(
        "--with-templates",
        action="store_true",
        help="Pre-fill sections that have a template",
    )
    init_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing file",
    )
    init_parser.set_defaults(func=init_command)

    build_parser_ = subparsers.add_parser(
        "build",
        help="Build a LaTeX document from a sections file",
    )
    build_parser_.add_argument(
        "sections_file",
        type=Path,
        help="Sections file to build",
    )
    build_parser_.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Output LaTeX file path (default: paper.tex next to the sections file)",
    )
    build_parser_.add_argument(
        "--mode",
        help="Structure mode, overriding the one in the sections file",
    )
    build_parser_.add_argument(
        "--escape",
        action="store_true",
        help="Escape LaTeX special characters in section text",
    )
    build_parser_.set_defaults(func=build_command)

    guide_parser = subparsers.add_parser(
        "guide",
        help="Show writing guidance and templates",
    )
    guide_parser.add_argument(
        "section",
        nargs="?",
        help="Section or section type (default: all)",
    )
    guide_parser.set_defaults(func=guide_command)

    layout_parser = subparsers.add_parser(
        "layout",
        help="Show the section order of a structure mode",
    )
    layout_parser.add_argument(
        "mode",
        choices=MODE_CHOICES,
        help="Structure mode",
    )
    layout_parser.set_defaults(func=layout_command)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
