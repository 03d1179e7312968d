"""Example walking through a paperguide editing session."""

from pathlib import Path
from tempfile import TemporaryDirectory

import yaml

from paperguide import DocumentGenerator, FormState, PaperConfig, guidance_for


def main():
    """Demonstrate paperguide usage."""
    with TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)
        print(f"Running paperguide example in: {temp_path}")

        config_dir = temp_path / "config"
        config_dir.mkdir()
        setup_example_settings(config_dir)

        form = fill_sample_form()

        generate_sample_document(config_dir, form, temp_path / "paper.tex")

        print("\nPaperguide example completed successfully!")


def setup_example_settings(config_dir: Path):
    """Write a settings file with a custom author and an extra package."""
    print("Setting up example settings...")

    settings = {
        "author": "Example Author",
        "packages": [
            {"name": "inputenc", "options": ["utf8"]},
            "amsmath",
            "graphicx",
            "booktabs",
            {"name": "hyperref", "options": ["colorlinks=true", "allcolors=blue"]},
        ],
    }

    with open(config_dir / "paperguide.yaml", "w") as f:
        yaml.dump(settings, f)

    print("✓ Settings file created")


def fill_sample_form() -> FormState:
    """Fill a form the way a user would, one section at a time."""
    print("Filling the form...")

    form = FormState(mode="paired")
    form.set_value("title", "A Transformer-Based Approach to Melody Generation")

    # Start from the suggested boilerplate, then refine it
    form.insert_template("abstract")
    form.set_value(
        "abstract",
        form.get_value("abstract").replace("[research topic]", "melody generation"),
    )

    print(f"  Introduction guide: {guidance_for('introduction').description}")
    form.set_value("introduction", "Symbolic music models struggle with long phrases.")
    form.set_value("relatedWork", "Prior work used recurrent networks.")
    form.set_value("method1", "We train a transformer on folk tunes.")
    form.set_value("result1", "The model reaches a lower perplexity.")
    form.set_value("discussion1", "Attention captures repeated motifs.")
    form.set_value("method2", "We run a listening study.")
    form.set_value("result2", "Listeners prefer our melodies.")
    form.set_value("discussion2", "Preference correlates with motif reuse.")
    form.set_value("result3", "Only shown in the merged layout.")
    form.insert_template("conclusion")

    # Switching layouts never discards text
    form.set_mode("mergeDiscussion")
    print(f"  Merged layout shows: {[key.value for key in form.visible_keys()]}")
    form.set_mode("grouped")

    print(f"✓ {form!r}")
    return form


def generate_sample_document(config_dir: Path, form: FormState, output_path: Path):
    """Export the form and preview the result."""
    print("Generating sample document...")

    doc_gen = DocumentGenerator(PaperConfig(config_dir=config_dir))
    result_path = doc_gen.export(form, output_path)

    print(f"✓ Generated LaTeX document: {result_path}")

    with open(result_path, "r", encoding="utf-8") as f:
        lines = f.readlines()

    print("\nGenerated document preview (first 30 lines):")
    print("-" * 50)
    for i, line in enumerate(lines[:30]):
        print(f"{i+1:2d}: {line.rstrip()}")
    if len(lines) > 30:
        print(f"... ({len(lines) - 30} more lines)")
    print("-" * 50)


if __name__ == "__main__":
    main()
