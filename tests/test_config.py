"""Tests for paperguide configuration management."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

import paperguide.config
from paperguide.config import DocumentSettings, PaperConfig
from paperguide.errors import ConfigError


def test_paper_config_initialization(temp_config_dir: Path):
    """Test PaperConfig initialization."""
    config = PaperConfig(config_dir=temp_config_dir)

    assert config.config_dir == temp_config_dir
    assert config.settings_file == "paperguide.yaml"
    assert config.settings_path == temp_config_dir / "paperguide.yaml"


def test_paper_config_default_directory():
    """Test default configuration directory."""
    config = PaperConfig()
    assert config.config_dir == Path.home() / ".paperguide"


def test_default_directory_without_file_uses_defaults(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
):
    """Test that a missing file in the default directory is not an error."""
    monkeypatch.setattr(paperguide.config, "DEFAULT_CONFIG_DIR", tmp_path)
    config = PaperConfig()

    assert config.document_settings == DocumentSettings()


def test_load_settings_success(setup_config_files: Path):
    """Test loading settings from YAML."""
    config = PaperConfig(config_dir=setup_config_files)
    settings = config.document_settings

    assert settings.documentclass_options == ("11pt", "a4paper")
    assert settings.author == "Ada Lovelace"
    assert settings.date == "January 2024"
    assert settings.title_placeholder == "Untitled"
    assert settings.packages[0] == "amsmath"
    # Keys absent from the file keep their defaults
    assert settings.escape is False
    assert settings.output_name == "paper.tex"


def test_settings_are_cached(setup_config_files: Path):
    """Test that the settings file is read once."""
    config = PaperConfig(config_dir=setup_config_files)
    assert config.document_settings is config.document_settings


def test_load_settings_not_found(temp_config_dir: Path):
    """Test handling of a missing explicit settings file."""
    config = PaperConfig(config_dir=temp_config_dir)

    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        _ = config.document_settings


def test_load_invalid_yaml(temp_config_dir: Path):
    """Test handling of invalid YAML files."""
    with open(temp_config_dir / "paperguide.yaml", "w") as f:
        f.write("invalid: yaml: content: [")

    config = PaperConfig(config_dir=temp_config_dir)

    with pytest.raises(ConfigError, match="Error loading configuration file"):
        _ = config.document_settings


def test_load_empty_settings_file(temp_config_dir: Path):
    """Test that an empty file gives the default settings."""
    (temp_config_dir / "paperguide.yaml").write_text("")

    config = PaperConfig(config_dir=temp_config_dir)
    assert config.document_settings == DocumentSettings()


def test_custom_settings_file(temp_config_dir: Path):
    """Test using a non-default settings file name."""
    with open(temp_config_dir / "thesis.yaml", "w") as f:
        yaml.dump({"documentclass": "report"}, f)

    config = PaperConfig(config_dir=temp_config_dir, settings_file="thesis.yaml")
    assert config.document_settings.documentclass == "report"


def test_unknown_settings_are_ignored(caplog: pytest.LogCaptureFixture):
    """Test that unknown keys are ignored with a warning."""
    settings = DocumentSettings.from_dict({"author": "A", "colour": "blue"})

    assert settings.author == "A"
    assert "Ignoring unknown setting: colour" in caplog.text


def test_settings_list_validation():
    """Test that list-valued settings must be lists."""
    with pytest.raises(ConfigError, match="packages must be a list"):
        DocumentSettings.from_dict({"packages": "amsmath"})


def test_settings_must_be_mapping():
    """Test that settings must be a mapping."""
    with pytest.raises(ConfigError, match="must be a mapping"):
        DocumentSettings.from_dict(["article"])  # type: ignore[arg-type]


def test_package_options_must_be_list():
    """Test that scalar package options are rejected instead of split."""
    with pytest.raises(ConfigError, match="Options of package 'geometry'"):
        DocumentSettings.from_dict(
            {"packages": [{"name": "geometry", "options": "margin=1in"}]}
        )


def test_package_entry_shapes():
    """Test package entry validation."""
    with pytest.raises(ConfigError, match="Package must be a name or a mapping"):
        DocumentSettings.from_dict({"packages": [42]})

    with pytest.raises(ConfigError, match="Package name must be a non-empty string"):
        DocumentSettings.from_dict({"packages": [{"options": ["utf8"]}]})

    with pytest.raises(ConfigError, match="must be a list of strings"):
        DocumentSettings.from_dict({"packages": [{"name": "inputenc", "options": [8]}]})

    settings = DocumentSettings.from_dict(
        {"packages": ["amsmath", {"name": "geometry"}, {"name": "x", "options": []}]}
    )
    assert len(settings.packages) == 3


def test_documentclass_options_must_be_strings():
    """Test that non-string document class options are rejected."""
    with pytest.raises(ConfigError, match="documentclass_options entries must be strings"):
        DocumentSettings.from_dict({"documentclass_options": [12]})


def test_invalid_settings_file_entries(temp_config_dir: Path):
    """Test that malformed entries surface when settings are loaded."""
    with open(temp_config_dir / "paperguide.yaml", "w") as f:
        yaml.dump({"documentclass_options": [12]}, f)

    config = PaperConfig(config_dir=temp_config_dir)

    with pytest.raises(ConfigError):
        _ = config.document_settings
