"""Fixtures for paperguide tests."""

from __future__ import annotations

from pathlib import Path
from tempfile import TemporaryDirectory
from typing import Any

import pytest
import yaml

from paperguide.form import FormState


@pytest.fixture
def temp_config_dir():
    """Create a temporary configuration directory."""
    with TemporaryDirectory() as temp_dir:
        config_dir = Path(temp_dir) / "config"
        config_dir.mkdir()
        yield config_dir


@pytest.fixture
def sample_settings() -> dict[str, Any]:
    """Sample document settings."""
    return {
        "documentclass": "article",
        "documentclass_options": ["11pt", "a4paper"],
        "packages": [
            "amsmath",
            {"name": "geometry", "options": ["margin=1in"]},
        ],
        "author": "Ada Lovelace",
        "date": "January 2024",
        "title_placeholder": "Untitled",
    }


@pytest.fixture
def setup_config_files(temp_config_dir: Path, sample_settings: dict[str, Any]):
    """Set up a settings file in the temporary directory."""
    with open(temp_config_dir / "paperguide.yaml", "w") as f:
        yaml.dump(sample_settings, f)

    return temp_config_dir


@pytest.fixture
def filled_form() -> FormState:
    """Form with a distinct marker text in every section."""
    return FormState.from_mapping(
        {
            "title": "Melody Generation",
            "abstract": "ABSTRACT-TEXT",
            "introduction": "INTRODUCTION-TEXT",
            "relatedWork": "RELATED-TEXT",
            "method1": "METHOD-1",
            "method2": "METHOD-2",
            "result1": "RESULT-1",
            "result2": "RESULT-2",
            "result3": "RESULT-3",
            "discussion1": "DISCUSSION-1",
            "discussion2": "DISCUSSION-2",
            "conclusion": "CONCLUSION-TEXT",
        }
    )
