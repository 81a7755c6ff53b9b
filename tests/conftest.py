"""Pytest configuration and shared fixtures for the ofmark test suite.

This module provides shared fixtures and test configuration used across the
unit and integration tests.
"""

from pathlib import Path
from typing import Generator

import pytest

from ofmark.options import ObsidianOptions
from ofmark.transforms import DocumentContext, Pipeline, stage_registry


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - full pipeline tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def context() -> DocumentContext:
    """Provide a fresh document context for a note at ``notes/today``."""
    return DocumentContext(slug="notes/today", all_slugs={"index", "notes/today", "notes/other"})


@pytest.fixture
def options() -> ObsidianOptions:
    """Provide default options."""
    return ObsidianOptions()


@pytest.fixture
def pipeline() -> Pipeline:
    """Provide a pipeline with default options and a small set of known slugs."""
    return Pipeline(all_slugs={"index", "notes/today", "notes/other", "Some-Note"})


@pytest.fixture
def clean_registry() -> Generator:
    """Provide the global stage registry and restore the built-ins afterwards."""
    stage_registry.clear()
    try:
        yield stage_registry
    finally:
        stage_registry.clear()


@pytest.fixture
def note_dir(tmp_path: Path) -> Path:
    """Provide a temporary vault directory with one note."""
    note = tmp_path / "notes" / "today.md"
    note.parent.mkdir(parents=True)
    note.write_text("# Today\n\nSee [[notes/other]] and #todo\n", encoding="utf-8")
    return tmp_path
