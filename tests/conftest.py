"""Pytest configuration and shared fixtures for drawer organizer tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from organizers.application.editor import LayoutEditor
from organizers.domain.value_objects import DrawerDimensions

FIXTURES_PATH = Path(__file__).parent / "fixtures"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def dimensions() -> DrawerDimensions:
    """The 30 x 20 x 3 inch drawer used throughout the examples."""
    return DrawerDimensions(width=30, depth=20, height=3)


@pytest.fixture
def editor(dimensions: DrawerDimensions) -> LayoutEditor:
    """A fresh editing session on the standard drawer."""
    return LayoutEditor(dimensions)


@pytest.fixture
def split_editor(editor: LayoutEditor) -> LayoutEditor:
    """A session where the drawer has been split into two rows."""
    editor.select("initial")
    editor.add_row()
    return editor


@pytest.fixture
def designs_path() -> Path:
    return FIXTURES_PATH / "designs"


@pytest.fixture
def scripts_path() -> Path:
    return FIXTURES_PATH / "scripts"
