"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tailwind_ast.parser import UtilityParser  # noqa: E402
from tailwind_ast.theme_engine import get_default_theme  # noqa: E402


@pytest.fixture
def theme():
    return get_default_theme()


@pytest.fixture
def parser(theme):
    return UtilityParser(theme)
