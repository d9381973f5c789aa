"""Shared test fixtures for the theme color engine test suite.

Provides a Tokyo Night style base palette, its fully derived theme, and a
factory for writing theme JSON files.
"""

import json

import pytest

from theme_color_engine.palette.derivation import derive_all_colors
from theme_color_engine.palette.locks import get_default_lock_state


@pytest.fixture
def base_colors():
    """The 10 base colors of a dark theme."""
    return {
        "background": "#1a1b26",
        "foreground": "#c0caf5",
        "black": "#15161e",
        "red": "#f7768e",
        "green": "#9ece6a",
        "yellow": "#e0af68",
        "blue": "#7aa2f7",
        "magenta": "#bb9af7",
        "cyan": "#7dcfff",
        "white": "#a9b1d6",
    }


@pytest.fixture
def unlocked():
    return get_default_lock_state()


@pytest.fixture
def theme(base_colors, unlocked):
    """Full 22-slot theme derived from base_colors with nothing locked."""
    return derive_all_colors(base_colors, unlocked)


@pytest.fixture
def theme_file_factory(tmp_path):
    """Write a JSON document to a temp file and return its path."""

    def _write(data, name="theme.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return str(path)

    return _write
