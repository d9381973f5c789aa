"""Tests for theme JSON loading and export."""

import json

import pytest

from theme_color_engine.errors import InvalidThemeError
from theme_color_engine.export.json_export import build_theme_metadata, export_theme_json
from theme_color_engine.palette.loader import load_theme_from_json
from theme_color_engine.palette.locks import get_default_lock_state, get_legacy_lock_state, merge_lock_state
from theme_color_engine.palette.slots import colors_to_json


def test_export_shape(theme, unlocked) -> None:
    locks = merge_lock_state(unlocked, {"accent": True})
    data = build_theme_metadata(theme, locks, name="Night", source_file="night.png")

    assert data["name"] == "Night"
    assert data["isLight"] is False
    assert len(data["colors"]) == 22
    assert data["colors"]["brightBlack"] == theme["bright_black"]
    assert len(data["colorLocks"]) == 12
    assert data["colorLocks"]["accent"] is True
    assert data["colorLocks"]["brightRed"] is False
    assert data["_source"] == "night.png"


def test_round_trip_through_file(theme, tmp_path) -> None:
    locks = merge_lock_state(get_default_lock_state(), {"cursor": True})
    edited = {**theme, "cursor": "#ff00ff"}
    path = tmp_path / "theme.json"

    export_theme_json(edited, locks, str(path), name="Night")
    colors, loaded_locks, is_light = load_theme_from_json(str(path))

    assert colors == edited
    assert loaded_locks == locks
    assert is_light is False


def test_theme_without_locks_loads_fully_locked(theme, theme_file_factory) -> None:
    stored = {**colors_to_json(theme), "accent": "#ff0000"}
    colors, locks, _ = load_theme_from_json(theme_file_factory({"colors": stored}))

    assert locks == get_legacy_lock_state()
    assert colors["accent"] == "#ff0000"


def test_flat_base_colors_fill_in_derived(base_colors, theme, theme_file_factory) -> None:
    colors, locks, _ = load_theme_from_json(theme_file_factory(base_colors))

    # No stored values for locked slots, so they are derived
    assert colors == theme
    assert all(locks.values())


def test_rgb_and_hsl_values_normalized(base_colors, theme_file_factory) -> None:
    data = {**base_colors, "red": "rgb(255, 0, 0)", "green": "hsl(120, 100%, 50%)"}
    colors, _, _ = load_theme_from_json(theme_file_factory({"colors": data, "colorLocks": {}}))
    assert colors["red"] == "#ff0000"
    assert colors["green"] == "#00ff00"


def test_is_light_metadata_wins(base_colors, theme_file_factory) -> None:
    _, _, is_light = load_theme_from_json(theme_file_factory({"colors": base_colors, "isLight": True}))
    assert is_light is True


def test_invalid_colors_rejected(base_colors, theme_file_factory) -> None:
    data = {**base_colors, "red": "reddish"}
    del data["blue"]
    with pytest.raises(InvalidThemeError) as excinfo:
        load_theme_from_json(theme_file_factory({"colors": data}))

    keys = {key for key, _, _ in excinfo.value.problems}
    assert keys == {"red", "blue"}


def test_non_object_rejected(theme_file_factory) -> None:
    with pytest.raises(InvalidThemeError):
        load_theme_from_json(theme_file_factory(["#ffffff"]))


def test_exported_file_is_plain_json(theme, unlocked, tmp_path) -> None:
    path = tmp_path / "out.json"
    export_theme_json(theme, unlocked, str(path), is_light=False)
    data = json.loads(path.read_text())
    assert set(data) >= {"isLight", "colors", "colorLocks"}


def test_malformed_json_rejected(tmp_path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(InvalidThemeError, match="invalid JSON"):
        load_theme_from_json(str(path))


def test_non_object_locks_rejected(theme, theme_file_factory) -> None:
    path = theme_file_factory({"colors": colors_to_json(theme), "colorLocks": ["accent"]})
    with pytest.raises(InvalidThemeError) as excinfo:
        load_theme_from_json(path)
    assert excinfo.value.problems == [("colorLocks", ["accent"], "Must be an object")]
