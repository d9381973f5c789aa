"""Tests for the bulk color paste validator."""

import json

import pytest

from theme_color_engine.errors import InvalidColorError
from theme_color_engine.palette.validator import (
    ValidationResult,
    apply_pasted_colors,
    validate_color_json,
)


class TestValidateColorJson:
    def test_empty_input(self) -> None:
        result = validate_color_json("   ")
        assert result.status == "empty"
        assert not result.is_valid

    def test_invalid_json(self) -> None:
        result = validate_color_json("{not json")
        assert result.status == "error"
        assert result.message == "Invalid JSON syntax"

    def test_non_object(self) -> None:
        assert validate_color_json("[1, 2]").message == "Expected a JSON object"

    def test_no_color_keys(self) -> None:
        result = validate_color_json(json.dumps({"name": "x"}))
        assert result.message == "No color keys found"
        assert not result.is_valid

    def test_all_valid_in_every_format(self) -> None:
        result = validate_color_json(
            json.dumps({"red": "#F00", "brightBlue": "rgb(0, 0, 255)", "accent": "hsl(120, 100%, 50%)"})
        )
        assert result.status == "valid"
        assert result.message == "3 colors found"
        assert result.valid_colors == {"red": "#ff0000", "bright_blue": "#0000ff", "accent": "#00ff00"}

    def test_single_color_message(self) -> None:
        assert validate_color_json('{"red": "#ff0000"}').message == "1 color found"

    def test_metadata_object_with_colors(self) -> None:
        result = validate_color_json(json.dumps({"name": "Theme", "colors": {"cursor": "#abcdef"}}))
        assert result.valid_colors == {"cursor": "#abcdef"}

    def test_invalid_fields_are_reported_not_dropped(self) -> None:
        result = validate_color_json(json.dumps({"red": "#ff0000", "blue": "bluish", "green": 12}))
        assert result.status == "warning"
        assert result.is_valid
        assert result.message == "1 valid, 2 invalid"
        assert {(c.key, c.reason) for c in result.invalid_colors} == {
            ("blue", "Invalid color (use #RGB, #RRGGBB, rgb() or hsl())"),
            ("green", "Must be a string"),
        }

    def test_all_invalid(self) -> None:
        result = validate_color_json('{"red": "nope", "blue": "nah"}')
        assert result.status == "error"
        assert result.message == "All 2 colors are invalid"
        assert not result.is_valid

    def test_unknown_keys_ignored(self) -> None:
        result = validate_color_json('{"red": "#ff0000", "orange": "#ff8800"}')
        assert result.valid_colors == {"red": "#ff0000"}
        assert result.invalid_colors == []


class TestApplyPastedColors:
    def test_pasted_derived_colors_are_locked(self, theme, unlocked) -> None:
        result = validate_color_json('{"accent": "#ff0000", "blue": "#0000ff"}')
        colors, locks = apply_pasted_colors(theme, unlocked, result)

        assert locks["accent"] is True
        assert "blue" not in locks
        assert colors["accent"] == "#ff0000"
        assert colors["blue"] == "#0000ff"
        assert colors["bright_blue"] != theme["bright_blue"]

    def test_base_only_paste_rederives(self, theme, unlocked) -> None:
        result = validate_color_json('{"foreground": "#ffffff"}')
        colors, locks = apply_pasted_colors(theme, unlocked, result)
        assert colors["cursor"] == "#ffffff"
        assert locks == unlocked

    def test_rejects_paste_with_invalid_field(self, theme, unlocked) -> None:
        result = validate_color_json('{"red": "#ff0000", "blue": "bluish"}')
        with pytest.raises(InvalidColorError) as excinfo:
            apply_pasted_colors(theme, unlocked, result)
        assert excinfo.value.key == "blue"

    def test_rejects_empty_result(self, theme, unlocked) -> None:
        with pytest.raises(InvalidColorError):
            apply_pasted_colors(theme, unlocked, ValidationResult(is_valid=False))
