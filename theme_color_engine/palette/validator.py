"""
Validation for pasted theme color JSON.

Accepts a flat color object or a theme metadata object with a `colors`
property. Every value goes through `to_hex`, so hex, rgb() and hsl() text are
all accepted; anything else is reported per field rather than dropped.
"""

import json
from dataclasses import dataclass, field
from typing import Dict, List

from ..color import to_hex
from ..errors import InvalidColorError
from .derivation import derive_all_colors
from .locks import lock_keys
from .slots import ALL_COLOR_KEYS, to_slot_key


@dataclass(frozen=True)
class InvalidColor:
    key: str
    value: str
    reason: str


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    valid_colors: Dict[str, str] = field(default_factory=dict)
    invalid_colors: List[InvalidColor] = field(default_factory=list)
    message: str = ""
    status: str = "empty"  # empty | valid | warning | error


def _error(message):
    return ValidationResult(is_valid=False, message=message, status="error")


def validate_color_json(text):
    """Validate a JSON string containing theme colors.

    Returns:
        ValidationResult: `is_valid` is True when at least one color parsed;
        status is 'warning' when some fields were rejected alongside it
    """
    trimmed = (text or "").strip()
    if not trimmed:
        return ValidationResult(is_valid=False)

    try:
        parsed = json.loads(trimmed)
    except json.JSONDecodeError:
        return _error("Invalid JSON syntax")

    if not isinstance(parsed, dict):
        return _error("Expected a JSON object")

    source = parsed["colors"] if isinstance(parsed.get("colors"), dict) else parsed

    valid_colors = {}
    invalid_colors = []
    for name, value in source.items():
        key = to_slot_key(name)
        if key not in ALL_COLOR_KEYS:
            continue
        if not isinstance(value, str):
            invalid_colors.append(InvalidColor(name, str(value), "Must be a string"))
            continue
        converted = to_hex(value)
        if converted is None:
            invalid_colors.append(
                InvalidColor(name, value, "Invalid color (use #RGB, #RRGGBB, rgb() or hsl())")
            )
            continue
        valid_colors[key] = converted

    valid_count = len(valid_colors)
    invalid_count = len(invalid_colors)

    if valid_count == 0 and invalid_count == 0:
        return _error("No color keys found")

    if valid_count == 0:
        return ValidationResult(
            is_valid=False,
            invalid_colors=invalid_colors,
            message=f"All {invalid_count} colors are invalid",
            status="error",
        )

    if invalid_count:
        return ValidationResult(
            is_valid=True,
            valid_colors=valid_colors,
            invalid_colors=invalid_colors,
            message=f"{valid_count} valid, {invalid_count} invalid",
            status="warning",
        )

    return ValidationResult(
        is_valid=True,
        valid_colors=valid_colors,
        message=f"{valid_count} color{'' if valid_count == 1 else 's'} found",
        status="valid",
    )


def apply_pasted_colors(colors, locks, result, is_light=None):
    """Apply a validated paste, locking every pasted derived color.

    The paste is refused as a whole if any field failed to parse.

    Returns:
        tuple: (new colors dict, new lock state dict)

    Raises:
        InvalidColorError: For the first rejected field, or when nothing valid was pasted
    """
    if result.invalid_colors:
        bad = result.invalid_colors[0]
        raise InvalidColorError(bad.key, bad.value, bad.reason)
    if not result.is_valid:
        raise InvalidColorError("paste", "", result.message or "Nothing to apply")

    new_locks = lock_keys(locks, result.valid_colors)
    merged = {**colors, **result.valid_colors}
    return derive_all_colors(merged, new_locks, colors, is_light), new_locks
