"""Theme color slot names and classification.

A theme has 22 slots: 10 base colors the user authors and 12 derived colors
the engine computes from them. Python code uses snake_case slot names; the
persisted theme metadata uses camelCase, so both are accepted here.
"""

import re

BASE_COLOR_KEYS = (
    "background",
    "foreground",
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
)

DERIVED_COLOR_KEYS = (
    "bright_black",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
    "bright_white",
    "cursor",
    "selection",
    "border",
    "accent",
)

ALL_COLOR_KEYS = BASE_COLOR_KEYS + DERIVED_COLOR_KEYS

# Built-in base palette used for missing image roles and ANSI fallbacks
DEFAULT_BASE_COLORS = {
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

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_slot_key(name):
    """Map 'brightBlack' or 'bright_black' to 'bright_black'."""
    if not isinstance(name, str):
        return name
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def to_camel_key(key):
    """Map 'bright_black' to 'brightBlack'."""
    head, *rest = key.split("_")
    return head + "".join(part.title() for part in rest)


def is_base_color(key):
    return to_slot_key(key) in BASE_COLOR_KEYS


def is_derived_color(key):
    return to_slot_key(key) in DERIVED_COLOR_KEYS


def extract_base_colors(colors):
    """Extract only the base colors from a full theme color dict"""
    return {key: colors[key] for key in BASE_COLOR_KEYS}


def colors_to_json(colors):
    """Convert a slot dict to the camelCase shape stored in theme metadata."""
    return {to_camel_key(key): colors[key] for key in ALL_COLOR_KEYS if key in colors}


def colors_from_json(data):
    """Convert a camelCase (or snake_case) mapping to slot keys.

    Unknown keys are dropped; values are passed through untouched.
    """
    result = {}
    for name, value in data.items():
        key = to_slot_key(name)
        if key in ALL_COLOR_KEYS:
            result[key] = value
    return result
