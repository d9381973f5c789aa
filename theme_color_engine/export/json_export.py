import json

from ..palette.slots import DERIVED_COLOR_KEYS, colors_to_json, to_camel_key


def build_theme_metadata(colors, locks, name=None, is_light=False, source_file=None):
    """Build the persisted theme metadata dict.

    Args:
        colors: Theme colors with all 22 slots
        locks: Lock state for the 12 derived colors
        name: Optional theme name
        is_light: Whether this is a light theme
        source_file: Source image/theme filename for metadata

    Returns:
        dict: camelCase `colors` and `colorLocks` plus metadata keys
    """
    data = {}
    if name:
        data["name"] = name
    data["isLight"] = bool(is_light)
    data["colors"] = colors_to_json(colors)
    data["colorLocks"] = {to_camel_key(key): bool(locks.get(key, False)) for key in DERIVED_COLOR_KEYS}

    data["_note"] = (
        "22 terminal colors: 10 base colors plus 12 derived colors; "
        "colorLocks marks derived colors that were edited by hand"
    )

    if source_file:
        data["_source"] = source_file

    return data


def export_theme_json(colors, locks, filepath, name=None, is_light=False, source_file=None):
    """Export a theme as JSON with all 22 colors, lock state and metadata."""
    data = build_theme_metadata(colors, locks, name=name, is_light=is_light, source_file=source_file)

    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)
