import json

from ..color import to_hex
from ..errors import InvalidThemeError
from .derivation import derive_all_colors, is_light_theme
from .locks import resolve_lock_state
from .slots import BASE_COLOR_KEYS, colors_from_json


def load_theme_from_json(json_path):
    """Load a theme's colors and lock state from JSON.

    Accepts theme metadata (`colors` plus optional `colorLocks`) or a flat
    color object. A file without `colorLocks` predates lock tracking, so all
    its derived colors come back locked.

    Args:
        json_path: Path to theme JSON file

    Returns:
        tuple: (colors dict with all 22 slots, lock state dict, is_light bool)

    Raises:
        InvalidThemeError: If the file is not JSON, a color does not parse or a
            base color is missing
    """
    with open(json_path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidThemeError(f"{json_path}: invalid JSON ({e.msg} at line {e.lineno})") from e

    if not isinstance(data, dict):
        raise InvalidThemeError(f"{json_path}: expected a JSON object")

    raw_colors = data["colors"] if isinstance(data.get("colors"), dict) else data

    colors = {}
    problems = []
    for key, value in colors_from_json(raw_colors).items():
        converted = to_hex(value) if isinstance(value, str) else None
        if converted is None:
            problems.append((key, value, "Invalid color"))
        else:
            colors[key] = converted

    for key in BASE_COLOR_KEYS:
        if key not in colors and not any(p[0] == key for p in problems):
            problems.append((key, None, "Missing base color"))

    if problems:
        raise InvalidThemeError(f"{json_path}: invalid theme colors", problems)

    locks = resolve_lock_state(data.get("colorLocks"), is_existing_theme=True)

    # Detect dark/light theme from metadata, else from background vs foreground
    if isinstance(data.get("isLight"), bool):
        is_light = data["isLight"]
    else:
        is_light = is_light_theme(colors["background"], colors["foreground"])

    return derive_all_colors(colors, locks, None, is_light), locks, is_light
