"""
Color derivation engine for simplified theme creation.

Each of the 12 derived colors has exactly one rule computing it from a subset
of the 10 base colors. `derive_all_colors` recomputes every unlocked derived
color and carries locked ones through untouched.
"""

from collections import namedtuple

from ..color import adjust_color, blend_colors, color_from_hex, normalize_hex, to_hex
from ..errors import InvalidColorError
from ..logging import get_logger
from .lightness import LIGHT_BG_MIN_LIGHTNESS
from .locks import merge_lock_state
from .slots import ALL_COLOR_KEYS, BASE_COLOR_KEYS, DERIVED_COLOR_KEYS, is_derived_color, to_slot_key

logger = get_logger(__name__)

# Derivation amounts
BRIGHT_LIGHTNESS_DELTA_DARK = 18  # HSL lightness points added in dark themes
BRIGHT_LIGHTNESS_DELTA_LIGHT = 8  # Smaller lift so bright text stays readable on light backgrounds
SELECTION_BLEND_FACTOR = 0.20  # Background shifted 20% toward foreground
BORDER_BLEND_FACTOR = 0.12  # Background shifted 12% toward foreground
BRIGHT_BLACK_BLEND_FACTOR = 0.35  # Far enough from the canvas to stay visible

DerivationRule = namedtuple("DerivationRule", ["dependencies", "derive", "description"])


def _normalize(value):
    return normalize_hex(value) or value


def is_light_theme(background, foreground):
    """Check if a theme is a light theme (background brighter than foreground)"""
    bg = color_from_hex(background)
    fg = color_from_hex(foreground)
    if bg is None or fg is None:
        return False
    return bg.luminance > fg.luminance


def derive_bright_color(base_hex, is_light=False):
    """Derive a bright color from its base by raising HSL lightness.

    Dark themes add BRIGHT_LIGHTNESS_DELTA_DARK. Light themes add the smaller
    BRIGHT_LIGHTNESS_DELTA_LIGHT and stop at LIGHT_BG_MIN_LIGHTNESS, so a bright
    color never disappears into a light background. Bright is never darker
    than its base, so in a light theme a base already at or above the floor
    (typically `white`, which sits near the canvas) keeps its own value as
    its bright variant.
    """
    color = color_from_hex(base_hex)
    if color is None:
        return base_hex

    lightness = color.hsl[2]
    if is_light:
        target = max(lightness, min(lightness + BRIGHT_LIGHTNESS_DELTA_LIGHT, LIGHT_BG_MIN_LIGHTNESS))
    else:
        target = min(lightness + BRIGHT_LIGHTNESS_DELTA_DARK, 100)

    if target == lightness:
        return color.hex
    return adjust_color(color, lightness_delta=target - lightness).hex


def derive_blend(background, foreground, factor):
    """Shift the background toward the foreground by `factor`."""
    bg = color_from_hex(background)
    fg = color_from_hex(foreground)
    if bg is None or fg is None:
        return background
    return blend_colors(bg, fg, factor).hex


def _copy_rule(base_key):
    return DerivationRule(
        dependencies=(base_key,),
        derive=lambda colors, is_light: _normalize(colors[base_key]),
        description=f"Same as {base_key}",
    )


def _bright_rule(base_key):
    return DerivationRule(
        dependencies=(base_key,),
        derive=lambda colors, is_light: derive_bright_color(colors[base_key], is_light),
        description=(
            f"{base_key} + {BRIGHT_LIGHTNESS_DELTA_DARK}% lightness "
            f"(+{BRIGHT_LIGHTNESS_DELTA_LIGHT}% in light themes)"
        ),
    )


def _blend_rule(factor):
    return DerivationRule(
        dependencies=("background", "foreground"),
        derive=lambda colors, is_light: derive_blend(colors["background"], colors["foreground"], factor),
        description=f"Background shifted {int(round(factor * 100))}% toward foreground",
    )


DERIVATION_RULES = {
    "bright_black": _blend_rule(BRIGHT_BLACK_BLEND_FACTOR),
    "bright_red": _bright_rule("red"),
    "bright_green": _bright_rule("green"),
    "bright_yellow": _bright_rule("yellow"),
    "bright_blue": _bright_rule("blue"),
    "bright_magenta": _bright_rule("magenta"),
    "bright_cyan": _bright_rule("cyan"),
    "bright_white": _bright_rule("white"),
    "cursor": _copy_rule("foreground"),
    "selection": _blend_rule(SELECTION_BLEND_FACTOR),
    "border": _blend_rule(BORDER_BLEND_FACTOR),
    "accent": _copy_rule("blue"),
}


def get_derivation_description(key):
    """Get a human-readable description of how a derived color is calculated"""
    return DERIVATION_RULES[to_slot_key(key)].description


def get_slot_dependencies(key):
    return DERIVATION_RULES[to_slot_key(key)].dependencies


def get_dependent_slots(base_key):
    """Derived slots whose rule reads `base_key`."""
    base_key = to_slot_key(base_key)
    return [slot for slot, rule in DERIVATION_RULES.items() if base_key in rule.dependencies]


def derive_all_colors(colors, locks, previous_colors=None, is_light=None):
    """Calculate all derived colors from the base colors.

    Args:
        colors: Theme colors containing at least the 10 base colors
        locks: Which derived colors are locked (won't be recalculated)
        previous_colors: Prior full color set, consulted for locked values
            missing from `colors` when merging partial updates
        is_light: Theme polarity; inferred from background/foreground when None

    Returns:
        dict: New dict with all 22 colors

    Raises:
        KeyError: If a base color is missing from `colors`
    """
    result = {key: _normalize(colors[key]) for key in BASE_COLOR_KEYS}
    if is_light is None:
        is_light = is_light_theme(result["background"], result["foreground"])
    previous_colors = previous_colors or {}

    for key in DERIVED_COLOR_KEYS:
        if locks.get(key):
            locked_value = colors.get(key) or previous_colors.get(key)
            if locked_value:
                result[key] = _normalize(locked_value)
                continue
            logger.debug("Locked color %s has no value, deriving it", key)
        result[key] = DERIVATION_RULES[key].derive(result, is_light)

    return result


def apply_color_edit(colors, locks, key, value, is_light=None):
    """Apply a direct edit to one slot.

    Editing a base color re-derives its unlocked dependents. Editing a derived
    color stores the value and locks that slot.

    Returns:
        tuple: (new colors dict, new lock state dict)

    Raises:
        KeyError: If `key` is not a theme color slot
        InvalidColorError: If `value` is not a parseable color
    """
    slot = to_slot_key(key)
    if slot not in ALL_COLOR_KEYS:
        raise KeyError(f"{key!r} is not a theme color")

    converted = to_hex(value)
    if converted is None:
        raise InvalidColorError(slot, value)

    updated = dict(colors)
    updated[slot] = converted

    if is_derived_color(slot):
        return updated, merge_lock_state(locks, {slot: True})
    return derive_all_colors(updated, locks, colors, is_light), dict(locks)


def reset_to_auto(colors, locks, key, is_light=None):
    """Unlock a derived color and recompute it from the current base colors."""
    slot = to_slot_key(key)
    if not is_derived_color(slot):
        raise KeyError(f"{key!r} is not a derived color")

    new_locks = merge_lock_state(locks, {slot: False})
    return derive_all_colors(colors, new_locks, colors, is_light), new_locks
