"""Background lightness enforcement.

Image palettes are extracted relative to the photo's own contrast range, so a
"dark" background pulled from a bright photo can still be washed out. These
absolute HSL lightness bounds keep dark themes dark and light themes light.
"""

from ..color import color_from_hex, set_color_lightness
from ..logging import get_logger

logger = get_logger(__name__)

# Target lightness ranges for themes
DARK_BG_MAX_LIGHTNESS = 18
LIGHT_BG_MIN_LIGHTNESS = 85


def enforce_background_lightness(hex_color, is_light):
    """Clamp a background's lightness to the declared polarity.

    Dark themes get lightness lowered to DARK_BG_MAX_LIGHTNESS, light themes
    get it raised to LIGHT_BG_MIN_LIGHTNESS. Hue and saturation are kept. The
    bound holds for the rounded 8-bit result, not just the HSL target.

    Args:
        hex_color: Proposed background color
        is_light: Whether the theme is a light theme

    Returns:
        str: The input unchanged if it already satisfies the bound (or does
        not parse), otherwise the clamped color as '#rrggbb'
    """
    color = color_from_hex(hex_color)
    if color is None:
        return hex_color

    lightness = color.hsl[2]
    if is_light and lightness < LIGHT_BG_MIN_LIGHTNESS:
        target = LIGHT_BG_MIN_LIGHTNESS
    elif not is_light and lightness > DARK_BG_MAX_LIGHTNESS:
        target = DARK_BG_MAX_LIGHTNESS
    else:
        return hex_color

    enforced = set_color_lightness(color, target)
    # Channel rounding can land just past the bound
    step = 0.1 if is_light else -0.1
    while not _within_bound(enforced.hsl[2], is_light) and 0 < target < 100:
        target = min(max(target + step, 0), 100)
        enforced = set_color_lightness(color, target)

    logger.debug(
        "Background %s lightness %.1f -> %s (%s theme)",
        hex_color,
        lightness,
        enforced.hex,
        "light" if is_light else "dark",
    )
    return enforced.hex


def _within_bound(lightness, is_light):
    if is_light:
        return lightness >= LIGHT_BG_MIN_LIGHTNESS
    return lightness <= DARK_BG_MAX_LIGHTNESS
