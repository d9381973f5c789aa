"""
Hue-aware ANSI color slot assignment.

Routes swatches extracted from an image onto the six hue-bearing ANSI roles by
HSL hue proximity. Dominant swatches choose first; any role left empty gets the
built-in fallback color for that role.
"""

from collections import namedtuple

from ..color import color_from_hex, hue_distance
from ..logging import get_logger
from .slots import DEFAULT_BASE_COLORS

logger = get_logger(__name__)

Swatch = namedtuple("Swatch", ["hex", "population"])

ANSI_SLOTS = ("red", "yellow", "green", "cyan", "blue", "magenta")

# HSL hue angle targets for each ANSI color slot
ANSI_HUE_TARGETS = {
    "red": 0,
    "yellow": 60,
    "green": 120,
    "cyan": 180,
    "blue": 240,
    "magenta": 300,
}

FALLBACK_ANSI_COLORS = {slot: DEFAULT_BASE_COLORS[slot] for slot in ANSI_SLOTS}

# Swatches with chroma below this (0-100) are near-gray; their hue is unreliable
MIN_RELIABLE_CHROMA = 8

# Maximum hue distance (degrees) for a swatch to fill a slot
MAX_HUE_DISTANCE = 60


def as_swatch(value):
    """Coerce a Swatch, (hex, population) pair or {'hex', 'population'} dict."""
    if isinstance(value, dict):
        return Swatch(value.get("hex"), value.get("population", 0))
    hex_value, population = value
    return Swatch(hex_value, population)


def _chroma(color):
    return (max(color.rgb) - min(color.rgb)) / 255 * 100


def assign_swatches_to_ansi_slots(swatches):
    """Assign image swatches to the six hue-bearing ANSI color slots.

    Swatches are visited in descending population order (input order breaks
    ties) and each claims the nearest slot still free, so dominant colors get
    their best-fit role and never overwrite each other. Near-gray swatches,
    unparseable hex values and swatches farther than MAX_HUE_DISTANCE from
    every free slot are skipped.

    Args:
        swatches: Iterable of Swatch, (hex, population) or dict items

    Returns:
        dict: slot name -> '#rrggbb' for all six slots
    """
    candidates = []
    for swatch in map(as_swatch, swatches):
        color = color_from_hex(swatch.hex)
        if color is None:
            logger.debug("Skipping unparseable swatch %r", swatch.hex)
            continue
        if _chroma(color) < MIN_RELIABLE_CHROMA:
            logger.debug("Skipping near-gray swatch %s", color.hex)
            continue
        candidates.append((color, max(0, swatch.population or 0)))

    candidates.sort(key=lambda item: item[1], reverse=True)

    assigned = {}
    for color, population in candidates:
        free = [slot for slot in ANSI_SLOTS if slot not in assigned]
        if not free:
            break
        hue = color.hsl[0]
        slot = min(free, key=lambda s: hue_distance(hue, ANSI_HUE_TARGETS[s]))
        if hue_distance(hue, ANSI_HUE_TARGETS[slot]) > MAX_HUE_DISTANCE:
            logger.debug("Swatch %s (hue %.0f) has no free slot in range", color.hex, hue)
            continue
        assigned[slot] = color.hex

    result = {}
    for slot in ANSI_SLOTS:
        if slot in assigned:
            result[slot] = assigned[slot]
        else:
            logger.debug("No swatch for %s, using fallback %s", slot, FALLBACK_ANSI_COLORS[slot])
            result[slot] = FALLBACK_ANSI_COLORS[slot]
    return result
