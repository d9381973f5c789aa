"""
Color-space conversion utilities.

Parsing, validation and conversion between hex, RGB and HSL forms, plus the
small set of Color helpers (adjust, blend, contrast) the rest of the engine
builds on. Everything here is pure: malformed input yields None, never an
exception.
"""

import colorsys
import re
from collections import namedtuple

Color = namedtuple("Color", ["hex", "rgb", "hsl", "luminance"])

HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})")
RGB_WRAPPER = re.compile(r"rgb\s*\(\s*|\s*\)", re.IGNORECASE)
HSL_WRAPPER = re.compile(r"hsl\s*\(\s*|\s*\)", re.IGNORECASE)
COMPONENT_SEPARATOR = re.compile(r"[,\s]+")


def _clamp(value, low, high):
    return max(low, min(high, value))


def is_valid_hex_color(color):
    """Strict hex check: 3 or 6 hex digits, optional leading '#'."""
    if not isinstance(color, str):
        return False
    return HEX_PATTERN.fullmatch(color) is not None


def normalize_hex(color):
    """Return a valid hex color as lowercase '#rrggbb', or None."""
    if not is_valid_hex_color(color):
        return None
    digits = color.lstrip("#").lower()
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return f"#{digits}"


def rgb_to_hex(r, g, b):
    r, g, b = (int(round(_clamp(c, 0, 255))) for c in (r, g, b))
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color):
    """Parse '#rrggbb' or '#rgb' into an (r, g, b) tuple, None if malformed."""
    normalized = normalize_hex(hex_color)
    if normalized is None:
        return None
    return tuple(int(normalized[i : i + 2], 16) for i in (1, 3, 5))


def rgb_to_hsl(r, g, b):
    """Convert 0-255 RGB to HSL as (h 0-360, s 0-100, l 0-100)."""
    r, g, b = r / 255, g / 255, b / 255
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return (h * 360, s * 100, l * 100)


def hsl_to_rgb(h, s, l):
    h = (h % 360) / 360
    s = _clamp(s, 0, 100) / 100
    l = _clamp(l, 0, 100) / 100
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))


def hsl_to_hex(h, s, l):
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def _split_components(color, wrapper):
    cleaned = wrapper.sub("", color.strip()).strip()
    return [p for p in COMPONENT_SEPARATOR.split(cleaned) if p]


def is_valid_rgb_color(color):
    """Accepts 'rgb(255, 255, 255)', '255, 255, 255' or '255 255 255'."""
    return parse_rgb(color) is not None


def parse_rgb(color):
    if not isinstance(color, str):
        return None
    parts = _split_components(color, RGB_WRAPPER)
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        return None
    values = tuple(int(p) for p in parts)
    if any(v > 255 for v in values):
        return None
    return values


def is_valid_hsl_color(color):
    """Accepts 'hsl(360, 100%, 50%)' or bare '360, 100%, 50%' triples.

    A bare triple with no '%' and no hsl() wrapper reads just like RGB, so it
    only counts as HSL when the hue is above 255 or written with a decimal.
    """
    return parse_hsl(color) is not None


def parse_hsl(color):
    if not isinstance(color, str):
        return None
    original = color.strip()
    parts = _split_components(original, HSL_WRAPPER)
    if len(parts) != 3:
        return None

    try:
        h = float(parts[0])
        s = float(parts[1].replace("%", ""))
        l = float(parts[2].replace("%", ""))
    except ValueError:
        return None

    if not 0 <= h <= 360 or not 0 <= s <= 100 or not 0 <= l <= 100:
        return None

    if "hsl(" not in original.lower() and "%" not in original:
        if h <= 255 and "." not in parts[0]:
            return None

    return (h, s, l)


def to_hex(color):
    """Normalize hex, rgb() or hsl() text to '#rrggbb'. Returns None if unparseable."""
    if not isinstance(color, str):
        return None
    color = color.strip()

    normalized = normalize_hex(color)
    if normalized is not None:
        return normalized

    rgb = parse_rgb(color)
    if rgb is not None:
        return rgb_to_hex(*rgb)

    hsl = parse_hsl(color)
    if hsl is not None:
        return hsl_to_hex(*hsl)

    return None


def detect_color_format(color):
    """Classify input as 'hex', 'rgb', 'hsl' or 'invalid'."""
    if isinstance(color, str):
        color = color.strip()
    if is_valid_hex_color(color):
        return "hex"
    if is_valid_rgb_color(color):
        return "rgb"
    if is_valid_hsl_color(color):
        return "hsl"
    return "invalid"


def hue_distance(h1, h2):
    """Circular distance on the 0-360 hue wheel, in [0, 180]."""
    d = abs(h1 - h2) % 360
    return 360 - d if d > 180 else d


def relative_luminance(r, g, b):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def contrast_ratio(lum1, lum2):
    """Calculate contrast ratio between two luminances"""
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def create_color(r, g, b):
    """Create a Color namedtuple with all representations"""
    r, g, b = (int(round(_clamp(c, 0, 255))) for c in (r, g, b))
    return Color(
        hex=rgb_to_hex(r, g, b),
        rgb=(r, g, b),
        hsl=rgb_to_hsl(r, g, b),
        luminance=relative_luminance(r, g, b),
    )


def color_from_hex(hex_color):
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    return create_color(*rgb)


def adjust_color(color, lightness_delta=0, saturation_delta=0):
    """Adjust a color's HSL values"""
    h, s, l = color.hsl
    new_s = _clamp(s + saturation_delta, 0, 100)
    new_l = _clamp(l + lightness_delta, 0, 100)
    return create_color(*hsl_to_rgb(h, new_s, new_l))


def set_color_lightness(color, target_lightness):
    """Set a color to a specific lightness"""
    h, s, _ = color.hsl
    return create_color(*hsl_to_rgb(h, s, target_lightness))


def blend_colors(color1, color2, factor):
    """Blend two colors together. factor=0 returns color1, factor=1 returns color2."""
    r1, g1, b1 = color1.rgb
    r2, g2, b2 = color2.rgb
    r = r1 + (r2 - r1) * factor
    g = g1 + (g2 - g1) * factor
    b = b1 + (b2 - b1) * factor
    return create_color(r, g, b)
