from ..color import color_from_hex, contrast_ratio
from ..palette.derivation import get_derivation_description
from ..palette.hue_mapping import ANSI_SLOTS

CATEGORIES = [
    ("CANVAS", ["background", "foreground", "cursor", "selection", "border", "accent"]),
    ("TERMINAL (Base)", ["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]),
    (
        "TERMINAL (Bright)",
        [
            "bright_black",
            "bright_red",
            "bright_green",
            "bright_yellow",
            "bright_blue",
            "bright_magenta",
            "bright_cyan",
            "bright_white",
        ],
    ),
]


def format_palette(colors, locks, is_light):
    """Format theme colors with contrast against the background.

    Derived colors are tagged 'locked' or with the rule that computed them.
    """
    bg = color_from_hex(colors["background"])

    lines = []
    lines.append("=" * 60)
    lines.append(f"THEME PALETTE ({'LIGHT' if is_light else 'DARK'} THEME)")
    lines.append("=" * 60)

    for cat_name, keys in CATEGORIES:
        lines.append("")
        lines.append(f"{cat_name}:")
        for key in keys:
            c = color_from_hex(colors[key])
            contrast = contrast_ratio(c.luminance, bg.luminance)
            line = f"  {key:16} {c.hex}  (contrast: {contrast:.1f}:1)"
            if key in locks:
                line += "  [locked]" if locks[key] else f"  <- {get_derivation_description(key)}"
            lines.append(line)

    return "\n".join(lines)


def print_palette(colors, locks, is_light):
    """Print palette info"""
    print("\n" + format_palette(colors, locks, is_light))


def print_swatches(swatches, assigned):
    """Print extracted swatches and which ANSI slot each one filled."""
    by_hex = {hex_value: slot for slot, hex_value in assigned.items() if slot in ANSI_SLOTS}
    print("\nEXTRACTED SWATCHES:")
    for swatch in swatches:
        slot = by_hex.get(swatch.hex, "-")
        print(f"  {swatch.hex}  population={swatch.population:<8} slot={slot}")
