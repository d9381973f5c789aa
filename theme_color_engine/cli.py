import argparse
import os

from .errors import ThemeError
from .export import export_theme_json, print_palette, print_swatches
from .logging import setup_logging
from .palette import (
    apply_color_edit,
    apply_pasted_colors,
    derive_all_colors,
    generate_theme_from_image,
    load_theme_from_json,
    reset_to_auto,
    validate_color_json,
)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Derive complete terminal themes from base colors or images"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log engine decisions to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    derive = subparsers.add_parser("derive", help="Recompute derived colors of a theme JSON file")
    derive.add_argument("theme", help="Path to theme JSON")
    _add_output_args(derive)
    _add_polarity_args(derive)
    derive.set_defaults(func=_run_derive)

    from_image = subparsers.add_parser("from-image", help="Create a starter theme from an image")
    from_image.add_argument("image_path", help="Path to the source image")
    from_image.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=None,
        help="Output directory (default: same as input file)",
    )
    from_image.add_argument(
        "--name",
        help="Theme name (default: derived from filename)",
    )
    from_image.add_argument(
        "--colors",
        type=int,
        default=12,
        help="Number of colors to extract from the image (default: 12)",
    )
    _add_polarity_args(from_image)
    from_image.set_defaults(func=_run_from_image)

    paste = subparsers.add_parser("paste", help="Apply a JSON fragment of color overrides")
    paste.add_argument("theme", help="Path to theme JSON")
    paste.add_argument("paste_json", help="Path to JSON with the colors to paste")
    _add_output_args(paste)
    paste.set_defaults(func=_run_paste)

    edit = subparsers.add_parser("edit", help="Set one color (editing a derived color locks it)")
    edit.add_argument("theme", help="Path to theme JSON")
    edit.add_argument("key", help="Color slot, e.g. blue or brightRed")
    edit.add_argument("value", help="Color as hex, rgb() or hsl()")
    _add_output_args(edit)
    edit.set_defaults(func=_run_edit)

    reset = subparsers.add_parser("reset", help="Unlock a derived color and recompute it")
    reset.add_argument("theme", help="Path to theme JSON")
    reset.add_argument("key", help="Derived color slot, e.g. accent")
    _add_output_args(reset)
    reset.set_defaults(func=_run_reset)

    args = parser.parse_args(argv)
    setup_logging(level="DEBUG" if args.verbose else "WARNING", console=args.verbose)

    try:
        args.func(args)
    except (ThemeError, KeyError, OSError) as e:
        parser.exit(1, f"Error: {e}\n")


def _add_output_args(parser):
    parser.add_argument(
        "--output", "-o",
        metavar="JSON",
        default=None,
        help="Write the result here (default: overwrite the input theme)",
    )


def _add_polarity_args(parser):
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--light", dest="is_light", action="store_const", const=True, help="Force a light theme")
    group.add_argument("--dark", dest="is_light", action="store_const", const=False, help="Force a dark theme")
    parser.set_defaults(is_light=None)


def _theme_name(path):
    return os.path.splitext(os.path.basename(path))[0]


def _save(colors, locks, is_light, args):
    output_path = args.output or args.theme
    export_theme_json(colors, locks, output_path, name=_theme_name(args.theme), is_light=is_light)
    print_palette(colors, locks, is_light)
    print(f"\nSaved: {output_path}")


def _run_derive(args):
    """Re-derive every unlocked color of a theme file."""
    colors, locks, is_light = load_theme_from_json(args.theme)
    if args.is_light is not None:
        is_light = args.is_light
    colors = derive_all_colors(colors, locks, None, is_light)
    _save(colors, locks, is_light, args)


def _run_paste(args):
    """Validate a paste fragment and apply it, refusing any invalid field."""
    colors, locks, is_light = load_theme_from_json(args.theme)
    with open(args.paste_json) as f:
        result = validate_color_json(f.read())

    for invalid in result.invalid_colors:
        print(f"  {invalid.key}: {invalid.reason} ({invalid.value!r})")
    print(result.message)

    colors, locks = apply_pasted_colors(colors, locks, result, is_light)
    _save(colors, locks, is_light, args)


def _run_edit(args):
    colors, locks, is_light = load_theme_from_json(args.theme)
    colors, locks = apply_color_edit(colors, locks, args.key, args.value, is_light)
    _save(colors, locks, is_light, args)


def _run_reset(args):
    colors, locks, is_light = load_theme_from_json(args.theme)
    colors, locks = reset_to_auto(colors, locks, args.key, is_light)
    _save(colors, locks, is_light, args)


def _run_from_image(args):
    """Generate a starter theme from an image file."""
    image_path = args.image_path
    output_dir = args.output or os.path.dirname(image_path) or "."
    theme_name = args.name or _theme_name(image_path)

    os.makedirs(output_dir, exist_ok=True)

    print(f"Analyzing: {image_path}")

    colors, locks, is_light, swatches = generate_theme_from_image(
        image_path, is_light=args.is_light, n_colors=args.colors
    )
    variant = "light" if is_light else "dark"

    print_swatches(swatches, colors)
    print_palette(colors, locks, is_light)

    theme_path = os.path.join(output_dir, f"{theme_name}-{variant}.json")
    export_theme_json(
        colors,
        locks,
        theme_path,
        name=theme_name,
        is_light=is_light,
        source_file=os.path.basename(image_path),
    )

    print("\n" + "=" * 60)
    print("Exported:")
    print(f"  - {theme_path}")
    print("=" * 60)


if __name__ == "__main__":
    main()
