from .json_export import build_theme_metadata, export_theme_json
from .report import format_palette, print_palette, print_swatches

__all__ = ["build_theme_metadata", "export_theme_json", "format_palette", "print_palette", "print_swatches"]
