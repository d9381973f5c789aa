from .derivation import apply_color_edit, derive_all_colors, reset_to_auto
from .generator import generate_theme_from_image
from .hue_mapping import Swatch, assign_swatches_to_ansi_slots
from .lightness import enforce_background_lightness
from .loader import load_theme_from_json
from .locks import get_default_lock_state
from .slots import is_base_color, is_derived_color
from .validator import apply_pasted_colors, validate_color_json

__all__ = [
    "Swatch",
    "apply_color_edit",
    "apply_pasted_colors",
    "assign_swatches_to_ansi_slots",
    "derive_all_colors",
    "enforce_background_lightness",
    "generate_theme_from_image",
    "get_default_lock_state",
    "is_base_color",
    "is_derived_color",
    "load_theme_from_json",
    "reset_to_auto",
    "validate_color_json",
]
