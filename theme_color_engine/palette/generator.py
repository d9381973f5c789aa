"""
Starter theme generation from an image.

Extracts dominant swatches with k-means clustering, names six of them by
lightness/saturation role, and feeds them through the engine: hue-aware ANSI
assignment, background lightness enforcement, then full derivation.
"""

import numpy as np
from PIL import Image
from sklearn.cluster import KMeans

from ..color import color_from_hex, create_color
from ..logging import get_logger
from .derivation import derive_all_colors
from .hue_mapping import Swatch, as_swatch, assign_swatches_to_ansi_slots
from .lightness import enforce_background_lightness
from .locks import get_default_lock_state
from .slots import DEFAULT_BASE_COLORS

logger = get_logger(__name__)

# (target lightness, min lightness, max lightness, target saturation, min saturation, max saturation)
ROLE_TARGETS = {
    "vibrant": (50, 30, 70, 100, 35, 100),
    "light_vibrant": (74, 55, 100, 100, 35, 100),
    "dark_vibrant": (26, 0, 45, 100, 35, 100),
    "muted": (50, 30, 70, 30, 0, 40),
    "light_muted": (74, 55, 100, 30, 0, 40),
    "dark_muted": (26, 0, 45, 30, 0, 40),
}

WEIGHT_SATURATION = 3.0
WEIGHT_LIGHTNESS = 6.5
WEIGHT_POPULATION = 0.5


def extract_swatches(image_path, n_colors=12):
    """Extract dominant colors using k-means clustering.

    Returns:
        list: Swatch items ordered by pixel population, largest first
    """
    img = Image.open(image_path).convert("RGB")
    img.thumbnail((300, 300))
    pixels = np.array(img).reshape(-1, 3)

    # Remove extreme pixels
    mask = (pixels.sum(axis=1) > 30) & (pixels.sum(axis=1) < 735)
    filtered_pixels = pixels[mask]

    if len(filtered_pixels) < n_colors:
        filtered_pixels = pixels

    n_clusters = min(n_colors, len(np.unique(filtered_pixels, axis=0)))
    kmeans = KMeans(n_clusters=n_clusters, random_state=42, n_init=10)
    kmeans.fit(filtered_pixels)

    counts = np.bincount(kmeans.labels_, minlength=n_clusters)
    swatches = []
    for center, count in zip(kmeans.cluster_centers_, counts):
        r, g, b = (int(round(c)) for c in center)
        swatches.append(Swatch(create_color(r, g, b).hex, int(count)))

    swatches.sort(key=lambda s: s.population, reverse=True)
    logger.debug("Extracted %d swatches from %s", len(swatches), image_path)
    return swatches


def find_average_color(image_path):
    """Get overall average color of image"""
    img = Image.open(image_path).convert("RGB")
    img.thumbnail((100, 100))
    pixels = np.array(img).reshape(-1, 3)
    avg = pixels.mean(axis=0)
    return create_color(int(avg[0]), int(avg[1]), int(avg[2]))


def classify_swatches(swatches):
    """Name swatches by role (vibrant, dark_muted, ...).

    Each role takes the best-scoring unused swatch inside its lightness and
    saturation window. Roles with no candidate are left out.

    Returns:
        dict: role name -> Swatch
    """
    resolved = []
    for swatch in map(as_swatch, swatches):
        color = color_from_hex(swatch.hex)
        if color is not None:
            resolved.append((swatch, color))

    max_population = max((s.population for s, _ in resolved), default=0) or 1
    roles = {}
    used = set()

    for role, (target_l, min_l, max_l, target_s, min_s, max_s) in ROLE_TARGETS.items():
        best, best_score = None, None
        for index, (swatch, color) in enumerate(resolved):
            _, s, l = color.hsl
            if index in used or not (min_l <= l <= max_l and min_s <= s <= max_s):
                continue
            score = (
                (1 - abs(s - target_s) / 100) * WEIGHT_SATURATION
                + (1 - abs(l - target_l) / 100) * WEIGHT_LIGHTNESS
                + (swatch.population / max_population) * WEIGHT_POPULATION
            )
            if best_score is None or score > best_score:
                best, best_score = index, score
        if best is not None:
            used.add(best)
            roles[role] = resolved[best][0]

    return roles


def build_theme_from_swatches(swatches, is_light):
    """Build a complete starter theme from extracted swatches.

    Args:
        swatches: Swatch items extracted from an image
        is_light: Whether to build a light theme

    Returns:
        tuple: (colors dict with all 22 slots, default lock state)
    """
    roles = classify_swatches(swatches)
    base_colors = dict(DEFAULT_BASE_COLORS)

    if is_light:
        base_colors["background"] = DEFAULT_BASE_COLORS["foreground"]
        base_colors["foreground"] = DEFAULT_BASE_COLORS["background"]
        canvas = roles.get("light_vibrant") or roles.get("light_muted")
        ink = roles.get("dark_vibrant") or roles.get("dark_muted")
        if canvas:
            base_colors["background"] = base_colors["white"] = canvas.hex
        if ink:
            base_colors["foreground"] = base_colors["black"] = ink.hex
    else:
        canvas = roles.get("dark_vibrant") or roles.get("dark_muted")
        ink = roles.get("light_vibrant") or roles.get("light_muted")
        if canvas:
            base_colors["background"] = base_colors["black"] = canvas.hex
        if ink:
            base_colors["foreground"] = base_colors["white"] = ink.hex

    ansi_swatches = [roles[role] for role in ROLE_TARGETS if role in roles]
    base_colors.update(assign_swatches_to_ansi_slots(ansi_swatches))

    base_colors["background"] = enforce_background_lightness(base_colors["background"], is_light)

    locks = get_default_lock_state()
    return derive_all_colors(base_colors, locks, None, is_light), locks


def generate_theme_from_image(image_path, is_light=None, n_colors=12):
    """Generate a starter theme from an image.

    Args:
        image_path: Path to the source image
        is_light: Force light (True) or dark (False); None detects from the image
        n_colors: Number of k-means clusters to extract

    Returns:
        tuple: (colors dict, lock state dict, is_light bool, swatches list)
    """
    swatches = extract_swatches(image_path, n_colors=n_colors)

    if is_light is None:
        is_light = find_average_color(image_path).luminance >= 0.5

    colors, locks = build_theme_from_swatches(swatches, is_light)
    return colors, locks, is_light, swatches
