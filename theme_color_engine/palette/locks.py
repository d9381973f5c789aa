"""Lock state for derived colors.

A lock marks a derived color as manually overridden so recomputation leaves
it alone. Lock states are plain dicts keyed by the 12 derived slot names and
are never mutated; every helper returns a new dict.
"""

from ..errors import InvalidThemeError
from .slots import DERIVED_COLOR_KEYS, is_derived_color, to_slot_key


def get_default_lock_state():
    """Get the default lock state (all unlocked)"""
    return {key: False for key in DERIVED_COLOR_KEYS}


def get_legacy_lock_state():
    """Lock state for a theme authored before lock tracking existed.

    Every derived color is treated as intentionally fixed.
    """
    return {key: True for key in DERIVED_COLOR_KEYS}


def resolve_lock_state(stored, is_existing_theme):
    """Pick the lock state for a theme being opened for editing.

    Args:
        stored: Lock mapping saved with the theme (camelCase or snake_case), or None
        is_existing_theme: True when the theme was loaded rather than freshly authored

    Returns:
        dict: Complete 12-flag lock state

    Raises:
        InvalidThemeError: If `stored` is not a mapping of derived slots to booleans
    """
    if stored is None:
        return get_legacy_lock_state() if is_existing_theme else get_default_lock_state()
    if not isinstance(stored, dict):
        raise InvalidThemeError("Invalid color lock state", [("colorLocks", stored, "Must be an object")])

    locks = get_default_lock_state()
    problems = []
    for name, value in stored.items():
        key = to_slot_key(name)
        if key not in locks:
            problems.append((name, value, "Not a derived color"))
        elif not isinstance(value, bool):
            problems.append((name, value, "Lock flag must be true or false"))
        else:
            locks[key] = value

    if problems:
        raise InvalidThemeError("Invalid color lock state", problems)
    return locks


def merge_lock_state(locks, updates):
    """Return a new lock state with `updates` applied.

    Raises:
        KeyError: If an update names a slot that is not a derived color
    """
    merged = dict(locks)
    for name, value in updates.items():
        key = to_slot_key(name)
        if key not in merged:
            raise KeyError(f"{name!r} is not a derived color and cannot be locked")
        merged[key] = bool(value)
    return merged


def lock_keys(locks, keys):
    """Lock every derived slot in `keys`; base colors are skipped."""
    return merge_lock_state(locks, {to_slot_key(k): True for k in keys if is_derived_color(k)})
