"""Exceptions raised at the edges of the engine.

Conversions and validators report bad input as None or a result object.
These are reserved for operations that must refuse a change outright.
"""


class ThemeError(Exception):
    """Base class for theme color engine errors."""


class InvalidColorError(ThemeError, ValueError):
    """A color value could not be parsed; the prior value must be kept."""

    def __init__(self, key, value, reason="Invalid color (use hex, rgb() or hsl())"):
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"{key}: {reason}: {value!r}")


class InvalidThemeError(ThemeError):
    """A theme file or record failed validation.

    Args:
        message: Summary of the failure
        problems: List of (key, value, reason) tuples, one per offending field
    """

    def __init__(self, message, problems=None):
        self.problems = list(problems or [])
        details = "; ".join(f"{key}={value!r} ({reason})" for key, value, reason in self.problems)
        super().__init__(f"{message}: {details}" if details else message)
