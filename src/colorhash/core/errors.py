"""
Exception types raised by ColorHash.
"""


class ColorHashError(Exception):
    """Base class for every error raised by the library."""


class ValidationError(ColorHashError, ValueError):
    """
    A saturation, lightness or hue-range bound lies outside [0, 1].

    The optional `reason` names the offending value. It is diagnostic only;
    callers should treat every ValidationError the same way.
    """

    def __init__(self, reason=None):
        super().__init__(reason or "invalid configuration")
        self.reason = reason


class ConfigurationError(ColorHashError, ValueError):
    """A configuration file could not be turned into a ColorHash."""
