"""
HSL colour value used as the output of ColorHash.

Overview
--------
- `Color` stores hue, saturation and lightness, all normalized to [0, 1].
- `from_hsl` is the only checked constructor: it rejects out-of-range
  components with a ValueError.
- Conversions to RGB go through `colorsys`; hex formatting goes through
  `matplotlib.colors.to_hex`.

Public API
----------
- Color(h, s, l): HSL triple (use `from_hsl` to validate).
- from_hsl(h, s, l): Build a Color, raising ValueError if out of range.
- Color.to_hsl(), Color.to_rgb(), Color.to_rgb255(), Color.to_hex()

Notes
-----
- Hue is a fraction of the colour wheel, not degrees: 0.5 is cyan.
- `colorsys` orders its arguments (h, l, s); this module always speaks (h, s, l).
"""

import colorsys
from dataclasses import dataclass

import numpy as np
import matplotlib.colors as mcolors


@dataclass(frozen=True)
class Color:
    h: float
    s: float
    l: float  # noqa: E741
    alpha: float = 1.0

    def to_hsl(self):
        """Return the (h, s, l) triple."""
        return (self.h, self.s, self.l)

    def to_rgb(self):
        """
        Convert to RGB floats.

        :return: (r, g, b), each in [0, 1].
        :rtype: tuple[float, float, float]
        """
        rgb = colorsys.hls_to_rgb(self.h, self.l, self.s)
        # colorsys arithmetic can overshoot 1.0 by one ulp.
        return tuple(float(c) for c in np.clip(rgb, 0.0, 1.0))

    def to_rgb255(self):
        """Convert to 8-bit RGB integers."""
        return tuple(int(round(c * 255)) for c in self.to_rgb())

    def to_hex(self):
        """
        Format as a lowercase ``#rrggbb`` string.

        :rtype: str
        """
        return mcolors.to_hex(self.to_rgb())

    def __str__(self):
        return self.to_hex()


def _in_unit_range(x):
    return 0.0 <= x <= 1.0


def from_hsl(h, s, l):  # noqa: E741
    """
    Build a Color from normalized HSL components.

    :param h: Hue in [0, 1].
    :type h: float
    :param s: Saturation in [0, 1].
    :type s: float
    :param l: Lightness in [0, 1].
    :type l: float
    :return: The colour.
    :rtype: Color
    :raises ValueError: If any component lies outside [0, 1].
    """
    for name, value in (("hue", h), ("saturation", s), ("lightness", l)):
        if not _in_unit_range(value):
            raise ValueError(f"{name} {value} is outside [0, 1]")
    return Color(float(h), float(s), float(l))
