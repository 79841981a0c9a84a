"""
Derivation of a colour from a string and a ColorHash configuration.

Overview
--------
1. Empty parameter sequences fall back to the bundled defaults.
2. Every saturation, lightness and hue-range bound is checked against [0, 1].
3. The digest is the absolute value of the configured hash function.
4. The digest picks a hue range (`digest mod #ranges`), a hue inside it
   (`(digest // #ranges) mod 727` steps across the range), a saturation
   (`(digest // 360) mod #saturations`) and a lightness
   (`(digest // 360 // #saturations) mod #lightnesses`).
5. The HSL triple is handed to `colorhash.colour.from_hsl`.

Public API
----------
- to_color(config, text): Colour for one string (raises ValidationError).
- to_hex(config, text): Same, formatted as ``#rrggbb``.
- to_palette(config, texts): Colours for several strings.
- palette_array(config, texts): RGB floats as an (N, 3) NumPy array.

Notes
-----
- Hue ranges with start > end are read as [end, start]. They never wrap
  around the wheel.
- Python integers do not overflow, so arbitrarily large digests simply wrap
  through the modulo steps.
"""

import numbers

import numpy as np

from colorhash.core import log as CH_log
from colorhash.core import settings as CH_settings
from colorhash.core.errors import ValidationError
from colorhash.core.hash import sha256_digest
from colorhash.colour import hsl as CH_colour

# Number of hue steps inside a selected range.
HUE_RESOLUTION = 727


def _or_default(values, key):
    if len(values) == 0:
        CH_log.info(f"Empty {key} sequence, using defaults {CH_settings.get(key)}")
        return CH_settings.get(key)
    return values


def _check_unit(value, what):
    if isinstance(value, bool) or not isinstance(value, numbers.Real) \
            or not (0.0 <= value <= 1.0):
        raise ValidationError(f"{what} {value!r} is outside [0, 1]")


def resolve(config):
    """
    Apply the empty-sequence fallback and validate every participating value.

    :param config: Configuration to resolve.
    :type config: colorhash.palette.model.ColorHash
    :return: (saturations, lightnesses, hue_ranges), all non-empty.
    :rtype: tuple
    :raises ValidationError: If any value lies outside [0, 1].
    """
    saturations = _or_default(config.saturations, "saturations")
    lightnesses = _or_default(config.lightnesses, "lightnesses")
    hue_ranges = _or_default(config.hue_ranges, "hue_ranges")

    for s in saturations:
        _check_unit(s, "Saturation")
    for l in lightnesses:  # noqa: E741
        _check_unit(l, "Lightness")
    for start, end in hue_ranges:
        _check_unit(start, "Hue range start")
        _check_unit(end, "Hue range end")

    return saturations, lightnesses, hue_ranges


def _hash_function(config):
    if config.hash_function is None:
        return sha256_digest
    return config.hash_function


def _derive(resolved, hash_function, text):
    saturations, lightnesses, hue_ranges = resolved
    digest = abs(int(hash_function(text)))

    start, end = hue_ranges[digest % len(hue_ranges)]
    hue_digest = (digest // len(hue_ranges)) % HUE_RESOLUTION
    hue = hue_digest * abs(end - start) / HUE_RESOLUTION + min(start, end)

    saturation = saturations[(digest // 360) % len(saturations)]
    lightness = lightnesses[(digest // 360 // len(saturations)) % len(lightnesses)]

    try:
        return CH_colour.from_hsl(hue, saturation, lightness)
    except ValueError as e:
        raise ValidationError(str(e)) from e


def to_color(config, text):
    """
    Map `text` to a colour.

    The result depends only on `config` and `text`: calling twice with the
    same arguments yields equal colours (or the same error).

    :param config: Configuration.
    :type config: colorhash.palette.model.ColorHash
    :param text: Any string, including the empty string.
    :type text: str
    :return: The derived colour.
    :rtype: colorhash.colour.Color
    :raises ValidationError: If the configuration holds an out-of-range value.
    """
    return _derive(resolve(config), _hash_function(config), text)


def to_hex(config, text):
    return to_color(config, text).to_hex()


def to_palette(config, texts):
    """
    Map several strings to colours, validating the configuration once.

    :param config: Configuration.
    :type config: colorhash.palette.model.ColorHash
    :param texts: Strings to colour.
    :type texts: Iterable[str]
    :rtype: list[colorhash.colour.Color]
    :raises ValidationError: If the configuration holds an out-of-range value.
    """
    resolved = resolve(config)
    hash_function = _hash_function(config)
    return [_derive(resolved, hash_function, t) for t in texts]


def palette_array(config, texts):
    """
    RGB floats for several strings, ready for matplotlib.

    :return: Array of shape (N, 3) with values in [0, 1].
    :rtype: np.ndarray
    """
    colors = to_palette(config, texts)
    return np.array([c.to_rgb() for c in colors], dtype=float).reshape(-1, 3)
