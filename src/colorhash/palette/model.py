"""
Configuration value for ColorHash.

Overview
--------
- `ColorHash` bundles the three ordered parameter sequences (saturations,
  lightnesses, hue ranges) and the hash function that drives selection.
- Instances are frozen: every `with_*` call returns a new configuration with
  one field replaced wholesale, the receiver is left untouched.
- Empty sequences are accepted here. They are replaced by the package
  defaults only when a colour is derived (see `colorhash.palette.derive`).

Public API
----------
- create(): Configuration with the bundled defaults and the SHA-256 digest.
- with_saturations(config, values)
- with_lightnesses(config, values)
- with_hue_ranges(config, ranges)
- with_hash_function(config, fn)

Notes
-----
- Values are not range-checked at construction time; out-of-range values
  surface as a ValidationError from `to_color`.
- Sequences are stored as tuples, so a list passed in and later mutated by
  the caller does not affect the configuration.
"""

from dataclasses import dataclass, field, replace
from typing import Tuple

from colorhash.core import settings as CH_settings
from colorhash.core.hash import HashFunction, sha256_digest
from colorhash.palette import derive as CH_derive


@dataclass(frozen=True)
class ColorHash:
    saturations: Tuple[float, ...] = field(default_factory=lambda: CH_settings.get("saturations"))
    lightnesses: Tuple[float, ...] = field(default_factory=lambda: CH_settings.get("lightnesses"))
    hue_ranges: Tuple[Tuple[float, float], ...] = field(default_factory=lambda: CH_settings.get("hue_ranges"))
    hash_function: HashFunction = sha256_digest

    def with_saturations(self, values):
        return with_saturations(self, values)

    def with_lightnesses(self, values):
        return with_lightnesses(self, values)

    def with_hue_ranges(self, ranges):
        return with_hue_ranges(self, ranges)

    def with_hash_function(self, fn):
        return with_hash_function(self, fn)

    def to_color(self, text):
        return CH_derive.to_color(self, text)


def create():
    """
    Return a configuration holding the package defaults.

    Saturations and lightnesses default to (0.35, 0.5, 0.65), the single hue
    range covers the whole wheel (0.0, 1.0), and the hash function is
    `sha256_digest`.

    :rtype: ColorHash
    """
    return ColorHash()


def with_saturations(config, values):
    """
    Replace the saturation sequence.

    :param config: Configuration to copy.
    :type config: ColorHash
    :param values: Saturations, each intended in [0, 1]. May be empty.
    :type values: Iterable[float]
    :rtype: ColorHash
    """
    return replace(config, saturations=tuple(values))


def with_lightnesses(config, values):
    """
    Replace the lightness sequence.

    :param config: Configuration to copy.
    :type config: ColorHash
    :param values: Lightnesses, each intended in [0, 1]. May be empty.
    :type values: Iterable[float]
    :rtype: ColorHash
    """
    return replace(config, lightnesses=tuple(values))


def with_hue_ranges(config, ranges):
    """
    Replace the hue-range sequence.

    A range whose start exceeds its end is kept as given; the derivation
    reads it with swapped bounds.

    :param config: Configuration to copy.
    :type config: ColorHash
    :param ranges: (start, end) pairs, each bound intended in [0, 1]. May be empty.
    :type ranges: Iterable[tuple[float, float]]
    :rtype: ColorHash
    """
    return replace(config, hue_ranges=tuple((start, end) for start, end in ranges))


def with_hash_function(config, fn):
    """
    Replace the digest function.

    `fn` must be total and deterministic. Negative results are allowed.

    :param config: Configuration to copy.
    :type config: ColorHash
    :param fn: Callable mapping a string to an integer.
    :type fn: Callable[[str], int]
    :rtype: ColorHash
    """
    return replace(config, hash_function=fn)
