"""
colorhash
=========

Deterministic string-to-colour mapping.

The same string always yields the same colour, without a lookup table:

>>> from colorhash import create, to_color
>>> to_color(create(), "alice") == to_color(create(), "alice")
True

Importing from ``colorhash`` gives direct access to the configuration
builder, the derivation functions, the colour type and the error types.
"""

from .core import (
    ColorHashError,
    ValidationError,
    ConfigurationError,
    set_verbosity,
    sha256_digest
)

from .colour import (
    Color,
    from_hsl
)

from .palette import (
    ColorHash,
    create,
    with_saturations,
    with_lightnesses,
    with_hue_ranges,
    with_hash_function,
    to_color,
    to_hex,
    to_palette,
    palette_array,
    load_config
)

__version__ = "1.0.0"

__all__ = [
    "ColorHashError",
    "ValidationError",
    "ConfigurationError",
    "set_verbosity",
    "sha256_digest",
    "Color",
    "from_hsl",
    "ColorHash",
    "create",
    "with_saturations",
    "with_lightnesses",
    "with_hue_ranges",
    "with_hash_function",
    "to_color",
    "to_hex",
    "to_palette",
    "palette_array",
    "load_config"
]
