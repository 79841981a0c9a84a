from .model import (
    ColorHash,
    create,
    with_saturations,
    with_lightnesses,
    with_hue_ranges,
    with_hash_function
)

from .derive import (
    to_color,
    to_hex,
    to_palette,
    palette_array
)

from .loader import load_config

__all__ = [
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
