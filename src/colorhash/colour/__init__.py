from .hsl import (
    Color,
    from_hsl
)

__all__ = [
    "Color",
    "from_hsl"
]
