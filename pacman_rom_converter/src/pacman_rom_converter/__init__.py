"""Pac-Man ROM graphics converter.

This module converts paletted PNG images into the tile, sprite and color
ROM layouts used by the Pac-Man arcade hardware. It can be invoked through
the CLI (``python -m pacman_rom_converter``) or imported to convert a single
image into bytes.
"""

from .converter import (
    ConvertOptions,
    IndexedImage,
    convert_image,
    convert_png,
    expected_output_size,
    indexed_image_from_pil,
)
from .encoder import (
    SPRITE_BAND_ORDER,
    PixelSource,
    encode_8x4,
    encode_chars,
    encode_color,
    encode_palette,
    encode_sprite,
    encode_sprites,
    encode_tile,
)
from .errors import ConversionError, NotPalettedError, SizeMismatchError

__all__ = [
    "SPRITE_BAND_ORDER",
    "ConversionError",
    "ConvertOptions",
    "IndexedImage",
    "NotPalettedError",
    "PixelSource",
    "SizeMismatchError",
    "convert_image",
    "convert_png",
    "encode_8x4",
    "encode_chars",
    "encode_color",
    "encode_palette",
    "encode_sprite",
    "encode_sprites",
    "encode_tile",
    "expected_output_size",
    "indexed_image_from_pil",
]
