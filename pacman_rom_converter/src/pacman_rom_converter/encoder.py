"""Bitplane encoders for the Pac-Man tile, sprite and palette ROMs."""

# Reference: Pac-Man / Namco video hardware ROM layouts
# ROM                   | Size   | Contents
# ----------------------|--------|------------------------------------------------------
# Tile ROM (5E)         | 4096   | 256 characters × 16 bytes; 8×8 dots, 2bpp
# Sprite ROM (5F)       | 4096   | 64 sprites × 64 bytes; 16×16 dots, 2bpp
# Color PROM (7F)       | 32     | 32 entries × 1 byte, bbgggrrr
#
# Each 8×4 band is stored as 8 bytes, one per pixel column, right-most column
# first. Within a byte the low nibble holds bit 0 of the four pixels (bottom
# row in bit 0) and the high nibble holds bit 1.

from __future__ import annotations

from typing import Protocol, Sequence, Tuple

from .errors import SizeMismatchError

Color = Tuple[int, int, int]

TILE_SIZE = 8
SPRITE_SIZE = 16
BAND_HEIGHT = 4
TILE_COUNT = 256
SPRITE_COUNT = 64
PALETTE_SIZE = 32
BYTES_PER_BAND = TILE_SIZE
BYTES_PER_TILE = BYTES_PER_BAND * 2
BYTES_PER_SPRITE = BYTES_PER_BAND * 8

# Sprite RAM expects the eight 8×4 bands of a sprite in this order, given as
# the (x, y) of the bottom-right pixel of each band relative to the sprite's
# top-left corner. Band numbers as laid out on the sprite:
#
#   5 1
#   6 2
#   7 3
#   4 0
#
# This is a hardware convention, not a traversal pattern.
SPRITE_BAND_ORDER: Tuple[Tuple[int, int], ...] = (
    (15, 15),
    (15, 3),
    (15, 7),
    (15, 11),
    (7, 15),
    (7, 3),
    (7, 7),
    (7, 11),
)


class PixelSource(Protocol):
    """Read-only grid of palette indices."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def color_index_at(self, x: int, y: int) -> int: ...


def encode_color(rgb: Color) -> int:
    """Pack an RGB triple into a ``bbgggrrr`` color byte.

    The upper bits of each channel are kept as-is (no rounding): two bits of
    blue, three of green and three of red.
    """

    r, g, b = rgb
    return (b & 0xC0) | ((g & 0xE0) >> 2) | ((r & 0xE0) >> 5)


def encode_palette(palette: Sequence[Color]) -> bytes:
    if len(palette) != PALETTE_SIZE:
        raise SizeMismatchError("colours", PALETTE_SIZE, len(palette))
    return bytes(encode_color(color) for color in palette)


def encode_8x4(source: PixelSource, x: int, y: int) -> bytes:
    """Encode the 8×4 band whose bottom-right pixel is ``(x, y)``.

    Columns are read right to left and rows bottom to top, so the first byte
    describes column ``x`` and bit 0 of every byte comes from row ``y``.
    """

    out = bytearray(BYTES_PER_BAND)
    for col in range(TILE_SIZE):
        value = 0
        for row in range(BAND_HEIGHT):
            pix = source.color_index_at(x - col, y - row)
            value |= (pix & 0x01) << row
            value |= ((pix & 0x02) >> 1) << (4 + row)
        out[col] = value
    return bytes(out)


def encode_tile(source: PixelSource, x0: int, y0: int) -> bytes:
    """Encode the 8×8 tile whose top-left pixel is ``(x0, y0)``."""

    right = x0 + TILE_SIZE - 1
    # lower band first, then the upper one
    return encode_8x4(source, right, y0 + 7) + encode_8x4(source, right, y0 + 3)


def _grid_shape(source: PixelSource, cell: int, expected: int, what: str) -> Tuple[int, int]:
    cols = source.width // cell
    rows = source.height // cell
    if source.width % cell or source.height % cell or cols * rows != expected:
        raise SizeMismatchError(
            what,
            expected,
            cols * rows,
            detail=f"image is {source.width}x{source.height}",
        )
    return cols, rows


def encode_chars(source: PixelSource) -> bytes:
    """Encode a whole image as 256 8×8 characters in raster order."""

    cols, rows = _grid_shape(source, TILE_SIZE, TILE_COUNT, "8x8 characters")
    out = bytearray()
    for cy in range(rows):
        for cx in range(cols):
            out += encode_tile(source, cx * TILE_SIZE, cy * TILE_SIZE)
    return bytes(out)


def encode_sprite(source: PixelSource, x0: int, y0: int) -> bytes:
    out = bytearray()
    for dx, dy in SPRITE_BAND_ORDER:
        out += encode_8x4(source, x0 + dx, y0 + dy)
    return bytes(out)


def encode_sprites(source: PixelSource) -> bytes:
    """Encode a whole image as 64 16×16 sprites in raster order."""

    cols, rows = _grid_shape(source, SPRITE_SIZE, SPRITE_COUNT, "16x16 sprites")
    out = bytearray()
    for sy in range(rows):
        for sx in range(cols):
            out += encode_sprite(source, sx * SPRITE_SIZE, sy * SPRITE_SIZE)
    return bytes(out)
