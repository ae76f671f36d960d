"""Convert paletted images into Pac-Man tile, sprite or palette ROM data."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Literal

from PIL import Image

from .encoder import (
    BYTES_PER_SPRITE,
    BYTES_PER_TILE,
    PALETTE_SIZE,
    SPRITE_COUNT,
    TILE_COUNT,
    Color,
    encode_chars,
    encode_palette,
    encode_sprites,
)
from .errors import ConversionError, NotPalettedError

Mode = Literal["palette", "tile", "sprite"]

OUTPUT_SIZES = {
    "palette": PALETTE_SIZE,
    "tile": TILE_COUNT * BYTES_PER_TILE,
    "sprite": SPRITE_COUNT * BYTES_PER_SPRITE,
}


@dataclass
class ConvertOptions:
    """Which ROM to produce. Tile mode is used when neither flag is set."""

    palette_only: bool = False
    sprites: bool = False

    @property
    def mode(self) -> Mode:
        if self.palette_only:
            return "palette"
        if self.sprites:
            return "sprite"
        return "tile"


@dataclass(frozen=True)
class IndexedImage:
    """Palette indices of an image in row-major order, plus its palette."""

    width: int
    height: int
    indices: bytes
    palette: List[Color]

    def color_index_at(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ConversionError(
                f"Pixel ({x}, {y}) is outside the {self.width}x{self.height} image"
            )
        return self.indices[y * self.width + x]


def expected_output_size(mode: Mode) -> int:
    try:
        return OUTPUT_SIZES[mode]
    except KeyError as exc:
        raise ConversionError(f"Unknown conversion mode: {mode}") from exc


def indexed_image_from_pil(image: Image.Image) -> IndexedImage:
    if image.mode != "P":
        raise NotPalettedError(f"Image is not paletted (mode {image.mode})")

    raw_palette = image.getpalette() or []
    palette: List[Color] = [
        (raw_palette[i], raw_palette[i + 1], raw_palette[i + 2])
        for i in range(0, len(raw_palette) - 2, 3)
    ]
    width, height = image.size
    return IndexedImage(width, height, image.tobytes(), palette)


def convert_image(image: Image.Image, options: ConvertOptions | None = None) -> bytes:
    """Convert an in-memory paletted image to ROM bytes."""

    options = options or ConvertOptions()
    indexed = indexed_image_from_pil(image)

    mode = options.mode
    if mode == "palette":
        return encode_palette(indexed.palette)
    if mode == "sprite":
        return encode_sprites(indexed)
    return encode_chars(indexed)


def convert_png(path: str | Path, options: ConvertOptions | None = None) -> bytes:
    path = Path(path)
    try:
        with Image.open(path) as img:
            return convert_image(img, options)
    except FileNotFoundError as exc:
        raise ConversionError(f"Input file not found: {path}") from exc
    except OSError as exc:
        raise ConversionError(f"Failed to read image: {path}") from exc
