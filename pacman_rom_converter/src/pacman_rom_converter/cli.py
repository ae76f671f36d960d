"""Command line interface for the Pac-Man ROM converter."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .converter import ConvertOptions, convert_png
from .errors import ConversionError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pacman-rom-converter",
        description=(
            "Converts png images to pacman rom files.\n"
            "Input image should be a paletted png file.\n"
            "Characters need a 128x128 image (256 8x8 tiles), sprites a 128x128\n"
            "image (64 16x16 sprites); palette mode needs a 32 colour palette."
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument("infile", help="Paletted PNG to convert")
    parser.add_argument("outfile", help="Destination ROM file")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-p",
        "--palette",
        action="store_true",
        help="Just output palette (32 colour entries)",
    )
    mode.add_argument(
        "-s",
        "--sprites",
        action="store_true",
        help="Convert as 16x16 sprites (default is 8x8 characters)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    options = ConvertOptions(palette_only=args.palette, sprites=args.sprites)
    target = Path(args.outfile)
    try:
        data = convert_png(args.infile, options)
        target.write_bytes(data)
    except ConversionError as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Failed to write {target}: {exc}", file=sys.stderr)
        return 1

    print(f"wrote {target} ({len(data)} bytes, {options.mode} mode)")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
