#!/usr/bin/env python3
"""
AsciiRender Demo - Image to ASCII art conversion and PNG export

Usage:
    # Convert an image to text and PNG
    python -m AsciiRender.demo convert --file photo.jpg --cols 120 --txt art.txt --png art.png

    # Render an existing text file to PNG at 2x density
    python -m AsciiRender.demo render --file art.txt -o art.png --dpr 2
"""

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .core import AsciiRenderError, MissingImageError


def cmd_convert(args):
    """Convert an image to ASCII art."""
    from .api import convert_and_render, save_text, save_png

    if not args.file:
        raise MissingImageError("Please provide --file")

    artifact, surface = convert_and_render(
        args.file,
        cols=args.cols,
        font_family=args.font,
        font_size=args.font_size,
        display_font_size=args.display_font_size,
        dpr=args.dpr,
        transparent_blank=args.transparent_blank,
        strategy=args.strategy,
    )
    print(f"[Convert] {args.file} -> {artifact.cols}x{artifact.rows} chars")

    if args.print or not (args.txt or args.png):
        print(artifact.text)
    if args.txt:
        save_text(artifact, args.txt)
        print(f"Saved to {args.txt}")
    if args.png:
        save_png(surface, args.png)
        print(f"Saved to {args.png} ({surface.physical_width}x{surface.physical_height}, dpr {surface.dpr:g})")


def cmd_render(args):
    """Render an ASCII art text file to PNG."""
    from .api import render_ascii_to_image, save_png

    if not args.file:
        raise MissingImageError("Please provide --file")
    path = Path(args.file)
    if not path.is_file():
        raise MissingImageError(f"File not found: {args.file}")

    text = path.read_text(encoding="utf-8")
    surface = render_ascii_to_image(
        text, font_family=args.font, font_size=args.font_size, dpr=args.dpr
    )
    output = args.output or path.with_suffix(".png").name
    save_png(surface, output)
    print(f"Saved to {output} ({surface.physical_width}x{surface.physical_height})")


def _add_font_args(p):
    p.add_argument("--font", default=config.ASCII_FONT_FAMILY, help="Font family or font file")
    p.add_argument("--font-size", type=float, default=config.ASCII_FONT_SIZE)
    p.add_argument("--dpr", type=float, default=config.ASCII_DPR, help="Device pixel ratio")


def main(argv=None):
    parser = argparse.ArgumentParser(description="AsciiRender Demo")
    parser.add_argument("--verbose", "-v", action="store_true")
    sub = parser.add_subparsers(dest="command")

    # convert
    p = sub.add_parser("convert", help="Convert an image to ASCII art")
    p.add_argument("--file", type=str, help="Source image")
    p.add_argument("--cols", type=str, default=str(config.ASCII_DEFAULT_COLS),
                   help=f"Columns ({config.ASCII_MIN_COLS}-{config.ASCII_MAX_COLS})")
    _add_font_args(p)
    p.add_argument("--display-font-size", type=float, default=config.ASCII_DISPLAY_FONT_SIZE)
    p.add_argument("--strategy", default=config.ASCII_METRICS_STRATEGY, choices=["bbox", "advance"])
    p.add_argument("--transparent-blank", action="store_true", default=config.ASCII_TRANSPARENT_BLANK)
    p.add_argument("--txt", type=str, help="Write text to this path")
    p.add_argument("--png", type=str, help="Write PNG to this path")
    p.add_argument("--print", action="store_true", help="Print the text")

    # render
    p = sub.add_parser("render", help="Render an ASCII art text file to PNG")
    p.add_argument("--file", type=str, help="ASCII art text file")
    p.add_argument("--output", "-o", type=str)
    _add_font_args(p)

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    commands = {"convert": cmd_convert, "render": cmd_render}
    if args.command not in commands:
        parser.print_help()
        return 0

    try:
        commands[args.command](args)
    except AsciiRenderError as e:
        print(f"[Error] {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
