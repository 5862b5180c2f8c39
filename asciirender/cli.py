"""Command line entry point: render a PNG image as text sized to the terminal."""

from __future__ import annotations

import argparse
import math
import os
import sys
from pathlib import Path

from PIL import Image

from .convert import edge_detection, to_grayscale
from .debug import save_debug_image
from .render import render_ascii_with_edges
from .scale import bilinear_scale_gray, max_pooling_gray

DEBUG_DIR = Path("img")


def terminal_size() -> tuple[int, int]:
    """Return the ``(columns, lines)`` of the terminal on standard output.

    Raises ``OSError`` when standard output is not a terminal or its size
    cannot be read.
    """
    stream = sys.stdout
    if stream is None or not stream.isatty():
        raise OSError("standard output is not a terminal")
    size = os.get_terminal_size(stream.fileno())
    return size.columns, size.lines


def _load_png(handle) -> Image.Image:
    picture = Image.open(handle)
    if picture.format != "PNG":
        raise ValueError("image: unknown format")
    picture.load()
    return picture


def _scale_divisor(image_w: int, image_h: int, columns: int, lines: int) -> int:
    width_divisor = image_w / (columns * 2)
    height_divisor = image_h / lines
    divisor = int(math.floor(max(width_divisor, height_divisor) + 0.5))
    if divisor == 0:
        raise ValueError("image is too small to scale to the terminal")
    return divisor


def _run(image_path: str) -> None:
    with open(image_path, "rb") as handle:
        columns, lines = terminal_size()
        picture = _load_png(handle)

    image_w, image_h = picture.size

    gray = to_grayscale(picture)
    save_debug_image(gray, DEBUG_DIR / "greyResult.jpg")

    edges = edge_detection(gray)
    save_debug_image(edges, DEBUG_DIR / "edgeDetectionResult.jpg")

    divisor = _scale_divisor(image_w, image_h, columns, lines)
    target_w = image_w // divisor
    target_h = image_h // divisor

    scaled = bilinear_scale_gray(gray, target_w, target_h)
    save_debug_image(scaled, DEBUG_DIR / "scaleResult.jpg")

    edges = max_pooling_gray(edges, target_w, target_h)
    save_debug_image(edges, DEBUG_DIR / "edgeImageScale.jpg")

    sys.stdout.write(render_ascii_with_edges(scaled, edges))
    print(
        f"Original Width  : {image_w}, To {scaled.shape[1]}, "
        f"With Max Window Size {columns}"
    )
    print(
        f"Original Height : {image_h}, T0 {scaled.shape[0]}, "
        f"With Max Window Size {lines}"
    )
    print("Done")


def main(argv=None) -> int:
    """Render the image given with ``-i`` and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="asciirender", description="Render an image as text in the terminal."
    )
    parser.add_argument("-i", dest="image_path", default="", help="Image To Process")
    args = parser.parse_args(argv)

    if not args.image_path:
        print("No Image To Play With", end="")

    try:
        _run(args.image_path)
    except (OSError, ValueError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())