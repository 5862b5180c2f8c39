"""Border padding for grayscale images held as 2-D ``uint8`` arrays."""

from __future__ import annotations

import numpy as np


def add_padding(image) -> np.ndarray:
    """Return ``image`` with a one-pixel border built from its edge pixels.

    The result is two pixels wider and taller than the input. The top and
    bottom border rows copy the adjacent image rows, and the left border
    column copies its neighbour. The right-hand side is filled in the way
    the edge detector expects: the column at index ``width - 1`` is
    replaced by the column at ``width``, and the outermost right column
    stays black.
    """
    source = np.asarray(image, dtype=np.uint8)
    height, width = source.shape
    padded = np.zeros((height + 2, width + 2), dtype=np.uint8)
    padded[1:-1, 1:-1] = source

    padded[0, 1:-1] = padded[1, 1:-1]
    padded[-1, 1:-1] = padded[-2, 1:-1]

    padded[:, 0] = padded[:, 1]
    padded[:, width - 1] = padded[:, width]
    return padded


def add_edge_padding(image, top_bottom: int, left_right: int) -> np.ndarray:
    """Extend ``image`` by ``top_bottom`` rows and ``left_right`` columns per side.

    Corners take the matching corner pixel, the top and bottom bands repeat
    the first and last rows, the right band repeats the last column and
    left band column ``x`` takes source column ``x`` (black where the
    source has no such column).
    """
    if top_bottom < 0 or left_right < 0:
        raise ValueError("padding sizes must not be negative")

    source = np.asarray(image, dtype=np.uint8)
    old_h, old_w = source.shape
    new_h = old_h + 2 * top_bottom
    new_w = old_w + 2 * left_right

    padded = np.zeros((new_h, new_w), dtype=np.uint8)
    padded[top_bottom:top_bottom + old_h, left_right:left_right + old_w] = source

    if old_h == 0 or old_w == 0:
        return padded

    padded[:top_bottom, :left_right] = source[0, 0]
    padded[:top_bottom, new_w - left_right:] = source[0, -1]
    padded[new_h - top_bottom:, :left_right] = source[-1, 0]
    padded[new_h - top_bottom:, new_w - left_right:] = source[-1, -1]

    inner_cols = slice(left_right, left_right + old_w)
    padded[:top_bottom, inner_cols] = source[0]
    padded[new_h - top_bottom:, inner_cols] = source[-1]

    inner_rows = slice(top_bottom, top_bottom + old_h)
    for column in range(left_right):
        padded[inner_rows, column] = source[:, column] if column < old_w else 0
        padded[inner_rows, new_w - 1 - column] = source[:, -1]

    return padded