"""Turning grayscale images into lines of text characters."""

from __future__ import annotations

import math

import numpy as np

# Ordered from the darkest-looking character to the lightest.
DENSITY = "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`'. "
DENSITY_CHARS = " .:-=+*#%@"
EDGE_CHARS = ".,:;!?\"')([]}{/<>\\|+=*#@"
EDGE_VARIANCE = 1.3


def _as_gray(image) -> np.ndarray:
    array = np.asarray(image, dtype=np.uint8)
    if array.ndim != 2:
        raise ValueError("expected a 2-D grayscale image")
    return array


def _join(characters: np.ndarray) -> str:
    return "".join("".join(row) + "\n" for row in characters)


def render_ascii(gray) -> str:
    """Map each pixel of ``gray`` to a character of ``DENSITY``, one line per row."""
    source = _as_gray(gray)
    palette = np.array(list(DENSITY))
    indices = source.astype(np.int64) * (len(DENSITY) - 1) // 255
    return _join(palette[indices])


def edge_threshold(edges, variance: float) -> float:
    """Return the mean edge magnitude plus ``variance`` sample standard deviations.

    The result is NaN when ``edges`` has fewer than two pixels.
    """
    values = np.asarray(edges, dtype=np.uint8).ravel()
    count = values.size
    mean = int(values.sum(dtype=np.int64)) / count if count else math.nan
    if count > 1:
        deviation = math.sqrt(float(((values - mean) ** 2).sum()) / (count - 1))
    else:
        deviation = math.nan
    return mean + variance * deviation


def render_ascii_with_edges(gray, edges) -> str:
    """Render ``gray`` as text, using ``EDGE_CHARS`` where ``edges`` is strong.

    A pixel counts as an edge when its magnitude exceeds the threshold from
    ``edge_threshold`` with ``EDGE_VARIANCE``. Pixels outside ``edges``
    read as zero.
    """
    source = _as_gray(gray)
    edge_map = _as_gray(edges)
    threshold = edge_threshold(edge_map, EDGE_VARIANCE)

    aligned = np.zeros_like(source)
    rows = min(source.shape[0], edge_map.shape[0])
    cols = min(source.shape[1], edge_map.shape[1])
    aligned[:rows, :cols] = edge_map[:rows, :cols]

    fraction = source.astype(np.float64) / 255.0
    density_index = np.floor(fraction * (len(DENSITY_CHARS) - 1)).astype(np.intp)
    edge_index = np.floor(fraction * (len(EDGE_CHARS) - 1)).astype(np.intp)

    is_edge = aligned.astype(np.float64) > threshold
    characters = np.where(
        is_edge,
        np.array(list(EDGE_CHARS))[edge_index],
        np.array(list(DENSITY_CHARS))[density_index],
    )
    return _join(characters)