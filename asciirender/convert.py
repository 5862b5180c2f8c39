"""Colour conversion, dithering and edge detection on images."""

from __future__ import annotations

import math

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from PIL import Image

from .padding import add_edge_padding, add_padding

SOBEL_X = ((-1, 0, 1), (-2, 0, 2), (-1, 0, 1))
SOBEL_Y = ((-1, -2, -1), (0, 0, 0), (1, 2, 1))


def dither(image: Image.Image) -> np.ndarray:
    """Reduce ``image`` to black and white with Floyd-Steinberg error diffusion."""
    bilevel = image.convert("L").convert("1", dither=Image.Dither.FLOYDSTEINBERG)
    return np.asarray(bilevel.convert("L"), dtype=np.uint8)


def to_grayscale(image: Image.Image) -> np.ndarray:
    """Return the luma of ``image`` as a ``(height, width)`` ``uint8`` array.

    Alpha is premultiplied first, so transparent pixels come out black.
    """
    channels = np.asarray(image.convert("RGBA"), dtype=np.int64)
    alpha = channels[..., 3] * 0x101
    red, green, blue = (
        channels[..., index] * 0x101 * alpha // 0xFFFF for index in range(3)
    )
    luma = (19595 * red + 38470 * green + 7471 * blue + (1 << 15)) >> 24
    return luma.astype(np.uint8)


def _pixel(image: np.ndarray, x: int, y: int) -> int:
    height, width = image.shape
    if 0 <= x < width and 0 <= y < height:
        return int(image[y, x])
    return 0


def edge_response(padded, x: int, y: int, kernel) -> float:
    """Apply a 3x3 ``kernel`` centred on ``(x, y)`` and return the sum over nine.

    Pixels outside ``padded`` read as zero.
    """
    image = np.asarray(padded, dtype=np.uint8)
    total = sum(
        _pixel(image, x + dx, y + dy) * weight
        for dy, row in zip((-1, 0, 1), kernel)
        for dx, weight in zip((-1, 0, 1), row)
    )
    return total / 9


def edge_detection(gray) -> np.ndarray:
    """Return the Sobel gradient magnitude of ``gray`` as a ``uint8`` array."""
    source = np.asarray(gray, dtype=np.uint8)
    windows = sliding_window_view(add_padding(source).astype(np.int64), (3, 3))

    def convolve(kernel) -> np.ndarray:
        return np.einsum("ijkl,kl->ij", windows, np.array(kernel, dtype=np.int64)) / 9

    gx = convolve(SOBEL_X)
    gy = convolve(SOBEL_Y)
    magnitude = np.floor(np.sqrt(gx * gx + gy * gy) + 0.5)
    return magnitude.astype(np.uint8)


def gaussian_blur(gray, sigma: float) -> np.ndarray:
    """Build a Gaussian kernel for ``sigma`` and edge-pad ``gray`` to fit it.

    Raises ``ValueError`` when ``sigma`` is not positive or the kernel
    weights do not sum to exactly one.
    """
    if sigma <= 0:
        raise ValueError("sigma must be positive")

    size = math.floor(2 * (3 * sigma) + 1)
    gap = size // 2

    offsets = np.arange(size, dtype=np.float64) - gap
    power = -(offsets[:, None] ** 2 + offsets[None, :] ** 2)
    scale = 1 / (2 * math.pi * sigma ** 2)
    kernel = scale * np.power(math.e, power / 2 * sigma ** 2)

    total = float(kernel.sum())
    if total != 1.0:
        raise ValueError(
            f"Gaussian kernel weights sum to {total:.10f} instead of 1; "
            "the weight distribution is not balanced"
        )

    return add_edge_padding(gray, gap, gap)