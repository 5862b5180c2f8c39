"""Resampling of grayscale and RGBA images held as ``uint8`` arrays.

Grayscale images are ``(height, width)`` arrays; RGBA images are
``(height, width, 4)`` arrays of premultiplied 8-bit channels.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import numpy as np

_INV_LN2 = 1.4426950408889634


def _as_gray(image) -> np.ndarray:
    array = np.asarray(image, dtype=np.uint8)
    if array.ndim != 2:
        raise ValueError("expected a 2-D grayscale image")
    return array


def _as_rgba(image) -> np.ndarray:
    array = np.asarray(image, dtype=np.uint8)
    if array.ndim != 3 or array.shape[2] != 4:
        raise ValueError("expected a (height, width, 4) RGBA image")
    return array


def _check_size(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ValueError("target size must not be negative")


def _round_half_up(values) -> np.ndarray:
    values = np.asarray(values, dtype=np.float64)
    whole = np.floor(values)
    return whole + (values - whole >= 0.5)


@dataclass(frozen=True)
class BilinearSample:
    """The four neighbours ``(x1, y1)`` to ``(x2, y2)`` of a sampling point.

    Coordinates may be integers or broadcastable integer arrays, so one
    sample can describe a whole grid of points at once.
    """

    image: np.ndarray
    x1: Any
    x2: Any
    y1: Any
    y2: Any

    def _corners(self) -> tuple:
        image = self.image
        return (
            image[self.y1, self.x1],
            image[self.y1, self.x2],
            image[self.y2, self.x1],
            image[self.y2, self.x2],
        )

    @staticmethod
    def _blend(top_left, top_right, bottom_left, bottom_right, dx, dy):
        return (
            (top_left * ((1 - dx) * (1 - dy)))
            + (top_right * (dx * (1 - dy)))
            + (bottom_left * ((1 - dx) * dy))
            + (bottom_right * (dx * dy))
        )

    @staticmethod
    def _unwrap(value):
        return float(value) if np.ndim(value) == 0 else value

    def gray(self, dx, dy):
        """Interpolate a grayscale image with weights ``dx`` and ``dy``."""
        corners = [np.asarray(corner, dtype=np.float64) for corner in self._corners()]
        return self._unwrap(self._blend(*corners, dx, dy))

    def rgba(self, dx, dy) -> tuple:
        """Interpolate an RGBA image; channels come back on the 16-bit scale."""
        corners = [
            np.asarray(corner, dtype=np.float64) * 0x101 for corner in self._corners()
        ]
        return tuple(
            self._unwrap(
                self._blend(*(corner[..., channel] for corner in corners), dx, dy)
            )
            for channel in range(4)
        )


def _axis(source_len: int, target_len: int):
    scale = source_len / target_len
    position = scale * (np.arange(target_len, dtype=np.float64) + 0.5) - 0.5
    position = np.maximum(0.0, np.minimum(source_len - 1, position))
    low = np.floor(position).astype(np.intp)
    high = np.minimum(low + 1, source_len - 1)
    return low, high, position - low


def _grid(image: np.ndarray, width: int, height: int):
    source_h, source_w = image.shape[:2]
    x1, x2, dx = _axis(source_w, width)
    y1, y2, dy = _axis(source_h, height)
    sample = BilinearSample(image, x1[None, :], x2[None, :], y1[:, None], y2[:, None])
    return sample, dx[None, :], dy[:, None]


def nearest_neighbor_scale(gray, width: int, height: int) -> np.ndarray:
    """Resize ``gray`` to ``width`` x ``height`` by nearest-neighbour sampling."""
    source = _as_gray(gray)
    _check_size(width, height)
    if width == 0 or height == 0 or source.size == 0:
        return np.zeros((height, width), dtype=np.uint8)

    source_h, source_w = source.shape
    xs = np.rint((source_w / width) * np.arange(width, dtype=np.float64))
    ys = np.rint((source_h / height) * np.arange(height, dtype=np.float64))
    xs = np.clip(xs, 0, source_w - 1).astype(np.intp)
    ys = np.clip(ys, 0, source_h - 1).astype(np.intp)
    return source[np.ix_(ys, xs)].copy()


def bilinear_scale_gray(gray, width: int, height: int) -> np.ndarray:
    """Resize ``gray`` to ``width`` x ``height`` with centre-aligned bilinear sampling."""
    source = _as_gray(gray)
    _check_size(width, height)
    if width == 0 or height == 0 or source.size == 0:
        return np.zeros((height, width), dtype=np.uint8)

    sample, dx, dy = _grid(source, width, height)
    return _round_half_up(sample.gray(dx, dy)).astype(np.uint8)


def bilinear_scale_rgba(rgba, width: int, height: int) -> np.ndarray:
    """Resize an RGBA image to ``width`` x ``height`` with bilinear sampling."""
    source = _as_rgba(rgba)
    _check_size(width, height)
    if width == 0 or height == 0 or source.shape[0] == 0 or source.shape[1] == 0:
        return np.zeros((height, width, 4), dtype=np.uint8)

    sample, dx, dy = _grid(source, width, height)
    channels = [
        _round_half_up(channel).astype(np.uint16) >> 8
        for channel in sample.rgba(dx, dy)
    ]
    return np.stack(channels, axis=-1).astype(np.uint8)


def _log2(value: float) -> float:
    fraction, exponent = math.frexp(value)
    if fraction == 0.5:
        return float(exponent - 1)
    return math.log(fraction) * _INV_LN2 + exponent


def _stride(ratio: float) -> int:
    if not ratio > 0 or math.isinf(ratio):
        raise ValueError("cannot pool an image to this size")
    stride = int(math.pow(2.0, _log2(ratio)))
    if stride < 1:
        raise ValueError("max pooling cannot enlarge an image")
    return stride


def max_pooling_gray(gray, width: int, height: int) -> np.ndarray:
    """Shrink ``gray`` by taking the maximum of each pooling block.

    The block size on each axis is the integer part of the size ratio.
    When the pooled image does not come out at exactly ``width`` x
    ``height``, it is rescaled bilinearly to ``height`` x ``height``.
    """
    source = _as_gray(gray)
    if width <= 0 or height <= 0:
        raise ValueError("target size must be positive")

    source_h, source_w = source.shape
    stride_y = _stride(source_h / height)
    stride_x = _stride(source_w / width)

    actual_w = source_w // stride_x
    actual_h = source_h // stride_y

    if actual_w == 0 or actual_h == 0:
        pooled = np.zeros((actual_h, actual_w), dtype=np.uint8)
    else:
        blocks = source[: actual_h * stride_y, : actual_w * stride_x].reshape(
            actual_h, stride_y, actual_w, stride_x
        )
        pooled = blocks.max(axis=(1, 3))

    if height != actual_h or width != actual_w:
        pooled = bilinear_scale_gray(pooled, height, height)
    return pooled