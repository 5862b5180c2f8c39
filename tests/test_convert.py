import numpy as np
import pytest
from PIL import Image

from asciirender.convert import (
    SOBEL_X,
    SOBEL_Y,
    dither,
    edge_detection,
    edge_response,
    gaussian_blur,
    to_grayscale,
)
from asciirender.padding import add_padding


def _gradient(height=6, width=7):
    return (np.arange(height * width).reshape(height, width) * 5 % 256).astype(np.uint8)


def test_grayscale_of_gray_image_is_identity():
    values = _gradient()
    result = to_grayscale(Image.fromarray(values))
    assert result.shape == values.shape
    assert np.array_equal(result, values)


def test_grayscale_extremes():
    white = to_grayscale(Image.new("RGB", (3, 2), (255, 255, 255)))
    black = to_grayscale(Image.new("RGB", (3, 2), (0, 0, 0)))
    assert np.array_equal(white, np.full((2, 3), 255, dtype=np.uint8))
    assert np.array_equal(black, np.zeros((2, 3), dtype=np.uint8))


def test_grayscale_pure_red():
    result = to_grayscale(Image.new("RGB", (2, 2), (255, 0, 0)))
    assert np.array_equal(result, np.full((2, 2), 76, dtype=np.uint8))


def test_grayscale_transparent_is_black():
    result = to_grayscale(Image.new("RGBA", (4, 3), (255, 255, 255, 0)))
    assert result.shape == (3, 4)
    assert not result.any()


def test_dither_is_bilevel():
    image = Image.fromarray(_gradient(16, 16))
    result = dither(image)
    assert result.shape == (16, 16)
    assert set(np.unique(result)) <= {0, 255}


def test_dither_solid_images():
    white = dither(Image.new("L", (5, 5), 255))
    black = dither(Image.new("L", (5, 5), 0))
    assert np.array_equal(white, np.full((5, 5), 255, dtype=np.uint8))
    assert np.array_equal(black, np.zeros((5, 5), dtype=np.uint8))


def test_edge_response_uniform_is_zero():
    patch = np.full((3, 3), 90, dtype=np.uint8)
    assert edge_response(patch, 1, 1, SOBEL_X) == 0.0
    assert edge_response(patch, 1, 1, SOBEL_Y) == 0.0


def test_edge_response_ones_kernel_is_mean():
    patch = np.array([[1, 2, 3], [4, 5, 6], [7, 8, 9]], dtype=np.uint8)
    ones = ((1, 1, 1),) * 3
    assert edge_response(patch, 1, 1, ones) == pytest.approx(patch.mean())


def test_edge_response_mirror_negates():
    patch = np.array([[0, 10, 200], [30, 40, 250], [5, 60, 90]], dtype=np.uint8)
    mirrored = patch[:, ::-1].copy()
    assert edge_response(mirrored, 1, 1, SOBEL_X) == -edge_response(patch, 1, 1, SOBEL_X)


def test_edge_detection_shape():
    image = _gradient()
    edges = edge_detection(image)
    assert edges.shape == image.shape
    assert edges.dtype == np.uint8


def test_edge_detection_uniform_interior_is_flat():
    edges = edge_detection(np.full((5, 6), 100, dtype=np.uint8))
    assert not edges[:, :-1].any()


def test_edge_detection_matches_edge_response():
    image = _gradient()
    padded = add_padding(image)
    edges = edge_detection(image)
    for y, x in [(0, 0), (2, 3), (5, 6), (3, 1)]:
        gx = edge_response(padded, x + 1, y + 1, SOBEL_X)
        gy = edge_response(padded, x + 1, y + 1, SOBEL_Y)
        assert edges[y, x] == int(np.floor(np.hypot(gx, gy) + 0.5))


def test_gaussian_blur_unbalanced_kernel_raises():
    with pytest.raises(ValueError):
        gaussian_blur(_gradient(), 1)


def test_gaussian_blur_rejects_non_positive_sigma():
    with pytest.raises(ValueError):
        gaussian_blur(_gradient(), 0)
    with pytest.raises(ValueError):
        gaussian_blur(_gradient(), -2)