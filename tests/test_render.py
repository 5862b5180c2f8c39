import numpy as np
import pytest

from asciirender.render import (
    DENSITY,
    DENSITY_CHARS,
    EDGE_CHARS,
    edge_threshold,
    render_ascii,
    render_ascii_with_edges,
)


def test_render_ascii_black_uses_first_character():
    text = render_ascii(np.zeros((2, 3), dtype=np.uint8))
    assert text == DENSITY[0] * 3 + "\n" + DENSITY[0] * 3 + "\n"


def test_render_ascii_white_uses_last_character():
    text = render_ascii(np.full((1, 4), 255, dtype=np.uint8))
    assert text == DENSITY[-1] * 4 + "\n"


def test_render_ascii_shape():
    rng = np.random.default_rng(3)
    img = rng.integers(0, 256, size=(5, 7), dtype=np.uint8)
    lines = render_ascii(img).splitlines()
    assert len(lines) == 5
    assert all(len(line) == 7 for line in lines)
    assert all(set(line) <= set(DENSITY) for line in lines)


def test_render_ascii_rejects_colour():
    with pytest.raises(ValueError):
        render_ascii(np.zeros((2, 2, 3), dtype=np.uint8))


def test_threshold_of_constant_edges_is_the_value():
    edges = np.full((3, 3), 10, dtype=np.uint8)
    assert edge_threshold(edges, 1.3) == 10.0


def test_threshold_with_zero_variance_is_mean():
    edges = np.array([[0, 2]], dtype=np.uint8)
    assert edge_threshold(edges, 0) == 1.0


def test_threshold_is_linear_in_variance():
    edges = np.array([[0, 10, 40], [5, 200, 7]], dtype=np.uint8)
    step_up = edge_threshold(edges, 1) - edge_threshold(edges, 0)
    step_down = edge_threshold(edges, 0) - edge_threshold(edges, -1)
    assert step_up == pytest.approx(step_down)
    assert step_up > 0


def test_threshold_single_pixel_is_nan():
    result = edge_threshold(np.array([[9]], dtype=np.uint8), 1.3)
    assert str(float(result)) == "nan"


def test_no_edges_uses_density_characters():
    gray = np.array([[0, 255]], dtype=np.uint8)
    edges = np.zeros((1, 2), dtype=np.uint8)
    assert render_ascii_with_edges(gray, edges) == DENSITY_CHARS[0] + DENSITY_CHARS[-1] + "\n"


def test_strong_edge_uses_edge_character():
    gray = np.zeros((4, 4), dtype=np.uint8)
    edges = np.zeros((4, 4), dtype=np.uint8)
    edges[2, 1] = 255
    lines = render_ascii_with_edges(gray, edges).splitlines()
    assert lines[2][1] == EDGE_CHARS[0]
    assert lines[0] == DENSITY_CHARS[0] * 4


def test_bright_edge_uses_last_edge_character():
    gray = np.full((4, 4), 255, dtype=np.uint8)
    edges = np.zeros((4, 4), dtype=np.uint8)
    edges[0, 0] = 255
    lines = render_ascii_with_edges(gray, edges).splitlines()
    assert lines[0][0] == EDGE_CHARS[-1]


def test_smaller_edge_image_reads_zero_outside():
    gray = np.zeros((2, 4), dtype=np.uint8)
    edges = np.array([[0, 255, 0, 0]], dtype=np.uint8)
    text = render_ascii_with_edges(gray, edges)
    assert text == " .  \n    \n"


def test_render_with_edges_shape():
    rng = np.random.default_rng(11)
    gray = rng.integers(0, 256, size=(6, 9), dtype=np.uint8)
    edges = rng.integers(0, 256, size=(6, 9), dtype=np.uint8)
    lines = render_ascii_with_edges(gray, edges).splitlines()
    assert len(lines) == 6
    assert all(len(line) == 9 for line in lines)
    assert all(set(line) <= set(DENSITY_CHARS) | set(EDGE_CHARS) for line in lines)