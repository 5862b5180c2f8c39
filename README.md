# asciirender

Turn a PNG image into ASCII art sized to your terminal window.

The image is converted to grayscale and a Sobel edge map is computed from it.
Both are then scaled down to fit the terminal: bilinear interpolation for the
image, max pooling for the edges. Each cell is drawn as a character. Cells
whose edge magnitude is above the mean plus 1.3 sample standard deviations
use characters from an edge set (`EDGE_CHARS`); all other cells use a plain
density ramp (`DENSITY_CHARS`).

## Installation

```
pip install .
```

## Command line

```
asciirender -i path/to/picture.png
```

- Only PNG files are accepted; any other format is reported as an error.
- Standard output must be a real terminal, because its size decides the scale.
  The scale divisor is the larger of `image width / (2 × columns)` and
  `image height / lines`, rounded to the nearest whole number.
- While it runs, the command saves intermediate images as JPEG files under
  `./img/`. Create that directory first, or the command stops with an error:
  - `greyResult.jpg`
  - `edgeDetectionResult.jpg`
  - `scaleResult.jpg`
  - `edgeImageScale.jpg`
- After the picture, it prints the original and scaled width and height.

Errors (missing file, not a terminal, wrong format, image too small to scale)
are printed to standard error and the command exits with status 1.

## Library

Images are handled as NumPy `uint8` arrays: grayscale images are
`(height, width)`, RGBA images are `(height, width, 4)`.

```python
from PIL import Image

from asciirender.convert import to_grayscale, edge_detection
from asciirender.scale import bilinear_scale_gray, max_pooling_gray
from asciirender.render import render_ascii_with_edges

picture = Image.open("picture.png")
gray = to_grayscale(picture)
edges = edge_detection(gray)

small = bilinear_scale_gray(gray, 80, 40)
small_edges = max_pooling_gray(edges, 80, 40)
print(render_ascii_with_edges(small, small_edges), end="")
```

The render functions return the text (one line per row, each ending in a
newline); they do not print it.

### Modules

- `asciirender.convert`
  - `to_grayscale(image)`: luma of a PIL image, with alpha premultiplied.
  - `dither(image)`: black-and-white Floyd–Steinberg dithering.
  - `edge_detection(gray)`: Sobel gradient magnitude (kernel sums divided by nine).
  - `edge_response(padded, x, y, kernel)`: one 3×3 kernel response at a point.
  - `gaussian_blur(gray, sigma)`: see the limits below.
- `asciirender.scale`
  - `nearest_neighbor_scale`, `bilinear_scale_gray`, `bilinear_scale_rgba`.
  - `max_pooling_gray(gray, width, height)`: pools with a block size equal to
    the integer part of the size ratio on each axis. If the result is not
    exactly `width` × `height`, it is rescaled bilinearly to
    `height` × `height`.
  - `BilinearSample`: the four neighbours of a sampling point, with `gray()`
    and `rgba()` interpolation.
- `asciirender.render`
  - `render_ascii(gray)`: draws with the single `DENSITY` ramp.
  - `edge_threshold(edges, variance)`: mean plus `variance` sample standard
    deviations.
  - `render_ascii_with_edges(gray, edges)`.
- `asciirender.padding`
  - `add_padding(image)` and `add_edge_padding(image, top_bottom, left_right)`:
    replicate border pixels outward.
- `asciirender.debug`
  - `save_debug_image(image, path)`: writes a PIL image or array as JPEG.

## Limits

- `gaussian_blur` does not blur. It builds a Gaussian kernel for `sigma`,
  raises `ValueError` unless the kernel weights sum to exactly one, and
  otherwise returns the image edge-padded to the kernel's radius.
- The command reads PNG only and always writes its debug JPEGs; there is no
  option to turn them off or to choose another output size.

## Running the tests

```
pip install .[test]
pytest
```