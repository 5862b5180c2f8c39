"""Writing intermediate images to disk for inspection."""

from __future__ import annotations

import os

import numpy as np
from PIL import Image


def save_debug_image(image, path: str | os.PathLike) -> None:
    """Encode ``image`` (a PIL image or a 2-D ``uint8`` array) as JPEG at ``path``."""
    if isinstance(image, Image.Image):
        picture = image
    else:
        picture = Image.fromarray(np.asarray(image, dtype=np.uint8))

    if picture.mode == "1":
        picture = picture.convert("L")
    elif picture.mode not in ("L", "RGB", "CMYK"):
        picture = picture.convert("RGB")

    picture.save(path, format="JPEG", quality=75)