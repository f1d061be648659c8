"""Loading PNG images into ARGB bitmaps."""

from __future__ import annotations

import io
import os
from pathlib import Path

from PIL import Image

from .bitmap import Bitmap


class ImageLoadError(Exception):
    """Raised when an image file cannot be read or decoded."""


def load_image(filename: str | os.PathLike) -> Bitmap:
    """Load a PNG file as a bitmap of 0xAARRGGBB pixels."""
    try:
        raw = Path(filename).read_bytes()
    except OSError as exc:
        raise ImageLoadError(f"failed to read file {filename}") from exc
    if not raw:
        raise ImageLoadError(f"failed to read file {filename}")

    try:
        with Image.open(io.BytesIO(raw)) as img:
            if img.format != "PNG":
                raise ImageLoadError(f"failed to load data from {filename}")
            rgba = img.convert("RGBA")
            width, height = rgba.size
            pixels = rgba.tobytes()
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise ImageLoadError(f"failed to load data from {filename}") from exc

    channels = iter(pixels)
    data = [
        (a << 24) | (r << 16) | (g << 8) | b
        for r, g, b, a in zip(channels, channels, channels, channels)
    ]
    return Bitmap(width, height, data)