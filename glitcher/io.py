"""Decode and encode rasters: still images, animated GIFs, output names."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import numpy as np
from PIL import Image

from glitcher.core import OUTPUT_NAME_PATTERN, validate_raster
from glitcher.sequence import Frame

logger = logging.getLogger(__name__)

LOSSLESS_EXTS = {".png"}
LOSSY_EXTS = {".jpg", ".jpeg"}


def load_image(path: str) -> np.ndarray:
    """Load any Pillow-readable image as a (H, W, 4) uint8 RGBA raster."""
    with Image.open(path) as img:
        return np.array(img.convert("RGBA"))


def _ensure_parent(path: str) -> None:
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)


def save_image(path: str, raster: np.ndarray, quality: int = 75) -> None:
    """Write a still image, picking the encoder from the file extension.

    .png keeps RGBA losslessly; .jpg/.jpeg drops alpha and encodes lossy.
    """
    validate_raster(raster)
    ext = Path(path).suffix.lower()
    img = Image.fromarray(raster)

    if ext in LOSSLESS_EXTS:
        _ensure_parent(path)
        img.save(path, "PNG")
    elif ext in LOSSY_EXTS:
        _ensure_parent(path)
        img.convert("RGB").save(path, "JPEG", quality=quality)
    else:
        raise ValueError(f"Unsupported image format: {ext or path}")
    logger.debug("Wrote %s", path)


def to_paletted(raster: np.ndarray) -> Image.Image:
    """Reduce a frame to the fixed web palette with Floyd-Steinberg dithering."""
    rgb = Image.fromarray(raster).convert("RGB")
    return rgb.convert("P", palette=Image.Palette.WEB, dither=Image.Dither.FLOYDSTEINBERG)


def save_gif(path: str, frames: list[Frame]) -> None:
    """Write frames as a looping animated GIF.

    Frame delays are in hundredths of a second, as GIF stores them.
    """
    if not frames:
        raise ValueError("No frames to write")

    images = [to_paletted(f.raster) for f in frames]
    durations = [f.delay * 10 for f in frames]

    _ensure_parent(path)
    images[0].save(
        path,
        format="GIF",
        save_all=True,
        append_images=images[1:],
        duration=durations,
        loop=0,
    )
    logger.debug("Wrote %d frames to %s", len(images), path)


def random_output_name(extension: str, rng: np.random.Generator | None = None) -> str:
    """Name like glitched-image-04821.png for when no output path is given."""
    if rng is None:
        rng = np.random.default_rng()
    return OUTPUT_NAME_PATTERN.format(int(rng.integers(0, 100000)), extension)
