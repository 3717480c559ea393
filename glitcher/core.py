"""Raster model, chunk mover, and shared constants.

A raster is a (H, W, 4) uint8 numpy array holding RGBA pixels in row-major
order. Every effect reads and writes through one of these in place.
"""

from __future__ import annotations

import numpy as np

from glitcher.errors import InvalidParameter

MIN_INTENSITY = 0.1
MAX_INTENSITY = 9.0
DEFAULT_INTENSITY = 5.0
DEFAULT_FRAMES = 10
DEFAULT_DELAY = 10
OUTPUT_NAME_PATTERN = "glitched-image-{:05d}{}"

OPAQUE_BLACK = (0, 0, 0, 255)
TRANSPARENT_BLACK = (0, 0, 0, 0)


def validate_raster(raster) -> None:
    """Reject anything that is not a non-empty (H, W, 4) uint8 array."""
    if not isinstance(raster, np.ndarray):
        raise InvalidParameter(f"Raster must be a numpy array, got {type(raster).__name__}")
    if raster.dtype != np.uint8:
        raise InvalidParameter(f"Raster must be uint8, got {raster.dtype}")
    if raster.ndim != 3 or raster.shape[2] != 4:
        raise InvalidParameter(f"Raster must have shape (H, W, 4), got {raster.shape}")
    h, w = raster.shape[:2]
    if h <= 0 or w <= 0:
        raise InvalidParameter(f"Raster dimensions must be positive, got {w}x{h}")


def blank(width: int, height: int, color: tuple[int, int, int, int] = TRANSPARENT_BLACK) -> np.ndarray:
    """Create a (height, width, 4) raster filled with a single RGBA color."""
    if width <= 0 or height <= 0:
        raise InvalidParameter(f"Raster dimensions must be positive, got {width}x{height}")
    raster = np.empty((height, width, 4), dtype=np.uint8)
    raster[:, :] = color
    return raster


def dimensions(raster: np.ndarray) -> tuple[int, int]:
    """Return (width, height)."""
    return raster.shape[1], raster.shape[0]


def extract_chunk(raster: np.ndarray, y0: int, y1: int, x0: int, x1: int) -> np.ndarray:
    """Copy the region [y0, y1) x [x0, x1) into a new buffer.

    Coordinates must already be in bounds; no wrap-around is applied here.
    """
    return raster[y0:y1, x0:x1].copy()


def place_chunk(raster: np.ndarray, chunk: np.ndarray, y0: int, y1: int, x0: int, x1: int) -> None:
    """Write a chunk back into a target rectangle of exactly the same size."""
    raster[y0:y1, x0:x1] = chunk
