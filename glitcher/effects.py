"""In-place glitch effects on RGBA rasters."""

from __future__ import annotations

import numpy as np

from glitcher.core import OPAQUE_BLACK, extract_chunk, place_chunk


def scan_lines(raster: np.ndarray, intensity: float) -> np.ndarray:
    """Black out every Nth row, N = max(1, round(intensity))."""
    step = max(1, round(intensity))
    raster[::step] = OPAQUE_BLACK
    return raster


def pixel_sort(raster: np.ndarray) -> np.ndarray:
    """Sort each row by ascending R+G+B brightness. Alpha is ignored."""
    brightness = raster[:, :, :3].sum(axis=2, dtype=np.uint16)
    order = np.argsort(brightness, axis=1, kind="stable")
    raster[:] = np.take_along_axis(raster, order[:, :, np.newaxis], axis=1)
    return raster


def color_offset(
    raster: np.ndarray,
    intensity: float,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """Copy one random channel from a randomly offset position, wrapping at the edges.

    The scan runs row-major over the raster it is writing to, so a source pixel
    that was already visited contributes its rewritten value. Instead of looping
    per pixel, each pixel follows its chain of already-visited sources back to
    the first one that still held its original value when it was read.
    """
    if rng is None:
        rng = np.random.default_rng()

    h, w = raster.shape[:2]
    reach = int(intensity)
    offset_x = int(rng.integers(-reach, reach + 1))
    offset_y = int(rng.integers(-reach, reach + 1))
    channel = int(rng.integers(0, 3))

    ys, xs = np.indices((h, w))
    source = (((ys + offset_y) % h) * w + (xs + offset_x) % w).ravel()
    index = np.arange(h * w)

    # Pointer jumping: collapse visited-source chains to their roots.
    root = np.where(source < index, source, index)
    while True:
        jumped = root[root]
        if np.array_equal(jumped, root):
            break
        root = jumped

    original = raster[:, :, channel].copy().ravel()
    raster[:, :, channel] = original[source[root]].reshape(h, w)
    return raster


def wrap_shift(raster: np.ndarray, start_y: int, stop_y: int, offset: int) -> np.ndarray:
    """Shift rows [start_y, stop_y) horizontally, wrapping pixels that leave one edge.

    Negative offsets move pixels left, positive offsets move them right.
    """
    w = raster.shape[1]
    if offset < 0:
        offset = -offset
        stop_x = w - offset
        moved = extract_chunk(raster, start_y, stop_y, offset, w)
        wrapped = extract_chunk(raster, start_y, stop_y, 0, offset)
        place_chunk(raster, moved, start_y, stop_y, 0, stop_x)
        place_chunk(raster, wrapped, start_y, stop_y, stop_x, w)
    elif offset > 0:
        stop_x = w - offset
        moved = extract_chunk(raster, start_y, stop_y, 0, stop_x)
        wrapped = extract_chunk(raster, start_y, stop_y, stop_x, w)
        place_chunk(raster, moved, start_y, stop_y, offset, w)
        place_chunk(raster, wrapped, start_y, stop_y, 0, offset)
    return raster


def random_band(height: int, rng: np.random.Generator) -> tuple[int, int]:
    """Pick a horizontal band (start_y, stop_y) at most a quarter of the height tall."""
    start_y = int(rng.integers(0, height))
    chunk_height = int(rng.integers(1, max(1, height // 4) + 1))
    chunk_height = min(chunk_height, height - start_y)
    return start_y, start_y + chunk_height


def random_shift(
    raster: np.ndarray,
    intensity: float,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """Wrap-shift random horizontal bands by random amounts.

    Runs int(intensity * 2) rounds. A zero offset skips its round without
    picking a band.
    """
    if rng is None:
        rng = np.random.default_rng()

    h, w = raster.shape[:2]
    max_offset = int(intensity * w / 10)

    for _ in range(int(intensity * 2)):
        offset = int(rng.integers(-max_offset, max_offset + 1))
        if offset == 0:
            continue
        start_y, stop_y = random_band(h, rng)
        wrap_shift(raster, start_y, stop_y, offset)

    return raster


def is_black(raster: np.ndarray) -> bool:
    """True only if every channel of every pixel, alpha included, is zero."""
    return not raster.any()
