"""Shared test fixtures: synthetic RGBA rasters."""

import numpy as np
import pytest

from glitcher.io import save_image


@pytest.fixture
def gradient():
    """A 24x32 raster with distinct colors per pixel and full alpha."""
    h, w = 24, 32
    r = np.zeros((h, w, 4), dtype=np.uint8)
    r[:, :, 0] = (np.arange(w, dtype=np.uint16) * 8 % 256).reshape(1, w)
    r[:, :, 1] = (np.arange(h, dtype=np.uint16) * 10 % 256).reshape(h, 1)
    r[:, :, 2] = (np.arange(h * w, dtype=np.uint32) % 251).reshape(h, w)
    r[:, :, 3] = 255
    return r


@pytest.fixture
def noisy():
    """A small raster of random pixels, alpha included."""
    rng = np.random.default_rng(1234)
    return rng.integers(0, 256, size=(9, 13, 4), dtype=np.uint8)


@pytest.fixture
def png_file(gradient, tmp_path):
    """Write the gradient raster to a temp png."""
    path = str(tmp_path / "input.png")
    save_image(path, gradient)
    return path
