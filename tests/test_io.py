"""Tests for io module."""

import os
import re

import numpy as np
import pytest
from PIL import Image

from glitcher.core import blank
from glitcher.io import load_image, random_output_name, save_gif, save_image, to_paletted
from glitcher.sequence import Frame


class TestLoadSave:
    def test_png_roundtrip(self, noisy, tmp_path):
        path = str(tmp_path / "roundtrip.png")
        save_image(path, noisy)
        loaded = load_image(path)
        assert loaded.dtype == np.uint8
        np.testing.assert_array_equal(loaded, noisy)

    def test_jpeg(self, gradient, tmp_path):
        path = str(tmp_path / "out.JPG")
        save_image(path, gradient, quality=90)
        loaded = load_image(path)
        assert loaded.shape == gradient.shape
        assert np.all(loaded[:, :, 3] == 255)

    def test_rgb_input_becomes_rgba(self, tmp_path):
        path = str(tmp_path / "rgb.png")
        Image.new("RGB", (6, 4), (10, 20, 30)).save(path)
        loaded = load_image(path)
        assert loaded.shape == (4, 6, 4)
        assert tuple(loaded[0, 0]) == (10, 20, 30, 255)

    def test_unsupported_extension(self, gradient, tmp_path):
        with pytest.raises(ValueError):
            save_image(str(tmp_path / "out.bmp"), gradient)

    def test_creates_directories(self, gradient, tmp_path):
        path = str(tmp_path / "a" / "b" / "out.png")
        save_image(path, gradient)
        assert os.path.exists(path)


class TestGif:
    def test_paletted(self, gradient):
        img = to_paletted(gradient)
        assert img.mode == "P"
        assert img.size == (32, 24)

    def test_frames_and_delays(self, tmp_path):
        colors = [(255, 0, 0, 255), (0, 255, 0, 255), (0, 0, 255, 255)]
        frames = [Frame(blank(8, 8, c), delay=5) for c in colors]
        path = str(tmp_path / "anim.gif")
        save_gif(path, frames)
        with Image.open(path) as img:
            assert img.n_frames == 3
            assert img.info["duration"] == 50

    def test_empty(self, tmp_path):
        with pytest.raises(ValueError):
            save_gif(str(tmp_path / "empty.gif"), [])


class TestRandomOutputName:
    def test_pattern(self):
        name = random_output_name(".png")
        assert re.fullmatch(r"glitched-image-\d{5}\.png", name)

    def test_seeded(self):
        a = random_output_name(".gif", rng=np.random.default_rng(1))
        b = random_output_name(".gif", rng=np.random.default_rng(1))
        assert a == b
