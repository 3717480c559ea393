"""Frame sequencer: compound glitch runs into an animation."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from glitcher.core import DEFAULT_DELAY, DEFAULT_FRAMES, validate_raster
from glitcher.engine import EffectParams, run
from glitcher.errors import InvalidParameter

logger = logging.getLogger(__name__)


@dataclass
class Frame:
    """One animation frame: an independent raster snapshot plus its delay."""
    raster: np.ndarray
    delay: int = DEFAULT_DELAY  # hundredths of a second


def frame_count(frames: int, step: int) -> int:
    """Number of frames produced for a target count and stride (ceil division)."""
    return -(-frames // step)


def build_sequence(
    raster: np.ndarray,
    seed: int,
    params: EffectParams,
    frames: int = DEFAULT_FRAMES,
    delay: int = DEFAULT_DELAY,
) -> list[Frame]:
    """Build ceil(frames / params.step) glitched frames.

    Every frame glitches the previous frame's output again (nothing is reset
    between frames), reseeding with the same seed each time. The input raster
    itself is left untouched.

    Raises:
        InvalidParameter: for a bad raster, params, frame count or delay.
        AllBlackResult: if any frame comes out fully black; no frames are returned.
    """
    validate_raster(raster)
    params.validate()
    if frames <= 0:
        raise InvalidParameter(f"Frame count must be positive, got {frames}")
    if delay < 0:
        raise InvalidParameter(f"Delay must not be negative, got {delay}")

    working = raster.copy()
    sequence = []
    total = frame_count(frames, params.step)

    for i in range(total):
        run(working, seed, params)
        sequence.append(Frame(raster=working.copy(), delay=delay))
        logger.debug("Frame %d/%d done", i + 1, total)

    return sequence
