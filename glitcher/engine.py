"""Glitch engine: seeded, repeatable cycles of effects over one raster."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

import numpy as np

from glitcher import effects as fx
from glitcher.core import DEFAULT_INTENSITY, MAX_INTENSITY, MIN_INTENSITY, validate_raster
from glitcher.errors import AllBlackResult, InvalidParameter

logger = logging.getLogger(__name__)

_SEED_MASK = (1 << 64) - 1


@dataclass
class EffectParams:
    """Everything that controls a glitch run apart from the seed."""
    intensity: float = DEFAULT_INTENSITY
    cycles: int = 1
    step: int = 1               # frame stride, only used by the sequencer
    scan_lines: bool = False
    pixel_sort: bool = False
    color_offset: bool = False

    def validate(self) -> None:
        if not MIN_INTENSITY <= self.intensity <= MAX_INTENSITY:
            raise InvalidParameter(
                f"Intensity must be between {MIN_INTENSITY} and {MAX_INTENSITY}, got {self.intensity}"
            )
        if self.cycles <= 0:
            raise InvalidParameter(f"Cycle count must be positive, got {self.cycles}")
        if self.step <= 0:
            raise InvalidParameter(f"Step must be positive, got {self.step}")

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> EffectParams:
        return cls(**d)


def make_rng(seed: int) -> np.random.Generator:
    """Generator for a signed or unsigned 64-bit seed."""
    return np.random.default_rng(int(seed) & _SEED_MASK)


def run(raster: np.ndarray, seed: int, params: EffectParams) -> np.ndarray:
    """Glitch a raster in place and return it.

    Each cycle applies, in order: scan lines, pixel sort and color offset (each
    only if enabled), then the random wrap shift, which always runs. The
    generator is seeded once for the whole call.

    Raises:
        InvalidParameter: before touching the raster, if raster or params are bad.
        AllBlackResult: if every pixel is transparent black after all cycles.
    """
    validate_raster(raster)
    params.validate()

    rng = make_rng(seed)
    logger.debug("Glitching %dx%d raster: seed=%d params=%s",
                 raster.shape[1], raster.shape[0], seed, params)

    for _ in range(params.cycles):
        if params.scan_lines:
            fx.scan_lines(raster, params.intensity)
        if params.pixel_sort:
            fx.pixel_sort(raster)
        if params.color_offset:
            fx.color_offset(raster, params.intensity, rng=rng)
        fx.random_shift(raster, params.intensity, rng=rng)

    if fx.is_black(raster):
        raise AllBlackResult()
    return raster


def glitch(raster: np.ndarray, seed: int, **kwargs) -> np.ndarray:
    """Glitch a copy of the raster; keyword arguments are EffectParams fields."""
    validate_raster(raster)
    return run(raster.copy(), seed, EffectParams(**kwargs))
