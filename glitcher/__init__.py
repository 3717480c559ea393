"""glitcher: seeded glitch effects for still images and GIFs."""

from glitcher.core import blank, extract_chunk, place_chunk, validate_raster
from glitcher.effects import scan_lines, pixel_sort, color_offset, random_shift, wrap_shift, is_black
from glitcher.engine import EffectParams, run, glitch
from glitcher.sequence import Frame, build_sequence
from glitcher.errors import GlitchError, InvalidParameter, AllBlackResult

__version__ = "0.1.0"
