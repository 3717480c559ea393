"""Error kinds raised by the glitch core."""


class GlitchError(Exception):
    """Base class for errors raised by the glitch pipeline."""


class InvalidParameter(GlitchError, ValueError):
    """A raster or effect parameter was rejected before any mutation."""


class AllBlackResult(GlitchError):
    """Every pixel of the glitched raster ended up fully transparent black."""

    def __init__(self, message: str = "The image is completely black. Aborting."):
        super().__init__(message)
