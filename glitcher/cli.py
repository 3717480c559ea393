"""Command line entry point for glitcher."""

import argparse
import logging
import sys
import time
from pathlib import Path

from glitcher.core import DEFAULT_DELAY, DEFAULT_FRAMES, DEFAULT_INTENSITY
from glitcher.engine import EffectParams
from glitcher.errors import GlitchError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glitcher",
        description="Apply seeded glitch effects to an image or build a glitched GIF",
    )
    parser.add_argument("input", nargs="?", default=None, help="Input image file")
    parser.add_argument("output", nargs="?", default=None,
                        help="Output file (default: random glitched-image-NNNNN name)")
    parser.add_argument("-glitch-intensity", "--glitch-intensity", dest="intensity",
                        type=float, default=DEFAULT_INTENSITY,
                        help="Intensity of the glitch effect (0.1-9.0)")
    parser.add_argument("-scan-lines", "--scan-lines", action="store_true",
                        help="Apply scan lines glitch effect")
    parser.add_argument("-pixel-sort", "--pixel-sort", action="store_true",
                        help="Apply pixel sort glitch effect")
    parser.add_argument("-color-offset", "--color-offset", action="store_true",
                        help="Apply color offset glitch effect")
    parser.add_argument("-seed", "--seed", type=int, default=None,
                        help="Random seed for reproducibility (default: time based)")
    parser.add_argument("-gif", "--gif", action="store_true",
                        help="Create a GIF instead of a single image")
    parser.add_argument("-frames", "--frames", type=int, default=DEFAULT_FRAMES,
                        help="Number of frames for the GIF")
    parser.add_argument("-delay", "--delay", type=int, default=DEFAULT_DELAY,
                        help="Delay between GIF frames in hundredths of a second")
    parser.add_argument("-cycle", "--cycle", dest="cycles", type=int, default=1,
                        help="Number of cycles of glitches to apply")
    parser.add_argument("-step", "--step", type=int, default=1,
                        help="Step size between frames")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log debug output")
    return parser


def params_from_args(args) -> EffectParams:
    return EffectParams(
        intensity=args.intensity,
        cycles=args.cycles,
        step=args.step,
        scan_lines=args.scan_lines,
        pixel_sort=args.pixel_sort,
        color_offset=args.color_offset,
    )


def resolve_output(args) -> str:
    """Explicit output path, or a random name matching the output kind."""
    from glitcher.io import random_output_name
    if args.output:
        return args.output
    ext = ".gif" if args.gif else Path(args.input).suffix
    return random_output_name(ext)


def cmd_glitch(args) -> None:
    from glitcher.engine import run
    from glitcher.io import load_image, save_image, save_gif
    from glitcher.sequence import build_sequence

    params = params_from_args(args)
    params.validate()
    seed = args.seed if args.seed is not None else time.time_ns()
    output = resolve_output(args)

    raster = load_image(args.input)
    print(f"Glitching {args.input} (seed {seed})")

    if args.gif:
        frames = build_sequence(raster, seed, params, frames=args.frames, delay=args.delay)
        save_gif(output, frames)
        print(f"GIF ({len(frames)} frames) -> {output}")
    else:
        run(raster, seed, params)
        save_image(output, raster)
        print(f"Glitched -> {output}")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.input is None:
        parser.print_help()
        sys.exit(1)

    try:
        cmd_glitch(args)
    except (GlitchError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
