# main.py
"""Render a scene to an image file.

Usage:
    raytrace OUTPUT [options]
    python -m raytrace OUTPUT [options]

Example:
    raytrace out.png --scene random --width 400 --quality balanced --threads 8
"""
import argparse
import logging
import os
import sys
import time

import numpy as np

from raytrace.renderer.image_writer import write_image
from raytrace.renderer.raytracer import render
from raytrace.renderer.settings import QUALITY_PRESETS, ImageSettings, RenderSettings
from raytrace.scene.builders import DEFAULT_ASPECT_RATIO, SCENES
from raytrace.scene.serialization import SceneFormatError, load_scene, save_scene


def parse_aspect_ratio(text: str) -> float:
    """Accept either "W:H" or a plain number."""
    try:
        if ":" in text:
            w, h = text.split(":", 1)
            ratio = float(w) / float(h)
        else:
            ratio = float(text)
    except (ValueError, ZeroDivisionError):
        raise argparse.ArgumentTypeError(f"invalid aspect ratio: {text!r}")
    if not ratio > 0:
        raise argparse.ArgumentTypeError(f"aspect ratio must be positive: {text!r}")
    return ratio


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="raytrace",
        description="Monte Carlo ray tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("output", help="Output image path (.png or .ppm)")
    parser.add_argument(
        "--scene",
        choices=sorted(SCENES),
        default="random",
        help="Built-in scene to render (default: random)",
    )
    parser.add_argument("--load-scene", metavar="PATH", help="Load the scene from a JSON file instead")
    parser.add_argument("--save-scene", metavar="PATH", help="Write the scene to a JSON file before rendering")
    parser.add_argument("--width", type=int, default=400, help="Image width in pixels (default: 400)")
    parser.add_argument(
        "--aspect-ratio",
        type=parse_aspect_ratio,
        default=DEFAULT_ASPECT_RATIO,
        help="Image aspect ratio as W:H or a number (default: 16:9)",
    )
    parser.add_argument(
        "--quality",
        choices=sorted(QUALITY_PRESETS),
        default="final",
        help="Sample/bounce preset (default: final)",
    )
    parser.add_argument("--samples", type=int, help="Samples per pixel (overrides --quality)")
    parser.add_argument("--max-depth", type=int, help="Maximum bounces (overrides --quality)")
    parser.add_argument(
        "--threads",
        type=int,
        default=os.cpu_count() or 1,
        help="Worker processes (default: CPU count)",
    )
    parser.add_argument("--gamma", type=float, default=1.0, help="Output gamma (default: 1.0, linear)")
    parser.add_argument("--seed", type=int, help="Random seed for scene generation and sampling")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--quiet", action="store_true", help="Suppress progress output")
    verbosity.add_argument("--verbose", action="store_true", help="Show debug output")
    return parser.parse_args(argv)


def configure_logging(quiet: bool, verbose: bool):
    level = logging.WARNING if quiet else logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(asctime)s] [%(processName)s] %(message)s")


def build_render_settings(args: argparse.Namespace) -> RenderSettings:
    overrides = {"thread_count": args.threads, "gamma": args.gamma, "seed": args.seed}
    if args.samples is not None:
        overrides["samples_per_pixel"] = args.samples
    if args.max_depth is not None:
        overrides["max_depth"] = args.max_depth
    return RenderSettings.from_preset(args.quality, **overrides)


def build_scene(args: argparse.Namespace):
    if args.load_scene:
        return load_scene(args.load_scene)
    builder = SCENES[args.scene]
    if args.scene == "random":
        return builder(args.aspect_ratio, np.random.default_rng(args.seed))
    return builder(args.aspect_ratio)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(args.quiet, args.verbose)

    try:
        image_settings = ImageSettings.from_aspect_ratio(args.width, args.aspect_ratio)
        render_settings = build_render_settings(args)
        image_settings.validate()
        render_settings.validate()

        scene = build_scene(args)
        if args.save_scene:
            save_scene(scene, args.save_scene)

        start = time.time()
        pixels = render(scene, image_settings, render_settings, show_progress=not args.quiet)
        write_image(args.output, pixels, image_settings.width, image_settings.height)
    except (SceneFormatError, ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        print(f"Done. ({time.time() - start:.2f}s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
