#!/usr/bin/env python3
"""Render one of the demonstration scenes.

Builds the chosen scene, organizes it into a BVH, renders it on a thread
pool and writes the gamma-corrected result as PNG or plain-text PPM
(chosen by the output extension, or ``-`` for PPM on stdout).

Usage:
    python examples/render_scene.py [options]

Options:
    --scene NAME        Scene to render (default: random)
    --width WIDTH       Image width in pixels (default: 400)
    --aspect RATIO      Width / height (default: the scene's own)
    --samples SAMPLES   Samples per pixel (default: 100)
    --depth DEPTH       Maximum path depth (default: 50)
    --workers N         Render threads (default: CPU count)
    --seed SEED         Root random seed (default: fresh entropy)
    --earth-image PATH  Texture for the earth and final scenes
    --output OUTPUT     Output file path (default: render.png)
    --show              Open a preview window when done
    --verbose           Log per-row progress
    --quiet             Suppress progress output

Example:
    python examples/render_scene.py --scene cornell_box --width 300 --samples 50
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from pathlib import Path

import numpy as np
import taichi as ti

# Aspect ratios the scenes were framed for
SCENE_ASPECT = {
    "random": 16.0 / 9.0,
    "two_spheres": 16.0 / 9.0,
    "two_perlin_spheres": 16.0 / 9.0,
    "earth": 16.0 / 9.0,
    "simple_light": 16.0 / 9.0,
    "cornell_box": 1.0,
    "cornell_smoke": 1.0,
    "final": 1.0,
}


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a demonstration scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--scene",
        choices=sorted(SCENE_ASPECT),
        default="random",
        help="Scene to render (default: random)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=400,
        help="Image width in pixels (default: 400)",
    )
    parser.add_argument(
        "--aspect",
        type=float,
        default=None,
        help="Width / height (default: the scene's own)",
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=100,
        help="Number of samples per pixel (default: 100)",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=50,
        help="Maximum path depth (default: 50)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=os.cpu_count() or 1,
        help="Render threads (default: CPU count)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Root random seed (default: fresh entropy)",
    )
    parser.add_argument(
        "--earth-image",
        type=str,
        default="earthmap.jpg",
        help="Texture for the earth and final scenes (default: earthmap.jpg)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="render.png",
        help="Output file path, .png or .ppm, '-' for PPM on stdout (default: render.png)",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Open a preview window when done",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log per-row progress",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def render_scene(args: argparse.Namespace) -> Path | None:
    """Render the selected scene and write the result.

    Returns:
        Path to the saved image file, or None when writing to stdout.
    """
    # Lazy imports so that Taichi is initialized first
    from pathtracer.config import RenderSettings
    from pathtracer.core.film import encode_rgb8
    from pathtracer.core.renderer import render
    from pathtracer.preview.display import show_preview
    from pathtracer.preview.export import save_image, write_ppm
    from pathtracer.scene.demo import build_scene

    aspect_ratio = args.aspect if args.aspect is not None else SCENE_ASPECT[args.scene]
    rng = np.random.default_rng(args.seed)

    if not args.quiet:
        print(f"Building scene '{args.scene}'...", file=sys.stderr)
    scene = build_scene(args.scene, aspect_ratio, rng, earth_image=args.earth_image)
    world = scene.world(rng)

    settings = RenderSettings(
        image_width=args.width,
        aspect_ratio=aspect_ratio,
        samples_per_pixel=args.samples,
        max_depth=args.depth,
        background=scene.background,
        workers=args.workers,
        seed=args.seed,
    )

    start_time = time.time()

    def progress_callback(rows_done: int, total_rows: int) -> None:
        if not args.quiet:
            print(
                f"\r  Scanlines remaining: {total_rows - rows_done:>4}",
                end="",
                file=sys.stderr,
                flush=True,
            )

    linear = render(world, scene.camera, settings, progress=progress_callback)
    image = encode_rgb8(linear)

    if not args.quiet:
        print(file=sys.stderr)  # Newline after progress

    output_file = None
    if args.output == "-":
        write_ppm(image, sys.stdout)
    else:
        output_file = Path(args.output)
        save_image(image, output_file)

    if not args.quiet:
        if output_file is not None:
            print(f"Saved to: {output_file.absolute()}", file=sys.stderr)
        print(f"Total time: {time.time() - start_time:.2f}s", file=sys.stderr)

    if args.show:
        show_preview(image, title=args.scene)

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    ti.init(arch=ti.cpu)

    try:
        render_scene(args)
        return 0
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
