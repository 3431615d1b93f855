#!/usr/bin/env python3
"""Render one of the showcase scenes to an image file.

The output format follows the file extension: ``.ppm`` writes plain-text PPM,
``.png`` writes an 8-bit PNG.

Usage:
    python -m examples.render_scene [options]

Options:
    --width WIDTH       Image width in pixels (default: 640)
    --height HEIGHT     Image height in pixels (default: 360)
    --scene NAME        Scene to render: patterns or glass (default: glass)
    --depth DEPTH       Recursion depth for reflection/refraction (default: 5)
    --workers N         Worker processes, 0 for every CPU (default: 0)
    --output OUTPUT     Output file path (default: scene.png)
    --preview           Show the result in a Matplotlib window
    --quiet             Suppress progress output

Example:
    python -m examples.render_scene --scene patterns --width 320 --height 180 --output patterns.ppm
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

import taichi as ti

from whitted.core.config import DEFAULT_MAX_DEPTH, RenderSettings
from whitted.scene.showcase import SCENES


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a showcase scene with the Whitted ray tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=640,
        help="Image width in pixels (default: 640)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=360,
        help="Image height in pixels (default: 360)",
    )
    parser.add_argument(
        "--scene",
        choices=sorted(SCENES),
        default="glass",
        help="Scene to render (default: glass)",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Recursion depth for reflection/refraction (default: {DEFAULT_MAX_DEPTH})",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=0,
        help="Worker processes, 0 for every CPU (default: 0)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="scene.png",
        help="Output file path, .ppm or .png (default: scene.png)",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Show the result in a Matplotlib window",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def render_scene(
    scene: str = "glass",
    width: int = 640,
    height: int = 360,
    depth: int = DEFAULT_MAX_DEPTH,
    workers: int | None = None,
    output_path: str = "scene.png",
    preview: bool = False,
    quiet: bool = False,
) -> Path:
    """Render a showcase scene and save it to file.

    Args:
        scene: Name of the showcase scene.
        width: Image width in pixels.
        height: Image height in pixels.
        depth: Recursion depth for reflected and refracted rays.
        workers: Number of worker processes (None for every CPU).
        output_path: Output file path (.ppm or .png).
        preview: If True, show the image once rendered.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    from whitted.preview.export import save_image
    from whitted.scene.showcase import create_scene

    settings = RenderSettings(max_depth=depth, workers=workers)
    world, camera = create_scene(scene, width, height)

    if not quiet:
        print(f"Rendering '{scene}' ({width}x{height}, depth {depth}, {settings.worker_count} workers)...")

    start_time = time.time()

    def progress_callback(rows_done: int, total_rows: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            progress_pct = (rows_done / total_rows) * 100 if total_rows > 0 else 0
            print(
                f"\r  Progress: {rows_done}/{total_rows} rows ({progress_pct:.1f}%) - {elapsed:.1f}s",
                end="",
                flush=True,
            )

    canvas = camera.render(world, settings, progress=progress_callback)

    if not quiet:
        print()  # Newline after progress

    output_file = Path(output_path)
    save_image(canvas, output_file)

    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {time.time() - start_time:.2f}s")

    if preview:
        from whitted.preview.display import show_preview

        show_preview(canvas, title=f"{scene} - {width}x{height}")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # The canvas only needs the CPU backend
    ti.init(arch=ti.cpu)

    try:
        render_scene(
            scene=args.scene,
            width=args.width,
            height=args.height,
            depth=args.depth,
            workers=args.workers or None,
            output_path=args.output,
            preview=args.preview,
            quiet=args.quiet,
        )
        return 0
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
