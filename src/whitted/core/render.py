"""Render loop: trace every pixel of a camera's frame into a canvas.

Rows are split into disjoint bands. Each band is traced by a pure function of
(camera, world, rows, depth) that returns its own numpy block, so workers
never share pixels and no lock is held while tracing. The parent process is
the only writer to the canvas.

With one worker the bands are traced in-process; otherwise they are farmed
out to a ``multiprocessing.Pool`` and written back as they complete.

Example:
    >>> from whitted.core.config import RenderSettings
    >>> from whitted.core.render import render
    >>> canvas = render(camera, world, RenderSettings(max_depth=5, workers=4))
"""

from __future__ import annotations

import logging
import multiprocessing as mp
import time
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

from whitted.core.config import RenderSettings
from whitted.preview.canvas import Canvas

if TYPE_CHECKING:
    from whitted.camera.pinhole import Camera
    from whitted.scene.world import World

logger = logging.getLogger(__name__)

# Called with (rows_done, total_rows) after each band is written
ProgressCallback = Callable[[int, int], None]

Band = tuple[int, int]


def render_rows(
    camera: Camera,
    world: World,
    y_start: int,
    y_end: int,
    max_depth: int,
) -> npt.NDArray[np.float64]:
    """Trace rows ``y_start`` (inclusive) to ``y_end`` (exclusive).

    Args:
        camera: Camera generating the primary rays.
        world: Scene to shade.
        y_start: First row of the band.
        y_end: One past the last row of the band.
        max_depth: Recursion budget handed to each primary ray.

    Returns:
        Linear colours of shape (y_end - y_start, camera.hsize, 3).
    """
    block = np.zeros((y_end - y_start, camera.hsize, 3), dtype=np.float64)
    for row, y in enumerate(range(y_start, y_end)):
        for x in range(camera.hsize):
            colour = world.colour_at(camera.ray_for_pixel(x, y), max_depth)
            block[row, x] = colour.to_tuple()
    return block


def _render_band(args: tuple[Camera, World, int, int, int]) -> tuple[int, npt.NDArray[np.float64]]:
    """Pool worker: trace one band and return it with its first row index."""
    camera, world, y_start, y_end, max_depth = args
    return y_start, render_rows(camera, world, y_start, y_end, max_depth)


def split_bands(height: int, band_size: int) -> list[Band]:
    """Partition ``range(height)`` into consecutive ``(start, end)`` bands.

    Raises:
        ValueError: If band_size is not positive.
    """
    if band_size < 1:
        raise ValueError(f"band_size must be >= 1, got {band_size}")
    return [(start, min(start + band_size, height)) for start in range(0, height, band_size)]


def _trace_serial(
    camera: Camera, world: World, bands: list[Band], max_depth: int
) -> Iterator[tuple[int, npt.NDArray[np.float64]]]:
    for y_start, y_end in bands:
        yield _render_band((camera, world, y_start, y_end, max_depth))


def render(
    camera: Camera,
    world: World,
    settings: RenderSettings | None = None,
    canvas: Canvas | None = None,
    progress: ProgressCallback | None = None,
) -> Canvas:
    """Render the camera's full frame of the world.

    Args:
        camera: Camera whose frame is rendered.
        world: Scene to render.
        settings: Depth and parallelism settings (defaults apply if None).
        canvas: Target canvas of size hsize x vsize. A new black canvas is
            allocated if None.
        progress: Optional callback receiving (rows_done, total_rows).

    Returns:
        The canvas holding the rendered image.

    Raises:
        ValueError: If the canvas size does not match the camera.
    """
    if settings is None:
        settings = RenderSettings()
    if canvas is None:
        canvas = Canvas(camera.hsize, camera.vsize)
    elif (canvas.width, canvas.height) != (camera.hsize, camera.vsize):
        raise ValueError(
            f"Canvas is {canvas.width}x{canvas.height} but the camera renders "
            f"{camera.hsize}x{camera.vsize}"
        )

    workers = settings.worker_count
    bands = split_bands(camera.vsize, settings.band_size(camera.vsize))
    total_rows = camera.vsize
    rows_done = 0

    logger.info(
        "Rendering %dx%d, depth %d, %d worker(s), %d band(s)",
        camera.hsize,
        camera.vsize,
        settings.max_depth,
        workers,
        len(bands),
    )
    start_time = time.perf_counter()

    def _collect(results: Iterator[tuple[int, npt.NDArray[np.float64]]]) -> None:
        nonlocal rows_done
        for y_start, block in results:
            canvas.write_rows(y_start, block)
            rows_done += block.shape[0]
            logger.debug("Band at row %d done (%d/%d rows)", y_start, rows_done, total_rows)
            if progress is not None:
                progress(rows_done, total_rows)

    if workers == 1 or len(bands) == 1:
        _collect(_trace_serial(camera, world, bands, settings.max_depth))
    else:
        tasks = [(camera, world, y_start, y_end, settings.max_depth) for y_start, y_end in bands]
        with mp.Pool(workers) as pool:
            _collect(pool.imap_unordered(_render_band, tasks))

    logger.info("Render complete in %.2fs", time.perf_counter() - start_time)
    return canvas
