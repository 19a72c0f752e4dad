"""
Renderer and image export.

The float canvas becomes 8-bit RGB by clamping each channel to [0, 255]
and flooring. Pixels are written as a PNG whose rows are canvas y and
columns are canvas x.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
from PIL import Image

from chromadrift.core.errors import ExportError, NonFiniteStateError

if TYPE_CHECKING:
    from chromadrift.core.canvas import Canvas
    from chromadrift.core.integrator import Simulation

logger = logging.getLogger(__name__)


def clamp_channels(values: np.ndarray) -> np.ndarray:
    """Clamp to [0, 255] and floor, as uint8. -37.5 -> 0, 400.2 -> 255, 133.9 -> 133."""
    values = np.asarray(values, dtype=np.float64)
    if not np.all(np.isfinite(values)):
        raise NonFiniteStateError("Canvas holds non-finite values; nothing to export")
    return np.floor(np.clip(values, 0.0, 255.0)).astype(np.uint8)


def to_pixels(canvas: "Canvas") -> np.ndarray:
    """[size, size, 3] uint8 pixel grid, indexed [y, x]."""
    return clamp_channels(canvas.as_grid())


def output_path_for_seed(seed: int, output_dir: str | Path = ".") -> Path:
    """Where the image for a given seed is written."""
    return Path(output_dir) / f"img-{seed}.png"


def export_image(pixels: np.ndarray, path: str | Path) -> Path:
    """
    Write an RGB pixel grid to disk as PNG.

    Raises:
        ExportError: If the directory cannot be created or the file
            cannot be written. The write is not retried.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        # uint8 [h, w, 3] is read as RGB
        Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8)).save(path)
    except (OSError, ValueError) as exc:
        raise ExportError(f"Could not write image to {path}: {exc}") from exc
    logger.info("Saved %dx%d image to %s", pixels.shape[1], pixels.shape[0], path)
    return path


def render(simulation: "Simulation", output_dir: str | Path = ".") -> Path:
    """Clamp the simulation's canvas and write it to img-<seed>.png."""
    pixels = to_pixels(simulation.canvas)
    return export_image(pixels, output_path_for_seed(simulation.config.seed, output_dir))
