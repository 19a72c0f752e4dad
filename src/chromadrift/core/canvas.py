"""
Canvas: the persistent float image painted by particle visits.

Storage is one flat row-major buffer of size * size * 3 floats. Cell
(x, y) starts at offset ((y * size) + x) * 3, so rows are y and columns
are x, matching the pixel layout of the exported image.

Values are never clamped here. A channel above neutral keeps pushing its
cell upward on every visit; clamping happens only at export.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np

from chromadrift.core.forces import NEUTRAL

if TYPE_CHECKING:
    from chromadrift.core.particles import ParticleStore

CHANNELS = 3


class Canvas:
    """Float-valued size x size RGB canvas, initialized to neutral gray."""

    def __init__(self, size: int):
        self.size = size
        self.buffer = np.full(size * size * CHANNELS, NEUTRAL, dtype=np.float64)

    def offset(self, x: int, y: int) -> int:
        """Flat buffer offset of the first channel of cell (x, y)."""
        return ((y * self.size) + x) * CHANNELS

    def cell(self, x: int, y: int) -> np.ndarray:
        """Copy of the color stored at cell (x, y)."""
        start = self.offset(x, y)
        return self.buffer[start:start + CHANNELS].copy()

    def as_grid(self) -> np.ndarray:
        """[size, size, 3] view of the buffer, indexed [y, x]."""
        return self.buffer.reshape(self.size, self.size, CHANNELS)

    def paint(self, store: "ParticleStore", weight: float) -> None:
        """
        Nudge the cell under every particle by its offset from neutral.

        new = old + (particle_channel - NEUTRAL) * weight

        Particles are applied in index order; several particles on the
        same cell all contribute.
        """
        if len(store) == 0:
            return
        cells = store.cells()
        flat_cells = cells[:, 1] * self.size + cells[:, 0]
        deltas = (store.colors - NEUTRAL) * weight
        np.add.at(self.buffer.reshape(-1, CHANNELS), flat_cells, deltas)
