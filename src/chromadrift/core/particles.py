"""
ParticleStore: positions and colors of every particle in a run.

Positions are the only state that changes during a run. Colors are
fixed at creation and the array is marked read-only.
"""

from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from chromadrift.core.errors import ConfigError
from chromadrift.core.forces import Particle
from chromadrift.core.geometry import wrap_position

# Upper bound of the random color draw, per channel
COLOR_MAX = 255.0


@dataclass
class ParticleStore:
    """
    Mutable particle positions plus immutable colors.

    positions: [n, 2] float64, each coordinate in [0, size)
    colors:    [n, 3] float64, nominally in [0, 255]
    """

    positions: np.ndarray
    colors: np.ndarray
    size: float

    def __post_init__(self):
        self.positions = np.array(self.positions, dtype=np.float64).reshape(-1, 2)
        self.colors = np.array(self.colors, dtype=np.float64).reshape(-1, 3)
        if len(self.positions) != len(self.colors):
            raise ConfigError(
                f"Got {len(self.positions)} positions but {len(self.colors)} colors"
            )
        self.positions = wrap_position(self.positions, self.size)
        self.colors.setflags(write=False)

    @classmethod
    def random(
        cls, num_particles: int, size: float, rng: np.random.Generator
    ) -> "ParticleStore":
        """
        Place particles uniformly on the torus with uniform random colors.

        Draw order per particle is x, y, r, g, b.
        """
        draws = rng.random((num_particles, 5))
        positions = draws[:, :2] * size
        colors = draws[:, 2:] * COLOR_MAX
        return cls(positions=positions, colors=colors, size=size)

    @classmethod
    def from_particles(cls, particles: list[Particle], size: float) -> "ParticleStore":
        """Build a store from explicit Particle values."""
        return cls(
            positions=[p.position for p in particles],
            colors=[p.color for p in particles],
            size=size,
        )

    def __len__(self) -> int:
        return len(self.positions)

    def particle(self, index: int) -> Particle:
        """Snapshot of one particle as a value."""
        x, y = self.positions[index]
        r, g, b = self.colors[index]
        return Particle(position=(float(x), float(y)), color=(float(r), float(g), float(b)))

    def cells(self) -> np.ndarray:
        """Integer canvas cell (x, y) under each particle, shape [n, 2]."""
        return np.floor(self.positions).astype(np.int64)

    def move(self, displacement: np.ndarray) -> None:
        """Add one displacement per particle, then wrap back onto the torus."""
        self.positions = wrap_position(self.positions + displacement, self.size)
