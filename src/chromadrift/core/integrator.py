"""
Integrator: the randomized pairing step loop.

Instead of evaluating all n^2 pairs every step, each step runs
`num_perms` pairing rounds. A round draws a random permutation and pairs
particle i with particle perm[i]. Movements from every round are summed
before any position changes, so larger `num_perms` converges toward the
all-pairs force sum.

One numpy Generator, seeded once, feeds initial placement and every
shuffle in a fixed order. Two runs with the same config are bitwise
identical.
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields
import logging
import math
import numbers
from typing import Any, Mapping

import numpy as np

from chromadrift.core.canvas import Canvas
from chromadrift.core.errors import ConfigError, NonFiniteStateError
from chromadrift.core.forces import pairwise_movements
from chromadrift.core.particles import ParticleStore

logger = logging.getLogger(__name__)

INTEGER_FIELDS = (
    "num_particles", "num_perms", "num_steps", "size", "seed", "record_interval", "log_interval",
)


@dataclass
class SimulationConfig:
    """Parameters of one painting run."""

    num_particles: int = 30
    num_perms: int = 10  # Pairing rounds per step
    num_steps: int = 3_000_000
    size: int = 1024  # Plane and canvas side length, in cells
    g_const: float = 3e-2  # Global force scale
    weight: float = 3e-2  # Canvas drift per visit
    seed: int = 0

    # Diagnostics
    record_interval: int = 0  # Record positions every N steps (0 = off)
    log_interval: int = 100_000  # Progress log every N steps (0 = off)

    def __post_init__(self):
        for name in INTEGER_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
        for name in ("g_const", "weight"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ConfigError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ConfigError(f"{name} must be finite, got {value}")
        if self.size <= 0:
            raise ConfigError(f"size must be positive, got {self.size}")
        for name in ("num_particles", "num_perms", "num_steps", "record_interval", "log_interval"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must be non-negative, got {getattr(self, name)}")

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "SimulationConfig":
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping of every field, the inverse of from_dict."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class Simulation:
    """
    Particle store, canvas and RNG for one run.

    When no store is given, particles are placed from the RNG, which
    consumes the first draws of the stream.
    """

    config: SimulationConfig
    store: ParticleStore | None = None
    rng: np.random.Generator | None = None
    canvas: Canvas | None = None

    current_step: int = field(default=0, init=False)
    trajectory: list[np.ndarray] = field(default_factory=list, init=False)

    def __post_init__(self):
        cfg = self.config
        if self.rng is None:
            self.rng = np.random.default_rng(cfg.seed)
        if self.store is None:
            self.store = ParticleStore.random(cfg.num_particles, cfg.size, self.rng)
        if self.canvas is None:
            self.canvas = Canvas(cfg.size)
        # Wrapping, forces and painting must all see the same torus
        if self.store.size != cfg.size:
            raise ConfigError(f"Particle store size {self.store.size} does not match config size {cfg.size}")
        if self.canvas.size != cfg.size:
            raise ConfigError(f"Canvas size {self.canvas.size} does not match config size {cfg.size}")
        self._initial_positions = self.store.positions.copy()

    def accumulate_movements(self) -> np.ndarray:
        """
        Sum movements from `num_perms` random pairing rounds.

        Within a round, contributions are added in increasing i, the
        a-side before the b-side of each pair.
        """
        n = len(self.store)
        positions = self.store.positions
        colors = self.store.colors
        net = np.zeros((n, 2), dtype=np.float64)
        indices = np.arange(n)

        for _ in range(self.config.num_perms):
            perm = self.rng.permutation(n)
            paired = indices != perm
            i, j = indices[paired], perm[paired]
            if len(i) == 0:
                continue

            a_move, b_move = pairwise_movements(
                positions[i], colors[i], positions[j], colors[j],
                self.config.size, self.config.g_const,
            )
            # Interleave as a0, b0, a1, b1, ... so unbuffered adds keep pair order
            targets = np.column_stack([i, j]).ravel()
            moves = np.stack([a_move, b_move], axis=1).reshape(-1, 2)
            np.add.at(net, targets, moves)

        return net

    def step(self) -> None:
        """Run one major step: pairing rounds, move, then paint."""
        net = self.accumulate_movements()
        if not np.all(np.isfinite(net)):
            raise NonFiniteStateError(
                f"Non-finite movement at step {self.current_step}; "
                f"reduce g_const (currently {self.config.g_const})"
            )
        self.store.move(net)
        self.canvas.paint(self.store, self.config.weight)
        self.current_step += 1

    def run(self, n_steps: int | None = None) -> dict:
        """
        Run the simulation.

        Args:
            n_steps: Number of steps (defaults to config.num_steps)

        Returns:
            Statistics dictionary
        """
        if n_steps is None:
            n_steps = self.config.num_steps
        record_every = self.config.record_interval
        log_every = self.config.log_interval

        logger.info(
            "Running %d steps: %d particles, %d rounds/step, size=%d, seed=%d",
            n_steps, len(self.store), self.config.num_perms,
            self.config.size, self.config.seed,
        )
        if record_every and not self.trajectory:
            self.trajectory.append(self.store.positions.copy())

        for _ in range(n_steps):
            self.step()
            if record_every and self.current_step % record_every == 0:
                self.trajectory.append(self.store.positions.copy())
            if log_every and self.current_step % log_every == 0:
                logger.info("Step %d/%d", self.current_step, n_steps)

        stats = self.get_stats()
        stats["n_steps"] = n_steps
        logger.info(
            "Finished at step %d, canvas range [%.2f, %.2f]",
            self.current_step, stats["canvas_min"], stats["canvas_max"],
        )
        return stats

    def get_stats(self) -> dict:
        """Summary of the current state."""
        size = self.config.size
        if len(self.store):
            # Toroidal distance from each particle's starting point
            delta = np.abs(self.store.positions - self._initial_positions)
            delta = np.minimum(delta, size - delta)
            mean_displacement = float(np.hypot(delta[:, 0], delta[:, 1]).mean())
        else:
            mean_displacement = 0.0
        return {
            "current_step": self.current_step,
            "mean_displacement": mean_displacement,
            "canvas_min": float(self.canvas.buffer.min()),
            "canvas_max": float(self.canvas.buffer.max()),
        }

    def get_trajectory_array(self) -> np.ndarray:
        """Recorded positions as [n_samples, n_particles, 2]."""
        if not self.trajectory:
            return np.empty((0, len(self.store), 2))
        return np.stack(self.trajectory)
