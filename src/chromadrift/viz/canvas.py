"""
Plots of the painted canvas and particle paths.

The canvas is shown as the exact clamped pixels that would be exported.
Trajectories come from Simulation.trajectory, so record_interval must be
set for them to exist.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes

from chromadrift.core.forces import NEUTRAL
from chromadrift.render.export import to_pixels

if TYPE_CHECKING:
    from chromadrift.core.canvas import Canvas
    from chromadrift.core.integrator import Simulation


def plot_canvas(
    canvas: "Canvas",
    title: str = "Canvas",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 8),
) -> tuple[Figure, Axes]:
    """
    Show the canvas as exported pixels.

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    # Row 0 at the top, same as the PNG
    ax.imshow(to_pixels(canvas), origin="upper", interpolation="nearest")
    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    return fig, ax


def unwrap_for_plot(path: np.ndarray, size: float) -> np.ndarray:
    """
    Break a wrapped path where it jumps across the torus edge.

    Consecutive samples more than size / 2 apart on either axis get a
    NaN row between them so matplotlib leaves a gap.
    """
    if len(path) < 2:
        return path
    jumps = np.any(np.abs(np.diff(path, axis=0)) > size / 2, axis=1)
    pieces = []
    for k, point in enumerate(path):
        pieces.append(point)
        if k < len(jumps) and jumps[k]:
            pieces.append(np.array([np.nan, np.nan]))
    return np.array(pieces)


def plot_trajectories(
    simulation: "Simulation",
    title: str = "Particle Trajectories",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 8),
    show_end: bool = True,
    line_width: float = 1.0,
) -> tuple[Figure, Axes]:
    """
    Plot every recorded particle path, colored by the particle's color.

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    size = simulation.config.size
    history = simulation.get_trajectory_array()
    colors = np.clip(simulation.store.colors, 0.0, 255.0) / 255.0

    for k in range(history.shape[1]):
        path = unwrap_for_plot(history[:, k, :], size)
        ax.plot(path[:, 0], path[:, 1], color=colors[k], linewidth=line_width)

    if show_end and len(simulation.store):
        positions = simulation.store.positions
        ax.scatter(
            positions[:, 0], positions[:, 1],
            c=colors, s=30, marker="o", edgecolors="black", linewidths=0.5, zorder=3,
        )

    ax.set_xlim(0, size)
    ax.set_ylim(size, 0)
    ax.set_aspect("equal")
    ax.set_facecolor((NEUTRAL / 255.0,) * 3)
    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    return fig, ax


def plot_run_summary(simulation: "Simulation", figsize: tuple[float, float] = (14, 7)) -> Figure:
    """Canvas and trajectories side by side."""
    fig, axes = plt.subplots(1, 2, figsize=figsize)
    cfg = simulation.config

    plot_canvas(simulation.canvas, title=f"Canvas after {simulation.current_step} steps", ax=axes[0])
    plot_trajectories(simulation, ax=axes[1])

    fig.suptitle(
        f"seed={cfg.seed}, particles={cfg.num_particles}, rounds/step={cfg.num_perms}, "
        f"g={cfg.g_const:g}, weight={cfg.weight:g}",
        fontsize=12,
    )
    fig.tight_layout()
    return fig


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
