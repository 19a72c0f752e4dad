"""
Visualization utilities.

- Canvas preview (exactly the exported pixels)
- Particle trajectories on the torus
- Run summary figure
"""

from chromadrift.viz.canvas import (
    plot_canvas,
    plot_trajectories,
    plot_run_summary,
    unwrap_for_plot,
    save_figure,
)

__all__ = [
    "plot_canvas",
    "plot_trajectories",
    "plot_run_summary",
    "unwrap_for_plot",
    "save_figure",
]
