"""Smoke tests for visualization helpers."""

import numpy as np
import matplotlib.pyplot as plt

from chromadrift.core.integrator import Simulation, SimulationConfig
from chromadrift.viz.canvas import (
    plot_canvas,
    plot_run_summary,
    plot_trajectories,
    unwrap_for_plot,
)


def _recorded_simulation():
    cfg = SimulationConfig(
        num_particles=5, num_perms=2, num_steps=10, size=16, seed=3,
        record_interval=2, log_interval=0,
    )
    sim = Simulation(cfg)
    sim.run()
    return sim


class TestUnwrap:
    """Tests for breaking paths at the torus edge."""

    def test_gap_inserted_at_wrap(self):
        path = np.array([[15.0, 2.0], [0.5, 2.0], [1.0, 2.0]])
        out = unwrap_for_plot(path, 16.0)
        assert out.shape == (4, 2)
        assert np.all(np.isnan(out[1]))

    def test_smooth_path_unchanged(self):
        path = np.array([[1.0, 1.0], [2.0, 1.5], [3.0, 2.0]])
        assert np.array_equal(unwrap_for_plot(path, 16.0), path)


class TestPlots:
    """Figures build without errors."""

    def test_plot_canvas(self):
        sim = _recorded_simulation()
        fig, ax = plot_canvas(sim.canvas)
        assert ax.get_title() == "Canvas"
        plt.close(fig)

    def test_plot_trajectories(self):
        sim = _recorded_simulation()
        fig, ax = plot_trajectories(sim)
        assert len(ax.lines) == 5
        plt.close(fig)

    def test_run_summary(self):
        sim = _recorded_simulation()
        fig = plot_run_summary(sim)
        assert len(fig.axes) == 2
        plt.close(fig)
