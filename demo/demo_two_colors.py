#!/usr/bin/env python3
"""
Demo: Attraction and Repulsion from Color Affinity

Two small populations drift on a torus:
1. Reddish particles (red above neutral, blue below)
2. Bluish particles (blue above neutral, red below)

Same-color pairs attract, opposite-color pairs repel, so the
populations clump separately. The painted canvas and recorded paths are
saved side by side.

Output: output/demo_two_colors/summary.png, img-<seed>.png
"""

import numpy as np
import matplotlib.pyplot as plt
from pathlib import Path

from chromadrift.core import ParticleStore, Simulation, SimulationConfig
from chromadrift.render import render
from chromadrift.viz import plot_run_summary, save_figure


def main():
    seed = 11
    rng = np.random.default_rng(seed)

    print("=" * 60)
    print("  COLOR AFFINITY: TWO POPULATIONS")
    print("=" * 60)

    size = 256
    n_each = 12
    config = SimulationConfig(
        num_particles=2 * n_each,
        num_perms=6,
        num_steps=20000,
        size=size,
        g_const=5e-3,
        weight=5e-2,
        seed=seed,
        record_interval=50,
        log_interval=0,
    )

    positions = rng.random((2 * n_each, 2)) * size
    reds = np.column_stack([
        rng.uniform(200, 255, n_each), rng.uniform(110, 146, n_each), rng.uniform(0, 60, n_each),
    ])
    blues = reds[:, ::-1]
    store = ParticleStore(positions=positions, colors=np.vstack([reds, blues]), size=size)

    print(f"\n1. Setup:")
    print(f"   Torus: {size}x{size}")
    print(f"   Particles: {n_each} reddish + {n_each} bluish")
    print(f"   Rounds/step: {config.num_perms}, g={config.g_const}, weight={config.weight}")

    print(f"\n2. Running {config.num_steps} steps...")
    simulation = Simulation(config, store=store, rng=rng)
    stats = simulation.run()
    print(f"   Mean displacement: {stats['mean_displacement']:.1f}")
    print(f"   Canvas range: [{stats['canvas_min']:.1f}, {stats['canvas_max']:.1f}]")

    print("\n3. Saving...")
    output_dir = Path("output/demo_two_colors")
    image_path = render(simulation, output_dir)
    print(f"   Saved: {image_path}")

    fig = plot_run_summary(simulation)
    summary_path = output_dir / "summary.png"
    save_figure(fig, summary_path)
    plt.close(fig)
    print(f"   Saved: {summary_path}")

    print("\n" + "=" * 60)
    print("  • Same-color pairs attract and trace shared trails")
    print("  • Opposite-color pairs push apart")
    print("  • Canvas drifts toward each population's color where it lingers")
    print("=" * 60)


if __name__ == "__main__":
    main()
