"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest
import numpy as np


@pytest.fixture
def small_config():
    """A short run on a 32x32 torus."""
    from chromadrift.core import SimulationConfig
    return SimulationConfig(
        num_particles=12,
        num_perms=3,
        num_steps=20,
        size=32,
        g_const=3e-2,
        weight=3e-2,
        seed=7,
        log_interval=0,
    )


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)


class FixedPermutationRng:
    """Stands in for a Generator and always returns the same permutation."""

    def __init__(self, permutation):
        self.permutation_value = np.asarray(permutation)
        self.calls = 0

    def permutation(self, n):
        assert n == len(self.permutation_value)
        self.calls += 1
        return self.permutation_value.copy()


@pytest.fixture
def fixed_permutation_rng():
    """Factory for RNGs that always draw the given permutation."""
    return FixedPermutationRng
