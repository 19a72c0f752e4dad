"""
Force model: spatial pull scaled by color affinity.

A pair of particles attracts when their colors deviate from neutral gray
in the same direction and repels when they deviate in opposite
directions. The spatial part is the toroidal inverse-square term from
geometry; the color part is a plain scalar.

Every interaction is momentum-conserving: whatever moves a also moves b
by the exact negation.
"""

from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from chromadrift.core.geometry import minimum_image_force

# Channel value that exerts neither attraction nor repulsion
NEUTRAL = 128.0


@dataclass(frozen=True)
class Particle:
    """A single particle: position on the torus and its fixed color."""

    position: tuple[float, float]
    color: tuple[float, float, float]


def color_force(a, b) -> float | np.ndarray:
    """
    Dot product of two colors' offsets from neutral.

    Accepts single colors of shape (3,) or batches of shape (n, 3).
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    result = np.sum((a - NEUTRAL) * (b - NEUTRAL), axis=-1)
    if np.ndim(result) == 0:
        return float(result)
    return result


def pairwise_movements(
    pos_a: np.ndarray,
    color_a: np.ndarray,
    pos_b: np.ndarray,
    color_b: np.ndarray,
    size: float,
    g_const: float,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Movement of a and b for a batch of pairs.

    Args:
        pos_a, pos_b: Positions, shape (n, 2)
        color_a, color_b: Colors, shape (n, 3)
        size: Side length of the torus
        g_const: Global force scale

    Returns:
        (a_movement, b_movement), each (n, 2), with b_movement == -a_movement
    """
    spatial = minimum_image_force(pos_a, pos_b, size)
    scale = np.asarray(color_force(color_a, color_b), dtype=np.float64) * g_const
    a_movement = spatial * np.expand_dims(scale, -1)
    return a_movement, -a_movement


def movements(
    a: Particle, b: Particle, size: float, g_const: float
) -> tuple[np.ndarray, np.ndarray]:
    """Displacement to apply to a, and its exact negation to apply to b."""
    return pairwise_movements(
        np.asarray(a.position, dtype=np.float64),
        np.asarray(a.color, dtype=np.float64),
        np.asarray(b.position, dtype=np.float64),
        np.asarray(b.color, dtype=np.float64),
        size,
        g_const,
    )
