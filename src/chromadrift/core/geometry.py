"""
Geometry on the square torus.

Positions live in [0, size) on both axes. Every function here accepts
either a single point of shape (2,) or a batch of shape (n, 2) and
broadcasts over the leading axes.
"""

from __future__ import annotations

import numpy as np


def modulus(a, b: float):
    """
    Map a into [0, b), the canonical representative under period b.

    Rounding in a / b can leave the raw result a hair below 0 or at
    exactly b; both are folded back so the half-open range always holds.
    """
    a = np.asarray(a, dtype=np.float64)
    result = a - np.floor(a / b) * b
    result = np.where(result < 0, result + b, result)
    result = np.where(result >= b, 0.0, result)
    if result.ndim == 0:
        return float(result)
    return result


def wrap_position(position: np.ndarray, size: float) -> np.ndarray:
    """Wrap both coordinates of a point (or batch of points) onto the torus."""
    return np.asarray(modulus(position, size), dtype=np.float64)


def _direction(delta: np.ndarray) -> np.ndarray:
    # Sign that follows the sign bit, so +0.0 -> +1 and -0.0 -> -1
    return np.copysign(1.0, delta)


def minimum_image_force(x: np.ndarray, y: np.ndarray, size: float) -> np.ndarray:
    """
    Inverse-square pull on x from y and three of its periodic images.

    The images are y shifted by ±size on each axis in the direction of
    x - y, so the four candidates surround x from the side of y. Each
    candidate contributes v / |v|^3 where v points from x to the
    candidate. A candidate at zero distance contributes nothing.

    Args:
        x: Point receiving the force, shape (2,) or (n, 2)
        y: Source point, same shape as x
        size: Side length of the torus

    Returns:
        Summed force vector(s), same shape as x
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    hdir = _direction(x[..., 0] - y[..., 0])
    vdir = _direction(x[..., 1] - y[..., 1])
    zero = np.zeros_like(hdir)

    shifts = (
        (zero, zero),
        (hdir * size, zero),
        (zero, vdir * size),
        (hdir * size, vdir * size),
    )

    net = np.zeros(np.broadcast_shapes(x.shape, y.shape), dtype=np.float64)
    for sx, sy in shifts:
        vx = y[..., 0] + sx - x[..., 0]
        vy = y[..., 1] + sy - x[..., 1]
        length = np.hypot(vx, vy)
        cubed = length ** 3
        with np.errstate(divide="ignore", invalid="ignore"):
            net[..., 0] += np.where(length > 0, vx / cubed, 0.0)
            net[..., 1] += np.where(length > 0, vy / cubed, 0.0)
    return net
