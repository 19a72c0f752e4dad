"""
Core engine primitives.

- geometry: toroidal modulus and the minimum-image inverse-square term
- forces: color affinity and momentum-conserving pair movements
- ParticleStore: positions (mutable) and colors (fixed)
- Canvas: flat float buffer painted by particle visits
- Simulation: the randomized pairing step loop
"""

from chromadrift.core.errors import (
    ChromadriftError,
    ConfigError,
    NonFiniteStateError,
    ExportError,
)
from chromadrift.core.geometry import modulus, wrap_position, minimum_image_force
from chromadrift.core.forces import (
    NEUTRAL,
    Particle,
    color_force,
    movements,
    pairwise_movements,
)
from chromadrift.core.particles import ParticleStore
from chromadrift.core.canvas import Canvas
from chromadrift.core.integrator import Simulation, SimulationConfig

__all__ = [
    "ChromadriftError",
    "ConfigError",
    "NonFiniteStateError",
    "ExportError",
    "modulus",
    "wrap_position",
    "minimum_image_force",
    "NEUTRAL",
    "Particle",
    "color_force",
    "movements",
    "pairwise_movements",
    "ParticleStore",
    "Canvas",
    "Simulation",
    "SimulationConfig",
]
