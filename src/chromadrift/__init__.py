"""
chromadrift: toroidal color-particle painting engine

Colored point particles drift on a wrap-around square plane under a
pairwise pseudo-force, and paint a persistent canvas as they pass.

Core concepts:
- Spatial term: inverse-square pull toward the nearest periodic images
- Color term: dot product of each particle's offset from neutral gray
- Randomized pairing rounds approximate the all-pairs force sum
- Every visit nudges a canvas cell by the particle's offset from neutral
- The float canvas is clamped to 8-bit RGB only at export
"""

__version__ = "0.1.0"
