"""
Rendering: float canvas to clamped 8-bit RGB, and PNG export.
"""

from chromadrift.render.export import (
    clamp_channels,
    to_pixels,
    output_path_for_seed,
    export_image,
    render,
)

__all__ = [
    "clamp_channels",
    "to_pixels",
    "output_path_for_seed",
    "export_image",
    "render",
]
