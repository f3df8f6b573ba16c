"""Rasterization and image export."""

from .ppm import channel_grid, encode_ppm, load_ppm, ppm_header, save, to_image
from .rasterizer import (
    circle_indices,
    line_indices,
    line_points,
    rect_indices,
    triangle_indices,
    triangle_spans,
)

__all__ = [
    "channel_grid",
    "circle_indices",
    "encode_ppm",
    "line_indices",
    "line_points",
    "load_ppm",
    "ppm_header",
    "rect_indices",
    "save",
    "to_image",
    "triangle_indices",
    "triangle_spans",
]
