from __future__ import annotations

import logging
from pathlib import Path
import threading

import torch

from rasterkit.render.ppm import save
from rasterkit.render.rasterizer import circle_indices, line_indices, rect_indices, triangle_indices

from .color import PackedColor, validate_color
from .pixel_buffer import PixelBuffer
from .shapes import Circle, Line, Rectangle, Triangle


LOGGER = logging.getLogger(__name__)


def center_offset(canvas_size: int, object_size: int) -> int:
    """Origin that centers ``object_size`` on ``canvas_size``, truncating."""
    if object_size > canvas_size:
        LOGGER.warning(
            "object larger than canvas cannot be centered; clamping origin to 0 (canvas=%d object=%d)",
            canvas_size,
            object_size,
        )
        return 0
    return (canvas_size - object_size) // 2


class Canvas:
    """Owns one pixel buffer and commits rasterized primitives into it.

    Draw calls take a shape, apply its centering flags against the buffer
    dimensions (mutating the shape), rasterize it, then write its color.
    """

    def __init__(self, width: int, height: int, background: PackedColor = 0) -> None:
        self._buffer = PixelBuffer(width, height)
        if background:
            self._buffer.fill(background)
        self._write_lock = threading.Lock()
        self._revision = 0

    @property
    def buffer(self) -> PixelBuffer:
        return self._buffer

    @property
    def width(self) -> int:
        return self._buffer.width

    @property
    def height(self) -> int:
        return self._buffer.height

    @property
    def revision(self) -> int:
        return self._revision

    def fill(self, color: PackedColor) -> None:
        with self._write_lock:
            self._buffer.fill(color)
            self._revision += 1

    def rect_fill(self, rect: Rectangle) -> None:
        validate_color(rect.color)
        with self._write_lock:
            if rect.center:
                rect.origin(
                    center_offset(self.width, rect.width),
                    center_offset(self.height, rect.height),
                )
            self._commit("rect", rect_indices(rect, self.width, self.height), rect.color)

    def circle_fill(self, circle: Circle) -> None:
        validate_color(circle.color)
        with self._write_lock:
            if circle.center:
                circle.origin(self.width // 2, self.height // 2)
            self._commit("circle", circle_indices(circle, self.width, self.height), circle.color)

    def triangle_fill(self, triangle: Triangle) -> None:
        validate_color(triangle.color)
        with self._write_lock:
            self._commit("triangle", triangle_indices(triangle, self.width, self.height), triangle.color)

    def line_draw(self, line: Line) -> None:
        validate_color(line.color)
        with self._write_lock:
            self._center_line(line)
            self._commit("line", line_indices(line, self.width, self.height), line.color)

    def save_as_ppm(self, path: str | Path) -> None:
        with self._write_lock:
            save(self._buffer, path)

    def _center_line(self, line: Line) -> None:
        if not line.center:
            return
        # Vertical takes precedence when both axis flags are set.
        if line.vertical:
            line.pin_vertical(self.width // 2)
        elif line.horizontal:
            line.pin_horizontal(self.height // 2)

    def _commit(self, kind: str, indices: torch.Tensor, color: PackedColor) -> None:
        written = self._buffer.write(indices, color)
        self._revision += 1
        LOGGER.debug("%s committed: pixels=%d revision=%d", kind, written, self._revision)
