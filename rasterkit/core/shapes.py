from __future__ import annotations

from dataclasses import dataclass

from .color import PackedColor


@dataclass
class Rectangle:
    x0: int
    y0: int
    width: int
    height: int
    color: PackedColor
    center: bool = False

    def origin(self, x0: int, y0: int) -> None:
        self.x0 = x0
        self.y0 = y0


@dataclass
class Circle:
    x0: int
    y0: int
    radius: int
    color: PackedColor
    center: bool = False

    def origin(self, x0: int, y0: int) -> None:
        self.x0 = x0
        self.y0 = y0


@dataclass
class Triangle:
    x1: int
    y1: int
    x2: int
    y2: int
    x3: int
    y3: int
    color: PackedColor

    def vertices(self) -> list[tuple[int, int]]:
        return [(self.x1, self.y1), (self.x2, self.y2), (self.x3, self.y3)]

    def sorted_by_y(self) -> Triangle:
        """Copy with vertices ordered top to bottom; ties keep their order."""
        (x1, y1), (x2, y2), (x3, y3) = sorted(self.vertices(), key=lambda v: v[1])
        return Triangle(x1, y1, x2, y2, x3, y3, self.color)


@dataclass
class Line:
    x0: int
    y0: int
    x1: int
    y1: int
    color: PackedColor
    center: bool = False
    vertical: bool = False
    horizontal: bool = False

    def pin_vertical(self, x: int) -> None:
        self.x0 = x
        self.x1 = x

    def pin_horizontal(self, y: int) -> None:
        self.y0 = y
        self.y1 = y
