"""Packed 24-bit colors.

A packed color stores three 8-bit channels as ``c0 | c1 << 8 | c2 << 16``.
The PPM exporter emits ``c0, c1, c2`` per pixel, so a color meant to be read
as RGB must be packed as ``(blue << 16) | (green << 8) | red``. A literal like
``0xFF0000`` therefore exports as pure blue, not red.
"""

from __future__ import annotations

from typing import TypeAlias


PackedColor: TypeAlias = int

MAX_CHANNEL = 255
MAX_PACKED = 0xFFFFFF


def pack_color(red: int, green: int, blue: int) -> PackedColor:
    for label, value in (("red", red), ("green", green), ("blue", blue)):
        if not 0 <= value <= MAX_CHANNEL:
            raise ValueError(f"{label} channel out of range: {value}")
    return (blue << 16) | (green << 8) | red


def unpack_color(color: PackedColor) -> tuple[int, int, int]:
    color = validate_color(color)
    return (color & 0xFF, (color >> 8) & 0xFF, (color >> 16) & 0xFF)


def validate_color(color: PackedColor) -> PackedColor:
    if isinstance(color, bool) or not isinstance(color, int):
        raise ValueError(f"packed color must be an int, got {type(color).__name__}")
    if not 0 <= color <= MAX_PACKED:
        raise ValueError(f"packed color out of range: {color:#x}")
    return color


BLACK = pack_color(0, 0, 0)
WHITE = pack_color(255, 255, 255)
RED = pack_color(255, 0, 0)
GREEN = pack_color(0, 255, 0)
BLUE = pack_color(0, 0, 255)
