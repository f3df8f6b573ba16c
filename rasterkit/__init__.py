from rasterkit.core import (
    BLACK,
    BLUE,
    GREEN,
    RED,
    WHITE,
    Canvas,
    Circle,
    ExportError,
    FileOpenError,
    FileWriteError,
    Line,
    PixelBuffer,
    Rectangle,
    Triangle,
    pack_color,
    unpack_color,
)
from rasterkit.render import encode_ppm, load_ppm, save, to_image

__all__ = [
    "BLACK",
    "BLUE",
    "Canvas",
    "Circle",
    "ExportError",
    "FileOpenError",
    "FileWriteError",
    "GREEN",
    "Line",
    "PixelBuffer",
    "RED",
    "Rectangle",
    "Triangle",
    "WHITE",
    "encode_ppm",
    "load_ppm",
    "pack_color",
    "save",
    "to_image",
    "unpack_color",
]
