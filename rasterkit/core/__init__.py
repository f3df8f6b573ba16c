from .canvas import Canvas, center_offset
from .color import BLACK, BLUE, GREEN, MAX_CHANNEL, RED, WHITE, PackedColor, pack_color, unpack_color, validate_color
from .errors import ExportError, FileOpenError, FileWriteError
from .pixel_buffer import PixelBuffer
from .shapes import Circle, Line, Rectangle, Triangle

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
    "MAX_CHANNEL",
    "PackedColor",
    "PixelBuffer",
    "RED",
    "Rectangle",
    "Triangle",
    "WHITE",
    "center_offset",
    "pack_color",
    "unpack_color",
    "validate_color",
]
