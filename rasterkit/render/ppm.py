from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Protocol

import numpy as np
from PIL import Image
import torch

from rasterkit.core.errors import FileOpenError, FileWriteError
from rasterkit.core.pixel_buffer import PixelBuffer


LOGGER = logging.getLogger(__name__)
PPM_MAGIC = "P6"
PPM_MAX_VALUE = 255


class HasPixelBuffer(Protocol):
    @property
    def buffer(self) -> PixelBuffer: ...


def ppm_header(width: int, height: int) -> bytes:
    return f"{PPM_MAGIC}\n{width} {height} {PPM_MAX_VALUE}\n".encode("ascii")


def channel_grid(source: PixelBuffer | HasPixelBuffer) -> np.ndarray:
    """Unpack to a ``(height, width, 3)`` uint8 array in ``c0, c1, c2`` order."""
    grid = _as_buffer(source).as_grid()
    channels = torch.stack((grid & 0xFF, (grid >> 8) & 0xFF, (grid >> 16) & 0xFF), dim=-1)
    return channels.to(torch.uint8).contiguous().numpy()


def encode_ppm(source: PixelBuffer | HasPixelBuffer) -> bytes:
    buffer = _as_buffer(source)
    return ppm_header(buffer.width, buffer.height) + channel_grid(buffer).tobytes()


def save(source: PixelBuffer | HasPixelBuffer, path: str | Path) -> None:
    """Write ``source`` to ``path`` as a binary P6 PPM.

    The file is created or truncated. If opening fails nothing is written and
    ``FileOpenError`` is raised. If any write fails ``FileWriteError`` is raised
    immediately and the partial file is left on disk.
    """
    buffer = _as_buffer(source)
    path = Path(path)
    try:
        f = path.open("wb")
    except OSError as exc:
        LOGGER.error("failed to open %s: %s", path, exc)
        raise FileOpenError(path) from exc

    try:
        with f:
            _write_all(f, ppm_header(buffer.width, buffer.height), path)
            for row in channel_grid(buffer):
                _write_all(f, row.tobytes(), path)
    except OSError as exc:
        LOGGER.error("failed to finish writing %s: %s", path, exc)
        raise FileWriteError(path) from exc
    LOGGER.debug("saved %dx%d ppm to %s", buffer.width, buffer.height, path)


def to_image(source: PixelBuffer | HasPixelBuffer) -> Image.Image:
    return Image.fromarray(channel_grid(source))


def load_ppm(path: str | Path) -> PixelBuffer:
    """Read an image file back into a buffer, packing channels as ``c0, c1, c2``."""
    with Image.open(path) as image:
        rgb = np.asarray(image.convert("RGB"), dtype=np.int32)
    packed = rgb[:, :, 0] | (rgb[:, :, 1] << 8) | (rgb[:, :, 2] << 16)
    return PixelBuffer.from_grid(torch.from_numpy(np.ascontiguousarray(packed)))


def _write_all(f: BinaryIO, data: bytes, path: Path) -> None:
    try:
        written = f.write(data)
    except OSError as exc:
        LOGGER.error("write to %s failed: %s", path, exc)
        raise FileWriteError(path) from exc
    if written is not None and written != len(data):
        LOGGER.error("short write to %s: %d of %d bytes", path, written, len(data))
        raise FileWriteError(path)


def _as_buffer(source: PixelBuffer | HasPixelBuffer) -> PixelBuffer:
    if isinstance(source, PixelBuffer):
        return source
    return source.buffer
