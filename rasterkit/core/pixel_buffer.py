from __future__ import annotations

import torch

from .color import PackedColor, validate_color


class PixelBuffer:
    """Fixed-size row-major buffer of packed colors.

    Pixel ``(x, y)`` lives at flat index ``y * width + x``. The buffer is never
    resized after construction.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        self.width = width
        self.height = height
        self._pixels = torch.zeros(width * height, dtype=torch.int32)

    @classmethod
    def from_grid(cls, grid: torch.Tensor) -> PixelBuffer:
        if grid.dim() != 2:
            raise ValueError(f"grid must be 2-D (height, width), got shape {tuple(grid.shape)}")
        height, width = (int(n) for n in grid.shape)
        buffer = cls(width, height)
        buffer._pixels.copy_(grid.reshape(-1).to(torch.int32))
        return buffer

    @property
    def pixels(self) -> torch.Tensor:
        """No-copy flat handle; owners write through ``write``/``fill``."""
        return self._pixels

    def __len__(self) -> int:
        return self.width * self.height

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def get(self, x: int, y: int) -> PackedColor:
        if not self.contains(x, y):
            raise IndexError(f"pixel out of range: ({x}, {y})")
        return int(self._pixels[self.index(x, y)].item())

    def fill(self, color: PackedColor) -> None:
        self._pixels.fill_(validate_color(color))

    def write(self, indices: torch.Tensor, color: PackedColor) -> int:
        if indices.numel() == 0:
            return 0
        self._pixels[indices] = validate_color(color)
        return int(indices.numel())

    def as_grid(self) -> torch.Tensor:
        return self._pixels.view(self.height, self.width)

    def snapshot(self) -> torch.Tensor:
        return self._pixels.clone()
