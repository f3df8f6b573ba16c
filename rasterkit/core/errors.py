from __future__ import annotations

from pathlib import Path


class ExportError(RuntimeError):
    """Raised when a pixel buffer cannot be written to its destination."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}")


class FileOpenError(ExportError):
    def __init__(self, path: str | Path) -> None:
        super().__init__(path, "failed to open export destination")


class FileWriteError(ExportError):
    def __init__(self, path: str | Path) -> None:
        super().__init__(path, "failed to write export data")
