from __future__ import annotations

from typing import Iterator

import torch

from rasterkit.core.shapes import Circle, Line, Rectangle, Triangle


def empty_indices() -> torch.Tensor:
    return torch.empty(0, dtype=torch.int64)


def rect_indices(rect: Rectangle, width: int, height: int) -> torch.Tensor:
    """Flat indices of ``[x0, x0+w) x [y0, y0+h)`` clipped to the buffer."""
    if rect.width <= 0 or rect.height <= 0:
        return empty_indices()
    x0 = max(0, rect.x0)
    y0 = max(0, rect.y0)
    x1 = min(width, rect.x0 + rect.width)
    y1 = min(height, rect.y0 + rect.height)
    if x1 <= x0 or y1 <= y0:
        return empty_indices()
    ys = torch.arange(y0, y1, dtype=torch.int64).unsqueeze(1)
    xs = torch.arange(x0, x1, dtype=torch.int64).unsqueeze(0)
    return (ys * width + xs).reshape(-1)


def circle_indices(circle: Circle, width: int, height: int) -> torch.Tensor:
    """Flat indices of pixels within ``radius`` of the center, inclusive."""
    radius = circle.radius
    if radius < 0:
        return empty_indices()
    cx, cy = circle.x0, circle.y0
    x0 = max(0, cx - radius)
    y0 = max(0, cy - radius)
    x1 = min(width, cx + radius + 1)
    y1 = min(height, cy + radius + 1)
    if x1 <= x0 or y1 <= y0:
        return empty_indices()
    ys = torch.arange(y0, y1, dtype=torch.int64).unsqueeze(1)
    xs = torch.arange(x0, x1, dtype=torch.int64).unsqueeze(0)
    dist2 = (xs - cx) ** 2 + (ys - cy) ** 2
    mask = dist2 <= radius * radius
    flat = ys * width + xs
    return flat[mask]


def line_points(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Bresenham walk from ``(x0, y0)`` to ``(x1, y1)``, both ends included."""
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy
    while True:
        yield (x0, y0)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy


def line_indices(line: Line, width: int, height: int) -> torch.Tensor:
    xs = (line.x0, line.x1)
    ys = (line.y0, line.y1)
    if max(xs) < 0 or min(xs) >= width or max(ys) < 0 or min(ys) >= height:
        return empty_indices()
    flat: list[int] = []
    for x, y in line_points(line.x0, line.y0, line.x1, line.y1):
        if 0 <= x < width and 0 <= y < height:
            flat.append(y * width + x)
        elif flat:
            # Both coordinates move monotonically, so a walk that has left
            # the buffer never re-enters it.
            break
    if not flat:
        return empty_indices()
    return torch.tensor(flat, dtype=torch.int64)


def triangle_spans(triangle: Triangle, height: int | None = None) -> Iterator[tuple[int, int, int]]:
    """Yield ``(y, x_start, x_end)`` scanline spans, x unclipped.

    The top pass walks edges 1->2 and 1->3 anchored at the top vertex; the
    bottom pass walks edges 3->2 and 3->1 anchored at the bottom vertex. The
    middle scanline is produced by both passes. With ``height`` set, only rows
    in ``[0, height)`` are visited.
    """
    t = triangle.sorted_by_y()
    for y in _rows(t.y1, t.y2, height):
        s1 = _edge_x(y, t.x1, t.y1, t.x2, t.y2)
        s2 = _edge_x(y, t.x1, t.y1, t.x3, t.y3)
        yield (y, min(s1, s2), max(s1, s2))
    for y in _rows(t.y2, t.y3, height):
        s1 = _edge_x(y, t.x3, t.y3, t.x2, t.y2)
        s2 = _edge_x(y, t.x3, t.y3, t.x1, t.y1)
        yield (y, min(s1, s2), max(s1, s2))


def triangle_indices(triangle: Triangle, width: int, height: int) -> torch.Tensor:
    rows: list[torch.Tensor] = []
    for y, xa, xb in triangle_spans(triangle, height):
        xa = max(0, xa)
        xb = min(width - 1, xb)
        if xa > xb:
            continue
        rows.append(torch.arange(xa, xb + 1, dtype=torch.int64) + y * width)
    if not rows:
        return empty_indices()
    # The middle scanline comes from both passes.
    return torch.unique(torch.cat(rows))


def _rows(y_start: int, y_end: int, height: int | None) -> range:
    if height is None:
        return range(y_start, y_end + 1)
    return range(max(y_start, 0), min(y_end, height - 1) + 1)


def _edge_x(y: int, ax: int, ay: int, bx: int, by: int) -> int:
    """x on the edge anchored at ``(ax, ay)`` toward ``(bx, by)`` at row ``y``."""
    dy = by - ay
    if dy == 0:
        return ax
    return _trunc_div((y - ay) * (bx - ax), dy) + ax


def _trunc_div(numerator: int, denominator: int) -> int:
    # Rounds toward zero, unlike floor division.
    q = abs(numerator) // abs(denominator)
    return q if (numerator >= 0) == (denominator > 0) else -q
