from collections.abc import Sequence
from typing import TypeVar

from .types import Cell, Shape

T = TypeVar("T")


def rotate_grid_90_cw(grid: Sequence[Sequence[T]]) -> list[list[T]]:
    """Rotate an HxW grid into a WxH grid: new[c][H-1-r] = old[r][c]."""
    h = len(grid)
    w = len(grid[0])
    return [[grid[h - 1 - y][x] for y in range(h)] for x in range(w)]


def rotate_grid(grid: Sequence[Sequence[T]], k_cw: int) -> list[list[T]]:
    k = k_cw % 4
    out = [list(row) for row in grid]
    for _ in range(k):
        out = rotate_grid_90_cw(out)
    return out


def flip_grid_y(grid: Sequence[Sequence[T]]) -> list[list[T]]:
    """Horizontal mirror: reverse each row."""
    return [list(reversed(row)) for row in grid]


def canonical_shape(grid: Sequence[Sequence[object]]) -> Shape:
    """Hashable normal form of a shape, trimmed to its bounding box.

    Rows and columns without a filled cell are dropped from all four sides.
    """
    filled = [(y, x) for y, row in enumerate(grid) for x, v in enumerate(row) if v]
    if not filled:
        raise ValueError("shape has no filled cells")
    y0 = min(y for y, _ in filled)
    y1 = max(y for y, _ in filled)
    x0 = min(x for _, x in filled)
    x1 = max(x for _, x in filled)
    return tuple(
        tuple(bool(grid[y][x]) for x in range(x0, x1 + 1))
        for y in range(y0, y1 + 1)
    )


def generate_orientations(shape: Sequence[Sequence[object]]) -> tuple[Shape, ...]:
    """All distinct rotations and mirror images of a shape.

    Order is rotation-major, mirror-minor: rotation 0, its mirror, rotation 1,
    its mirror and so on, skipping shapes already produced. The search
    enumerates candidates in this order.
    """
    current = canonical_shape(shape)
    seen: set[Shape] = set()
    out: list[Shape] = []
    for _ in range(4):
        for candidate in (current, canonical_shape(flip_grid_y(current))):
            if candidate not in seen:
                seen.add(candidate)
                out.append(candidate)
        current = canonical_shape(rotate_grid_90_cw(current))
    return tuple(out)


def grid_to_cells(grid: Sequence[Sequence[object]]) -> list[Cell]:
    """Filled cells as (row, col), in row-major order."""
    cells: list[Cell] = []
    for y, row in enumerate(grid):
        for x, v in enumerate(row):
            if v:
                cells.append((y, x))
    return cells


def shape_to_text(shape: Sequence[Sequence[object]]) -> list[str]:
    return ["".join("#" if v else "." for v in row) for row in shape]
