from collections.abc import Iterator, Sequence

from .types import EMPTY


def iter_empty_regions(cells: Sequence[Sequence[int]]) -> Iterator[int]:
    """Yield the size of each 4-connected EMPTY region, row-major order."""
    rows = len(cells)
    cols = len(cells[0])
    visited = [[False] * cols for _ in range(rows)]

    for r0 in range(rows):
        for c0 in range(cols):
            if cells[r0][c0] != EMPTY or visited[r0][c0]:
                continue
            visited[r0][c0] = True
            stack = [(r0, c0)]
            size = 0
            while stack:
                r, c = stack.pop()
                size += 1
                for nr, nc in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
                    if (
                        0 <= nr < rows
                        and 0 <= nc < cols
                        and not visited[nr][nc]
                        and cells[nr][nc] == EMPTY
                    ):
                        visited[nr][nc] = True
                        stack.append((nr, nc))
            yield size


def is_dead_end(cells: Sequence[Sequence[int]], min_size: int) -> bool:
    """True if some EMPTY region has fewer than `min_size` cells.

    No piece fits into such a region, so the board cannot be completed.
    Stops at the first undersized region.
    """
    return any(size < min_size for size in iter_empty_regions(cells))
