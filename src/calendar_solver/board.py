from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from .types import EMPTY, WALL, Cell, Grid


@dataclass(frozen=True)
class Solution:
    """Immutable snapshot of a board.

    `cells[r][c]` is WALL, EMPTY or the id of the piece covering the cell.
    """

    cells: tuple[tuple[int, ...], ...]

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    @property
    def is_complete(self) -> bool:
        return all(v != EMPTY for row in self.cells for v in row)

    def piece_at(self, cell: Cell) -> int | None:
        v = self.cells[cell[0]][cell[1]]
        return v if v >= 0 else None

    def placements(self) -> dict[int, frozenset[Cell]]:
        """Cells covered by each piece, keyed by piece id."""
        out: dict[int, set[Cell]] = {}
        for r, row in enumerate(self.cells):
            for c, v in enumerate(row):
                if v >= 0:
                    out.setdefault(v, set()).add((r, c))
        return {k: frozenset(v) for k, v in sorted(out.items())}

    def as_array(self) -> np.ndarray:
        arr = np.array(self.cells, dtype=np.int16)
        arr.setflags(write=False)
        return arr


class Board:
    """Mutable occupancy grid a search places pieces on.

    Pieces are addressed by the list of their filled (row, col) offsets,
    see `grids.grid_to_cells`. `place`/`remove` do not validate; callers
    check with `can_place` first and remove in strict LIFO order.
    """

    def __init__(self, cells: Sequence[Sequence[int]]):
        if not cells or not cells[0]:
            raise ValueError("board must have at least one cell")
        if any(len(row) != len(cells[0]) for row in cells):
            raise ValueError("board rows must have equal length")
        self.cells: list[list[int]] = [[int(v) for v in row] for row in cells]
        self.rows = len(self.cells)
        self.cols = len(self.cells[0])

    @classmethod
    def from_layout(cls, layout: Grid, blocked: Iterable[Cell] = ()) -> Board:
        """Playable layout cells become EMPTY, the rest and `blocked` WALL."""
        board = cls([[EMPTY if v else WALL for v in row] for row in layout])
        for r, c in blocked:
            if not (0 <= r < board.rows and 0 <= c < board.cols):
                raise ValueError(f"blocked cell {(r, c)} is outside the board")
            board.cells[r][c] = WALL
        return board

    def can_place(self, shape_cells: Sequence[Cell], row: int, col: int) -> bool:
        cells = self.cells
        rows = self.rows
        cols = self.cols
        for dr, dc in shape_cells:
            r = row + dr
            c = col + dc
            if r < 0 or c < 0 or r >= rows or c >= cols:
                return False
            if cells[r][c] != EMPTY:
                return False
        return True

    def place(
        self, shape_cells: Sequence[Cell], row: int, col: int, piece_id: int
    ) -> None:
        cells = self.cells
        for dr, dc in shape_cells:
            cells[row + dr][col + dc] = piece_id

    def remove(self, shape_cells: Sequence[Cell], row: int, col: int) -> None:
        cells = self.cells
        for dr, dc in shape_cells:
            cells[row + dr][col + dc] = EMPTY

    def find_first_empty(self) -> Cell | None:
        for r, row in enumerate(self.cells):
            for c, v in enumerate(row):
                if v == EMPTY:
                    return (r, c)
        return None

    def count(self, state: int) -> int:
        return sum(1 for row in self.cells for v in row if v == state)

    def copy_cells(self) -> list[list[int]]:
        return [list(row) for row in self.cells]

    def snapshot(self) -> Solution:
        return Solution(tuple(tuple(row) for row in self.cells))
