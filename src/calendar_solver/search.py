from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Literal

from .board import Board, Solution
from .grids import grid_to_cells
from .pruning import is_dead_end
from .types import Cell, Piece

logger = logging.getLogger(__name__)

EventKind = Literal["place", "remove", "solution", "checkpoint"]


@dataclass(frozen=True)
class SearchEvent:
    kind: EventKind
    piece_id: int | None = None
    solution: Solution | None = None


CHECKPOINT = SearchEvent("checkpoint")


class BacktrackingSearch:
    """Depth-first tiling search over a single board.

    `run` is a generator: it mutates the board in place while the caller
    drains it and yields `SearchEvent`s at the points where a caller may
    suspend. Every placement is undone before its frame returns, also when
    the generator is closed early, so the board ends in its initial state.
    """

    def __init__(
        self,
        board: Board,
        pieces: Sequence[Piece],
        *,
        min_piece_size: int | None = None,
    ):
        self.board = board
        self.pieces = list(pieces)
        if min_piece_size is None:
            min_piece_size = min((p.size for p in self.pieces), default=1)
        self.min_piece_size = min_piece_size
        # Filled offsets per orientation, anchors are tried in this order.
        self._orientation_cells: list[list[list[Cell]]] = [
            [grid_to_cells(shape) for shape in p.orientations]
            for p in self.pieces
        ]
        self._available = [True] * len(self.pieces)

        self.solutions: list[Solution] = []
        self.stopped = False
        self.running = False
        self.nodes = 0
        self.placements = 0

    def stop(self) -> None:
        self.stopped = True

    def finished(self, limit: int) -> bool:
        return self.stopped or len(self.solutions) >= limit

    def run(
        self,
        limit: int,
        *,
        trace: bool = False,
        checkpoint_every: int = 0,
    ) -> Iterator[SearchEvent]:
        """Search for up to `limit` solutions.

        trace: also yield a "place" event after every placement and a
            "remove" event after every backtrack that continues the search.
        checkpoint_every: yield a "checkpoint" event every N frames entered.
        """
        if self.running:
            raise RuntimeError("search already running")
        self.running = True
        self.solutions = []
        self.nodes = 0
        self.placements = 0
        logger.debug(
            "Search start: %d pieces, limit=%d, min piece size=%d",
            len(self.pieces),
            limit,
            self.min_piece_size,
        )
        try:
            yield from self._frame(limit, trace, checkpoint_every)
        finally:
            self.running = False
            logger.debug(
                "Search end: %d solutions, %d nodes, %d placements%s",
                len(self.solutions),
                self.nodes,
                self.placements,
                " (stopped)" if self.stopped else "",
            )

    def _frame(
        self, limit: int, trace: bool, checkpoint_every: int
    ) -> Iterator[SearchEvent]:
        if self.finished(limit):
            return
        self.nodes += 1
        if checkpoint_every and self.nodes % checkpoint_every == 0:
            yield CHECKPOINT
            if self.finished(limit):
                return

        board = self.board
        spot = board.find_first_empty()
        if spot is None:
            solution = board.snapshot()
            self.solutions.append(solution)
            yield SearchEvent("solution", solution=solution)
            return

        if is_dead_end(board.cells, self.min_piece_size):
            return

        r, c = spot
        available = self._available
        for i, piece in enumerate(self.pieces):
            if not available[i]:
                continue
            for shape_cells in self._orientation_cells[i]:
                # Every filled cell may be the one covering (r, c).
                for ir, ic in shape_cells:
                    row = r - ir
                    col = c - ic
                    if row < 0 or col < 0:
                        continue
                    if not board.can_place(shape_cells, row, col):
                        continue

                    board.place(shape_cells, row, col, piece.id)
                    available[i] = False
                    self.placements += 1
                    try:
                        if trace:
                            yield SearchEvent("place", piece_id=piece.id)
                        yield from self._frame(limit, trace, checkpoint_every)
                    finally:
                        available[i] = True
                        board.remove(shape_cells, row, col)

                    if self.finished(limit):
                        return
                    if trace:
                        yield SearchEvent("remove", piece_id=piece.id)
