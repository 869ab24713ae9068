from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from contextlib import closing

from .board import Board, Solution
from .config import SolverConfig
from .layouts import target_cells
from .pieces import get_puzzle
from .search import BacktrackingSearch
from .types import Cell, Piece, Puzzle, Variant, check_variant

logger = logging.getLogger(__name__)

UpdateCallback = Callable[[list[list[int]]], None]
SolutionCallback = Callable[[Solution], None]
CountCallback = Callable[[int], None]


class CalendarSolver:
    """Tiles one calendar board with the date's target cells blocked.

    Each instance owns its board; run concurrent searches on separate
    instances. Solutions of every run are accumulated in discovery order.
    """

    def __init__(
        self,
        variant: Variant,
        month: int,
        day: int,
        weekday: int | None = None,
        *,
        pieces: Sequence[Piece] | None = None,
        config: SolverConfig | None = None,
    ):
        self.variant = check_variant(variant)
        self.month = month
        self.day = day
        self.weekday = weekday
        self.config = config or SolverConfig()
        self.puzzle: Puzzle = get_puzzle(self.variant, pieces)
        self.blocked_cells: list[Cell] = target_cells(
            self.variant, month, day, weekday
        )
        self.board = Board.from_layout(self.puzzle.layout, self.blocked_cells)
        self._search = BacktrackingSearch(
            self.board,
            self.puzzle.pieces,
            min_piece_size=self.puzzle.min_piece_size,
        )
        self._solutions: list[Solution] = []

    @property
    def pieces(self) -> tuple[Piece, ...]:
        return self.puzzle.pieces

    @property
    def stopped(self) -> bool:
        return self._search.stopped

    @property
    def running(self) -> bool:
        return self._search.running

    def stop(self) -> None:
        """Ask the running (and any later) search to stop."""
        if not self._search.stopped:
            logger.info(
                "Stop requested after %d solutions", len(self._solutions)
            )
        self._search.stop()

    def get_solutions(self) -> list[Solution]:
        return list(self._solutions)

    def _limit(self, limit: int | None) -> int:
        return self.config.default_limit if limit is None else limit

    def solve(self, limit: int | None = None) -> None:
        """Run the search to completion (or `limit` solutions), blocking."""
        with closing(self._search.run(self._limit(limit))) as events:
            for event in events:
                if event.solution is not None:
                    self._solutions.append(event.solution)

    async def solve_animated(
        self,
        on_update: UpdateCallback,
        step_delay: float | None = None,
        limit: int = 1,
    ) -> None:
        """Search while reporting every placement step to `on_update`.

        After each place and remove the callback receives a copy of the board
        and the search sleeps `step_delay` seconds; a found solution is shown
        for `solution_pause_factor` times as long.
        """
        delay = self.config.step_delay if step_delay is None else step_delay
        pause = delay * self.config.solution_pause_factor
        with closing(self._search.run(limit, trace=True)) as events:
            for event in events:
                if event.kind == "solution":
                    assert event.solution is not None
                    self._solutions.append(event.solution)
                    on_update(self.board.copy_cells())
                    await asyncio.sleep(pause)
                else:
                    on_update(self.board.copy_cells())
                    await asyncio.sleep(delay)
                if self.stopped:
                    break

    async def solve_live(
        self,
        on_solution: SolutionCallback,
        limit: int | None = None,
        on_count: CountCallback | None = None,
    ) -> None:
        """Search without blocking the event loop, streaming solutions.

        Each solution goes to `on_solution` as soon as it is found and
        `on_count` receives the running total of this run. The loop yields
        to other tasks every `live_checkpoint_every` frames and after each
        solution; `stop()` takes effect at the next of these points.
        """
        found = 0
        with closing(
            self._search.run(
                self._limit(limit),
                checkpoint_every=self.config.live_checkpoint_every,
            )
        ) as events:
            for event in events:
                if event.kind == "checkpoint":
                    await asyncio.sleep(0)
                    if self.stopped:
                        break
                    continue
                assert event.solution is not None
                self._solutions.append(event.solution)
                found += 1
                on_solution(event.solution)
                if on_count is not None:
                    on_count(found)
                await asyncio.sleep(0)
                if self.stopped:
                    break
