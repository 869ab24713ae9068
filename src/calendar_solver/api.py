import datetime
from pathlib import Path

from .board import Solution
from .config import SolverConfig, load_config
from .pieces import cell_count_balance
from .solver import CalendarSolver
from .types import Piece, Variant, check_variant
from .yaml_io import load_pieces_yaml


def targets_for_date(
    date: datetime.date, variant: Variant
) -> tuple[int, int, int | None]:
    """(month index, day, weekday index or None) to block for a date.

    Month 0 is January and weekday 0 is Monday; the double variant has no
    weekday cell.
    """
    weekday = date.weekday() if check_variant(variant) == "triple" else None
    return date.month - 1, date.day, weekday


def solver_for_date(
    date: datetime.date,
    variant: Variant = "double",
    *,
    pieces: list[Piece] | None = None,
    config: SolverConfig | None = None,
) -> CalendarSolver:
    month, day, weekday = targets_for_date(date, variant)
    return CalendarSolver(variant, month, day, weekday, pieces=pieces, config=config)


def solve_date(
    date: datetime.date,
    variant: Variant = "double",
    *,
    limit: int | None = None,
    pieces_path: str | Path | None = None,
    config_path: str | Path | None = None,
) -> list[Solution]:
    """Solve a date exhaustively (up to `limit`) and return the solutions."""
    pieces = None
    if pieces_path is not None:
        file_variant, pieces = load_pieces_yaml(pieces_path)
        if file_variant is not None and file_variant != variant:
            raise ValueError(
                f"{pieces_path} defines pieces for {file_variant!r}, not {variant!r}"
            )
    solver = solver_for_date(
        date, variant, pieces=pieces, config=load_config(config_path)
    )
    solver.solve(limit)
    return solver.get_solutions()


def catalog_balance(solver: CalendarSolver) -> int:
    """Uncovered cells left once every piece is placed; 0 when feasible."""
    return cell_count_balance(solver.puzzle, len(solver.blocked_cells))
