from __future__ import annotations

import argparse
import asyncio
import datetime
import logging
import sys

from .api import catalog_balance, targets_for_date
from .board import Solution
from .config import load_config
from .layouts import MONTHS, WEEKDAYS
from .printing import format_grid, format_solution, format_targets
from .solver import CalendarSolver
from .types import VARIANTS
from .yaml_io import load_pieces_yaml

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\x1b[H\x1b[2J"


def _parse_date(value: str) -> datetime.date:
    try:
        return datetime.date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"{value!r} is not a date in YYYY-MM-DD format"
        ) from None


def _month_index(value: str) -> int:
    names = [m.lower() for m in MONTHS]
    if value.lower()[:3] in names:
        return names.index(value.lower()[:3])
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid month: {value!r}") from None
    if not 1 <= n <= 12:
        raise argparse.ArgumentTypeError("month must be in 1..12")
    return n - 1


def _weekday_index(value: str) -> int:
    names = [w.lower() for w in WEEKDAYS]
    if value.lower()[:3] in names:
        return names.index(value.lower()[:3])
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid weekday: {value!r}") from None
    if not 1 <= n <= 7:
        raise argparse.ArgumentTypeError("weekday must be in 1..7 (1 = Monday)")
    return n - 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calendar-solver",
        description="Find tilings of the calendar puzzle for a date",
    )
    parser.add_argument(
        "--variant",
        choices=VARIANTS,
        default="double",
        help="double: month + day, triple: month + day + weekday",
    )
    parser.add_argument(
        "--date",
        type=_parse_date,
        default=None,
        help="Date to solve (YYYY-MM-DD), defaults to today",
    )
    parser.add_argument(
        "--month",
        type=_month_index,
        default=None,
        help="Month (1-12 or name), overrides --date",
    )
    parser.add_argument(
        "--day", type=int, default=None, help="Day of month, overrides --date"
    )
    parser.add_argument(
        "--weekday",
        type=_weekday_index,
        default=None,
        help="Weekday (1-7 or name, 1 = Monday), overrides --date",
    )
    parser.add_argument(
        "--mode",
        choices=("all", "first", "live", "animate"),
        default="all",
        help="all: exhaustive, first: first solution, live: stream solutions, "
        "animate: show every placement step",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Max solutions to collect (default from config)",
    )
    parser.add_argument(
        "--pieces",
        type=str,
        default=None,
        help="Path to a YAML piece catalog replacing the built-in pieces",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML solver config (delays, limits)",
    )
    parser.add_argument(
        "--show",
        type=int,
        default=1,
        help="Number of solutions to print",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )
    return parser


def _targets(args: argparse.Namespace) -> tuple[int, int, int | None]:
    date = args.date or datetime.date.today()
    month, day, weekday = targets_for_date(date, args.variant)
    if args.month is not None:
        month = args.month
    if args.day is not None:
        day = args.day
    if args.weekday is not None and args.variant == "triple":
        weekday = args.weekday
    return month, day, weekday


def _print_solutions(solver: CalendarSolver, solutions: list[Solution], show: int) -> None:
    for i, sol in enumerate(solutions[: max(0, show)], start=1):
        print(f"Solution {i}:")
        print(format_solution(sol, solver.pieces))
        print()


def _run(solver: CalendarSolver, args: argparse.Namespace) -> None:
    if args.mode == "all":
        solver.solve(args.limit)
        _print_solutions(solver, solver.get_solutions(), args.show)
    elif args.mode == "first":
        solver.solve(1)
        _print_solutions(solver, solver.get_solutions(), 1)
    elif args.mode == "live":

        def on_solution(sol: Solution) -> None:
            n = len(solver.get_solutions())
            if n <= args.show:
                print(f"Solution {n}:")
                print(format_solution(sol, solver.pieces))
                print()

        def on_count(n: int) -> None:
            if n > args.show:
                print(f"\rFound {n} solutions", end="", flush=True)

        asyncio.run(solver.solve_live(on_solution, args.limit, on_count=on_count))
        if len(solver.get_solutions()) > args.show:
            print()
    else:

        def on_update(cells: list[list[int]]) -> None:
            print(CLEAR_SCREEN + format_grid(cells, solver.pieces), flush=True)

        limit = 1 if args.limit is None else args.limit
        asyncio.run(solver.solve_animated(on_update, limit=limit))


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=level,
    )

    config = load_config(args.config)
    pieces = None
    if args.pieces is not None:
        file_variant, pieces = load_pieces_yaml(args.pieces)
        if file_variant is not None and file_variant != args.variant:
            logger.warning(
                "%s defines pieces for %s, solving %s",
                args.pieces,
                file_variant,
                args.variant,
            )

    month, day, weekday = _targets(args)
    try:
        solver = CalendarSolver(
            args.variant, month, day, weekday, pieces=pieces, config=config
        )
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    balance = catalog_balance(solver)
    if balance != 0:
        logger.warning(
            "Pieces do not match the free cells (difference %d), "
            "no solution can exist",
            balance,
        )

    print(f"Solving {format_targets(solver.blocked_cells, args.variant)}")
    try:
        _run(solver, args)
    except KeyboardInterrupt:
        solver.stop()
        print()
        print("Interrupted")

    n = len(solver.get_solutions())
    suffix = " (stopped early)" if solver.stopped else ""
    print(f"{n} solution{'s' if n != 1 else ''} found{suffix}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
