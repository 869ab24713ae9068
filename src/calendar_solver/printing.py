from collections.abc import Sequence

import numpy as np

from .board import Solution
from .layouts import cell_label
from .types import EMPTY, WALL, Cell, Piece, Variant

_FALLBACK_SYMBOLS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def piece_symbols(pieces: Sequence[Piece]) -> dict[int, str]:
    """One display character per piece id: the name's initial if unique."""
    initials = [p.name[:1].upper() for p in pieces]
    unique = len(set(initials)) == len(initials) and all(initials)
    out: dict[int, str] = {}
    for i, p in enumerate(pieces):
        out[p.id] = initials[i] if unique else _FALLBACK_SYMBOLS[i % 26]
    return out


def format_grid(
    cells: Sequence[Sequence[int]],
    pieces: Sequence[Piece] | None = None,
) -> str:
    """Multiline text view of a board: piece symbols, '#' wall, '.' empty."""
    arr = np.asarray(cells, dtype=np.int16)
    symbols = piece_symbols(pieces) if pieces else {}
    out = np.full(arr.shape, "?", dtype=object)
    out[arr == WALL] = "#"
    out[arr == EMPTY] = "."
    for piece_id in np.unique(arr[arr >= 0]):
        out[arr == piece_id] = symbols.get(
            int(piece_id), _FALLBACK_SYMBOLS[int(piece_id) % 26]
        )
    return "\n".join(" ".join(row) for row in out)


def format_solution(solution: Solution, pieces: Sequence[Piece] | None = None) -> str:
    return format_grid(solution.cells, pieces)


def format_targets(cells: Sequence[Cell], variant: Variant) -> str:
    """Labels of the blocked target cells, e.g. 'Jan 1'."""
    return " ".join(cell_label(r, c, variant) for r, c in cells)
