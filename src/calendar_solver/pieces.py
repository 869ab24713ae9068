from collections.abc import Sequence

from .grids import canonical_shape, generate_orientations
from .layouts import get_layout
from .types import Piece, Puzzle, Variant, check_variant

# Pieces of the classic month + day puzzle: one 2x3 hexomino and seven
# pentominoes, 41 cells for the 43 playable cells minus two targets.
_DOUBLE_SHAPES: list[tuple[str, list[str]]] = [
    ("Rect6", ["###", "###"]),
    ("U5", ["#.#", "###"]),
    ("L5", ["#...", "####"]),
    ("P5", ["##", "##", "#."]),
    ("N5", [".#", "##", "#.", "#."]),
    ("Z5", ["##.", ".#.", ".##"]),
    ("Y5", [".#", "##", ".#", ".#"]),
    ("V5", ["#..", "#..", "###"]),
]

# The weekday board has 7 more playable cells and one more target.
_TRIPLE_EXTRA_SHAPES: list[tuple[str, list[str]]] = [
    ("Stairs6", ["#..", "##.", "###"]),
]


def shape_from_rows(rows: Sequence[str]) -> list[list[bool]]:
    return [[ch not in ". 0" for ch in row] for row in rows]


def make_piece(piece_id: int, name: str, grid: Sequence[Sequence[object]]) -> Piece:
    """Build a piece with its canonical shape and every orientation."""
    shape = canonical_shape(grid)
    return Piece(piece_id, name, shape, generate_orientations(shape))


def build_pieces(variant: Variant) -> list[Piece]:
    """The closed piece catalog of a variant, ids in catalog order."""
    raw = list(_DOUBLE_SHAPES)
    if check_variant(variant) == "triple":
        raw.extend(_TRIPLE_EXTRA_SHAPES)
    return [
        make_piece(i, name, shape_from_rows(rows))
        for i, (name, rows) in enumerate(raw)
    ]


def renumber_pieces(pieces: Sequence[Piece]) -> list[Piece]:
    """Reassign ids 0..n-1 in order, regenerating orientations if missing."""
    out: list[Piece] = []
    for i, p in enumerate(pieces):
        if p.id == i and p.orientations:
            out.append(p)
        else:
            out.append(make_piece(i, p.name, p.shape))
    return out


def get_puzzle(variant: Variant, pieces: Sequence[Piece] | None = None) -> Puzzle:
    """Layout plus catalog for a variant; `pieces` overrides the built-in set."""
    catalog = build_pieces(variant) if pieces is None else renumber_pieces(pieces)
    if not catalog:
        raise ValueError("piece catalog is empty")
    return Puzzle(variant=variant, layout=get_layout(variant), pieces=tuple(catalog))


def cell_count_balance(puzzle: Puzzle, n_targets: int) -> int:
    """Playable cells left after the targets minus the cells of all pieces.

    Zero means the catalog can cover the board exactly; any other value
    guarantees the search finds no solution.
    """
    return puzzle.playable_cells - n_targets - sum(p.size for p in puzzle.pieces)
