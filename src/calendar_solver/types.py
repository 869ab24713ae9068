from dataclasses import dataclass, field
from typing import Literal

Cell = tuple[int, int]
Grid = list[list[bool]]
Shape = tuple[tuple[bool, ...], ...]
Variant = Literal["double", "triple"]

VARIANTS: tuple[Variant, ...] = ("double", "triple")

# Cell states of a board. Any value >= 0 is the id of the occupying piece.
EMPTY = -1
WALL = -2


def check_variant(variant: str) -> Variant:
    if variant not in VARIANTS:
        raise ValueError(
            f"Unknown variant {variant!r}, expected one of {VARIANTS}"
        )
    return variant  # type: ignore[return-value]


@dataclass(frozen=True)
class Piece:
    id: int
    name: str
    shape: Shape
    orientations: tuple[Shape, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        if self.id < 0:
            raise ValueError(f"Piece {self.name}: id must be >= 0")
        if not self.shape or not self.shape[0]:
            raise ValueError(f"Piece {self.name}: shape must be non-empty")
        if any(len(row) != len(self.shape[0]) for row in self.shape):
            raise ValueError(f"Piece {self.name}: shape rows must be equal")

    @property
    def size(self) -> int:
        return sum(1 for row in self.shape for v in row if v)


@dataclass(frozen=True)
class Puzzle:
    """A variant's playable layout together with its closed piece catalog."""

    variant: Variant
    layout: Grid
    pieces: tuple[Piece, ...]

    @property
    def rows(self) -> int:
        return len(self.layout)

    @property
    def cols(self) -> int:
        return len(self.layout[0])

    @property
    def playable_cells(self) -> int:
        return sum(1 for row in self.layout for v in row if v)

    @property
    def min_piece_size(self) -> int:
        return min(p.size for p in self.pieces)
