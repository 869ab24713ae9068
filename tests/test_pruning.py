from calendar_solver.pruning import is_dead_end, iter_empty_regions
from calendar_solver.types import EMPTY, WALL


def _walled(rows: int, cols: int, empty: list[tuple[int, int]]) -> list[list[int]]:
    cells = [[WALL] * cols for _ in range(rows)]
    for r, c in empty:
        cells[r][c] = EMPTY
    return cells


def test_dead_end_for_region_smaller_than_smallest_piece():
    cells = _walled(4, 4, [(0, 0), (0, 1), (1, 0)])
    assert is_dead_end(cells, 4)


def test_no_dead_end_for_region_of_five():
    cells = _walled(4, 4, [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)])
    assert not is_dead_end(cells, 4)


def test_dead_end_ignores_diagonal_contact():
    # Two regions touching only at a corner are separate.
    cells = _walled(4, 4, [(0, 0), (0, 1), (1, 0), (1, 1), (2, 2), (3, 3)])
    assert list(iter_empty_regions(cells)) == [4, 1, 1]
    assert is_dead_end(cells, 4)
    assert not is_dead_end(cells, 1)


def test_full_board_is_not_dead_end():
    assert not is_dead_end([[0, 1], [WALL, 2]], 5)
