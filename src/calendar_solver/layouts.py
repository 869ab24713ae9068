from .types import Cell, Grid, Variant, check_variant

MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def _layout_from_rows(rows: list[str]) -> Grid:
    return [[ch == "o" for ch in row] for row in rows]


# 'o' = playable cell, '.' = wall.
# Rows 0-1 hold the months, rows 2-5 days 1-28, row 6 days 29-31.
LAYOUT_DOUBLE: Grid = _layout_from_rows(
    [
        "oooooo.",
        "oooooo.",
        "ooooooo",
        "ooooooo",
        "ooooooo",
        "ooooooo",
        "ooo....",
    ]
)

# Same as the double layout, with Mon-Thu following day 31 on row 6 and
# Fri-Sun in the last three columns of row 7.
LAYOUT_TRIPLE: Grid = _layout_from_rows(
    [
        "oooooo.",
        "oooooo.",
        "ooooooo",
        "ooooooo",
        "ooooooo",
        "ooooooo",
        "ooooooo",
        "....ooo",
    ]
)


def get_layout(variant: Variant) -> Grid:
    """Return a fresh copy of the playable/wall grid for a variant."""
    layout = LAYOUT_TRIPLE if check_variant(variant) == "triple" else LAYOUT_DOUBLE
    return [list(row) for row in layout]


def month_cell(month_index: int) -> Cell:
    """Cell of a month, 0 = January."""
    if not 0 <= month_index < 12:
        raise ValueError(f"month index must be in 0..11, got {month_index}")
    if month_index < 6:
        return (0, month_index)
    return (1, month_index - 6)


def day_cell(day: int) -> Cell:
    if not 1 <= day <= 31:
        raise ValueError(f"day must be in 1..31, got {day}")
    if day <= 28:
        idx = day - 1
        return (2 + idx // 7, idx % 7)
    return (6, day - 29)


def weekday_cell(weekday_index: int, variant: Variant) -> Cell | None:
    """Cell of a weekday (0 = Monday), or None when the variant has none."""
    if not 0 <= weekday_index < 7:
        raise ValueError(f"weekday index must be in 0..6, got {weekday_index}")
    if check_variant(variant) != "triple":
        return None
    if weekday_index <= 3:
        return (6, 3 + weekday_index)
    return (7, weekday_index)


def target_cells(
    variant: Variant, month_index: int, day: int, weekday_index: int | None
) -> list[Cell]:
    """Cells blocked to display a date: month, day and optionally weekday."""
    cells = [month_cell(month_index), day_cell(day)]
    if weekday_index is not None:
        w = weekday_cell(weekday_index, variant)
        if w is not None:
            cells.append(w)
    return cells


def cell_label(row: int, col: int, variant: Variant) -> str:
    """Calendar label printed on a cell, or '' for walls."""
    if row < 2:
        return MONTHS[row * 6 + col] if col < 6 else ""
    if row <= 5:
        return str((row - 2) * 7 + col + 1)
    if row == 6:
        if col < 3:
            return str(29 + col)
        if variant == "triple":
            return WEEKDAYS[col - 3]
        return ""
    if row == 7 and variant == "triple" and col >= 4:
        return WEEKDAYS[col]
    return ""
