from collections.abc import Sequence
from pathlib import Path

import yaml

from .grids import shape_to_text
from .pieces import make_piece, shape_from_rows
from .types import Piece, Variant, check_variant


def _coerce_bool_list(values: object, *, label: str) -> list[bool]:
    if isinstance(values, str):
        return shape_from_rows([values])[0]
    if not isinstance(values, (list, tuple)):
        raise TypeError(f"{label} must be a string or a list")

    out: list[bool] = []
    for i, v in enumerate(values):
        if isinstance(v, bool):
            out.append(v)
        elif isinstance(v, int):
            out.append(v != 0)
        elif isinstance(v, str):
            s = v.strip().lower()
            if s in {"true", "t", "1", "yes", "y", "#", "x"}:
                out.append(True)
            elif s in {"false", "f", "0", "no", "n", ".", ""}:
                out.append(False)
            else:
                raise ValueError(f"{label}[{i}] invalid boolean string: {v!r}")
        else:
            raise TypeError(
                f"{label}[{i}] must be bool/int/str, got {type(v).__name__}"
            )
    return out


def _coerce_shape(rows: object, *, label: str) -> list[list[bool]]:
    if not isinstance(rows, (list, tuple)) or not rows:
        raise ValueError(f"{label} must be a non-empty list of rows")
    grid = [
        _coerce_bool_list(row, label=f"{label}[{i}]") for i, row in enumerate(rows)
    ]
    if any(len(row) != len(grid[0]) for row in grid):
        raise ValueError(f"{label} rows must all have the same length")
    if not any(v for row in grid for v in row):
        raise ValueError(f"{label} has no filled cells")
    return grid


def load_pieces_yaml(path: str | Path) -> tuple[Variant | None, list[Piece]]:
    """Load a piece catalog from a YAML file.

    Returns the variant named in the file (or None) and the pieces with ids
    assigned in file order.
    """
    path = Path(path)
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("YAML root must be a mapping")

    variant: Variant | None = None
    if raw.get("variant") is not None:
        variant = check_variant(str(raw["variant"]))

    pieces_node = raw.get("pieces")
    if pieces_node is None:
        raise ValueError("YAML must contain key 'pieces'")

    named: list[tuple[str, list[list[bool]]]] = []
    if isinstance(pieces_node, dict):
        for name, rows in pieces_node.items():
            if not isinstance(name, str):
                raise ValueError("pieces mapping keys must be strings")
            named.append((name, _coerce_shape(rows, label=f"pieces.{name}")))
    elif isinstance(pieces_node, list):
        for idx, item in enumerate(pieces_node):
            if not isinstance(item, dict):
                raise ValueError(f"pieces[{idx}] must be a mapping")
            name = item.get("name")
            if not isinstance(name, str) or not name:
                raise ValueError(f"pieces[{idx}].name must be a non-empty string")
            named.append(
                (name, _coerce_shape(item.get("shape"), label=f"pieces[{idx}].shape"))
            )
    else:
        raise ValueError("pieces must be a list or mapping")

    if not named:
        raise ValueError("pieces must not be empty")
    names = [name for name, _ in named]
    if len(set(names)) != len(names):
        raise ValueError("Piece names must be unique")

    return variant, [make_piece(i, name, grid) for i, (name, grid) in enumerate(named)]


def dump_pieces_yaml(pieces: Sequence[Piece], *, variant: Variant | None = None) -> str:
    """Construct a YAML document (as string) from a piece catalog."""
    doc: dict[str, object] = {"version": 1}
    if variant is not None:
        doc["variant"] = variant
    doc["pieces"] = [
        {"name": p.name, "shape": shape_to_text(p.shape)}
        for p in sorted(pieces, key=lambda x: x.id)
    ]
    return yaml.safe_dump(doc, sort_keys=False)


def write_pieces_yaml(
    path: str | Path,
    pieces: Sequence[Piece],
    *,
    variant: Variant | None = None,
    overwrite: bool = False,
) -> None:
    p = Path(path)
    if p.exists() and not overwrite:
        raise FileExistsError(f"Refusing to overwrite existing file: {p}")
    p.write_text(dump_pieces_yaml(pieces, variant=variant), encoding="utf-8")
