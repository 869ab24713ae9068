import pytest

from calendar_solver.config import SolverConfig, dump_config, load_config
from calendar_solver.pieces import build_pieces
from calendar_solver.printing import format_grid, format_solution, format_targets, piece_symbols
from calendar_solver.board import Solution
from calendar_solver.types import EMPTY, WALL
from calendar_solver.yaml_io import dump_pieces_yaml, load_pieces_yaml, write_pieces_yaml


def test_load_config_defaults_without_file(tmp_path):
    assert load_config() == SolverConfig()
    assert load_config(tmp_path / "missing.yaml") == SolverConfig()


def test_load_config_reads_and_coerces_values(tmp_path):
    path = tmp_path / "solver.yaml"
    path.write_text(
        "step_delay: '0.2'\n"
        "solution_pause_factor: 3\n"
        "live_checkpoint_every: 40.0\n"
        "default_limit: nope\n"
        "unknown: 1\n",
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.step_delay == 0.2
    assert config.solution_pause_factor == 3.0
    assert config.solution_pause == pytest.approx(0.6)
    assert config.live_checkpoint_every == 40
    assert config.default_limit == SolverConfig().default_limit


def test_load_config_ignores_non_mapping(tmp_path):
    path = tmp_path / "solver.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    assert load_config(path) == SolverConfig()


def test_dump_config_round_trips(tmp_path):
    config = SolverConfig(step_delay=0.01, default_limit=7)
    path = tmp_path / "solver.yaml"
    dump_config(config, path)
    assert load_config(path) == config


def test_solver_config_validates():
    with pytest.raises(ValueError):
        SolverConfig(step_delay=-1)
    with pytest.raises(ValueError):
        SolverConfig(live_checkpoint_every=0)


def test_load_pieces_yaml_accepts_strings_and_lists(tmp_path):
    path = tmp_path / "pieces.yaml"
    path.write_text(
        "version: 1\n"
        "variant: double\n"
        "pieces:\n"
        "  - name: Bar\n"
        "    shape: ['#####']\n"
        "  - name: Corner\n"
        "    shape:\n"
        "      - [1, 0]\n"
        "      - [true, 'yes']\n"
        "      - [0, 0]\n",
        encoding="utf-8",
    )
    variant, pieces = load_pieces_yaml(path)
    assert variant == "double"
    assert [p.name for p in pieces] == ["Bar", "Corner"]
    assert [p.id for p in pieces] == [0, 1]
    assert pieces[0].shape == ((True,) * 5,)
    # Empty trailing row is trimmed away.
    assert pieces[1].shape == ((True, False), (True, True))
    assert len(pieces[1].orientations) == 4


def test_load_pieces_yaml_mapping_form(tmp_path):
    path = tmp_path / "pieces.yaml"
    path.write_text("pieces:\n  Dot: ['X']\n", encoding="utf-8")
    variant, pieces = load_pieces_yaml(path)
    assert variant is None
    assert pieces[0].name == "Dot"


@pytest.mark.parametrize(
    "body",
    [
        "pieces: []\n",
        "- 1\n",
        "variant: quad\npieces:\n  A: ['#']\n",
        "pieces:\n  - name: A\n    shape: ['#']\n  - name: A\n    shape: ['##']\n",
        "pieces:\n  A: ['##', '#']\n",
        "pieces:\n  A: ['..']\n",
        "pieces:\n  A: [[1, maybe]]\n",
    ],
)
def test_load_pieces_yaml_rejects_invalid(tmp_path, body):
    path = tmp_path / "pieces.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ValueError):
        load_pieces_yaml(path)


def test_dumped_catalog_loads_back(tmp_path):
    pieces = build_pieces("double")
    text = dump_pieces_yaml(pieces, variant="double")
    assert "Rect6" in text
    path = tmp_path / "pieces.yaml"
    write_pieces_yaml(path, pieces, variant="double")
    with pytest.raises(FileExistsError):
        write_pieces_yaml(path, pieces)
    variant, loaded = load_pieces_yaml(path)
    assert variant == "double"
    assert loaded == pieces


def test_piece_symbols_use_initials():
    symbols = piece_symbols(build_pieces("double"))
    assert symbols[0] == "R"
    assert len(set(symbols.values())) == 8


def test_format_grid():
    cells = [[WALL, 0, 0], [EMPTY, 1, 1]]
    pieces = build_pieces("double")
    assert format_grid(cells, pieces) == "# R R\n. U U"
    assert format_grid(cells) == "# A A\n. B B"
    assert format_solution(Solution(((0, WALL),)), pieces) == "R #"


def test_format_targets():
    assert format_targets([(0, 0), (2, 0)], "double") == "Jan 1"
    assert format_targets([(1, 2), (6, 2), (7, 5)], "triple") == "Sep 31 Sat"
