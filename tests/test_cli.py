import datetime

import pytest

from calendar_solver import cli
from calendar_solver.api import catalog_balance, solve_date, solver_for_date, targets_for_date


def test_targets_for_date():
    monday = datetime.date(2024, 1, 1)
    assert targets_for_date(monday, "triple") == (0, 1, 0)
    assert targets_for_date(monday, "double") == (0, 1, None)
    assert targets_for_date(datetime.date(2024, 12, 29), "triple") == (11, 29, 6)


def test_solver_for_date_blocks_date_cells():
    solver = solver_for_date(datetime.date(2024, 3, 5), "triple")
    assert solver.blocked_cells == [(0, 2), (2, 4), (6, 4)]
    assert catalog_balance(solver) == 0


def test_solve_date_with_limit():
    sols = solve_date(datetime.date(2024, 7, 4), limit=2)
    assert len(sols) == 2


def test_solve_date_rejects_catalog_of_other_variant(tmp_path):
    path = tmp_path / "pieces.yaml"
    path.write_text("variant: triple\npieces:\n  A: ['#']\n", encoding="utf-8")
    with pytest.raises(ValueError):
        solve_date(datetime.date(2024, 7, 4), "double", pieces_path=path)


def test_cli_first_solution(capsys):
    code = cli.main(["--month", "Jan", "--day", "1", "--mode", "first"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Solving Jan 1" in out
    assert "Solution 1:" in out
    assert "1 solution found" in out


def test_cli_live_with_date(capsys):
    code = cli.main(["--date", "2024-02-29", "--mode", "live", "--limit", "3"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Solving Feb 29" in out
    assert "3 solutions found" in out


def test_cli_invalid_day_is_an_error(capsys):
    assert cli.main(["--month", "2", "--day", "32", "--mode", "first"]) == 2
    assert "day must be in 1..31" in capsys.readouterr().err


def test_cli_rejects_bad_arguments():
    with pytest.raises(SystemExit):
        cli.main(["--date", "yesterday"])
    with pytest.raises(SystemExit):
        cli.main(["--month", "13"])


def test_cli_custom_pieces_warn_on_mismatch(tmp_path, capsys, caplog):
    path = tmp_path / "pieces.yaml"
    path.write_text("pieces:\n  Bar: ['#####']\n", encoding="utf-8")
    code = cli.main(["--month", "1", "--day", "1", "--pieces", str(path)])
    out = capsys.readouterr().out
    assert code == 0
    assert "0 solutions found" in out
    assert any("no solution can exist" in r.getMessage() for r in caplog.records)
