import math

import pytest

from numlab.functions import HEADER, evaluate, main, tabulate


def test_evaluate_at_zero():
    assert evaluate(0.0) == (0.0, 1.0, 0.0)


@pytest.mark.parametrize("x", [0.1, 0.5, 1.0, 2.5, math.pi])
def test_evaluate_identities(x):
    root, cos_x, sin_x = evaluate(x)
    assert root * root == pytest.approx(x)
    assert cos_x**2 + sin_x**2 == pytest.approx(1.0)


def test_evaluate_negative_raises():
    with pytest.raises(ValueError):
        evaluate(-1.0)


def test_tabulate_default_covers_zero_to_pi():
    rows = tabulate()
    assert len(rows) == 11
    assert rows[0][0] == 0.0
    assert rows[-1][0] == pytest.approx(math.pi)


def test_tabulate_points_are_evenly_spaced():
    rows = tabulate(5)
    xs = [row[0] for row in rows]
    gaps = [b - a for a, b in zip(xs, xs[1:])]
    assert all(gap == pytest.approx(math.pi / 5) for gap in gaps)


def test_tabulate_rows_match_evaluate():
    for row in tabulate(4):
        assert row[1:] == evaluate(row[0])


def test_tabulate_rejects_zero_steps():
    with pytest.raises(ValueError):
        tabulate(0)


def test_main_writes_csv(tmp_path, capsys):
    out = tmp_path / "table.csv"
    assert main(["--steps", "4", "-o", str(out)]) == 0
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0] == ",".join(HEADER)
    assert lines[1] == "0.000000,0.000000,1.000000,0.000000"
    assert len(lines) == 6
    assert "sqrt(x)" in capsys.readouterr().out