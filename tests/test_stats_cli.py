import builtins

import pytest

from numlab.frequency import describe, frequency_table
from numlab.randgen import Distribution
from numlab.stats_cli import format_report, main

SAMPLE = [2.0, 3.5, 4.0, 5.0]


def _report(kind, params, values=SAMPLE, k=3):
    return format_report(kind, params, describe(values), frequency_table(values, k))


def test_uniform_header_rows():
    rows = _report(Distribution.UNIFORM, {"a": 2, "b": 5})
    assert rows[0] == (Distribution.UNIFORM.title,)
    assert ("データ範囲", "a", "b") in rows
    assert ("", "2", "5") in rows
    assert ("データ数", "4") in rows


def test_normal_header_rows():
    rows = _report(Distribution.NORMAL, {"mu": 10, "sigma": 2})
    assert rows[0] == (Distribution.NORMAL.title,)
    assert ("真の値", "10", "2") in rows


def test_exponential_header_rows():
    rows = _report(Distribution.EXPONENTIAL, {"lam": 2})
    assert rows[1] == (Distribution.EXPONENTIAL.title,)
    assert ("事象の平均発生間隔", "0.5") in rows


def test_poisson_header_rows():
    rows = _report(Distribution.POISSON, {"lam": 3})
    assert ("事象の平均発生数", "3") in rows


def test_table_rows_match_classes():
    table = frequency_table(SAMPLE, 3)
    rows = format_report(Distribution.UNIFORM, {"a": 2, "b": 5}, describe(SAMPLE), table)
    assert ("級の数", "3") in rows
    header = rows.index(("データ区間", "中間の値", "度数", "累積度数", "相対度数", "累積相対度数"))
    body = rows[header + 1 : header + 1 + len(table)]
    assert [int(r[2]) for r in body] == [c.frequency for c in table]
    total = rows[header + 1 + len(table)]
    assert total[2] == "累計"
    assert total[3] == str(table[-1].cumulative)
    assert rows[-1] == ()


def test_missing_parameter_raises():
    with pytest.raises(ValueError):
        _report(Distribution.UNIFORM, {"a": 2})


def test_empty_table_raises():
    with pytest.raises(ValueError):
        format_report(Distribution.POISSON, {"lam": 1}, describe(SAMPLE), [])


def test_main_writes_report(tmp_path):
    out = tmp_path / "out.csv"
    args = ["-n", "20", "--kind", "uniform", "-a", "2", "-b", "5", "-k", "4",
            "--seed", "1", "-o", str(out)]
    assert main(args) == 0
    text = out.read_text(encoding="utf-8")
    assert "データ数,20\n" in text
    assert "級の数,4\n" in text


def test_main_appends(tmp_path):
    out = tmp_path / "out.csv"
    args = ["-n", "10", "--kind", "4", "--lam", "3", "-k", "3", "--seed", "7", "-o", str(out)]
    assert main(args) == 0
    assert main(args) == 0
    text = out.read_text(encoding="utf-8")
    assert text.count(Distribution.POISSON.title) == 2


def test_main_is_reproducible_with_seed(tmp_path):
    first, second = tmp_path / "a.csv", tmp_path / "b.csv"
    base = ["-n", "12", "--kind", "normal", "--mu", "50", "--sigma", "5", "-k", "5", "--seed", "3"]
    assert main(base + ["-o", str(first)]) == 0
    assert main(base + ["-o", str(second)]) == 0
    assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")


def test_main_interactive(tmp_path, monkeypatch):
    replies = iter(["3", "4", "9", "1", "0.5", "2", "5", "3"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(replies))
    out = tmp_path / "out.csv"
    assert main(["--seed", "2", "-o", str(out)]) == 0
    text = out.read_text(encoding="utf-8")
    assert "データ数,4\n" in text
    assert ",2,5\n" in text


@pytest.mark.parametrize(
    "args",
    [
        ["-n", "3", "--kind", "3", "--lam", "1", "-k", "2"],
        ["-n", "4", "--kind", "1", "-a", "0.5", "-b", "5", "-k", "2"],
        ["-n", "4", "--kind", "2", "--mu", "1", "--sigma", "1", "-k", "2"],
        ["-n", "4", "--kind", "3", "--lam", "0", "-k", "2"],
        ["-n", "4", "--kind", "3", "--lam", "1", "-k", "0"],
        ["-n", "4", "--kind", "gamma", "--lam", "1", "-k", "2"],
    ],
)
def test_main_rejects_bad_arguments(tmp_path, args):
    with pytest.raises(SystemExit):
        main(args + ["-o", str(tmp_path / "out.csv")])