import math

import pytest

from numlab.integration import INTEGRAND_TEXT, integrand, main, simpson, trapezoid


def test_integrand_values():
    assert integrand(0.0) == 4.0
    assert integrand(1.0) == 2.0


def test_trapezoid_approximates_pi():
    assert trapezoid(integrand, 0.0, 1.0, 400) == pytest.approx(math.pi, abs=1e-5)


def test_simpson_approximates_pi():
    assert simpson(integrand, 0.0, 1.0, 400) == pytest.approx(math.pi, abs=1e-12)


def test_simpson_more_accurate_than_trapezoid():
    t_err = abs(trapezoid(integrand, 0.0, 1.0, 50) - math.pi)
    s_err = abs(simpson(integrand, 0.0, 1.0, 50) - math.pi)
    assert s_err < t_err


def test_trapezoid_error_shrinks_with_n():
    coarse = abs(trapezoid(integrand, 0.0, 1.0, 10) - math.pi)
    fine = abs(trapezoid(integrand, 0.0, 1.0, 100) - math.pi)
    assert fine < coarse


def test_trapezoid_linear_independent_of_n():
    def line(x):
        return 3.0 * x + 1.0

    assert trapezoid(line, 0.0, 2.0, 1) == pytest.approx(trapezoid(line, 0.0, 2.0, 7))


def test_simpson_exact_for_cubic():
    assert simpson(lambda x: x**3, 0.0, 2.0, 1) == pytest.approx(4.0)


@pytest.mark.parametrize("rule", [trapezoid, simpson])
def test_reversed_interval_negates(rule):
    assert rule(integrand, 1.0, 0.0, 20) == pytest.approx(-rule(integrand, 0.0, 1.0, 20))


@pytest.mark.parametrize("rule", [trapezoid, simpson])
def test_rejects_nonpositive_n(rule):
    with pytest.raises(ValueError):
        rule(integrand, 0.0, 1.0, 0)


@pytest.mark.parametrize("method, title", [("trapezoid", "台形則による数値計算"), ("simpson", "シンプソン則による数値計算")])
def test_main_writes_report(tmp_path, method, title):
    out = tmp_path / "out.csv"
    assert main(["--method", method, "-o", str(out)]) == 0
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0] == title
    assert lines[1] == "被積分関数," + INTEGRAND_TEXT
    assert lines[3] == "数値積分の区間分割数,n=400"
    value = float(lines[4].split("T = ")[1])
    assert value == pytest.approx(math.pi, abs=1e-5)