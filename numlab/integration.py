"""Numerical integration by the trapezoidal and Simpson rules."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from pathlib import Path

INTEGRAND_TEXT = "f(x) = 4.0 / ( 1.0 + x*x )"


def integrand(x: float) -> float:
    """4 / (1 + x^2); its integral over [0, 1] is pi."""
    return 4.0 / (1.0 + x**2.0)


def trapezoid(f: Callable[[float], float], a: float, b: float, n: int = 400) -> float:
    """Composite trapezoidal rule with ``n`` subintervals."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    h = (b - a) / n
    total = (f(a) + f(b)) / 2.0
    total += sum(f(a + i * h) for i in range(1, n))
    return h * total


def simpson(f: Callable[[float], float], a: float, b: float, n: int = 400) -> float:
    """Composite Simpson rule over ``n`` panels of width 2h."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    h = (b - a) / (2.0 * n)
    total = f(a) + f(b)
    total += sum(
        4.0 * f(a + (2.0 * i - 1.0) * h) + 2.0 * f(a + 2.0 * i * h) for i in range(1, n)
    )
    total += 4.0 * f(a + (2.0 * n - 1.0) * h)
    return total * h / 3.0


_METHODS = {
    "trapezoid": ("台形則による数値計算", trapezoid, 10),
    "simpson": ("シンプソン則による数値計算", simpson, 15),
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="numlab-integrate",
        description="Integrate 4/(1+x^2) numerically.",
    )
    parser.add_argument("--method", choices=sorted(_METHODS), default="trapezoid")
    parser.add_argument("-n", type=int, default=400, help="number of subdivisions")
    parser.add_argument("-a", type=float, default=0.0, help="lower bound")
    parser.add_argument("-b", type=float, default=1.0, help="upper bound")
    parser.add_argument("-o", "--output", type=Path, default=Path("integration.csv"))
    args = parser.parse_args(argv)

    title, rule, digits = _METHODS[args.method]
    try:
        value = rule(integrand, args.a, args.b, args.n)
    except ValueError as exc:
        parser.error(str(exc))

    rows = [
        (title,),
        ("被積分関数", INTEGRAND_TEXT),
        ("積分区間[a，b]", f"a={args.a:.2f}", f"b={args.b:.2f}"),
        ("数値積分の区間分割数", f"n={args.n}"),
        ("f(x)の積分の近似値", f"T = {value:.{digits}f}"),
    ]
    with args.output.open("w", encoding="utf-8", newline="") as fh:
        for row in rows:
            print(" ".join(row))
            fh.write(",".join(row) + "\n")
    return 0