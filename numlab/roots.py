"""Root finding by bisection and Newton's method, iterative and recursive."""

from __future__ import annotations

import argparse
import math
import time
from collections.abc import Callable
from dataclasses import dataclass
from itertools import count
from pathlib import Path

EPS = 0.00001
EQUATION_TEXT = "f(x) = log(x) - cos(x) = 0"

Function = Callable[[float], float]


@dataclass(frozen=True)
class BisectionStep:
    """One bisection iteration: its number, the midpoint and f at it."""

    n: int
    x: float
    fx: float


@dataclass(frozen=True)
class NewtonStep:
    """One Newton iteration from ``x`` to ``x_next``."""

    n: int
    x_next: float
    x: float
    fx: float
    dfx: float
    delta: float


def equation(x: float) -> float:
    """log(x) - cos(x)."""
    return math.log(x) - math.cos(x)


def derivative(x: float) -> float:
    """Derivative of :func:`equation`: 1/x + sin(x)."""
    return 1 / x + math.sin(x)


def _bisect(f: Function, lo: float, hi: float, f_lo: float, f_hi: float):
    """Halve [lo, hi]; return the midpoint, f there, the new bracket and the width."""
    width = abs(hi - lo)
    mid = (hi + lo) / 2.0
    f_mid = f(mid)
    if f_lo * f_mid < 0:
        hi, f_hi = mid, f_mid
    elif f_hi * f_mid < 0:
        lo, f_lo = mid, f_mid
    else:
        width = 0.0
    return mid, f_mid, lo, hi, f_lo, f_hi, width


def bisection(f: Function, a: float, b: float, eps: float = EPS) -> list[BisectionStep]:
    """Bisect [a, b] until the bracket width no longer exceeds ``eps``.

    The last step's ``x`` is the approximate root.
    """
    lo, hi = a, b
    f_lo, f_hi = f(lo), f(hi)
    steps = []
    for n in count(1):
        mid, f_mid, lo, hi, f_lo, f_hi, width = _bisect(f, lo, hi, f_lo, f_hi)
        steps.append(BisectionStep(n, mid, f_mid))
        if not width > eps:
            return steps
    raise AssertionError("unreachable")


def bisection_recursive(
    f: Function, a: float, b: float, eps: float = EPS
) -> list[BisectionStep]:
    """Recursive bisection; stops once the bracket width is below ``eps``."""

    def step(lo: float, hi: float, n: int) -> list[BisectionStep]:
        mid, f_mid, lo, hi, _, _, width = _bisect(f, lo, hi, f(lo), f(hi))
        record = BisectionStep(n, mid, f_mid)
        if width < eps:
            return [record]
        return [record, *step(lo, hi, n + 1)]

    return step(a, b, 1)


def _newton_step(f: Function, df: Function, x: float, n: int) -> NewtonStep:
    fx = f(x)
    dfx = df(x)
    x_next = x - fx / dfx
    return NewtonStep(n, x_next, x, fx, dfx, abs(x_next - x))


def newton(f: Function, df: Function, x0: float, eps: float = EPS) -> list[NewtonStep]:
    """Newton iteration until the relative change no longer exceeds ``eps``.

    The last step's ``x_next`` is the approximate root.
    """
    steps = []
    x = x0
    for n in count(1):
        record = _newton_step(f, df, x, n)
        steps.append(record)
        relative = record.delta / x
        x = record.x_next
        if not relative > eps:
            return steps
    raise AssertionError("unreachable")


def newton_recursive(
    f: Function, df: Function, x0: float, eps: float = EPS
) -> list[NewtonStep]:
    """Recursive Newton iteration; stops once the relative change is below ``eps``."""

    def step(x: float, n: int) -> list[NewtonStep]:
        record = _newton_step(f, df, x, n)
        if record.delta / x < eps:
            return [record]
        return [record, *step(record.x_next, n + 1)]

    return step(x0, 1)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="numlab-roots",
        description="Solve log(x) - cos(x) = 0 by bisection or Newton's method.",
    )
    parser.add_argument("--method", choices=("bisection", "newton"), default="bisection")
    parser.add_argument("--recursive", action="store_true", help="use the recursive solver")
    parser.add_argument("-a", type=float, default=0.001, help="bisection lower bound")
    parser.add_argument("-b", type=float, default=3.0, help="bisection upper bound")
    parser.add_argument("--x0", type=float, default=0.001, help="Newton starting point")
    parser.add_argument("--eps", type=float, default=EPS)
    parser.add_argument("-o", "--output", type=Path, default=Path("roots.csv"))
    args = parser.parse_args(argv)

    started = time.perf_counter()
    rows: list[tuple[str, ...]]
    if args.method == "bisection":
        solver = bisection_recursive if args.recursive else bisection
        steps = solver(equation, args.a, args.b, args.eps)
        rows = [("反復回数n", "x", "f(x)")]
        rows += [(str(s.n), f"{s.x:.8f}", f"{s.fx:.8f}") for s in steps]
        rows += [
            (),
            (EQUATION_TEXT,),
            (),
            (f"2分法：a = {args.a:.6f}  b = {args.b:.6f}",),
            (f"2分法による近似解：{steps[-1].x:.8f}",),
            (),
        ]
    else:
        solver = newton_recursive if args.recursive else newton
        nsteps = solver(equation, derivative, args.x0, args.eps)
        rows = [("n", "x_n+1", "x_n", "f(x_n)", "f'(x_n)", "x_n+1 - x_n")]
        rows += [
            (
                str(s.n),
                f"{s.x_next:.8f}",
                f"{s.x:.8f}",
                f"{s.fx:.8f}",
                f"{s.dfx:.8f}",
                f"{s.delta:.8f}",
            )
            for s in nsteps
        ]
        rows += [
            (),
            (EQUATION_TEXT,),
            (),
            (f"ニュートン法による近似解：{nsteps[-1].x_next:.8f}",),
            (),
        ]
    elapsed = time.perf_counter() - started
    rows.append(("処理時間", f"{elapsed:.6f} 秒"))

    with args.output.open("w", encoding="utf-8", newline="") as fh:
        for row in rows:
            print("\t".join(row))
            fh.write(",".join(row) + "\n")
    return 0