"""Tabulate sqrt, cos and sin over the interval [0, pi]."""

from __future__ import annotations

import argparse
import math
from pathlib import Path

HEADER = ("x", "sqrt(x)", "cos(x)", "sin(x)")


def evaluate(x: float) -> tuple[float, float, float]:
    """Return sqrt(x), cos(x) and sin(x) for one argument."""
    return math.sqrt(x), math.cos(x), math.sin(x)


def tabulate(steps: int = 10) -> list[tuple[float, float, float, float]]:
    """Evaluate the functions at ``steps + 1`` evenly spaced points in [0, pi]."""
    if steps < 1:
        raise ValueError("steps must be a positive integer")
    rows = []
    for i in range(steps + 1):
        x = i * math.pi / steps
        rows.append((x, *evaluate(x)))
    return rows


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="numlab-functions",
        description="Tabulate sqrt(x), cos(x) and sin(x) for x in [0, pi].",
    )
    parser.add_argument("--steps", type=int, default=10, help="number of subdivisions")
    parser.add_argument("-o", "--output", type=Path, default=Path("functions.csv"))
    args = parser.parse_args(argv)

    try:
        rows = tabulate(args.steps)
    except ValueError as exc:
        parser.error(str(exc))

    with args.output.open("w", encoding="utf-8", newline="") as fh:
        print(" ".join(HEADER))
        fh.write(",".join(HEADER) + "\n")
        for row in rows:
            cells = [f"{value:.6f}" for value in row]
            print(" ".join(cells))
            fh.write(",".join(cells) + "\n")
    return 0