"""Descriptive statistics for two-column numeric data."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Summary:
    """Count, extremes, mean and sample variance of a data column."""

    count: int
    maximum: float
    minimum: float
    mean: float
    variance: float

    @property
    def spread(self) -> float:
        """Difference between the largest and smallest value."""
        return self.maximum - self.minimum

    @property
    def std(self) -> float:
        """Sample standard deviation."""
        return math.sqrt(self.variance)


def read_pairs(path: str | Path) -> list[tuple[float, float]]:
    """Read ``a,b`` number pairs, one per line, skipping blank lines."""
    pairs = []
    with open(path, encoding="utf-8") as fh:
        for line_no, line in enumerate(fh, start=1):
            text = line.strip()
            if not text:
                continue
            fields = text.split(",")
            if len(fields) < 2:
                raise ValueError(f"{path}:{line_no}: expected two comma separated values")
            try:
                pairs.append((float(fields[0]), float(fields[1])))
            except ValueError:
                raise ValueError(f"{path}:{line_no}: not a number pair: {text!r}") from None
    return pairs


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean."""
    data = list(values)
    if not data:
        raise ValueError("mean of an empty sequence")
    return sum(data) / len(data)


def sample_variance(values: Iterable[float]) -> float:
    """Unbiased variance, dividing by n - 1."""
    data = list(values)
    if len(data) < 2:
        raise ValueError("sample variance needs at least two values")
    avg = mean(data)
    return sum((avg - v) * (avg - v) for v in data) / (len(data) - 1)


def summarize(values: Iterable[float]) -> Summary:
    """Collect the statistics of one column into a Summary."""
    data = list(values)
    if not data:
        raise ValueError("cannot summarize an empty sequence")
    return Summary(
        count=len(data),
        maximum=max(data),
        minimum=min(data),
        mean=mean(data),
        variance=sample_variance(data),
    )


def _emit(rows: list[tuple[str, ...]], output: Path) -> None:
    with output.open("w", encoding="utf-8", newline="") as fh:
        for row in rows:
            print("\t".join(row))
            fh.write(",".join(row) + "\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="numlab-descriptive",
        description="Summarize two columns of numbers read from a CSV file.",
    )
    parser.add_argument("input", nargs="?", type=Path, default=Path("data3.csv"))
    parser.add_argument("-o", "--output", type=Path, default=Path("descriptive.csv"))
    args = parser.parse_args(argv)

    try:
        pairs = read_pairs(args.input)
        xs = [p[0] for p in pairs]
        ys = [p[1] for p in pairs]
        sx, sy = summarize(xs), summarize(ys)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1

    rows: list[tuple[str, ...]] = [("No.", "x", "y")]
    rows += [(str(i), f"{x:.6f}", f"{y:.6f}") for i, (x, y) in enumerate(pairs, start=1)]
    rows += [
        ("データ数", str(sx.count), str(sy.count)),
        ("最大", f"{sx.maximum:.6f}", f"{sy.maximum:.6f}"),
        ("最小", f"{sx.minimum:.6f}", f"{sy.minimum:.6f}"),
        ("範囲", f"{sx.spread:.6f}", f"{sy.spread:.6f}"),
        ("平均", f"{sx.mean:.6f}", f"{sy.mean:.6f}"),
        ("分散", f"{sx.variance:.6f}", f"{sy.variance:.6f}"),
        ("標準偏差", f"{sx.std:.6f}", f"{sy.std:.6f}"),
    ]
    _emit(rows, args.output)
    return 0