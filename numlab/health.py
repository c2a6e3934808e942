"""Body-mass index statistics for height and weight records."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable
from enum import Enum
from pathlib import Path

from numlab.descriptive import mean, read_pairs, sample_variance


class BodyType(Enum):
    """Body type classes by BMI, in ascending order."""

    UNDERWEIGHT = "痩せすぎ"
    SLIM = "美容体型"
    NORMAL = "適正体格"
    OVERWEIGHT = "太り気味"
    OBESE = "太りすぎ"


def bmi(height_cm: float, weight_kg: float) -> float:
    """Body-mass index from height in centimetres and weight in kilograms."""
    if height_cm <= 0:
        raise ValueError("height must be positive")
    return weight_kg / height_cm / height_cm * 10000


def classify_bmi(value: float) -> BodyType:
    """Map a BMI value to its body type class."""
    if value < 18.5:
        return BodyType.UNDERWEIGHT
    if value < 20:
        return BodyType.SLIM
    if value < 25:
        return BodyType.NORMAL
    if value < 30:
        return BodyType.OVERWEIGHT
    return BodyType.OBESE


def share_above_mean(values: Iterable[float]) -> float:
    """Percentage of values strictly above the mean."""
    data = list(values)
    avg = mean(data)
    above = sum(1 for v in data if v > avg)
    return above / len(data) * 100


def body_type_shares(bmis: Iterable[float]) -> dict[BodyType, float]:
    """Percentage of BMI values falling into each body type."""
    data = list(bmis)
    if not data:
        raise ValueError("no BMI values given")
    counts = dict.fromkeys(BodyType, 0)
    for value in data:
        counts[classify_bmi(value)] += 1
    return {kind: count / len(data) * 100 for kind, count in counts.items()}


def _emit(rows: list[tuple[str, ...]], output: Path) -> None:
    with output.open("w", encoding="utf-8", newline="") as fh:
        for row in rows:
            print("\t".join(row))
            fh.write(",".join(row) + "\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="numlab-health",
        description="Compute BMI statistics from height,weight records.",
    )
    parser.add_argument("input", nargs="?", type=Path, default=Path("healthdata.csv"))
    parser.add_argument("-o", "--output", type=Path, default=Path("health.csv"))
    args = parser.parse_args(argv)

    try:
        records = read_pairs(args.input)
        heights = [h for h, _ in records]
        weights = [w for _, w in records]
        bmis = [bmi(h, w) for h, w in records]
        columns = (heights, weights, bmis)
        averages = [mean(col) for col in columns]
        deviations = [math.sqrt(sample_variance(col)) for col in columns]
        above = [share_above_mean(col) for col in columns]
        shares = body_type_shares(bmis)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1

    count = str(len(records))
    rows: list[tuple[str, ...]] = [("検査No.", "身長", "体重", "BMI")]
    rows += [
        (str(i), f"{h:.2f}", f"{w:.2f}", f"{b:.2f}")
        for i, ((h, w), b) in enumerate(zip(records, bmis), start=1)
    ]
    rows.append(("データ数", count, count, count))
    rows.append(("平均", *(f"{v:.2f}" for v in averages)))
    rows.append(("標準偏差", *(f"{v:.2f}" for v in deviations)))
    rows.append(("平均を上回った割合(％)", *(f"{v:.2f}" for v in above)))
    rows += [(f"{kind.value}の割合(％)", "", "", f"{share:.2f}") for kind, share in shares.items()]
    rows.append(("割合の合計(％)", "", "", f"{sum(shares.values()):.0f}"))
    _emit(rows, args.output)
    return 0