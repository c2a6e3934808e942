"""Summary statistics and frequency tables of a data sample."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class DataStats:
    """Count, mean, variance (divided by n), deviation and extremes of a sample."""

    count: int
    mean: float
    variance: float
    std: float
    maximum: float
    minimum: float


@dataclass(frozen=True)
class FrequencyClass:
    """One class of a frequency table: the interval [lower, upper) and its counts."""

    lower: float
    upper: float
    midpoint: float
    frequency: int
    cumulative: int
    relative: float
    cumulative_relative: float

    @property
    def width(self) -> float:
        """Width of the class interval."""
        return self.upper - self.lower


def describe(values: Iterable[float]) -> DataStats:
    """Compute the statistics of a non-empty sample."""
    data = list(values)
    if not data:
        raise ValueError("cannot describe an empty sample")
    n = len(data)
    avg = sum(data) / n
    variance = sum((v - avg) ** 2 for v in data) / n
    return DataStats(
        count=n,
        mean=avg,
        variance=variance,
        std=math.sqrt(variance),
        maximum=max(data),
        minimum=min(data),
    )


def frequency_table(
    values: Iterable[float], k: int, unit: float = 1.0
) -> list[FrequencyClass]:
    """Split the sample into ``k`` classes and count the values in each.

    The class width is the data range divided by ``k``, rounded up to a whole
    number; the first class starts half a measuring ``unit`` below the minimum.
    A value is counted in a class when ``lower <= value < upper``.
    """
    data = list(values)
    if not data:
        raise ValueError("cannot tabulate an empty sample")
    if k < 1:
        raise ValueError("the number of classes must be positive")
    n = len(data)
    low, high = min(data), max(data)
    width = math.ceil((high - low) / k)

    bounds = [low - unit / 2]
    for _ in range(k):
        bounds.append(bounds[-1] + width)

    table = []
    cumulative = 0
    for lower, upper in zip(bounds, bounds[1:]):
        frequency = sum(1 for v in data if lower <= v < upper)
        cumulative += frequency
        table.append(
            FrequencyClass(
                lower=lower,
                upper=upper,
                midpoint=(lower + upper) / 2,
                frequency=frequency,
                cumulative=cumulative,
                relative=frequency / n,
                cumulative_relative=cumulative / n,
            )
        )
    return table