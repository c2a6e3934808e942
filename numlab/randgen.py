"""Pseudo-random samples from uniform, normal, exponential and Poisson laws."""

from __future__ import annotations

import math
import random
from enum import Enum


class Distribution(Enum):
    """Kinds of random numbers, numbered as offered to the user."""

    UNIFORM = 1
    NORMAL = 2
    EXPONENTIAL = 3
    POISSON = 4

    @property
    def title(self) -> str:
        """Heading used for the statistics report of this kind of data."""
        return _TITLES[self]


_TITLES = {
    Distribution.UNIFORM: "実数型一様乱数データの統計処理結果",
    Distribution.NORMAL: "正規乱数データの統計処理結果",
    Distribution.EXPONENTIAL: "指数乱数データの統計処理結果",
    Distribution.POISSON: "ポアソン乱数データの統計処理結果",
}


def _generator(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError("the number of values must not be negative")


def _open_unit(rng: random.Random) -> float:
    """A uniform number in the half-open interval (0, 1]."""
    return 1.0 - rng.random()


def uniform(
    n: int, a: float, b: float, rng: random.Random | None = None
) -> list[float]:
    """``n`` real numbers drawn uniformly from [a, b]."""
    _check_count(n)
    if a > b:
        raise ValueError("the lower bound a must not exceed the upper bound b")
    rng = _generator(rng)
    return [a + (b - a) * rng.random() for _ in range(n)]


def _box_muller(rng: random.Random, trig) -> float:
    radius = math.sqrt(-2.0 * math.log(_open_unit(rng)))
    return radius * trig(2.0 * math.pi * _open_unit(rng))


def normal(
    n: int, mu: float, sigma: float, rng: random.Random | None = None
) -> list[float]:
    """``n`` normal numbers with mean ``mu`` and deviation ``sigma`` (Box-Muller).

    Values come in cosine/sine pairs, so ``n`` must be even.
    """
    _check_count(n)
    if n % 2:
        raise ValueError("the number of normal values must be even")
    if sigma < 0:
        raise ValueError("sigma must not be negative")
    rng = _generator(rng)
    values: list[float] = []
    for _ in range(n // 2):
        values.append(mu + sigma * _box_muller(rng, math.cos))
        values.append(mu + sigma * _box_muller(rng, math.sin))
    return values


def _exp_draw(lam: float, rng: random.Random) -> float:
    return (-1.0 / lam) * math.log(_open_unit(rng))


def _check_rate(lam: float) -> None:
    if not lam > 0:
        raise ValueError("lambda must be positive")


def exponential(
    n: int, lam: float, rng: random.Random | None = None
) -> list[float]:
    """``n`` exponential waiting times for events occurring at rate ``lam``."""
    _check_count(n)
    _check_rate(lam)
    rng = _generator(rng)
    return [_exp_draw(lam, rng) for _ in range(n)]


def poisson(n: int, lam: float, rng: random.Random | None = None) -> list[int]:
    """``n`` Poisson counts with mean ``lam``.

    Each count is the number of exponential waiting times that fit into a
    unit interval.
    """
    _check_count(n)
    _check_rate(lam)
    rng = _generator(rng)
    values = []
    for _ in range(n):
        elapsed = 0.0
        events = 0
        while True:
            elapsed += _exp_draw(lam, rng)
            if elapsed >= 1:
                break
            events += 1
        values.append(events)
    return values