"""Travelling-salesman tours: nearest-neighbour construction and 2-opt improvement."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from numlab.cities import City, distance


@dataclass(frozen=True)
class NearestStep:
    """One move of the nearest-neighbour search.

    ``k`` is the visiting position reached by the move; the closing move back
    to the start city has ``k`` equal to the number of cities plus one.
    """

    k: int
    current: int
    next: int
    distance: float
    total: float


@dataclass(frozen=True)
class Tour:
    """A round trip through every city, in visiting order, and its length."""

    order: tuple[int, ...]
    length: float
    steps: tuple[NearestStep, ...] = ()

    @property
    def ranks(self) -> dict[int, int]:
        """Visiting position (from 1) of each city number."""
        return {num: position for position, num in enumerate(self.order, start=1)}

    @property
    def closed_order(self) -> tuple[int, ...]:
        """Visiting order with the start city repeated at the end."""
        return (*self.order, self.order[0]) if self.order else ()


def _lookup(cities: Iterable[City]) -> dict[int, City]:
    index: dict[int, City] = {}
    for city in cities:
        if city.num in index:
            raise ValueError(f"duplicate city number {city.num}")
        index[city.num] = city
    return index


def _check_order(index: dict[int, City], order: Iterable[int]) -> list[int]:
    route = list(order)
    for num in route:
        if num not in index:
            raise ValueError(f"no city numbered {num}")
    return route


def tour_length(cities: Sequence[City], order: Sequence[int]) -> float:
    """Length of the closed tour visiting ``order`` and returning to its start."""
    index = _lookup(cities)
    route = _check_order(index, order)
    if not route:
        return 0.0
    stops = [index[num] for num in route]
    return sum(distance(p, q) for p, q in zip(stops, stops[1:] + stops[:1]))


def nearest_neighbour(cities: Sequence[City], start: int) -> Tour:
    """Build a tour from ``start`` by always moving to the closest unvisited city.

    Ties go to the city listed first. The tour closes with a move back to
    ``start``, which is recorded as the last step.
    """
    index = _lookup(cities)
    if start not in index:
        raise ValueError(f"no city numbered {start}")

    visited = {start}
    order = [start]
    steps: list[NearestStep] = []
    total = 0.0
    current = start
    for k in range(2, len(index) + 1):
        best: City | None = None
        best_distance = math.inf
        for city in cities:
            if city.num in visited:
                continue
            dij = distance(index[current], city)
            if best is None or dij < best_distance:
                best, best_distance = city, dij
        assert best is not None
        visited.add(best.num)
        order.append(best.num)
        total += best_distance
        steps.append(NearestStep(k, current, best.num, best_distance, total))
        current = best.num

    back = distance(index[current], index[start])
    total += back
    steps.append(NearestStep(len(index) + 1, current, start, back, total))
    return Tour(tuple(order), total, tuple(steps))


def two_opt_pass(
    cities: Sequence[City], order: Sequence[int], closed: bool = True
) -> tuple[list[int], float]:
    """Run one sweep of 2-opt exchanges over ``order``.

    Every improving exchange is applied at once. With ``closed`` the edge
    back to the start city may take part in an exchange; without it only the
    edges of the open path are considered. The first city never moves.
    Returns the new order and the total length saved.
    """
    index = _lookup(cities)
    route = _check_order(index, order)
    path = route + route[:1] if closed else list(route)
    n = len(path)
    saved = 0.0
    for i in range(n - 3):
        for j in range(i + 2, n - 1):
            a, b = index[path[i]], index[path[i + 1]]
            c, d = index[path[j]], index[path[j + 1]]
            old = distance(a, b) + distance(c, d)
            new = distance(a, c) + distance(b, d)
            if new < old:
                path[i + 1 : j + 1] = reversed(path[i + 1 : j + 1])
                saved += old - new
    return path[: len(route)], saved


def two_opt(
    cities: Sequence[City], order: Sequence[int], closed: bool = True
) -> Tour:
    """Repeat 2-opt sweeps until one makes no exchange."""
    route = list(order)
    length = tour_length(cities, route)
    while True:
        route, saved = two_opt_pass(cities, route, closed)
        if saved <= 0:
            break
        length -= saved
    return Tour(tuple(route), length)