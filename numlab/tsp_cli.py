"""Command line travelling-salesman run: random cities, nearest neighbour, then 2-opt."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Sequence
from pathlib import Path

from numlab.cities import City, generate_cities, read_cities, write_cities
from numlab.tsp import Tour, nearest_neighbour, two_opt

Row = tuple[str, ...]


def _improvement_rate(before: float, after: float) -> float:
    """Percentage by which ``after`` is shorter than ``before``."""
    if before == 0:
        return 0.0
    return (before - after) / before * 100


def format_report(
    cities: Sequence[City], start: int, tour: Tour, improved: Tour
) -> list[Row]:
    """Lay out the report of a nearest-neighbour tour and its 2-opt improvement.

    Each row is a tuple of cells; an empty tuple is a blank line.
    """
    rows: list[Row] = [("都市番号", "x座標", "y座標")]
    rows += [(str(c.num), f"{c.x:.6f}", f"{c.y:.6f}") for c in cities]

    rows += [(), ("k", "i", "next", "min", "tdis")]
    rows += [
        (str(s.k), str(s.current), str(s.next), f"{s.distance:.6f}", f"{s.total:.6f}")
        for s in tour.steps
    ]

    ranks = tour.ranks
    rows += [(), ("都市番号", "訪問順序")]
    rows += [(str(c.num), str(ranks.get(c.num, 0))) for c in cities]

    rows += [(), ("訪問順序", "都市番号")]
    rows += [(str(k), str(num)) for k, num in enumerate(tour.order, start=1)]

    rows += [
        (),
        ("最近隣法での巡回経路", "", "2opt法での巡回経路"),
        ("訪問順序", "都市番号", "訪問順序", "都市番号"),
    ]
    rows += [
        (str(k), str(old), str(k), str(new))
        for k, (old, new) in enumerate(zip(tour.order, improved.order), start=1)
    ]

    rate = _improvement_rate(tour.length, improved.length)
    rows += [
        (),
        (
            f"start = {start}",
            f"tdis = {tour.length:.6f}",
            f"tdis_new = {improved.length:.6f}",
        ),
        (),
        (f"改善度 = {rate:.6f}（％）",),
        (),
        ("2opt 法適用", "総移動距離（改善後）", f"{improved.length:.6f}"),
    ]
    return rows


def _ask_start(count: int) -> int:
    while True:
        reply = input(
            f"\n最初の出発都市 start を都市番号 1 〜 {count} より指定して下さい。---> "
        )
        try:
            start = int(reply)
        except ValueError:
            continue
        if 1 <= start <= count:
            return start


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="numlab-tsp",
        description="Place random cities, build a nearest-neighbour tour and improve it by 2-opt.",
    )
    parser.add_argument("a", type=float, help="lower coordinate bound")
    parser.add_argument("b", type=float, help="upper coordinate bound")
    parser.add_argument("n", type=int, help="number of cities")
    parser.add_argument("--start", type=int, default=None, help="start city number")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--cities", type=Path, default=Path("citydata_info.csv"), help="city data file"
    )
    parser.add_argument("-o", "--output", type=Path, default=Path("tsp.csv"))
    args = parser.parse_args(argv)

    if args.n <= 0:
        parser.error("the number of cities must be positive")
    if args.start is not None and not 1 <= args.start <= args.n:
        parser.error(f"start must lie between 1 and {args.n}")

    try:
        write_cities(args.cities, generate_cities(args.a, args.b, args.n, random.Random(args.seed)))
        cities = read_cities(args.cities)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1

    start = args.start if args.start is not None else _ask_start(len(cities))

    began = time.perf_counter()
    tour = nearest_neighbour(cities, start)
    improved = two_opt(cities, tour.order, closed=True)
    elapsed = time.perf_counter() - began

    rows = format_report(cities, start, tour, improved)
    rows += [(), ("探索処理時間", f"{elapsed:.6f} 秒")]
    with args.output.open("w", encoding="utf-8", newline="") as fh:
        for row in rows:
            print("\t".join(row))
            fh.write(",".join(row) + "\n")
    return 0