"""City coordinates: generation, CSV input/output and pairwise distances."""

from __future__ import annotations

import argparse
import math
import random
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


class _Point(Protocol):
    x: float
    y: float


@dataclass(frozen=True)
class City:
    """A numbered city at position (x, y)."""

    num: int
    x: float
    y: float


def distance(p: _Point, q: _Point) -> float:
    """Euclidean distance between two points."""
    return math.sqrt((p.x - q.x) ** 2 + (p.y - q.y) ** 2)


def read_cities(path: str | Path) -> list[City]:
    """Read cities from a CSV file.

    Lines hold either ``x,y`` (cities are numbered 1, 2, ... in file order)
    or ``num,x,y``. Blank lines are skipped.
    """
    cities: list[City] = []
    with open(path, encoding="utf-8") as fh:
        for line_no, line in enumerate(fh, start=1):
            text = line.strip()
            if not text:
                continue
            fields = [field.strip() for field in text.split(",")]
            try:
                if len(fields) == 2:
                    cities.append(City(len(cities) + 1, float(fields[0]), float(fields[1])))
                elif len(fields) == 3:
                    cities.append(City(int(fields[0]), float(fields[1]), float(fields[2])))
                else:
                    raise ValueError
            except ValueError:
                raise ValueError(f"{path}:{line_no}: not a city record: {text!r}") from None
    return cities


def write_cities(path: str | Path, cities: Iterable[City]) -> None:
    """Write cities as ``num,x,y`` lines with six decimals."""
    with open(path, "w", encoding="utf-8", newline="") as fh:
        for city in cities:
            fh.write(f"{city.num},{city.x:.6f},{city.y:.6f}\n")


def generate_cities(
    a: float, b: float, n: int, rng: random.Random | None = None
) -> list[City]:
    """Place ``n`` cities uniformly at random in the square [a, b] x [a, b]."""
    if n <= 0:
        raise ValueError("the number of cities must be positive")
    rng = rng if rng is not None else random.Random()
    cities = []
    for num in range(1, n + 1):
        x = a + (b - a) * rng.random()
        y = a + (b - a) * rng.random()
        cities.append(City(num, x, y))
    return cities


def _find(cities: Sequence[City], num: int) -> City:
    for city in cities:
        if city.num == num:
            return city
    raise ValueError(f"no city numbered {num}")


def distances_from(cities: Sequence[City], start: int) -> list[tuple[int, float]]:
    """Distance from city ``start`` to every other city, in file order."""
    origin = _find(cities, start)
    return [(city.num, distance(origin, city)) for city in cities if city.num != start]


def _ask_start(count: int) -> int:
    while True:
        reply = input(
            f"\n最初に出発する都市 i を 1 〜 {count} の中から選択して下さい。start -> "
        )
        try:
            return int(reply)
        except ValueError:
            continue


def _run_distances(args: argparse.Namespace) -> int:
    try:
        cities = read_cities(args.input)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    n = len(cities)
    start = args.start if args.start is not None else _ask_start(n)
    try:
        results = distances_from(cities, start)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    intro = (
        f"訪問する都市が {n} 都市あります。\n\n"
        f"訪問する {n} 都市の都市番号 1 〜 {n} の位置座標は次の通りです。\n\n"
    )
    with args.output.open("w", encoding="utf-8", newline="") as fh:
        print(intro + "都市番号\tx座標\t\ty座標")
        fh.write(intro + "都市番号,x座標,y座標\n")
        for city in cities:
            print(f"{city.num}\t\t{city.x:.6f}\t{city.y:.6f}")
            fh.write(f"{city.num},{city.x:.6f},{city.y:.6f}\n")
        title = f"\n最初に出発する都市 i を都市番号 {start} にした場合の結果を示します。\n\n"
        print(title + "出発都市 i\t訪問都市 j\t2都市間距離 dij")
        fh.write(title + "出発都市 i,訪問都市 j,2都市間距離 dij\n")
        for num, dij in results:
            print(f"\t{start}\t\t{num}\t\t{dij:.2f}")
            fh.write(f"{start},{num},{dij:.2f}\n")
    return 0


def _run_generate(args: argparse.Namespace) -> int:
    try:
        cities = generate_cities(args.a, args.b, args.n, random.Random(args.seed))
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    write_cities(args.output, cities)
    print("都市番号\tx座標\t\ty座標")
    for city in cities:
        print(f"{city.num}\t\t{city.x:.6f}\t{city.y:.6f}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="numlab-cities",
        description="Generate city coordinates or list distances from a start city.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="place random cities in a square")
    gen.add_argument("a", type=float, help="lower coordinate bound")
    gen.add_argument("b", type=float, help="upper coordinate bound")
    gen.add_argument("n", type=int, help="number of cities")
    gen.add_argument("--seed", type=int, default=None)
    gen.add_argument("-o", "--output", type=Path, default=Path("citydata_info.csv"))
    gen.set_defaults(run=_run_generate)

    dist = sub.add_parser("distances", help="distances from a start city")
    dist.add_argument("input", nargs="?", type=Path, default=Path("task7_citydata.csv"))
    dist.add_argument("--start", type=int, default=None, help="start city number")
    dist.add_argument("-o", "--output", type=Path, default=Path("cities.csv"))
    dist.set_defaults(run=_run_distances)

    args = parser.parse_args(argv)
    return args.run(args)