"""Command line statistics run: random samples, summary and frequency table."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import TypeVar

from numlab.frequency import DataStats, FrequencyClass, describe, frequency_table
from numlab.randgen import Distribution, exponential, normal, poisson, uniform

Row = tuple[str, ...]
T = TypeVar("T")

_MENU = (
    "\n1 : 範囲[a,b]の実数型一様乱数の生成\n"
    "\n2 : 平均 μ と 標準偏差 σ の正規乱数の生成\n"
    "\n3 : 事象の平均発生時間間隔 1 / lambda の指数乱数\n"
    "\n4 : 事象の平均発生数 lambda のポアソン乱数\n"
    "\n生成する乱数の選択番号を 1 〜 4 より 1 つ入力下さい. ---> "
)
_BAD_CHOICE = "\n選択番号に誤りがあります．再度，選択番号を入力しなおして下さい．"


def _param(params: Mapping[str, float], name: str) -> float:
    try:
        return params[name]
    except KeyError:
        raise ValueError(f"missing parameter {name!r}") from None


def _parameter_rows(distribution: Distribution, params: Mapping[str, float]) -> list[Row]:
    title = distribution.title
    if distribution is Distribution.UNIFORM:
        a, b = _param(params, "a"), _param(params, "b")
        return [(title,), (), ("データ範囲", "a", "b"), ("", f"{a:g}", f"{b:g}"), ()]
    if distribution is Distribution.NORMAL:
        mu, sigma = _param(params, "mu"), _param(params, "sigma")
        return [
            (title,),
            (),
            ("正規分布", "平均", "標準偏差"),
            ("真の値", f"{mu:g}", f"{sigma:g}"),
            (),
        ]
    lam = _param(params, "lam")
    if distribution is Distribution.EXPONENTIAL:
        if lam == 0:
            raise ValueError("lambda must not be zero")
        return [
            (),
            (title,),
            (),
            ("事象の平均発生率", f"{lam:g}"),
            ("事象の平均発生間隔", f"{1 / lam:g}"),
        ]
    return [(), (title,), (), ("事象の平均発生数", f"{lam:g}")]


def format_report(
    distribution: Distribution,
    params: Mapping[str, float],
    stats: DataStats,
    table: Sequence[FrequencyClass],
) -> list[Row]:
    """Lay out the statistics report of a sample and its frequency table.

    Each row is a tuple of cells; an empty tuple is a blank line.
    """
    if not table:
        raise ValueError("the frequency table has no classes")
    rows = _parameter_rows(distribution, params)
    rows += [
        ("データ数", str(stats.count)),
        ("データの平均", f"{stats.mean:.6f}"),
        ("データの不偏分散", f"{stats.variance:.6f}"),
        ("データの標準偏差", f"{stats.std:.6f}"),
        ("データの最大値", f"{stats.maximum:.6f}"),
        ("データの最小値", f"{stats.minimum:.6f}"),
        (),
        ("級の数", str(len(table))),
        ("級の区間幅", f"{table[0].width:g}"),
        (),
        ("データ区間", "中間の値", "度数", "累積度数", "相対度数", "累積相対度数"),
    ]
    rows += [
        (
            f"{c.lower:.6f} − {c.upper:.6f}",
            f"{c.midpoint:.6f}",
            str(c.frequency),
            str(c.cumulative),
            f"{c.relative:.6f}",
            f"{c.cumulative_relative:.6f}",
        )
        for c in table
    ]
    last = table[-1]
    rows += [("", "", "累計", str(last.cumulative), "累計", f"{last.cumulative_relative:g}"), ()]
    return rows


def _ask(prompt: str, convert: Callable[[str], T], valid: Callable[[T], bool]) -> T:
    while True:
        try:
            value = convert(input(prompt))
        except ValueError:
            continue
        if valid(value):
            return value


def _valid_count(n: int) -> bool:
    return n > 0 and n % 2 == 0


def _valid_range(a: float, b: float) -> bool:
    return a >= 1.0 and a <= b


def _valid_normal(mu: float, sigma: float) -> bool:
    return mu - 3 * sigma > 0 and sigma >= 0


def _parse_kind(text: str) -> Distribution:
    try:
        return Distribution(int(text))
    except ValueError:
        pass
    try:
        return Distribution[text.upper()]
    except KeyError:
        raise argparse.ArgumentTypeError(f"unknown distribution {text!r}") from None


def _ask_kind() -> Distribution:
    while True:
        reply = input(_MENU)
        try:
            return Distribution(int(reply))
        except ValueError:
            print(_BAD_CHOICE)


def _ask_range() -> tuple[float, float]:
    while True:
        a = _ask(
            "\n実数型一様乱数の範囲 [ a , b ] を指定して下さい\na ---> ",
            float,
            lambda v: v >= 1.0,
        )
        b = _ask("b ---> ", float, lambda v: True)
        if a <= b:
            return a, b


def _ask_normal() -> tuple[float, float]:
    while True:
        print("\n正規乱数の平均 μ と 標準偏差 σ を指定して下さい")
        mu = _ask("μ ---> ", float, lambda v: True)
        sigma = _ask("σ ---> ", float, lambda v: True)
        if _valid_normal(mu, sigma):
            return mu, sigma


def _ask_rate(kind: Distribution) -> float:
    name = "指数乱数" if kind is Distribution.EXPONENTIAL else "ポアソン乱数"
    return _ask(
        f"\n{name}の生成に対する事象の平均発生率 lambda を指定してください\nlambda ---> ",
        float,
        lambda v: v > 0,
    )


def _collect(args: argparse.Namespace, parser: argparse.ArgumentParser):
    n = args.n
    if n is None:
        n = _ask("乱数の生成数 N を 整数値で指定して下さい ---> ", int, _valid_count)

    kind = args.kind if args.kind is not None else _ask_kind()

    params: dict[str, float] = {}
    if kind is Distribution.UNIFORM:
        if args.a is not None and args.b is not None:
            if not _valid_range(args.a, args.b):
                parser.error("the range must satisfy 1.0 <= a <= b")
            params["a"], params["b"] = args.a, args.b
        else:
            params["a"], params["b"] = _ask_range()
    elif kind is Distribution.NORMAL:
        if args.mu is not None and args.sigma is not None:
            if not _valid_normal(args.mu, args.sigma):
                parser.error("mu and sigma must satisfy mu > 3 sigma")
            params["mu"], params["sigma"] = args.mu, args.sigma
        else:
            params["mu"], params["sigma"] = _ask_normal()
    elif args.lam is not None:
        if not args.lam > 0:
            parser.error("lambda must be positive")
        params["lam"] = args.lam
    else:
        params["lam"] = _ask_rate(kind)
    return n, kind, params


def _generate(kind: Distribution, n: int, params: Mapping[str, float], rng: random.Random):
    if kind is Distribution.UNIFORM:
        return uniform(n, params["a"], params["b"], rng)
    if kind is Distribution.NORMAL:
        return normal(n, params["mu"], params["sigma"], rng)
    if kind is Distribution.EXPONENTIAL:
        return exponential(n, params["lam"], rng)
    return poisson(n, params["lam"], rng)


def _emit(rows: Sequence[Row], fh) -> None:
    for row in rows:
        print("\t".join(row))
        fh.write(",".join(row) + "\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="numlab-stats",
        description="Generate random numbers and report their statistics and frequency table.",
    )
    parser.add_argument("-n", type=int, default=None, help="number of values (even)")
    parser.add_argument(
        "--kind", type=_parse_kind, default=None,
        help="1/uniform, 2/normal, 3/exponential or 4/poisson",
    )
    parser.add_argument("-a", type=float, default=None, help="uniform lower bound")
    parser.add_argument("-b", type=float, default=None, help="uniform upper bound")
    parser.add_argument("--mu", type=float, default=None, help="normal mean")
    parser.add_argument("--sigma", type=float, default=None, help="normal deviation")
    parser.add_argument("--lam", type=float, default=None, help="event rate lambda")
    parser.add_argument("-k", "--classes", type=int, default=None, help="number of classes")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("-o", "--output", type=Path, default=Path("stats.csv"))
    args = parser.parse_args(argv)

    if args.n is not None and not _valid_count(args.n):
        parser.error("the number of values must be a positive even integer")
    if args.classes is not None and args.classes < 1:
        parser.error("the number of classes must be positive")

    try:
        n, kind, params = _collect(args, parser)
        values = _generate(kind, n, params, random.Random(args.seed))
        stats = describe(values)
        k = args.classes
        if k is None:
            k = _ask("\n級の数 k を 整数値 で 指定して下さい ---> ", int, lambda v: v >= 1)
        table = frequency_table(values, k)
        rows = format_report(kind, params, stats, table)
    except EOFError:
        print("input ended before all values were given", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    try:
        with args.output.open("a", encoding="utf-8", newline="") as fh:
            _emit(rows, fh)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0