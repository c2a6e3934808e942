# numlab

A small collection of classic numerical methods, usable both as a library
and from a handful of command-line programs. Everything is pure Python with
no third-party dependencies.

## What is inside

| Module | Purpose |
| --- | --- |
| `numlab.functions` | `evaluate(x)` and `tabulate(steps)`: `sqrt(x)`, `cos(x)` and `sin(x)` over `[0, pi]`. |
| `numlab.descriptive` | `read_pairs`, `mean`, `sample_variance` and `summarize` (a `Summary` with count, maximum, minimum, mean, variance, `spread` and `std`). |
| `numlab.health` | `bmi`, `classify_bmi` (a `BodyType`), `share_above_mean` and `body_type_shares`. |
| `numlab.integration` | `trapezoid` and `simpson` quadrature of `integrand` (`4 / (1 + x^2)`) or any function you pass. |
| `numlab.roots` | `bisection`, `bisection_recursive`, `newton` and `newton_recursive` for `equation` (`log(x) - cos(x)`) or any function you pass; each returns the list of iteration steps. |
| `numlab.cities` | `City`, `distance`, `read_cities`, `write_cities`, `generate_cities` and `distances_from`. |
| `numlab.tsp` | `nearest_neighbour` tours, `two_opt_pass` / `two_opt` improvement and `tour_length`; results are `Tour` objects. |
| `numlab.randgen` | `uniform`, `normal` (Box–Muller), `exponential` and `poisson` samples; `Distribution` names the four kinds. |
| `numlab.frequency` | `describe` (a `DataStats`, variance divided by n) and `frequency_table` (a list of `FrequencyClass`). |

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

```python
from numlab import integration, roots

area = integration.trapezoid(integration.integrand, 0.0, 1.0, 400)
area_s = integration.simpson(integration.integrand, 0.0, 1.0, 400)
# Both approximate pi; Simpson's rule is far closer.

steps = roots.bisection(roots.equation, 0.001, 3.0, 1e-5)
root = steps[-1].x
newton_steps = roots.newton(roots.equation, roots.derivative, 0.001, 1e-5)
root_n = newton_steps[-1].x_next
```

Random data and a frequency table:

```python
import random
from numlab import randgen, frequency

rng = random.Random(123)
values = randgen.normal(1000, 50.0, 10.0, rng)   # n must be even
stats = frequency.describe(values)
table = frequency.frequency_table(values, 10, 1.0)
```

A travelling-salesman tour:

```python
import random
from numlab import cities, tsp

rng = random.Random(65535)
towns = cities.generate_cities(0.0, 100.0, 30, rng)
tour = tsp.nearest_neighbour(towns, 1)
better = tsp.two_opt(towns, tour.order, True)
print(tour.length, better.length)
```

## Commands

Each command prints its results to the terminal and writes a CSV report
(`-o/--output` chooses the file). Run any of them with `--help` for the
full option list.

| Command | What it does |
| --- | --- |
| `numlab-functions` | Table of `sqrt`, `cos`, `sin` over `[0, pi]`; `--steps` sets the subdivisions (default 10). |
| `numlab-descriptive [input]` | Summary statistics of both columns of an `x,y` CSV file. |
| `numlab-health [input]` | BMI report from a `height,weight` CSV file: means, deviations, share above the mean and body-type shares. |
| `numlab-integrate` | Integral of `4 / (1 + x^2)`; `--method trapezoid` or `simpson`, with `-n`, `-a`, `-b`. |
| `numlab-roots` | Solves `log(x) - cos(x) = 0`; `--method bisection` or `newton`, `--recursive`, `-a`, `-b`, `--x0`, `--eps`. |
| `numlab-cities generate a b n` | Writes `n` random cities in `[a, b] x [a, b]` (`--seed`). |
| `numlab-cities distances [input]` | Distances from a start city (`--start`, or asked for) to every other city. |
| `numlab-tsp a b n` | Random cities, a nearest-neighbour tour from `--start` (or asked for), then 2-opt improvement and the improvement rate. |
| `numlab-stats` | Generates random data (`--kind`, `-n`, `-a`, `-b`, `--mu`, `--sigma`, `--lam`, `--seed`) and reports its statistics and a frequency table with `-k` classes; values not given are asked for. The report is appended to the output file. |

## What it does not do

There is no plotting: tours, samples and frequency tables are reported as
text and CSV only.