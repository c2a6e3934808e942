[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numlab"
version = "0.1.0"
description = "Small numerical-methods toolkit: descriptive statistics, quadrature, root finding, random variates, frequency tables and travelling-salesman heuristics."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical-methods",
    "statistics",
    "integration",
    "bisection",
    "newton",
    "random-numbers",
    "histogram",
    "tsp",
    "two-opt",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numlab-functions = "numlab.functions:main"
numlab-descriptive = "numlab.descriptive:main"
numlab-health = "numlab.health:main"
numlab-integrate = "numlab.integration:main"
numlab-roots = "numlab.roots:main"
numlab-cities = "numlab.cities:main"
numlab-tsp = "numlab.tsp_cli:main"
numlab-stats = "numlab.stats_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["numlab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
