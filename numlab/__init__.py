"""Numerical methods: statistics, quadrature, root finding, random variates, frequency tables and tour heuristics."""

__version__ = "0.1.0"