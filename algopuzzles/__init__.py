"""Solvers for algorithmic puzzles: search, dynamic programming, grids, graphs and more."""

__version__ = "0.1.0"