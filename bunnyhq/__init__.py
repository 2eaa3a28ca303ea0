"""Solvers for the fourteen Easter Bunny HQ puzzles, one module per puzzle."""

__version__ = "0.1.0"