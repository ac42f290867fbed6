"""Solvers for grid, graph and simulation puzzles, one module per puzzle."""

__version__ = "1.0.0"

__all__ = [
    "day16",
    "day17",
    "day18",
    "day19",
    "day20",
    "day21",
    "day22",
    "day23",
    "day24",
    "day25",
]