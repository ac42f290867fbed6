"""Garden plots an elf can reach in an exact number of steps."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

Position = tuple[int, int]

_OPEN = "."
_START = "S"
_ROCK = "#"


@dataclass(frozen=True)
class Garden:
    """A rectangular map of garden plots and rocks with a starting plot."""

    rocks: frozenset[Position]
    rows: int
    cols: int
    start: Position

    def is_open(self, pos: Position) -> bool:
        """Whether ``pos`` is a garden plot inside the map."""
        return 0 <= pos[0] < self.rows and 0 <= pos[1] < self.cols and pos not in self.rocks

    def step(self, positions: Iterable[Position]) -> set[Position]:
        """Every open plot one step away from any of ``positions``."""
        reached: set[Position] = set()
        for row, col in positions:
            for neighbour in ((row + 1, col), (row - 1, col), (row, col + 1), (row, col - 1)):
                if self.is_open(neighbour):
                    reached.add(neighbour)
        return reached


def parse_garden(lines: Sequence[str]) -> Garden:
    """Parse the map; the first ``S`` in reading order is the start."""
    if not lines or not lines[0]:
        raise ValueError("garden is empty")
    width = len(lines[0])
    rocks: set[Position] = set()
    start: Position | None = None
    for row, line in enumerate(lines):
        if len(line) != width:
            raise ValueError(f"row {line!r} has length {len(line)}, expected {width}")
        for col, char in enumerate(line):
            if char == _ROCK:
                rocks.add((row, col))
            elif char == _START:
                if start is None:
                    start = (row, col)
            elif char != _OPEN:
                raise ValueError(f"invalid tile {char!r} in row {line!r}")
    if start is None:
        raise ValueError("garden has no starting plot")
    return Garden(frozenset(rocks), len(lines), width, start)


def solve_a(lines: Sequence[str], steps: int = 64) -> int:
    """Number of plots reachable in exactly ``steps`` steps from the start."""
    if steps < 0:
        raise ValueError("step count must not be negative")
    garden = parse_garden(lines)
    current: set[Position] = {garden.start}
    for _ in range(steps):
        current = garden.step(current)
    return len(current)