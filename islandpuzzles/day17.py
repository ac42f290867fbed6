"""Least heat loss routes for a crucible that cannot go straight for long."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from enum import Enum

Position = tuple[int, int]
HeatGrid = tuple[tuple[int, ...], ...]

_DELTAS = {0: (0, 1), 1: (1, 0), 2: (0, -1), 3: (-1, 0)}


class Direction(Enum):
    """A heading, ordered clockwise starting at east."""

    EAST = 0
    SOUTH = 1
    WEST = 2
    NORTH = 3

    def left(self) -> Direction:
        """The heading after a quarter turn to the left."""
        return Direction((self.value - 1) % 4)

    def right(self) -> Direction:
        """The heading after a quarter turn to the right."""
        return Direction((self.value + 1) % 4)

    def step(self, pos: Position) -> Position:
        """Return the position one step from ``pos`` in this direction."""
        d_row, d_col = _DELTAS[self.value]
        return pos[0] + d_row, pos[1] + d_col


def parse_grid(lines: Sequence[str]) -> HeatGrid:
    """Parse rows of single-digit heat loss values."""
    if not lines or not lines[0]:
        raise ValueError("grid is empty")
    width = len(lines[0])
    rows = []
    for line in lines:
        if len(line) != width or not all(char in "0123456789" for char in line):
            raise ValueError(f"invalid grid row {line!r}")
        rows.append(tuple(int(char) for char in line))
    return tuple(rows)


def minimal_heat_loss(grid: HeatGrid, min_straight: int, max_straight: int) -> int:
    """Least heat loss from the top-left to the bottom-right corner.

    The crucible must move at least ``min_straight`` and at most
    ``max_straight`` blocks in one direction before turning or stopping.
    The heat loss of the starting block is not counted.
    """
    if min_straight < 1 or max_straight < min_straight:
        raise ValueError("straight-line limits must satisfy 1 <= min <= max")
    rows, cols = len(grid), len(grid[0])
    target = (rows - 1, cols - 1)

    def inside(pos: Position) -> bool:
        return 0 <= pos[0] < rows and 0 <= pos[1] < cols

    queue: list[tuple[int, int, int, int, int]] = []
    best: dict[tuple[int, int, int, int], int] = {}

    def push(loss: int, pos: Position, heading: Direction, run: int) -> None:
        if not inside(pos):
            return
        loss += grid[pos[0]][pos[1]]
        key = (pos[0], pos[1], heading.value, run)
        if loss < best.get(key, loss + 1):
            best[key] = loss
            heapq.heappush(queue, (loss, pos[0], pos[1], heading.value, run))

    for heading in (Direction.EAST, Direction.SOUTH):
        push(0, heading.step((0, 0)), heading, 1)

    while queue:
        loss, row, col, value, run = heapq.heappop(queue)
        if best[(row, col, value, run)] < loss:
            continue
        pos = (row, col)
        if pos == target and run >= min_straight:
            return loss
        heading = Direction(value)
        if run < max_straight:
            push(loss, heading.step(pos), heading, run + 1)
        if run >= min_straight:
            for turned in (heading.left(), heading.right()):
                push(loss, turned.step(pos), turned, 1)

    raise ValueError("no route reaches the bottom-right corner")


def solve_a(lines: Sequence[str]) -> int:
    """Least heat loss for a crucible that goes at most three blocks straight."""
    return minimal_heat_loss(parse_grid(lines), 1, 3)


def solve_b(lines: Sequence[str]) -> int:
    """Least heat loss for an ultra crucible moving four to ten blocks straight."""
    return minimal_heat_loss(parse_grid(lines), 4, 10)