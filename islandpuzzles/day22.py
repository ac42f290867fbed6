"""Sand bricks settling onto each other, and which ones hold the others up."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

Point = tuple[int, int, int]
Cell = tuple[int, int]


@dataclass(frozen=True)
class Brick:
    """A straight brick between two corner points, both inclusive."""

    id: int
    start: Point
    end: Point

    @property
    def footprint(self) -> tuple[Cell, ...]:
        """Every (x, y) cell the brick covers on the ground plane."""
        return tuple(
            (x, y)
            for x in range(self.start[0], self.end[0] + 1)
            for y in range(self.start[1], self.end[1] + 1)
        )

    @property
    def height(self) -> int:
        """Number of levels the brick spans."""
        return self.end[2] - self.start[2] + 1


def _parse_point(text: str) -> Point:
    fields = text.split(",")
    if len(fields) != 3 or not all(field.isdigit() for field in fields):
        raise ValueError(f"invalid brick corner {text!r}")
    x, y, z = (int(field) for field in fields)
    if z < 1:
        raise ValueError(f"brick corner {text!r} lies below the first level")
    return x, y, z


def _parse_shape(line: str) -> tuple[Point, Point]:
    first, tilde, second = line.partition("~")
    if not tilde:
        raise ValueError(f"missing '~' in {line!r}")
    start, end = _parse_point(first), _parse_point(second)
    if any(low > high for low, high in zip(start, end)):
        raise ValueError(f"brick {line!r} ends before it starts")
    return start, end


def parse_bricks(lines: Iterable[str]) -> list[Brick]:
    """Parse snapshot lines, order the bricks from lowest to highest and number them."""
    shapes = [_parse_shape(line) for line in lines]
    if not shapes:
        raise ValueError("snapshot holds no bricks")
    shapes.sort(key=lambda shape: (shape[0][2], shape[1][2]))
    return [Brick(index, start, end) for index, (start, end) in enumerate(shapes)]


def settle(bricks: Iterable[Brick]) -> dict[int, frozenset[int]]:
    """Drop the bricks in order; map each brick id to the ids it comes to rest on.

    Bricks must be given from lowest to highest, as :func:`parse_bricks`
    returns them. A brick resting on the ground rests on nothing.
    """
    top: dict[Cell, tuple[int, int]] = {}
    supports: dict[int, frozenset[int]] = {}
    for brick in bricks:
        cells = brick.footprint
        level = max(top.get(cell, (0, -1))[0] for cell in cells)
        supports[brick.id] = frozenset(
            top[cell][1] for cell in cells if cell in top and top[cell][0] == level
        )
        for cell in cells:
            top[cell] = (level + brick.height, brick.id)
    return supports


def _resting_on(supports: Mapping[int, frozenset[int]]) -> dict[int, set[int]]:
    above: dict[int, set[int]] = {brick_id: set() for brick_id in supports}
    for upper, below in supports.items():
        for lower in below:
            above[lower].add(upper)
    return above


def _fall_count(
    removed: int,
    supports: Mapping[int, frozenset[int]],
    above: Mapping[int, set[int]],
) -> int:
    dropped = {removed}
    queue: deque[int] = deque(above[removed])
    while queue:
        brick_id = queue.popleft()
        if brick_id in dropped:
            continue
        if supports[brick_id] <= dropped:
            dropped.add(brick_id)
            queue.extend(above[brick_id])
    return len(dropped) - 1


def solve_a(lines: Sequence[str]) -> int:
    """Number of bricks that can be taken away without anything else falling."""
    supports = settle(parse_bricks(lines))
    unsafe = {next(iter(below)) for below in supports.values() if len(below) == 1}
    return len(set(supports) - unsafe)


def solve_b(lines: Sequence[str]) -> int:
    """Sum, over every brick, of how many other bricks fall when it is removed."""
    supports = settle(parse_bricks(lines))
    above = _resting_on(supports)
    return sum(_fall_count(brick_id, supports, above) for brick_id in supports)