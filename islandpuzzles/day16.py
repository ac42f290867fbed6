"""Light beams bouncing through a grid of mirrors and splitters."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

Position = tuple[int, int]


class Direction(Enum):
    """A heading on the grid, valued by its (row, column) delta."""

    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    def step(self, pos: Position) -> Position:
        """Return the position one step from ``pos`` in this direction."""
        return pos[0] + self.value[0], pos[1] + self.value[1]


_FORWARD_MIRROR = {
    Direction.NORTH: Direction.EAST,
    Direction.EAST: Direction.NORTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.SOUTH,
}

_BACKWARD_MIRROR = {
    Direction.NORTH: Direction.WEST,
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.EAST,
    Direction.WEST: Direction.NORTH,
}


class TileType(Enum):
    """The kinds of tile a grid cell may hold, valued by their character."""

    EMPTY = "."
    MIRROR_F = "/"
    MIRROR_B = "\\"
    SPLITTER_H = "-"
    SPLITTER_V = "|"

    def deflect(self, heading: Direction) -> Direction:
        """Return the heading of a beam after entering this tile."""
        if self is TileType.MIRROR_F:
            return _FORWARD_MIRROR[heading]
        if self is TileType.MIRROR_B:
            return _BACKWARD_MIRROR[heading]
        return heading

    def split(self, heading: Direction) -> tuple[Direction, ...]:
        """Return the headings a beam splits into here, or an empty tuple."""
        if self is TileType.SPLITTER_H and heading in (Direction.NORTH, Direction.SOUTH):
            return (Direction.EAST, Direction.WEST)
        if self is TileType.SPLITTER_V and heading in (Direction.EAST, Direction.WEST):
            return (Direction.NORTH, Direction.SOUTH)
        return ()


@dataclass(frozen=True)
class Grid:
    """A rectangular contraption of tiles."""

    tiles: tuple[tuple[TileType, ...], ...]

    @property
    def rows(self) -> int:
        return len(self.tiles)

    @property
    def cols(self) -> int:
        return len(self.tiles[0])

    def contains(self, pos: Position) -> bool:
        return 0 <= pos[0] < self.rows and 0 <= pos[1] < self.cols

    def energize(self, start: Position, direction: Direction) -> int:
        """Count the tiles energized by a beam leaving ``start`` heading ``direction``.

        The start position itself is not energized; it is usually just outside
        the grid.
        """
        beams: deque[tuple[Position, Direction]] = deque([(start, direction)])
        seen: set[tuple[Position, Direction]] = set()

        while beams:
            pos, heading = beams.popleft()
            while True:
                pos = heading.step(pos)
                if not self.contains(pos):
                    break
                tile = self.tiles[pos[0]][pos[1]]
                heading = tile.deflect(heading)
                if (pos, heading) in seen:
                    break
                seen.add((pos, heading))
                branches = tile.split(heading)
                if branches:
                    beams.extend((pos, branch) for branch in branches)
                    break

        return len({pos for pos, _ in seen})

    def edge_starts(self) -> Iterable[tuple[Position, Direction]]:
        """Yield every start just outside the grid, heading inwards."""
        for col in range(self.cols):
            yield (-1, col), Direction.SOUTH
        for col in range(self.cols):
            yield (self.rows, col), Direction.NORTH
        for row in range(self.rows):
            yield (row, self.cols), Direction.WEST
        for row in range(self.rows):
            yield (row, -1), Direction.EAST


def parse_grid(lines: Sequence[str]) -> Grid:
    """Parse the lines of a contraption into a :class:`Grid`."""
    if not lines or not lines[0]:
        raise ValueError("grid is empty")
    width = len(lines[0])
    rows = []
    for line in lines:
        if len(line) != width:
            raise ValueError(f"row {line!r} has length {len(line)}, expected {width}")
        try:
            rows.append(tuple(TileType(char) for char in line))
        except ValueError as exc:
            raise ValueError(f"invalid tile in row {line!r}") from exc
    return Grid(tuple(rows))


def solve_a(lines: Sequence[str]) -> int:
    """Energized tile count for a beam entering the top-left corner heading east."""
    return parse_grid(lines).energize((0, -1), Direction.EAST)


def solve_b(lines: Sequence[str]) -> int:
    """Largest energized tile count over every beam entering from an edge."""
    grid = parse_grid(lines)
    return max(grid.energize(start, heading) for start, heading in grid.edge_starts())