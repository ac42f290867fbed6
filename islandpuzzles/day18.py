"""Area of a lagoon dug out along a closed loop of trench instructions."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from itertools import groupby
from operator import itemgetter
from string import hexdigits

Position = tuple[int, int]


class Direction(Enum):
    """A heading on the ground, valued by its (row, column) delta."""

    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    def step(self, pos: Position, count: int = 1) -> Position:
        """Return the position ``count`` steps from ``pos`` in this direction."""
        return pos[0] + self.value[0] * count, pos[1] + self.value[1] * count


_LETTER_DIRECTIONS = {
    "R": Direction.EAST,
    "L": Direction.WEST,
    "U": Direction.NORTH,
    "D": Direction.SOUTH,
}

_DIGIT_DIRECTIONS = {
    "0": Direction.EAST,
    "1": Direction.SOUTH,
    "2": Direction.WEST,
    "3": Direction.NORTH,
}

# Offsets of the tiles diagonally ahead on the left and on the right.
_SIDE_OFFSETS = {
    Direction.NORTH: ((-1, -1), (-1, 1)),
    Direction.EAST: ((-1, 1), (1, 1)),
    Direction.SOUTH: ((1, 1), (1, -1)),
    Direction.WEST: ((1, -1), (-1, -1)),
}


@dataclass(frozen=True)
class Instruction:
    """Dig ``count`` metres of trench heading ``direction``."""

    direction: Direction
    count: int


def _fields(line: str) -> list[str]:
    fields = line.split(" ")
    if len(fields) < 3:
        raise ValueError(f"malformed instruction {line!r}")
    return fields


def parse_instruction_a(line: str) -> Instruction:
    """Read the direction letter and metre count of a plan line."""
    fields = _fields(line)
    try:
        direction = _LETTER_DIRECTIONS[fields[0]]
    except KeyError:
        raise ValueError(f"unknown direction {fields[0]!r}") from None
    if not fields[1].isdigit():
        raise ValueError(f"invalid count {fields[1]!r}")
    return Instruction(direction, int(fields[1]))


def parse_instruction_b(line: str) -> Instruction:
    """Read the instruction hidden in the colour code of a plan line."""
    color = _fields(line)[2]
    if len(color) < 4:
        raise ValueError(f"malformed colour code {color!r}")
    digit = color[-2]
    count_text = color[2:-2]
    try:
        direction = _DIGIT_DIRECTIONS[digit]
    except KeyError:
        raise ValueError(f"unknown direction digit {digit!r}") from None
    if not count_text or not all(char in hexdigits for char in count_text):
        raise ValueError(f"invalid hexadecimal count {count_text!r}")
    return Instruction(direction, int(count_text, 16))


def flood_fill_area(instructions: Iterable[Instruction]) -> int:
    """Count the dug tiles by tracing the loop and flooding its inside.

    While digging, the tiles diagonally ahead on both sides are remembered.
    The side whose tiles all lie within the bounding box of the loop is the
    inside, and the lagoon grows outward from those tiles up to the trench.
    """
    pos: Position = (0, 0)
    dug: set[Position] = {pos}
    left: set[Position] = set()
    right: set[Position] = set()

    for instruction in instructions:
        (l_row, l_col), (r_row, r_col) = _SIDE_OFFSETS[instruction.direction]
        for _ in range(instruction.count):
            left.add((pos[0] + l_row, pos[1] + l_col))
            right.add((pos[0] + r_row, pos[1] + r_col))
            pos = instruction.direction.step(pos)
            dug.add(pos)

    min_row = min(row for row, _ in dug)
    max_row = max(row for row, _ in dug)
    min_col = min(col for _, col in dug)
    max_col = max(col for _, col in dug)

    def within_bounds(tile: Position) -> bool:
        return min_row <= tile[0] <= max_row and min_col <= tile[1] <= max_col

    inside = left if all(within_bounds(tile) for tile in left) else right

    queue: deque[Position] = deque(inside)
    while queue:
        tile = queue.popleft()
        if tile in dug:
            continue
        dug.add(tile)
        row, col = tile
        queue.extend(((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)))

    return len(dug)


def _row_area(
    row: int,
    horizontal_ranges: list[tuple[int, int]],
    vertical: list[tuple[int, int, int]],
) -> int:
    """Dug tiles on one row, given the horizontal walls lying on it."""
    crossings = [col for col, top, bottom in vertical if top <= row < bottom]
    ranges = list(zip(crossings[0::2], crossings[1::2]))
    ranges.extend(horizontal_ranges)
    ranges.sort()

    area = 0
    merged_start: int | None = None
    merged_end = 0
    for start, end in ranges:
        if merged_start is not None and start <= merged_end:
            merged_end = max(merged_end, end)
            continue
        if merged_start is not None:
            area += merged_end - merged_start + 1
        merged_start, merged_end = start, end
    if merged_start is not None:
        area += merged_end - merged_start + 1
    return area


def segment_area(instructions: Iterable[Instruction]) -> int:
    """Count the dug tiles from the wall segments, row band by row band.

    Horizontal walls include both ends; vertical walls include their top row
    but not their bottom one, so each row crosses an even number of them.
    """
    horizontal: list[tuple[int, int, int]] = []
    vertical: list[tuple[int, int, int]] = []
    pos: Position = (0, 0)

    for instruction in instructions:
        end = instruction.direction.step(pos, instruction.count)
        if instruction.direction is Direction.EAST:
            horizontal.append((end[0], pos[1], end[1]))
        elif instruction.direction is Direction.WEST:
            horizontal.append((end[0], end[1], pos[1]))
        elif instruction.direction is Direction.NORTH:
            vertical.append((end[1], end[0], pos[0]))
        else:
            vertical.append((end[1], pos[0], end[0]))
        pos = end

    horizontal.sort(key=itemgetter(0, 1))
    vertical.sort(key=itemgetter(0))

    bands = [
        (row, [(start, end) for _, start, end in group])
        for row, group in groupby(horizontal, key=itemgetter(0))
    ]

    area = 0
    for index, (row, ranges) in enumerate(bands):
        area += _row_area(row, ranges, vertical)
        if index + 1 < len(bands):
            gap = bands[index + 1][0] - row - 1
            area += _row_area(row + 1, [], vertical) * gap
    return area


def solve_a(lines: Iterable[str]) -> int:
    """Lagoon size following the plain directions and counts."""
    return flood_fill_area(parse_instruction_a(line) for line in lines)


def solve_b(lines: Iterable[str]) -> int:
    """Lagoon size following the instructions encoded in the colour codes."""
    return segment_area(parse_instruction_b(line) for line in lines)