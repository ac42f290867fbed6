"""Longest hike through a forest of trails, with or without slippery slopes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

Position = tuple[int, int]

_WALL = "#"
_OPEN = "."
_SLOPES = "<>^v"


@dataclass(frozen=True)
class TrailMap:
    """A rectangular map of paths, forest and (possibly) slopes."""

    rows_text: tuple[str, ...]

    @property
    def rows(self) -> int:
        return len(self.rows_text)

    @property
    def cols(self) -> int:
        return len(self.rows_text[0])

    def tile(self, pos: Position) -> str:
        return self.rows_text[pos[0]][pos[1]]

    def contains(self, pos: Position) -> bool:
        return 0 <= pos[0] < self.rows and 0 <= pos[1] < self.cols

    def is_wall(self, pos: Position) -> bool:
        return self.tile(pos) == _WALL

    def _slope_allows(self, pos: Position, candidate: Position) -> bool:
        tile = self.tile(pos)
        if tile == "<":
            return candidate[1] < pos[1]
        if tile == ">":
            return candidate[1] > pos[1]
        if tile == "^":
            return candidate[0] < pos[0]
        if tile == "v":
            return candidate[0] > pos[0]
        return True

    def neighbours(self, pos: Position, visited: Iterable[Position] = ()) -> list[Position]:
        """Open tiles one step from ``pos`` that may be entered and are not visited."""
        seen = set(visited)
        row, col = pos
        candidates = ((row + 1, col), (row - 1, col), (row, col + 1), (row, col - 1))
        return [
            candidate
            for candidate in candidates
            if candidate not in seen
            and self.contains(candidate)
            and not self.is_wall(candidate)
            and self._slope_allows(pos, candidate)
        ]

    def junctions(self) -> list[Position]:
        """Inner open tiles with more than two open neighbours, in reading order."""
        found = []
        for row in range(1, self.rows - 1):
            for col in range(1, self.cols - 1):
                if self.is_wall((row, col)):
                    continue
                around = ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1))
                if sum(not self.is_wall(pos) for pos in around) > 2:
                    found.append((row, col))
        return found


@dataclass(frozen=True)
class Graph:
    """Junctions joined by trails; ``edges[i]`` holds (target id, steps) pairs."""

    edges: tuple[tuple[tuple[int, int], ...], ...]
    start_id: int
    target_id: int


def parse_trail_map(lines: Sequence[str], slippery: bool = True) -> TrailMap:
    """Parse the map; without ``slippery`` the slopes count as plain path."""
    if not lines or not lines[0]:
        raise ValueError("trail map is empty")
    width = len(lines[0])
    rows = []
    for line in lines:
        if len(line) != width:
            raise ValueError(f"row {line!r} has length {len(line)}, expected {width}")
        invalid = set(line) - set(_WALL + _OPEN + _SLOPES)
        if invalid:
            raise ValueError(f"invalid tile {sorted(invalid)[0]!r} in row {line!r}")
        if not slippery:
            line = "".join(_OPEN if char in _SLOPES else char for char in line)
        rows.append(line)
    return TrailMap(tuple(rows))


def _follow(
    trail_map: TrailMap,
    origin: Position,
    first: Position,
    node_ids: dict[Position, int],
) -> tuple[int, int] | None:
    visited = {origin}
    position = first
    steps = 1
    while position not in node_ids:
        ahead = trail_map.neighbours(position, visited)
        if len(ahead) != 1:
            return None
        visited.add(position)
        position = ahead[0]
        steps += 1
    return node_ids[position], steps


def build_graph(trail_map: TrailMap, start: Position, target: Position) -> Graph:
    """Condense the map into a graph of junctions plus the start and target."""
    for pos in (start, target):
        if not trail_map.contains(pos):
            raise ValueError(f"position {pos} lies outside the map")
    nodes = [*trail_map.junctions(), start, target]
    node_ids = {pos: index for index, pos in enumerate(nodes)}

    edges = []
    for pos in nodes:
        trails = (
            _follow(trail_map, pos, first, node_ids)
            for first in trail_map.neighbours(pos, (pos,))
        )
        edges.append(tuple(trail for trail in trails if trail is not None))

    return Graph(tuple(edges), node_ids[start], node_ids[target])


def longest_path(graph: Graph) -> int:
    """Steps of the longest hike from start to target visiting no junction twice."""

    def search(node: int, visited: int) -> int | None:
        if node == graph.target_id:
            return 0
        inner = visited | (1 << node)
        best: int | None = None
        for to, steps in graph.edges[node]:
            if visited >> to & 1:
                continue
            rest = search(to, inner)
            if rest is not None and (best is None or rest + steps > best):
                best = rest + steps
        return best

    result = search(graph.start_id, 0)
    if result is None:
        raise ValueError("no hike reaches the target")
    return result


def _solve(lines: Sequence[str], slippery: bool) -> int:
    trail_map = parse_trail_map(lines, slippery)
    start = (0, 1)
    target = (trail_map.rows - 1, trail_map.cols - 2)
    return longest_path(build_graph(trail_map, start, target))


def solve_a(lines: Sequence[str]) -> int:
    """Longest hike when slopes may only be walked downhill."""
    return _solve(lines, slippery=True)


def solve_b(lines: Sequence[str]) -> int:
    """Longest hike when slopes are ordinary path."""
    return _solve(lines, slippery=False)