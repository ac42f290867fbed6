"""Splitting a component graph in two by cutting at most three wires."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

MAX_CUT = 3


class Group(Enum):
    """One of the two sides of a partition."""

    A = "A"
    B = "B"

    def other(self) -> Group:
        """The opposite side."""
        return Group.B if self is Group.A else Group.A


class _LocalOptimum(ValueError):
    """No single move improves the partition, yet the cut is still too large."""


@dataclass(frozen=True)
class Graph:
    """An undirected graph; ``neighbours[i]`` lists the ids linked to node ``i``."""

    names: tuple[str, ...]
    neighbours: tuple[tuple[int, ...], ...]

    def split_product(self, start: int = 0) -> int:
        """Product of the two group sizes after a greedy partition seeded at ``start``.

        Roughly half the nodes, reached breadth-first from ``start``, form the
        first group. Nodes are then moved, one at a time, to whichever side
        gains the most, until at most three links cross between the groups.
        Raises :class:`ValueError` when no move helps any more.
        """
        count = len(self.names)
        if not 0 <= start < count:
            raise ValueError(f"start node {start} is not in the graph")

        group = [Group.A] * count
        queue: deque[int] = deque([start])
        processed = 0
        while queue:
            node = queue.popleft()
            if group[node] is Group.A:
                processed += 1
                group[node] = Group.B
                queue.extend(self.neighbours[node])
            if processed > count // 2:
                break

        internal = [
            sum(group[other] is group[node] for other in links)
            for node, links in enumerate(self.neighbours)
        ]
        external = [
            len(links) - same for links, same in zip(self.neighbours, internal)
        ]
        cost = sum(ext for ext, side in zip(external, group) if side is Group.A)

        while cost > MAX_CUT:
            target = max(range(count), key=lambda node: external[node] - internal[node])
            gain = external[target] - internal[target]
            if gain <= 0:
                raise _LocalOptimum(
                    f"partition from node {start} is stuck with a cut of {cost}"
                )
            cost -= gain
            previous = group[target]
            group[target] = previous.other()
            degree = len(self.neighbours[target])
            external[target], internal[target] = internal[target], degree - internal[target]
            for other in self.neighbours[target]:
                if group[other] is previous:
                    external[other] += 1
                    internal[other] -= 1
                else:
                    external[other] -= 1
                    internal[other] += 1

        size_a = sum(side is Group.A for side in group)
        return size_a * (count - size_a)


def parse_graph(lines: Iterable[str]) -> Graph:
    """Parse lines such as ``jqt: rhn xhk nvd``; ids follow first appearance."""
    ids: dict[str, int] = {}
    links: list[dict[int, None]] = []

    def node_id(name: str) -> int:
        if name not in ids:
            ids[name] = len(ids)
            links.append({})
        return ids[name]

    for line in lines:
        source, colon, rest = line.partition(":")
        if not colon or not source:
            raise ValueError(f"malformed wiring line {line!r}")
        targets = rest.strip().split(" ")
        if any(not target for target in targets):
            raise ValueError(f"missing component name in {line!r}")
        from_id = node_id(source)
        for target in targets:
            to_id = node_id(target)
            links[from_id][to_id] = None
            links[to_id][from_id] = None

    if not ids:
        raise ValueError("wiring diagram is empty")
    return Graph(tuple(ids), tuple(tuple(neighbours) for neighbours in links))


def solve_a(lines: Iterable[str]) -> int:
    """Product of the group sizes once three wires are cut.

    Each node is tried in turn as the seed of the partition until one of
    them leads to a cut of at most three wires.
    """
    graph = parse_graph(lines)
    for start in range(len(graph.names)):
        try:
            return graph.split_product(start)
        except _LocalOptimum:
            continue
    raise ValueError("no partition with a cut of at most three wires was found")