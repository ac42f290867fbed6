# islandpuzzles

Solvers for ten puzzles about light beams, crucibles, lagoons, workflows,
pulse networks, garden plots, falling bricks, hiking trails, hailstones and
component wiring. Each puzzle lives in its own module. Solvers take the
puzzle input as a sequence of lines (without line endings) and return an
integer. The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from pathlib import Path

from islandpuzzles import day16

lines = Path("input.txt").read_text().splitlines()
print(day16.solve_a(lines))
print(day16.solve_b(lines))
```

## Modules

| Module  | Puzzle                          | Solvers                                   |
|---------|---------------------------------|-------------------------------------------|
| `day16` | light beams through mirrors     | `solve_a`, `solve_b`                      |
| `day17` | least heat loss for a crucible  | `solve_a`, `solve_b`                      |
| `day18` | digging a lagoon                | `solve_a`, `solve_b`                      |
| `day19` | part-sorting workflows          | `solve_a`, `solve_b`                      |
| `day20` | pulse-propagation network       | `solve_a`, `solve_b`                      |
| `day21` | garden plots reachable in steps | `solve_a(lines, steps=64)`                |
| `day22` | settling sand bricks            | `solve_a`, `solve_b`                      |
| `day23` | longest hiking trail            | `solve_a`, `solve_b`                      |
| `day24` | crossing hailstone paths        | `solve_a(lines, area_min, area_max)`      |
| `day25` | cutting three wires             | `solve_a`                                 |

Besides the solvers, each module exposes the building blocks it uses:

- `day16`: `parse_grid(lines)` returns a `Grid`; `Grid.energize(start, direction)`
  counts the tiles lit by a beam leaving `start` (usually just outside the grid)
  heading in a `Direction`.
- `day17`: `parse_grid(lines)` and `minimal_heat_loss(grid, min_straight, max_straight)`
  for any straight-line limits.
- `day18`: `parse_instruction_a(line)` and `parse_instruction_b(line)` produce
  `Instruction`s; `flood_fill_area(instructions)` and `segment_area(instructions)`
  compute the lagoon size in two different ways.
- `day19`: `parse_workflow(line)`, `parse_part(line)`, `Workflow.route(part)`, and
  `count_accepted_combinations(workflows)` for a mapping of label to `Workflow`.
- `day20`: `parse_network(lines)` returns a `Network`; `Network.push_button()`
  presses the button once and returns every `Pulse` sent, in processing order.
- `day21`: `parse_garden(lines)` returns a `Garden`; `Garden.step(positions)`
  gives every open plot one step away.
- `day22`: `parse_bricks(lines)` and `settle(bricks)`, which maps each brick id
  to the ids of the bricks it rests on.
- `day23`: `parse_trail_map(lines, slippery=True)`, `build_graph(trail_map, start, target)`
  and `longest_path(graph)`.
- `day24`: `parse_hailstone(line)` and `paths_cross(first, second, area_min, area_max)`.
  The area bounds of `solve_a` default to 200000000000000 and 400000000000000.
- `day25`: `parse_graph(lines)` returns a `Graph`; `Graph.split_product(start=0)`
  partitions it greedily from the given seed node.

```python
from islandpuzzles import day21, day24

day21.solve_a(lines, 64)
day24.solve_a(lines, 7.0, 27.0)
```

Malformed input raises `ValueError` rather than returning a wrong answer.

## What it does not do

- There is no command-line program; the solvers are called from Python.
- `day21`, `day24` and `day25` only solve the first part of their puzzle and
  have no `solve_b`.