import pytest

from islandpuzzles.day23 import (
    Graph,
    TrailMap,
    build_graph,
    longest_path,
    parse_trail_map,
    solve_a,
    solve_b,
)

SAMPLE = [
    "#.#####################",
    "#.......#########...###",
    "#######.#########.#.###",
    "###.....#.>.>.###.#.###",
    "###v#####.#v#.###.#.###",
    "###.>...#.#.#.....#...#",
    "###v###.#.#.#########.#",
    "###...#.#.#.......#...#",
    "#####.#.#.#######.#.###",
    "#.....#.#.#.......#...#",
    "#.#####.#.#.#########v#",
    "#.#...#...#...###...>.#",
    "#.#.#v#######v###.###v#",
    "#...#.>.#...>.>.#.###.#",
    "#####v#.#.###v#.#.###.#",
    "#.....#...#...#.#.#...#",
    "#.#########.###.#.#.###",
    "#...###...#...#...#.###",
    "###.###.#.###v#####v###",
    "#...#...#.#.>.>.#.>.###",
    "#.###.###.#.###.#.#v###",
    "#.....###...###...#...#",
    "#####################.#",
]

UPHILL = ["#.#", "#^#", "#.#"]


def test_sample_part_a():
    assert solve_a(SAMPLE) == 94


def test_sample_part_b():
    assert solve_b(SAMPLE) == 154


def test_sample_dry_hike_is_not_shorter():
    assert solve_b(SAMPLE) >= solve_a(SAMPLE)


def test_slopes_block_uphill_walk():
    with pytest.raises(ValueError):
        solve_a(UPHILL)


def test_dry_slopes_are_walkable():
    assert solve_b(UPHILL) == 2


def test_map_without_slopes_gives_same_answer_both_ways():
    corridor = ["#.###", "#...#", "###.#"]
    assert solve_a(corridor) == solve_b(corridor)


def test_parse_without_slippery_removes_slopes():
    trail_map = parse_trail_map(SAMPLE, slippery=False)
    assert isinstance(trail_map, TrailMap)
    assert not any(char in "<>^v" for row in trail_map.rows_text for char in row)
    assert trail_map.rows == len(SAMPLE)
    assert trail_map.cols == len(SAMPLE[0])


def test_parse_keeps_slopes_when_slippery():
    trail_map = parse_trail_map(SAMPLE)
    assert trail_map.rows_text == tuple(SAMPLE)


def test_junctions_have_more_than_two_open_neighbours():
    trail_map = parse_trail_map(SAMPLE)
    junctions = trail_map.junctions()
    assert junctions
    for row, col in junctions:
        around = [(row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)]
        assert sum(not trail_map.is_wall(pos) for pos in around) > 2


def test_graph_of_plain_corridor_has_only_endpoints():
    trail_map = parse_trail_map(["#.###", "#...#", "###.#"])
    graph = build_graph(trail_map, (0, 1), (2, 3))
    assert isinstance(graph, Graph)
    assert len(graph.edges) == 2
    assert graph.start_id != graph.target_id
    assert [to for to, _ in graph.edges[graph.start_id]] == [graph.target_id]
    assert longest_path(graph) == graph.edges[graph.start_id][0][1]


def test_neighbours_respect_slope_direction():
    trail_map = parse_trail_map(UPHILL)
    assert trail_map.neighbours((1, 1), [(0, 1)]) == []
    dry = parse_trail_map(UPHILL, slippery=False)
    assert dry.neighbours((1, 1), [(0, 1)]) == [(2, 1)]


def test_start_outside_map_raises():
    trail_map = parse_trail_map(UPHILL)
    with pytest.raises(ValueError):
        build_graph(trail_map, (-1, 1), (2, 1))


@pytest.mark.parametrize("lines", [[], ["#.#", "#."], ["#.#", "#x#", "#.#"]])
def test_invalid_maps_raise(lines):
    with pytest.raises(ValueError):
        parse_trail_map(lines)