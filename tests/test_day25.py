import pytest

from islandpuzzles.day25 import Graph, Group, parse_graph, solve_a

TWO_SQUARES = [
    "a: b c d e",
    "b: c d f",
    "c: d g",
    "e: f g h",
    "f: g h",
    "g: h",
]

# Two five-node cliques joined by four wires: the greedy split gets stuck.
TWO_PENTAGONS = [
    "a: b c d e f",
    "b: c d e g",
    "c: d e h",
    "d: e i",
    "f: g h i j",
    "g: h i j",
    "h: i j",
    "i: j",
]


def test_group_other_flips_sides():
    assert Group.A.other() is Group.B
    assert Group.B.other() is Group.A


def test_parse_assigns_ids_in_order_of_appearance():
    graph = parse_graph(TWO_SQUARES)
    assert graph.names == ("a", "b", "c", "d", "e", "f", "g", "h")


def test_parse_links_are_symmetric():
    graph = parse_graph(TWO_SQUARES)
    for node, links in enumerate(graph.neighbours):
        for other in links:
            assert node in graph.neighbours[other]


def test_parse_keeps_neighbour_insertion_order():
    graph = parse_graph(TWO_SQUARES)
    assert graph.neighbours[0] == (1, 2, 3, 4)
    assert graph.neighbours[3] == (0, 1, 2)


def test_parse_merges_duplicate_links():
    graph = parse_graph(["a: b", "b: a"])
    assert graph.neighbours == ((1,), (0,))


def test_parse_missing_colon_raises():
    with pytest.raises(ValueError):
        parse_graph(["abc def"])


def test_parse_missing_target_raises():
    with pytest.raises(ValueError):
        parse_graph(["abc:"])


def test_parse_empty_input_raises():
    with pytest.raises(ValueError):
        parse_graph([])


def test_split_product_of_two_squares():
    graph = parse_graph(TWO_SQUARES)
    assert graph.split_product(0) == 16


def test_split_product_does_not_change_graph():
    graph = parse_graph(TWO_SQUARES)
    first = graph.split_product(0)
    assert graph.split_product(0) == first
    assert graph == parse_graph(TWO_SQUARES)


def test_split_product_rejects_unknown_start():
    graph = parse_graph(TWO_SQUARES)
    with pytest.raises(ValueError):
        graph.split_product(len(graph.names))
    with pytest.raises(ValueError):
        graph.split_product(-1)


def test_split_product_stuck_raises():
    graph = parse_graph(TWO_PENTAGONS)
    with pytest.raises(ValueError):
        graph.split_product(0)


def test_solve_a_two_squares():
    assert solve_a(TWO_SQUARES) == 16


def test_solve_a_matches_first_successful_seed():
    graph = parse_graph(TWO_SQUARES)
    assert solve_a(TWO_SQUARES) == graph.split_product(0)


def test_solve_a_product_bounded_by_node_count():
    graph = parse_graph(TWO_SQUARES)
    count = len(graph.names)
    result = solve_a(TWO_SQUARES)
    assert 0 <= result <= (count // 2) * (count - count // 2)