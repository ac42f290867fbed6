from itertools import combinations

import pytest

from islandpuzzles.day24 import Hailstone, parse_hailstone, paths_cross, solve_a

SAMPLE = [
    "19, 13, 30 @ -2,  1, -2",
    "18, 19, 22 @ -1, -1, -2",
    "20, 25, 34 @ -2, -2, -4",
    "12, 31, 28 @ -1, -2, -1",
    "20, 19, 15 @  1, -5, -3",
]

AREA = (7.0, 27.0)


def stones():
    return [parse_hailstone(line) for line in SAMPLE]


def test_sample_count():
    assert solve_a(SAMPLE, *AREA) == 2


def test_parse_hailstone():
    assert parse_hailstone(SAMPLE[0]) == Hailstone(19.0, 13.0, 30.0, -2.0, 1.0, -2.0)


def test_crossing_inside_area():
    a, b, *_ = stones()
    assert paths_cross(a, b, *AREA) is True


def test_parallel_paths_never_cross():
    _, b, c, *_ = stones()
    assert paths_cross(b, c, *AREA) is False


def test_crossing_in_the_past_is_ignored():
    a, *_, e = stones()
    assert paths_cross(a, e, *AREA) is False


def test_crossing_is_symmetric():
    for first, second in combinations(stones(), 2):
        assert paths_cross(first, second, *AREA) == paths_cross(second, first, *AREA)


def test_wider_area_counts_at_least_as_many():
    narrow = solve_a(SAMPLE, *AREA)
    wide = solve_a(SAMPLE, -1000.0, 1000.0)
    assert wide >= narrow


def test_default_area_excludes_small_sample():
    assert solve_a(SAMPLE) == 0


@pytest.mark.parametrize("line", ["19, 13, 30 -2, 1, -2", "19, 13 @ -2, 1, -2", "a, 1, 2 @ 1, 1, 1"])
def test_parse_rejects_bad_lines(line):
    with pytest.raises(ValueError):
        parse_hailstone(line)


def test_zero_x_velocity_rejected():
    vertical = Hailstone(10.0, 10.0, 0.0, 0.0, 1.0, 0.0)
    a = stones()[0]
    with pytest.raises(ValueError):
        paths_cross(vertical, a, *AREA)