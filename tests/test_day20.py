import pytest

from islandpuzzles.day20 import (
    Broadcaster,
    Conjunction,
    FlipFlop,
    Pulse,
    PulseValue,
    parse_network,
    solve_a,
    solve_b,
)

SIMPLE = [
    "broadcaster -> a, b, c",
    "%a -> b",
    "%b -> c",
    "%c -> inv",
    "&inv -> a",
]

INTERESTING = [
    "broadcaster -> a",
    "%a -> inv, con",
    "&inv -> b",
    "%b -> con",
    "&con -> output",
]

CYCLES = [
    "broadcaster -> a, b",
    "%a -> inv",
    "%b -> c",
    "%c -> inv",
    "&inv -> rx",
]


def test_flip_flop_ignores_high_pulse():
    ff = FlipFlop("ff", ["x"])
    assert ff.process(Pulse(PulseValue.HIGH, "src", "ff")) == []
    assert ff.on is False


def test_flip_flop_toggles_on_low_pulses():
    ff = FlipFlop("ff", ["x", "y"])
    first = ff.process(Pulse(PulseValue.LOW, "src", "ff"))
    assert [p.value for p in first] == [PulseValue.HIGH, PulseValue.HIGH]
    assert [p.target for p in first] == ["x", "y"]
    second = ff.process(Pulse(PulseValue.LOW, "src", "ff"))
    assert [p.value for p in second] == [PulseValue.LOW, PulseValue.LOW]


def test_conjunction_sends_low_only_when_all_inputs_high():
    con = Conjunction("con", ["out"])
    con.register_input("a")
    con.register_input("b")
    assert con.inputs == ["a", "b"]
    first = con.process(Pulse(PulseValue.HIGH, "a", "con"))
    assert first == [Pulse(PulseValue.HIGH, "con", "out")]
    second = con.process(Pulse(PulseValue.HIGH, "b", "con"))
    assert second == [Pulse(PulseValue.LOW, "con", "out")]


def test_broadcaster_repeats_value():
    bc = Broadcaster("broadcaster", ["a", "b"])
    sent = bc.process(Pulse(PulseValue.HIGH, "button", "broadcaster"))
    assert sent == [
        Pulse(PulseValue.HIGH, "broadcaster", "a"),
        Pulse(PulseValue.HIGH, "broadcaster", "b"),
    ]


def test_parse_network_builds_modules_and_inputs():
    network = parse_network(INTERESTING)
    assert isinstance(network.modules["broadcaster"], Broadcaster)
    assert isinstance(network.modules["a"], FlipFlop)
    assert isinstance(network.modules["con"], Conjunction)
    assert sorted(network.modules["con"].inputs) == ["a", "b"]
    assert "output" not in network.modules


def test_push_button_starts_with_low_pulse_to_broadcaster():
    network = parse_network(SIMPLE)
    sent = network.push_button()
    assert sent[0] == Pulse(PulseValue.LOW, "button", "broadcaster")
    assert [p.target for p in sent[1:4]] == ["a", "b", "c"]


def test_push_button_restores_simple_network_state():
    network = parse_network(SIMPLE)
    first = network.push_button()
    second = network.push_button()
    assert first == second
    assert all(not network.modules[name].on for name in "abc")


@pytest.mark.parametrize(
    "lines",
    [
        ["broadcaster a"],
        ["?x -> broadcaster"],
        ["%a -> b"],
        ["broadcaster -> a1"],
    ],
)
def test_parse_network_rejects_bad_input(lines):
    with pytest.raises(ValueError):
        parse_network(lines)


def test_solve_a_simple_example():
    assert solve_a(SIMPLE) == 32000000


def test_solve_a_interesting_example():
    assert solve_a(INTERESTING) == 11687500


def test_solve_b_multiplies_cycle_lengths():
    assert solve_b(CYCLES) == 2


def test_solve_b_requires_rx():
    with pytest.raises(ValueError):
        solve_b(SIMPLE)