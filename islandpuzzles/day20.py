"""Pulses travelling through a network of flip-flops and conjunctions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from math import prod

BROADCASTER = "broadcaster"
BUTTON = "button"
FINAL_MODULE = "rx"
BUTTON_PRESSES = 1000


class PulseValue(Enum):
    """The two kinds of pulse."""

    LOW = "low"
    HIGH = "high"


@dataclass(frozen=True)
class Pulse:
    """A pulse sent from one module to another."""

    value: PulseValue
    source: str
    target: str

    @classmethod
    def initial(cls, target: str = BROADCASTER) -> Pulse:
        """The low pulse the button sends when pressed."""
        return cls(PulseValue.LOW, BUTTON, target)


class Module(ABC):
    """A named module with an ordered list of outputs."""

    def __init__(self, name: str, outputs: Iterable[str]) -> None:
        self.name = name
        self.outputs: list[str] = list(outputs)
        self.inputs: list[str] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.outputs!r})"

    @abstractmethod
    def _respond(self, pulse: Pulse) -> PulseValue | None:
        """The value to send to every output, or ``None`` to send nothing."""

    def process(self, pulse: Pulse) -> list[Pulse]:
        """Handle an incoming pulse and return the pulses it sends out."""
        value = self._respond(pulse)
        if value is None:
            return []
        return [Pulse(value, self.name, target) for target in self.outputs]

    def register_input(self, input_name: str) -> None:
        """Record that ``input_name`` sends pulses to this module."""
        self.inputs.append(input_name)


class Broadcaster(Module):
    """Repeats every pulse it receives to all of its outputs."""

    def _respond(self, pulse: Pulse) -> PulseValue | None:
        return pulse.value


class FlipFlop(Module):
    """Ignores high pulses; a low pulse toggles it and reports its new state."""

    def __init__(self, name: str, outputs: Iterable[str]) -> None:
        super().__init__(name, outputs)
        self.on = False

    def _respond(self, pulse: Pulse) -> PulseValue | None:
        if pulse.value is PulseValue.HIGH:
            return None
        self.on = not self.on
        return PulseValue.HIGH if self.on else PulseValue.LOW


class Conjunction(Module):
    """Remembers the last pulse from each input; sends low only if all were high."""

    def __init__(self, name: str, outputs: Iterable[str]) -> None:
        super().__init__(name, outputs)
        self.memory: dict[str, PulseValue] = {}

    def register_input(self, input_name: str) -> None:
        self.memory[input_name] = PulseValue.LOW
        super().register_input(input_name)

    def _respond(self, pulse: Pulse) -> PulseValue | None:
        self.memory[pulse.source] = pulse.value
        if all(value is PulseValue.HIGH for value in self.memory.values()):
            return PulseValue.LOW
        return PulseValue.HIGH


@dataclass
class Network:
    """All modules of a configuration, keyed by name."""

    modules: dict[str, Module] = field(default_factory=dict)

    def push_button(self) -> list[Pulse]:
        """Press the button once; return every pulse sent, in processing order."""
        first = Pulse.initial()
        sent = [first]
        queue: deque[Pulse] = deque(sent)
        while queue:
            pulse = queue.popleft()
            module = self.modules.get(pulse.target)
            if module is None:
                continue
            emitted = module.process(pulse)
            sent.extend(emitted)
            queue.extend(emitted)
        return sent

    def names(self) -> set[str]:
        """Every module name that is defined or appears as an output."""
        found = set(self.modules)
        for module in self.modules.values():
            found.update(module.outputs)
        return found


def _check_name(name: str, line: str) -> str:
    if not name.isalpha():
        raise ValueError(f"invalid module name {name!r} in {line!r}")
    return name


def parse_network(lines: Iterable[str]) -> Network:
    """Parse lines such as ``%a -> b, c`` and wire up every module's inputs."""
    network = Network()
    for line in lines:
        source, arrow, targets = line.partition(" -> ")
        if not arrow:
            raise ValueError(f"missing ' -> ' in {line!r}")
        outputs = [_check_name(name, line) for name in targets.split(", ")]
        module: Module
        if source.startswith("%"):
            module = FlipFlop(_check_name(source[1:], line), outputs)
        elif source.startswith("&"):
            module = Conjunction(_check_name(source[1:], line), outputs)
        elif source == BROADCASTER:
            module = Broadcaster(source, outputs)
        else:
            raise ValueError(f"unknown module kind in {line!r}")
        network.modules[module.name] = module

    if BROADCASTER not in network.names():
        raise ValueError("network has no broadcaster")

    for name, module in list(network.modules.items()):
        for target in module.outputs:
            receiver = network.modules.get(target)
            if receiver is not None:
                receiver.register_input(name)
    return network


def solve_a(lines: Iterable[str]) -> int:
    """Product of low and high pulse counts over a thousand button presses."""
    network = parse_network(lines)
    low = high = 0
    for _ in range(BUTTON_PRESSES):
        for pulse in network.push_button():
            if pulse.value is PulseValue.HIGH:
                high += 1
            else:
                low += 1
    return low * high


def _cycle_modules(network: Network) -> list[str]:
    """Walk back from the final module until more than one module feeds in."""
    names = [
        name for name, module in network.modules.items() if FINAL_MODULE in module.outputs
    ]
    visited: set[str] = set()
    while len(names) == 1:
        name = names[0]
        if name in visited:
            raise ValueError("modules feeding the final module form a closed chain")
        visited.add(name)
        names = list(network.modules[name].inputs)
    return names


def solve_b(lines: Iterable[str]) -> int:
    """Button presses until the final module would get a low pulse.

    Each module in the group feeding the final module is watched until it
    first sends a high pulse; the press counts are multiplied together.
    """
    network = parse_network(lines)
    if FINAL_MODULE not in network.names():
        raise ValueError(f"network has no {FINAL_MODULE!r} module")

    cycles: dict[str, int | None] = dict.fromkeys(_cycle_modules(network))
    presses = 0
    while any(count is None for count in cycles.values()):
        presses += 1
        sent = network.push_button()
        for name, count in cycles.items():
            if count is None and any(
                pulse.source == name and pulse.value is PulseValue.HIGH for pulse in sent
            ):
                cycles[name] = presses
    return prod(count for count in cycles.values() if count is not None)