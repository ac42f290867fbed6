"""Sorting machine parts through chains of rating workflows."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from math import prod

Part = tuple[int, int, int, int]
Span = tuple[int, int]
Spans = tuple[Span, Span, Span, Span]

_CATEGORIES = "xmas"
_ACCEPTED = "A"
_REJECTED = "R"
_FIRST_WORKFLOW = "in"
_RATING_MIN = 1
_RATING_MAX = 4000


def xmas_to_index(name: str) -> int:
    """Position of a rating category (``x``, ``m``, ``a`` or ``s``) in a part."""
    if len(name) != 1 or name not in _CATEGORIES:
        raise ValueError(f"unknown rating category {name!r}")
    return _CATEGORIES.index(name)


def _parse_number(text: str) -> int:
    if not text.isdigit():
        raise ValueError(f"invalid rating value {text!r}")
    return int(text)


class Comparison(Enum):
    """The comparison a conditional rule makes, valued by its operator."""

    GREATER_THAN = ">"
    LESS_THAN = "<"

    def holds(self, value: int, limit: int) -> bool:
        """Whether ``value`` satisfies this comparison against ``limit``."""
        if self is Comparison.GREATER_THAN:
            return value > limit
        return value < limit

    def split(self, low: int, high: int, limit: int) -> tuple[Span | None, Span | None]:
        """Split the inclusive range ``low..high`` into its matching and other part.

        Either part is ``None`` when it would be empty.
        """
        if self is Comparison.GREATER_THAN:
            matching = (max(limit + 1, low), high) if high > limit else None
            rest = (low, min(limit, high)) if low <= limit else None
        else:
            matching = (low, min(limit - 1, high)) if low < limit else None
            rest = (max(limit, low), high) if high >= limit else None
        return matching, rest


@dataclass(frozen=True)
class Rule:
    """Send a part to ``target``, if it meets the condition (when there is one)."""

    target: str
    category: int | None = None
    comparison: Comparison | None = None
    limit: int = 0

    def applies(self, part: Part) -> bool:
        """Whether this rule sends ``part`` on to its target."""
        if self.comparison is None or self.category is None:
            return True
        return self.comparison.holds(part[self.category], self.limit)


@dataclass(frozen=True)
class Workflow:
    """A named, ordered list of rules."""

    label: str
    rules: tuple[Rule, ...]

    def route(self, part: Part) -> str:
        """Label of the workflow (or ``A``/``R``) the part is sent to."""
        for rule in self.rules:
            if rule.applies(part):
                return rule.target
        raise ValueError(f"no rule of workflow {self.label!r} applies to {part}")


def _parse_rule(field: str) -> Rule:
    predicate, colon, target = field.partition(":")
    if not colon:
        if not field:
            raise ValueError("empty rule")
        return Rule(field)
    if not target:
        raise ValueError(f"rule {field!r} has no target")
    for comparison in (Comparison.LESS_THAN, Comparison.GREATER_THAN):
        name, found, limit = predicate.partition(comparison.value)
        if found:
            return Rule(target, xmas_to_index(name), comparison, _parse_number(limit))
    raise ValueError(f"invalid rule condition {predicate!r}")


def parse_workflow(line: str) -> Workflow:
    """Parse a line such as ``px{a<2006:qkq,m>2090:A,rfg}``."""
    label, brace, body = line.partition("{")
    if not brace or not label or not body.endswith("}"):
        raise ValueError(f"malformed workflow {line!r}")
    rules = tuple(_parse_rule(field) for field in body[:-1].split(","))
    return Workflow(label, rules)


def parse_part(line: str) -> Part:
    """Parse a line such as ``{x=787,m=2655,a=1222,s=2876}`` into x, m, a, s."""
    if not (line.startswith("{") and line.endswith("}")):
        raise ValueError(f"malformed part {line!r}")
    values = [0, 0, 0, 0]
    for field in line[1:-1].split(","):
        name, equals, value = field.partition("=")
        if not equals:
            raise ValueError(f"malformed rating {field!r}")
        values[xmas_to_index(name)] = _parse_number(value)
    return (values[0], values[1], values[2], values[3])


def _blocks(lines: Iterable[str]) -> list[list[str]]:
    blocks: list[list[str]] = [[]]
    for line in lines:
        if line:
            blocks[-1].append(line)
        else:
            blocks.append([])
    return blocks


def _workflow_map(lines: Iterable[str]) -> dict[str, Workflow]:
    return {workflow.label: workflow for workflow in map(parse_workflow, lines)}


def _lookup(workflows: Mapping[str, Workflow], label: str) -> Workflow:
    try:
        return workflows[label]
    except KeyError:
        raise ValueError(f"unknown workflow {label!r}") from None


def _accepted_rating(workflows: Mapping[str, Workflow], part: Part) -> int:
    label = _FIRST_WORKFLOW
    while label not in (_ACCEPTED, _REJECTED):
        label = _lookup(workflows, label).route(part)
    return sum(part) if label == _ACCEPTED else 0


def _replace(spans: Spans, index: int, span: Span) -> Spans:
    items = list(spans)
    items[index] = span
    return (items[0], items[1], items[2], items[3])


def count_accepted_combinations(workflows: Mapping[str, Workflow]) -> int:
    """Number of rating combinations from 1 to 4000 that end up accepted."""
    full: Spans = ((_RATING_MIN, _RATING_MAX),) * 4  # type: ignore[assignment]
    queue: deque[tuple[str, Spans]] = deque([(_FIRST_WORKFLOW, full)])
    total = 0

    while queue:
        label, spans = queue.popleft()
        remaining: Spans | None = spans
        for rule in _lookup(workflows, label).rules:
            if remaining is None:
                break
            matched: Spans | None
            if rule.comparison is None or rule.category is None:
                matched, remaining = remaining, None
            else:
                low, high = remaining[rule.category]
                hit, miss = rule.comparison.split(low, high, rule.limit)
                matched = _replace(remaining, rule.category, hit) if hit else None
                remaining = _replace(remaining, rule.category, miss) if miss else None
            if matched is None:
                continue
            if rule.target == _ACCEPTED:
                total += prod(high - low + 1 for low, high in matched)
            elif rule.target != _REJECTED:
                queue.append((rule.target, matched))

    return total


def solve_a(lines: Sequence[str]) -> int:
    """Sum of all ratings of the parts that are accepted."""
    blocks = _blocks(lines)
    if len(blocks) < 2:
        raise ValueError("input needs a blank line between workflows and parts")
    workflows = _workflow_map(blocks[0])
    return sum(_accepted_rating(workflows, parse_part(line)) for line in blocks[1])


def solve_b(lines: Sequence[str]) -> int:
    """Number of distinct rating combinations that are accepted."""
    return count_accepted_combinations(_workflow_map(_blocks(lines)[0]))