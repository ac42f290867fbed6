"""Crossings of hailstone paths projected onto the X/Y plane."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import combinations

AREA_MIN = 200000000000000.0
AREA_MAX = 400000000000000.0


@dataclass(frozen=True)
class Hailstone:
    """A hailstone's starting position and its velocity per nanosecond."""

    sx: float
    sy: float
    sz: float
    dx: float
    dy: float
    dz: float

    @property
    def slope(self) -> float:
        """Slope of the path in the X/Y plane."""
        if self.dx == 0:
            raise ValueError("hailstone paths without X velocity are not supported")
        return self.dy / self.dx

    @property
    def intercept(self) -> float:
        """Y value of the path in the X/Y plane where X is zero."""
        return self.sy - self.slope * self.sx


def _triple(text: str) -> tuple[float, float, float]:
    try:
        values = tuple(float(field.strip()) for field in text.split(","))
    except ValueError:
        raise ValueError(f"invalid coordinates {text!r}") from None
    if len(values) != 3:
        raise ValueError(f"expected three coordinates in {text!r}")
    return values  # type: ignore[return-value]


def parse_hailstone(line: str) -> Hailstone:
    """Parse a line of the form ``px, py, pz @ vx, vy, vz``."""
    position, at, velocity = line.partition("@")
    if not at:
        raise ValueError(f"missing '@' in {line!r}")
    return Hailstone(*_triple(position), *_triple(velocity))


def paths_cross(
    first: Hailstone, second: Hailstone, area_min: float, area_max: float
) -> bool:
    """Whether two paths cross in the future within the test area (X/Y only)."""
    slope_a, slope_b = first.slope, second.slope
    if slope_a == slope_b:
        return False

    intercept_a, intercept_b = first.intercept, second.intercept
    ix = (intercept_b - intercept_a) / (slope_a - slope_b)
    if ix < area_min or ix > area_max:
        return False
    if (ix - first.sx) / first.dx < 0.0:
        return False
    if (ix - second.sx) / second.dx < 0.0:
        return False

    iy = slope_a * ix + intercept_a
    return area_min <= iy <= area_max


def solve_a(
    lines: Iterable[str], area_min: float = AREA_MIN, area_max: float = AREA_MAX
) -> int:
    """Count the pairs of hailstones whose future paths cross in the area."""
    hailstones = [parse_hailstone(line) for line in lines]
    return sum(
        paths_cross(first, second, area_min, area_max)
        for first, second in combinations(hailstones, 2)
    )