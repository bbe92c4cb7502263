"""Pure stateless curve math — cubic Bézier evaluation and sampling, never raises."""

from __future__ import annotations

import math

Point = tuple[float, float]


def normalize(day: float, energy: float, cycle_length: int) -> Point:
    """Map (day, energy on 1–5) into the unit square."""
    span = max(cycle_length - 1, 1)
    return (day - 1) / span, (energy - 1) / 4


def denormalize_day(x: float, cycle_length: int) -> float:
    return x * max(cycle_length - 1, 1) + 1


def energy_from_y(y: float) -> int:
    """Energy level for a normalised y: half-up rounding, clamped to 1–5."""
    return min(max(1, math.floor(y * 4 + 1 + 0.5)), 5)


def lerp(a: Point, b: Point, f: float) -> Point:
    return a[0] + (b[0] - a[0]) * f, a[1] + (b[1] - a[1]) * f


def cubic_bezier(t: float, p0: Point, c1: Point, c2: Point, p3: Point) -> Point:
    """Bernstein form: (1-t)^3 P0 + 3(1-t)^2 t C1 + 3(1-t) t^2 C2 + t^3 P3."""
    mt = 1.0 - t
    a = mt * mt * mt
    b = 3.0 * mt * mt * t
    c = 3.0 * mt * t * t
    d = t * t * t
    return (
        a * p0[0] + b * c1[0] + c * c2[0] + d * p3[0],
        a * p0[1] + b * c1[1] + c * c2[1] + d * p3[1],
    )


def sample_segment(
    p0: Point,
    c1: Point,
    c2: Point,
    p3: Point,
    steps: int,
    include_start: bool = True,
) -> list[Point]:
    """Evaluate at t = i/steps for i in 0..steps (t=0 optionally skipped)."""
    first = 0 if include_start else 1
    return [cubic_bezier(i / steps, p0, c1, c2, p3) for i in range(first, steps + 1)]


def nearest_index(xs: list[float], target: float, cycle_length: int) -> int:
    """Index of the sample whose day is closest to ``target``; ties go to the later sample."""
    best = 0
    best_diff = math.inf
    for i, x in enumerate(xs):
        diff = abs(denormalize_day(x, cycle_length) - target)
        if diff <= best_diff:
            best, best_diff = i, diff
    return best
