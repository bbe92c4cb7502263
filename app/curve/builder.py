"""Curve builder — resolved parameters to the chart bundle.

Two cubic Bézier segments joined at the peak: start anchor (day 1, level 1)
to peak (level 5), then peak to cycle end (level 1). The outer control
points share their anchor's y, so the curve leaves day 1 and arrives at
day L with a flat tangent. The sampled path is resampled to one integer
energy level per cycle day.

Deterministic: the same parameters always produce the same bundle.
"""

from __future__ import annotations

import math

from app.config import settings
from app.curve import bezier, tables
from app.curve.models import (
    BezierSamplePoint,
    ChartData,
    CurvePoint,
    Phases,
    QuizAnswers,
    ResolvedParameters,
)
from app.curve.resolver import resolve

MIN_STEPS = 100
TANGENT_PULL = 0.3
START_ENERGY = 1
PEAK_ENERGY = 5
END_ENERGY = 1


def anchor_points(params: ResolvedParameters) -> tuple[CurvePoint, CurvePoint, CurvePoint]:
    return (
        CurvePoint(day=1, energy=START_ENERGY),
        CurvePoint(day=params.peak_day, energy=PEAK_ENERGY),
        CurvePoint(day=params.cycle_length, energy=END_ENERGY),
    )


def sample_curve(params: ResolvedParameters, steps: int | None = None) -> list[bezier.Point]:
    """Normalised samples of the composite curve, x strictly increasing.

    Segment B's first sample coincides with segment A's last (the peak) and
    is dropped.
    """
    steps = max(steps or settings.curve_bezier_steps, MIN_STEPS)
    n = params.cycle_length

    start, peak, end = (bezier.normalize(p.day, p.energy, n) for p in anchor_points(params))
    cp1, cp2 = (bezier.normalize(p.day, p.energy, n) for p in params.control_points)

    # Segment A: start → peak, flat departure
    a_c1 = (bezier.lerp(start, cp1, TANGENT_PULL)[0], start[1])
    segment_a = bezier.sample_segment(start, a_c1, cp1, peak, steps)

    # Segment B: peak → end, flat arrival
    b_c2 = (bezier.lerp(end, cp2, TANGENT_PULL)[0], end[1])
    segment_b = bezier.sample_segment(peak, cp2, b_c2, end, steps, include_start=False)

    return segment_a + segment_b


def resample_days(samples: list[bezier.Point], cycle_length: int) -> list[CurvePoint]:
    xs = [x for x, _ in samples]
    points: list[CurvePoint] = []
    for day in range(1, cycle_length + 1):
        _, y = samples[bezier.nearest_index(xs, day, cycle_length)]
        points.append(CurvePoint(day=day, energy=bezier.energy_from_y(y)))
    return points


def compute_phases(cycle_length: int) -> Phases:
    """Illustrative phase split; does not shape the curve."""
    follicular = math.floor(cycle_length * 0.5)
    ovulation = math.floor(cycle_length * 0.1)
    return Phases(
        follicular=follicular,
        ovulation=ovulation,
        luteal=cycle_length - follicular - ovulation,
    )


def build(
    params: ResolvedParameters,
    answers: QuizAnswers | None = None,
    steps: int | None = None,
) -> ChartData:
    """Build the chart bundle.

    Messages are keyed by the raw answers; without them the generic
    fallback messages are used.
    """
    answers = answers or QuizAnswers()
    samples = sample_curve(params, steps)

    return ChartData(
        points=resample_days(samples, params.cycle_length),
        bezier_points=[BezierSamplePoint(x=x, y=y) for x, y in samples],
        cycle_length=params.cycle_length,
        peak_day=params.peak_day,
        lowest_day=params.lowest_day,
        period_end_day=params.period_end_day,
        control_points=list(params.control_points),
        peak_message=tables.peak_message(answers.peak_energy),
        low_message=tables.low_message(answers.lowest_energy),
        phases=compute_phases(params.cycle_length),
        fuzziness=params.fuzziness,
        display_cycle_length_label=params.display_cycle_length_label,
        condition_message=params.condition_message,
        energy_labels=list(tables.ENERGY_LABELS),
        reported_peak_level=params.reported_peak_level,
        reported_low_level=params.reported_low_level,
    )


def generate_chart_data(answers: QuizAnswers, steps: int | None = None) -> ChartData:
    return build(resolve(answers), answers, steps)
