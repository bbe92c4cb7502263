"""Parameter resolver — quiz answers to numeric curve parameters.

Total function: every answer, including empty or unrecognised tags,
resolves to a table default. Defaults that stand in for a real answer
raise the matching fuzziness flag instead of failing.
"""

from __future__ import annotations

import logging
import math

from app.curve import tables
from app.curve.models import CurvePoint, Fuzziness, QuizAnswers, ResolvedParameters

logger = logging.getLogger(__name__)

PEAK_EDGE_MARGIN = 5
CONTROL1_BIAS = 0.4
CONTROL1_MIN_FRACTION = 0.15
CONTROL2_NEAR_BIAS = 0.6
CONTROL2_FAR_BIAS = 0.7
LOW_BACK_HALF_FRACTION = 0.6


def _clamp(value: int, lo: int, hi: int) -> int:
    return max(min(value, hi), lo)


def clamp_peak_day(candidate: int, cycle_length: int) -> int:
    """Keep the peak at least five days from both cycle ends.

    Cycles too short for that margin (under ten days) use
    [ceil(0.15 L), floor(0.85 L)] instead, never touching day 1 or day L
    when L >= 3.
    """
    lo, hi = PEAK_EDGE_MARGIN, cycle_length - PEAK_EDGE_MARGIN
    if hi < lo:
        lo = max(2, math.ceil(cycle_length * 0.15))
        hi = max(lo, min(cycle_length - 1, math.floor(cycle_length * 0.85)))
    return min(_clamp(candidate, lo, hi), max(cycle_length, 1))


def parse_level(raw: str, default: float) -> float:
    """Parse an intensity answer on the 1–5 scale; fall back to ``default``."""
    try:
        level = float(raw)
    except (TypeError, ValueError):
        return default
    if math.isnan(level):
        return default
    return min(max(level, 1.0), 5.0)


def _control_points(
    cycle_length: int,
    period_end_day: int,
    peak_day: int,
    lowest_day: int,
) -> tuple[CurvePoint, CurvePoint]:
    day1 = max(
        math.floor(period_end_day + (peak_day - period_end_day) * CONTROL1_BIAS),
        1 + math.floor(cycle_length * CONTROL1_MIN_FRACTION),
    )
    # Past the peak the first segment would fold back on itself
    day1 = _clamp(day1, 1, peak_day)

    low_near_end = lowest_day > peak_day and lowest_day > cycle_length * LOW_BACK_HALF_FRACTION
    bias = CONTROL2_FAR_BIAS if low_near_end else CONTROL2_NEAR_BIAS
    day2 = math.floor(peak_day + (cycle_length - peak_day) * bias)

    return (
        CurvePoint(day=day1, energy=3),
        CurvePoint(day=day2, energy=2 if low_near_end else 3),
    )


def resolve(answers: QuizAnswers) -> ResolvedParameters:
    """Map categorical answers to cycle parameters, control points and fuzziness."""
    cycle, _ = tables.get_cycle_length(answers.cycle_length)
    cycle_length = cycle.days

    period, period_known = tables.get_period_length(answers.period_length)
    period_end_day = _clamp(period.end_day, 1, max(cycle_length - 1, 1))

    condition = tables.get_condition(answers.condition)

    peak, peak_known = tables.get_peak_timing(answers.peak_energy)
    if peak.day_offset is not None:
        candidate = period_end_day + peak.day_offset
    else:
        candidate = cycle_length // 2
    peak_day = clamp_peak_day(candidate, cycle_length)

    low, low_known = tables.get_low_timing(answers.lowest_energy)
    lowest_day = _clamp(low.day_for(cycle_length), 1, cycle_length)

    for name, known in (
        ("period_length", period_known),
        ("peak_energy", peak_known),
        ("lowest_energy", low_known),
    ):
        if not known:
            logger.debug("Unrecognised %s answer %r, using default", name, getattr(answers, name))

    fuzziness = Fuzziness(
        x_axis=cycle.fuzzy_x_axis,
        period_end=period.fuzzy or not period_known,
        peak=peak.fuzzy or not peak_known,
        dip=low.fuzzy or not low_known,
        overall=condition.fuzzy,
    )

    return ResolvedParameters(
        cycle_length=cycle_length,
        period_end_day=period_end_day,
        peak_day=peak_day,
        lowest_day=lowest_day,
        control_points=_control_points(cycle_length, period_end_day, peak_day, lowest_day),
        fuzziness=fuzziness,
        display_cycle_length_label=cycle.label,
        condition_message=condition.message,
        reported_peak_level=parse_level(answers.peak_energy_intensity, tables.DEFAULT_PEAK_INTENSITY),
        reported_low_level=parse_level(answers.low_energy_intensity, tables.DEFAULT_LOW_INTENSITY),
    )
