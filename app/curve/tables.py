"""Static answer tables — categorical quiz tag → curve parameters.

Each table has a designated default entry. Lookups never raise: an
unrecognised tag returns the default together with ``known=False`` so the
resolver can raise the matching fuzziness flag.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CycleLengthEntry:
    days: int
    label: str
    fuzzy_x_axis: bool = False


@dataclass(frozen=True, slots=True)
class PeriodLengthEntry:
    end_day: int
    fuzzy: bool = False


@dataclass(frozen=True, slots=True)
class PeakTimingEntry:
    day_offset: int | None  # offset after period end; None = mid-cycle
    fuzzy: bool = False


@dataclass(frozen=True, slots=True)
class LowTimingEntry:
    days_from_end: int | None = None
    days_from_start: int | None = None
    fuzzy: bool = False

    def day_for(self, cycle_length: int) -> int:
        if self.days_from_end is not None:
            return cycle_length - self.days_from_end
        if self.days_from_start is not None:
            return self.days_from_start
        return cycle_length - 3


@dataclass(frozen=True, slots=True)
class ConditionEntry:
    fuzzy: bool
    message: str | None = None


GENERALIZED_PATTERN_MESSAGE = "This is a generalized pattern — your body may follow a different rhythm."

DEFAULT_CYCLE_LENGTH = "unknown"
DEFAULT_PERIOD_LENGTH = "3-5days"
DEFAULT_PEAK_TIMING = "ovulation"
DEFAULT_LOW_TIMING = "prePeriod"
DEFAULT_CONDITION = "none"

CYCLE_LENGTHS: dict[str, CycleLengthEntry] = {
    "less28days": CycleLengthEntry(days=26, label="24–28 days"),
    "28to32days": CycleLengthEntry(days=30, label="28–32 days"),
    "more32days": CycleLengthEntry(days=34, label="More than 32 days"),
    "inconsistent": CycleLengthEntry(days=28, label="~28 days*", fuzzy_x_axis=True),
    "unknown": CycleLengthEntry(days=28, label="~28 days*", fuzzy_x_axis=True),
}

PERIOD_LENGTHS: dict[str, PeriodLengthEntry] = {
    "1-2days": PeriodLengthEntry(end_day=3),
    "3-5days": PeriodLengthEntry(end_day=5),
    "6-7days": PeriodLengthEntry(end_day=7),
    "longer": PeriodLengthEntry(end_day=9, fuzzy=True),
}

PEAK_TIMINGS: dict[str, PeakTimingEntry] = {
    "afterPeriod": PeakTimingEntry(day_offset=2),
    "ovulation": PeakTimingEntry(day_offset=None),
    "inconsistent": PeakTimingEntry(day_offset=None, fuzzy=True),
}

LOW_TIMINGS: dict[str, LowTimingEntry] = {
    "prePeriod": LowTimingEntry(days_from_end=5),
    "duringPeriod": LowTimingEntry(days_from_start=1),
    "postOvulation": LowTimingEntry(days_from_end=7),
    "varies": LowTimingEntry(days_from_end=7, fuzzy=True),
}

CONDITIONS: dict[str, ConditionEntry] = {
    "pcod": ConditionEntry(fuzzy=True, message=GENERALIZED_PATTERN_MESSAGE),
    "pcos": ConditionEntry(fuzzy=True, message=GENERALIZED_PATTERN_MESSAGE),
    "thyroid": ConditionEntry(fuzzy=True, message=GENERALIZED_PATTERN_MESSAGE),
    "menopause": ConditionEntry(fuzzy=True, message=GENERALIZED_PATTERN_MESSAGE),
    "none": ConditionEntry(fuzzy=False),
}

PEAK_MESSAGES: dict[str, str] = {
    "afterPeriod": "I am at the top of the world!",
    "ovulation": "I feel my most confident now!",
    "inconsistent": "This is when I might shine brightest!",
}
DEFAULT_PEAK_MESSAGE = "This is when I shine brightest!"

LOW_MESSAGES: dict[str, str] = {
    "prePeriod": "Why am I feeling so low!",
    "duringPeriod": "I need extra care now",
    "postOvulation": "Time to slow down and rest",
    "varies": "My energy may dip here",
}
DEFAULT_LOW_MESSAGE = "My energy is conserving"

# Axis labels for levels 1..5
ENERGY_LABELS: tuple[str, ...] = ("Very Low", "Low", "Moderate", "High", "Peak Energy")

# "It varies" answers to the intensity questions
DEFAULT_PEAK_INTENSITY = 4.25
DEFAULT_LOW_INTENSITY = 1.75


def get_cycle_length(tag: str) -> tuple[CycleLengthEntry, bool]:
    entry = CYCLE_LENGTHS.get(tag)
    if entry is None:
        return CYCLE_LENGTHS[DEFAULT_CYCLE_LENGTH], False
    return entry, True


def get_period_length(tag: str) -> tuple[PeriodLengthEntry, bool]:
    entry = PERIOD_LENGTHS.get(tag)
    if entry is None:
        return PERIOD_LENGTHS[DEFAULT_PERIOD_LENGTH], False
    return entry, True


def get_peak_timing(tag: str) -> tuple[PeakTimingEntry, bool]:
    entry = PEAK_TIMINGS.get(tag)
    if entry is None:
        return PEAK_TIMINGS[DEFAULT_PEAK_TIMING], False
    return entry, True


def get_low_timing(tag: str) -> tuple[LowTimingEntry, bool]:
    entry = LOW_TIMINGS.get(tag)
    if entry is None:
        return LOW_TIMINGS[DEFAULT_LOW_TIMING], False
    return entry, True


def get_condition(tag: str) -> ConditionEntry:
    return CONDITIONS.get(tag, CONDITIONS[DEFAULT_CONDITION])


def peak_message(tag: str) -> str:
    return PEAK_MESSAGES.get(tag, DEFAULT_PEAK_MESSAGE)


def low_message(tag: str) -> str:
    return LOW_MESSAGES.get(tag, DEFAULT_LOW_MESSAGE)


def energy_label(level: float) -> str:
    """Label for an energy level, rounded to the nearest step and clamped to 1–5."""
    idx = int(min(max(level, 1.0), 5.0) + 0.5) - 1
    return ENERGY_LABELS[idx]
