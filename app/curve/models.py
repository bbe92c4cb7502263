"""Curve contract — Pydantic v2 models.

Inputs and outputs of the energy-curve core. Every model is frozen: the
chart bundle is handed to renderers that must not mutate it. JSON uses the
quiz client's camelCase field names.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Frozen(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class QuizAnswers(_Frozen):
    """Categorical quiz answers. Missing fields are empty strings, never None."""

    cycle_length: str = ""
    period_length: str = ""
    peak_energy: str = ""
    peak_energy_intensity: str = ""
    lowest_energy: str = ""
    low_energy_intensity: str = ""
    condition: str = ""


class CurvePoint(_Frozen):
    day: int
    energy: float  # 1–5 scale; integral for resampled points


class BezierSamplePoint(_Frozen):
    x: float
    y: float


class Fuzziness(_Frozen):
    x_axis: bool = False
    period_end: bool = False
    peak: bool = False
    dip: bool = False
    overall: bool = False


class Phases(_Frozen):
    follicular: int
    ovulation: int
    luteal: int


class ResolvedParameters(_Frozen):
    cycle_length: int = 28
    period_end_day: int
    peak_day: int
    lowest_day: int
    control_points: tuple[CurvePoint, CurvePoint]
    fuzziness: Fuzziness = Field(default_factory=Fuzziness)
    display_cycle_length_label: str
    condition_message: str | None = None
    reported_peak_level: float = 4.25
    reported_low_level: float = 1.75


class ChartData(_Frozen):
    """Full resolved bundle handed to rendering collaborators."""

    points: list[CurvePoint]
    bezier_points: list[BezierSamplePoint]
    cycle_length: int
    peak_day: int
    lowest_day: int
    period_end_day: int
    control_points: list[CurvePoint]
    peak_message: str
    low_message: str
    phases: Phases
    fuzziness: Fuzziness
    display_cycle_length_label: str
    condition_message: str | None = None
    energy_labels: list[str] = Field(default_factory=list)
    reported_peak_level: float = 4.25
    reported_low_level: float = 1.75

    def energy_on(self, day: int) -> float:
        """Energy level for a 1-based cycle day."""
        return self.points[day - 1].energy


class Submission(_Frozen):
    email: str
    answers: QuizAnswers = Field(default_factory=QuizAnswers, alias="quizResults")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
