"""Tests for the curve contract models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from app.curve.models import Fuzziness, QuizAnswers, Submission


class TestQuizAnswers:
    def test_defaults_are_empty_strings(self):
        answers = QuizAnswers()
        assert answers.cycle_length == ""
        assert answers.condition == ""

    def test_accepts_camel_case(self):
        answers = QuizAnswers.model_validate({"cycleLength": "unknown", "peakEnergy": "ovulation"})
        assert answers.cycle_length == "unknown"
        assert answers.peak_energy == "ovulation"

    def test_ignores_extra_keys(self):
        answers = QuizAnswers.model_validate({"condition": "pcos", "email": "a@b.c"})
        assert answers.condition == "pcos"

    def test_frozen(self):
        answers = QuizAnswers(condition="none")
        with pytest.raises(ValidationError):
            answers.condition = "pcos"


class TestSerialization:
    def test_fuzziness_camel_case(self):
        data = Fuzziness(x_axis=True).model_dump(by_alias=True)
        assert data == {
            "xAxis": True,
            "periodEnd": False,
            "peak": False,
            "dip": False,
            "overall": False,
        }

    def test_submission_uses_quiz_results_key(self):
        sub = Submission(email="a@b.c", answers=QuizAnswers(condition="none"))
        data = sub.model_dump(mode="json", by_alias=True)
        assert data["quizResults"]["condition"] == "none"
        assert data["email"] == "a@b.c"

    def test_submission_timestamp_utc(self):
        sub = Submission(email="a@b.c")
        assert sub.timestamp.tzinfo is not None

    def test_submission_from_client_payload(self):
        sub = Submission.model_validate(
            {
                "email": "a@b.c",
                "quizResults": {"cycleLength": "more32days"},
                "timestamp": "2026-02-15T12:00:00Z",
            }
        )
        assert sub.answers.cycle_length == "more32days"
        assert sub.timestamp == datetime(2026, 2, 15, 12, 0, tzinfo=timezone.utc)
