"""Shared fixtures for the test suite."""

from __future__ import annotations

from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from app.config import settings
from app.curve.models import QuizAnswers
from app.curve.router import get_storage
from app.main import app
from app.relay.storage import InMemorySubmissionStorage


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def no_dispatch(monkeypatch):
    """Relay with no dispatch target configured."""
    monkeypatch.setattr(settings, "dispatch_token", None)
    monkeypatch.setattr(settings, "dispatch_owner", None)
    monkeypatch.setattr(settings, "dispatch_repo", None)


@pytest.fixture()
def with_dispatch(monkeypatch):
    monkeypatch.setattr(settings, "dispatch_api_url", "https://api.github.test")
    monkeypatch.setattr(settings, "dispatch_token", "t0ken")
    monkeypatch.setattr(settings, "dispatch_owner", "octo")
    monkeypatch.setattr(settings, "dispatch_repo", "submissions")


@pytest.fixture()
def memory_storage():
    return InMemorySubmissionStorage()


@pytest.fixture()
def override_storage(memory_storage, no_dispatch):
    """Route submissions to a fresh in-memory store, no network."""
    app.dependency_overrides[get_storage] = lambda: memory_storage
    yield memory_storage
    app.dependency_overrides.clear()


@pytest.fixture()
async def client(override_storage):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def make_answers(**overrides: Any) -> QuizAnswers:
    """Helper to build a complete answer set (28–32 day cycle, peak after period)."""
    defaults: dict[str, Any] = dict(
        cycle_length="28to32days",
        period_length="3-5days",
        peak_energy="afterPeriod",
        peak_energy_intensity="4.5",
        lowest_energy="prePeriod",
        low_energy_intensity="2",
        condition="none",
    )
    defaults.update(overrides)
    return QuizAnswers(**defaults)
