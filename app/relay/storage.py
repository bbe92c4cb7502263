"""Local submission storage — the relay's fallback when dispatch fails.

``SubmissionStorage`` is the injected interface (save / load_all). The SQL
implementation keeps answers as a JSON text column so it runs on any
SQLAlchemy async backend.
"""

from __future__ import annotations

import json
from typing import Any, Protocol

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.curve.models import QuizAnswers, Submission

CREATE_TABLE_SQL = (
    "CREATE TABLE IF NOT EXISTS quiz_submissions ("
    "email TEXT NOT NULL, "
    "answers TEXT NOT NULL, "
    "submitted_at TIMESTAMP WITH TIME ZONE NOT NULL"
    ")"
)


class SubmissionStorage(Protocol):
    async def save(self, submission: Submission) -> None: ...

    async def load_all(self) -> list[Submission]: ...


class InMemorySubmissionStorage:
    def __init__(self) -> None:
        self._items: list[Submission] = []

    async def save(self, submission: Submission) -> None:
        self._items.append(submission)

    async def load_all(self) -> list[Submission]:
        return list(self._items)

    def clear(self) -> None:
        self._items.clear()


def _row_to_submission(row: dict[str, Any]) -> Submission:
    raw = row.get("answers") or "{}"
    answers = json.loads(raw) if isinstance(raw, str) else raw
    return Submission(
        email=row["email"],
        answers=QuizAnswers.model_validate(answers),
        timestamp=row["submitted_at"],
    )


class SqlSubmissionStorage:
    """Submissions in the ``quiz_submissions`` table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def ensure_table(self) -> None:
        async with self._session_factory() as session:
            await session.execute(text(CREATE_TABLE_SQL))
            await session.commit()

    async def save(self, submission: Submission) -> None:
        params = {
            "email": submission.email,
            "answers": submission.answers.model_dump_json(by_alias=True),
            "submitted_at": submission.timestamp,
        }
        async with self._session_factory() as session:
            await session.execute(
                text(
                    "INSERT INTO quiz_submissions (email, answers, submitted_at) "
                    "VALUES (:email, :answers, :submitted_at)"
                ),
                params,
            )
            await session.commit()

    async def load_all(self) -> list[Submission]:
        async with self._session_factory() as session:
            result = await session.execute(
                text("SELECT email, answers, submitted_at FROM quiz_submissions ORDER BY submitted_at")
            )
            columns = result.keys()
            return [_row_to_submission(dict(zip(columns, r))) for r in result.fetchall()]
