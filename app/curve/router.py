"""Quiz HTTP router — questions, chart generation, submissions."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from pydantic import BaseModel

from app.auth import verify_api_key
from app.config import settings
from app.curve.builder import generate_chart_data
from app.curve.models import ChartData, QuizAnswers, Submission
from app.curve.quiz import get_question, list_questions
from app.db import async_session
from app.relay.dispatcher import relay_submission
from app.relay.storage import InMemorySubmissionStorage, SqlSubmissionStorage, SubmissionStorage

router = APIRouter(prefix="/quiz", tags=["quiz"])

memory_storage = InMemorySubmissionStorage()
sql_storage = SqlSubmissionStorage(async_session)


def get_storage() -> SubmissionStorage:
    if settings.submission_storage == "sql":
        return sql_storage
    return memory_storage


class SubmissionAccepted(BaseModel):
    accepted: bool = True
    timestamp: datetime


def _question_dict(q) -> dict:
    return {
        "id": q.id,
        "field": q.field,
        "question": q.question,
        "options": [{"id": o.id, "text": o.text, "value": o.value} for o in q.options],
    }


# ---------------------------------------------------------------------------
# /quiz/questions
# ---------------------------------------------------------------------------


@router.get("/questions")
async def questions_list() -> list[dict]:
    return [_question_dict(q) for q in list_questions()]


@router.get("/questions/{question_id}")
async def question_detail(question_id: int) -> dict:
    question = get_question(question_id)
    if question is None:
        raise HTTPException(status_code=404, detail=f"Unknown question: {question_id}")
    return _question_dict(question)


# ---------------------------------------------------------------------------
# /quiz/chart
# ---------------------------------------------------------------------------


@router.post("/chart", response_model=ChartData, response_model_by_alias=True)
async def chart(answers: QuizAnswers) -> ChartData:
    return generate_chart_data(answers)


# ---------------------------------------------------------------------------
# /quiz/submissions
# ---------------------------------------------------------------------------


@router.post("/submissions", status_code=202, response_model=SubmissionAccepted)
async def submit(
    submission: Submission,
    background_tasks: BackgroundTasks,
    storage: SubmissionStorage = Depends(get_storage),
) -> SubmissionAccepted:
    background_tasks.add_task(relay_submission, submission, storage)
    return SubmissionAccepted(timestamp=submission.timestamp)


@router.get("/submissions", response_model=list[Submission], response_model_by_alias=True)
async def submissions_list(
    storage: SubmissionStorage = Depends(get_storage),
    _: str = Depends(verify_api_key),
) -> list[Submission]:
    return await storage.load_all()
