import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from app.curve.router import router as quiz_router
from app.curve.router import sql_storage

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.submission_storage == "sql":
        try:
            await sql_storage.ensure_table()
        except (SQLAlchemyError, OSError) as e:
            logger.warning("Submission table unavailable, local saves will fail: %s", e)
    yield


app = FastAPI(title="CycleEnergy", version="0.1.0", lifespan=lifespan)
app.include_router(quiz_router)


@app.get("/")
async def root() -> dict:
    return {
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "quiz": {
            "questions": "/quiz/questions",
            "questions_detail": "/quiz/questions/{id}",
            "chart": "/quiz/chart",
            "submissions": "/quiz/submissions",
        },
    }


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
