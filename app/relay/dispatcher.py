"""Submission relay — forward quiz submissions to a GitHub repository_dispatch endpoint.

Fire-and-forget from the quiz flow's point of view: ``relay_submission``
never raises. A missing dispatch configuration, a transport error or a
non-2xx response all fall back to local storage; if that fails too the
outcome is ``failed`` and the error is only logged.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

import httpx

from app.config import settings
from app.curve.models import Submission
from app.relay.storage import SubmissionStorage

logger = logging.getLogger(__name__)


class RelayOutcome(str, Enum):
    dispatched = "dispatched"
    stored_locally = "stored_locally"
    failed = "failed"


def mask_email(email: str) -> str:
    local, sep, domain = email.partition("@")
    if not sep:
        return "***"
    return f"{local[:1]}***@{domain}"


def dispatch_configured() -> bool:
    return bool(settings.dispatch_token and settings.dispatch_owner and settings.dispatch_repo)


def dispatch_url() -> str:
    base = settings.dispatch_api_url.rstrip("/")
    return f"{base}/repos/{settings.dispatch_owner}/{settings.dispatch_repo}/dispatches"


def dispatch_payload(submission: Submission) -> dict[str, Any]:
    return {
        "event_type": settings.dispatch_event_type,
        "client_payload": {"submission": submission.model_dump(mode="json", by_alias=True)},
    }


async def dispatch(submission: Submission, client: httpx.AsyncClient) -> bool:
    """POST the dispatch event. True on 2xx; transport errors propagate."""
    response = await client.post(
        dispatch_url(),
        json=dispatch_payload(submission),
        headers={
            "Authorization": f"Bearer {settings.dispatch_token}",
            "Accept": "application/vnd.github+json",
        },
    )
    if response.is_success:
        return True
    logger.warning("Dispatch rejected with status %s: %s", response.status_code, response.text[:200])
    return False


async def _store_locally(submission: Submission, storage: SubmissionStorage) -> RelayOutcome:
    try:
        await storage.save(submission)
    except Exception as e:
        logger.error("Failed to store submission from %s locally: %s", mask_email(submission.email), e)
        return RelayOutcome.failed
    logger.info("Submission from %s stored locally", mask_email(submission.email))
    return RelayOutcome.stored_locally


async def relay_submission(
    submission: Submission,
    storage: SubmissionStorage,
    client: httpx.AsyncClient | None = None,
) -> RelayOutcome:
    """Dispatch a submission, falling back to ``storage`` on any failure."""
    if not dispatch_configured():
        return await _store_locally(submission, storage)

    try:
        if client is not None:
            ok = await dispatch(submission, client)
        else:
            async with httpx.AsyncClient(timeout=settings.dispatch_timeout_s) as own_client:
                ok = await dispatch(submission, own_client)
    except httpx.HTTPError as e:
        logger.warning("Dispatch failed for %s: %s", mask_email(submission.email), e)
        ok = False

    if ok:
        logger.info("Dispatched submission from %s", mask_email(submission.email))
        return RelayOutcome.dispatched
    return await _store_locally(submission, storage)
