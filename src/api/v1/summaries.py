"""Feedback summary endpoints."""

from __future__ import annotations

import json
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from core.config import Settings, get_settings
from schemas.copilot import EmailSummaryRequest, FeedbackSummary
from services.ai import summaries


router = APIRouter(tags=["summaries"])

logger = logging.getLogger(__name__)

SUMMARY_FAILED_MESSAGE = "Failed to generate summary"


def _summary_failed() -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": SUMMARY_FAILED_MESSAGE})


@router.post("/generate-summary", response_model=FeedbackSummary)
async def generate_review_summary(
    settings: Annotated[Settings, Depends(get_settings)],
) -> FeedbackSummary | JSONResponse:
    """Summarise all product reviews into strengths, weaknesses and actions."""
    try:
        return await summaries.summarize_reviews(settings.COMPANY_NAME)
    except Exception:
        logger.exception("Review summary generation failed")
        return _summary_failed()


@router.post("/generate-email-summary", response_model=FeedbackSummary)
async def generate_email_summary(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> FeedbackSummary | JSONResponse:
    """Summarise customer emails, optionally for one ``productModel``.

    The body is optional; an empty, non-object or unusable body summarises
    every email.
    """
    raw = await request.body()
    try:
        payload = json.loads(raw) if raw.strip() else {}
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError):
        payload = {}
    try:
        body = EmailSummaryRequest.model_validate(
            payload if isinstance(payload, dict) else {}
        )
    except ValidationError:
        logger.warning("Ignoring unusable email summary filter")
        body = EmailSummaryRequest()

    try:
        return await summaries.summarize_emails(
            settings.COMPANY_NAME, product_model=body.product_model
        )
    except Exception:
        logger.exception(
            f"Email summary generation failed (product_model={body.product_model!r})"
        )
        return _summary_failed()
