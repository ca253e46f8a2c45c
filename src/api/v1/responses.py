"""Reply drafting endpoints (reviews, customer emails, call follow-ups).

All three share one request shape and one pipeline; they differ only in which
dataset ``itemId`` is resolved against. The body is read as raw JSON and
validated by the orchestrator, so a malformed request never reaches the model.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

from dependencies.copilot import DraftOrchestratorDep
from models.source_items import SourceKind
from schemas.copilot import DraftResponse, GenerateDraftRequest


router = APIRouter(tags=["drafts"])

_REQUEST_BODY_DOC: dict[str, Any] = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {
                "schema": GenerateDraftRequest.model_json_schema(by_alias=True)
            }
        },
    }
}


async def _generate(
    kind: SourceKind, request: Request, orchestrator: DraftOrchestratorDep
) -> DraftResponse:
    # An unparseable body raises here and is reported as a 500 by the
    # global exception handler.
    payload = await request.json()
    outcome = await orchestrator.generate(kind, payload)
    return DraftResponse.from_draft(outcome.draft)


@router.post(
    "/generate-response",
    response_model=DraftResponse,
    openapi_extra=_REQUEST_BODY_DOC,
)
async def generate_review_response(
    request: Request, orchestrator: DraftOrchestratorDep
) -> DraftResponse:
    """Draft a public reply to a product review."""
    return await _generate(SourceKind.REVIEW, request, orchestrator)


@router.post(
    "/generate-email-response",
    response_model=DraftResponse,
    openapi_extra=_REQUEST_BODY_DOC,
)
async def generate_email_response(
    request: Request, orchestrator: DraftOrchestratorDep
) -> DraftResponse:
    """Draft a reply to a customer email."""
    return await _generate(SourceKind.EMAIL, request, orchestrator)


@router.post(
    "/generate-call-followup",
    response_model=DraftResponse,
    openapi_extra=_REQUEST_BODY_DOC,
)
async def generate_call_followup(
    request: Request, orchestrator: DraftOrchestratorDep
) -> DraftResponse:
    """Draft a follow-up message after a phone call."""
    return await _generate(SourceKind.CALL, request, orchestrator)
