"""Draft generation orchestrator.

One pipeline serves reviews, emails and call follow-ups:

    validate -> look up item -> attempt 1 -> (retry while duplicate)* -> draft
                                     \\-- any error --> fallback

Validation and lookup failures surface as domain errors (400/404) before any
upstream call. Everything that goes wrong after that is absorbed into a
template reply, so a well-formed request for a known item always gets a draft.
"""

from __future__ import annotations

import asyncio
import random
from collections.abc import Mapping
from typing import Any
from uuid import uuid4

from pydantic import ValidationError

from core.error_handler import StructuredLogger, describe_validation_errors
from core.exceptions import DraftRequestValidationError, SourceItemNotFoundError
from data.catalog import SourceCatalog
from models.source_items import SourceItem, SourceKind, Tone
from schemas.copilot import GenerateDraftRequest
from services.ai.exceptions import (
    ConfigurationError,
    DraftGenerationError,
    MalformedResponseError,
    UnexpectedGenerationError,
)
from services.ai.extraction import extract_draft
from services.ai.fallback import compose_fallback
from services.ai.gemini_client import sampling_for
from services.ai.interfaces import CompletionClientProtocol
from services.ai.models import DraftOutcome, DraftResult, GenerationAttempt
from services.ai.prompts import DEFAULT_COMPANY_NAME, DEFAULT_SUPPORT_LINK, build_prompt
from services.ai.regeneration import DEFAULT_MAX_ATTEMPTS, ensure_distinct


logger = StructuredLogger(__name__)

RAW_PAYLOAD_LOG_CHARS = 2000

NOT_FOUND_MESSAGES = {
    SourceKind.REVIEW: "Review not found",
    SourceKind.EMAIL: "Email not found",
    SourceKind.CALL: "Call not found",
}


class DraftOrchestrator:
    """Run the generate/retry/fallback protocol for one request at a time.

    Instances hold no per-request state and can be shared between requests.
    """

    def __init__(
        self,
        catalog: SourceCatalog,
        client: CompletionClientProtocol,
        *,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        fallback_delay_seconds: float = 0.5,
        company_name: str = DEFAULT_COMPANY_NAME,
        support_link: str = DEFAULT_SUPPORT_LINK,
        rng: random.Random | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.catalog = catalog
        self.client = client
        self.max_attempts = max_attempts
        self.fallback_delay_seconds = fallback_delay_seconds
        self.company_name = company_name
        self.support_link = support_link
        self._rng = rng

    @staticmethod
    def _validate(payload: Any) -> GenerateDraftRequest:
        if not isinstance(payload, Mapping):
            raise DraftRequestValidationError("Request body must be a JSON object")
        try:
            return GenerateDraftRequest.model_validate(dict(payload))
        except ValidationError as exc:
            errors = [
                {k: v for k, v in err.items() if k in {"type", "loc", "msg"}}
                for err in exc.errors()
            ]
            raise DraftRequestValidationError(
                describe_validation_errors(errors)
            ) from exc

    def _resolve(self, kind: SourceKind, item_id: str) -> SourceItem:
        item = self.catalog.get(kind, item_id)
        if item is None:
            raise SourceItemNotFoundError(NOT_FOUND_MESSAGES[kind])
        return item

    async def generate(self, kind: SourceKind, payload: Any) -> DraftOutcome:
        """Produce a draft for the item referenced by ``payload``.

        Raises:
            DraftRequestValidationError: Payload is not a valid draft request.
            SourceItemNotFoundError: ``itemId`` does not exist for ``kind``.
        """
        request = self._validate(payload)
        item = self._resolve(kind, request.item_id)
        previous = request.previous_response

        logger.info(
            "Draft requested",
            kind=str(kind),
            item_id=item.id,
            tone=str(request.tone),
            request_id=request.request_id,
            has_previous_response=previous is not None,
            previous_response_length=len(previous) if previous else 0,
        )

        sampling = sampling_for(kind)
        calls_made = 0

        async def run_attempt(attempt_number: int) -> DraftResult:
            nonlocal calls_made
            seed = str(uuid4())
            attempt = GenerationAttempt(
                attempt_number=attempt_number,
                variation_seed=seed,
                prompt_text=build_prompt(
                    item,
                    request.tone,
                    seed,
                    previous,
                    request_id=request.request_id,
                    company_name=self.company_name,
                    support_link=self.support_link,
                    rng=self._rng,
                ),
            )
            try:
                body = await self.client.complete(attempt.prompt_text, sampling)
            except ConfigurationError:
                # refused before any request was sent
                raise
            except Exception:
                calls_made += 1
                raise
            calls_made += 1
            return extract_draft(body)

        try:
            first = await run_attempt(1)
            draft, _ = await ensure_distinct(
                first, previous, 1, run_attempt, self.max_attempts
            )
        except DraftGenerationError as exc:
            self._log_failure(kind, item.id, calls_made, exc)
            outcome = await self._fall_back(kind, item, request.tone, calls_made, exc)
        except Exception as exc:  # noqa: BLE001
            failure = UnexpectedGenerationError(
                f"{exc.__class__.__name__} raised while generating a draft",
                exception_type=exc.__class__.__name__,
            )
            failure.__cause__ = exc
            logger.exception(
                "Unexpected error during draft generation, using fallback",
                **self._failure_fields(kind, item.id, calls_made, failure),
            )
            outcome = await self._fall_back(
                kind, item, request.tone, calls_made, failure
            )
        else:
            outcome = DraftOutcome(draft=draft, source="model", attempts=calls_made)

        logger.info(
            "Fallback draft served" if outcome.used_fallback else "Draft generated",
            kind=str(kind),
            item_id=item.id,
            source=outcome.source,
            attempts=outcome.attempts,
            error_code=outcome.error_code,
            key_concern_count=len(outcome.draft.key_concerns),
        )
        return outcome

    async def _fall_back(
        self,
        kind: SourceKind,
        item: SourceItem,
        tone: Tone,
        attempts: int,
        exc: DraftGenerationError,
    ) -> DraftOutcome:
        if self.fallback_delay_seconds > 0:
            await asyncio.sleep(self.fallback_delay_seconds)
        return DraftOutcome(
            draft=compose_fallback(item.sentiment, tone, kind=kind),
            source="fallback",
            attempts=attempts,
            error_code=exc.error_code,
        )

    @staticmethod
    def _failure_fields(
        kind: SourceKind, item_id: str, attempts: int, exc: DraftGenerationError
    ) -> dict[str, Any]:
        return {
            "kind": str(kind),
            "item_id": item_id,
            "source": "fallback",
            "attempts": attempts,
            "error_code": exc.error_code,
            "reason": exc.message,
        }

    def _log_failure(
        self,
        kind: SourceKind,
        item_id: str,
        attempts: int,
        exc: DraftGenerationError,
    ) -> None:
        fields = self._failure_fields(kind, item_id, attempts, exc)
        if isinstance(exc, ConfigurationError):
            logger.error("Draft generation is not configured, using fallback", **fields)
        elif isinstance(exc, MalformedResponseError):
            raw = exc.raw_payload or ""
            logger.warning(
                "Model returned an unusable payload, using fallback",
                raw_payload=raw[:RAW_PAYLOAD_LOG_CHARS],
                **fields,
            )
        else:
            logger.warning("Model call failed, using fallback", **fields)
