"""Turn an untrusted Gemini payload into a :class:`DraftResult`.

The model is asked for a bare JSON object but regularly wraps it in markdown
fences, splits it across several parts, or returns something else entirely.
Everything that cannot be turned into a non-empty ``response`` string is
reported as :class:`MalformedResponseError` with the raw text attached.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

from services.ai.exceptions import MalformedResponseError
from services.ai.models import DraftResult


_LEADING_FENCE = re.compile(r"^\s*```[ \t]*(?:json)?[ \t]*\n?", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\n?[ \t]*```\s*$")


def candidate_text(body: Mapping[str, Any]) -> str:
    """Concatenate the text parts of the first candidate in a provider body."""
    try:
        parts = body["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError) as exc:
        raise MalformedResponseError(
            "Gemini response has no candidate content", raw_payload=_dump(body)
        ) from exc

    if not isinstance(parts, list):
        raise MalformedResponseError(
            "Gemini candidate parts are not a list", raw_payload=_dump(body)
        )
    texts = [
        part["text"]
        for part in parts
        if isinstance(part, Mapping) and isinstance(part.get("text"), str)
    ]
    merged = "".join(texts)
    if not merged.strip():
        raise MalformedResponseError(
            "Gemini candidate contains no text", raw_payload=_dump(body)
        )
    return merged


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ```json ... ``` fence, if present."""
    stripped = _LEADING_FENCE.sub("", text, count=1)
    stripped = _TRAILING_FENCE.sub("", stripped, count=1)
    return stripped.strip()


def _key_concerns(value: Any) -> tuple[str, ...]:
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return tuple(value)
    return ()


def extract_draft(raw_payload: str | Mapping[str, Any]) -> DraftResult:
    """Parse a provider body (or the model text itself) into a draft.

    The ``response`` text is returned exactly as the model produced it; only
    the fences around the JSON envelope are removed.
    """
    raw_text = (
        candidate_text(raw_payload)
        if isinstance(raw_payload, Mapping)
        else raw_payload
    )
    if not isinstance(raw_text, str):
        raise MalformedResponseError(
            "Gemini payload is not text", raw_payload=repr(raw_text)
        )

    cleaned = strip_code_fences(raw_text)
    try:
        parsed = json.loads(cleaned)
    except (json.JSONDecodeError, TypeError, RecursionError) as exc:
        raise MalformedResponseError(
            "Gemini payload is not valid JSON", raw_payload=raw_text
        ) from exc

    if not isinstance(parsed, dict):
        raise MalformedResponseError(
            "Gemini payload is not a JSON object", raw_payload=raw_text
        )

    response = parsed.get("response")
    if not isinstance(response, str) or not response.strip():
        raise MalformedResponseError(
            "Gemini payload is missing a non-empty 'response' field",
            raw_payload=raw_text,
        )

    return DraftResult(
        text=response, key_concerns=_key_concerns(parsed.get("keyConcerns"))
    )


def _dump(body: Any) -> str:
    try:
        return json.dumps(body, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(body)
