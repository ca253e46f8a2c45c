"""Guard against the model echoing the draft the user asked to replace."""

from __future__ import annotations

import logging

from services.ai.interfaces import AttemptFn
from services.ai.models import DraftResult


logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 3


def _normalize(text: str) -> str:
    return text.strip().lower()


def is_duplicate_draft(text: str, previous: str | None) -> bool:
    """Case- and surrounding-whitespace-insensitive equality.

    Rewordings, even a single changed word, count as distinct.
    """
    if not previous or not previous.strip():
        return False
    return _normalize(text) == _normalize(previous)


async def ensure_distinct(
    draft: DraftResult,
    previous_draft: str | None,
    attempt: int,
    retry_fn: AttemptFn,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> tuple[DraftResult, int]:
    """Retry while ``draft`` repeats ``previous_draft``, up to ``max_attempts``.

    Args:
        draft: Result of attempt number ``attempt``.
        previous_draft: Draft being regenerated; falsy skips the check.
        attempt: Number of upstream attempts already made.
        retry_fn: Produces a fresh draft for the given attempt number.
        max_attempts: Total attempt budget, including the first one.

    Returns:
        The accepted draft and the number of attempts consumed. When the budget
        runs out the last draft is accepted even if it is still a duplicate.

    Errors raised by ``retry_fn`` propagate unchanged.
    """
    while is_duplicate_draft(draft.text, previous_draft) and attempt < max_attempts:
        logger.warning(
            f"Draft attempt {attempt} repeated the previous draft, "
            "retrying with a new variation seed"
        )
        attempt += 1
        draft = await retry_fn(attempt)

    if is_duplicate_draft(draft.text, previous_draft):
        logger.info(
            f"Accepting duplicate draft after exhausting {attempt} attempts"
        )
    return draft, attempt
