"""Value objects passed between the draft generation stages.

* DraftResult       - canonical output of the pipeline, from the model or the
  fallback composer alike.
* GenerationAttempt - one upstream attempt; created fresh for every retry.
* DraftOutcome      - what the orchestrator returns: the draft plus which path
  produced it. Only the draft is sent to the caller; the rest feeds logging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


DraftSource = Literal["model", "fallback"]


@dataclass(frozen=True, slots=True)
class DraftResult:
    text: str
    key_concerns: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class GenerationAttempt:
    attempt_number: int
    variation_seed: str
    prompt_text: str


@dataclass(slots=True)
class DraftOutcome:
    """Structured result of a draft request after generation or fallback.

    ``attempts`` counts upstream calls actually sent; it is 0 when the client
    refused to call (no credential) before any request went out.
    """

    draft: DraftResult
    source: DraftSource
    attempts: int
    error_code: str | None = None

    @property
    def used_fallback(self) -> bool:
        return self.source == "fallback"
