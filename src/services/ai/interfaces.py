"""Service interfaces for draft generation.

The orchestrator depends on these protocols rather than on concrete classes so
tests can inject doubles without patching module-level symbols.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from services.ai.gemini_client import SamplingConfig
from services.ai.models import DraftResult


class CompletionClientProtocol(Protocol):
    """Protocol for a single-shot text generation call."""

    async def complete(
        self, prompt_text: str, sampling: SamplingConfig
    ) -> dict[str, Any]:
        """Send one prompt upstream and return the decoded provider body."""
        ...


# Receives the 1-based attempt number and produces a fresh draft for it.
AttemptFn = Callable[[int], Awaitable[DraftResult]]
