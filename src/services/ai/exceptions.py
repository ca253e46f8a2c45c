"""Domain exceptions for the draft generation pipeline.

Every failure of the generation provider maps to one of these. The
orchestrator treats all of them the same way (fall back to a template reply)
but logs them differently, so each carries a stable ``error_code`` for log
filtering and analytics tagging.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class DraftGenerationError(Exception):
    """Base class for generation pipeline errors."""

    message: str
    error_code: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.error_code}: {self.message}"


class ConfigurationError(DraftGenerationError):
    """The provider credential is missing; a deployment issue, never retried."""

    def __init__(
        self, message: str = "Generation provider credential is not configured"
    ) -> None:
        super().__init__(message=message, error_code="missing_credentials")


class UpstreamError(DraftGenerationError):
    """Transport failure, timeout or non-2xx answer from the provider."""

    def __init__(
        self,
        message: str = "Generation provider request failed",
        *,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message=message, error_code="upstream_failed")
        self.status_code = status_code


class MalformedResponseError(DraftGenerationError):
    """The provider answered, but not with a usable draft payload."""

    def __init__(
        self,
        message: str = "Generation provider returned an unusable payload",
        *,
        raw_payload: str | None = None,
    ) -> None:
        super().__init__(message=message, error_code="malformed_response")
        self.raw_payload = raw_payload


class UnexpectedGenerationError(DraftGenerationError):
    """Any other failure after the source item was resolved.

    Wraps the original exception (as ``__cause__``) so a bug in prompt
    building or parsing still ends in a template reply instead of a 500.
    """

    def __init__(
        self,
        message: str = "Draft generation failed unexpectedly",
        *,
        exception_type: str | None = None,
    ) -> None:
        super().__init__(message=message, error_code="generation_failed")
        self.exception_type = exception_type
