"""Init file for AI services."""

from .exceptions import (
    ConfigurationError,
    DraftGenerationError,
    MalformedResponseError,
    UnexpectedGenerationError,
    UpstreamError,
)
from .models import DraftOutcome, DraftResult, GenerationAttempt


__all__ = [
    "ConfigurationError",
    "DraftGenerationError",
    "DraftOutcome",
    "DraftResult",
    "GenerationAttempt",
    "MalformedResponseError",
    "UnexpectedGenerationError",
    "UpstreamError",
]
