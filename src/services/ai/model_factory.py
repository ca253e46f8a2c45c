"""pydantic-ai model construction for agent-based features.

Reply drafting talks to Gemini directly (see ``gemini_client``) because it
needs per-attempt control over sampling and the raw payload. Batch summaries
go through a pydantic-ai ``Agent``; this module is where that agent's model
comes from.

Usage:
    from services.ai.model_factory import get_text_model

    model = get_text_model()  # Returns pydantic-ai Model
"""

from __future__ import annotations

import logging
from typing import cast

from pydantic_ai.models import Model
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.providers.google import GoogleProvider

from core.config import get_settings
from services.ai.exceptions import ConfigurationError


logger = logging.getLogger(__name__)


def _create_gemini_model(model_name: str) -> Model:
    """Create a Google Gemini model with the specified model name."""
    settings = get_settings()
    provider = GoogleProvider(api_key=settings.GEMINI_API_KEY)
    return cast(Model, GoogleModel(model_name, provider=provider))


def get_text_model() -> Model:
    """Get the text model used for feedback summaries.

    Returns:
        A pydantic-ai Model backed by Gemini.

    Raises:
        ConfigurationError: If ``GEMINI_API_KEY`` is not configured.
    """
    settings = get_settings()
    if not settings.GEMINI_API_KEY:
        logger.warning("Gemini API key not configured")
        raise ConfigurationError("GEMINI_API_KEY is not configured")

    logger.info(f"Using Gemini text model: {settings.SUMMARY_MODEL}")
    return _create_gemini_model(settings.SUMMARY_MODEL)
