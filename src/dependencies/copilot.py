"""FastAPI dependencies for the co-pilot routes.

Tests replace these through ``app.dependency_overrides`` instead of patching
module globals, e.g. to inject an orchestrator backed by ``httpx.MockTransport``.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from core.config import Settings, get_settings
from data.catalog import SourceCatalog, get_catalog
from services.ai.gemini_client import GeminiClientConfig, GeminiCompletionClient
from services.ai.orchestrator import DraftOrchestrator


def get_source_catalog() -> SourceCatalog:
    return get_catalog()


def get_draft_orchestrator(
    settings: Annotated[Settings, Depends(get_settings)],
    catalog: Annotated[SourceCatalog, Depends(get_source_catalog)],
) -> DraftOrchestrator:
    """Build the orchestrator for the current configuration."""
    client = GeminiCompletionClient(GeminiClientConfig.from_settings(settings))
    return DraftOrchestrator(
        catalog,
        client,
        max_attempts=settings.MAX_GENERATION_ATTEMPTS,
        fallback_delay_seconds=settings.FALLBACK_DELAY_SECONDS,
        company_name=settings.COMPANY_NAME,
        support_link=settings.SUPPORT_LINK,
    )


SourceCatalogDep = Annotated[SourceCatalog, Depends(get_source_catalog)]
DraftOrchestratorDep = Annotated[DraftOrchestrator, Depends(get_draft_orchestrator)]
