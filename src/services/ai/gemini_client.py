"""Thin async client for the Gemini ``generateContent`` endpoint.

One call to :meth:`GeminiCompletionClient.complete` is exactly one HTTP
request; retries belong to the regeneration guard layered on top. Transport
problems surface as :class:`UpstreamError`, a non-JSON success body as
:class:`MalformedResponseError`, and a missing credential as
:class:`ConfigurationError` before any request is made.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from core.config import Settings, get_settings
from models.source_items import SourceKind
from services.ai.exceptions import (
    ConfigurationError,
    MalformedResponseError,
    UpstreamError,
)


logger = logging.getLogger(__name__)

MIN_TEMPERATURE = 0.3
MAX_TEMPERATURE = 1.3
ERROR_BODY_PREVIEW_CHARS = 500


@dataclass(frozen=True, slots=True)
class SamplingConfig:
    """Sampling parameters sent as ``generationConfig``."""

    temperature: float
    top_k: int
    top_p: float
    response_mime_type: str | None = None

    def __post_init__(self) -> None:
        if not MIN_TEMPERATURE <= self.temperature <= MAX_TEMPERATURE:
            raise ValueError(
                f"temperature must be between {MIN_TEMPERATURE} and "
                f"{MAX_TEMPERATURE}, got {self.temperature}"
            )
        if self.top_k < 1:
            raise ValueError("top_k must be positive")
        if not 0 < self.top_p <= 1:
            raise ValueError("top_p must be in (0, 1]")

    def as_generation_config(self) -> dict[str, Any]:
        config: dict[str, Any] = {
            "temperature": self.temperature,
            "topK": self.top_k,
            "topP": self.top_p,
        }
        if self.response_mime_type:
            config["responseMimeType"] = self.response_mime_type
        return config


# Reviews favour varied, creative prose; emails and call follow-ups stay close
# to the facts of the conversation.
SAMPLING_PRESETS: dict[SourceKind, SamplingConfig] = {
    SourceKind.REVIEW: SamplingConfig(
        temperature=1.3, top_k=64, top_p=0.95, response_mime_type="application/json"
    ),
    SourceKind.EMAIL: SamplingConfig(temperature=0.3, top_k=40, top_p=0.9),
    SourceKind.CALL: SamplingConfig(temperature=0.3, top_k=40, top_p=0.9),
}


def sampling_for(kind: SourceKind) -> SamplingConfig:
    return SAMPLING_PRESETS[kind]


@dataclass(frozen=True, slots=True)
class GeminiClientConfig:
    api_key: str | None
    base_url: str
    model: str
    timeout_seconds: float

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> GeminiClientConfig:
        settings = settings or get_settings()
        return cls(
            api_key=settings.GEMINI_API_KEY,
            base_url=settings.GEMINI_API_BASE_URL,
            model=settings.RESPONSE_MODEL,
            timeout_seconds=settings.LLM_TIMEOUT_SECONDS,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/v1beta/models/{self.model}:generateContent"


class GeminiCompletionClient:
    """Issue single ``generateContent`` requests.

    A fresh ``httpx.AsyncClient`` is opened per call so no connection state is
    shared between requests. ``transport`` lets tests plug in an
    ``httpx.MockTransport``.
    """

    def __init__(
        self,
        config: GeminiClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._transport = transport

    def _request_body(
        self, prompt_text: str, sampling: SamplingConfig
    ) -> dict[str, Any]:
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt_text}]}],
            "generationConfig": sampling.as_generation_config(),
        }

    async def complete(
        self, prompt_text: str, sampling: SamplingConfig
    ) -> dict[str, Any]:
        """Send one prompt and return the decoded provider response body.

        Raises:
            ConfigurationError: No API key configured (no request is made).
            UpstreamError: Timeout, transport failure or non-2xx status.
            MalformedResponseError: 2xx response whose body is not a JSON object.
        """
        if not self.config.api_key:
            raise ConfigurationError("GEMINI_API_KEY is not configured")

        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout_seconds, transport=self._transport
            ) as client:
                response = await client.post(
                    self.config.endpoint,
                    params={"key": self.config.api_key},
                    headers={"Cache-Control": "no-store"},
                    json=self._request_body(prompt_text, sampling),
                )
        except httpx.TimeoutException as exc:
            raise UpstreamError(
                f"Gemini request timed out after {self.config.timeout_seconds}s"
            ) from exc
        except httpx.HTTPError as exc:
            raise UpstreamError(
                f"Gemini request failed: {exc.__class__.__name__}"
            ) from exc

        if not response.is_success:
            preview = response.text[:ERROR_BODY_PREVIEW_CHARS]
            raise UpstreamError(
                f"Gemini API returned HTTP {response.status_code}: {preview}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except (ValueError, RecursionError) as exc:
            raise MalformedResponseError(
                "Gemini API returned a non-JSON body", raw_payload=response.text
            ) from exc
        if not isinstance(body, dict):
            raise MalformedResponseError(
                "Gemini API returned a non-object body", raw_payload=response.text
            )

        logger.debug(f"Gemini call succeeded with HTTP {response.status_code}")
        return body
