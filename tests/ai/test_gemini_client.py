"""Tests for the Gemini completion client."""

from __future__ import annotations

import httpx
import pytest

from fixtures.gemini import TEST_API_KEY, FakeGemini, draft_body, make_client
from models.source_items import SourceKind
from services.ai.exceptions import (
    ConfigurationError,
    MalformedResponseError,
    UpstreamError,
)
from services.ai.gemini_client import (
    SAMPLING_PRESETS,
    GeminiClientConfig,
    SamplingConfig,
    sampling_for,
)


REVIEW_SAMPLING = sampling_for(SourceKind.REVIEW)


class TestSamplingConfig:
    @pytest.mark.parametrize("temperature", [0.0, 0.29, 1.31, 2.0])
    def test_temperature_out_of_range_rejected(self, temperature: float) -> None:
        with pytest.raises(ValueError, match="temperature"):
            SamplingConfig(temperature=temperature, top_k=40, top_p=0.9)

    def test_generation_config_keys(self) -> None:
        assert REVIEW_SAMPLING.as_generation_config() == {
            "temperature": 1.3,
            "topK": 64,
            "topP": 0.95,
            "responseMimeType": "application/json",
        }
        assert sampling_for(SourceKind.EMAIL).as_generation_config() == {
            "temperature": 0.3,
            "topK": 40,
            "topP": 0.9,
        }

    def test_every_kind_has_a_preset(self) -> None:
        assert set(SAMPLING_PRESETS) == set(SourceKind)


def test_endpoint_from_config() -> None:
    config = GeminiClientConfig(
        api_key="k", base_url="https://example.test/", model="m", timeout_seconds=1
    )
    assert config.endpoint == "https://example.test/v1beta/models/m:generateContent"


@pytest.mark.asyncio
class TestComplete:
    async def test_sends_single_request_with_expected_shape(self) -> None:
        fake = FakeGemini(draft_body("Hello"))
        body = await make_client(fake).complete("the prompt", REVIEW_SAMPLING)

        assert body == draft_body("Hello")
        assert fake.calls == 1
        request = fake.requests[0]
        assert request.method == "POST"
        assert request.url.path == "/v1beta/models/test-model:generateContent"
        assert request.url.params["key"] == TEST_API_KEY
        assert request.headers["Cache-Control"] == "no-store"
        assert fake.request_json() == {
            "contents": [{"role": "user", "parts": [{"text": "the prompt"}]}],
            "generationConfig": REVIEW_SAMPLING.as_generation_config(),
        }

    @pytest.mark.parametrize("api_key", [None, ""])
    async def test_missing_key_fails_before_io(self, api_key: str | None) -> None:
        fake = FakeGemini(draft_body("never sent"))
        with pytest.raises(ConfigurationError) as exc_info:
            await make_client(fake, api_key=api_key).complete("p", REVIEW_SAMPLING)

        assert exc_info.value.error_code == "missing_credentials"
        assert fake.calls == 0

    async def test_non_2xx_is_upstream_error(self) -> None:
        fake = FakeGemini(httpx.Response(503, text="overloaded"))
        with pytest.raises(UpstreamError) as exc_info:
            await make_client(fake).complete("p", REVIEW_SAMPLING)

        assert exc_info.value.status_code == 503
        assert "overloaded" in exc_info.value.message
        assert fake.calls == 1

    async def test_transport_failure_is_upstream_error(self) -> None:
        fake = FakeGemini(httpx.ConnectError("connection refused"))
        with pytest.raises(UpstreamError) as exc_info:
            await make_client(fake).complete("p", REVIEW_SAMPLING)
        assert exc_info.value.status_code is None

    async def test_timeout_is_upstream_error(self) -> None:
        fake = FakeGemini(httpx.ReadTimeout("too slow"))
        with pytest.raises(UpstreamError, match="timed out"):
            await make_client(fake, timeout=0.5).complete("p", REVIEW_SAMPLING)

    async def test_error_message_never_contains_key(self) -> None:
        fake = FakeGemini(httpx.ConnectError("connection refused"))
        with pytest.raises(UpstreamError) as exc_info:
            await make_client(fake).complete("p", REVIEW_SAMPLING)
        assert TEST_API_KEY not in str(exc_info.value)

    async def test_non_json_success_body_is_malformed(self) -> None:
        fake = FakeGemini(httpx.Response(200, text="<html>oops</html>"))
        with pytest.raises(MalformedResponseError) as exc_info:
            await make_client(fake).complete("p", REVIEW_SAMPLING)
        assert exc_info.value.raw_payload == "<html>oops</html>"

    async def test_json_array_body_is_malformed(self) -> None:
        fake = FakeGemini(httpx.Response(200, json=[1, 2]))
        with pytest.raises(MalformedResponseError):
            await make_client(fake).complete("p", REVIEW_SAMPLING)

    async def test_deeply_nested_body_is_malformed(self) -> None:
        nested = "[" * 100_000 + "]" * 100_000
        fake = FakeGemini(httpx.Response(200, text=nested))
        with pytest.raises(MalformedResponseError):
            await make_client(fake).complete("p", REVIEW_SAMPLING)
