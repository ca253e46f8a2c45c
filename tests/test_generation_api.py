"""End-to-end tests for the reply drafting endpoints."""

from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient
from httpx import AsyncClient

from fixtures.gemini import FakeGemini, draft_body, gemini_body
from models.source_items import SourceKind
from services.ai.fallback import FALLBACK_TEMPLATES


LONG_REPLY = " ".join(["We are very sorry about the cracked screen."] * 15)

ENDPOINTS = {
    SourceKind.REVIEW: ("/api/v1/generate-response", "2"),
    SourceKind.EMAIL: ("/api/v1/generate-email-response", "email-1"),
    SourceKind.CALL: ("/api/v1/generate-call-followup", "call-1"),
}


class TestScenarios:
    def test_scenario_a_model_draft_first_try(
        self, client: TestClient, fake_gemini: FakeGemini
    ) -> None:
        fake_gemini.outcomes.append(draft_body(LONG_REPLY, ["cracked screen"]))

        response = client.post(
            "/api/v1/generate-response", json={"itemId": "2", "tone": "Apologetic"}
        )

        assert response.status_code == 200
        assert response.json() == {
            "text": LONG_REPLY,
            "keyConcerns": ["cracked screen"],
        }
        assert fake_gemini.calls == 1

    def test_scenario_b_unreachable_upstream_falls_back(
        self, client: TestClient, fake_gemini: FakeGemini
    ) -> None:
        fake_gemini.outcomes.append(httpx.ConnectError("network down"))

        response = client.post(
            "/api/v1/generate-response", json={"itemId": "2", "tone": "Apologetic"}
        )

        assert response.status_code == 200
        body = response.json()
        assert FALLBACK_TEMPLATES[SourceKind.REVIEW].apology in body["text"]
        assert body["keyConcerns"] == []
        assert fake_gemini.calls == 1

    def test_scenario_c_regenerate_retries_once(
        self, client: TestClient, fake_gemini: FakeGemini
    ) -> None:
        fake_gemini.outcomes.extend(
            [
                draft_body("Thanks a lot!"),
                draft_body("Thanks a lot!"),
                draft_body("We truly appreciate it!"),
            ]
        )

        first = client.post(
            "/api/v1/generate-response", json={"itemId": "1", "tone": "Friendly"}
        )
        assert first.json()["text"] == "Thanks a lot!"
        assert fake_gemini.calls == 1

        regenerated = client.post(
            "/api/v1/generate-response",
            json={
                "itemId": "1",
                "tone": "Friendly",
                "requestId": "regen-1",
                "previousResponse": first.json()["text"],
            },
        )

        assert regenerated.status_code == 200
        assert regenerated.json()["text"] == "We truly appreciate it!"
        # one call for the first draft, two for the regeneration
        assert fake_gemini.calls == 3


class TestStatusMapping:
    @pytest.mark.parametrize("kind", list(ENDPOINTS))
    @pytest.mark.parametrize(
        "payload",
        [
            {"tone": "Friendly"},
            {"itemId": "x"},
            {"itemId": "x", "tone": "Sarcastic"},
            {"itemId": "x", "tone": "Friendly", "unexpected": True},
            [],
        ],
    )
    def test_bad_requests_are_400_without_upstream_calls(
        self, client: TestClient, fake_gemini: FakeGemini, kind, payload
    ) -> None:
        fake_gemini.outcomes.append(draft_body("never"))
        path, _ = ENDPOINTS[kind]

        response = client.post(path, json=payload)

        assert response.status_code == 400
        assert isinstance(response.json()["error"], str)
        assert fake_gemini.calls == 0

    @pytest.mark.parametrize(
        ("path", "message"),
        [
            ("/api/v1/generate-response", "Review not found"),
            ("/api/v1/generate-email-response", "Email not found"),
            ("/api/v1/generate-call-followup", "Call not found"),
        ],
    )
    def test_unknown_item_is_404(
        self, client: TestClient, fake_gemini: FakeGemini, path: str, message: str
    ) -> None:
        response = client.post(path, json={"itemId": "nope", "tone": "Formal"})

        assert response.status_code == 404
        assert response.json()["error"] == message
        assert fake_gemini.calls == 0

    def test_unparseable_json_is_500(
        self, client: TestClient, fake_gemini: FakeGemini
    ) -> None:
        response = client.post(
            "/api/v1/generate-response",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 500
        assert response.json()["error"] == "Internal server error"
        assert "X-Correlation-ID" in response.headers
        assert fake_gemini.calls == 0

    @pytest.mark.parametrize("kind", list(ENDPOINTS))
    def test_malformed_upstream_payload_is_still_200(
        self, client: TestClient, fake_gemini: FakeGemini, kind
    ) -> None:
        fake_gemini.outcomes.append(gemini_body('```json\n{"text": "wrong key"}```'))
        path, item_id = ENDPOINTS[kind]

        response = client.post(path, json={"itemId": item_id, "tone": "Formal"})

        assert response.status_code == 200
        assert response.json()["text"].endswith("Kind regards, Customer Care Team.")

    def test_upstream_http_error_is_still_200(
        self, client: TestClient, fake_gemini: FakeGemini
    ) -> None:
        fake_gemini.outcomes.append(httpx.Response(429, text="quota"))
        response = client.post(
            "/api/v1/generate-email-response",
            json={"itemId": "email-1", "tone": "Friendly"},
        )
        assert response.status_code == 200
        assert response.json()["text"].startswith("Thanks for reaching out.")

    @pytest.mark.parametrize(
        "outcome",
        [
            gemini_body("[" * 100_000 + "]" * 100_000),
            RuntimeError("transport bug"),
        ],
    )
    def test_unexpected_generation_failure_is_still_200(
        self, client: TestClient, fake_gemini: FakeGemini, outcome
    ) -> None:
        fake_gemini.outcomes.append(outcome)
        response = client.post(
            "/api/v1/generate-response",
            json={"itemId": "2", "tone": "Apologetic"},
        )
        assert response.status_code == 200
        assert response.json()["keyConcerns"] == []
        assert fake_gemini.calls == 1


class TestBoundedRetry:
    def test_three_calls_at_most(
        self, client: TestClient, fake_gemini: FakeGemini
    ) -> None:
        fake_gemini.outcomes.append(draft_body("Same every time"))

        response = client.post(
            "/api/v1/generate-call-followup",
            json={
                "itemId": "call-1",
                "tone": "Apologetic",
                "previousResponse": "same every time",
            },
        )

        assert response.status_code == 200
        assert response.json()["text"] == "Same every time"
        assert fake_gemini.calls == 3


def test_correlation_id_is_echoed(client: TestClient, fake_gemini: FakeGemini) -> None:
    fake_gemini.outcomes.append(draft_body("Hi"))
    response = client.post(
        "/api/v1/generate-response",
        json={"itemId": "1", "tone": "Friendly"},
        headers={"X-Correlation-ID": "corr-123"},
    )
    assert response.headers["X-Correlation-ID"] == "corr-123"


@pytest.mark.asyncio
async def test_async_client_round_trip(
    async_client: AsyncClient, fake_gemini: FakeGemini
) -> None:
    fake_gemini.outcomes.append(draft_body("Async hello", ["speed"]))

    response = await async_client.post(
        "/api/v1/generate-email-response",
        json={"itemId": "email-1", "tone": "Neutral/Professional"},
    )

    assert response.status_code == 200
    assert response.json() == {"text": "Async hello", "keyConcerns": ["speed"]}
    assert fake_gemini.calls == 1
