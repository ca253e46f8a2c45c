"""Focused unit tests for global exception handling behaviors.

These tests exercise the public contract via a FastAPI test app using the
installed exception handler and ExceptionNormalizationMiddleware.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI, HTTPException, status
from fastapi.exceptions import RequestValidationError
from fastapi.testclient import TestClient
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.error_handler import (
    ExceptionNormalizationMiddleware,
    describe_validation_errors,
    global_exception_handler,
)
from core.exceptions import (
    DomainError,
    DraftRequestValidationError,
    SourceItemNotFoundError,
)
from core.middleware import CorrelationIdMiddleware


class Item(BaseModel):
    name: str = Field(min_length=3)
    qty: int = Field(ge=1)


@pytest.fixture
def build_test_app(monkeypatch):
    def _build(env: str) -> TestClient:
        monkeypatch.setenv("ENVIRONMENT", env)

        app = FastAPI()
        app.add_middleware(ExceptionNormalizationMiddleware)
        app.add_middleware(CorrelationIdMiddleware)
        app.add_exception_handler(Exception, global_exception_handler)
        app.add_exception_handler(StarletteHTTPException, global_exception_handler)
        app.add_exception_handler(RequestValidationError, global_exception_handler)
        app.add_exception_handler(DomainError, global_exception_handler)

        @app.post("/items")
        async def create_item(item: Item):  # pragma: no cover - executed via client
            return {"ok": True, "item": item.model_dump()}

        @app.get("/domain-invalid")
        async def domain_invalid():
            raise DraftRequestValidationError("Missing required field(s): tone")

        @app.get("/domain-missing")
        async def domain_missing():
            raise SourceItemNotFoundError("Review not found")

        @app.get("/boom")
        async def boom():
            raise RuntimeError("Exploded with secret=should_not_leak")

        @app.get("/forbidden")
        async def forbidden():
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied",
            )

        return TestClient(app)

    return _build


def test_validation_error_production(build_test_app):
    client = build_test_app("production")
    resp = client.post("/items", json={"name": "ab", "qty": 0})
    assert resp.status_code == 400
    data = resp.json()
    assert data["error"].startswith("Invalid value for name")
    # production should not include validation_errors
    assert set(data) == {"error"}


def test_validation_error_development(build_test_app):
    client = build_test_app("development")
    resp = client.post("/items", json={"qty": 2})
    assert resp.status_code == 400
    data = resp.json()
    assert data["error"] == "Missing required field(s): name"
    assert data["validation_errors"][0]["type"] == "missing"
    assert data["correlation_id"]


def test_domain_validation_error_is_400(build_test_app):
    client = build_test_app("production")
    resp = client.get("/domain-invalid")
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing required field(s): tone"}


def test_domain_not_found_is_404(build_test_app):
    client = build_test_app("development")
    resp = client.get("/domain-missing")
    assert resp.status_code == 404
    body = resp.json()
    assert body["error"] == "Review not found"
    assert body["exception_type"] == "SourceItemNotFoundError"


def test_generic_exception_production(build_test_app):
    client = build_test_app("production")
    resp = client.get("/boom")
    assert resp.status_code == 500
    body = resp.json()
    assert body == {"error": "Internal server error"}
    assert "secret=should_not_leak" not in str(body)
    assert resp.headers["X-Correlation-ID"]


def test_generic_exception_development(build_test_app):
    client = build_test_app("development")
    resp = client.get("/boom", headers={"X-Correlation-ID": "cid-42"})
    assert resp.status_code == 500
    body = resp.json()
    assert body["error"] == "Internal server error"
    assert body["exception_type"] == "RuntimeError"
    assert body["correlation_id"] == "cid-42"


def test_http_exception_keeps_status_and_detail(build_test_app):
    client = build_test_app("production")
    resp = client.get("/forbidden")
    assert resp.status_code == 403
    assert resp.json() == {"error": "Access denied"}


def test_unknown_route_is_404(build_test_app):
    client = build_test_app("production")
    resp = client.get("/does-not-exist")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found"}


class TestDescribeValidationErrors:
    def test_lists_every_missing_field(self):
        errors = [
            {"type": "missing", "loc": ("body", "itemId"), "msg": "Field required"},
            {"type": "missing", "loc": ("body", "tone"), "msg": "Field required"},
        ]
        assert describe_validation_errors(errors) == (
            "Missing required field(s): itemId, tone"
        )

    def test_invalid_value_uses_first_error(self):
        errors = [{"type": "enum", "loc": ("tone",), "msg": "Input should be 'Formal'"}]
        assert describe_validation_errors(errors) == (
            "Invalid value for tone: Input should be 'Formal'"
        )

    def test_errors_without_location(self):
        errors = [{"type": "model_type", "loc": (), "msg": "Input should be a dict"}]
        assert describe_validation_errors(errors) == (
            "Invalid request: Input should be a dict"
        )

    def test_empty_error_list(self):
        assert describe_validation_errors([]) == "Invalid request data provided"
