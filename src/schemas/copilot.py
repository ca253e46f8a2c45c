"""Request/response schemas for the co-pilot endpoints.

Field names on the wire are camelCase (``itemId``, ``keyConcerns``) to match
what the browser client sends; Python code uses the snake_case attributes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from models.source_items import Sentiment, SourceKind, Tone


if TYPE_CHECKING:
    from services.ai.models import DraftResult


class GenerateDraftRequest(BaseModel):
    """Body of every ``generate-*`` endpoint."""

    item_id: str = Field(
        ..., alias="itemId", min_length=1, description="Id of the source item"
    )
    tone: Tone = Field(..., description="Requested tone of the reply")
    request_id: str | None = Field(
        default=None,
        alias="requestId",
        description="Caller-supplied variation token",
    )
    previous_response: str | None = Field(
        default=None,
        alias="previousResponse",
        description="Draft the new one must differ from",
    )

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    @field_validator("item_id")
    @classmethod
    def _item_id_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("itemId must not be blank")
        return v

    @field_validator("previous_response")
    @classmethod
    def _empty_previous_is_absent(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v


class DraftResponse(BaseModel):
    """Wire shape of a draft, identical for model and fallback output."""

    text: str
    key_concerns: list[str] = Field(default_factory=list, alias="keyConcerns")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_draft(cls, draft: DraftResult) -> DraftResponse:
        return cls(text=draft.text, key_concerns=list(draft.key_concerns))


class FeedbackSummary(BaseModel):
    """Structured summary of a batch of customer feedback."""

    summary: str = Field(..., description="Two or three sentence overview")
    strengths: list[str] = Field(
        default_factory=list, description="What customers appreciate"
    )
    weaknesses: list[str] = Field(
        default_factory=list, description="Recurring complaints or problems"
    )
    recommendations: list[str] = Field(
        default_factory=list, description="Concrete actions for the business"
    )


class EmailSummaryRequest(BaseModel):
    """Optional email summary filter; unknown keys are ignored."""

    product_model: str | None = Field(default=None, alias="productModel")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("product_model")
    @classmethod
    def _blank_model_is_absent(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class ReviewOut(_CamelModel):
    id: str
    text: str
    rating: int
    sentiment: Sentiment


class CustomerEmailOut(_CamelModel):
    id: str
    customer_name: str
    subject: str
    body: str
    product_model: str
    priority: str
    sentiment: Sentiment
    answered: bool


class CallTranscriptOut(_CamelModel):
    id: str
    caller_name: str
    product_model: str
    sentiment: Sentiment
    intent: str
    duration_minutes: int
    transcript: str
    summary: str
    follow_up_channel: str
    status: str
    urgency: str
    recommended_tone: Tone
    created_at: str
    history: list[str]
    risk_flags: list[str]
    next_actions: list[str]
    highlight_moments: list[str]


def serialize_source_item(item: Any) -> dict[str, Any]:
    """Render a catalog record as camelCase JSON-ready data."""
    schema: type[_CamelModel] = {
        SourceKind.REVIEW: ReviewOut,
        SourceKind.EMAIL: CustomerEmailOut,
        SourceKind.CALL: CallTranscriptOut,
    }[item.kind]
    return schema.model_validate(item).model_dump(mode="json", by_alias=True)


__all__ = [
    "CallTranscriptOut",
    "CustomerEmailOut",
    "DraftResponse",
    "EmailSummaryRequest",
    "FeedbackSummary",
    "GenerateDraftRequest",
    "ReviewOut",
]
