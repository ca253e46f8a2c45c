"""Read-only domain records the co-pilot drafts replies to.

Reviews, customer emails and phone-call transcripts share a small capability
surface (:class:`SourceItem`) so a single generation pipeline can serve all
three. Everything else on the records is metadata used for prompt context and
fallback selection; nothing in the service mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar, Literal, Protocol


class Sentiment(StrEnum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class Tone(StrEnum):
    """Stylistic register a drafted reply must match (closed set)."""

    FRIENDLY = "Friendly"
    FORMAL = "Formal"
    APOLOGETIC = "Apologetic"
    NEUTRAL_PROFESSIONAL = "Neutral/Professional"


class SourceKind(StrEnum):
    REVIEW = "review"
    EMAIL = "email"
    CALL = "call"


Priority = Literal["low", "medium", "high"]
CallStatus = Literal["live", "open", "resolved"]


class SourceItem(Protocol):
    """What the generation pipeline needs from any source item."""

    kind: ClassVar[SourceKind]

    @property
    def id(self) -> str: ...

    @property
    def body_text(self) -> str: ...

    @property
    def sentiment(self) -> Sentiment: ...


@dataclass(frozen=True, slots=True)
class Review:
    kind: ClassVar[SourceKind] = SourceKind.REVIEW

    id: str
    text: str
    rating: int
    sentiment: Sentiment

    def __post_init__(self) -> None:
        if not 1 <= self.rating <= 5:
            raise ValueError(f"rating must be between 1 and 5, got {self.rating}")

    @property
    def body_text(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class CustomerEmail:
    kind: ClassVar[SourceKind] = SourceKind.EMAIL

    id: str
    customer_name: str
    subject: str
    body: str
    product_model: str
    priority: Priority
    sentiment: Sentiment
    answered: bool = False

    @property
    def body_text(self) -> str:
        return self.body


@dataclass(frozen=True, slots=True)
class CallTranscript:
    kind: ClassVar[SourceKind] = SourceKind.CALL

    id: str
    caller_name: str
    product_model: str
    sentiment: Sentiment
    intent: str
    duration_minutes: int
    transcript: str
    summary: str
    follow_up_channel: str
    status: CallStatus
    urgency: Priority
    recommended_tone: Tone
    created_at: str
    history: tuple[str, ...] = field(default_factory=tuple)
    risk_flags: tuple[str, ...] = field(default_factory=tuple)
    next_actions: tuple[str, ...] = field(default_factory=tuple)
    highlight_moments: tuple[str, ...] = field(default_factory=tuple)

    @property
    def body_text(self) -> str:
        return self.transcript


def recommended_tone_for(sentiment: Sentiment) -> Tone:
    """Default tone suggested to the agent for a given caller sentiment."""
    if sentiment == Sentiment.NEGATIVE:
        return Tone.APOLOGETIC
    if sentiment == Sentiment.POSITIVE:
        return Tone.FRIENDLY
    return Tone.NEUTRAL_PROFESSIONAL
