"""Deterministic template replies used when the model cannot produce a draft."""

from __future__ import annotations

from dataclasses import dataclass

from models.source_items import Sentiment, SourceKind, Tone
from services.ai.models import DraftResult


FORMAL_CLOSING = "Kind regards, Customer Care Team."


@dataclass(frozen=True, slots=True)
class FallbackTemplate:
    acknowledgment: str
    apology: str
    appreciation: str
    closing: str


FALLBACK_TEMPLATES: dict[SourceKind, FallbackTemplate] = {
    SourceKind.REVIEW: FallbackTemplate(
        acknowledgment="Thanks for taking the time to share your experience.",
        apology=(
            "We're sorry to hear things didn't go as expected and we'd like to "
            "help make it right."
        ),
        appreciation=(
            "We appreciate your detailed feedback and are already reviewing it "
            "with our product specialists."
        ),
        closing=(
            "Please reach out to our support team if there's anything else we "
            "can do."
        ),
    ),
    SourceKind.EMAIL: FallbackTemplate(
        acknowledgment="Thanks for reaching out.",
        apology="We're sorry for the trouble and want to help resolve this quickly.",
        appreciation="We appreciate the details you shared.",
        closing="If there's anything else we can do, please let us know.",
    ),
    SourceKind.CALL: FallbackTemplate(
        acknowledgment="Thanks for speaking with us on the phone today.",
        apology=(
            "We're sorry for the inconvenience and are following up on the issue "
            "you raised."
        ),
        appreciation=(
            "We appreciate your patience and will keep you updated on the next steps."
        ),
        closing="If anything else comes up, just reply to this message.",
    ),
}


def compose_fallback(
    sentiment: Sentiment | str,
    tone: Tone | str,
    *,
    kind: SourceKind = SourceKind.REVIEW,
) -> DraftResult:
    """Build the template reply for an item of ``kind``.

    The apology clause appears if and only if the sentiment is negative; the
    closing is the formal sign-off for ``Formal`` and an offer of further help
    for every other tone. Never raises for a known ``kind``.
    """
    template = FALLBACK_TEMPLATES[kind]
    sentences = [template.acknowledgment]
    if sentiment == Sentiment.NEGATIVE:
        sentences.append(template.apology)
    sentences.append(template.appreciation)
    sentences.append(FORMAL_CLOSING if tone == Tone.FORMAL else template.closing)
    return DraftResult(text=" ".join(sentences))
