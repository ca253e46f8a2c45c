"""Tests for the template fallback composer."""

from __future__ import annotations

import itertools

import pytest

from models.source_items import Sentiment, SourceKind, Tone
from services.ai.fallback import FALLBACK_TEMPLATES, FORMAL_CLOSING, compose_fallback


ALL_COMBINATIONS = list(itertools.product(SourceKind, Sentiment, Tone))


@pytest.mark.parametrize(("kind", "sentiment", "tone"), ALL_COMBINATIONS)
def test_total_over_every_combination(
    kind: SourceKind, sentiment: Sentiment, tone: Tone
) -> None:
    draft = compose_fallback(sentiment, tone, kind=kind)
    template = FALLBACK_TEMPLATES[kind]

    assert draft.text
    assert draft.key_concerns == ()
    assert draft.text.startswith(template.acknowledgment)
    assert template.appreciation in draft.text
    # apology clause iff negative
    assert (template.apology in draft.text) == (sentiment == Sentiment.NEGATIVE)


@pytest.mark.parametrize(
    ("kind", "sentiment"), itertools.product(SourceKind, Sentiment)
)
def test_formal_tone_uses_formal_sign_off(
    kind: SourceKind, sentiment: Sentiment
) -> None:
    draft = compose_fallback(sentiment, Tone.FORMAL, kind=kind)
    assert draft.text.endswith(FORMAL_CLOSING)
    assert FALLBACK_TEMPLATES[kind].closing not in draft.text


@pytest.mark.parametrize(
    "tone", [Tone.FRIENDLY, Tone.APOLOGETIC, Tone.NEUTRAL_PROFESSIONAL]
)
def test_informal_tones_offer_further_help(tone: Tone) -> None:
    draft = compose_fallback(Sentiment.NEUTRAL, tone)
    assert draft.text.endswith(FALLBACK_TEMPLATES[SourceKind.REVIEW].closing)
    assert FORMAL_CLOSING not in draft.text


def test_review_negative_text_is_exact() -> None:
    draft = compose_fallback(Sentiment.NEGATIVE, Tone.APOLOGETIC)
    assert draft.text == (
        "Thanks for taking the time to share your experience. "
        "We're sorry to hear things didn't go as expected and we'd like to help "
        "make it right. We appreciate your detailed feedback and are already "
        "reviewing it with our product specialists. Please reach out to our "
        "support team if there's anything else we can do."
    )


def test_accepts_plain_strings() -> None:
    draft = compose_fallback("negative", "Formal", kind=SourceKind.EMAIL)
    assert draft.text == (
        "Thanks for reaching out. We're sorry for the trouble and want to help "
        "resolve this quickly. We appreciate the details you shared. "
        "Kind regards, Customer Care Team."
    )


def test_is_deterministic() -> None:
    assert compose_fallback(Sentiment.POSITIVE, Tone.FRIENDLY) == compose_fallback(
        Sentiment.POSITIVE, Tone.FRIENDLY
    )
