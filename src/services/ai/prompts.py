"""Prompt assembly for reply drafting.

``build_prompt`` is pure: given the same item, tone, tokens and ``rng`` it
returns the same string. The only randomness is the persona adjective, which
callers can pin by passing a seeded ``random.Random``.

Layout of every prompt (top to bottom):

1. persona line and kind-specific context (rating, customer, call intent...)
2. requested tone, caller request id and per-attempt variation seed
3. previous draft block, only when regenerating
4. the source text verbatim inside a triple-quote block
5. kind-specific writing guidance
6. the strict JSON output contract (always last)
"""

from __future__ import annotations

import random
from collections.abc import Callable

from models.source_items import (
    CallTranscript,
    CustomerEmail,
    Review,
    SourceItem,
    SourceKind,
    Tone,
)


PERSONA_ADJECTIVES = ("empathetic", "professional", "helpful", "concise", "warm")

DEFAULT_COMPANY_NAME = "DanTV"
DEFAULT_SUPPORT_LINK = "dantv.customerservise.dk"

DISTINCT_ALTERNATIVE_INSTRUCTION = (
    "IMPORTANT: A previous draft is quoted above. Write a SIGNIFICANTLY different "
    "alternative: use a different opening, a different closing and different "
    "phrasing and structure throughout. Do not return the previous draft with "
    "minor edits or a few swapped words."
)

OUTPUT_FORMAT_INSTRUCTION = """Strictly return ONLY a valid, raw JSON object \
(no markdown, no surrounding backticks, no commentary) in this exact shape:
{
  "response": "<the drafted reply as plain text>",
  "keyConcerns": ["<concern 1>", "<concern 2>"]
}
keyConcerns must contain between 0 and 3 short strings."""


def _quoted(text: str) -> str:
    return f'"""\n{text}\n"""'


def _review_context(
    item: Review, company_name: str, support_link: str
) -> tuple[str, str, str]:
    header = f"drafting a public reply to a {company_name} product review."
    context = f"Rating: {item.rating}/5"
    guidance = (
        "Respond as the brand using the requested tone. Address the customer's key "
        "concerns, show accountability, and offer a clear next step when relevant. "
        "Keep the response under 180 words."
    )
    return header, context, guidance


def _email_context(
    item: CustomerEmail, company_name: str, support_link: str
) -> tuple[str, str, str]:
    header = (
        "drafting a reply to an incoming customer email about a TV product.\n"
        f"If you suggest contacting customer service, use this link: {support_link}"
    )
    context = "\n".join(
        [
            f"Company: {company_name}",
            f"Customer Name: {item.customer_name}",
            f"Product: {item.product_model}",
            f"Priority: {item.priority}",
            f"Email subject: {item.subject}",
        ]
    )
    guidance = (
        "Reply to the customer by name, answer every question they raise, and "
        "close with a concrete next step."
    )
    return header, context, guidance


def _call_context(
    item: CallTranscript, company_name: str, support_link: str
) -> tuple[str, str, str]:
    header = (
        f"writing a follow-up message to a {company_name} customer "
        "after a phone call.\n"
        f"The message will be sent by {item.follow_up_channel}."
    )
    lines = [
        f"Caller Name: {item.caller_name}",
        f"Product: {item.product_model}",
        f"Call intent: {item.intent}",
        f"Call duration: {item.duration_minutes} minutes",
        f"Call summary: {item.summary}",
    ]
    if item.next_actions:
        lines.append("Agreed next actions:")
        lines.extend(f"- {action}" for action in item.next_actions)
    guidance = (
        "Recap what was discussed, confirm the agreed next actions, and keep the "
        f"message short enough to read comfortably by {item.follow_up_channel}. "
        f"If further help is needed, point the customer to {support_link}."
    )
    return header, "\n".join(lines), guidance


_Renderer = Callable[..., tuple[str, str, str]]

_RENDERERS: dict[SourceKind, _Renderer] = {
    SourceKind.REVIEW: _review_context,
    SourceKind.EMAIL: _email_context,
    SourceKind.CALL: _call_context,
}

_SOURCE_LABELS = {
    SourceKind.REVIEW: "Customer review:",
    SourceKind.EMAIL: "Customer email:",
    SourceKind.CALL: "Call transcript:",
}


def build_prompt(
    item: SourceItem,
    tone: Tone | str,
    variation_token: str,
    previous_draft: str | None = None,
    *,
    request_id: str | None = None,
    company_name: str = DEFAULT_COMPANY_NAME,
    support_link: str = DEFAULT_SUPPORT_LINK,
    rng: random.Random | None = None,
) -> str:
    """Build the generation prompt for one attempt.

    Args:
        item: Source item being replied to.
        tone: Requested tone; plain strings must be exact ``Tone`` values.
        variation_token: Fresh per-attempt value used only to perturb sampling.
        previous_draft: Draft the new one must differ from, if regenerating.
        request_id: Caller-supplied request token ("primary" when absent).
        company_name: Brand the reply is written for.
        support_link: Contact link the model may offer.
        rng: Random source for the persona adjective.

    Raises:
        ValueError: If the item has no body text or the tone is not recognised.
    """
    if not item.body_text or not item.body_text.strip():
        raise ValueError(f"{item.kind} {item.id} has no text to reply to")
    try:
        tone = Tone(tone)
    except ValueError as exc:
        raise ValueError(f"Unsupported tone: {tone!r}") from exc

    renderer = _RENDERERS[item.kind]
    header, context, guidance = renderer(item, company_name, support_link)
    adjective = (rng or random).choice(PERSONA_ADJECTIVES)

    sections = [
        f"You are a {adjective} customer-care specialist {header}",
        context,
        "\n".join(
            [
                f"Tone required: {tone.value}",
                f"Variation token: {request_id or 'primary'}",
                f"Variation seed: {variation_token}",
            ]
        ),
    ]
    if previous_draft:
        sections.append(
            "Previous draft (provide a distinctly different alternative):\n"
            + _quoted(previous_draft)
        )
    sections.append(f"{_SOURCE_LABELS[item.kind]}\n{_quoted(item.body_text)}")
    sections.append(guidance)
    if previous_draft:
        sections.append(DISTINCT_ALTERNATIVE_INSTRUCTION)
    sections.append(OUTPUT_FORMAT_INSTRUCTION)
    return "\n\n".join(sections)
