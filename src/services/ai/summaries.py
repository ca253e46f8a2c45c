"""Batch feedback summaries generated with pydantic-ai."""

import logging

from pydantic_ai import Agent

from data.emails import CUSTOMER_EMAILS
from data.reviews import REVIEWS
from models.source_items import CustomerEmail, Review
from schemas.copilot import FeedbackSummary
from services.ai.model_factory import get_text_model


logger = logging.getLogger(__name__)


SUMMARY_SYSTEM_PROMPT = """You analyse customer feedback for a consumer
electronics brand and report on it for the business.

Rules:
- summary: a concise executive summary, two or three sentences
- strengths, weaknesses, recommendations: short bullet-style strings
- Only use facts present in the feedback; do not invent numbers
"""

# Lazy-load the agent to avoid requiring API keys at import time
_summary_agent: Agent[None, FeedbackSummary] | None = None


def get_summary_agent() -> Agent[None, FeedbackSummary]:
    """Get or create the summary agent (lazy initialization)."""
    global _summary_agent
    if _summary_agent is None:
        model = get_text_model()
        _summary_agent = Agent(
            model,
            output_type=FeedbackSummary,
            system_prompt=SUMMARY_SYSTEM_PROMPT,
        )
    return _summary_agent


def format_reviews(reviews: tuple[Review, ...] | list[Review]) -> str:
    return "\n\n".join(
        f"Review (Rating: {review.rating}/5): {review.text}" for review in reviews
    )


def format_emails(emails: tuple[CustomerEmail, ...] | list[CustomerEmail]) -> str:
    return "\n\n".join(
        f"Subject: {email.subject} | Priority: {email.priority} | "
        f"Sentiment: {email.sentiment}\n{email.body}"
        for email in emails
    )


async def summarize_reviews(
    company_name: str,
    agent: Agent[None, FeedbackSummary] | None = None,
) -> FeedbackSummary:
    """Summarise every bundled product review.

    Raises:
        Exception: If AI generation fails
    """
    prompt = (
        f"You are an expert business analyst. Analyze the following customer "
        f'reviews for {company_name}.\n\nReviews:\n"""\n'
        f'{format_reviews(REVIEWS)}\n"""'
    )
    try:
        logger.info(f"Generating review summary over {len(REVIEWS)} reviews")
        result = await (agent or get_summary_agent()).run(prompt)
        return result.output
    except Exception as e:
        logger.error(f"Failed to generate review summary: {e}", exc_info=True)
        raise


async def summarize_emails(
    company_name: str,
    product_model: str | None = None,
    agent: Agent[None, FeedbackSummary] | None = None,
) -> FeedbackSummary:
    """Summarise customer emails, optionally for a single product model.

    Raises:
        Exception: If AI generation fails
    """
    # blank filter means every model
    product_model = (product_model or "").strip() or None
    emails = [
        email
        for email in CUSTOMER_EMAILS
        if product_model is None or email.product_model == product_model
    ]
    product_context = (
        f"- {product_model}" if product_model else "across all product models"
    )
    prompt = (
        "You are an expert customer experience analyst. Summarize the following "
        f"customer support emails for {company_name} {product_context}.\n\n"
        f'Emails:\n"""\n{format_emails(emails)}\n"""'
    )
    try:
        logger.info(
            f"Generating email summary over {len(emails)} emails "
            f"(product_model={product_model!r})"
        )
        result = await (agent or get_summary_agent()).run(prompt)
        return result.output
    except Exception as e:
        logger.error(f"Failed to generate email summary: {e}", exc_info=True)
        raise
