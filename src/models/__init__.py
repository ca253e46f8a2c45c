from .source_items import (
    CallTranscript,
    CustomerEmail,
    Review,
    Sentiment,
    SourceItem,
    SourceKind,
    Tone,
    recommended_tone_for,
)


__all__ = [
    "CallTranscript",
    "CustomerEmail",
    "Review",
    "Sentiment",
    "SourceItem",
    "SourceKind",
    "Tone",
    "recommended_tone_for",
]
