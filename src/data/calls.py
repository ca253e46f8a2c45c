"""Recent support phone calls, generated from a fixed set of call templates.

Calls are rebuilt deterministically from a fixed base time so ids, statuses
and timestamps are stable across processes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from models.source_items import (
    CallStatus,
    CallTranscript,
    Priority,
    Sentiment,
    recommended_tone_for,
)


BASE_TIME = datetime(2024, 12, 1, 12, 0, tzinfo=UTC)
DEFAULT_CALL_COUNT = 70


@dataclass(frozen=True, slots=True)
class CallTemplate:
    caller_name: str
    product_model: str
    sentiment: Sentiment
    intent: str
    duration_minutes: int
    transcript: str
    summary: str
    history: tuple[str, ...]
    risk_flags: tuple[str, ...]
    next_actions: tuple[str, ...]
    follow_up_channel: str
    highlight_moments: tuple[str, ...]


CALL_TEMPLATES: tuple[CallTemplate, ...] = (
    CallTemplate(
        caller_name="Anne Jensen",
        product_model="TV-Model 2",
        sentiment=Sentiment.NEGATIVE,
        intent="Screen flicker after firmware update",
        duration_minutes=7,
        transcript=(
            "Agent: DanTV support, Alex speaking. How can I help today?\n"
            "Customer: Hi Alex, my TV-Model 2 started flickering right after last "
            "night's firmware update. It's pretty bad.\n"
            "Agent: Thanks for letting me know. Have you tried a power cycle yet?\n"
            "Customer: Yes, and I swapped HDMI cables too. It still flashes every "
            "few seconds.\n"
            "Agent: Understood. I'll create a case and push the rollback package "
            "while we're on the call."
        ),
        summary=(
            "Customer sees persistent flickering on TV-Model 2 after a firmware "
            "update. Already tried power cycle and HDMI swap. Expecting a fix or "
            "replacement."
        ),
        history=(
            "Firmware update triggered severe flicker",
            "Tried power cycle and HDMI swap already",
            "Case opened; sending rollback steps now",
        ),
        risk_flags=(
            "Churn risk if unresolved",
            "Warranty expectation",
            "Recent firmware regression",
        ),
        next_actions=(
            "Send firmware rollback steps via SMS within 10 minutes",
            "Escalate to video engineering if rollback fails",
            "Offer courtesy month of DanTV+ if the issue persists",
        ),
        follow_up_channel="sms",
        highlight_moments=(
            "Customer already attempted basic troubleshooting (power cycle, HDMI swap)",
            "Issue started immediately after firmware update",
            "Customer mentioned they'll return the TV if it keeps flickering",
        ),
    ),
    CallTemplate(
        caller_name="Mads Nyholm",
        product_model="TV-Model 3",
        sentiment=Sentiment.NEUTRAL,
        intent="Audio delay over ARC",
        duration_minutes=11,
        transcript=(
            "Agent: Welcome to DanTV support, this is Lea. What can I help with?\n"
            "Customer: My soundbar over HDMI ARC is slightly delayed compared to the "
            "picture on TV-Model 3.\n"
            "Agent: Got it. Have you tried enabling lip-sync or eARC in settings?\n"
            "Customer: I see eARC on, but I'm not sure about lip-sync adjustment.\n"
            "Agent: I'll walk you through it and send a checklist after the call."
        ),
        summary=(
            "Lip-sync delay on TV-Model 3 when using a soundbar over HDMI ARC. "
            "Customer unsure about lip-sync calibration."
        ),
        history=(
            "Reported lip-sync delay over ARC",
            "eARC on; walked through lip-sync menu",
            "Drafting calibration checklist to send",
        ),
        risk_flags=("Experience friction", "May call back if not resolved"),
        next_actions=(
            "Send lip-sync calibration steps",
            "Schedule 24-hour follow-up check-in via SMS",
            "Capture soundbar model for compatibility note",
        ),
        follow_up_channel="sms",
        highlight_moments=(
            "Customer open to trying steps live",
            "Has eARC enabled already",
            "Unsure about lip-sync adjustment menu",
        ),
    ),
    CallTemplate(
        caller_name="Julie Kirkegaard",
        product_model="TV-Model 1",
        sentiment=Sentiment.POSITIVE,
        intent="Picture preset guidance",
        duration_minutes=5,
        transcript=(
            "Agent: Thanks for calling DanTV, I'm Mads. What can I do for you?\n"
            "Customer: I love the TV-Model 1 but want your recommended cinema preset.\n"
            "Agent: Absolutely. Do you watch mostly streaming or Blu-ray?\n"
            "Customer: Streaming, mostly films at night.\n"
            "Agent: I'll send the cinema preset and HDR toggle steps in an email "
            "after this call."
        ),
        summary=(
            "Caller requested a cinema picture preset for TV-Model 1; wants "
            "streaming-optimized settings. Call concluded positively."
        ),
        history=(
            "Requested cinema preset for TV-Model 1",
            "Mostly streams at night",
            "Sending preset + HDR steps via email",
        ),
        risk_flags=(),
        next_actions=(
            "Email the cinema preset and HDR toggle steps",
            "Tag account with 'picture preset provided'",
            "Invite feedback on the settings after 48 hours",
        ),
        follow_up_channel="email",
        highlight_moments=(
            "Customer is happy with the TV and wants to optimize",
            "Prefers evening/streaming configuration",
            "Open to sharing feedback after trying preset",
        ),
    ),
    CallTemplate(
        caller_name="Nikolaj Holm",
        product_model="TV-Model 2",
        sentiment=Sentiment.NEGATIVE,
        intent="Dead pixels after unboxing",
        duration_minutes=9,
        transcript=(
            "Agent: DanTV support, Mia speaking. How can I assist?\n"
            "Customer: I unboxed TV-Model 2 yesterday and found dead pixels in the "
            "top right corner.\n"
            "Agent: I'm sorry about that. Did you notice any impact on dark scenes?\n"
            "Customer: Yes, it's visible on black backgrounds.\n"
            "Agent: I'll open a warranty case and share replacement steps."
        ),
        summary=(
            "Dead pixels on newly purchased TV-Model 2. Customer expects replacement "
            "under warranty."
        ),
        history=(
            "New TV unboxed with dead pixels",
            "Most visible on dark scenes",
            "Opening warranty case; collecting details",
        ),
        risk_flags=("High replacement expectation", "Churn risk if delayed"),
        next_actions=(
            "Verify purchase date and serial",
            "Issue advanced replacement if eligible",
            "Send return shipping label",
        ),
        follow_up_channel="email",
        highlight_moments=(
            "Defect discovered within 24 hours",
            "Visible on dark scenes (high impact)",
            "Customer wants clear warranty confirmation",
        ),
    ),
    CallTemplate(
        caller_name="Ditte Nissen",
        product_model="TV-Model 4",
        sentiment=Sentiment.NEUTRAL,
        intent="Remote pairing steps",
        duration_minutes=6,
        transcript=(
            "Agent: Hi, this is Noah from DanTV. What's happening with the remote?\n"
            "Customer: The remote won't pair after I changed batteries.\n"
            "Agent: Understood. Are you seeing any blinking LEDs?\n"
            "Customer: Just a slow blink.\n"
            "Agent: I'll guide you through pairing and share the step-by-step via SMS."
        ),
        summary=(
            "Remote for TV-Model 4 not pairing after battery change; "
            "needs pairing guide."
        ),
        history=(
            "Remote won't pair after battery swap",
            "LED shows slow blink",
            "Running guided pairing steps now",
        ),
        risk_flags=("May escalate if pairing fails",),
        next_actions=(
            "Send pairing steps via SMS",
            "Confirm LED pattern during steps",
            "Offer replacement remote if still failing",
        ),
        follow_up_channel="sms",
        highlight_moments=(
            "Remote LED slow blink noted",
            "Customer ready to try steps live",
            "Open to replacement if pairing fails",
        ),
    ),
    CallTemplate(
        caller_name="Rikke Hjort",
        product_model="TV-Model 1",
        sentiment=Sentiment.NEGATIVE,
        intent="Wi-Fi drops every evening",
        duration_minutes=10,
        transcript=(
            "Agent: DanTV support, Amir speaking. Tell me what's happening.\n"
            "Customer: TV-Model 1 drops Wi-Fi around 9 PM daily. "
            "Other devices are fine.\n"
            "Agent: Thanks for the detail. Is the TV near a microwave or thick wall?\n"
            "Customer: It's in the living room, nothing unusual.\n"
            "Agent: I'll send a 5GHz/2.4GHz checklist and schedule a follow-up."
        ),
        summary=(
            "Wi-Fi disconnects nightly on TV-Model 1; other devices unaffected. Needs "
            "network checklist and potential firmware check."
        ),
        history=(
            "Nightly Wi-Fi drops around 9 PM",
            "Other devices fine; placement normal",
            "Collecting router details; prepping checklist",
        ),
        risk_flags=("Frustration building", "May blame firmware"),
        next_actions=(
            "Send channel interference checklist",
            "Capture router model and firmware",
            "Schedule 24-hour follow-up to confirm stability",
        ),
        follow_up_channel="sms",
        highlight_moments=(
            "Issue time-boxed to nightly pattern",
            "Other devices unaffected (likely TV-side)",
            "Customer willing to try settings adjustments",
        ),
    ),
    CallTemplate(
        caller_name="Lea Axelsen",
        product_model="TV-Model 4",
        sentiment=Sentiment.POSITIVE,
        intent="Accessibility captions setup",
        duration_minutes=8,
        transcript=(
            "Agent: Hello, DanTV support. How can I help today?\n"
            "Customer: I need help enabling captions for my dad on TV-Model 4.\n"
            "Agent: Happy to help. Do you want them default-on for HDMI too?\n"
            "Customer: Yes, please.\n"
            "Agent: I'll send steps and a quick video after this call."
        ),
        summary=(
            "Customer wants captions default-enabled across inputs on TV-Model 4 "
            "for accessibility."
        ),
        history=(
            "Needs captions always on for accessibility",
            "Wants default-on across HDMI/inputs",
            "Sending steps and short video guide",
        ),
        risk_flags=(),
        next_actions=(
            "Send captions setup guide",
            "Share 30s video walk-through",
            "Check back in 2 days for accessibility feedback",
        ),
        follow_up_channel="email",
        highlight_moments=(
            "Accessibility need clearly stated",
            "Wants captions on by default for HDMI",
            "Appreciates short video tutorial",
        ),
    ),
    CallTemplate(
        caller_name="Daniel Bay",
        product_model="TV-Model 2",
        sentiment=Sentiment.NEGATIVE,
        intent="Shipping delay on TV order",
        duration_minutes=4,
        transcript=(
            "Agent: DanTV logistics desk, Sara speaking. What's the issue?\n"
            "Customer: My TV-Model 2 was due Friday. Tracking hasn't moved.\n"
            "Agent: Let me check the carrier. Do you have the order number?\n"
            "Customer: Yes, it's 4829.\n"
            "Agent: I'll chase the carrier and update you via SMS today."
        ),
        summary="Shipping delay for TV-Model 2; customer wants same-day status update.",
        history=(
            "Reported shipping delay past promised date",
            "Provided order number 4829",
            "Chasing carrier; will send ETA today",
        ),
        risk_flags=("Delivery frustration", "Refund risk"),
        next_actions=(
            "Contact carrier for status",
            "Send SMS with ETA within 2 hours",
            "Offer voucher if delay exceeds 48 hours",
        ),
        follow_up_channel="sms",
        highlight_moments=(
            "Customer shared order number",
            "Needs same-day status",
            "At risk of canceling if delayed further",
        ),
    ),
)


def _format_created_at(created: datetime, hours_ago: int) -> str:
    day_label = "Today" if hours_ago < 24 else "Yesterday"
    return f"{day_label}, {created:%H:%M}"


def _status_for(idx: int) -> CallStatus:
    if idx % 9 == 0:
        return "live"
    if idx % 4 == 0:
        return "resolved"
    return "open"


def _urgency_for(idx: int) -> Priority:
    if idx % 7 == 0:
        return "high"
    if idx % 3 == 0:
        return "medium"
    return "low"


def build_recent_calls(
    count: int = DEFAULT_CALL_COUNT, base_time: datetime = BASE_TIME
) -> tuple[CallTranscript, ...]:
    """Spread ``count`` calls across the 48 hours before ``base_time``."""
    bucket = base_time.replace(minute=0, second=0, microsecond=0)
    calls: list[CallTranscript] = []
    for idx in range(count):
        template = CALL_TEMPLATES[idx % len(CALL_TEMPLATES)]
        hours_ago = min(47, int((idx / max(1, count - 1)) * 47))
        minute_skew = (idx % 6) * 5
        created = bucket - timedelta(hours=hours_ago, minutes=minute_skew)

        calls.append(
            CallTranscript(
                id=f"call-{idx + 1}",
                caller_name=template.caller_name,
                product_model=template.product_model,
                sentiment=template.sentiment,
                intent=template.intent,
                duration_minutes=template.duration_minutes,
                transcript=template.transcript,
                summary=template.summary,
                follow_up_channel=template.follow_up_channel,
                status=_status_for(idx),
                urgency=_urgency_for(idx),
                recommended_tone=recommended_tone_for(template.sentiment),
                created_at=_format_created_at(created, hours_ago),
                history=template.history,
                risk_flags=template.risk_flags,
                next_actions=template.next_actions,
                highlight_moments=template.highlight_moments,
            )
        )
    return tuple(calls)
