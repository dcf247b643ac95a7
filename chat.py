# chat.py
import logging
import random
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from config import CHAT, HEALTH_SCORE, THRESHOLDS
from metrics import health_score_breakdown
from models import Profile, VitalsReading
from response_bank import FILLERS, GREETING, HEART, LUNG_ADVICE, LUNG_SPO2, PIZZA_SLEEP, SCORE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChatMessage:
    role: str  # "user" | "assistant"
    content: str
    timestamp: datetime = field(default_factory=datetime.now)


def greeting() -> ChatMessage:
    return ChatMessage(role="assistant", content=GREETING)


def _heart_reply(profile: Optional[Profile], vitals: Optional[VitalsReading]) -> str:
    if vitals is None or vitals.heart_rate_bpm is None:
        return HEART["missing"]
    hr = vitals.heart_rate_bpm
    if THRESHOLDS["hr_low"] <= hr <= THRESHOLDS["hr_high"]:
        return HEART["normal"].format(hr=hr)
    if hr > THRESHOLDS["hr_high"]:
        return HEART["high"].format(hr=hr)
    return HEART["low"].format(hr=hr)


def _pizza_reply(profile: Optional[Profile], vitals: Optional[VitalsReading]) -> str:
    return PIZZA_SLEEP


def _lung_reply(profile: Optional[Profile], vitals: Optional[VitalsReading]) -> str:
    if vitals is None or vitals.spo2_pct is None:
        return LUNG_ADVICE
    verdict = "excellent" if vitals.spo2_pct >= THRESHOLDS["spo2_ok"] else "below optimal"
    return LUNG_ADVICE + "\n\n" + LUNG_SPO2.format(spo2=vitals.spo2_pct, verdict=verdict)


def _score_reply(profile: Optional[Profile], vitals: Optional[VitalsReading]) -> str:
    score, factors = health_score_breakdown(vitals)
    if score >= HEALTH_SCORE["excellent"]:
        closing = SCORE["excellent"]
    elif score >= HEALTH_SCORE["good"]:
        closing = SCORE["good"]
    else:
        closing = SCORE["attention"]
    return "\n\n".join([SCORE["header"].format(score=score), "\n".join(factors), closing])


Responder = Tuple[Callable[[str], bool], Callable[[Optional[Profile], Optional[VitalsReading]], str]]

# Checked in order; first match wins.
RESPONDERS: List[Responder] = [
    (lambda q: "heart" in q, _heart_reply),
    (lambda q: "pizza" in q and "sleep" in q, _pizza_reply),
    (lambda q: "lung" in q or "breathing" in q, _lung_reply),
    (lambda q: "health score" in q or "overall" in q, _score_reply),
]


def generate_reply(
    question: str,
    profile: Optional[Profile],
    vitals: Optional[VitalsReading],
    rng=random,
) -> str:
    """Keyword-matched canned reply; falls back to a random filler."""
    q = question.lower()
    for matches, build in RESPONDERS:
        if matches(q):
            logger.debug("Chat matched %s", build.__name__)
            return build(profile, vitals)

    logger.debug("Chat fell back to filler")
    filler = rng.choice(FILLERS)
    return filler(profile, vitals)


def reply_delay(rng=random) -> float:
    """Simulated thinking time in seconds."""
    delay = CHAT["delay_base_s"] + rng.random() * CHAT["delay_spread_s"]
    return delay * CHAT["delay_scale"]
