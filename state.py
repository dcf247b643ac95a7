# state.py
import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from chat import ChatMessage, greeting
from models import Profile, VitalsReading

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppState:
    """Everything the dashboard renders from. Never mutated; updates return a copy."""
    profile: Optional[Profile] = None
    vitals: Optional[VitalsReading] = None
    messages: Tuple[ChatMessage, ...] = field(default_factory=lambda: (greeting(),))


def save_profile(state: AppState, profile: Profile) -> AppState:
    """
    Replace the profile wholesale.

    Raises ProfileValidationError if name, age or sex is missing; the caller's
    state is untouched in that case.
    """
    profile.validate()
    logger.info("Profile saved for %s", profile.name)
    return replace(state, profile=profile)


def update_vitals(state: AppState, vitals: VitalsReading) -> AppState:
    logger.info("Vitals replaced (empty=%s)", vitals.is_empty())
    return replace(state, vitals=vitals)


def append_message(state: AppState, message: ChatMessage) -> AppState:
    return replace(state, messages=state.messages + (message,))
