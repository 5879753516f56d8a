"""Extracts and maintains the networking profile used for matchmaking."""

from __future__ import annotations

import logging

from matchmaker.models import UserProfile
from matchmaker.plugin.common import (
    get_profile_service,
    get_store,
    new_platform_account,
    recent_text,
    sender_name,
)
from matchmaker.runtime import AgentRuntime, Evaluator, Memory, State

logger = logging.getLogger(__name__)


def validate(runtime: AgentRuntime, message: Memory, state: State | None = None) -> bool:
    return True


def handler(runtime: AgentRuntime, message: Memory, state: State | None = None) -> bool:
    try:
        store = get_store(runtime)
        cached = store.load_profile_record(message.user_id) or {}
        current = store.load_profile(message.user_id)

        if current is None:
            current = UserProfile()
            account = new_platform_account(runtime, message, sender_name(runtime, message, state))
            if account:
                current.platform_accounts.append(account)

        profile = get_profile_service(runtime).extract_user_profile(recent_text(message, state), current)
        if profile is None:
            return False

        history = list((cached.get("extractionState") or {}).get("conversationHistory") or [])
        history.append(message.content.text)
        store.save_profile(message.user_id, profile, history)

        missing = profile.missing_fields()
        logger.info(
            "Profile updated for %s: completed=%s missing=%s",
            message.user_id, profile.completed, missing,
        )
        return True
    except Exception:
        logger.error("Error in userProfileEvaluator handler", exc_info=True)
        return False


user_profile_evaluator = Evaluator(
    name="userProfileEvaluator",
    similes=["EXTRACT_PROFILE", "UPDATE_NETWORKING_PROFILE"],
    description="Extracts and maintains the user's networking profile from conversation",
    validate=validate,
    handler=handler,
)
