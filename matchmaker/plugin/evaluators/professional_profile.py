"""Extracts personal background and a focused professional intention."""

from __future__ import annotations

import logging

from matchmaker.models import ProfessionalProfile
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
    logger.debug("Validating professionalProfileEvaluator for %s", message.user_id)
    return True


def handler(runtime: AgentRuntime, message: Memory, state: State | None = None) -> bool:
    try:
        store = get_store(runtime)
        cached = store.load_professional_record(message.user_id) or {}
        current = store.load_professional(message.user_id)

        if current is None:
            current = ProfessionalProfile()
            account = new_platform_account(runtime, message, sender_name(runtime, message, state))
            if account:
                current.platform_accounts.append(account)

        profile = get_profile_service(runtime).extract_professional_profile(
            recent_text(message, state), current,
        )
        if profile is None:
            return False

        history = list((cached.get("extractionState") or {}).get("conversationHistory") or [])
        history.append(message.content.text)
        store.save_professional(message.user_id, profile, history)

        logger.info("Professional profile updated for %s (ready=%s)", message.user_id, profile.is_ready())
        return True
    except Exception:
        logger.error("Error in professionalProfileEvaluator handler", exc_info=True)
        return False


professional_profile_evaluator = Evaluator(
    name="professionalProfileEvaluator",
    similes=["EXTRACT_PROFESSIONAL_PROFILE", "GET_NETWORKING_PREFERENCES", "ANALYZE_BACKGROUND"],
    description="Extracts and maintains professional profile information through stateful conversation processing",
    validate=validate,
    handler=handler,
)
