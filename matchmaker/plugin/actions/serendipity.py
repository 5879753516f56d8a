"""SERENDIPITY - find and propose a match for a user with a complete profile.

Candidates come from the shared match pool and are judged one at a time by
the LLM; the first positive verdict is recorded in the user's match history
and proposed as an introduction.
"""

from __future__ import annotations

import logging
from typing import Any

from matchmaker.plugin.common import get_matching_service, get_store
from matchmaker.runtime import Action, AgentRuntime, Content, HandlerCallback, Memory, State
from matchmaker.services.matching_service import format_match_notification

logger = logging.getLogger(__name__)

NO_PROFILE_TEXT = "I need more information about your professional background before I can find matches."
EMPTY_POOL_TEXT = "I haven't found any potential matches yet. I'll keep looking!"
NO_MATCH_TEXT = "Still looking for the perfect match! I'll keep searching for someone who aligns with your goals."
ERROR_TEXT = "I encountered an issue while searching for matches. I'll try again shortly."


def validate(runtime: AgentRuntime, message: Memory, state: State | None = None) -> bool:
    try:
        profile = get_store(runtime).load_profile(message.user_id)
        if profile is None:
            logger.warning("No profile found for user %s", message.user_id)
            return False
        ready = profile.has_minimum_match_fields()
        logger.info("Profile validation result for %s: hasMinimumFields=%s", message.user_id, ready)
        return ready
    except Exception:
        logger.error("Error in serendipity validate", exc_info=True)
        return False


def _reply(content: Content, callback: HandlerCallback | None) -> Content:
    if callback:
        callback(content)
    return content


def handler(
    runtime: AgentRuntime,
    message: Memory,
    state: State | None = None,
    options: dict[str, Any] | None = None,
    callback: HandlerCallback | None = None,
) -> Content:
    try:
        logger.info("=== Starting Serendipity Matchmaking ===")
        store = get_store(runtime)

        profile = store.load_profile(message.user_id)
        if profile is None:
            logger.warning("No profile found for user %s", message.user_id)
            return _reply(Content(text=NO_PROFILE_TEXT, action="CONTINUE"), callback)

        candidates = store.get_candidates(message.user_id)
        logger.info("Match pool retrieved: %d candidate(s)", len(candidates))
        if not candidates:
            return _reply(Content(text=EMPTY_POOL_TEXT, action="SERENDIPITY"), callback)

        matching = get_matching_service(runtime)
        for candidate in candidates:
            record = matching.evaluate_match(profile, candidate)
            if record is None:
                continue
            store.append_match(message.user_id, record)
            logger.info("Match found for %s: %s", message.user_id, candidate.username)
            return _reply(
                Content(text=format_match_notification(candidate, record), action="CONTINUE"),
                callback,
            )

        return _reply(Content(text=NO_MATCH_TEXT, action="CONTINUE"), callback)
    except Exception:
        logger.error("Error in serendipity handler", exc_info=True)
        return _reply(Content(text=ERROR_TEXT, action="CONTINUE"), callback)


serendipity_action = Action(
    name="SERENDIPITY",
    description="Call this action when user has completed their profile and is searching for a match.",
    similes=[
        "NOTIFY_MATCH",
        "INTRODUCE_MATCH",
        "CONNECT_USERS",
        "SUGGEST_CONNECTION",
        "PROPOSE_MATCH",
        "NETWORK_MATCH",
        "FIND_MATCH",
        "MATCH_FOUND",
    ],
    validate=validate,
    handler=handler,
)
