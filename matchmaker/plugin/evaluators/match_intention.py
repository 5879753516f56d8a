"""Extracts the user's networking goal and industry interests."""

from __future__ import annotations

import logging

from matchmaker.plugin.common import get_profile_service, get_store
from matchmaker.runtime import AgentRuntime, Evaluator, Memory, State

logger = logging.getLogger(__name__)


def validate(runtime: AgentRuntime, message: Memory, state: State | None = None) -> bool:
    try:
        intention = get_store(runtime).load_intention(message.user_id)
        return not (intention and intention.completed)
    except Exception:
        logger.error("Error in matchIntentionEvaluator validate", exc_info=True)
        return False


def handler(runtime: AgentRuntime, message: Memory, state: State | None = None) -> bool:
    try:
        store = get_store(runtime)
        current = store.load_intention(message.user_id)
        intention = get_profile_service(runtime).extract_match_intention(message.content.text, current)
        if intention is None:
            return False
        store.save_intention(message.user_id, intention)
        logger.info(
            "Stored match intention for %s (completed=%s)",
            message.user_id, intention.completed,
        )
        return True
    except Exception:
        logger.error("Error in matchIntentionEvaluator handler", exc_info=True)
        return False


match_intention_evaluator = Evaluator(
    name="matchIntentionEvaluator",
    similes=["EXTRACT_NETWORKING_PREFERENCES", "GET_PROFESSIONAL_PREFERENCES"],
    description="Extracts and stores user's professional networking intentions and preferences",
    validate=validate,
    handler=handler,
    examples=[
        {
            "context": "Conversation about professional networking preferences",
            "messages": [
                {"user": "User", "content": {"text": "I'm looking to connect with experienced tech leads in the AI industry"}},
                {"user": "Agent", "content": {"text": "What kind of networking opportunity are you looking for specifically?"}},
                {"user": "User", "content": {"text": "Mainly mentorship and possibly collaboration on open source projects"}},
            ],
            "outcome": "Extracted industry preference (AI) and networking goal (mentorship, collaboration)",
        }
    ],
)
