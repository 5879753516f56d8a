"""Tells the agent what is known and missing from the user's networking intention."""

from __future__ import annotations

import logging
import re

from matchmaker.plugin.common import get_store, sender_name
from matchmaker.runtime import AgentRuntime, Memory, Provider, State

logger = logging.getLogger(__name__)

FIELD_CONTEXT = (
    "- Their networking goals (Vibing with similar people, finding users, seeking job, "
    "finding partners, finding collaborators, seeking grants or investments, hiring talents, "
    "learning from experts, seeking advice, investing, or ask for more accurate description.)\n"
    "- Professional Interests (AI, AI agents, privacy, data rights, DeFi, AiFi, etc.)"
)


def _words(field_name: str) -> str:
    return re.sub(r"([A-Z])", r" \1", field_name).lower().strip()


def get(runtime: AgentRuntime, message: Memory, state: State | None = None) -> str | None:
    try:
        username = sender_name(runtime, message, state)
        intention = get_store(runtime).load_intention(message.user_id)

        if intention is None:
            return (
                f"No networking profile found for @{username}.\n\n"
                "Instructions for agent:\n"
                "Please start gathering the following information naturally in conversation "
                "without overwhelming the user with many options but rather a natural "
                "conversation and follow ups:\n"
                f"{FIELD_CONTEXT}"
            )

        missing = intention.missing_fields()
        if not missing and intention.completed:
            return (
                f"Professional Networking Profile for @{username} is complete, "
                "please proceed to matchmaking by calling SERENDIPITY action.:\n"
                f"- Networking Goal: {intention.networking_goal}\n"
                f"- Interests: {', '.join(intention.industry_preference)}"
            )

        lines = [f"Current Networking Profile for @{username}:"]
        if intention.networking_goal:
            lines.append(f"- Networking Goal: {intention.networking_goal}")
        if intention.industry_preference:
            lines.append(f"- Interests: {', '.join(intention.industry_preference)}")
        lines += [
            "",
            "Instructions for agent:",
            "Please gather the following missing information naturally in conversation:",
            f"(Context about all the fields:\n{FIELD_CONTEXT})",
        ]
        lines += [f"- {_words(name)}" for name in missing]
        return "\n".join(lines)
    except Exception:
        logger.error("Error in matchIntentionProvider", exc_info=True)
        return None


match_intention_provider = Provider(name="matchIntentionProvider", get=get)
