"""Adds the user to the match pool and lists the other candidates."""

from __future__ import annotations

import logging
from typing import Any

from matchmaker.models import MatchPoolEntry
from matchmaker.plugin.common import get_store
from matchmaker.runtime import AgentRuntime, Memory, Provider, State

logger = logging.getLogger(__name__)


def get(runtime: AgentRuntime, message: Memory, state: State | None = None) -> dict[str, Any] | str | None:
    try:
        store = get_store(runtime)
        intention = store.load_intention(message.user_id)
        profile = store.load_profile(message.user_id)
        if intention is None and profile is None:
            return "No matching profile found. Please complete your networking preferences first."

        account = runtime.database_adapter.get_account_by_id(message.user_id)
        if account is None or not account.username:
            return "Unable to find username. Please ensure your account is properly connected."

        current = MatchPoolEntry(
            user_id=message.user_id,
            username=account.username,
            match_intention=intention,
            profile=profile,
            last_active=store.cache.now(),
        )
        pool = store.refresh_pool(current)

        return {
            "currentUser": current.summary(),
            "potentialMatches": [p.summary() for p in pool if p.user_id != message.user_id],
        }
    except Exception:
        logger.error("Error in matchPoolProvider", exc_info=True)
        return None


match_pool_provider = Provider(name="matchPoolProvider", get=get)
