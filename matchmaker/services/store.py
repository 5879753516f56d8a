"""Matchmaker Store - Cache key layout and typed record access.

Per-user records are namespaced by the agent's character name; the match
pool and match histories are shared across agents.

Interface Contract:
- load_*/save_* pairs per record type, returning models or None
- refresh_pool(entry) -> list[MatchPoolEntry]
- get_candidates(user_id) -> list[MatchPoolEntry]
- append_match / update_match_status maintain MatchHistory
"""

from __future__ import annotations

import logging
from typing import Any

from matchmaker.models import (
    MatchHistory,
    MatchIntention,
    MatchPoolEntry,
    MatchRecord,
    ProfessionalProfile,
    ScoredMatch,
    UserProfile,
)
from matchmaker.models.match import MATCH_STATUSES
from matchmaker.services.cache_service import CacheManager

logger = logging.getLogger(__name__)

DAY = 24 * 60 * 60

POOL_CACHE_KEY = "matchmaker/pool"
INTENTION_TTL = 7 * DAY
SCORED_MATCHES_TTL = 1 * DAY
ACTIVE_THRESHOLD = 30 * DAY


class MatchmakerStore:
    """Typed access to everything the matchmaker keeps in the cache."""

    def __init__(self, cache: CacheManager, agent_name: str):
        self.cache = cache
        self.agent_name = agent_name

    # ------------------------------------------------------------------
    # Keys
    # ------------------------------------------------------------------

    def user_key(self, user: str, record: str) -> str:
        return f"{self.agent_name}/{user}/{record}"

    @staticmethod
    def match_history_key(user_id: str) -> str:
        return f"matchmaker/matches/{user_id}"

    # ------------------------------------------------------------------
    # Match intention
    # ------------------------------------------------------------------

    def load_intention(self, user: str) -> MatchIntention | None:
        cached = self.cache.get(self.user_key(user, "intention"))
        if not cached or not cached.get("data"):
            return None
        return MatchIntention.from_dict(cached["data"])

    def save_intention(self, user: str, intention: MatchIntention) -> None:
        self.cache.set(
            self.user_key(user, "intention"),
            {"data": intention.to_dict(), "lastUpdated": self.cache.now()},
            ttl=INTENTION_TTL,
        )

    # ------------------------------------------------------------------
    # Networking profile
    # ------------------------------------------------------------------

    def load_profile_record(self, user: str) -> dict[str, Any] | None:
        """Raw cached record including extraction state."""
        return self.cache.get(self.user_key(user, "data"))

    def load_profile(self, user: str) -> UserProfile | None:
        cached = self.load_profile_record(user)
        if not cached or not cached.get("data"):
            return None
        return UserProfile.from_dict(cached["data"])

    def save_profile(self, user: str, profile: UserProfile, history: list[str] | None = None) -> None:
        self.cache.set(
            self.user_key(user, "data"),
            {
                "data": profile.to_dict(),
                "extractionState": {"conversationHistory": history or []},
                "lastUpdated": self.cache.now(),
            },
        )

    # ------------------------------------------------------------------
    # Professional profile
    # ------------------------------------------------------------------

    def load_professional_record(self, user: str) -> dict[str, Any] | None:
        return self.cache.get(self.user_key(user, "professional"))

    def load_professional(self, user: str) -> ProfessionalProfile | None:
        cached = self.load_professional_record(user)
        if not cached or not cached.get("data"):
            return None
        return ProfessionalProfile.from_dict(cached["data"])

    def save_professional(
        self,
        user: str,
        profile: ProfessionalProfile,
        history: list[str] | None = None,
    ) -> None:
        data = profile.to_dict()
        self.cache.set(
            self.user_key(user, "professional"),
            {
                "data": data,
                "extractionState": {
                    "currentProfile": data,
                    "conversationHistory": history or [],
                },
                "lastUpdated": self.cache.now(),
            },
        )

    # ------------------------------------------------------------------
    # Interest graph
    # ------------------------------------------------------------------

    def load_interest_record(self, user: str) -> dict[str, Any] | None:
        return self.cache.get(self.user_key(user, "interests"))

    def load_interest_graph(self, user: str) -> dict[str, Any] | None:
        cached = self.load_interest_record(user)
        return cached.get("graph") if cached else None

    def save_interest_graph(self, user: str, graph: dict[str, Any], ual: str | None = None) -> None:
        """Store the JSON-LD graph, plus the DKG UAL once it has been published."""
        record: dict[str, Any] = {"graph": graph, "lastUpdated": self.cache.now()}
        if ual:
            record["ual"] = ual
        self.cache.set(self.user_key(user, "interests"), record)

    # ------------------------------------------------------------------
    # Heuristic matches
    # ------------------------------------------------------------------

    def load_scored_matches(self, user: str) -> list[ScoredMatch]:
        cached = self.cache.get(self.user_key(user, "matches"))
        if not cached:
            return []
        return [ScoredMatch.from_dict(m) for m in cached.get("matches") or []]

    def save_scored_matches(self, user: str, matches: list[ScoredMatch]) -> None:
        self.cache.set(
            self.user_key(user, "matches"),
            {"matches": [m.to_dict() for m in matches], "lastUpdated": self.cache.now()},
            ttl=SCORED_MATCHES_TTL,
        )

    # ------------------------------------------------------------------
    # Match pool
    # ------------------------------------------------------------------

    def load_pool(self) -> list[MatchPoolEntry]:
        cached = self.cache.get(POOL_CACHE_KEY)
        if not cached:
            return []
        return [MatchPoolEntry.from_dict(p) for p in cached.get("pools") or []]

    def refresh_pool(self, entry: MatchPoolEntry, now: float | None = None) -> list[MatchPoolEntry]:
        """Upsert ``entry``, drop users inactive for 30 days and save."""
        now = self.cache.now() if now is None else now
        pool = [p for p in self.load_pool() if p.user_id != entry.user_id]
        pool.append(entry)
        before = len(pool)
        pool = [p for p in pool if now - p.last_active < ACTIVE_THRESHOLD]
        if len(pool) != before:
            logger.info("Pruned %d inactive user(s) from match pool", before - len(pool))

        self.cache.set(
            POOL_CACHE_KEY,
            {"pools": [p.to_dict() for p in pool], "lastUpdated": now},
            ttl=ACTIVE_THRESHOLD,
        )
        return pool

    def get_candidates(self, user_id: str) -> list[MatchPoolEntry]:
        return [p for p in self.load_pool() if p.user_id != user_id]

    # ------------------------------------------------------------------
    # Match history
    # ------------------------------------------------------------------

    def load_match_history(self, user_id: str) -> MatchHistory:
        return MatchHistory.from_dict(self.cache.get(self.match_history_key(user_id)))

    def append_match(self, user_id: str, record: MatchRecord) -> MatchHistory:
        history = self.load_match_history(user_id)
        history.matches.append(record)
        history.last_updated = self.cache.now()
        self.cache.set(self.match_history_key(user_id), history.to_dict())
        return history

    def update_match_status(self, user_id: str, matched_user_id: str, status: str) -> MatchRecord | None:
        """Set the status of the latest match with ``matched_user_id``."""
        if status not in MATCH_STATUSES:
            raise ValueError(f"Unknown match status: {status}")
        history = self.load_match_history(user_id)
        for record in reversed(history.matches):
            if record.user_id == matched_user_id:
                record.status = status
                history.last_updated = self.cache.now()
                self.cache.set(self.match_history_key(user_id), history.to_dict())
                return record
        return None
