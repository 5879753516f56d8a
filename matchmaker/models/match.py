"""Match data models.

Pure data structures for the match pool and match results.
"""

from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field
from typing import Any

from .profile import MatchIntention, UserProfile

MATCH_STATUSES = ("pending", "accepted", "declined")


@dataclass
class MatchPoolEntry:
    """A candidate in the match pool."""
    user_id: str
    username: str
    match_intention: MatchIntention | None = None
    profile: UserProfile | None = None
    last_active: float = 0.0  # epoch seconds
    contact_info: dict[str, str] = dataclass_field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "userId": self.user_id,
            "username": self.username,
            "matchIntention": self.match_intention.to_dict() if self.match_intention else None,
            "profile": self.profile.to_dict() if self.profile else None,
            "lastActive": self.last_active,
            "contactInfo": self.contact_info,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MatchPoolEntry":
        """Create from dictionary."""
        intention = data.get("matchIntention")
        profile = data.get("profile")
        return cls(
            user_id=data.get("userId", ""),
            username=data.get("username", ""),
            match_intention=MatchIntention.from_dict(intention) if intention else None,
            profile=UserProfile.from_dict(profile) if profile else None,
            last_active=float(data.get("lastActive", 0) or 0),
            contact_info=data.get("contactInfo") or {},
        )

    def summary(self) -> dict[str, Any]:
        """Public view handed to other users' prompts."""
        return {
            "userId": self.user_id,
            "username": self.username,
            "matchIntention": {
                "networkingGoal": self.match_intention.networking_goal if self.match_intention else None,
                "industryPreference": self.match_intention.industry_preference if self.match_intention else [],
            },
            "lastActive": self.last_active,
        }


@dataclass
class MatchScore:
    """Heuristic compatibility score."""
    score: float = 0.0
    reasons: list[str] = dataclass_field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"score": self.score, "reasons": self.reasons}


@dataclass
class ScoredMatch:
    """Pool entry together with its heuristic score."""
    user: MatchPoolEntry
    match_score: MatchScore

    def to_dict(self) -> dict[str, Any]:
        return {"user": self.user.to_dict(), "matchScore": self.match_score.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScoredMatch":
        score = data.get("matchScore") or {}
        return cls(
            user=MatchPoolEntry.from_dict(data.get("user") or {}),
            match_score=MatchScore(
                score=float(score.get("score", 0) or 0),
                reasons=list(score.get("reasons") or []),
            ),
        )


@dataclass
class MatchRecord:
    """A match proposed to a user."""
    user_id: str
    username: str
    matched_at: float
    match_score: float
    reasons: list[str] = dataclass_field(default_factory=list)
    complementary_factors: list[str] = dataclass_field(default_factory=list)
    potential_synergies: list[str] = dataclass_field(default_factory=list)
    status: str = "pending"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "userId": self.user_id,
            "username": self.username,
            "matchedAt": self.matched_at,
            "matchScore": self.match_score,
            "reasons": self.reasons,
            "complementaryFactors": self.complementary_factors,
            "potentialSynergies": self.potential_synergies,
            "status": self.status,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MatchRecord":
        """Create from dictionary."""
        return cls(
            user_id=data.get("userId", ""),
            username=data.get("username", ""),
            matched_at=float(data.get("matchedAt", 0) or 0),
            match_score=float(data.get("matchScore", 0) or 0),
            reasons=list(data.get("reasons") or []),
            complementary_factors=list(data.get("complementaryFactors") or []),
            potential_synergies=list(data.get("potentialSynergies") or []),
            status=data.get("status", "pending"),
        )


@dataclass
class MatchHistory:
    """All matches proposed to one user."""
    matches: list[MatchRecord] = dataclass_field(default_factory=list)
    last_updated: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "matches": [m.to_dict() for m in self.matches],
            "lastUpdated": self.last_updated,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "MatchHistory":
        data = data if isinstance(data, dict) else {}
        return cls(
            matches=[MatchRecord.from_dict(m) for m in data.get("matches") or []],
            last_updated=float(data.get("lastUpdated", 0) or 0),
        )
