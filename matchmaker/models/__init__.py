"""Data models - Pure data structures with no business logic."""

from .interest import Interest, InterestGraph
from .match import MatchHistory, MatchPoolEntry, MatchRecord, MatchScore, ScoredMatch
from .profile import (
    MatchIntention,
    PlatformAccount,
    ProfessionalProfile,
    UserProfile,
)

__all__ = [
    "MatchIntention",
    "UserProfile",
    "ProfessionalProfile",
    "PlatformAccount",
    "MatchPoolEntry",
    "MatchScore",
    "ScoredMatch",
    "MatchRecord",
    "MatchHistory",
    "Interest",
    "InterestGraph",
]
