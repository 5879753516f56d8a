"""Profile Service - Profile extraction from conversation and merging.

This module handles:
- Networking intention extraction (goal + industries)
- Networking profile extraction (context, goals, preferences)
- Professional profile extraction (personal background + intention)
- Interest extraction into a JSON-LD interest graph

Every extraction sends the recent conversation together with what is
already known, then merges the LLM's answer into the known record.

Interface Contract:
- extract_match_intention(messages, current) -> MatchIntention | None
- extract_user_profile(messages, current) -> UserProfile | None
- extract_professional_profile(messages, current) -> ProfessionalProfile | None
- extract_interests(messages, username) -> InterestGraph
- All methods raise ProfileServiceError on failure
"""

from __future__ import annotations

import logging
from typing import Any

from matchmaker.models import (
    InterestGraph,
    MatchIntention,
    ProfessionalProfile,
    UserProfile,
)
from matchmaker.services.llm_service import ModelClass, generate_object_array
from matchmaker.templates import (
    INTEREST_TEMPLATE,
    MATCH_INTENTION_TEMPLATE,
    PROFESSIONAL_PROFILE_TEMPLATE,
    USER_PROFILE_TEMPLATE,
    compose_context,
)

logger = logging.getLogger(__name__)


class ProfileServiceError(Exception):
    """Raised when profile extraction fails."""
    pass


def union(*lists: list[Any] | None) -> list[Any]:
    """Concatenate lists dropping duplicates, keeping first-seen order."""
    seen: list[Any] = []
    for items in lists:
        for item in items or []:
            if item not in seen:
                seen.append(item)
    return seen


def _has_value(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    return True


def _as_list(value: Any) -> list[Any]:
    """Coerce an extracted list field; the model sometimes answers with a bare string."""
    if isinstance(value, list):
        return value
    return [value] if _has_value(value) else []


def deep_merge(current: dict[str, Any], new: dict[str, Any]) -> dict[str, Any]:
    """Merge ``new`` into ``current``.

    Nested dicts merge recursively, lists are unioned and scalars are only
    overwritten by non-empty values.
    """
    merged = dict(current)
    for key, value in (new or {}).items():
        existing = merged.get(key)
        if isinstance(value, dict):
            merged[key] = deep_merge(existing if isinstance(existing, dict) else {}, value)
        elif isinstance(value, list) or isinstance(existing, list):
            merged[key] = union(existing if isinstance(existing, list) else [], _as_list(value))
        elif _has_value(value):
            merged[key] = value
    return merged


def merge_match_intention(current: MatchIntention, extracted: dict[str, Any]) -> MatchIntention:
    """Later statements win; fields the model left null keep their value."""
    data = current.to_dict()
    for key in MatchIntention.REQUIRED_FIELDS:
        if _has_value(extracted.get(key)) and extracted.get(key) != []:
            data[key] = extracted[key]
    merged = MatchIntention.from_dict(data)
    merged.completed = not merged.missing_fields()
    return merged


def merge_user_profiles(current: UserProfile, extracted: dict[str, Any]) -> UserProfile:
    data = deep_merge(current.to_dict(), {
        key: extracted[key]
        for key in ("professionalContext", "goalsObjectives", "preferencesRequirements")
        if isinstance(extracted.get(key), dict)
    })
    merged = UserProfile.from_dict(data)
    merged.completed = not merged.missing_fields()
    return merged


def merge_professional_profiles(current: ProfessionalProfile, new_info: dict[str, Any]) -> ProfessionalProfile:
    """Merge newly extracted personal/intention data into a professional profile."""
    merged = current.to_dict()

    personal = new_info.get("personal")
    if isinstance(personal, dict):
        base = merged["personal"]
        combined = {**base, **{k: v for k, v in personal.items() if _has_value(v)}}
        for key in ("skills", "industries", "locations", "interests"):
            combined[key] = union(base.get(key), _as_list(personal.get(key)))
        if isinstance(personal.get("currentPosition"), dict):
            combined["currentPosition"] = {
                **base["currentPosition"],
                **{k: v for k, v in personal["currentPosition"].items() if v},
            }
        merged["personal"] = combined

    intention = new_info.get("intention")
    if isinstance(intention, dict):
        base = merged["intention"]
        base_prefs = base["preferences"]
        new_prefs = intention.get("preferences") if isinstance(intention.get("preferences"), dict) else {}
        prefs = {**base_prefs, **{k: v for k, v in new_prefs.items() if _has_value(v)}}
        for key in ("requiredSkills", "preferredIndustries", "locationPreferences"):
            prefs[key] = union(base_prefs.get(key), _as_list(new_prefs.get(key)))
        merged["intention"] = {
            "type": intention.get("type") or base["type"],
            "description": intention.get("description") or base["description"],
            "preferences": prefs,
        }

    return ProfessionalProfile.from_dict(merged)


class ProfileService:
    """Service for profile extraction and management."""

    def __init__(self, llm_service=None):
        """Initialize with optional LLM service dependency.

        Args:
            llm_service: LLM service for AI extraction. If None, uses default.
        """
        self._llm = llm_service

    @property
    def llm(self):
        """Lazy load LLM service."""
        if self._llm is None:
            from matchmaker.services.llm_service import LLMService
            self._llm = LLMService.get_instance()
        return self._llm

    def extract_match_intention(
        self,
        recent_messages: str,
        current: MatchIntention | None = None,
    ) -> MatchIntention | None:
        """Extract networking goal and industry preferences.

        Args:
            recent_messages: Formatted recent conversation
            current: What is already known, if anything

        Returns:
            MatchIntention | None: Merged intention, or None if nothing was extracted

        Raises:
            ProfileServiceError: If extraction fails
        """
        current = current or MatchIntention()
        results = self._extract(MATCH_INTENTION_TEMPLATE, {
            "recentMessages": recent_messages,
            "currentInfo": current.to_dict(),
        })
        if not results:
            return None
        return merge_match_intention(current, results[0])

    def extract_user_profile(
        self,
        recent_messages: str,
        current: UserProfile | None = None,
    ) -> UserProfile | None:
        """Extract and merge the networking profile.

        Returns:
            UserProfile | None: Merged profile, or None if nothing new was found

        Raises:
            ProfileServiceError: If extraction fails
        """
        current = current or UserProfile()
        results = self._extract(USER_PROFILE_TEMPLATE, {
            "recentMessages": recent_messages,
            "currentProfile": current.to_dict(),
        })
        if not results or not results[0]:
            return None
        return merge_user_profiles(current, results[0])

    def extract_professional_profile(
        self,
        recent_messages: str,
        current: ProfessionalProfile | None = None,
    ) -> ProfessionalProfile | None:
        """Extract and merge personal background and focused intention."""
        current = current or ProfessionalProfile()
        results = self._extract(PROFESSIONAL_PROFILE_TEMPLATE, {
            "recentMessages": recent_messages,
            "currentProfile": current.to_dict(),
        })
        if not results or not results[0]:
            return None
        return merge_professional_profiles(current, results[0])

    def extract_interests(self, recent_messages: str, username: str) -> InterestGraph:
        """Extract interests with confidence and evidence into a graph.

        Raises:
            ProfileServiceError: If extraction fails
        """
        results = self._extract(INTEREST_TEMPLATE, {"recentMessages": recent_messages})
        graph = InterestGraph.from_extraction(username, results[0] if results else None)
        logger.info("Extracted %d interest(s) for %s", len(graph.interests), username)
        return graph

    def _extract(self, template: str, state: dict[str, Any]) -> list[dict[str, Any]]:
        context = compose_context(template, state)
        try:
            return generate_object_array(self.llm, context, model_class=ModelClass.LARGE)
        except Exception as e:
            raise ProfileServiceError(f"Profile extraction failed: {e}") from e
