"""Matching Service - Compatibility scoring between users.

This module handles:
- Heuristic scoring of networking intentions (goal + shared industries)
- Ranking of the match pool against a threshold
- LLM judgement of profile compatibility, with retries
- Formatting of the match notification sent to the user

Interface Contract:
- calculate_match_score(a, b) -> MatchScore
- rank_pool(intention, candidates) -> list[ScoredMatch]
- evaluate_match(profile, candidate) -> MatchRecord | None
- format_match_notification(candidate, record) -> str
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from matchmaker.models import (
    MatchIntention,
    MatchPoolEntry,
    MatchRecord,
    MatchScore,
    ScoredMatch,
    UserProfile,
)
from matchmaker.services.llm_service import ModelClass, generate_object_array
from matchmaker.templates import MATCHMAKING_TEMPLATE, compose_context

logger = logging.getLogger(__name__)

GOAL_POINTS = 40
INDUSTRY_POINTS = 30
MATCH_THRESHOLD = 60  # Minimum heuristic score for a match
MIN_LLM_MATCH_SCORE = 0.1
MAX_RETRIES = 3
RETRY_DELAY = 1.0  # seconds
DEFAULT_COMPLEMENTARY_FACTORS = ["Technical expertise complement", "Industry alignment"]


class MatchingServiceError(Exception):
    """Raised when matching fails."""
    pass


def calculate_match_score(user1: MatchIntention, user2: MatchIntention) -> MatchScore:
    """Score two intentions: 40 for the same goal, up to 30 for shared industries."""
    score = MatchScore()

    if user1.networking_goal and user1.networking_goal == user2.networking_goal:
        score.score += GOAL_POINTS
        score.reasons.append("Matching networking goals")

    common = [ind for ind in user1.industry_preference if ind in user2.industry_preference]
    if common:
        denominator = max(len(user1.industry_preference), len(user2.industry_preference), 1)
        score.score += INDUSTRY_POINTS * (len(common) / denominator)
        score.reasons.append(f"Common industries: {', '.join(common)}")

    return score


def format_profile_summary(profile: UserProfile) -> str:
    context = profile.professional_context
    goals = profile.goals_objectives
    prefs = profile.preferences_requirements
    return (
        f"Role: {context.role or 'Not specified'}\n"
        f"Industry: {context.industry or 'Not specified'}\n"
        f"Experience: {context.experience_level or 'Not specified'}\n"
        f"Expertise: {', '.join(context.expertise) or 'Not specified'}\n"
        f"Goals: {', '.join(goals.target_outcomes) or 'Not specified'}\n"
        f"Looking for: {', '.join(goals.relationship_type) or 'Not specified'}\n"
        f"Industry focus: {', '.join(prefs.industry_focus) or 'Not specified'}"
    )


def format_match_notification(candidate: MatchPoolEntry, record: MatchRecord) -> str:
    """User-facing introduction proposal."""
    profile = candidate.profile or UserProfile()
    role = profile.professional_context.role or "Not specified"
    focus = ", ".join(profile.preferences_requirements.industry_focus) or "Not specified"
    goals = ", ".join(profile.goals_objectives.target_outcomes) or "Not specified"
    reasons = "\n".join(f"• {reason}" for reason in record.reasons)
    return (
        f"Great news! I found a match for you! @{candidate.username} ({role}) "
        f"is interested in {focus}.\n\n"
        f"Their goals: {goals}\n\n"
        f"Why this is a great match:\n{reasons}\n\n"
        f"Would you like me to make an introduction?"
    )


class MatchingService:
    """Service for scoring and judging potential matches."""

    def __init__(
        self,
        llm_service=None,
        *,
        max_retries: int = MAX_RETRIES,
        retry_delay: float = RETRY_DELAY,
        exponential_backoff: bool = False,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.time,
    ):
        """Initialize with optional dependencies.

        Args:
            llm_service: LLM service for match judgement. If None, uses default.
            max_retries: Attempts per candidate before giving up
            retry_delay: Base delay between attempts in seconds
            exponential_backoff: Double the delay after each failed attempt
        """
        self._llm = llm_service
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.exponential_backoff = exponential_backoff
        self._sleep = sleep
        self._clock = clock

    @property
    def llm(self):
        """Lazy load LLM service."""
        if self._llm is None:
            from matchmaker.services.llm_service import LLMService
            self._llm = LLMService.get_instance()
        return self._llm

    def rank_pool(
        self,
        intention: MatchIntention,
        candidates: list[MatchPoolEntry],
        *,
        threshold: float = MATCH_THRESHOLD,
    ) -> list[ScoredMatch]:
        """Score candidates, keep those at or above threshold, best first."""
        scored = [
            ScoredMatch(user=candidate, match_score=calculate_match_score(intention, candidate.match_intention))
            for candidate in candidates
            if candidate.match_intention is not None
        ]
        matches = [m for m in scored if m.match_score.score >= threshold]
        matches.sort(key=lambda m: m.match_score.score, reverse=True)
        return matches

    def evaluate_match(self, current_profile: UserProfile, candidate: MatchPoolEntry) -> MatchRecord | None:
        """Ask the LLM whether ``candidate`` is a match for ``current_profile``.

        Failed calls are retried up to ``max_retries`` times; an empty answer
        or a negative verdict is final.

        Returns:
            MatchRecord | None: A pending match record, or None if no match
        """
        if candidate.profile is None:
            logger.info("Skipping %s: no networking profile in pool", candidate.username)
            return None

        context = compose_context(MATCHMAKING_TEMPLATE, {
            "currentUser": format_profile_summary(current_profile),
            "potentialMatch": format_profile_summary(candidate.profile),
        })

        attempt = 0
        while attempt < self.max_retries:
            try:
                logger.info(
                    "Starting match evaluation attempt %d for %s",
                    attempt + 1, candidate.username,
                )
                results = generate_object_array(self.llm, context, model_class=ModelClass.SMALL)
                if not results:
                    logger.warning("No evaluation results returned")
                    return None
                return self._to_record(candidate, results[0])
            except Exception as e:
                attempt += 1
                logger.error("Error in match evaluation (attempt %d): %s", attempt, e)
                if attempt >= self.max_retries:
                    logger.error("Max retries reached for match evaluation")
                    return None
                self._sleep(self._delay(attempt))
        return None

    def _delay(self, attempt: int) -> float:
        if self.exponential_backoff:
            return self.retry_delay * (2 ** (attempt - 1))
        return self.retry_delay

    def _to_record(self, candidate: MatchPoolEntry, result: dict) -> MatchRecord | None:
        try:
            score = float(result.get("matchScore", 0) or 0)
        except (TypeError, ValueError) as e:
            raise MatchingServiceError(f"Invalid matchScore: {result.get('matchScore')!r}") from e
        is_match = bool(result.get("isMatch"))
        logger.info("Evaluation result for %s: isMatch=%s score=%.2f", candidate.username, is_match, score)
        if not (is_match and score >= MIN_LLM_MATCH_SCORE):
            return None

        reasons = [str(r) for r in result.get("reasons") or []]
        factors = [str(f) for f in result.get("complementaryFactors") or []]
        return MatchRecord(
            user_id=candidate.user_id,
            username=candidate.username,
            matched_at=self._clock(),
            match_score=score,
            reasons=reasons,
            complementary_factors=factors or list(DEFAULT_COMPLEMENTARY_FACTORS),
            status="pending",
        )
