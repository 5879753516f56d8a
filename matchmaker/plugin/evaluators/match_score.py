"""Ranks the match pool against the user's completed intention."""

from __future__ import annotations

import logging

from matchmaker.plugin.common import get_matching_service, get_store
from matchmaker.runtime import AgentRuntime, Evaluator, Memory, State
from matchmaker.services.matching_service import MATCH_THRESHOLD

logger = logging.getLogger(__name__)


def validate(runtime: AgentRuntime, message: Memory, state: State | None = None) -> bool:
    try:
        intention = get_store(runtime).load_intention(message.user_id)
        return bool(intention and intention.completed)
    except Exception:
        logger.error("Error in matchScoreEvaluator validate", exc_info=True)
        return False


def handler(runtime: AgentRuntime, message: Memory, state: State | None = None) -> bool:
    try:
        store = get_store(runtime)
        intention = store.load_intention(message.user_id)
        if intention is None:
            return False

        candidates = store.get_candidates(message.user_id)
        if not candidates:
            return False

        matches = get_matching_service(runtime).rank_pool(intention, candidates, threshold=MATCH_THRESHOLD)
        if not matches:
            return False

        store.save_scored_matches(message.user_id, matches)
        logger.info("Stored %d heuristic match(es) for %s", len(matches), message.user_id)
        return True
    except Exception:
        logger.error("Error in matchScoreEvaluator handler", exc_info=True)
        return False


match_score_evaluator = Evaluator(
    name="matchScoreEvaluator",
    similes=["EVALUATE_MATCH", "CALCULATE_MATCH_SCORE"],
    description="Evaluates compatibility between users for professional networking",
    validate=validate,
    handler=handler,
    examples=[
        {
            "context": "Evaluating match between two users with similar preferences",
            "messages": [
                {"user": "User1", "content": {"text": "I'm looking for mentorship in AI and blockchain"}},
                {"user": "User2", "content": {"text": "I want to mentor others in AI technology"}},
            ],
            "outcome": "Match score: 70% (Matching networking goals: mentorship, Common industries: AI)",
        }
    ],
)
