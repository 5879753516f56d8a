"""Builds a JSON-LD interest graph for the user and publishes it to the DKG when configured."""

from __future__ import annotations

import logging

from matchmaker.plugin.common import get_dkg_service, get_profile_service, get_store, recent_text, sender_name
from matchmaker.runtime import AgentRuntime, Evaluator, Memory, State
from matchmaker.services.dkg_service import DKGServiceError

logger = logging.getLogger(__name__)


def validate(runtime: AgentRuntime, message: Memory, state: State | None = None) -> bool:
    return True


def handler(runtime: AgentRuntime, message: Memory, state: State | None = None) -> bool:
    try:
        username = sender_name(runtime, message, state)
        graph = get_profile_service(runtime).extract_interests(recent_text(message, state), username)
        if not graph.interests:
            logger.info("No confident interests found for %s", username)
            return False
        document = graph.to_jsonld()
        store = get_store(runtime)
        store.save_interest_graph(message.user_id, document)

        dkg = get_dkg_service(runtime)
        if not dkg.enabled:
            logger.info("DKG credentials not set, interest graph for %s kept in cache only", username)
            return True
        # Extraction already succeeded; a publishing failure only loses the UAL
        try:
            ual = dkg.publish(document)
        except DKGServiceError:
            logger.error("Error publishing interest graph for %s to DKG", username, exc_info=True)
            return True
        store.save_interest_graph(message.user_id, document, ual=ual)
        return True
    except Exception:
        logger.error("Error in interestGraphEvaluator handler", exc_info=True)
        return False


interest_graph_evaluator = Evaluator(
    name="interestGraphEvaluator",
    similes=["EXTRACT_INTERESTS", "BUILD_INTEREST_GRAPH"],
    description="Extracts user interests and stores them as a knowledge graph",
    validate=validate,
    handler=handler,
)
