"""Matchmaker plugin - evaluators, providers and actions for professional networking."""

from matchmaker.runtime import Plugin

from .actions import continue_action, ignore_action, none_action, serendipity_action
from .evaluators import (
    interest_graph_evaluator,
    match_intention_evaluator,
    match_score_evaluator,
    professional_profile_evaluator,
    user_profile_evaluator,
)
from .providers import match_intention_provider, match_pool_provider, user_profile_status_provider

matchmaker_plugin = Plugin(
    name="matchmaker",
    description="Plugin for professional networking and matching functionality",
    actions=[serendipity_action, continue_action, ignore_action, none_action],
    evaluators=[
        match_intention_evaluator,
        user_profile_evaluator,
        professional_profile_evaluator,
        interest_graph_evaluator,
        match_score_evaluator,
    ],
    providers=[match_intention_provider, user_profile_status_provider, match_pool_provider],
)

__all__ = ["matchmaker_plugin"]
