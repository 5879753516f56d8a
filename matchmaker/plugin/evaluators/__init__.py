from .interest_graph import interest_graph_evaluator
from .match_intention import match_intention_evaluator
from .match_score import match_score_evaluator
from .professional_profile import professional_profile_evaluator
from .user_profile import user_profile_evaluator

__all__ = [
    "match_intention_evaluator",
    "user_profile_evaluator",
    "professional_profile_evaluator",
    "interest_graph_evaluator",
    "match_score_evaluator",
]
