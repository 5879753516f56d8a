from .conversation import continue_action, ignore_action, none_action
from .serendipity import serendipity_action

__all__ = [
    "serendipity_action",
    "continue_action",
    "ignore_action",
    "none_action",
]
