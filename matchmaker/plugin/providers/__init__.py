from .match_intention import match_intention_provider
from .match_pool import match_pool_provider
from .user_profile_status import user_profile_status_provider

__all__ = [
    "match_intention_provider",
    "user_profile_status_provider",
    "match_pool_provider",
]
