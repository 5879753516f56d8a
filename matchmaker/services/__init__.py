"""Service layer - Business logic modules.

Each service module has a clear interface and can be developed/tested independently.
"""

from .cache_service import CacheManager, FileCacheManager, MemoryCacheManager, create_cache_manager
from .dkg_service import DKGService
from .llm_service import LLMService, ModelClass
from .matching_service import MatchingService
from .profile_service import ProfileService
from .store import MatchmakerStore

__all__ = [
    "LLMService",
    "ModelClass",
    "CacheManager",
    "MemoryCacheManager",
    "FileCacheManager",
    "create_cache_manager",
    "MatchmakerStore",
    "ProfileService",
    "MatchingService",
    "DKGService",
]
