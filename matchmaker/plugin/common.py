"""Shared lookups for plugin handlers."""

from __future__ import annotations

from matchmaker.models import PlatformAccount
from matchmaker.runtime import AgentRuntime, Memory, State
from matchmaker.services.dkg_service import DKGService
from matchmaker.services.matching_service import MatchingService
from matchmaker.services.profile_service import ProfileService
from matchmaker.services.store import MatchmakerStore

PROFILE_SERVICE = "profile"
MATCHING_SERVICE = "matching"
DKG_SERVICE = "dkg"


def get_store(runtime: AgentRuntime) -> MatchmakerStore:
    return MatchmakerStore(runtime.cache_manager, runtime.character_name)


def get_profile_service(runtime: AgentRuntime) -> ProfileService:
    service = runtime.get_service(PROFILE_SERVICE)
    if service is None:
        service = ProfileService(runtime.llm)
        runtime.register_service(PROFILE_SERVICE, service)
    return service


def get_matching_service(runtime: AgentRuntime) -> MatchingService:
    service = runtime.get_service(MATCHING_SERVICE)
    if service is None:
        service = MatchingService(runtime.llm)
        runtime.register_service(MATCHING_SERVICE, service)
    return service


def get_dkg_service(runtime: AgentRuntime) -> DKGService:
    service = runtime.get_service(DKG_SERVICE)
    if service is None:
        service = DKGService()
        runtime.register_service(DKG_SERVICE, service)
    return service


def sender_name(runtime: AgentRuntime, message: Memory, state: State | None) -> str:
    if state and state.get("senderName"):
        return state["senderName"]
    return runtime.display_name(message.user_id)


def recent_text(message: Memory, state: State | None) -> str:
    if state and state.get("recentMessages"):
        return state["recentMessages"]
    return message.content.text


def new_platform_account(runtime: AgentRuntime, message: Memory, username: str) -> PlatformAccount | None:
    """Account for the message's source platform, if it is a registered client."""
    source = (message.content.source or "").lower()
    if source and source in runtime.clients:
        return PlatformAccount(platform=source, username=username)
    return None
