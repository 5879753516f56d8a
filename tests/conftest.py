"""测试配置和共享 Fixtures。"""

import json

import pytest

from matchmaker.models import MatchIntention, MatchPoolEntry, UserProfile
from matchmaker.plugin import matchmaker_plugin
from matchmaker.plugin.common import DKG_SERVICE, MATCHING_SERVICE
from matchmaker.runtime import AgentRuntime, Content, Memory
from matchmaker.services.cache_service import MemoryCacheManager
from matchmaker.services.dkg_service import DKGService
from matchmaker.services.matching_service import MatchingService
from matchmaker.services.store import MatchmakerStore


AGENT_NAME = "Matchmaker"
AGENT_ID = "test-agent"

# Prompt markers for MockLLMService.route()
INTENTION_PROMPT = "Extract professional networking preferences"
USER_PROFILE_PROMPT = "Extract the user's professional networking profile"
PROFESSIONAL_PROMPT = "Extract professional profile attributes"
INTEREST_PROMPT = "Extract the user's (goal & preference)"
MATCHMAKING_PROMPT = "Evaluate match compatibility"
REPLY_PROMPT = "professional networking matchmaker chatting"


# ============================================================================
# Mock Services
# ============================================================================

class MockLLMService:
    """测试用 Mock LLM 服务。

    可以通过设置 response 属性来控制默认返回值。
    可以通过 queue() 按顺序返回多个响应。
    可以通过 route() 按提示词内容返回不同响应。
    可以通过设置 should_fail 来模拟失败。
    """

    def __init__(self):
        self.response = "[]"
        self.responses = []
        self.routes = []
        self.should_fail = False
        self.fail_count = 0
        self.max_failures = 0
        self.call_count = 0
        self.prompts = []
        self.model_classes = []

    def call(self, prompt: str, *, json_mode: bool = False, model_class=None) -> str:
        self.call_count += 1
        self.prompts.append(prompt)
        self.model_classes.append(model_class)

        if self.should_fail:
            if self.fail_count < self.max_failures:
                self.fail_count += 1
                raise Exception("Mock LLM failure")

        for marker, response in self.routes:
            if marker in prompt:
                return response
        if self.responses:
            return self.responses.pop(0)
        return self.response

    def queue(self, *responses):
        """按顺序追加响应；对象会被序列化为 JSON。"""
        for response in responses:
            self.responses.append(response if isinstance(response, str) else json.dumps(response))

    def route(self, marker: str, response):
        """当提示词包含 marker 时返回 response。"""
        self.routes.append((marker, response if isinstance(response, str) else json.dumps(response)))

    def prompts_containing(self, marker: str) -> list:
        return [p for p in self.prompts if marker in p]

    def reset(self):
        """重置状态。"""
        self.call_count = 0
        self.fail_count = 0
        self.prompts = []
        self.model_classes = []


class StubDKGClient:
    """测试用 DKG 客户端，记录发布的资产。"""

    def __init__(self, ual="did:dkg:gnosis:10200/0xabc/1", error=None):
        self.ual = ual
        self.error = error
        self.created = []
        self.asset = self

    def create(self, content, epochs):
        self.created.append((content, epochs))
        if self.error:
            raise self.error
        return {"UAL": self.ual}


class FakeClock:
    """可手动推进的时钟。"""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ============================================================================
# Service Fixtures
# ============================================================================

@pytest.fixture
def mock_llm() -> MockLLMService:
    """创建 Mock LLM 服务。"""
    return MockLLMService()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock) -> MemoryCacheManager:
    """使用假时钟的内存缓存。"""
    return MemoryCacheManager(clock=clock)


@pytest.fixture
def store(cache) -> MatchmakerStore:
    return MatchmakerStore(cache, AGENT_NAME)


@pytest.fixture
def sleeps() -> list:
    """记录 sleep 调用的参数。"""
    return []


@pytest.fixture
def runtime(cache, mock_llm, clock, sleeps) -> AgentRuntime:
    """加载 matchmaker 插件的运行时（无重试延迟）。"""
    rt = AgentRuntime(
        AGENT_NAME,
        cache,
        agent_id=AGENT_ID,
        llm=mock_llm,
        plugins=[matchmaker_plugin],
        clients=["telegram"],
    )
    rt.register_service(
        MATCHING_SERVICE,
        MatchingService(mock_llm, retry_delay=0, sleep=sleeps.append, clock=clock),
    )
    rt.register_service(DKG_SERVICE, DKGService(public_key=None, private_key=None))
    return rt


@pytest.fixture
def make_message(runtime):
    """创建消息并登记账号。"""

    def _make(text: str, user_id: str = "user-1", username: str = "alice",
              room_id: str = "room-1", source: str | None = "telegram") -> Memory:
        runtime.database_adapter.ensure_account(user_id, username)
        runtime.database_adapter.add_participant(room_id, user_id)
        return Memory(user_id=user_id, room_id=room_id, content=Content(text=text, source=source))

    return _make


# ============================================================================
# Profile Fixtures
# ============================================================================

@pytest.fixture
def complete_intention() -> MatchIntention:
    return MatchIntention(
        networking_goal="finding partners",
        industry_preference=["AI", "events"],
        completed=True,
    )


@pytest.fixture
def sample_profile() -> UserProfile:
    """创建已完成的示例 UserProfile。"""
    return UserProfile.from_dict({
        "professionalContext": {
            "role": "Event Director",
            "industry": "Events",
            "experienceLevel": "senior",
            "expertise": ["event planning", "community building"],
        },
        "goalsObjectives": {
            "primaryPurpose": "find technology partners",
            "targetOutcomes": ["pilot AI attendee engagement"],
            "relationshipType": ["partnership"],
        },
        "preferencesRequirements": {
            "industryFocus": ["AI", "events"],
        },
        "completed": True,
    })


@pytest.fixture
def partner_profile() -> UserProfile:
    """创建候选人的 UserProfile。"""
    return UserProfile.from_dict({
        "professionalContext": {
            "role": "Founder",
            "industry": "Computer Vision",
            "expertise": ["crowd analytics"],
        },
        "goalsObjectives": {
            "primaryPurpose": "pilot with event organizers",
            "targetOutcomes": ["2-3 event partnerships"],
            "relationshipType": ["partnership"],
        },
        "preferencesRequirements": {
            "industryFocus": ["events", "AI"],
        },
        "completed": True,
    })


@pytest.fixture
def pool_entry(partner_profile, clock) -> MatchPoolEntry:
    return MatchPoolEntry(
        user_id="user-2",
        username="sarah",
        match_intention=MatchIntention(
            networking_goal="finding partners",
            industry_preference=["AI", "events"],
            completed=True,
        ),
        profile=partner_profile,
        last_active=clock(),
    )
