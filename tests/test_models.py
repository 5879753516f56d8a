"""数据模型单元测试。

测试覆盖:
- MatchIntention / UserProfile / ProfessionalProfile 序列化与必填字段
- 匹配池条目与匹配记录
- 兴趣图谱的置信度过滤与 JSON-LD 输出
"""

from datetime import datetime, timezone

from matchmaker.models import (
    InterestGraph,
    MatchHistory,
    MatchIntention,
    MatchPoolEntry,
    MatchRecord,
    ProfessionalProfile,
    ScoredMatch,
    UserProfile,
)
from matchmaker.models.match import MatchScore


class TestMatchIntention:
    """测试 MatchIntention 模型。"""

    def test_to_dict_uses_camel_case(self):
        """测试序列化使用 camelCase 字段名。"""
        intention = MatchIntention(networking_goal="mentorship", industry_preference=["AI"])

        assert intention.to_dict() == {
            "networkingGoal": "mentorship",
            "industryPreference": ["AI"],
            "completed": False,
        }

    def test_from_dict_tolerates_nulls(self):
        """测试 LLM 返回 null 时使用默认值。"""
        intention = MatchIntention.from_dict({"networkingGoal": None, "industryPreference": None})

        assert intention.networking_goal is None
        assert intention.industry_preference == []
        assert intention.completed is False

    def test_from_dict_wraps_single_string(self):
        """测试单个字符串被包装为列表。"""
        intention = MatchIntention.from_dict({"industryPreference": "DeFi"})

        assert intention.industry_preference == ["DeFi"]

    def test_from_dict_non_dict(self):
        """测试非字典输入返回空模型。"""
        assert MatchIntention.from_dict(None) == MatchIntention()
        assert MatchIntention.from_dict("garbage") == MatchIntention()

    def test_missing_fields(self):
        """测试缺失字段列表。"""
        assert MatchIntention().missing_fields() == ["networkingGoal", "industryPreference"]
        assert MatchIntention(networking_goal="x").missing_fields() == ["industryPreference"]
        assert MatchIntention(networking_goal="x", industry_preference=["AI"]).missing_fields() == []


class TestUserProfile:
    """测试 UserProfile 模型。"""

    def test_roundtrip_preserves_fields(self, sample_profile):
        """测试 to_dict / from_dict 保留全部字段。"""
        restored = UserProfile.from_dict(sample_profile.to_dict())

        assert restored == sample_profile

    def test_missing_fields_labels(self):
        """测试缺失字段使用可读标签。"""
        missing = UserProfile().missing_fields()

        assert missing == [
            "professional role",
            "professional industry",
            "goals primary purpose",
            "goals relationship type",
            "preferences industry focus",
        ]

    def test_complete_profile_has_no_missing_fields(self, sample_profile):
        """测试完整 Profile 没有缺失字段。"""
        assert sample_profile.missing_fields() == []

    def test_has_minimum_match_fields(self, sample_profile):
        """测试匹配所需的最少字段。"""
        assert sample_profile.has_minimum_match_fields() is True

        profile = UserProfile.from_dict(sample_profile.to_dict())
        profile.preferences_requirements.industry_focus = []
        assert profile.has_minimum_match_fields() is False

    def test_platform_accounts_roundtrip(self):
        """测试平台账号的序列化。"""
        profile = UserProfile.from_dict({
            "platformAccounts": [{"platform": "telegram", "username": "alice"}, "bad"],
        })

        assert len(profile.platform_accounts) == 1
        assert profile.to_dict()["platformAccounts"] == [{"platform": "telegram", "username": "alice"}]


class TestProfessionalProfile:
    """测试 ProfessionalProfile 模型。"""

    def test_empty_profile_not_ready(self):
        """测试空 Profile 未就绪。"""
        assert ProfessionalProfile().is_ready() is False

    def test_ready_profile(self):
        """测试两项个人信息、意图类型和偏好齐全时就绪。"""
        profile = ProfessionalProfile.from_dict({
            "personal": {"skills": ["Solidity"], "locations": ["Berlin"]},
            "intention": {"type": "collaboration", "preferences": {"requiredSkills": ["React"]}},
        })

        assert profile.is_ready() is True

    def test_not_ready_without_preferences(self):
        """测试没有偏好时未就绪。"""
        profile = ProfessionalProfile.from_dict({
            "personal": {"skills": ["Solidity"], "locations": ["Berlin"]},
            "intention": {"type": "collaboration"},
        })

        assert profile.is_ready() is False

    def test_invalid_compensation_range_dropped(self):
        """测试无效薪资范围被丢弃。"""
        profile = ProfessionalProfile.from_dict({
            "intention": {"preferences": {"compensationRange": ["a", "b"]}},
        })

        assert profile.intention.preferences.compensation_range == []


class TestMatchModels:
    """测试匹配相关模型。"""

    def test_pool_entry_roundtrip(self, pool_entry):
        """测试匹配池条目序列化。"""
        restored = MatchPoolEntry.from_dict(pool_entry.to_dict())

        assert restored == pool_entry

    def test_pool_entry_summary_hides_profile(self, pool_entry):
        """测试摘要只包含公开字段。"""
        summary = pool_entry.summary()

        assert summary["username"] == "sarah"
        assert summary["matchIntention"]["networkingGoal"] == "finding partners"
        assert "profile" not in summary

    def test_pool_entry_without_intention(self):
        """测试没有意图的条目摘要。"""
        summary = MatchPoolEntry(user_id="u", username="bob").summary()

        assert summary["matchIntention"] == {"networkingGoal": None, "industryPreference": []}

    def test_scored_match_roundtrip(self, pool_entry):
        """测试评分结果序列化。"""
        scored = ScoredMatch(user=pool_entry, match_score=MatchScore(score=70, reasons=["Matching networking goals"]))

        restored = ScoredMatch.from_dict(scored.to_dict())

        assert restored.match_score.score == 70
        assert restored.user.username == "sarah"

    def test_match_history_from_none(self):
        """测试空缓存返回空历史。"""
        history = MatchHistory.from_dict(None)

        assert history.matches == []
        assert history.last_updated == 0.0

    def test_match_record_defaults_to_pending(self):
        """测试匹配记录默认状态。"""
        record = MatchRecord.from_dict({"userId": "u", "username": "bob", "matchScore": 0.7})

        assert record.status == "pending"
        assert record.match_score == 0.7


class TestInterestGraph:
    """测试兴趣图谱。"""

    def test_keeps_only_confident_interests(self):
        """测试只保留置信度大于 0.5 的兴趣。"""
        graph = InterestGraph.from_extraction("alice", {
            "interests": [
                {"category": "technology", "name": "AI", "confidence": 0.9, "evidence": "says so"},
                {"category": "technology", "name": "VR", "confidence": 0.5, "evidence": "maybe"},
                {"category": "hobby", "name": "", "confidence": 0.8},
                "not-a-dict",
            ],
        })

        assert [i.name for i in graph.interests] == ["AI"]

    def test_missing_extraction(self):
        """测试没有提取结果时图谱为空。"""
        assert InterestGraph.from_extraction("alice", None).interests == []

    def test_jsonld_shape(self):
        """测试 JSON-LD 输出结构。"""
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        graph = InterestGraph.from_extraction(
            "alice",
            {"interests": [{"category": "technology", "name": "AI", "confidence": 0.9, "evidence": "e"}]},
            created_at=created,
        )

        doc = graph.to_jsonld()

        assert doc["@context"] == "https://schema.org"
        assert doc["@type"] == "Person"
        assert doc["@id"] == "uuid:alice"
        assert doc["dateCreated"] == created.isoformat()
        assert doc["hasInterest"][0]["name"] == "AI"
        assert doc["metadata"]["provider"]["name"] == "Eliza Matchmaker"
