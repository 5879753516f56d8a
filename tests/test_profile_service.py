"""ProfileService 单元测试。

测试覆盖:
- 列表合并与深度合并
- 意图提取与完成状态
- UserProfile / ProfessionalProfile 提取与合并
- 兴趣提取
- 错误处理
"""

import pytest

from matchmaker.models import MatchIntention, ProfessionalProfile, UserProfile
from matchmaker.services.llm_service import ModelClass
from matchmaker.services.profile_service import (
    ProfileService,
    ProfileServiceError,
    deep_merge,
    merge_match_intention,
    merge_professional_profiles,
    merge_user_profiles,
    union,
)


class TestMergeHelpers:
    """测试合并辅助函数。"""

    def test_union_keeps_order_without_duplicates(self):
        assert union(["a", "b"], ["b", "c"], None) == ["a", "b", "c"]

    def test_deep_merge_nested(self):
        """测试嵌套字典递归合并，空值不覆盖。"""
        current = {"ctx": {"role": "CTO", "skills": ["go"]}, "name": "x"}
        new = {"ctx": {"role": "", "skills": ["rust", "go"]}, "name": None}

        assert deep_merge(current, new) == {"ctx": {"role": "CTO", "skills": ["go", "rust"]}, "name": "x"}

    def test_deep_merge_overwrites_scalars(self):
        """测试非空标量覆盖旧值。"""
        assert deep_merge({"role": "CTO"}, {"role": "CEO"}) == {"role": "CEO"}

    def test_deep_merge_wraps_bare_string_into_list(self):
        """测试列表字段收到单个字符串时并入已有列表。"""
        assert deep_merge({"skills": ["go"]}, {"skills": "rust"}) == {"skills": ["go", "rust"]}
        assert deep_merge({"skills": ["go"]}, {"skills": "  "}) == {"skills": ["go"]}


class TestMergeUserProfiles:
    """测试 merge_user_profiles()。"""

    def test_bare_string_keeps_existing_list(self, sample_profile):
        """测试 LLM 返回字符串时不丢失已有的专长。"""
        merged = merge_user_profiles(sample_profile, {
            "professionalContext": {"expertise": "sponsorship"},
            "preferencesRequirements": {"industryFocus": "AI"},
        })

        assert merged.professional_context.expertise == ["event planning", "community building", "sponsorship"]
        assert merged.preferences_requirements.industry_focus == ["AI", "events"]


class TestMergeMatchIntention:
    """测试 merge_match_intention()。"""

    def test_null_does_not_overwrite(self):
        """测试 null 值不覆盖已知字段。"""
        current = MatchIntention(networking_goal="mentorship")

        merged = merge_match_intention(current, {"networkingGoal": None, "industryPreference": ["AI"]})

        assert merged.networking_goal == "mentorship"
        assert merged.industry_preference == ["AI"]
        assert merged.completed is True

    def test_new_values_override(self):
        """测试新值覆盖旧值。"""
        current = MatchIntention(networking_goal="mentorship", industry_preference=["AI"])

        merged = merge_match_intention(current, {"networkingGoal": "investing"})

        assert merged.networking_goal == "investing"

    def test_incomplete_intention(self):
        """测试缺少字段时未完成。"""
        merged = merge_match_intention(MatchIntention(), {"networkingGoal": "hiring"})

        assert merged.completed is False


class TestMergeProfessionalProfiles:
    """测试 merge_professional_profiles()。"""

    def test_personal_lists_are_unioned(self):
        current = ProfessionalProfile.from_dict({"personal": {"skills": ["Solidity"], "experienceLevel": "mid"}})

        merged = merge_professional_profiles(current, {
            "personal": {"skills": ["Rust", "Solidity"], "experienceLevel": "senior"},
        })

        assert merged.personal.skills == ["Solidity", "Rust"]
        assert merged.personal.experience_level == "senior"

    def test_bare_string_list_fields(self):
        """测试列表字段为字符串时作为单个元素合并，而不是逐字符拆分。"""
        current = ProfessionalProfile.from_dict({
            "personal": {"skills": ["Go"]},
            "intention": {"preferences": {"requiredSkills": ["React"]}},
        })

        merged = merge_professional_profiles(current, {
            "personal": {"skills": "Python", "locations": "Berlin"},
            "intention": {"preferences": {"requiredSkills": "Solidity"}},
        })

        assert merged.personal.skills == ["Go", "Python"]
        assert merged.personal.locations == ["Berlin"]
        assert merged.intention.preferences.required_skills == ["React", "Solidity"]

    def test_blank_scalar_does_not_overwrite(self):
        """测试空字符串不覆盖已知的个人字段。"""
        current = ProfessionalProfile.from_dict({"personal": {"experienceLevel": "senior"}})

        merged = merge_professional_profiles(current, {"personal": {"experienceLevel": ""}})

        assert merged.personal.experience_level == "senior"

    def test_intention_falls_back_to_current(self):
        """测试意图类型缺失时保留旧值。"""
        current = ProfessionalProfile.from_dict({
            "intention": {"type": "hiring", "description": "need devs",
                          "preferences": {"requiredSkills": ["React"]}},
        })

        merged = merge_professional_profiles(current, {
            "intention": {"type": "", "preferences": {"requiredSkills": ["Solidity"], "remotePreference": "remote"}},
        })

        assert merged.intention.type == "hiring"
        assert merged.intention.description == "need devs"
        assert merged.intention.preferences.required_skills == ["React", "Solidity"]
        assert merged.intention.preferences.remote_preference == "remote"

    def test_current_position_merged(self):
        current = ProfessionalProfile.from_dict({"personal": {"currentPosition": {"title": "CTO"}}})

        merged = merge_professional_profiles(current, {"personal": {"currentPosition": {"company": "Acme", "title": None}}})

        assert merged.personal.current_position.title == "CTO"
        assert merged.personal.current_position.company == "Acme"


class TestExtractMatchIntention:
    """测试 ProfileService.extract_match_intention()。"""

    def test_extracts_and_completes(self, mock_llm):
        mock_llm.response = '[{"networkingGoal": "finding partners", "industryPreference": ["AI"]}]'
        service = ProfileService(llm_service=mock_llm)

        intention = service.extract_match_intention("I want partners in AI")

        assert intention.networking_goal == "finding partners"
        assert intention.completed is True
        assert mock_llm.model_classes == [ModelClass.LARGE]
        assert "I want partners in AI" in mock_llm.prompts[0]

    def test_current_info_in_prompt(self, mock_llm):
        """测试已知信息出现在提示词中。"""
        mock_llm.response = "[]"
        service = ProfileService(llm_service=mock_llm)

        service.extract_match_intention("hi", MatchIntention(networking_goal="mentorship"))

        assert '"networkingGoal": "mentorship"' in mock_llm.prompts[0]

    def test_empty_result_returns_none(self, mock_llm):
        mock_llm.response = "[]"

        assert ProfileService(llm_service=mock_llm).extract_match_intention("hello") is None

    def test_llm_failure_raises(self, mock_llm):
        """测试 LLM 失败时抛出 ProfileServiceError。"""
        mock_llm.should_fail = True
        mock_llm.max_failures = 1

        with pytest.raises(ProfileServiceError):
            ProfileService(llm_service=mock_llm).extract_match_intention("hello")

    def test_invalid_json_raises(self, mock_llm):
        mock_llm.response = "not json"

        with pytest.raises(ProfileServiceError):
            ProfileService(llm_service=mock_llm).extract_match_intention("hello")


class TestExtractUserProfile:
    """测试 ProfileService.extract_user_profile()。"""

    def test_merges_into_current(self, mock_llm):
        mock_llm.queue([{
            "professionalContext": {"industry": "Events", "expertise": ["venues"]},
            "goalsObjectives": {"primaryPurpose": "find partners", "relationshipType": ["partnership"]},
            "preferencesRequirements": {"industryFocus": ["AI"]},
        }])
        current = UserProfile.from_dict({"professionalContext": {"role": "Director", "expertise": ["events"]}})

        profile = ProfileService(llm_service=mock_llm).extract_user_profile("...", current)

        assert profile.professional_context.role == "Director"
        assert profile.professional_context.expertise == ["events", "venues"]
        assert profile.completed is True

    def test_partial_profile_not_completed(self, mock_llm):
        mock_llm.queue([{"professionalContext": {"role": "Founder"}}])

        profile = ProfileService(llm_service=mock_llm).extract_user_profile("...")

        assert profile.completed is False
        assert "professional industry" in profile.missing_fields()

    def test_empty_object_returns_none(self, mock_llm):
        """测试 [{}] 表示没有新信息。"""
        mock_llm.response = "[{}]"

        assert ProfileService(llm_service=mock_llm).extract_user_profile("...") is None


class TestExtractProfessionalProfile:
    """测试 ProfileService.extract_professional_profile()。"""

    def test_extracts(self, mock_llm):
        mock_llm.queue([{
            "personal": {"skills": ["Solidity"], "locations": ["Remote"]},
            "intention": {"type": "collaboration", "preferences": {"requiredSkills": ["React"]}},
        }])

        profile = ProfileService(llm_service=mock_llm).extract_professional_profile("...")

        assert profile.is_ready() is True


class TestExtractInterests:
    """测试 ProfileService.extract_interests()。"""

    def test_builds_graph(self, mock_llm):
        mock_llm.queue([{"interests": [
            {"category": "technology", "name": "DeFi", "confidence": 0.95, "evidence": "builds AMMs"},
            {"category": "technology", "name": "NFTs", "confidence": 0.3, "evidence": "mentioned once"},
        ]}])

        graph = ProfileService(llm_service=mock_llm).extract_interests("...", "alice")

        assert graph.username == "alice"
        assert [i.name for i in graph.interests] == ["DeFi"]

    def test_empty_reply_gives_empty_graph(self, mock_llm):
        mock_llm.response = "[]"

        graph = ProfileService(llm_service=mock_llm).extract_interests("...", "alice")

        assert graph.interests == []
