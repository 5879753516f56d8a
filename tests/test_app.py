"""Flask 接口测试。

测试覆盖:
- 消息接口的参数校验与回复
- Profile / 匹配历史查询
- 健康检查
"""

import pytest

import app as app_module
from matchmaker.models import MatchRecord

from conftest import AGENT_ID, REPLY_PROMPT


@pytest.fixture
def client(runtime, monkeypatch):
    monkeypatch.setattr(app_module, "runtimes", {AGENT_ID: runtime})
    app_module.app.config["TESTING"] = True
    return app_module.app.test_client()


class TestMessageEndpoint:
    """测试 POST /<agent_id>/message。"""

    def test_reply(self, client, runtime, mock_llm):
        mock_llm.route(REPLY_PROMPT, [{"text": "Welcome! What are you working on?", "action": "NONE"}])

        resp = client.post(f"/{AGENT_ID}/message", json={
            "userId": "user-9",
            "userName": "dana",
            "text": "hello",
            "roomId": "room-9",
            "source": "telegram",
        })

        assert resp.status_code == 200
        assert resp.get_json() == [{"text": "Welcome! What are you working on?", "action": "NONE"}]
        assert runtime.database_adapter.get_account_by_id("user-9").username == "dana"
        assert runtime.database_adapter.get_participants_for_room("room-9") == ["user-9", AGENT_ID]

    def test_username_fallback(self, client, runtime, mock_llm):
        mock_llm.route(REPLY_PROMPT, [{"text": "hi", "action": "NONE"}])

        client.post(f"/{AGENT_ID}/message", json={"userId": "user-9", "username": "erin", "text": "hey"})

        assert runtime.database_adapter.get_account_by_id("user-9").username == "erin"

    def test_missing_text(self, client):
        resp = client.post(f"/{AGENT_ID}/message", json={"userId": "user-9"})

        assert resp.status_code == 400
        assert "text" in resp.get_json()["error"]

    def test_missing_user_id(self, client):
        resp = client.post(f"/{AGENT_ID}/message", json={"text": "hello"})

        assert resp.status_code == 400
        assert "userId" in resp.get_json()["error"]

    def test_unknown_agent(self, client):
        resp = client.post("/other-agent/message", json={"userId": "u", "text": "hello"})

        assert resp.status_code == 404


class TestUserEndpoints:
    """测试用户查询接口。"""

    def test_profile(self, client, store, complete_intention, sample_profile):
        store.save_intention("user-1", complete_intention)
        store.save_profile("user-1", sample_profile)

        data = client.get(f"/{AGENT_ID}/users/user-1/profile").get_json()

        assert data["matchIntention"]["networkingGoal"] == "finding partners"
        assert data["profile"]["professionalContext"]["role"] == "Event Director"
        assert data["professionalProfile"] is None
        assert data["interestGraph"] is None

    def test_matches(self, client, store):
        store.append_match("user-1", MatchRecord(user_id="user-2", username="sarah", matched_at=1.0, match_score=0.8))

        data = client.get(f"/{AGENT_ID}/users/user-1/matches").get_json()

        assert [m["username"] for m in data["matches"]] == ["sarah"]
        assert data["matches"][0]["status"] == "pending"

    def test_unknown_agent(self, client):
        assert client.get("/other-agent/users/u/matches").status_code == 404


class TestHealth:
    """测试健康检查。"""

    def test_health(self, client):
        resp = client.get("/health")

        assert resp.status_code == 200
        assert resp.get_json()["status"] == "ok"
