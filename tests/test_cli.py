"""对话模拟器测试。

测试覆盖:
- 消息请求体
- 消息与对话之间的等待
- HTTP 错误时的退出码
"""

import requests

import app as app_module
import config
from matchmaker import cli
from matchmaker.data.conversations import CONVERSATION_SETS, GENERAL_CONVERSATIONS, WEB3_CONVERSATIONS


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload if payload is not None else [{"text": "ok"}]

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP error! status: {self.status_code}")

    def json(self):
        return self._payload


class FakeSession:
    def __init__(self, status_code=200):
        self.status_code = status_code
        self.posts = []

    def post(self, url, json=None, timeout=None):
        self.posts.append((url, json))
        return FakeResponse(self.status_code)


class TestConversationData:
    """测试内置对话数据。"""

    def test_sets(self):
        assert len(GENERAL_CONVERSATIONS) == 12
        assert len(WEB3_CONVERSATIONS) == 10
        assert set(CONVERSATION_SETS) == {"general", "web3"}

    def test_unique_usernames(self):
        names = [c.username for c in GENERAL_CONVERSATIONS + WEB3_CONVERSATIONS]

        assert len(names) == len(set(names))


class TestSimulate:
    """测试 simulate_all()。"""

    def test_posts_every_message_in_one_room(self):
        session = FakeSession()
        sleeps = []
        conversation = GENERAL_CONVERSATIONS[0]

        cli.simulate_all([conversation], "http://agent/x/message", session=session, sleep=sleeps.append)

        assert len(session.posts) == len(conversation.messages)
        bodies = [body for _, body in session.posts]
        assert {b["roomId"] for b in bodies} == {bodies[0]["roomId"]}
        assert {b["userId"] for b in bodies} == {bodies[0]["userId"]}
        assert bodies[0]["username"] == "test_eventpro"
        assert bodies[0]["source"] == "telegram"
        assert [b["text"] for b in bodies] == list(conversation.messages)

    def test_delays(self):
        sleeps = []
        conversations = WEB3_CONVERSATIONS[:2]

        cli.simulate_all(conversations, "http://agent/x/message", session=FakeSession(), sleep=sleeps.append)

        assert sleeps == [2.0, 2.0, 2.0, 3.0, 2.0, 2.0, 2.0, 3.0]

    def test_each_user_gets_own_room(self):
        session = FakeSession()

        cli.simulate_all(WEB3_CONVERSATIONS[:2], "http://agent/x/message", session=session, sleep=lambda s: None)

        assert len({body["roomId"] for _, body in session.posts}) == 2


class TestMain:
    """测试 main() 退出码。"""

    def test_http_error_exits_non_zero(self, monkeypatch):
        monkeypatch.setattr(cli.requests, "Session", lambda: FakeSession(status_code=500))

        assert cli.main(["--set", "web3", "--limit", "1", "--url", "http://agent"]) == 1

    def test_success(self, monkeypatch):
        session = FakeSession()
        monkeypatch.setattr(cli.requests, "Session", lambda: session)

        code = cli.main([
            "--set", "web3", "--limit", "1", "--url", "http://agent/",
            "--agent-id", "abc", "--message-delay", "0", "--conversation-delay", "0",
        ])

        assert code == 0
        assert session.posts[0][0] == "http://agent/abc/message"
        assert len(session.posts) == 3

    def test_default_source_is_a_registered_client(self):
        """测试默认来源平台在服务端默认客户端列表中，以便记录平台账号。"""
        assert cli.DEFAULT_SOURCE in config.CLIENTS
        assert cli.DEFAULT_SOURCE in app_module.create_runtime().clients
