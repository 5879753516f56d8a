"""Agent runtime - plugin contract and a small in-process host.

The plugin contract mirrors what conversational agent frameworks expose:
actions (things the agent can do in reply), evaluators (run after each
message to learn from it) and providers (context injected into prompts).
``AgentRuntime`` hosts plugins in-process: it keeps a message log per room,
runs evaluators, asks the LLM for a reply and dispatches the chosen action.
"""

from __future__ import annotations

import json
import logging
import time
import uuid
from dataclasses import dataclass, field as dataclass_field
from typing import Any, Callable, Iterable

from matchmaker.services.cache_service import CacheManager
from matchmaker.services.llm_service import ModelClass, generate_object_array
from matchmaker.templates import MESSAGE_RESPONSE_TEMPLATE, compose_context

logger = logging.getLogger(__name__)

State = dict[str, Any]
HandlerCallback = Callable[["Content"], Any]


@dataclass
class Content:
    """Message payload, optionally naming an action."""
    text: str = ""
    action: str | None = None
    source: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"text": self.text}
        if self.action:
            data["action"] = self.action
        if self.source:
            data["source"] = self.source
        return data


@dataclass
class Memory:
    """A single message in a room."""
    user_id: str
    room_id: str
    content: Content
    id: str = dataclass_field(default_factory=lambda: str(uuid.uuid4()))
    created_at: float = dataclass_field(default_factory=time.time)


@dataclass
class Action:
    name: str
    description: str
    validate: Callable[..., bool]
    handler: Callable[..., Content | None]
    similes: list[str] = dataclass_field(default_factory=list)
    examples: list[Any] = dataclass_field(default_factory=list)


@dataclass
class Evaluator:
    name: str
    description: str
    validate: Callable[..., bool]
    handler: Callable[..., bool]
    similes: list[str] = dataclass_field(default_factory=list)
    examples: list[Any] = dataclass_field(default_factory=list)


@dataclass
class Provider:
    name: str
    get: Callable[..., Any]


@dataclass
class Plugin:
    name: str
    description: str
    actions: list[Action] = dataclass_field(default_factory=list)
    evaluators: list[Evaluator] = dataclass_field(default_factory=list)
    providers: list[Provider] = dataclass_field(default_factory=list)


@dataclass
class Account:
    id: str
    username: str
    name: str = ""


class DatabaseAdapter:
    """In-memory accounts and room participants."""

    def __init__(self):
        self._accounts: dict[str, Account] = {}
        self._rooms: dict[str, list[str]] = {}

    def get_account_by_id(self, user_id: str) -> Account | None:
        return self._accounts.get(user_id)

    def ensure_account(self, user_id: str, username: str, name: str | None = None) -> Account:
        account = self._accounts.get(user_id)
        if account is None:
            account = Account(id=user_id, username=username, name=name or username)
            self._accounts[user_id] = account
        elif username and account.username != username:
            account.username = username
        return account

    def get_participants_for_room(self, room_id: str) -> list[str]:
        return list(self._rooms.get(room_id, []))

    def add_participant(self, room_id: str, user_id: str) -> None:
        participants = self._rooms.setdefault(room_id, [])
        if user_id not in participants:
            participants.append(user_id)


class AgentRuntime:
    """Hosts plugins for one agent character."""

    def __init__(
        self,
        character_name: str,
        cache_manager: CacheManager,
        *,
        agent_id: str | None = None,
        llm=None,
        database_adapter: DatabaseAdapter | None = None,
        plugins: Iterable[Plugin] = (),
        clients: Iterable[str] = (),
        recent_message_count: int = 10,
    ):
        self.character_name = character_name
        self.agent_id = agent_id or str(uuid.uuid4())
        self.cache_manager = cache_manager
        self.database_adapter = database_adapter or DatabaseAdapter()
        self.clients = [c.lower() for c in clients]
        self.recent_message_count = recent_message_count
        self._llm = llm
        self._services: dict[str, Any] = {}
        self._messages: dict[str, list[Memory]] = {}
        self.actions: list[Action] = []
        self.evaluators: list[Evaluator] = []
        self.providers: list[Provider] = []
        for plugin in plugins:
            self.register_plugin(plugin)

    @property
    def llm(self):
        """Lazy load LLM service."""
        if self._llm is None:
            from matchmaker.services.llm_service import LLMService
            self._llm = LLMService.get_instance()
        return self._llm

    def register_plugin(self, plugin: Plugin) -> None:
        logger.info("Registering plugin %s", plugin.name)
        self.actions.extend(plugin.actions)
        self.evaluators.extend(plugin.evaluators)
        self.providers.extend(plugin.providers)

    def register_service(self, name: str, service: Any) -> None:
        self._services[name] = service

    def get_service(self, name: str) -> Any | None:
        return self._services.get(name)

    # ------------------------------------------------------------------
    # Messages and state
    # ------------------------------------------------------------------

    def remember(self, message: Memory) -> None:
        self._messages.setdefault(message.room_id, []).append(message)

    def recent_messages(self, room_id: str) -> list[Memory]:
        return self._messages.get(room_id, [])[-self.recent_message_count:]

    def display_name(self, user_id: str) -> str:
        if user_id == self.agent_id:
            return self.character_name
        account = self.database_adapter.get_account_by_id(user_id)
        return account.username if account else user_id

    def format_messages(self, memories: list[Memory]) -> str:
        return "\n".join(f"{self.display_name(m.user_id)}: {m.content.text}" for m in memories)

    def compose_state(self, message: Memory, *, include_providers: bool = True) -> State:
        state: State = {
            "agentName": self.character_name,
            "senderName": self.display_name(message.user_id),
            "roomId": message.room_id,
            "recentMessages": self.format_messages(self.recent_messages(message.room_id))
            or message.content.text,
        }
        if include_providers:
            state["providers"] = self._provider_context(message, state)
        return state

    def _provider_context(self, message: Memory, state: State) -> str:
        sections = []
        for provider in self.providers:
            try:
                value = provider.get(self, message, state)
            except Exception:
                logger.error("Provider %s failed", provider.name, exc_info=True)
                continue
            if value is None:
                continue
            if not isinstance(value, str):
                value = json.dumps(value, indent=2, ensure_ascii=False)
            sections.append(value.strip())
        return "\n\n".join(sections)

    # ------------------------------------------------------------------
    # Processing
    # ------------------------------------------------------------------

    def evaluate(self, message: Memory, state: State) -> list[str]:
        """Run every evaluator whose validate passes; returns their names."""
        ran = []
        for evaluator in self.evaluators:
            try:
                if not evaluator.validate(self, message, state):
                    continue
                evaluator.handler(self, message, state)
                ran.append(evaluator.name)
            except Exception:
                logger.error("Evaluator %s failed", evaluator.name, exc_info=True)
        return ran

    def find_action(self, name: str | None) -> Action | None:
        if not name:
            return None
        wanted = name.strip().upper()
        for action in self.actions:
            if action.name == wanted or wanted in action.similes:
                return action
        return None

    def process_message(self, message: Memory) -> list[Content]:
        """Learn from ``message``, reply to it and run the chosen action."""
        self.remember(message)
        self.evaluate(message, self.compose_state(message, include_providers=False))
        state = self.compose_state(message)

        responses: list[Content] = []

        def callback(content: Content) -> None:
            responses.append(content)
            self.remember(Memory(user_id=self.agent_id, room_id=message.room_id, content=content))

        reply = self._generate_reply(state)
        if reply is None:
            return responses
        callback(reply)

        action = self.find_action(reply.action)
        if action is None:
            return responses
        try:
            if action.validate(self, message, state):
                logger.info("Running action %s", action.name)
                action.handler(self, message, state, {}, callback)
        except Exception:
            logger.error("Action %s failed", action.name, exc_info=True)
        return responses

    def _generate_reply(self, state: State) -> Content | None:
        context = compose_context(MESSAGE_RESPONSE_TEMPLATE, {
            **state,
            "actionNames": ", ".join(a.name for a in self.actions),
        })
        try:
            results = generate_object_array(self.llm, context, model_class=ModelClass.LARGE)
        except Exception:
            logger.error("Failed to generate reply", exc_info=True)
            return None
        if not results:
            return None
        result = results[0]
        return Content(text=str(result.get("text", "")), action=result.get("action"))
