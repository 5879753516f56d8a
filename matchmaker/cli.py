"""Conversation simulator.

Posts the bundled synthetic conversations to a running matchmaker agent so
profiles, the match pool and matches can be inspected end to end.

Usage:
    python -m matchmaker.cli --set general
    python -m matchmaker.cli --set web3 --url http://localhost:3000
"""

from __future__ import annotations

import argparse
import logging
import time
import uuid
from typing import Any, Callable

import requests

from config import AGENT_ID, LOG_LEVEL, SERVER_URL
from matchmaker.data.conversations import CONVERSATION_SETS, SyntheticConversation
from matchmaker.logging_config import setup_logging

logger = logging.getLogger(__name__)

MESSAGE_DELAY = 2.0  # seconds between messages of one user
CONVERSATION_DELAY = 3.0  # seconds between users
REQUEST_TIMEOUT = 120

# Platform reported by simulated users; one of the default config.CLIENTS
DEFAULT_SOURCE = "telegram"


def send_message(
    session: requests.Session,
    url: str,
    *,
    user_id: str,
    username: str,
    text: str,
    room_id: str,
    source: str = DEFAULT_SOURCE,
) -> Any:
    """POST one message to the agent and return the decoded reply.

    Raises:
        requests.HTTPError: If the agent answers with an error status
    """
    response = session.post(
        url,
        json={
            "userId": user_id,
            "username": username,
            "userName": username,
            "name": username,
            "text": text,
            "roomId": room_id,
            "source": source,
        },
        timeout=REQUEST_TIMEOUT,
    )
    response.raise_for_status()
    return response.json()


def simulate_conversation(
    session: requests.Session,
    url: str,
    conversation: SyntheticConversation,
    *,
    source: str = DEFAULT_SOURCE,
    message_delay: float = MESSAGE_DELAY,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Send every message of one synthetic user in a fresh room."""
    logger.info("Simulating conversation for user: %s", conversation.username)
    user_id = str(uuid.uuid4())
    room_id = str(uuid.uuid4())

    for text in conversation.messages:
        replies = send_message(
            session, url,
            user_id=user_id,
            username=conversation.username,
            text=text,
            room_id=room_id,
            source=source,
        )
        logger.info("Sent message for %s: %s", conversation.username, text[:60])
        for reply in replies or []:
            logger.debug("Reply: %s", reply)
        sleep(message_delay)


def simulate_all(
    conversations,
    url: str,
    *,
    source: str = DEFAULT_SOURCE,
    message_delay: float = MESSAGE_DELAY,
    conversation_delay: float = CONVERSATION_DELAY,
    sleep: Callable[[float], None] = time.sleep,
    session: requests.Session | None = None,
) -> None:
    session = session or requests.Session()
    for conversation in conversations:
        simulate_conversation(
            session, url, conversation,
            source=source,
            message_delay=message_delay,
            sleep=sleep,
        )
        sleep(conversation_delay)
    logger.info("Finished simulating all conversations")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Send synthetic networking conversations to a running matchmaker agent."
    )
    parser.add_argument(
        "--set",
        dest="conversation_set",
        choices=sorted(CONVERSATION_SETS),
        default="general",
        help="Which bundled conversation set to send (default: general)",
    )
    parser.add_argument("--url", default=SERVER_URL, help=f"Agent server base URL (default: {SERVER_URL})")
    parser.add_argument("--agent-id", default=AGENT_ID, help="Agent id in the message endpoint path")
    parser.add_argument("--source", default=DEFAULT_SOURCE, help="Platform reported as the message source")
    parser.add_argument(
        "--message-delay",
        type=float,
        default=MESSAGE_DELAY,
        help=f"Seconds between messages (default: {MESSAGE_DELAY})",
    )
    parser.add_argument(
        "--conversation-delay",
        type=float,
        default=CONVERSATION_DELAY,
        help=f"Seconds between users (default: {CONVERSATION_DELAY})",
    )
    parser.add_argument("--limit", type=int, help="Only send the first N conversations")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(LOG_LEVEL)

    conversations = CONVERSATION_SETS[args.conversation_set]
    if args.limit is not None:
        conversations = conversations[:args.limit]
    url = f"{args.url.rstrip('/')}/{args.agent_id}/message"

    try:
        simulate_all(
            conversations,
            url,
            source=args.source,
            message_delay=args.message_delay,
            conversation_delay=args.conversation_delay,
        )
    except requests.RequestException as e:
        logger.error("Error in simulation: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
