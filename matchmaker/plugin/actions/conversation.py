"""Conversational actions that carry no side effects."""

from __future__ import annotations

from matchmaker.runtime import Action


def _always(runtime, message, state=None) -> bool:
    return True


def _noop(runtime, message, state=None, options=None, callback=None):
    return None


continue_action = Action(
    name="CONTINUE",
    description="Keep the conversation going with a follow-up message.",
    similes=["ELABORATE", "KEEP_TALKING"],
    validate=_always,
    handler=_noop,
)

ignore_action = Action(
    name="IGNORE",
    description="Stop responding when the conversation is over or the user is being disruptive.",
    similes=["STOP_TALKING", "STOP_CONVERSATION"],
    validate=_always,
    handler=_noop,
)

none_action = Action(
    name="NONE",
    description="Respond normally without taking any additional action.",
    similes=["NO_ACTION", "DEFAULT"],
    validate=_always,
    handler=_noop,
)
