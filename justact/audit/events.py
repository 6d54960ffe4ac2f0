"""
Control events for the audit stream.

Each line of the stream is one event. The stream describes state, not deltas:
a reader that sees only the latest stream can rebuild the whole history.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Literal, Union

from ..ledger.records import Agreement, EnactedAction, Statement

# Event type discriminators
ADVANCE_TIME = "AdvanceTime"
STATE_MESSAGE = "StateMessage"
ADD_AGREEMENT = "AddAgreement"
ENACT_ACTION = "EnactAction"

EVENT_TYPES = (ADVANCE_TIME, STATE_MESSAGE, ADD_AGREEMENT, ENACT_ACTION)

# Every event is wrapped as a control event for the inspector
EVENT_KIND = "control"

# Broadcast recipient: visible to all participants
BROADCAST = "all"

Recipient = Literal["all"]


def _envelope(event_type: str) -> dict[str, Any]:
    return {"kind": EVENT_KIND, "type": event_type}


@dataclass(frozen=True)
class AdvanceTime:
    timestamp: int

    event_type = ADVANCE_TIME

    def to_dict(self) -> dict[str, Any]:
        d = _envelope(self.event_type)
        d["timestamp"] = self.timestamp
        return d


@dataclass(frozen=True)
class StateMessage:
    """A statement, as said by its author to everyone."""

    message: Statement
    to: Recipient = BROADCAST

    event_type = STATE_MESSAGE

    @property
    def who(self) -> str:
        return self.message.author

    def to_dict(self) -> dict[str, Any]:
        d = _envelope(self.event_type)
        d["who"] = self.who
        d["to"] = self.to
        d["message"] = self.message.to_dict()
        return d


@dataclass(frozen=True)
class AddAgreement:
    agreement: Agreement

    event_type = ADD_AGREEMENT

    def to_dict(self) -> dict[str, Any]:
        d = _envelope(self.event_type)
        d["agreement"] = self.agreement.to_dict()
        return d


@dataclass(frozen=True)
class EnactAction:
    """An enacted action, announced by its actor to everyone."""

    action: EnactedAction
    to: Recipient = BROADCAST

    event_type = ENACT_ACTION

    @property
    def who(self) -> str:
        return self.action.actor

    def to_dict(self) -> dict[str, Any]:
        d = _envelope(self.event_type)
        d["who"] = self.who
        d["to"] = self.to
        d["action"] = self.action.to_dict()
        return d


ControlEvent = Union[AdvanceTime, StateMessage, AddAgreement, EnactAction]


def to_json(event: ControlEvent) -> str:
    """Serialize one event to a single compact JSON line (no newline)."""
    return json.dumps(event.to_dict(), separators=(",", ":"))
