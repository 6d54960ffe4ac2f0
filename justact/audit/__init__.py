"""
Audit stream for the justact ledger.

Components:
- events: the four control-event types and their JSON form
- serializer: full re-derivation of a session into an ordered event stream
- sinks: hand the stream to a text stream or an inspector subprocess
"""

from .events import (
    ADD_AGREEMENT,
    ADVANCE_TIME,
    BROADCAST,
    ENACT_ACTION,
    EVENT_TYPES,
    STATE_MESSAGE,
    AddAgreement,
    AdvanceTime,
    ControlEvent,
    EnactAction,
    StateMessage,
)
from .serializer import encode, iter_events, iter_lines, serialize
from .sinks import InspectorError, InspectorResult, InspectorSink, StreamSink

__all__ = [
    "ADD_AGREEMENT",
    "ADVANCE_TIME",
    "BROADCAST",
    "ENACT_ACTION",
    "EVENT_TYPES",
    "STATE_MESSAGE",
    "AddAgreement",
    "AdvanceTime",
    "ControlEvent",
    "EnactAction",
    "InspectorError",
    "InspectorResult",
    "InspectorSink",
    "StateMessage",
    "StreamSink",
    "encode",
    "iter_events",
    "iter_lines",
    "serialize",
]
