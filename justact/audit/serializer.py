"""
Re-derive a session's full history as an ordered control-event stream.

Order is fixed:
1. exactly one AdvanceTime carrying the clock
2. one StateMessage per statement, in insertion order
3. one AddAgreement per agreement, in insertion order
4. one EnactAction per action, in insertion order

This is a pure function of the session. Calling it twice on an unchanged
session yields byte-identical output.
"""

from __future__ import annotations

from itertools import chain
from typing import TYPE_CHECKING, Iterable, Iterator

from .events import AddAgreement, AdvanceTime, ControlEvent, EnactAction, StateMessage, to_json

if TYPE_CHECKING:
    from ..ledger.session import Session


def iter_events(session: Session) -> Iterator[ControlEvent]:
    """Walk every store from the beginning, yielding one event per record."""
    return chain(
        (AdvanceTime(timestamp=session.clock.current),),
        (StateMessage(message=s) for s in session.statements),
        (AddAgreement(agreement=a) for a in session.agreements),
        (EnactAction(action=e) for e in session.actions),
    )


def serialize(session: Session) -> list[ControlEvent]:
    return list(iter_events(session))


def iter_lines(events: Iterable[ControlEvent]) -> Iterator[str]:
    """Yield one newline-terminated JSON line per event."""
    for event in events:
        yield to_json(event) + "\n"


def encode(events: Iterable[ControlEvent]) -> str:
    """Encode events as newline-delimited JSON."""
    return "".join(iter_lines(events))
