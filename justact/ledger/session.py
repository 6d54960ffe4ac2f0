"""
One session's worth of ledger state.

A Session is created empty, lives for the duration of a shell or script run,
and is discarded at exit. It is the single object every command operates on.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Iterable

from .agreements import AgreementRegistry
from .clock import Clock
from .enactments import EnactmentEngine
from .statements import StatementStore

if TYPE_CHECKING:
    from ..audit.events import ControlEvent


class Session:
    """The three append-only logs plus the clock.

    All mutations and reads that cross stores take the same lock, so an
    enactment always validates against a consistent view of statements and
    agreements.
    """

    def __init__(self, *, label_style: str = "alpha", start_time: int = 0) -> None:
        self._lock = threading.RLock()
        self.statements = StatementStore()
        self.agreements = AgreementRegistry(self.statements)
        self.actions = EnactmentEngine(self.statements, self.agreements, label_style=label_style)
        self.clock = Clock(start_time)

    def declare(self, author: str, payload: str) -> int:
        with self._lock:
            return self.statements.declare(author, payload)

    def bind(self, statement_index: int, timestamp: int) -> int:
        with self._lock:
            return self.agreements.bind(statement_index, timestamp)

    def enact(self, actor: str, basis_index: int, justification_indices: Iterable[int]) -> tuple[str, str]:
        with self._lock:
            return self.actions.enact(actor, basis_index, justification_indices)

    def set_time(self, timestamp: int) -> None:
        with self._lock:
            self.clock.set(timestamp)

    @property
    def now(self) -> int:
        return self.clock.current

    def serialize(self) -> list[ControlEvent]:
        """Re-derive the full audit stream for the current state."""
        from ..audit.serializer import serialize

        with self._lock:
            return serialize(self)
