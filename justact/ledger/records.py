"""
Immutable record types held by the ledger.

Statements are owned by the statement store. Agreements and enacted actions
keep references to the very same Statement objects rather than copies, so a
payload exists exactly once no matter how often it is cited.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Statement:
    """A declared fact, attributed to an author."""

    author: str
    index: int  # position in the statement store, never reused
    payload: str

    @property
    def id(self) -> tuple[str, int]:
        return (self.author, self.index)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "id": [self.author, self.index],
            "payload": self.payload,
        }


@dataclass(frozen=True)
class Agreement:
    """A statement elevated to binding status at a point in time."""

    at: int
    message: Statement

    @property
    def statement_index(self) -> int:
        return self.message.index

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "at": self.at,
            "message": self.message.to_dict(),
        }


@dataclass(frozen=True)
class EnactedAction:
    """An actor's exercise of authority.

    `basis` is the agreement that legitimizes the action; `justification` is
    the set of statements cited as supporting evidence.
    """

    actor: str
    sequence: int  # per-session enactment counter, unbounded
    label: str  # human-readable alias of `sequence`
    basis: Agreement
    justification: frozenset[Statement]

    @property
    def id(self) -> tuple[str, str]:
        return (self.actor, self.label)

    @property
    def justification_indices(self) -> tuple[int, ...]:
        return tuple(sorted(s.index for s in self.justification))

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict.

        The justification set is emitted in statement-index order so the
        encoding does not depend on set iteration order.
        """
        ordered = sorted(self.justification, key=lambda s: s.index)
        return {
            "id": [self.actor, self.label],
            "basis": self.basis.to_dict(),
            "justification": [s.to_dict() for s in ordered],
        }
