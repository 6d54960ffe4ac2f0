"""
Append-only ledger for statements, agreements and enacted actions.

Components:
- statements: the statement store (sole owner of Statement objects)
- agreements: binds a declared statement to an effective time
- enactments: validates and records actions against the two stores above
- labels: human-readable aliases for enactment sequence numbers
- clock: the session's logical "now"
- session: one explicit object holding all of the above

Design principles:
- Append-only: nothing is rewritten, indices are never reused
- Referential: every citation must point at something that already exists
- Shared: agreements and actions reference statements, never copy them
- Recoverable: a rejected mutation leaves every store unchanged
"""

from .agreements import AgreementRegistry
from .clock import Clock
from .enactments import EnactmentEngine
from .errors import (
    BasisUnknown,
    EmptyJustification,
    JustificationUnknown,
    LedgerError,
    SequenceOverflow,
    UnknownStatement,
)
from .records import Agreement, EnactedAction, Statement
from .session import Session
from .statements import StatementStore

__all__ = [
    "Agreement",
    "AgreementRegistry",
    "BasisUnknown",
    "Clock",
    "EmptyJustification",
    "EnactedAction",
    "EnactmentEngine",
    "JustificationUnknown",
    "LedgerError",
    "SequenceOverflow",
    "Session",
    "Statement",
    "StatementStore",
    "UnknownStatement",
]
