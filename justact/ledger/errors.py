"""
Typed failures raised by the ledger.

Every error here is recoverable: the store that rejected the request is left
exactly as it was, and the session carries on. The message names the
operation and the offending index so the shell can print it verbatim.
"""

from __future__ import annotations


class LedgerError(Exception):
    """Base class for rejected ledger operations."""

    operation: str = "ledger"

    def __init__(self, message: str, *, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index


class UnknownStatement(LedgerError):
    """`bind` cited a statement index that has not been declared."""

    operation = "bind"

    def __init__(self, index: int) -> None:
        super().__init__(f"bind: cannot agree on unsaid statement {index}", index=index)


class BasisUnknown(LedgerError):
    """`enact` cited an agreement index that does not exist."""

    operation = "enact"

    def __init__(self, index: int) -> None:
        super().__init__(f"enact: cannot be based on unknown agreement {index}", index=index)


class JustificationUnknown(LedgerError):
    """`enact` cited a statement index that has not been declared.

    When several indices are invalid, `index` is the smallest one.
    """

    operation = "enact"

    def __init__(self, index: int) -> None:
        super().__init__(f"enact: cannot justify using unsaid statement {index}", index=index)


class EmptyJustification(LedgerError):
    """`enact` was called with no justification at all."""

    operation = "enact"

    def __init__(self) -> None:
        super().__init__("enact: justification must cite at least one statement")


class SequenceOverflow(LedgerError):
    """The enactment sequence no longer fits the configured label style."""

    operation = "enact"

    def __init__(self, sequence: int, style: str) -> None:
        super().__init__(
            f"enact: sequence number {sequence} cannot be rendered as a {style!r} label",
            index=sequence,
        )
        self.sequence = sequence
        self.style = style
