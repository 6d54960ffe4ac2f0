"""
Append-only statement store.

Key property: statements are only ever appended. There is no retract and no
rewrite, so an index handed out once stays valid for the life of the session.
"""

from __future__ import annotations

import logging
from typing import Iterator

from .records import Statement

logger = logging.getLogger(__name__)


class StatementStore:
    """Owns the canonical Statement objects of a session."""

    def __init__(self) -> None:
        self._statements: list[Statement] = []

    def declare(self, author: str, payload: str) -> int:
        """Append a statement and return its index. Always succeeds."""
        index = len(self._statements)
        self._statements.append(Statement(author=author, index=index, payload=payload))
        logger.debug("declared statement %d by %s", index, author)
        return index

    def get(self, index: int) -> Statement | None:
        """Return the statement at `index`, or None if it was never declared."""
        if 0 <= index < len(self._statements):
            return self._statements[index]
        return None

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and 0 <= index < len(self._statements)

    def __getitem__(self, index: int) -> Statement:
        return self._statements[index]

    def __len__(self) -> int:
        return len(self._statements)

    def __iter__(self) -> Iterator[Statement]:
        return iter(self._statements)
