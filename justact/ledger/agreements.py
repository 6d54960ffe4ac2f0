"""Append-only agreement registry."""

from __future__ import annotations

import logging
from typing import Iterator

from .errors import UnknownStatement
from .records import Agreement
from .statements import StatementStore

logger = logging.getLogger(__name__)


class AgreementRegistry:
    """Binds existing statements to an effective time.

    The registry reads from the statement store but never writes to it.
    """

    def __init__(self, statements: StatementStore) -> None:
        self._statements = statements
        self._agreements: list[Agreement] = []

    def bind(self, statement_index: int, timestamp: int) -> int:
        """Agree on a declared statement at `timestamp`.

        Raises:
            UnknownStatement: `statement_index` was never declared. The
                registry is left unchanged.
        """
        statement = self._statements.get(statement_index)
        if statement is None:
            logger.info("rejected bind: unknown statement %d", statement_index)
            raise UnknownStatement(statement_index)

        index = len(self._agreements)
        self._agreements.append(Agreement(at=timestamp, message=statement))
        logger.debug("bound statement %d at %d as agreement %d", statement_index, timestamp, index)
        return index

    def get(self, index: int) -> Agreement | None:
        if 0 <= index < len(self._agreements):
            return self._agreements[index]
        return None

    def __getitem__(self, index: int) -> Agreement:
        return self._agreements[index]

    def __len__(self) -> int:
        return len(self._agreements)

    def __iter__(self) -> Iterator[Agreement]:
        return iter(self._agreements)
