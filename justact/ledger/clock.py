"""Logical clock used as audit context."""

from __future__ import annotations

import logging

from .records import Agreement

logger = logging.getLogger(__name__)


class Clock:
    """The session's notion of "now".

    Not monotonic: `set` accepts any value, including one earlier than the
    current time. Agreements created before a backward move keep their `at`,
    which may then lie in the clock's future (see `precedes`).
    """

    def __init__(self, current: int = 0) -> None:
        self.current = current

    def set(self, timestamp: int) -> None:
        if timestamp < self.current:
            logger.info("clock moved backward from %d to %d", self.current, timestamp)
        self.current = timestamp

    def precedes(self, agreement: Agreement) -> bool:
        """True if the current time is earlier than `agreement.at`."""
        return agreement.at > self.current
