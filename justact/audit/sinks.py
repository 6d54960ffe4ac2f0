"""
Destinations for the audit stream.

- StreamSink: write to a text stream (stdout, a file)
- InspectorSink: write to the stdin of a separately launched inspector
  process and wait for it to exit; nothing is read back
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass
from typing import Iterable, Sequence, TextIO

from .events import ControlEvent
from .serializer import encode, iter_lines

logger = logging.getLogger(__name__)

DEFAULT_INSPECTOR_TIMEOUT = 30.0


class InspectorError(Exception):
    """The inspector could not be started or did not finish in time."""


@dataclass(frozen=True)
class InspectorResult:
    """Outcome of one hand-off to the inspector."""

    argv: tuple[str, ...]
    returncode: int
    events_written: int
    bytes_written: int

    @property
    def success(self) -> bool:
        return self.returncode == 0


class StreamSink:
    """Writes the audit stream to an already-open text stream."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def emit(self, events: Iterable[ControlEvent]) -> int:
        count = 0
        for line in iter_lines(events):
            self.stream.write(line)
            count += 1
        self.stream.flush()
        return count


class InspectorSink:
    """Pipes the audit stream into an inspector subprocess.

    The write and the wait for exit are bounded by `timeout`. A consumer that
    never drains its stdin is killed when the timeout expires.
    """

    def __init__(self, command: str | Sequence[str], *, timeout: float | None = DEFAULT_INSPECTOR_TIMEOUT) -> None:
        argv = shlex.split(command) if isinstance(command, str) else list(command)
        if not argv:
            raise ValueError("inspector command is empty")
        self.argv = tuple(argv)
        self.timeout = timeout

    def emit(self, events: Iterable[ControlEvent]) -> InspectorResult:
        events = list(events)
        payload = encode(events)
        logger.debug("launching inspector %s with %d events", self.argv, len(events))
        try:
            completed = subprocess.run(
                self.argv,
                input=payload,
                text=True,
                encoding="utf-8",
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            logger.warning("inspector %s did not exit within %ss", self.argv[0], self.timeout)
            raise InspectorError(f"inspector timed out after {self.timeout}s: {self.argv[0]}") from e
        except OSError as e:
            logger.warning("inspector %s could not be started: %s", self.argv[0], e)
            raise InspectorError(f"cannot start inspector {self.argv[0]}: {e}") from e

        if completed.returncode != 0:
            logger.warning("inspector %s exited with status %d", self.argv[0], completed.returncode)

        return InspectorResult(
            argv=self.argv,
            returncode=completed.returncode,
            events_written=len(events),
            bytes_written=len(payload.encode("utf-8")),
        )
