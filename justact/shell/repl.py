"""
Command execution against a session.

The Shell turns parsed commands into session calls and reports outcomes.
Rejected commands (malformed lines, ledger errors, inspector failures) are
printed and counted; they never end the session.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, TextIO

from rich.console import Console

from ..audit.sinks import InspectorError, InspectorSink, StreamSink
from ..ledger.errors import LedgerError
from ..ledger.session import Session
from .commands import Agree, Command, Enact, Help, Inspect, MalformedCommand, Now, Quit, Say, parse_command
from .render import render_help, render_state

logger = logging.getLogger(__name__)


@dataclass
class Outcome:
    """Result of executing one line."""

    line: str
    command: Command | None = None
    value: object = None
    error: Exception | None = None
    quit: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class RunSummary:
    executed: int = 0
    rejected: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.rejected == 0


class Shell:
    """Executes shell commands against one session.

    Args:
        session: the state every command operates on
        console: where diagnostics and tables go
        inspector: if set, `inspect` pipes the stream into this subprocess
        stream: otherwise `inspect` writes the stream here
    """

    def __init__(
        self,
        session: Session,
        *,
        console: Console | None = None,
        inspector: InspectorSink | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self.session = session
        self.console = console or Console()
        self.inspector = inspector
        self.stream = stream

    def execute(self, line: str) -> Outcome:
        try:
            command = parse_command(line)
        except MalformedCommand as e:
            logger.debug("malformed: %s", e)
            return Outcome(line=line, error=e)

        outcome = Outcome(line=line, command=command)
        try:
            outcome.value = self.apply(command)
        except (LedgerError, InspectorError) as e:
            outcome.error = e
        outcome.quit = isinstance(command, Quit)
        return outcome

    def apply(self, command: Command) -> object:
        """Run a parsed command. Ledger errors propagate to the caller."""
        if isinstance(command, Say):
            return self.session.declare(command.sayer, command.payload)
        if isinstance(command, Agree):
            return self.session.bind(command.on_index, command.at)
        if isinstance(command, Enact):
            return self.session.enact(command.actor, command.basis, command.justification)
        if isinstance(command, Now):
            self.session.set_time(command.now)
            return command.now
        if isinstance(command, Inspect):
            return self.inspect()
        if isinstance(command, Help):
            render_help(self.console)
            return None
        return None

    def inspect(self) -> object:
        events = self.session.serialize()
        if self.inspector is not None:
            return self.inspector.emit(events)
        stream = self.stream
        if stream is None:
            stream = self.console.file
        return StreamSink(stream).emit(events)

    def report(self, outcome: Outcome) -> None:
        if outcome.error is None:
            return
        self.console.print(str(outcome.error), style="bold red", markup=False)
        if isinstance(outcome.error, MalformedCommand):
            render_help(self.console)

    def run_lines(self, lines: Iterable[str], *, stop_on_error: bool = False) -> RunSummary:
        """Execute a script. Blank lines and `#` comments are skipped."""
        summary = RunSummary()
        for raw in lines:
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            outcome = self.execute(line)
            summary.executed += 1
            if not outcome.ok:
                summary.rejected += 1
                summary.errors.append(str(outcome.error))
                self.report(outcome)
                if stop_on_error:
                    break
            if outcome.quit:
                break
        return summary

    def loop(self, stdin: TextIO) -> None:
        """Interactive loop: show state, read a line, execute, repeat."""
        while True:
            render_state(self.session, self.console)
            raw = stdin.readline()
            if not raw:
                break
            if not raw.strip():
                continue
            outcome = self.execute(raw)
            self.report(outcome)
            if outcome.quit:
                break
