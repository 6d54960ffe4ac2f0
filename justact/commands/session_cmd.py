"""Session CLI commands: interactive shell, script replay, audit export."""

from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import TextIO

import click
from rich.console import Console

from ..audit.sinks import InspectorError, InspectorSink, StreamSink
from ..config import Settings
from ..ledger.session import Session
from ..shell.render import render_state
from ..shell.repl import Shell


def _session(settings: Settings) -> Session:
    return Session(label_style=settings.label_style, start_time=settings.start_time)


def _inspector(settings: Settings) -> InspectorSink | None:
    if not settings.inspector:
        return None
    return InspectorSink(settings.inspector, timeout=settings.inspector_timeout)


def _read_script(script: Path) -> list[str]:
    try:
        return script.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"cannot read script {script}: {e}") from e


def run_shell(settings: Settings, *, stdin: TextIO | None = None) -> int:
    """Interactive loop until EOF or `quit`."""
    console = Console()
    shell = Shell(_session(settings), console=console, inspector=_inspector(settings))
    try:
        shell.loop(stdin or sys.stdin)
    except KeyboardInterrupt:
        console.print()
    return 0


def run_script(settings: Settings, script: Path, *, stop_on_error: bool = False) -> int:
    """Replay a script, show the final state, then hand off the audit stream.

    `inspect` lines inside the script print to stdout. Only the final stream
    goes to the inspector, which is launched once.
    """
    console = Console()
    err = Console(stderr=True)
    inspector = _inspector(settings)
    shell = Shell(_session(settings), console=err, stream=sys.stdout)

    summary = shell.run_lines(_read_script(script), stop_on_error=stop_on_error)
    render_state(shell.session, console)

    if inspector is not None:
        try:
            inspector.emit(shell.session.serialize())
        except InspectorError as e:
            err.print(str(e), style="bold red", markup=False)
            return 1

    if summary.rejected:
        err.print(f"{summary.rejected} of {summary.executed} commands rejected", style="yellow")
        if stop_on_error:
            return 1
    return 0


def run_inspect(settings: Settings, script: Path, *, output: TextIO | None = None) -> int:
    """Replay a script and write only the final audit stream.

    `inspect` lines inside the script are superseded by the final stream,
    so their output is discarded.
    """
    err = Console(stderr=True)
    shell = Shell(_session(settings), console=err, stream=io.StringIO())
    shell.run_lines(_read_script(script))
    StreamSink(output or sys.stdout).emit(shell.session.serialize())
    return 0
