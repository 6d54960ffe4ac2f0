"""Rich tables for the current session state."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..ledger.session import Session
from .commands import USAGE


def statements_table(session: Session) -> Table:
    table = Table(title="Statements")
    table.add_column("s_id", justify="right", style="cyan", no_wrap=True)
    table.add_column("sayer", style="magenta")
    table.add_column("payload")
    for s in session.statements:
        table.add_row(str(s.index), Text(s.author), Text(repr(s.payload)))
    return table


def agreements_table(session: Session) -> Table:
    table = Table(title="Agreements")
    table.add_column("a_id", justify="right", style="cyan", no_wrap=True)
    table.add_column("s_id", justify="right")
    table.add_column("time", justify="right")
    for i, a in enumerate(session.agreements):
        # Agreements bound for a time the clock has not reached yet
        style = "yellow" if session.clock.precedes(a) else None
        table.add_row(str(i), str(a.statement_index), str(a.at), style=style)
    return table


def actions_table(session: Session) -> Table:
    table = Table(title="Enacted")
    table.add_column("e_id", justify="right", style="cyan", no_wrap=True)
    table.add_column("label", style="dim")
    table.add_column("actor", style="magenta")
    table.add_column("basis_at", justify="right")
    table.add_column("justification")
    for i, e in enumerate(session.actions):
        table.add_row(
            str(i),
            e.label,
            Text(e.actor),
            str(e.basis.at),
            "{" + ", ".join(str(j) for j in e.justification_indices) + "}",
        )
    return table


def render_state(session: Session, console: Console) -> None:
    """Print the clock and every non-empty store."""
    console.print(f"current time: {session.now}")
    if len(session.statements):
        console.print(statements_table(session))
    if len(session.agreements):
        console.print(agreements_table(session))
    if len(session.actions):
        console.print(actions_table(session))


def render_help(console: Console) -> None:
    console.print("Commands:", style="bold")
    for usage in USAGE:
        console.print(f"- {usage}")
