"""Interactive and scripted command shell over a ledger session."""

from .commands import MalformedCommand, parse_command
from .repl import Outcome, RunSummary, Shell

__all__ = [
    "MalformedCommand",
    "Outcome",
    "RunSummary",
    "Shell",
    "parse_command",
]
