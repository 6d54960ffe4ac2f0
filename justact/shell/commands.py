"""
Line-oriented command grammar.

    say <name> <payload...>
    agree <statement-index> <time>
    enact <name> <basis-index> <statement-index>*
    now <time>
    inspect
    help
    quit | exit

Indices and times are non-negative decimal integers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

_UINT = re.compile(r"\d+")

USAGE = (
    "say <name> <payload>",
    "agree <id> <time>",
    "enact <name> <basis-id> <id>*",
    "now <time>",
    "inspect",
    "help",
    "quit",
)


class MalformedCommand(ValueError):
    """A line that does not parse as any known command."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"malformed command {line!r}: {reason}")
        self.line = line
        self.reason = reason


@dataclass(frozen=True)
class Say:
    sayer: str
    payload: str


@dataclass(frozen=True)
class Agree:
    on_index: int
    at: int


@dataclass(frozen=True)
class Enact:
    actor: str
    basis: int
    justification: frozenset[int]


@dataclass(frozen=True)
class Now:
    now: int


@dataclass(frozen=True)
class Inspect:
    pass


@dataclass(frozen=True)
class Help:
    pass


@dataclass(frozen=True)
class Quit:
    pass


Command = Union[Say, Agree, Enact, Now, Inspect, Help, Quit]


def _uint(line: str, token: str, what: str) -> int:
    if not _UINT.fullmatch(token):
        raise MalformedCommand(line, f"{what} must be a non-negative integer, got {token!r}")
    return int(token)


def _expect_args(line: str, name: str, args: list[str], count: int) -> None:
    if len(args) != count:
        raise MalformedCommand(line, f"{name} takes {count} argument(s), got {len(args)}")


def parse_command(line: str) -> Command:
    """Parse one line into a command.

    Raises:
        MalformedCommand: unknown verb, missing or extra arguments, or a
            non-integer where an index or time is expected.
    """
    stripped = line.strip()
    if not stripped:
        raise MalformedCommand(line, "empty command")

    head = stripped.split(None, 1)
    verb = head[0]
    rest = head[1] if len(head) > 1 else ""

    if verb == "say":
        parts = rest.split(None, 1)
        if len(parts) < 2:
            raise MalformedCommand(line, "say needs a name and a payload")
        return Say(sayer=parts[0], payload=parts[1])

    args = rest.split()

    if verb == "agree":
        _expect_args(line, verb, args, 2)
        return Agree(on_index=_uint(line, args[0], "statement index"), at=_uint(line, args[1], "time"))

    if verb == "enact":
        if len(args) < 2:
            raise MalformedCommand(line, "enact needs a name and a basis index")
        return Enact(
            actor=args[0],
            basis=_uint(line, args[1], "basis index"),
            justification=frozenset(_uint(line, a, "statement index") for a in args[2:]),
        )

    if verb == "now":
        _expect_args(line, verb, args, 1)
        return Now(now=_uint(line, args[0], "time"))

    if verb in ("inspect", "help", "quit", "exit"):
        _expect_args(line, verb, args, 0)
        if verb == "inspect":
            return Inspect()
        if verb == "help":
            return Help()
        return Quit()

    raise MalformedCommand(line, f"unknown command {verb!r}")
