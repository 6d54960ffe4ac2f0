"""
Tests for audit sinks.

The inspector tests launch real child interpreters:
- a reader that copies stdin to a file
- a consumer that exits without reading
- a consumer that never drains its stdin (backpressure)
"""

from __future__ import annotations

import io
import json
import sys
from pathlib import Path

import pytest

from justact.audit import InspectorError, InspectorSink, StreamSink, encode
from justact.ledger import Session


def _copy_stdin_to(path: Path) -> list[str]:
    code = "import sys; open(sys.argv[1], 'w', encoding='utf-8').write(sys.stdin.read())"
    return [sys.executable, "-c", code, str(path)]


def _big_session(n: int = 2000) -> Session:
    s = Session()
    for i in range(n):
        s.declare(f"speaker-{i}", "x" * 100)
    return s


def test_stream_sink_writes_jsonl(populated_session: Session) -> None:
    buf = io.StringIO()

    count = StreamSink(buf).emit(populated_session.serialize())

    assert count == 5
    assert buf.getvalue() == encode(populated_session.serialize())


def test_inspector_receives_full_stream(populated_session: Session, tmp_path: Path) -> None:
    out = tmp_path / "received.jsonl"
    sink = InspectorSink(_copy_stdin_to(out), timeout=30)

    result = sink.emit(populated_session.serialize())

    assert result.success
    assert result.events_written == 5
    received = out.read_text(encoding="utf-8")
    assert received == encode(populated_session.serialize())
    assert result.bytes_written == len(received.encode("utf-8"))
    assert json.loads(received.splitlines()[0])["type"] == "AdvanceTime"


def test_inspector_command_string_is_shell_split() -> None:
    sink = InspectorSink("jq -c '.type'")

    assert sink.argv == ("jq", "-c", ".type")


def test_empty_inspector_command_is_rejected() -> None:
    with pytest.raises(ValueError):
        InspectorSink("   ")


def test_inspector_nonzero_exit_is_reported_not_raised(populated_session: Session) -> None:
    code = "import sys; sys.stdin.read(); sys.exit(3)"
    sink = InspectorSink([sys.executable, "-c", code], timeout=30)

    result = sink.emit(populated_session.serialize())

    assert result.returncode == 3
    assert not result.success


def test_inspector_that_exits_without_reading() -> None:
    sink = InspectorSink([sys.executable, "-c", "pass"], timeout=30)

    result = sink.emit(_big_session().serialize())

    assert result.returncode == 0


def test_non_draining_inspector_times_out() -> None:
    sink = InspectorSink([sys.executable, "-c", "import time; time.sleep(60)"], timeout=0.5)

    with pytest.raises(InspectorError, match="timed out"):
        sink.emit(_big_session().serialize())


def test_missing_inspector_executable(populated_session: Session, tmp_path: Path) -> None:
    sink = InspectorSink([str(tmp_path / "no-such-inspector")])

    with pytest.raises(InspectorError, match="cannot start"):
        sink.emit(populated_session.serialize())


def test_session_survives_inspector_failure(populated_session: Session) -> None:
    sink = InspectorSink([sys.executable, "-c", "import time; time.sleep(60)"], timeout=0.2)

    with pytest.raises(InspectorError):
        sink.emit(populated_session.serialize())

    assert populated_session.declare("dave", "still here") == 2
