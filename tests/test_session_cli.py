"""
Tests for the session CLI commands.

Covers the run_* functions directly and the click wiring on top of them.
"""

from __future__ import annotations

import io
import json
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from justact.cli import cli
from justact.commands.session_cmd import run_inspect, run_script, run_shell
from justact.config import Settings

SCRIPT = """\
# two statements, one agreement, one enactment
say alice hello
say bob world
agree 0 10
now 10
enact carol 0 0
"""


@pytest.fixture
def script(tmp_path: Path) -> Path:
    path = tmp_path / "session.txt"
    path.write_text(SCRIPT, encoding="utf-8")
    return path


def _copy_stdin_to(path: Path) -> str:
    code = "import sys; open(sys.argv[1], 'w', encoding='utf-8').write(sys.stdin.read())"
    return f'"{sys.executable}" -c "{code}" "{path}"'


# -----------------------------------------------------------------------------
# run_* functions
# -----------------------------------------------------------------------------


def test_run_inspect_writes_only_the_stream(script: Path) -> None:
    out = io.StringIO()

    exit_code = run_inspect(Settings(), script, output=out)

    assert exit_code == 0
    records = [json.loads(line) for line in out.getvalue().splitlines()]
    assert [r["type"] for r in records] == [
        "AdvanceTime",
        "StateMessage",
        "StateMessage",
        "AddAgreement",
        "EnactAction",
    ]
    assert records[0]["timestamp"] == 10


def test_run_inspect_uses_label_style(script: Path) -> None:
    out = io.StringIO()

    run_inspect(Settings(label_style="char"), script, output=out)

    last = json.loads(out.getvalue().splitlines()[-1])
    assert last["action"]["id"] == ["carol", "a"]


def test_run_script_renders_final_state(script: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = run_script(Settings(), script)

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "current time: 10" in captured.out
    assert "carol" in captured.out


def test_run_script_reports_rejections(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("say alice hello\nagree 5 0\nenact bob 0 0\n", encoding="utf-8")

    exit_code = run_script(Settings(), path)

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "unsaid statement 5" in captured.err
    assert "unknown agreement 0" in captured.err
    assert "2 of 3 commands rejected" in captured.err


def test_run_script_stop_on_error_exits_nonzero(tmp_path: Path) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("agree 5 0\nsay alice hello\n", encoding="utf-8")

    assert run_script(Settings(), path, stop_on_error=True) == 1


def test_run_script_pipes_final_stream_to_inspector(script: Path, tmp_path: Path) -> None:
    received = tmp_path / "received.jsonl"
    settings = Settings(inspector=_copy_stdin_to(received), inspector_timeout=30)

    exit_code = run_script(settings, script)

    assert exit_code == 0
    lines = received.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 5
    assert json.loads(lines[-1])["who"] == "carol"


def test_run_script_inspect_lines_print_to_stdout(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "mid.txt"
    path.write_text("say alice hello\ninspect\nsay bob world\n", encoding="utf-8")
    received = tmp_path / "received.jsonl"
    settings = Settings(inspector=_copy_stdin_to(received), inspector_timeout=30)

    exit_code = run_script(settings, path)

    captured = capsys.readouterr()
    assert exit_code == 0
    assert '"type":"StateMessage","who":"alice"' in captured.out
    lines = received.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["type"] for line in lines] == [
        "AdvanceTime",
        "StateMessage",
        "StateMessage",
    ]


def test_run_script_inspector_failure_exits_nonzero(script: Path, tmp_path: Path) -> None:
    settings = Settings(inspector=str(tmp_path / "missing-inspector"))

    assert run_script(settings, script) == 1


def test_run_shell_reads_until_eof(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = run_shell(Settings(), stdin=io.StringIO("say alice hi\nnow 3\n"))

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "current time: 3" in captured.out
    assert "alice" in captured.out


# -----------------------------------------------------------------------------
# click wiring
# -----------------------------------------------------------------------------


def test_cli_inspect(script: Path) -> None:
    result = CliRunner().invoke(cli, ["inspect", str(script)])

    assert result.exit_code == 0, result.output
    lines = result.stdout.splitlines()
    assert json.loads(lines[0]) == {"kind": "control", "type": "AdvanceTime", "timestamp": 10}


def test_cli_label_style_option(script: Path) -> None:
    result = CliRunner().invoke(cli, ["--label-style", "char", "inspect", str(script)])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout.splitlines()[-1])["action"]["id"] == ["carol", "a"]


def test_cli_rejects_missing_config(script: Path, tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["--config", str(tmp_path / "nope.toml"), "inspect", str(script)])

    assert result.exit_code != 0
    assert "config file not found" in result.output


def test_cli_run_stop_on_error(tmp_path: Path) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("enact carol 0 0\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["run", "--stop-on-error", str(path)])

    assert result.exit_code == 1


@pytest.mark.parametrize("command", ["run", "inspect"])
def test_cli_rejects_undecodable_script(command: str, tmp_path: Path) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"say alice \xff\n")

    result = CliRunner().invoke(cli, [command, str(path)])

    assert result.exit_code == 1
    assert "cannot read script" in result.output
    assert "Traceback" not in result.output


def test_cli_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "justact" in result.output
