"""Unit tests for the minspan command line."""

import io
from pathlib import Path

import pytest

from minspan import cli


HISTORY_LINES = [
    "colossally urban lapidarians",
    "curl https://rust-lang.org",
    "ls -la",
    "curl https://rust-lang.org",
    "cat url.txt",
]


@pytest.fixture
def history_file(tmp_path: Path) -> Path:
    path = tmp_path / "history"
    path.write_text("\n".join(HISTORY_LINES) + "\n", encoding="utf-8")
    return path


def test_prints_best_matches_first(history_file: Path, capsys) -> None:
    exit_code = cli.main(["curl", str(history_file)])

    lines = capsys.readouterr().out.splitlines()
    assert exit_code == cli.EXIT_OK
    assert lines == [
        "curl https://rust-lang.org",
        "cat url.txt",
        "colossally urban lapidarians",
    ]


def test_keep_duplicates(history_file: Path, capsys) -> None:
    cli.main(["curl", str(history_file), "--all"])
    lines = capsys.readouterr().out.splitlines()
    assert lines.count("curl https://rust-lang.org") == 2


def test_limit_and_spans(history_file: Path, capsys) -> None:
    cli.main(["curl", str(history_file), "--limit", "1", "--show-spans"])
    assert capsys.readouterr().out == "0:4\tcurl https://rust-lang.org\n"


def test_limit_from_environment(history_file: Path, capsys, monkeypatch) -> None:
    monkeypatch.setenv("MINSPAN_RESULT_LIMIT", "2")
    cli.main(["curl", str(history_file)])
    assert len(capsys.readouterr().out.splitlines()) == 2


def test_reads_stdin(capsys, monkeypatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("ls -la\nlsblk\n"))
    exit_code = cli.main(["lsb"])

    assert exit_code == cli.EXIT_OK
    assert capsys.readouterr().out == "lsblk\n"


def test_no_match_exit_code(history_file: Path, capsys) -> None:
    exit_code = cli.main(["zzz", str(history_file)])
    assert exit_code == cli.EXIT_NO_MATCH
    assert capsys.readouterr().out == ""


def test_missing_file(tmp_path: Path, capsys) -> None:
    exit_code = cli.main(["curl", str(tmp_path / "absent")])
    assert exit_code == cli.EXIT_ERROR
    assert capsys.readouterr().err.startswith("Error:")


def test_invalid_limit(history_file: Path, capsys) -> None:
    exit_code = cli.main(["curl", str(history_file), "--limit", "0"])
    assert exit_code == cli.EXIT_ERROR
    assert "Error:" in capsys.readouterr().err


def test_invalid_log_level(history_file: Path, capsys) -> None:
    exit_code = cli.main(["curl", str(history_file), "--log-level", "chatty"])
    assert exit_code == cli.EXIT_ERROR


def test_json_logs_go_to_stderr(history_file: Path, capsys) -> None:
    cli.main(["curl", str(history_file), "--log-level", "debug", "--json-logs"])

    captured = capsys.readouterr()
    assert '"logger":"minspan.ranking"' in captured.err
    assert "minspan.ranking" not in captured.out


def test_invalid_utf8_on_stdin_is_replaced(capsys, monkeypatch) -> None:
    stdin = io.TextIOWrapper(io.BytesIO(b"curl \xff\xfe x\nls\n"), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", stdin)

    exit_code = cli.main(["curl"])

    assert exit_code == cli.EXIT_OK
    assert capsys.readouterr().out == "curl \ufffd\ufffd x\n"


def test_flags_turn_off_environment_booleans(history_file: Path, capsys, monkeypatch) -> None:
    monkeypatch.setenv("MINSPAN_SHOW_SPANS", "true")
    monkeypatch.setenv("MINSPAN_LOG_JSON", "true")
    monkeypatch.setenv("MINSPAN_LOG_LEVEL", "debug")

    cli.main(["curl", str(history_file), "--limit", "1", "--no-show-spans", "--no-json-logs"])

    captured = capsys.readouterr()
    assert captured.out == "curl https://rust-lang.org\n"
    assert '"logger":"minspan.ranking"' not in captured.err
    assert "[minspan.ranking]" in captured.err


def test_show_spans_from_environment(history_file: Path, capsys, monkeypatch) -> None:
    monkeypatch.setenv("MINSPAN_SHOW_SPANS", "true")
    cli.main(["curl", str(history_file), "--limit", "1"])
    assert capsys.readouterr().out == "0:4\tcurl https://rust-lang.org\n"
