import io
import logging
from pathlib import Path

import pytest

from orderings import cli


def _write(tmp_path: Path, name: str, lines: list[str]) -> Path:
    path = tmp_path / name
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_sort_prints_sorted_lines(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "input.txt", ["pear", "apple", "fig"])
    assert cli.main(["sort", str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["apple", "fig", "pear"]


def test_sort_with_rank_and_reverse(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "input.txt", ["Wed", "Sun", "Mon", "Tue"])
    assert cli.main(["sort", str(path), "--rank", "Mon,Tue,Wed"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Sun", "Mon", "Tue", "Wed"]

    assert cli.main(["sort", str(path), "--rank", "Mon,Tue,Wed", "--reverse"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Wed", "Tue", "Mon", "Sun"]


def test_sort_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("10\n9\n100\n"))
    assert cli.main(["sort", "--key", "numeric"]) == 0
    assert capsys.readouterr().out.splitlines() == ["9", "10", "100"]


def test_check_exit_codes(tmp_path: Path) -> None:
    ordered = _write(tmp_path, "ordered.txt", ["1", "2", "10"])
    assert cli.main(["check", str(ordered), "--key", "numeric"]) == 0
    assert cli.main(["check", str(ordered)]) == 1


def test_check_logs_first_violation(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = _write(tmp_path, "input.txt", ["a", "c", "b", "a"])
    with caplog.at_level(logging.WARNING, logger="orderings.cli"):
        assert cli.main(["check", str(path)]) == 1
    assert "Line 2 ('c') sorts after line 3 ('b')" in caplog.text


def test_missing_file_is_a_usage_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["sort", str(tmp_path / "missing.txt")])
    assert excinfo.value.code == 2


def test_undecodable_file_is_a_usage_error(tmp_path: Path) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"b\n\xff\xfe\na\n")
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["sort", str(path)])
    assert excinfo.value.code == 2


def test_undecodable_stdin_is_a_usage_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"a\n\xff\n"), encoding="utf-8"))
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["check"])
    assert excinfo.value.code == 2


def test_no_strip_keeps_surrounding_whitespace(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "input.txt", ["a ", "  b"])
    assert cli.main(["sort", str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["a", "b"]

    assert cli.main(["sort", str(path), "--no-strip"]) == 0
    assert capsys.readouterr().out.splitlines() == ["  b", "a "]
