"""Tests for the people-records command."""

import logging

from click.testing import CliRunner

from people_records.cli import configure_logging, main, summary_line

HEADER = "first_name,last_name,phone_number\n"
ROWS = "John,Smith,419-555-0100\nJane,Doe,614-555-0199\nAnn,Lee,419-555-0142\n"


def _write(tmp_path, body):
    path = tmp_path / "people.csv"
    path.write_text(HEADER + body, encoding="utf-8")
    return path


def test_lists_matching_names(tmp_path):
    path = _write(tmp_path, ROWS)
    result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "The following people have phone numbers from area code 419.",
        "John Smith",
        "Ann Lee",
    ]


def test_area_code_option(tmp_path):
    path = _write(tmp_path, ROWS)
    result = CliRunner().invoke(main, [str(path), "--area-code", "614"])
    assert result.exit_code == 0
    assert result.output.splitlines()[1:] == ["Jane Doe"]


def test_default_path_is_people_csv(tmp_path, monkeypatch):
    _write(tmp_path, ROWS)
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(main, ["--summary"])
    assert result.exit_code == 0
    assert result.output.strip() == "Parsed 3 people from people.csv."


def test_summary_header_only(tmp_path):
    path = _write(tmp_path, "")
    result = CliRunner().invoke(main, [str(path), "--summary"])
    assert result.exit_code == 0
    assert result.output.strip() == "Parsed 0 people from people.csv."


def test_missing_file_exits_nonzero(tmp_path):
    result = CliRunner().invoke(main, [str(tmp_path / "missing.csv")])
    assert result.exit_code == 1
    assert "missing.csv" in result.output


def test_malformed_row_exits_nonzero(tmp_path):
    path = _write(tmp_path, "Jane,Doe\n")
    result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code == 1
    assert "people.csv" in result.output
    assert "Line 2" in result.output


def test_summary_line_singular(tmp_path):
    assert summary_line(1, tmp_path / "people.csv") == "Parsed 1 person from people.csv."


def test_parent_is_a_file_exits_nonzero(tmp_path):
    parent = _write(tmp_path, ROWS)
    result = CliRunner().invoke(main, [str(parent / "x.csv")])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "x.csv" in result.output


def test_invalid_utf8_exits_nonzero(tmp_path):
    path = tmp_path / "people.csv"
    path.write_bytes(b"first,last,phone\nJo\xffhn,Smith,419-555-0100\n")
    result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "not valid UTF-8" in result.output


def test_logging_quiet_unless_verbose(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    configure_logging(False)
    configure_logging(True)
    assert calls[0]["level"] == logging.CRITICAL
    assert calls[1]["level"] == logging.DEBUG
