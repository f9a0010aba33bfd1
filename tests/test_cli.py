"""Tests for the hporecord command line."""

import pytest

from hporecord import EvalState, RecordJournal, decode, encode
from hporecord.cli import build_parser, main


@pytest.fixture
def journal_path(tmp_path, study, evaluation):
    journal = RecordJournal(tmp_path / "study.jsonl")
    journal.append(study)
    journal.append(evaluation)
    journal.append(evaluation.with_state(EvalState.COMPLETE, values=[0.9, 0.2]))
    return journal.path


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_check_valid(journal_path, capsys):
    assert main(["check", str(journal_path)]) == 0
    assert "3 record(s)" in capsys.readouterr().err


def test_check_reports_errors(journal_path, evaluation, capsys):
    RecordJournal(journal_path).append(evaluation.with_state(EvalState.FAILED))
    assert main(["check", str(journal_path)]) == 1
    err = capsys.readouterr().err
    assert "after terminal COMPLETE" in err
    assert "invalid" in err


def test_check_malformed(journal_path, capsys):
    with open(journal_path, "a") as f:
        f.write('{"type": "study"}\n')
    assert main(["check", str(journal_path)]) == 1
    assert "Malformed record" in capsys.readouterr().err


def test_check_skip_malformed(journal_path):
    with open(journal_path, "a") as f:
        f.write("garbage\n")
    assert main(["check", "--skip-malformed", str(journal_path)]) == 0


def test_check_missing_file(tmp_path):
    assert main(["check", str(tmp_path / "nope.jsonl")]) == 2


def test_path_from_env(journal_path, monkeypatch):
    monkeypatch.setenv("HPORECORD_JOURNAL", str(journal_path))
    assert main(["check"]) == 0


def test_fmt_is_canonical(journal_path, study, capsys):
    with open(journal_path, "a") as f:
        f.write('{"id": "s9", "type": "study", "spans": [], "params": [], "values": []}\n')

    assert main(["fmt", str(journal_path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    assert lines[0] == encode(study)
    assert lines[3] == '{"type": "study", "id": "s9", "attrs": {}, "spans": [], "params": [], "values": []}'
    assert decode(lines[3]).id == "s9"
