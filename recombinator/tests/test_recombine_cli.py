# File: recombinator/tests/test_recombine_cli.py
# Version: v0.1.1

"""
CLI smoke tests: stdout output, grouping, error exits, --count, -o and stdin.
"""

from __future__ import annotations

import io
import logging

import pytest

from recombinator.app.cli.recombine_cli import _log_plan, main
from recombinator.app.config.config_recombine import RecombineParameters
from recombinator.app.core.config import settings
from recombinator.app.core.recombination.recombinator import prepare
from recombinator.app.core.recombination.sequence_index import GroupingMode

AB = ">A\nAAAA\n>B\nBBBB\n"


def test_basic_run_to_stdout(write_fasta, capsys):
    p = write_fasta("ab.fa", AB)
    main(["-b", "2", str(p)])
    assert capsys.readouterr().out == ">A|@2|B\nAABB\n>B|@2|A\nBBAA\n"


def test_group_by_file(write_fasta, capsys):
    f1 = write_fasta("f1.fa", ">A\nAAA\n")
    f2 = write_fasta("f2.fa", ">B\nBBB\n>C\nCCC\n")
    main(["--group-by-file", "--breakpoint=1", str(f1), str(f2)])
    out = capsys.readouterr().out
    headers = [ln[1:] for ln in out.splitlines() if ln.startswith(">")]
    assert headers == ["A|@1|B", "A|@1|C", "B|@1|A", "C|@1|A"]


def test_comma_list_and_repeats(write_fasta, capsys):
    p = write_fasta("abc.fa", ">a\nAAAAAA\n>b\nBBBBBB\n>c\nCCCCCC\n")
    main(["-b", "4,2", "-b", "2", str(p)])
    headers = [ln for ln in capsys.readouterr().out.splitlines() if ln.startswith(">")]
    assert headers[0] == ">a|@2|b|@4|a"
    assert len(headers) == 3 * 2 * 2


@pytest.mark.parametrize(
    "argv_extra, msg",
    [
        (["-b", "4"], "shortest"),
        (["-b", "1,2,3"], "at most"),
        (["-b", "0"], "must be > 0"),
        (["-b", "1", "--group-by-file"], "at least 2"),
    ],
)
def test_validation_errors_exit_2_with_no_output(write_fasta, capsys, argv_extra, msg):
    p = write_fasta("ab.fa", AB)
    with pytest.raises(SystemExit) as exc:
        main(argv_extra + [str(p)])
    assert exc.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[ERROR]" in captured.err and msg in captured.err


def test_missing_input_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-b", "1", str(tmp_path / "nope.fa")])
    assert exc.value.code == 2
    assert "[ERROR]" in capsys.readouterr().err


def test_output_file_not_created_on_error(write_fasta, tmp_path):
    p = write_fasta("ab.fa", AB)
    out = tmp_path / "out.fa"
    with pytest.raises(SystemExit):
        main(["-b", "9", "-o", str(out), str(p)])
    assert not out.exists()


def test_output_file(write_fasta, tmp_path, capsys):
    p = write_fasta("ab.fa", AB)
    out = tmp_path / "out.fa"
    main(["-b", "2", "-o", str(out), "--wrap", "2", str(p)])
    assert capsys.readouterr().out == ""
    assert out.read_text(encoding="utf-8") == ">A|@2|B\nAA\nBB\n>B|@2|A\nBB\nAA\n"


def test_count_only(write_fasta, capsys):
    p = write_fasta("abc.fa", ">a\nAAAAAA\n>b\nBBBBBB\n>c\nCCCCCC\n")
    main(["--count", "-b", "2,4", str(p)])
    assert capsys.readouterr().out.strip() == "12"


def test_reads_stdin_when_no_paths(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(AB))
    main(["-b", "2"])
    assert capsys.readouterr().out == ">A|@2|B\nAABB\n>B|@2|A\nBBAA\n"


def test_parameters_model_from_namespace():
    params = RecombineParameters.model_validate(
        {"inputs": None, "breakpoints": None, "group_by_file": True, "wrap": 0, "log_level": "INFO"}
    )
    assert params.inputs == [] and params.breakpoints == []
    assert params.grouping_mode is GroupingMode.BY_SOURCE
    assert params.output is None


def test_negative_wrap_rejected(write_fasta, capsys):
    p = write_fasta("ab.fa", AB)
    with pytest.raises(SystemExit) as exc:
        main(["-b", "2", "--wrap", "-1", str(p)])
    assert exc.value.code == 2


def test_stdin_twice_is_rejected(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(AB))
    with pytest.raises(SystemExit) as exc:
        main(["-b", "1", "--group-by-file", "-", "-"])
    assert exc.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[ERROR]" in captured.err and "stdin" in captured.err


def test_empty_plan_warning_names_the_cause(make_seqs, caplog):
    log = logging.getLogger("recombine_cli_test")

    single = prepare([make_seqs(("A", "AAAA"))], ["2"])
    with caplog.at_level(logging.WARNING, logger="recombine_cli_test"):
        assert _log_plan(log, single) == 0
    assert "Self-adjacency" in caplog.text
    assert "grouping" not in caplog.text

    caplog.clear()
    grouped = prepare([make_seqs(("A", "AAAAAA")), make_seqs(("B", "BBBBBB"))], ["2,4"], group_by_file=True)
    with caplog.at_level(logging.WARNING, logger="recombine_cli_test"):
        assert _log_plan(log, grouped) == 0
    assert "grouping rules" in caplog.text


def test_invalid_log_level_from_environment(monkeypatch, write_fasta, capsys):
    monkeypatch.setattr(settings, "LOG_LEVEL", "TRACE")
    p = write_fasta("ab.fa", AB)
    with pytest.raises(SystemExit) as exc:
        main(["-b", "2", str(p)])
    assert exc.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "invalid log level 'TRACE'" in captured.err
