"""Tests for the console entry point."""

import pytest

from chatbot import format_result, handle, main


def test_main_processes_statements(capsys):
    code = main(["All dogs are mammals",
                 "All mammals are animals",
                 "Are all dogs animals?",
                 "Are all animals dogs?"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Learned: all dogs are mammals" in out
    assert "Yes" in out and "dogs → mammals → animals" in out
    assert "Unknown" in out


def test_main_stops_at_exit(capsys):
    main(["All dogs are mammals", "exit", "No dogs are cats"])
    out = capsys.readouterr().out
    assert "dogs are mammals" in out
    assert "cats" not in out


def test_main_writes_plot(tmp_path, capsys):
    target = tmp_path / "kb.png"
    main(["--plot", str(target), "No dogs are cats"])
    assert target.exists()
    assert target.stat().st_size > 0


def test_main_interactive(monkeypatch, capsys):
    lines = iter(["All dogs are mammals", "", "nouns", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "dogs, mammals" in out


def test_main_interactive_eof(monkeypatch):
    def eof(prompt=""):
        raise EOFError
    monkeypatch.setattr("builtins.input", eof)
    assert main([]) == 0


def test_main_rejects_bad_log_level():
    with pytest.raises(SystemExit):
        main(["--log-level", "LOUD"])


class TestHandle:
    def test_commands(self, validator):
        assert handle(validator, "nouns") == "(no nouns yet)"
        assert handle(validator, "edges") == "(no edges yet)"
        assert "All <A> are <B>" in handle(validator, "help")
        assert handle(validator, "EXIT") is None

    def test_edges_table(self, validator):
        handle(validator, "All dogs are mammals")
        table = handle(validator, "edges")
        assert "source" in table and "not-mammals" in table

    def test_stats(self, validator):
        handle(validator, "No dogs are cats")
        stats = handle(validator, "stats")
        assert "nouns" in stats and "exclusion_edges" in stats


def test_format_result_non_logical(validator):
    result = validator.validate("Where is Paris?")
    assert format_result(result).startswith("🤷")


def test_format_result_no(validator):
    validator.validate("No dogs are cats")
    assert "No" in format_result(validator.validate("Are all dogs cats?"))
