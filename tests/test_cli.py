# tests/test_cli.py - CLI smoke checks (argument, demo and interactive modes)

import io

import pytest
from rich.console import Console
from rich.prompt import Prompt

from khmer_transliterator.cli import CLI, main
from khmer_transliterator.utils.config_manager import ENV_CONFIG


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120)


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch):
    monkeypatch.delenv(ENV_CONFIG, raising=False)


def _out(console):
    return console.file.getvalue()


def test_argument_mode(corpus_file, console):
    assert main(["jg", "xyz123", "--dataset", str(corpus_file)], console=console) == 0
    out = _out(console)
    assert "ចង់" in out and "ជាង" in out
    assert "(no suggestions)" in out


def test_demo_mode(corpus_file, console):
    assert main(["--demo", "--dataset", str(corpus_file)], console=console) == 0
    assert "Demo completed." in _out(console)


def test_missing_dataset_still_runs(tmp_path, console):
    assert main(["jg", "--dataset", str(tmp_path / "missing.txt")], console=console) == 0
    assert "(no suggestions)" in _out(console)


@pytest.mark.parametrize("override", [["max_suggestions", "lots"], ["unknown", "1"]])
def test_bad_config_override(corpus_file, console, override):
    code = main(["jg", "--dataset", str(corpus_file), "--set", *override], console=console)
    assert code == 2
    out = _out(console)
    assert "Config error" in out
    assert "'no such option" not in out


def test_interactive_accept_and_commands(transliterator, console, monkeypatch):
    answers = iter(["jg", "2", "/stats", "/config", "/bogus", "", "exit"])
    monkeypatch.setattr(Prompt, "ask", lambda *a, **k: next(answers))

    cli = CLI(transliterator, console=console)
    cli.run()

    assert not cli.running
    assert transliterator.search_exact("jg")[0] == "ជាង"
    out = _out(console)
    assert "Accepted:" in out
    assert "events=1" in out
    assert "max_suggestions" in out
    assert "Unknown command:" in out


def test_interactive_rejects_bad_pick(transliterator, console, monkeypatch):
    answers = iter(["jg", "9", "/quit"])
    monkeypatch.setattr(Prompt, "ask", lambda *a, **k: next(answers))
    CLI(transliterator, console=console).run()
    assert "Not a suggestion number:" in _out(console)
    assert transliterator.tracker.stats()["total_events"] == 0


def test_interactive_eof_exits(transliterator, console, monkeypatch):
    def eof(*a, **k):
        raise EOFError

    monkeypatch.setattr(Prompt, "ask", eof)
    cli = CLI(transliterator, console=console)
    cli.run()
    assert not cli.running


def test_interactive_fuzzy_pick_is_learned(transliterator, console, monkeypatch):
    answers = iter(["slah", "1", "/stats", "/quit"])
    monkeypatch.setattr(Prompt, "ask", lambda *a, **k: next(answers))
    CLI(transliterator, console=console).run()
    out = _out(console)
    assert "Accepted:" in out
    assert "events=1" in out
    assert transliterator.index.frequency("slanh", "ស្លាញ់") == 2


def test_interactive_pick_that_cannot_be_learned(transliterator, console, monkeypatch):
    answers = iter(["jg", "1", "/quit"])
    monkeypatch.setattr(Prompt, "ask", lambda *a, **k: next(answers))
    monkeypatch.setattr(transliterator, "accept", lambda key, word: False)
    CLI(transliterator, console=console).run()
    assert "Nothing learned for:" in _out(console)
