"""
Tests for the I/O channels and the startup glue.
"""

from knights_quest import main as main_module
from knights_quest.core.constants import DEFAULT_HERO_NAME
from knights_quest.main import ask_hero_name, build_parser, create_hero
from knights_quest.ui.io import (
    CommandReader,
    ConsoleLineWriter,
    LineWriter,
    MemoryLineWriter,
    ScriptedCommandReader,
)


def test_scripted_reader_replays_then_ends():
    reader = ScriptedCommandReader(["w", "s"])
    assert reader.read_command("> ") == "w"
    assert reader.read_command() == "s"
    assert reader.read_command() is None
    assert reader.prompts == ["> ", "", ""]


def test_memory_writer_collects_lines():
    writer = MemoryLineWriter()
    writer.write_line("one")
    writer.write_line("two", style="bold")
    assert writer.text == "one\ntwo"
    assert writer.contains("tw")
    writer.clear()
    assert writer.lines == []


def test_implementations_match_protocols():
    assert isinstance(ScriptedCommandReader(), CommandReader)
    assert isinstance(MemoryLineWriter(), LineWriter)
    assert isinstance(ConsoleLineWriter(), LineWriter)


def test_hero_name_is_trimmed():
    writer = MemoryLineWriter()
    assert ask_hero_name(ScriptedCommandReader(["  Lancelot "]), writer) == "Lancelot"


def test_blank_hero_name_uses_default():
    writer = MemoryLineWriter()
    assert ask_hero_name(ScriptedCommandReader(["   "]), writer) == DEFAULT_HERO_NAME
    assert writer.contains(DEFAULT_HERO_NAME)


def test_missing_hero_name_uses_default():
    assert ask_hero_name(ScriptedCommandReader(), MemoryLineWriter()) == DEFAULT_HERO_NAME


def test_default_hero_stats():
    hero = create_hero("Percival")
    assert (hero.health, hero.max_health, hero.attack_power, hero.defense_power) == (
        100,
        100,
        20,
        10,
    )
    assert not hero.is_defending


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.seed is None
    assert args.log_level == "WARNING"
    assert args.enemies.name == "enemies.json"


def test_main_runs_headless(monkeypatch):
    writer = MemoryLineWriter()
    reader = ScriptedCommandReader(["", "q", "s"])
    monkeypatch.setattr(main_module, "ConsoleCommandReader", lambda: reader)
    monkeypatch.setattr(main_module, "ConsoleLineWriter", lambda: writer)
    assert main_module.main(["--name", "Gawain", "--seed", "7"]) == 0
    assert writer.lines[0] == "Welcome, Knight Gawain, to your adventure!"
    assert writer.contains("already full")
    assert writer.lines[-1] == "Game over. Thanks for playing!"


class InterruptingReader:
    """Reader whose player presses Ctrl-C at the first prompt."""

    def read_command(self, prompt=""):
        raise KeyboardInterrupt


def test_interrupt_at_name_prompt_exits_cleanly(monkeypatch):
    writer = MemoryLineWriter()
    monkeypatch.setattr(main_module, "ConsoleCommandReader", InterruptingReader)
    monkeypatch.setattr(main_module, "ConsoleLineWriter", lambda: writer)
    assert main_module.main([]) == 0
    assert writer.lines == ["Enter the name of your Knight: ", ""]


def test_interrupt_during_adventure_exits_cleanly(monkeypatch):
    writer = MemoryLineWriter()
    monkeypatch.setattr(main_module, "ConsoleCommandReader", InterruptingReader)
    monkeypatch.setattr(main_module, "ConsoleLineWriter", lambda: writer)
    assert main_module.main(["--name", "Bors"]) == 0
    assert writer.lines[0] == "Welcome, Knight Bors, to your adventure!"
    assert not writer.contains("Game over")
