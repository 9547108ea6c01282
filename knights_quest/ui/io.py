"""
Input and output channels of the game.

The session only talks to a CommandReader and a LineWriter. The console
implementations use prompt_toolkit and rich; the in-memory ones drive the
game headlessly.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from prompt_toolkit import PromptSession

from knights_quest.core.utils import cprint


@runtime_checkable
class CommandReader(Protocol):
    """Source of player commands."""

    def read_command(self, prompt: str = "") -> str | None:
        """Returns the next line typed by the player, None on end of input."""
        ...


@runtime_checkable
class LineWriter(Protocol):
    """Append-only sink of game text."""

    def write_line(self, text: str = "", style: str | None = None) -> None:
        """Emits one line of text, optionally with a rich style."""
        ...


class ConsoleCommandReader:
    """Reads commands from the terminal through prompt_toolkit."""

    def __init__(self, session: PromptSession | None = None) -> None:
        self._session = session

    @property
    def session(self) -> PromptSession:
        # Created lazily, prompt_toolkit needs a real terminal.
        if self._session is None:
            self._session = PromptSession()
        return self._session

    def read_command(self, prompt: str = "") -> str | None:
        try:
            return self.session.prompt(prompt)
        except EOFError:
            return None


class ConsoleLineWriter:
    """Writes game text to the shared rich console."""

    def write_line(self, text: str = "", style: str | None = None) -> None:
        # Names typed by the player may contain brackets.
        cprint(text, style=style, markup=False, highlight=False)


class ScriptedCommandReader:
    """Replays a fixed list of commands, then reports end of input."""

    def __init__(self, commands: Iterable[str] = ()) -> None:
        self._commands: deque[str] = deque(commands)
        self.prompts: list[str] = []

    def push(self, *commands: str) -> None:
        self._commands.extend(commands)

    @property
    def remaining(self) -> int:
        return len(self._commands)

    def read_command(self, prompt: str = "") -> str | None:
        self.prompts.append(prompt)
        if not self._commands:
            return None
        return self._commands.popleft()


class MemoryLineWriter:
    """Collects game text in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, text: str = "", style: str | None = None) -> None:
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def contains(self, fragment: str) -> bool:
        return any(fragment in line for line in self.lines)

    def clear(self) -> None:
        self.lines.clear()
