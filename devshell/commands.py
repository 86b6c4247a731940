"""Named console commands and the arguments of the current input line."""

from __future__ import annotations

from collections import deque
from typing import Callable

from devshell.parsing import split

__all__ = ["CommandRegistry"]

Command = Callable[[], object]


class CommandRegistry:
    """Maps command names to callables and holds the current arguments."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._args: deque[str] = deque()

    @property
    def args(self) -> list[str]:
        """A copy of the current argument list."""
        return list(self._args)

    def add(self, name: str, fn: Command) -> bool:
        """Register ``fn`` under ``name``, replacing any previous one.

        Returns whether a command of that name already existed.
        """
        existed = name in self._commands
        self._commands[name] = fn
        return existed

    def exists(self, name: str) -> bool:
        """Return whether a command called ``name`` is registered."""
        return name in self._commands

    def find(self, name: str) -> Command | None:
        """Return the command called ``name``, or ``None`` if there is none."""
        return self._commands.get(name)

    def remove(self, name: str) -> None:
        """Unregister ``name``; unknown names are ignored."""
        self._commands.pop(name, None)

    def clear(self) -> None:
        """Unregister every command."""
        self._commands.clear()

    def take_input(self, text: str) -> None:
        """Replace the current arguments with the tokens of ``text``.

        Raises ``ValueError`` for empty input, leaving no arguments.
        """
        self._args.clear()
        self._args.extend(split(text))

    def push_front(self, arg: str) -> None:
        """Insert ``arg`` before the current first argument."""
        self._args.appendleft(arg)

    def argc(self) -> int:
        """Return the number of current arguments."""
        return len(self._args)

    def argv(self, i: int) -> str:
        """Return argument ``i``, or an empty string when out of range.

        Raises ``IndexError`` for a negative index.
        """
        if i < 0:
            raise IndexError(f"argument index must be non-negative, got {i}")
        if i >= len(self._args):
            return ""
        return self._args[i]