"""Formatted printing to the developer console and to standard error."""

from __future__ import annotations

import enum
import sys
from typing import Any, TextIO

from devshell.devcon import DevConsole

__all__ = ["Destination", "FatalError", "Printer"]


class Destination(enum.Enum):
    """Where a message goes."""

    DEVCON = enum.auto()
    CLIENT = enum.auto()
    ERR = enum.auto()


class FatalError(Exception):
    """Raised after a fatal error has been reported."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


def _format(fmt: Any, args: tuple[Any, ...]) -> str:
    if not isinstance(fmt, str):
        return "{}".format(fmt)
    return fmt.format(*args)


class Printer:
    """Formats messages with ``str.format`` syntax and routes them.

    Client messages go to the developer console; debug-only variants print
    nothing unless ``debug`` is set.
    """

    def __init__(
        self,
        devcon: DevConsole | None = None,
        stderr: TextIO | None = None,
        debug: bool = False,
    ) -> None:
        self._devcon = devcon
        self._stderr = stderr
        self.debug = debug

    def _emit(self, dest: Destination, msg: str) -> None:
        if dest is Destination.CLIENT:
            dest = Destination.DEVCON
        if dest is Destination.ERR:
            stream = self._stderr if self._stderr is not None else sys.stderr
            stream.write(msg)
            stream.flush()
        elif self._devcon is not None:
            self._devcon.print_message(msg)
        else:
            sys.stdout.write(msg)
            sys.stdout.flush()

    def print(self, dest: Destination, fmt: Any, *args: Any) -> None:
        """Format and print a message."""
        self._emit(dest, _format(fmt, args))

    def println(self, dest: Destination, fmt: Any = "", *args: Any) -> None:
        """Format and print a message followed by a newline."""
        self._emit(dest, _format(fmt, args) + "\n")

    def dprint(self, dest: Destination, fmt: Any, *args: Any) -> None:
        """Like :meth:`print`, but only in debug mode."""
        if self.debug:
            self.print(dest, fmt, *args)

    def dprintln(self, dest: Destination, fmt: Any = "", *args: Any) -> None:
        """Like :meth:`println`, but only in debug mode."""
        if self.debug:
            self.println(dest, fmt, *args)

    def error(self, fmt: Any, *args: Any, code: int = -1) -> None:
        """Report a fatal error on standard error and raise :class:`FatalError`."""
        message = _format(fmt, args)
        self._emit(Destination.ERR, f"FATAL ERROR: {message}")
        raise FatalError(code, message)

    def errorln(self, fmt: Any, *args: Any, code: int = -1) -> None:
        """Report a fatal error line with its code and raise :class:`FatalError`."""
        message = _format(fmt, args)
        self._emit(Destination.ERR, f"FATAL ERROR: {message} ({code})\n")
        raise FatalError(code, message)