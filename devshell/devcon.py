"""Developer console on standard input and output."""

from __future__ import annotations

import select
import sys
import threading
from typing import TextIO

__all__ = ["DevConsole", "GREETING"]

GREETING = "Hello from DevCon!\n"


class DevConsole:
    """Reads whole lines from an input stream without blocking and prints text.

    At most one line is held at a time: a new line is not read until the
    previous one has been taken.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._io_lock = threading.Lock()
        self._in_lock = threading.Lock()
        self._select_lock = threading.Lock()
        self._text = ""
        self._has_text = False
        self.print_message(GREETING)

    def _line_ready(self) -> bool:
        try:
            fd = self._stdin.fileno()
        except (AttributeError, OSError, ValueError):
            # In-memory streams can always be read without blocking.
            return True
        with self._select_lock:
            readable, _, _ = select.select([fd], [], [], 0)
        return bool(readable)

    def frame(self) -> None:
        """Read one pending line from the input, if any and none is held."""
        if self._has_text:
            return
        if not self._line_ready():
            return
        with self._io_lock, self._in_lock:
            line = self._stdin.readline()
            if not line:
                return
            self._text = line[:-1] if line.endswith("\n") else line
            self._has_text = True

    def has_text(self) -> bool:
        """Return whether a line is waiting to be taken."""
        return self._has_text

    def take_text(self) -> str:
        """Return the held line and release it; empty when none is held."""
        with self._in_lock:
            text = self._text
            self._text = ""
            self._has_text = False
        return text

    def print_message(self, s: str) -> None:
        """Write ``s`` to the output exactly as given."""
        with self._io_lock:
            self._stdout.write(s)
            self._stdout.flush()

    def shutdown(self) -> None:
        """Drop any held line."""
        with self._in_lock:
            self._text = ""
            self._has_text = False