"""In-game prompt buffers, one per local client."""

from __future__ import annotations

__all__ = ["PromptBuffer", "DevGui", "MAX_LOCAL_CLIENTS", "PROMPT"]

MAX_LOCAL_CLIENTS = 4
PROMPT = "> "
_TOGGLE_KEY = "`"


class PromptBuffer:
    """A line-editing buffer that always begins with the prompt."""

    def __init__(self) -> None:
        self.text = PROMPT

    def has_text(self) -> bool:
        """Return whether a complete line has been entered."""
        return "\n" in self.text

    def take_text(self) -> str:
        """Remove and return the first complete line, without the prompt.

        Raises ``ValueError`` when no complete line has been entered.
        """
        pos = self.text.find("\n")
        if pos < 0:
            raise ValueError("no complete line in the prompt buffer")
        start = len(PROMPT)
        line = self.text[start:pos]
        self.text = self.text[:start] + self.text[pos + 1 :]
        return line

    def type_char(self, c: str) -> None:
        """Append a typed character; NUL and the console toggle key are ignored."""
        if len(c) > 1:
            raise ValueError(f"expected a single character, got {c!r}")
        if c and c != "\0" and c != _TOGGLE_KEY:
            self.text += c

    def backspace(self) -> None:
        """Delete the last character, never the prompt."""
        if len(self.text) > len(PROMPT):
            self.text = self.text[:-1]

    def clear(self) -> None:
        """Reset the buffer to the bare prompt."""
        self.text = PROMPT


class DevGui:
    """Holds a prompt buffer for each local client."""

    def __init__(self) -> None:
        self._buffers = [PromptBuffer() for _ in range(MAX_LOCAL_CLIENTS)]

    def buffer(self, local_client: int) -> PromptBuffer:
        """Return the prompt buffer of ``local_client``."""
        if not 0 <= local_client < MAX_LOCAL_CLIENTS:
            raise IndexError(f"local client {local_client} out of range")
        return self._buffers[local_client]

    def has_text(self, local_client: int) -> bool:
        """Return whether ``local_client`` has entered a complete line."""
        return self.buffer(local_client).has_text()

    def take_text(self, local_client: int) -> str:
        """Remove and return the first complete line of ``local_client``."""
        return self.buffer(local_client).take_text()

    def shutdown(self) -> None:
        """Empty every buffer."""
        for buf in self._buffers:
            buf.text = ""