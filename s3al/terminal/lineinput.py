"""Prompt and edit-line rendering for the interactive terminal."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable
from typing import Optional, TextIO

_CLEAR_LINE = "\r\x1b[2K"


class LineInput:
    """The line being typed, its cursor, and how it is drawn.

    State is guarded by a lock so log output from other threads can clear and
    redraw the line safely.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        prompt: Optional[Callable[[], str]] = None,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.prompt = prompt
        self._lock = threading.Lock()
        self._buffer = ""
        self._cursor = 0
        self._reading = threading.Event()

    @property
    def is_reading(self) -> bool:
        return self._reading.is_set()

    def update(self, buffer: str, cursor: int) -> None:
        with self._lock:
            self._buffer = buffer
            self._cursor = cursor

    def _render(self, buffer: str, cursor: int) -> None:
        prompt = self.prompt() if self.prompt is not None else None
        text = _CLEAR_LINE + (prompt or "") + buffer
        if prompt is not None and cursor < len(buffer):
            text += f"\r\x1b[{cursor + len(prompt)}C"
        self.stream.write(text)
        self.stream.flush()

    def display(self, buffer: str, cursor: int) -> None:
        """Draw the prompt and ``buffer`` with the cursor at ``cursor``."""
        self._render(buffer, cursor)

    def redraw(self) -> None:
        """Redraw the current line, if a line is being read."""
        if not self.is_reading:
            return
        with self._lock:
            self._render(self._buffer, self._cursor)

    def clear_line(self) -> None:
        """Blank the current line, if a line is being read."""
        if not self.is_reading:
            return
        self.stream.write(_CLEAR_LINE)
        self.stream.flush()

    def start_reading(self) -> None:
        with self._lock:
            self._buffer = ""
            self._cursor = 0
            self._reading.set()

    def stop_reading(self) -> None:
        self._reading.clear()

    def snapshot(self) -> tuple[str, int]:
        """The current buffer and cursor."""
        with self._lock:
            return self._buffer, self._cursor

    def handle_backspace(self, buffer: str, cursor: int) -> Optional[tuple[str, int]]:
        """Erase before the cursor; None if there is nothing to erase."""
        if not buffer or cursor == 0:
            return None
        buffer = buffer[: cursor - 1] + buffer[cursor:]
        cursor -= 1
        self.update(buffer, cursor)
        self.display(buffer, cursor)
        return buffer, cursor

    def handle_cursor_movement(self, key: str, cursor: int, buffer_size: int) -> Optional[int]:
        """Move right ('C') or left ('D'); None if the cursor cannot move."""
        if key == "C":
            if cursor >= buffer_size:
                return None
            cursor += 1
            self.stream.write("\x1b[C")
        elif key == "D":
            if cursor == 0:
                return None
            cursor -= 1
            self.stream.write("\x1b[D")
        else:
            return None
        self.stream.flush()
        buffer, _ = self.snapshot()
        self.update(buffer, cursor)
        return cursor

    def handle_char_input(self, char: str, buffer: str, cursor: int) -> tuple[str, int]:
        """Insert ``char`` at the cursor and redraw."""
        buffer = buffer[:cursor] + char + buffer[cursor:]
        cursor += 1
        self.update(buffer, cursor)
        self.display(buffer, cursor)
        return buffer, cursor