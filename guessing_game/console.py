"""
Console - Line input and message output for the game loop.

The loop talks to these objects instead of stdin/stdout so that a
scripted sequence of lines can stand in for a real player.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, Iterable, TextIO
import sys


class LineSource(ABC):
    """Blocking source of input lines."""

    @abstractmethod
    def read_line(self) -> str | None:
        """
        Read the next line.

        Returns:
            The line (terminator may be included), or None at end-of-input
        """
        pass


class StreamLineSource(LineSource):
    """Reads from a text stream, stdin by default."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdin

    def read_line(self) -> str | None:
        line = self.stream.readline()
        # readline() returns "" only at EOF; a blank line is still "\n"
        if line == "":
            return None
        return line


class ScriptedLineSource(LineSource):
    """
    Replays a fixed list of lines, then reports end-of-input.

    Tracks how many reads were made, including the final EOF read.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines = list(lines)
        self._position = 0
        self.reads = 0

    def read_line(self) -> str | None:
        self.reads += 1
        if self._position >= len(self._lines):
            return None
        line = self._lines[self._position]
        self._position += 1
        return line

    @property
    def remaining(self) -> int:
        """Lines not yet consumed."""
        return len(self._lines) - self._position


class Console:
    """
    Output sink.

    Every message is passed to `write` and also kept in `lines`.
    """

    def __init__(self, write: Callable[[str], None] | None = None):
        self._write = write if write is not None else print
        self.lines: list[str] = []

    def say(self, message: str):
        """Emit one message."""
        self.lines.append(message)
        self._write(message)
