"""Forward-only line cursor with one character of lookahead."""

from __future__ import annotations

import io
from typing import TextIO

_LINE_BREAKS = ("\r", "\n")
_INDENT = (" ", "\t")


class LineCursor:
    """Reads a character stream line by line, peeking one character ahead.

    Nothing is read from the stream beyond the single lookahead character,
    so the underlying stream is never read past the line being consumed.
    The only other buffered text is indentation held back by
    ``skip_blank_lines``. The cursor does not close the stream; that stays
    with the caller.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._next = stream.read(1)
        self._held_indent = ""

    @classmethod
    def from_text(cls, text: str) -> LineCursor:
        return cls(io.StringIO(text, newline=""))

    @property
    def at_end(self) -> bool:
        return self.peek() == ""

    def peek(self) -> str:
        """Return the next character without consuming it, or '' at end."""
        return self._held_indent[:1] or self._next

    def _advance(self) -> str:
        if self._held_indent:
            ch = self._held_indent[0]
            self._held_indent = self._held_indent[1:]
            return ch

        ch = self._next
        if ch:
            self._next = self._stream.read(1)
        return ch

    def read_line(self) -> str | None:
        """Consume and return the next line without its terminator.

        Accepts ``\\n``, ``\\r\\n`` and a lone ``\\r`` as line ends.
        Returns None once the stream is exhausted.
        """
        if self.at_end:
            return None

        chars = []
        while self.peek() and self.peek() not in _LINE_BREAKS:
            chars.append(self._advance())

        if self._advance() == "\r" and self.peek() == "\n":
            self._advance()
        return "".join(chars)

    def read_indent(self) -> str:
        """Consume leading spaces and tabs on the current line."""
        chars = []
        while self.peek() in _INDENT:
            chars.append(self._advance())
        return "".join(chars)

    def skip_blank_lines(self) -> None:
        """Consume empty and whitespace-only lines.

        Indentation of the next line with content is not lost: ``peek`` and
        ``read_line`` still see it.
        """
        while True:
            indent = self.read_indent()
            if not is_line_break(self.peek()):
                # Content follows, or a whitespace-only last line ends the stream
                if self.peek():
                    self._held_indent = indent
                return
            self.read_line()


def is_indent(ch: str) -> bool:
    return ch in _INDENT


def is_line_break(ch: str) -> bool:
    return ch in _LINE_BREAKS


def is_blank_or_comment(ch: str) -> bool:
    """True when a line starting with ``ch`` is empty or a '#' comment."""
    return ch == "#" or is_line_break(ch)


def next_non_empty_line(cursor: LineCursor) -> str | None:
    """Skip whitespace-only lines and return the next line, or None at end."""
    line = cursor.read_line()
    while line is not None and line.strip() == "":
        line = cursor.read_line()
    return line


def consume_blank_and_comment_lines(cursor: LineCursor) -> list[str]:
    """Consume a run of empty or comment lines and return them verbatim."""
    lines = []
    while is_blank_or_comment(cursor.peek()):
        lines.append(cursor.read_line())
    return lines
