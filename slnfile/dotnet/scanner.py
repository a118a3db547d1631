"""Delimiter-driven field scanner for a single line."""

from __future__ import annotations


class LineScanner:
    """Walks a line left to right, splitting it on successive delimiters."""

    def __init__(self, line: str) -> None:
        self.line = line
        self.position = 0

    def read_up_to_and_eat(self, delimiter: str) -> str:
        """Return the text up to ``delimiter`` and move past it.

        If the delimiter does not occur, the rest of the line is returned.
        """
        index = self.line.find(delimiter, self.position)
        if index == -1:
            return self.read_rest()

        field = self.line[self.position:index]
        self.position = index + len(delimiter)
        return field

    def read_rest(self) -> str:
        rest = self.line[self.position:]
        self.position = len(self.line)
        return rest
