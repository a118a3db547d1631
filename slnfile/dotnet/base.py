"""Codec protocols for the blocks nested in a solution file."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from slnfile.config import ProjectBlock, SectionBlock
from slnfile.dotnet.cursor import LineCursor


@runtime_checkable
class ProjectBlockCodec(Protocol):
    """Reads and writes one ``Project(...) ... EndProject`` entry."""

    def parse(self, cursor: LineCursor) -> ProjectBlock:
        """Consume exactly the lines of one project entry.

        Only called when the cursor's next character is 'P'. Leaves the
        cursor at the start of the following line.
        """
        ...

    def render(self, block: ProjectBlock) -> str:
        """Return the full text of the entry, trailing newline included."""
        ...


@runtime_checkable
class SectionBlockCodec(Protocol):
    """Reads and writes one indented ``Type(Name) = Value`` block."""

    def parse(self, cursor: LineCursor) -> SectionBlock:
        """Consume one indented block through its ``End<Type>`` line."""
        ...

    def render(self, block: SectionBlock, indent: int) -> str:
        """Return the block's text indented by ``indent`` tabs."""
        ...
