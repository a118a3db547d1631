"""Read and write indented ``Type(Name) = Value`` blocks.

    GlobalSection(SolutionConfigurationPlatforms) = preSolution
        Debug|Any CPU = Debug|Any CPU
    EndGlobalSection
"""

from __future__ import annotations

from slnfile.config import SectionBlock
from slnfile.dotnet.cursor import LineCursor, next_non_empty_line
from slnfile.dotnet.scanner import LineScanner
from slnfile.errors import MalformedSectionBlockError


class DefaultSectionBlockCodec:
    """Section codec for both ``GlobalSection`` and ``ProjectSection``."""

    def parse(self, cursor: LineCursor) -> SectionBlock:
        start_line = next_non_empty_line(cursor)
        if start_line is None:
            raise MalformedSectionBlockError("Expected a section, found end of file")

        scanner = LineScanner(start_line.lstrip())
        block_type = scanner.read_up_to_and_eat("(")
        parenthesized_name = scanner.read_up_to_and_eat(") = ")
        value = scanner.read_rest()

        end_line = "End" + block_type
        pairs: list[tuple[str, str | None]] = []
        while True:
            line = cursor.read_line()
            if line is None:
                raise MalformedSectionBlockError(f"Expected line: '{end_line}'")

            line = line.lstrip()
            # Blank lines inside a section are dropped
            if line == "":
                continue
            if line == end_line:
                break

            # A line without " = " is a bare key, kept with no value
            if " = " not in line:
                pairs.append((line, None))
                continue

            scanner = LineScanner(line)
            key = scanner.read_up_to_and_eat(" = ")
            pairs.append((key, scanner.read_rest()))

        return SectionBlock(
            type=block_type,
            parenthesized_name=parenthesized_name,
            value=value,
            key_value_pairs=tuple(pairs),
        )

    def render(self, block: SectionBlock, indent: int) -> str:
        tabs = "\t" * indent
        lines = [f"{tabs}{block.type}({block.parenthesized_name}) = {block.value}"]
        for key, value in block.key_value_pairs:
            if value is None:
                lines.append(f"{tabs}\t{key}")
            else:
                lines.append(f"{tabs}\t{key} = {value}")
        lines.append(f"{tabs}End{block.type}")
        return "".join(line + "\n" for line in lines)
