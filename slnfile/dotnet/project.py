"""Read and write ``Project(...) = ... EndProject`` entries."""

from __future__ import annotations

from slnfile.config import ProjectBlock
from slnfile.dotnet.base import SectionBlockCodec
from slnfile.dotnet.cursor import LineCursor, is_indent
from slnfile.dotnet.scanner import LineScanner
from slnfile.dotnet.section import DefaultSectionBlockCodec
from slnfile.errors import MalformedProjectBlockError


class DefaultProjectBlockCodec:
    """Project codec; nested ``ProjectSection`` blocks go to ``section_codec``.

    Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "App", "App\\App.csproj", "{...}"
        ProjectSection(ProjectDependencies) = postProject
            {...} = {...}
        EndProjectSection
    EndProject
    """

    def __init__(self, section_codec: SectionBlockCodec | None = None) -> None:
        self.section_codec = section_codec or DefaultSectionBlockCodec()

    def parse(self, cursor: LineCursor) -> ProjectBlock:
        start_line = cursor.read_line()
        if start_line is None:
            raise MalformedProjectBlockError("Expected a project, found end of file")

        scanner = LineScanner(start_line.lstrip())
        if scanner.read_up_to_and_eat('("') != "Project":
            raise MalformedProjectBlockError(f"Expected 'Project(': {start_line}")

        project_type_guid = scanner.read_up_to_and_eat('")')
        if scanner.read_up_to_and_eat('"').strip() != "=":
            raise MalformedProjectBlockError(f"Expected '=': {start_line}")

        project_name = scanner.read_up_to_and_eat('", "')
        project_path = scanner.read_up_to_and_eat('", "')
        project_guid = scanner.read_up_to_and_eat('"')

        sections = []
        while is_indent(cursor.peek()):
            sections.append(self.section_codec.parse(cursor))

        # Older solutions sometimes omit EndProject before the next entry
        # or before Global
        if cursor.peek() == "E":
            if cursor.read_line() != "EndProject":
                raise MalformedProjectBlockError("Expected line: 'EndProject'")
        elif cursor.peek() not in ("P", "G"):
            raise MalformedProjectBlockError("Expected line: 'EndProject'")

        return ProjectBlock(
            project_type_guid=project_type_guid,
            project_name=project_name,
            project_path=project_path,
            project_guid=project_guid,
            project_sections=tuple(sections),
        )

    def render(self, block: ProjectBlock) -> str:
        text = (
            f'Project("{block.project_type_guid}") = "{block.project_name}", '
            f'"{block.project_path}", "{block.project_guid}"\n'
        )
        for section in block.project_sections:
            text += self.section_codec.render(section, indent=1)
        return text + "EndProject\n"
