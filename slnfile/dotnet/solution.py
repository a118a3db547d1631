"""Parse and render .sln files (custom text format, not XML).

    Microsoft Visual Studio Solution File, Format Version 12.00
    # Visual Studio Version 17
    VisualStudioVersion = 17.0.31903.59
    MinimumVisualStudioVersion = 10.0.40219.1
    Project("{...}") = "App", "App\\App.csproj", "{...}"
    EndProject
    Global
        GlobalSection(SolutionConfigurationPlatforms) = preSolution
            Debug|Any CPU = Debug|Any CPU
        EndGlobalSection
    EndGlobal

Parsing reads forward only, deciding what comes next from a single
character of lookahead.
"""

from __future__ import annotations

from typing import TextIO

from slnfile.config import (
    HEADER_PREFIX,
    MINIMUM_VISUAL_STUDIO_VERSION_PREFIX,
    VISUAL_STUDIO_VERSION_PREFIX,
    SectionBlock,
    SolutionFile,
    SolutionProject,
)
from slnfile.dotnet.base import ProjectBlockCodec, SectionBlockCodec
from slnfile.dotnet.cursor import (
    LineCursor,
    consume_blank_and_comment_lines,
    is_indent,
    is_line_break,
    next_non_empty_line,
)
from slnfile.dotnet.project import DefaultProjectBlockCodec
from slnfile.dotnet.section import DefaultSectionBlockCodec
from slnfile.errors import (
    MissingEndGlobalLineError,
    MissingGlobalLineError,
    MissingHeaderError,
    MissingVersionLineError,
    TrailingContentError,
)

# Known project type GUIDs
_CSHARP_GUID = "FAE04EC0-301F-11D3-BF4B-00C04F79EFBC"
_CSHARP_SDK_GUID = "9A19103F-16F7-4668-BE54-9A1E7A4F7556"
_VBNET_GUID = "F184B08F-C81C-45F6-A57F-5ABD9991F28F"
_CPP_GUID = "8BC9CEB8-8B4A-11D0-8D11-00A0C91BC942"
_FSHARP_GUID = "F2A71F9B-5D33-465A-A702-920D77279786"
_SOLUTION_FOLDER_GUID = "2150E333-8FDC-42A3-9474-1A3956D46DE8"

_PROJECT_KINDS = {
    _CSHARP_GUID: "C#",
    _CSHARP_SDK_GUID: "C#",
    _VBNET_GUID: "VB.NET",
    _CPP_GUID: "C++",
    _FSHARP_GUID: "F#",
    _SOLUTION_FOLDER_GUID: "SolutionFolder",
    "930C7802-8A8C-48F9-8165-68863BCCD9DD": "WiX",
    "E24C65DC-7377-472B-9ABA-BC803B73C61A": "Website",
}


def _codecs(
    project_codec: ProjectBlockCodec | None,
    section_codec: SectionBlockCodec | None,
) -> tuple[ProjectBlockCodec, SectionBlockCodec]:
    section_codec = section_codec or DefaultSectionBlockCodec()
    project_codec = project_codec or DefaultProjectBlockCodec(section_codec)
    return project_codec, section_codec


def _as_cursor(source: str | TextIO | LineCursor) -> LineCursor:
    if isinstance(source, LineCursor):
        return source
    if isinstance(source, str):
        return LineCursor.from_text(source)
    return LineCursor(source)


def parse_solution(
    source: str | TextIO | LineCursor,
    project_codec: ProjectBlockCodec | None = None,
    section_codec: SectionBlockCodec | None = None,
) -> SolutionFile:
    """Parse solution text, a readable text stream, or an existing cursor.

    Raises a SolutionFileError subclass on the first structural problem;
    nothing is returned for a partially read file. Streams are not closed.
    """
    cursor = _as_cursor(source)
    project_codec, section_codec = _codecs(project_codec, section_codec)

    header_lines = _parse_header(cursor)
    version_line, minimum_version_line = _parse_version_lines(cursor)

    project_blocks = []
    while cursor.peek() == "P":
        project_blocks.append(project_codec.parse(cursor))
        # Comments and empty lines between project blocks are not kept
        consume_blank_and_comment_lines(cursor)

    global_section_blocks = _parse_global(cursor, section_codec)

    if not cursor.at_end:
        raise TrailingContentError()

    return SolutionFile(
        header_lines=tuple(header_lines),
        visual_studio_version_line=version_line,
        minimum_visual_studio_version_line=minimum_version_line,
        project_blocks=tuple(project_blocks),
        global_section_blocks=global_section_blocks,
    )


def _parse_header(cursor: LineCursor) -> list[str]:
    first_line = next_non_empty_line(cursor)
    if first_line is None or not first_line.startswith(HEADER_PREFIX):
        raise MissingHeaderError()

    return [first_line] + consume_blank_and_comment_lines(cursor)


def _parse_version_lines(cursor: LineCursor) -> tuple[str | None, str | None]:
    # Version lines may be indented; the indentation is kept on the stored line.
    indent = cursor.read_indent()

    version_line = None
    if cursor.peek() == "V":
        version_line = _read_version_line(cursor, indent, VISUAL_STUDIO_VERSION_PREFIX)
        indent = cursor.read_indent()

    minimum_version_line = None
    if cursor.peek() == "M":
        minimum_version_line = _read_version_line(
            cursor, indent, MINIMUM_VISUAL_STUDIO_VERSION_PREFIX
        )
        indent = ""

    # An indented line here can only be a whitespace-only line
    if indent and not is_line_break(cursor.peek()):
        raise MissingGlobalLineError()

    return version_line, minimum_version_line


def _read_version_line(cursor: LineCursor, indent: str, prefix: str) -> str:
    line = next_non_empty_line(cursor)
    if line is None or not line.startswith(prefix):
        raise MissingVersionLineError(prefix)
    return indent + line


def _parse_global(
    cursor: LineCursor, section_codec: SectionBlockCodec
) -> tuple[SectionBlock, ...]:
    # A solution without a Global section is valid
    if cursor.at_end:
        return ()

    if next_non_empty_line(cursor) != "Global":
        raise MissingGlobalLineError()

    # Whitespace-only lines count as blank here
    cursor.skip_blank_lines()
    blocks = []
    while is_indent(cursor.peek()):
        blocks.append(section_codec.parse(cursor))
        cursor.skip_blank_lines()

    if next_non_empty_line(cursor) != "EndGlobal":
        raise MissingEndGlobalLineError()

    cursor.skip_blank_lines()
    return tuple(blocks)


def render_solution(
    solution: SolutionFile,
    project_codec: ProjectBlockCodec | None = None,
    section_codec: SectionBlockCodec | None = None,
) -> str:
    """Render a SolutionFile back to text with '\\n' line ends.

    The VisualStudioVersion and MinimumVisualStudioVersion lines are not
    written, even when the solution was parsed from text that had them.
    """
    project_codec, section_codec = _codecs(project_codec, section_codec)

    parts = ["\n"]
    parts.extend(line + "\n" for line in solution.header_lines)
    parts.extend(project_codec.render(block) for block in solution.project_blocks)
    parts.append("Global\n")
    parts.extend(
        section_codec.render(block, indent=1) for block in solution.global_section_blocks
    )
    parts.append("EndGlobal\n")
    return "".join(parts)


def _strip_guid(guid: str) -> str:
    return guid.strip().strip("{}").upper()


def project_kind(type_guid: str) -> str:
    """Return a label for a project type GUID, braces optional."""
    return _PROJECT_KINDS.get(_strip_guid(type_guid), "Unknown")


def list_projects(
    solution: SolutionFile, include_folders: bool = False
) -> list[SolutionProject]:
    """Return project entries of a parsed solution.

    Excludes solution folders (virtual projects for organising) unless
    ``include_folders`` is set.
    """
    projects = []
    for block in solution.project_blocks:
        type_guid = _strip_guid(block.project_type_guid)

        # Skip solution folders
        if type_guid == _SOLUTION_FOLDER_GUID and not include_folders:
            continue

        projects.append(SolutionProject(
            type_guid=type_guid,
            name=block.project_name,
            # Normalise path separators
            path=block.project_path.replace("\\", "/"),
            project_guid=_strip_guid(block.project_guid),
        ))

    return projects
