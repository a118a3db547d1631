"""Core data types and configuration for solution file handling."""

from __future__ import annotations

from dataclasses import dataclass

HEADER_PREFIX = "Microsoft Visual Studio Solution File"
VISUAL_STUDIO_VERSION_PREFIX = "VisualStudioVersion"
MINIMUM_VISUAL_STUDIO_VERSION_PREFIX = "MinimumVisualStudioVersion"


@dataclass(frozen=True)
class SectionBlock:
    """An indented ``Type(Name) = Value ... EndType`` block.

    Appears as ``GlobalSection`` inside ``Global``/``EndGlobal`` and as
    ``ProjectSection`` inside a project entry.
    """
    type: str
    parenthesized_name: str
    value: str
    key_value_pairs: tuple[tuple[str, str | None], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "key_value_pairs", tuple((k, v) for k, v in self.key_value_pairs)
        )


@dataclass(frozen=True)
class ProjectBlock:
    """A ``Project(...) = ... EndProject`` entry.

    Identifiers are kept exactly as written, braces included.
    """
    project_type_guid: str
    project_name: str
    project_path: str
    project_guid: str
    project_sections: tuple[SectionBlock, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "project_sections", tuple(self.project_sections))


@dataclass(frozen=True)
class SolutionFile:
    """Parsed contents of a .sln file.

    The version lines are ``None`` when the file does not have them.
    """
    header_lines: tuple[str, ...]
    visual_studio_version_line: str | None = None
    minimum_visual_studio_version_line: str | None = None
    project_blocks: tuple[ProjectBlock, ...] = ()
    global_section_blocks: tuple[SectionBlock, ...] = ()

    def __post_init__(self) -> None:
        for name in ("header_lines", "project_blocks", "global_section_blocks"):
            value = getattr(self, name)
            if value is None:
                raise TypeError(f"{name} must not be None")
            object.__setattr__(self, name, tuple(value))

        if not self.header_lines or not self.header_lines[0].startswith(HEADER_PREFIX):
            raise ValueError(f"first header line must start with '{HEADER_PREFIX}'")


@dataclass
class SolutionProject:
    """A project entry as listed to users, GUIDs normalised."""
    type_guid: str
    name: str
    path: str
    project_guid: str


@dataclass
class SolutionIOConfig:
    encoding: str = "utf-8-sig"
    newline: str = "\r\n"
