"""Exceptions raised while parsing solution files."""

from __future__ import annotations

from slnfile.config import HEADER_PREFIX


class SolutionFileError(Exception):
    """Base class for all solution file parse failures."""


class MissingHeaderError(SolutionFileError):
    def __init__(self) -> None:
        super().__init__(f"Expected header: '{HEADER_PREFIX}'")


class MissingVersionLineError(SolutionFileError):
    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Expected header: '{kind}'")


class MissingGlobalLineError(SolutionFileError):
    def __init__(self) -> None:
        super().__init__("Expected line: 'Global'")


class MissingEndGlobalLineError(SolutionFileError):
    def __init__(self) -> None:
        super().__init__("Expected line: 'EndGlobal'")


class TrailingContentError(SolutionFileError):
    def __init__(self) -> None:
        super().__init__("Expected end of file after 'EndGlobal'")


class MalformedProjectBlockError(SolutionFileError):
    """A project entry could not be read."""


class MalformedSectionBlockError(SolutionFileError):
    """A ``Type(Name) = Value`` block could not be read."""
