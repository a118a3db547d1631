"""slnfile - Read and write Visual Studio solution (.sln) files."""

from slnfile.config import ProjectBlock, SectionBlock, SolutionFile
from slnfile.dotnet.solution import list_projects, parse_solution, render_solution
from slnfile.storage import load_solution, save_solution

__version__ = "0.1.0"
__all__ = [
    "ProjectBlock",
    "SectionBlock",
    "SolutionFile",
    "list_projects",
    "load_solution",
    "parse_solution",
    "render_solution",
    "save_solution",
]
