"""Load and save solution files on disk."""

from __future__ import annotations

import logging
from pathlib import Path

from slnfile.config import SolutionFile, SolutionIOConfig
from slnfile.dotnet.solution import parse_solution, render_solution

logger = logging.getLogger(__name__)


def load_solution(path: str | Path, config: SolutionIOConfig | None = None) -> SolutionFile:
    """Read and parse a .sln file.

    The default ``utf-8-sig`` encoding drops a leading byte order mark.
    """
    config = config or SolutionIOConfig()
    logger.debug(f"Loading solution {path} ({config.encoding})")

    with open(path, "r", encoding=config.encoding, newline="") as f:
        solution = parse_solution(f)

    logger.debug(
        f"Parsed {path}: {len(solution.project_blocks)} projects, "
        f"{len(solution.global_section_blocks)} global sections"
    )
    return solution


def save_solution(
    solution: SolutionFile, path: str | Path, config: SolutionIOConfig | None = None
) -> None:
    """Render a solution and write it, translating line ends to ``config.newline``."""
    config = config or SolutionIOConfig()
    if solution.visual_studio_version_line or solution.minimum_visual_studio_version_line:
        logger.debug(f"Version lines are not written to {path}")

    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, "w", encoding=config.encoding, newline=config.newline) as f:
        f.write(render_solution(solution))
    logger.debug(f"Wrote solution {path}")
