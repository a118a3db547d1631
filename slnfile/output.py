"""JSON summary of a parsed solution."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from slnfile.config import SolutionFile
from slnfile.dotnet.solution import list_projects, project_kind


def build_summary(solution: SolutionFile, source: str = "") -> dict[str, Any]:
    """Build a JSON-ready description of a solution."""
    projects = list_projects(solution, include_folders=True)

    return {
        "source": source,
        "header": solution.header_lines[0],
        "visual_studio_version": solution.visual_studio_version_line,
        "minimum_visual_studio_version": solution.minimum_visual_studio_version_line,
        "stats": {
            "projects": sum(1 for p in projects if project_kind(p.type_guid) != "SolutionFolder"),
            "solution_folders": sum(
                1 for p in projects if project_kind(p.type_guid) == "SolutionFolder"
            ),
            "global_sections": len(solution.global_section_blocks),
        },
        "projects": [
            {**asdict(p), "kind": project_kind(p.type_guid)}
            for p in projects
        ],
        "global_sections": [
            {
                "name": block.parenthesized_name,
                "value": block.value,
                "entries": len(block.key_value_pairs),
            }
            for block in solution.global_section_blocks
        ],
    }


def write_summary(summary: dict[str, Any], output_path: str) -> None:
    """Write a summary to a JSON file."""
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(summary, f, indent=2, default=str)
