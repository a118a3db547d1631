"""slnfile CLI - inspect, list and re-render Visual Studio solution files."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from slnfile.config import SolutionFile, SolutionIOConfig
from slnfile.dotnet.solution import list_projects, project_kind, render_solution
from slnfile.errors import SolutionFileError
from slnfile.output import build_summary, write_summary
from slnfile.storage import load_solution, save_solution


def _configure_logging(verbose: bool) -> None:
    from rich.console import Console
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@click.group()
@click.option("--verbose", is_flag=True, help="Show debug logging on stderr")
def cli(verbose: bool) -> None:
    """slnfile - Read and write Visual Studio .sln files."""
    _configure_logging(verbose)


def _load(path: str, encoding: str) -> SolutionFile:
    try:
        return load_solution(path, SolutionIOConfig(encoding=encoding))
    except SolutionFileError as e:
        raise click.ClickException(f"{path}: {e}") from e


encoding_option = click.option(
    "--encoding", default="utf-8-sig", show_default=True, help="Text encoding of the input file"
)


@cli.command("check")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", "output_path", default=None, help="Write a JSON summary here")
@encoding_option
def check_cmd(path: str, output_path: str | None, encoding: str) -> None:
    """Parse a solution file and print a summary."""
    from rich.console import Console
    from rich.table import Table

    solution = _load(path, encoding)
    summary = build_summary(solution, source=path)
    stats = summary["stats"]

    table = Table(title=f"Solution: {Path(path).name}", show_edge=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Header", solution.header_lines[0])
    table.add_row("VisualStudioVersion", solution.visual_studio_version_line or "-")
    table.add_row(
        "MinimumVisualStudioVersion", solution.minimum_visual_studio_version_line or "-"
    )
    table.add_row("Projects", str(stats["projects"]))
    table.add_row("Solution folders", str(stats["solution_folders"]))
    table.add_row("Global sections", str(stats["global_sections"]))

    console = Console()
    console.print(table)

    if output_path:
        write_summary(summary, output_path)
        console.print(f"[green]Summary written to:[/green] {output_path}")


@cli.command("render")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", "output_path", default=None, help="Output .sln path")
@click.option(
    "--newline",
    type=click.Choice(["crlf", "lf"]),
    default="crlf",
    show_default=True,
    help="Line ends used when writing to a file",
)
@encoding_option
def render_cmd(path: str, output_path: str | None, newline: str, encoding: str) -> None:
    """Parse a solution file and write it back out.

    VisualStudioVersion and MinimumVisualStudioVersion lines are not written.
    """
    solution = _load(path, encoding)

    if output_path is None:
        click.echo(render_solution(solution), nl=False)
        return

    config = SolutionIOConfig(encoding=encoding, newline="\r\n" if newline == "crlf" else "\n")
    save_solution(solution, output_path, config)


@cli.command("projects")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--include-folders", is_flag=True, help="Also list solution folders")
@encoding_option
def projects_cmd(path: str, include_folders: bool, encoding: str) -> None:
    """List the projects referenced by a solution file."""
    from rich.console import Console
    from rich.table import Table

    solution = _load(path, encoding)

    table = Table(title=f"Projects: {Path(path).name}", show_edge=False)
    table.add_column("Name", style="bold")
    table.add_column("Kind")
    table.add_column("Path")
    table.add_column("GUID")

    for project in list_projects(solution, include_folders=include_folders):
        table.add_row(
            project.name, project_kind(project.type_guid), project.path, project.project_guid
        )

    Console().print(table)


if __name__ == "__main__":
    cli()
