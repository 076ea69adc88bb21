"""claude-viz CLI - scan a Claude Code project and visualize its agents and skills.

Usage:
    claude-viz scan ./my-project
    claude-viz scan ./my-project --output graph.json
    claude-viz serve ./my-project --port 3000
    claude-viz stats ./my-project --top 10
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

# Load .env early so CLAUDE_VIZ_* overrides are visible to the config
load_dotenv()

from claude_viz import __version__
from claude_viz.app.config import VizConfig
from claude_viz.core.diagnostics import ScanDiagnostic
from claude_viz.core.exceptions import (
    ConfigError,
    PortUnavailableError,
    ProjectNotFoundError,
)
from claude_viz.graph.analysis import GraphAnalyzer, load_graph
from claude_viz.graph.assembler import ProjectScan, scan_project, write_graph
from claude_viz.utils.logging import LogLevel, get_logger, log_error, setup_logging
from claude_viz.utils.project import (
    ensure_visualizer_dir,
    find_available_port,
    validate_claude_project,
)

app = typer.Typer(
    name="claude-viz",
    help="Visualize the agents, skills and commands of a Claude Code project",
    add_completion=False,
)

console = Console()
logger = get_logger("cli")

LogLevelOption = Annotated[
    Optional[LogLevel],
    typer.Option("--log-level", "-l", case_sensitive=False, help="Minimum log level"),
]


def _prepare(project: Path, log_level: LogLevel | None) -> tuple[Path, VizConfig]:
    """Resolve the project, load its config and configure logging."""
    project = project.resolve()
    try:
        config = VizConfig.for_project(project)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    if log_level is not None:
        config.log_level = log_level.value
    setup_logging(level=config.log_level)
    return project, config


def _run_scan(project: Path, output: Path) -> ProjectScan:
    try:
        scan = asyncio.run(scan_project(project))
    except ProjectNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    try:
        write_graph(scan.graph, output)
    except OSError as e:
        log_error(logger, "write graph data", e, {"path": output})
        console.print(f"[red]Error:[/red] Could not write {output}: {e}")
        raise typer.Exit(1)
    return scan


def _print_diagnostics(diagnostics: list[ScanDiagnostic]) -> None:
    for diagnostic in diagnostics:
        console.print(f"[yellow]Warning:[/yellow] {diagnostic.path}: {diagnostic.message}")


def _print_scan_summary(scan: ProjectScan, output: Path) -> None:
    meta = scan.metadata
    console.print(Panel(
        f"[bold]Project:[/bold] {meta.project_name}\n"
        f"[bold]Agents:[/bold] {meta.agent_count}\n"
        f"[bold]Skills:[/bold] {meta.skill_count}\n"
        f"[bold]Commands:[/bold] {meta.command_count}\n"
        f"[bold]Edges:[/bold] {meta.edge_count}\n\n"
        f"Graph data written to:\n[bold]{output}[/bold]",
        title="Scan Complete",
        border_style="green",
    ))
    _print_diagnostics(scan.diagnostics)


@app.command("scan")
def scan_command(
    project: Annotated[Path, typer.Argument(help="Project root containing .claude")] = Path("."),
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Output JSON file")] = None,
    log_level: LogLevelOption = None,
) -> None:
    """Scan a project and write its graph data."""
    project, config = _prepare(project, log_level)
    output_path = output or config.output_path_for(project)

    scan = _run_scan(project, output_path)
    _print_scan_summary(scan, output_path)


@app.command("serve")
def serve_command(
    project: Annotated[Path, typer.Argument(help="Project root containing .claude")] = Path("."),
    port: Annotated[Optional[int], typer.Option("--port", "-p", help="Preferred port")] = None,
    host: Annotated[Optional[str], typer.Option("--host", help="Interface to bind")] = None,
    dist: Annotated[Optional[Path], typer.Option("--dist", help="Built visualizer bundle")] = None,
    no_scan: Annotated[bool, typer.Option("--no-scan", help="Serve existing graph data")] = False,
    log_level: LogLevelOption = None,
) -> None:
    """Scan a project and serve the visualizer."""
    from claude_viz.server.app import ServerOptions, run_server

    project, config = _prepare(project, log_level)

    if not validate_claude_project(project):
        console.print(f"[red]Error:[/red] No .claude folder found in {project}")
        raise typer.Exit(1)

    data_path = config.output_path_for(project)
    ensure_visualizer_dir(data_path.parent)

    if not no_scan:
        scan = _run_scan(project, data_path)
        _print_diagnostics(scan.diagnostics)

    server = config.server
    try:
        selected_port = find_available_port(
            port or server.port,
            attempts=server.port_attempts,
            host=host or server.host,
        )
    except PortUnavailableError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    options = ServerOptions(
        port=selected_port,
        host=host or server.host,
        project_root=project,
        data_path=data_path,
        dist_dir=dist or server.dist_dir,
    )
    console.print(Panel(
        f"[bold]Project:[/bold] {project}\n"
        f"[bold]URL:[/bold] http://{options.host}:{options.port}\n"
        f"[bold]Data:[/bold] {data_path}",
        title="claude-viz",
        border_style="blue",
    ))
    run_server(options)


@app.command("stats")
def stats_command(
    project: Annotated[Path, typer.Argument(help="Project root containing .claude")] = Path("."),
    graph: Annotated[Optional[Path], typer.Option("--graph", "-g", help="Graph JSON to read")] = None,
    top: Annotated[int, typer.Option("--top", "-n", help="Rows to show")] = 10,
    log_level: LogLevelOption = None,
) -> None:
    """Show connectivity statistics for a scanned project."""
    project, config = _prepare(project, log_level)
    graph_path = graph or config.output_path_for(project)

    if not graph_path.exists():
        console.print(
            f"[red]Error:[/red] Graph data not found at {graph_path}. "
            f"Run 'claude-viz scan' first."
        )
        raise typer.Exit(1)

    analyzer = GraphAnalyzer(load_graph(graph_path))
    summary = analyzer.summary()

    table = Table(title=f"{analyzer.data.metadata.project_name}: most connected")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Kind")
    table.add_column("In", justify="right")
    table.add_column("Out", justify="right")
    for row in analyzer.degree_table()[:top]:
        table.add_row(
            row["id"],
            row["name"],
            row["kind"],
            str(row["in_degree"]),
            str(row["out_degree"]),
        )
    console.print(table)

    console.print(
        f"Nodes: {summary['node_count']}  Edges: {summary['edge_count']}  "
        f"Density: {summary['density']}"
    )
    isolated = analyzer.isolated_nodes()
    if isolated:
        console.print(f"[yellow]Isolated ({len(isolated)}):[/yellow] {', '.join(isolated)}")


@app.command("version")
def version_command() -> None:
    """Print the installed version."""
    console.print(f"claude-viz {__version__}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
