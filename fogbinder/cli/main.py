"""Fogbinder CLI - Navigating Epistemic Ambiguity."""

import json
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="fogbinder",
    help="Epistemic analysis of research sources: contradictions, mysteries and fog.",
    no_args_is_help=True,
)

console = Console()


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    ),
):
    """Configure logging before any command runs."""
    from ..config.settings import get_settings
    from ..utils.logging import setup_logging

    settings = get_settings()
    setup_logging(level=log_level or settings.log_level, log_file=settings.log_file)


def _load_context(context_file: Optional[Path], domain: Optional[str]):
    """Build a Context from an optional YAML file and domain override."""
    import yaml

    from ..core.context import Context

    data: dict = {}
    if context_file is not None:
        if not context_file.exists():
            console.print(f"[red]Error: Context file not found: {context_file}[/red]")
            raise typer.Exit(1)
        with open(context_file) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            console.print(f"[red]Error: Context file must be a mapping: {context_file}[/red]")
            raise typer.Exit(1)

    if domain is not None:
        data["domain"] = domain

    return Context.from_dict(data)


def _print_summary(result) -> None:
    """Show counts and contradictions as rich tables."""
    from ..engine import contradiction_detector

    meta = result.metadata
    console.print(f"\n[bold]{result.fog_trail.metadata.title}[/bold]")
    console.print(f"Sources: {meta.total_sources}")
    console.print(f"Contradictions: {meta.total_contradictions}")
    console.print(f"Mysteries: {meta.total_mysteries}")
    console.print(f"Fog density: {meta.overall_opacity:.2f}")

    if result.contradictions:
        table = Table(title="Contradictions")
        table.add_column("Type", style="cyan")
        table.add_column("Severity", justify="right")
        table.add_column("Resolution")

        for c in result.contradictions:
            table.add_row(
                contradiction_detector.EDGE_LABELS[c.conflict_type],
                f"{c.severity:.1f}",
                contradiction_detector.suggest_resolution(c),
            )

        console.print(table)


@app.command()
def analyze(
    sources_file: Path = typer.Argument(..., help="Text file with one source per line"),
    context_file: Optional[Path] = typer.Option(
        None,
        "--context", "-c",
        help="YAML file with domain, conventions, participants and purpose",
    ),
    domain: Optional[str] = typer.Option(
        None,
        "--domain", "-d",
        help="Language-game domain (overrides the context file)",
    ),
    output_format: str = typer.Option(
        "report",
        "--format", "-f",
        help="Output format (report, json, svg)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output", "-o",
        help="Output file (default: print to stdout)",
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed for reproducible node placement",
    ),
    layout: Optional[str] = typer.Option(
        None,
        "--layout",
        help="Node placement (random, hashed)",
    ),
):
    """
    Analyze a list of sources.

    Each non-blank line of the sources file is one source. Produces a
    Markdown report, the JSON projection, or an SVG FogTrail.
    """
    from ..analysis import AnalysisOptions, analyze as run_analysis, make_layout, to_dict
    from ..config.settings import get_settings
    from ..engine import fog_trail
    from ..reports import generate_report

    if not sources_file.exists():
        console.print(f"[red]Error: File not found: {sources_file}[/red]")
        raise typer.Exit(1)

    if output_format not in ("report", "json", "svg"):
        console.print(f"[red]Error: Unsupported format: {output_format}[/red]")
        raise typer.Exit(1)

    if layout is not None and layout not in ("random", "hashed"):
        console.print(f"[red]Error: Unsupported layout: {layout}[/red]")
        raise typer.Exit(1)

    sources = [line.strip() for line in sources_file.read_text().splitlines() if line.strip()]
    context = _load_context(context_file, domain)

    settings = get_settings()
    analysis_config = replace(
        settings.analysis,
        layout_seed=seed if seed is not None else settings.analysis.layout_seed,
        layout=layout or settings.analysis.layout,
    )

    result = run_analysis(
        sources,
        context,
        AnalysisOptions(layout=make_layout(analysis_config)),
    )

    if output_format == "json":
        content = json.dumps(to_dict(result), indent=2)
    elif output_format == "svg":
        content = fog_trail.to_svg(
            result.fog_trail,
            settings.render.svg_width,
            settings.render.svg_height,
        )
    else:
        content = generate_report(result)

    if output is None:
        # Unstyled output
        typer.echo(content)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content)
    _print_summary(result)
    console.print(f"\nOutput saved to: {output}")


@app.command()
def zotero(
    collection_id: str = typer.Argument(..., help="Zotero collection key"),
    note: bool = typer.Option(
        False,
        "--note",
        help="Attach the FogTrail SVG to each item as a note",
    ),
    library_id: Optional[str] = typer.Option(
        None,
        "--library-id",
        help="Zotero user or group id (default: ZOTERO_LIBRARY_ID)",
    ),
    library_type: Optional[str] = typer.Option(
        None,
        "--library-type",
        help="Library type (users, groups)",
    ),
):
    """
    Analyze a Zotero collection and tag its items.

    Requires ZOTERO_API_KEY for private libraries.
    """
    from ..analysis import analyze_zotero_collection
    from ..exceptions import LibraryNotConfiguredError
    from ..zotero import ZoteroClient

    if library_type is not None and library_type not in ("users", "groups"):
        console.print(f"[red]Error: Unsupported library type: {library_type}[/red]")
        raise typer.Exit(1)

    try:
        client = ZoteroClient(library_id=library_id, library_type=library_type)
    except LibraryNotConfiguredError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"Analyzing collection: {collection_id}")

    try:
        result = analyze_zotero_collection(client, collection_id, attach_note=note)
    finally:
        client.close()

    if result.metadata.total_sources == 0:
        console.print("[yellow]No sources analyzed.[/yellow]")
        return

    _print_summary(result)
    console.print("\n[green]Collection tagged with fogbinder:analyzed[/green]")


@app.command()
def version():
    """Show version information."""
    from .. import __version__

    console.print(f"Fogbinder v{__version__}")
    console.print("Navigating Epistemic Ambiguity")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
