"""Command-line interface for Narrative Graph."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from rich.table import Table

from narrative_graph import __version__
from narrative_graph.exceptions import NarrativeGraphError
from narrative_graph.logging import configure_logging

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool) -> None:
    """Narrative Graph - Find characters, places and relationships in fiction."""
    configure_logging(verbose)


def _settings_with(min_count: int | None, min_strength: int | None):
    from narrative_graph.config import get_settings

    overrides = {}
    if min_count is not None:
        overrides["min_character_count"] = min_count
    if min_strength is not None:
        overrides["min_relationship_strength"] = min_strength
    return get_settings().model_copy(update=overrides)


def _print_result(result, top: int) -> None:
    """Render characters, locations and relationships as tables."""
    if result.characters:
        table = Table(title="Characters")
        table.add_column("Name", style="cyan")
        table.add_column("Count", style="green", justify="right")
        table.add_column("Sample", style="dim")
        for c in result.characters[:top]:
            sample = c.context[0] if c.context else ""
            table.add_row(c.name, f"{c.count:,}", escape(sample[:80]) + ("..." if len(sample) > 80 else ""))
        console.print(table)
    else:
        console.print("[yellow]No characters found[/yellow]")

    if result.locations:
        table = Table(title="Locations")
        table.add_column("Name", style="cyan")
        table.add_column("Count", style="green", justify="right")
        for loc in result.locations[:top]:
            table.add_row(loc.name, f"{loc.count:,}")
        console.print(table)
    else:
        console.print("[yellow]No locations found[/yellow]")

    if result.relationships:
        table = Table(title="Relationships")
        table.add_column("Pair", style="cyan")
        table.add_column("Strength", style="green", justify="right")
        for rel in result.relationships[:top]:
            table.add_row(f"{rel.char1} <-> {rel.char2}", f"{rel.strength:,}")
        console.print(table)
    else:
        console.print("[yellow]No relationships found[/yellow]")


@main.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path))
@click.option("--output", "-o", type=click.Path(path_type=Path), help="Output file for results (JSON)")
@click.option("--graphml", type=click.Path(path_type=Path), help="Write the character graph as GraphML")
@click.option("--top", "-n", default=15, show_default=True, help="Rows to show per table")
@click.option("--min-count", type=click.IntRange(min=1), help="Frequency floor for characters")
@click.option("--min-strength", type=click.IntRange(min=1), help="Shared sentences needed for a relationship")
def extract(
    paths: tuple[Path, ...],
    output: Path | None,
    graphml: Path | None,
    top: int,
    min_count: int | None,
    min_strength: int | None,
) -> None:
    """Extract characters, locations and relationships from files or folders."""
    from narrative_graph.extract import parse_files
    from narrative_graph.graph import top_connections, write_graphml
    from narrative_graph.ingest import load_documents

    settings = _settings_with(min_count, min_strength)

    try:
        with console.status("Loading documents..."):
            documents = load_documents(list(paths))
    except NarrativeGraphError as e:
        raise click.ClickException(str(e)) from e

    if not documents:
        raise click.ClickException("No supported documents found")

    total_chars = sum(len(d.content) for d in documents)
    console.print(f"[green]OK[/green] Loaded {len(documents):,} documents ({total_chars:,} characters)")
    for doc in documents[:5]:
        console.print(f"  [dim]{doc.short_name()}[/dim]")
    if len(documents) > 5:
        console.print(f"  [dim]+{len(documents) - 5} more[/dim]")
    console.print()

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("Extracting...", total=3)

        def update_progress(phase: str, current: int, total: int, message: str) -> None:
            progress.update(task, completed=current, total=total, description=message)

        result = parse_files(documents, settings=settings, progress_callback=update_progress)

    console.print("\n[bold green]OK Extraction complete![/bold green]\n")
    _print_result(result, top)

    if output:
        output_data = {
            "documents": [d.name for d in documents],
            **result.model_dump(),
        }
        with open(output, "w") as f:
            json.dump(output_data, f, indent=2)
        console.print(f"\n[green]OK[/green] Results saved to {output}")

    if graphml:
        G = write_graphml(result, graphml)
        console.print(
            f"[green]OK[/green] Graph saved to {graphml} "
            f"({G.number_of_nodes()} nodes, {G.number_of_edges()} edges)"
        )
        connections = top_connections(G, limit=5)
        if connections:
            console.print("\n[bold]Top character connections:[/bold]")
            for name, neighbours in connections:
                console.print(f"  {name}: connected to {', '.join(neighbours)}")


@main.command(name="test")
@click.argument("text")
@click.option("--names", "-n", multiple=True, help="Character names for relationship analysis")
def extract_test(text: str, names: tuple[str, ...]) -> None:
    """Run the extractors on a literal string."""
    from narrative_graph.extract import analyze_relationships, extract_characters, extract_locations
    from narrative_graph.models import ExtractionResult

    console.print(f"[bold]Input:[/bold] {escape(text)}\n")

    characters = extract_characters(text)
    character_names = list(names) or [c.name for c in characters]
    result = ExtractionResult(
        characters=characters,
        locations=extract_locations(text),
        relationships=analyze_relationships(text, character_names),
    )
    _print_result(result, top=20)


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--limit", "-l", default=10, show_default=True, help="Sentences to preview")
def sentences(path: Path, limit: int) -> None:
    """Preview how a file is split into sentences."""
    from narrative_graph.ingest import load_document, split_into_sentences

    try:
        document = load_document(path)
    except NarrativeGraphError as e:
        raise click.ClickException(str(e)) from e

    split = split_into_sentences(document.content)
    console.print(f"[green]OK[/green] Split into {len(split):,} sentences\n")

    for i, sentence in enumerate(split[:limit], start=1):
        text = " ".join(sentence.split())
        console.print(f"  [dim]{i:>4}[/dim] {escape(text[:100])}{'...' if len(text) > 100 else ''}")
