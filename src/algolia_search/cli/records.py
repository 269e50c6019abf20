"""Record commands: search and add."""

import json

import click
from rich.console import Console
from rich.panel import Panel

from ..client import AlgoliaError, Index

console = Console()


@click.command()
@click.argument("index_name")
@click.argument("query")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def search(index_name: str, query: str, as_json: bool):
    """Search an index."""
    try:
        with Index.from_config(index_name) as index:
            result = index.search(query)
    except (AlgoliaError, ValueError) as e:
        console.print(f"[red]Search failed:[/red] {e}")
        raise click.Abort()

    if as_json:
        console.print_json(json.dumps(result))
        return

    hits = result.get("hits", [])
    if not hits:
        console.print("[yellow]No results found.[/yellow]")
        return

    console.print(f"[bold]Found {result.get('nbHits', len(hits))} hits:[/bold]\n")

    for i, hit in enumerate(hits, 1):
        object_id = hit.get("objectID", "?")
        attributes = {k: v for k, v in hit.items() if not k.startswith("_") and k != "objectID"}
        console.print(Panel(
            json.dumps(attributes, indent=2, ensure_ascii=False),
            title=f"[cyan]{i}. {object_id}[/cyan]",
        ))


@click.command()
@click.argument("index_name")
@click.argument("record_json")
@click.option("--object-id", "-i", help="Store under this objectID (server generates one if omitted)")
def add(index_name: str, record_json: str, object_id: str | None):
    """Add a record (given as JSON) to an index."""
    try:
        record = json.loads(record_json)
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid record JSON: {e}[/red]")
        raise click.Abort()

    if not isinstance(record, dict):
        console.print("[red]Record must be a JSON object[/red]")
        raise click.Abort()

    try:
        with Index.from_config(index_name) as index:
            result = index.add_object(record, object_id=object_id)
    except (AlgoliaError, ValueError) as e:
        console.print(f"[red]Add failed:[/red] {e}")
        raise click.Abort()

    console.print(f"[green]Added record:[/green] {result.get('objectID', object_id or '')}")
