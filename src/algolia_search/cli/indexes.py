"""Index management commands."""

import json

import click
from rich.console import Console
from rich.table import Table

from ..client import AlgoliaError, SearchClient

console = Console()


@click.group()
def indexes():
    """Manage indexes."""
    pass


@indexes.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_indexes(as_json: bool):
    """List all indexes."""
    try:
        with SearchClient.from_config() as client:
            result = client.list_indexes()
    except (AlgoliaError, ValueError) as e:
        console.print(f"[red]Listing indexes failed:[/red] {e}")
        raise click.Abort()

    if as_json:
        console.print_json(json.dumps(result))
        return

    items = result.get("items", [])
    if not items:
        console.print("[yellow]No indexes found.[/yellow]")
        return

    table = Table(title="Indexes")
    table.add_column("Name", style="cyan")
    table.add_column("Entries", justify="right")
    table.add_column("Updated")

    for item in items:
        table.add_row(
            item.get("name", ""),
            str(item.get("entries", "-")),
            (item.get("updatedAt") or "-")[:19],
        )

    console.print(table)


@indexes.command("delete")
@click.argument("index_name")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def delete_index(index_name: str, yes: bool):
    """Delete an index."""
    if not yes:
        click.confirm(f"Delete index '{index_name}' and ALL its records?", abort=True)

    try:
        with SearchClient.from_config() as client:
            client.delete_index(index_name)
    except (AlgoliaError, ValueError) as e:
        console.print(f"[red]Delete failed:[/red] {e}")
        raise click.Abort()

    console.print(f"[green]Deleted index:[/green] {index_name}")
