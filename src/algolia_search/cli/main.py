"""Main CLI entry point."""

import logging
from pathlib import Path

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from algolia_search import __version__
from algolia_search.client.config import AlgoliaConfig

console = Console()

# Load .env from cwd
_env_file = Path.cwd() / ".env"
if _env_file.exists():
    load_dotenv(_env_file)


@click.group()
@click.version_option(version=__version__, prog_name="algolia")
@click.option("--verbose", "-v", is_flag=True, help="Log every host attempt")
def cli(verbose: bool):
    """Algolia CLI - Manage indexes and records."""
    try:
        config = AlgoliaConfig()
    except ValueError as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise click.Abort()

    level = "DEBUG" if verbose else config.log_level
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def setup_cli():
    """Register all commands."""
    from .indexes import indexes
    from .records import add, search

    cli.add_command(indexes)
    cli.add_command(search)
    cli.add_command(add)


setup_cli()


def main():
    """Entry point for algolia CLI."""
    cli()


if __name__ == "__main__":
    main()
