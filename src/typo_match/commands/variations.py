"""Variations command for typo candidate generation."""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from typo_match.analysis.variations import generate_typo_variations

console = Console()


@click.command()
@click.argument("word")
@click.option(
    "--max",
    "-n",
    "max_variations",
    type=click.IntRange(min=0),
    default=10,
    show_default=True,
    help="Maximum number of variations to generate",
)
def variations(word: str, max_variations: int):
    """Generate typo variations of WORD.

    Words shorter than 3 characters produce no variations.
    """
    results = generate_typo_variations(word, max_variations)

    if not results:
        console.print(f"[yellow]No variations for:[/yellow] {escape(word)}")
        return

    table = Table(title=f"Typo Variations: {escape(word)}")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Variation", style="cyan")

    for i, variation in enumerate(results, start=1):
        table.add_row(str(i), escape(variation))

    console.print(table)
    console.print(f"[dim]Total variations: {len(results)}[/dim]")
