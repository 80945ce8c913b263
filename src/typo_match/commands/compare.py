"""Compare command for string distance and similarity."""

import click
from rich.console import Console

from typo_match.analysis.edit_distance import (
    levenshtein_distance,
    optimal_string_alignment_distance,
)
from typo_match.analysis.similarity import is_similar, similarity_ratio
from typo_match.commands.config import get_config

console = Console()


@click.group()
def compare():
    """Compare two strings.

    This command group provides subcommands for:
    - distance: Edit distance between two strings
    - ratio: Normalized similarity ratio (0-1)
    - similar: Threshold-based similarity verdict
    """
    pass


@compare.command()
@click.argument("first")
@click.argument("second")
@click.option(
    "--transpositions",
    "-t",
    is_flag=True,
    help="Count adjacent character swaps as a single edit",
)
def distance(first: str, second: str, transpositions: bool):
    """Compute the edit distance between FIRST and SECOND (case-sensitive)."""
    if transpositions:
        result = optimal_string_alignment_distance(first, second)
    else:
        result = levenshtein_distance(first, second)

    console.print(f"[bold blue]Distance:[/bold blue] {result}")


@compare.command()
@click.argument("first")
@click.argument("second")
@click.option(
    "--no-transpositions",
    is_flag=True,
    help="Use plain Levenshtein distance for the ratio",
)
def ratio(first: str, second: str, no_transpositions: bool):
    """Compute the similarity ratio between FIRST and SECOND (case-insensitive)."""
    result = similarity_ratio(first, second, transpositions=not no_transpositions)
    console.print(f"[bold blue]Similarity:[/bold blue] {result:.4f}")


@compare.command()
@click.argument("first")
@click.argument("second")
@click.option(
    "--threshold",
    type=click.FloatRange(0.0, 1.0),
    help="Minimum similarity ratio (default: configured similarity_threshold)",
)
@click.pass_context
def similar(ctx, first: str, second: str, threshold: float | None):
    """Decide whether FIRST and SECOND are similar enough to match."""
    if threshold is None:
        threshold = get_config(ctx).fuzzy.similarity_threshold

    if is_similar(first, second, threshold):
        console.print(f"[bold green]✓ Similar[/bold green] (threshold {threshold:.2f})")
    else:
        console.print(f"[yellow]✗ Not similar[/yellow] (threshold {threshold:.2f})")
