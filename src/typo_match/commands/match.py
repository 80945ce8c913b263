"""Match command for fuzzy query matching against text."""

import logging
from pathlib import Path

import click
import pandas as pd
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from tqdm import tqdm

from typo_match.analysis.matching_constants import MatchingDefaults
from typo_match.analysis.query_matcher import fuzzy_contains, fuzzy_match_score
from typo_match.error.cmd import handle_command_errors

console = Console()
logger = logging.getLogger(__name__)


def score_texts(
    texts: pd.Series,
    query: str,
    threshold: float = MatchingDefaults.SIMILARITY_THRESHOLD,
) -> pd.DataFrame:
    """Score every text against a query.

    Args:
        texts: Text values; missing values are treated as empty text.
        query: Query to match.
        threshold: Similarity threshold for fuzzy containment.

    Returns:
        DataFrame with 'score' and 'contains' columns, indexed like texts.
    """
    scores = []
    contains = []

    for text in tqdm(texts.fillna("").astype(str), desc="Scoring texts", total=len(texts)):
        scores.append(fuzzy_match_score(text, query))
        contains.append(fuzzy_contains(text, query, threshold))

    return pd.DataFrame({"score": scores, "contains": contains}, index=texts.index)


@click.group()
def match():
    """Match queries against text with typo tolerance.

    This command group provides subcommands for:
    - contains: Fuzzy containment check
    - score: Fuzzy match score (0-1)
    - batch: Score every row of a CSV file
    """
    pass


@match.command()
@click.argument("text")
@click.argument("query")
@click.option(
    "--threshold",
    type=click.FloatRange(0.0, 1.0),
    default=MatchingDefaults.SIMILARITY_THRESHOLD,
    show_default=True,
    help="Per-token similarity threshold",
)
def contains(text: str, query: str, threshold: float):
    """Check whether TEXT contains a fuzzy match for QUERY."""
    if fuzzy_contains(text, query, threshold):
        console.print("[bold green]✓ Match[/bold green]")
    else:
        console.print("[yellow]✗ No match[/yellow]")


@match.command()
@click.argument("text")
@click.argument("query")
def score(text: str, query: str):
    """Score how well TEXT matches QUERY."""
    result = fuzzy_match_score(text, query)
    console.print(f"[bold blue]Match score:[/bold blue] {result:.4f}")


@match.command()
@click.argument(
    "input_csv",
    type=click.Path(path_type=Path, exists=True, file_okay=True, dir_okay=False),
)
@click.option("--query", "-q", required=True, help="Query to match against each row")
@click.option("--column", "-c", default="text", show_default=True, help="Text column to score")
@click.option(
    "--threshold",
    type=click.FloatRange(0.0, 1.0),
    default=MatchingDefaults.SIMILARITY_THRESHOLD,
    show_default=True,
    help="Per-token similarity threshold for the 'contains' column",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Output CSV file path (prints a table if omitted)",
)
@handle_command_errors
def batch(input_csv: Path, query: str, column: str, threshold: float, output: Path | None):
    """Score every row of INPUT_CSV against a query.

    INPUT_CSV: Path to CSV file with a text column

    Rows keep their input order; 'score' and 'contains' columns are added.
    """
    console.print(f"[blue]Reading:[/blue] {input_csv}")
    df = pd.read_csv(input_csv)

    if column not in df.columns:
        raise ValueError(f"Column '{column}' not found in {input_csv}")

    logger.debug("Scoring %d rows against query %r", len(df), query)
    results = score_texts(df[column], query, threshold)
    df["score"] = results["score"]
    df["contains"] = results["contains"]

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output, index=False)
        console.print(f"[green]✓ Saved:[/green] {output}")
    else:
        table = Table(title=f"Match Results: {escape(query)}")
        table.add_column(column, style="cyan")
        table.add_column("Score", style="green", justify="right")
        table.add_column("Contains", style="magenta")

        for text, row_score, row_contains in zip(df[column], df["score"], df["contains"]):
            table.add_row(escape(str(text)), f"{row_score:.4f}", "yes" if row_contains else "no")

        console.print(table)

    console.print(f"[dim]Matched rows: {int(df['contains'].sum()):,} / {len(df):,}[/dim]")
