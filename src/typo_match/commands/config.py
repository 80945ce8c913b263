"""Configuration commands."""

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from typo_match.core.config import Config, load_config
from typo_match.error.cmd import handle_command_errors

console = Console()


def get_config(ctx: click.Context) -> Config:
    """Get the Config loaded by the root command, or load it when run standalone."""
    obj = ctx.find_object(dict)
    if obj and "config" in obj:
        return obj["config"]
    return load_config()


@click.group()
def config():
    """Show or create configuration files."""
    pass


@config.command()
@click.pass_context
def show(ctx):
    """Display the active fuzzy matching configuration."""
    fuzzy = get_config(ctx).fuzzy

    table = Table(title="Fuzzy Match Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Description", style="dim")

    for name, field in type(fuzzy).model_fields.items():
        table.add_row(name, str(getattr(fuzzy, name)), field.description or "")

    console.print(table)


@config.command()
@click.argument("output", type=click.Path(path_type=Path, dir_okay=False))
@click.option("--force", is_flag=True, help="Overwrite an existing file")
@handle_command_errors
def init(output: Path, force: bool):
    """Write the default configuration to a JSON file.

    OUTPUT: Path of the configuration file to create
    """
    if output.exists() and not force:
        raise ValueError(f"{output} already exists (use --force to overwrite)")

    Config.get_default().save_to_file(output)
    console.print(f"[green]✓ Saved:[/green] {output}")
