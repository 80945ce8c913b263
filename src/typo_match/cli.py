"""CLI entry point for typo-match tool."""

import logging
from pathlib import Path

import click
from rich.console import Console

from typo_match.commands import compare, config, match, variations
from typo_match.core.config import load_config
from typo_match.error.cmd import handle_command_errors

console = Console()


@click.group()
@click.version_option(version="0.1.0", prog_name="typo-match")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Path to JSON configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
@handle_command_errors
def main(ctx, config_path: Path | None, verbose: bool):
    """Typo-Tolerant Text Matching Tool.

    Compare strings, generate typo variations and score fuzzy query matches.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["config"] = load_config(config_path)


# Register commands
main.add_command(compare.compare)
main.add_command(config.config)
main.add_command(match.match)
main.add_command(variations.variations)


if __name__ == "__main__":
    main()
