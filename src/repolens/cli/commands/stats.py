"""
Stats Command - File tree statistics.
"""

import sys

import click
from rich.console import Console

from ...core.exceptions import RepoLensError
from ...core.tree import calculate_tree_stats
from ..formatting import format_tree_stats
from ..utils import DEFAULT_INPUT_FILE, echo_error, load_analysis_input

console = Console()


@click.command()
@click.option("-i", "--input", "input_file", default=DEFAULT_INPUT_FILE,
              help="Analysis snapshot JSON or directory")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def stats(input_file: str, as_json: bool):
    """Show file counts, size, depth and main language."""
    try:
        snapshot = load_analysis_input(input_file)
    except RepoLensError as e:
        echo_error(str(e))
        sys.exit(1)

    tree_stats = calculate_tree_stats(snapshot.tree)

    if as_json:
        click.echo(tree_stats.model_dump_json(indent=2))
    else:
        console.print(format_tree_stats(tree_stats))
