"""
Impact Command - Blast radius and change risk for a single file.
"""

import logging
import sys

import click
from rich.console import Console

from ...analysis.impact import ImpactAnalyzer
from ...config import AnalysisConfig
from ...core.exceptions import RepoLensError
from ..formatting import format_impact_report
from ..utils import DEFAULT_INPUT_FILE, echo_error, echo_warning, load_analysis_input

logger = logging.getLogger(__name__)

console = Console()


@click.command()
@click.argument("file_path")
@click.option("-i", "--input", "input_file", default=DEFAULT_INPUT_FILE,
              help="Analysis snapshot JSON (tree + dependencies) or directory")
@click.option("--max-depth", type=int, default=None,
              help="Maximum traversal depth (default from config: 10)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def impact(ctx: click.Context, file_path: str, input_file: str, max_depth: int | None, as_json: bool):
    """
    Analyze what is affected by changing FILE_PATH.

    Walks dependents and dependencies, then scores the change risk.
    """
    config: AnalysisConfig = (ctx.obj or {}).get("config") or AnalysisConfig()

    try:
        snapshot = load_analysis_input(input_file)
    except RepoLensError as e:
        echo_error(str(e))
        sys.exit(1)

    depth = max_depth if max_depth is not None else config.max_depth
    analyzer = ImpactAnalyzer(snapshot.dependencies, tree=snapshot.tree, max_depth=depth)

    if file_path not in analyzer.index and not as_json:
        echo_warning(f"{file_path} does not appear in any dependency")

    report = analyzer.analyze(file_path)

    if as_json:
        click.echo(report.model_dump_json(indent=2))
        return

    console.print(format_impact_report(report))
