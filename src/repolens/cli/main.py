"""
repolens CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import logging
import sys
from pathlib import Path

import click

from ..config import load_config
from ..core.exceptions import ConfigError
from .commands import concepts, impact, stats
from .utils import echo_error


@click.group()
@click.version_option(package_name="repolens")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("-c", "--config", "config_path", type=click.Path(path_type=Path), default=None,
              help="YAML config file (default: .repolens/config.yaml)")
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: Path | None):
    """repolens: Repository impact and knowledge graph analysis.

    \b
    Quick Start:
      repolens impact src/lib/api.ts -i analysis.json
      repolens concepts -i analysis.json --top 5
      repolens stats -i analysis.json
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(config_path)
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


# Register commands
main.add_command(impact.impact)
main.add_command(concepts.concepts)
main.add_command(stats.stats)

if __name__ == "__main__":
    main()
