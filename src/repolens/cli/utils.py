"""
CLI Utilities - Shared helper functions for command line operations.

Formatted status printing and loading of analysis input snapshots.
"""

import json
import logging
from pathlib import Path

import click
from pydantic import ValidationError

from ..core.exceptions import InputFileNotFoundError, InvalidInputError
from ..core.types import AnalysisInput

logger = logging.getLogger(__name__)

DEFAULT_INPUT_FILE = ".repolens/analysis.json"


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def load_analysis_input(input_file: str) -> AnalysisInput:
    """
    Load an analysis snapshot from a JSON file or a directory.

    A directory is resolved to `.repolens/analysis.json` or `analysis.json`
    inside it.

    Raises:
        InputFileNotFoundError: If no input file exists.
        InvalidInputError: If the file is not valid JSON or fails validation.
    """
    input_path = Path(input_file)

    if input_path.is_dir():
        for candidate in (input_path / DEFAULT_INPUT_FILE, input_path / "analysis.json"):
            if candidate.exists():
                input_path = candidate
                break
        else:
            raise InputFileNotFoundError(str(input_path / DEFAULT_INPUT_FILE))

    if not input_path.exists():
        raise InputFileNotFoundError(input_file)

    try:
        data = json.loads(input_path.read_text())
    except json.JSONDecodeError as e:
        raise InvalidInputError(str(input_path), f"malformed JSON ({e})") from e

    try:
        snapshot = AnalysisInput.model_validate(data)
    except ValidationError as e:
        raise InvalidInputError(str(input_path), str(e)) from e

    logger.debug(
        f"Loaded {input_path}: {len(snapshot.dependencies)} dependencies, "
        f"{len(snapshot.contents)} file contents"
    )
    return snapshot
