"""
Utility functions for the LinkedIn CLI.
"""

import json
import logging
import sys
from enum import Enum
from typing import Any, Dict, List, Optional

import click


class OutputFormat(str, Enum):
    """Output formats for read commands."""
    XML = "xml"
    JSON = "json"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure logging based on verbosity."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def print_success(message: str) -> None:
    """Print success message."""
    click.secho(f"✓ {message}", fg="green")


def print_error(message: str, details: Optional[str] = None) -> None:
    """Print error message to stderr."""
    click.secho(f"✗ {message}", fg="red", err=True)
    if details:
        click.echo(f"  {details}", err=True)


def print_warning(message: str) -> None:
    """Print warning message."""
    click.secho(f"! {message}", fg="yellow")


def print_info(message: str) -> None:
    """Print info message."""
    click.secho(f"ℹ {message}", fg="blue")


def print_json(data: Any, indent: int = 2) -> None:
    """Print data as JSON."""
    click.echo(json.dumps(data, indent=indent, ensure_ascii=False, default=str))


def parse_parameters(params: List[str]) -> Dict[str, str]:
    """
    Parse KEY=VALUE command line parameters.

    Args:
        params: List of "key=value" strings

    Returns:
        Dict of parameter values

    Raises:
        ValueError: If a parameter has no "="
    """
    result: Dict[str, str] = {}

    for param in params:
        if "=" not in param:
            raise ValueError(f"Invalid parameter format: {param}. Use KEY=VALUE")

        key, value = param.split("=", 1)
        key = key.strip()
        if not key:
            raise ValueError(f"Invalid parameter format: {param}. Key is empty")
        result[key] = value

    return result


def confirm_action(message: str, default: bool = False) -> bool:
    """Ask the user to confirm an action."""
    return click.confirm(message, default=default)
