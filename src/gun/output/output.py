"""Output helpers separating human-facing text from machine-readable values.

user_output goes to stderr so that stdout stays clean for values other
tools may capture (e.g. `gun config get CREATE_PR`).
"""

from typing import Any

import click


def user_output(message: Any = "", *, nl: bool = True) -> None:
    """Print a message for the operator (stderr)."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: Any = "", *, nl: bool = True) -> None:
    """Print a value intended for scripts (stdout)."""
    click.echo(message, nl=nl)
