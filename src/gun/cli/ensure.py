"""Precondition checks for CLI commands.

Each check prints an `Error:` line and exits 1 when it fails, so commands
can read top-to-bottom without nested error branches.
"""

from __future__ import annotations

from typing import TypeVar

import click

from gun.output.output import user_output

T = TypeVar("T")


class Ensure:
    """Helper class for CLI precondition checks."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Exit with error_message unless condition holds.

        Raises:
            SystemExit: If condition is False (with exit code 1)
        """
        if not condition:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Return value, or exit with error_message if it is None.

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)
        return value
