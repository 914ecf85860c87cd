"""Process execution abstraction.

Every git and gh invocation goes through a ProcessRunner. Production code
uses RealProcessRunner; tests inject FakeProcessRunner with scripted results.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from gun.gateway.process.types import ExternalCommandError, ProcessResult

logger = logging.getLogger(__name__)


class ProcessRunner(ABC):
    """Abstract process runner for dependency injection."""

    @abstractmethod
    def run(
        self,
        cmd: list[str],
        *,
        cwd: Path | None,
    ) -> ProcessResult:
        """Run a command to completion and capture its output.

        Never raises on a non-zero exit code; callers inspect the result.

        Args:
            cmd: Argument vector, executable first
            cwd: Working directory, or None for the current directory

        Returns:
            ProcessResult with exit code, stdout and stderr
        """
        ...

    def run_with_context(
        self,
        cmd: list[str],
        *,
        operation_context: str,
        cwd: Path | None,
    ) -> ProcessResult:
        """Run a command that is expected to succeed.

        Args:
            cmd: Argument vector, executable first
            operation_context: Short description used in the error message,
                e.g. "push branch feature-x"
            cwd: Working directory

        Returns:
            ProcessResult of the successful command

        Raises:
            ExternalCommandError: If the command exits non-zero
        """
        result = self.run(cmd, cwd=cwd)
        if not result.ok:
            logger.debug("%s failed: %s", " ".join(cmd), result.stderr.strip())
            raise ExternalCommandError(operation_context, result)
        return result
