"""Result and error types for external process execution."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of a finished external command.

    Attributes:
        cmd: The argument vector that was executed
        returncode: Process exit code (127 when the executable was not found)
        stdout: Captured standard output
        stderr: Captured standard error
    """

    cmd: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class ExternalCommandError(RuntimeError):
    """Raised when a checked external command exits non-zero.

    Carries the captured output so the CLI layer can surface enough context
    to diagnose the failure.
    """

    def __init__(self, operation_context: str, result: ProcessResult) -> None:
        self.operation_context = operation_context
        self.result = result
        super().__init__(
            f"Failed to {operation_context}: `{' '.join(result.cmd)}` "
            f"exited with code {result.returncode}"
        )

    @property
    def cmd(self) -> tuple[str, ...]:
        return self.result.cmd

    @property
    def returncode(self) -> int:
        return self.result.returncode

    @property
    def stdout(self) -> str:
        return self.result.stdout

    @property
    def stderr(self) -> str:
        return self.result.stderr
