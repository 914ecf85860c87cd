"""Fake process runner for testing.

FakeProcessRunner never spawns a process. Each command is answered from a
table of scripted results keyed by the exact argument vector; anything not
scripted succeeds with empty output.
"""

from __future__ import annotations

from pathlib import Path

from gun.gateway.process.abc import ProcessRunner
from gun.gateway.process.types import ProcessResult


def process_result(
    cmd: tuple[str, ...],
    *,
    returncode: int = 0,
    stdout: str = "",
    stderr: str = "",
) -> ProcessResult:
    """Build a ProcessResult for scripting FakeProcessRunner."""
    return ProcessResult(cmd=cmd, returncode=returncode, stdout=stdout, stderr=stderr)


class FakeProcessRunner(ProcessRunner):
    """In-memory process runner with scripted results.

    This class has NO public setup methods. All state is provided via constructor.

    Constructor Injection:
    ---------------------
    - results: Mapping of argv tuple -> ProcessResult returned for that command

    Mutation Tracking:
    -----------------
    - calls: Every argv executed, in order
    - calls_with_cwd: Every (cwd, argv) pair executed, in order
    """

    def __init__(self, *, results: dict[tuple[str, ...], ProcessResult] | None = None) -> None:
        self._results = results if results is not None else {}
        self._calls: list[tuple[Path | None, tuple[str, ...]]] = []

    def run(
        self,
        cmd: list[str],
        *,
        cwd: Path | None,
    ) -> ProcessResult:
        key = tuple(cmd)
        self._calls.append((cwd, key))
        if key in self._results:
            return self._results[key]
        return process_result(key)

    @property
    def calls(self) -> list[tuple[str, ...]]:
        """Argument vectors executed, in order. For test assertions only."""
        return [argv for _cwd, argv in self._calls]

    @property
    def calls_with_cwd(self) -> list[tuple[Path | None, tuple[str, ...]]]:
        return self._calls.copy()
