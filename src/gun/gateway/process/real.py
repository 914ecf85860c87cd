"""Production process runner using subprocess."""

import logging
import subprocess
from pathlib import Path

from gun.gateway.process.abc import ProcessRunner
from gun.gateway.process.types import ProcessResult

logger = logging.getLogger(__name__)

# Exit code shells report for "command not found"
COMMAND_NOT_FOUND_EXIT_CODE = 127


class RealProcessRunner(ProcessRunner):
    """Runs commands with subprocess.run, one at a time, waiting for each."""

    def run(
        self,
        cmd: list[str],
        *,
        cwd: Path | None,
    ) -> ProcessResult:
        logger.debug("Running command: %s (cwd=%s)", " ".join(cmd), cwd)
        try:
            completed = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            # Missing executable or permission problem: report like a shell would
            return ProcessResult(
                cmd=tuple(cmd),
                returncode=COMMAND_NOT_FOUND_EXIT_CODE,
                stdout="",
                stderr=str(exc),
            )

        logger.debug("Command exited with %d", completed.returncode)
        return ProcessResult(
            cmd=tuple(cmd),
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
