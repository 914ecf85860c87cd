"""Pull request operations through the gh CLI.

Unlike Git, these methods never raise on a non-zero exit: the workflow
decides per operation whether a failure is fatal (create) or only a
warning (auto-merge).
"""

from __future__ import annotations

import logging
from pathlib import Path

from gun.gateway.github.types import (
    AutoMergeResult,
    PullRequestCreated,
    PullRequestCreateFailed,
    pr_number_from_url,
)
from gun.gateway.process.abc import ProcessRunner

logger = logging.getLogger(__name__)


class GitHub:
    """gh commands used by the feature-branch workflow."""

    def __init__(self, runner: ProcessRunner) -> None:
        self._runner = runner

    def create_pr(self, cwd: Path, base_branch: str) -> PullRequestCreated | PullRequestCreateFailed:
        """Open a pull request for the current branch against base_branch.

        Title and body are filled from the commits (`gh pr create -f`).

        Returns:
            PullRequestCreated with the URL printed by gh, or
            PullRequestCreateFailed carrying the captured output
        """
        result = self._runner.run(["gh", "pr", "create", "-f", "-B", base_branch], cwd=cwd)
        if not result.ok:
            return PullRequestCreateFailed(
                returncode=result.returncode, stdout=result.stdout, stderr=result.stderr
            )

        # gh may print progress text before the URL; the URL is the last line
        lines = [line.strip() for line in result.stdout.splitlines() if line.strip()]
        url = lines[-1] if lines else ""
        logger.debug("gh pr create returned %r", url)
        return PullRequestCreated(url=url, number=pr_number_from_url(url))

    def enable_auto_merge(self, cwd: Path, pr_number: str) -> AutoMergeResult:
        """Turn on squash auto-merge for a pull request."""
        result = self._runner.run(["gh", "pr", "merge", "--auto", "--squash", pr_number], cwd=cwd)
        return AutoMergeResult(success=result.ok, stdout=result.stdout, stderr=result.stderr)
