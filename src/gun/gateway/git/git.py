"""Git operations used by the workflow.

This is a concrete class (not ABC): each method is a thin translation to a
git argument vector. Testability comes from the injected ProcessRunner, so
tests assert on the exact commands issued rather than on a parallel fake.
"""

from __future__ import annotations

from pathlib import Path

from gun.gateway.process.abc import ProcessRunner


class Git:
    """Git commands, each expected to succeed.

    Every mutation raises ExternalCommandError on a non-zero exit; nothing is
    retried or rolled back.
    """

    def __init__(self, runner: ProcessRunner) -> None:
        self._runner = runner

    # ============================================================================
    # Query Operations
    # ============================================================================

    def get_current_branch(self, cwd: Path) -> str:
        """Name of the checked-out branch, or "" for a detached HEAD."""
        result = self._runner.run_with_context(
            ["git", "branch", "--show-current"],
            operation_context="get current branch",
            cwd=cwd,
        )
        return result.stdout.strip()

    def has_uncommitted_changes(self, cwd: Path) -> bool:
        """Whether `git status --porcelain` reports anything."""
        result = self._runner.run_with_context(
            ["git", "status", "--porcelain"],
            operation_context="get working tree status",
            cwd=cwd,
        )
        return result.stdout.strip() != ""

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def add_all(self, cwd: Path) -> None:
        """Stage everything under the current directory (git add .)."""
        self._runner.run_with_context(
            ["git", "add", "."],
            operation_context="stage all changes",
            cwd=cwd,
        )

    def commit(self, cwd: Path, message: str) -> None:
        self._runner.run_with_context(
            ["git", "commit", "-m", message],
            operation_context="create commit",
            cwd=cwd,
        )

    def push(self, cwd: Path) -> None:
        """Push the current branch to its already-tracked upstream."""
        self._runner.run_with_context(
            ["git", "push"],
            operation_context="push to upstream",
            cwd=cwd,
        )

    def push_set_upstream(self, cwd: Path, branch: str) -> None:
        """Push a new branch to origin and track it."""
        self._runner.run_with_context(
            ["git", "push", "-u", "origin", branch],
            operation_context=f"push branch {branch}",
            cwd=cwd,
        )

    def checkout_branch(self, cwd: Path, branch: str) -> None:
        self._runner.run_with_context(
            ["git", "checkout", branch],
            operation_context=f"checkout branch {branch}",
            cwd=cwd,
        )

    def checkout_new_branch(self, cwd: Path, branch: str) -> None:
        """Create a branch at HEAD and check it out (git checkout -b).

        An existing branch with the same name makes git refuse; that failure
        is surfaced as-is.
        """
        self._runner.run_with_context(
            ["git", "checkout", "-b", branch],
            operation_context=f"create branch {branch}",
            cwd=cwd,
        )

    def delete_branch(self, cwd: Path, branch: str) -> None:
        """Delete a local branch without force; git refuses if it is unmerged."""
        self._runner.run_with_context(
            ["git", "branch", "-d", branch],
            operation_context=f"delete branch {branch}",
            cwd=cwd,
        )
