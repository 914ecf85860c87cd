"""Result types for pull request operations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PullRequestCreated:
    """A pull request that gh reported as created.

    Attributes:
        url: Web URL printed by `gh pr create`
        number: Last path segment of the URL, as printed
    """

    url: str
    number: str

    @property
    def created(self) -> bool:
        return True


@dataclass(frozen=True)
class PullRequestCreateFailed:
    """`gh pr create` exited non-zero; captured output is kept for reporting."""

    returncode: int
    stdout: str
    stderr: str

    @property
    def created(self) -> bool:
        return False


@dataclass(frozen=True)
class AutoMergeResult:
    """Outcome of enabling auto-merge on a pull request."""

    success: bool
    stdout: str
    stderr: str


def pr_number_from_url(url: str) -> str:
    """Final path segment of a pull request URL.

    >>> pr_number_from_url("https://github.com/octo/repo/pull/42")
    '42'
    """
    return url.strip().rstrip("/").split("/")[-1]
