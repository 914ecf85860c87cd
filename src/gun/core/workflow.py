"""The commit/branch/PR workflow.

Repository state is read once. The current branch then selects one of two
paths, which is never re-evaluated:

- Direct commit: on a feature branch, stage everything, commit and push to
  the tracked upstream.
- Feature branch: on a default branch, create a new branch, commit, push it
  with upstream tracking, then optionally open a PR, enable auto-merge,
  return to the base branch and delete the feature branch.

The orchestrator never exits the process. It returns a WorkflowResult and
lets ExternalCommandError / CommitMessagePoolError propagate; the CLI layer
maps both onto exit codes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import click

from gun.core.branch_naming import BranchNameSynthesizer
from gun.core.commit_messages import CommitKind, CommitMessageProvider
from gun.core.config import WorkflowConfig
from gun.gateway.clipboard.abc import Clipboard
from gun.gateway.console.abc import Console
from gun.gateway.git import Git
from gun.gateway.github import GitHub
from gun.gateway.github.types import PullRequestCreated, PullRequestCreateFailed
from gun.output.output import user_output

logger = logging.getLogger(__name__)

DEFAULT_BRANCHES = frozenset({"main", "master", "bullseye"})


class BranchKind(Enum):
    DEFAULT = "default"
    FEATURE = "feature"


def classify_branch(branch: str) -> BranchKind:
    """DEFAULT for the long-lived integration branches, FEATURE for anything else.

    Detached HEAD (empty name) is a feature branch.
    """
    if branch in DEFAULT_BRANCHES:
        return BranchKind.DEFAULT
    return BranchKind.FEATURE


@dataclass(frozen=True)
class RepositoryState:
    """Snapshot taken once at the start of a run."""

    current_branch: str
    is_clean: bool


def read_repository_state(git: Git, cwd: Path) -> RepositoryState:
    current_branch = git.get_current_branch(cwd)
    is_clean = not git.has_uncommitted_changes(cwd)
    logger.debug("Repository state: branch=%r clean=%s", current_branch, is_clean)
    return RepositoryState(current_branch=current_branch, is_clean=is_clean)


class WorkflowOutcome(Enum):
    NOTHING_TO_COMMIT = "nothing_to_commit"
    DECLINED = "declined"
    COMMITTED_DIRECTLY = "committed_directly"
    BRANCH_PUSHED = "branch_pushed"
    PR_CREATE_FAILED = "pr_create_failed"


@dataclass(frozen=True)
class WorkflowResult:
    """How a run ended.

    Attributes:
        outcome: Terminal state reached
        branch: Branch the commit landed on, when a commit was made
        pull_request: The created PR, when one was created
    """

    outcome: WorkflowOutcome
    branch: str | None = None
    pull_request: PullRequestCreated | None = None

    @property
    def exit_code(self) -> int:
        if self.outcome is WorkflowOutcome.PR_CREATE_FAILED:
            return 1
        return 0


@dataclass(frozen=True)
class FeatureBranchOptions:
    """Post-push actions the operator chose for a new branch.

    auto_merge is only True when create_pr is; delete_branch only when
    back_to_default is.
    """

    create_pr: bool
    auto_merge: bool
    back_to_default: bool
    delete_branch: bool


class WorkflowOrchestrator:
    """Drives one run of the workflow against a single working tree."""

    def __init__(
        self,
        *,
        git: Git,
        github: GitHub,
        console: Console,
        clipboard: Clipboard,
        commit_messages: CommitMessageProvider,
        branch_names: BranchNameSynthesizer,
        config: WorkflowConfig,
        cwd: Path,
    ) -> None:
        self._git = git
        self._github = github
        self._console = console
        self._clipboard = clipboard
        self._commit_messages = commit_messages
        self._branch_names = branch_names
        self._config = config
        self._cwd = cwd

    def run(self) -> WorkflowResult:
        """Read repository state, then execute the applicable path."""
        return self.execute(read_repository_state(self._git, self._cwd))

    def execute(self, state: RepositoryState) -> WorkflowResult:
        if state.is_clean:
            user_output("Nothing to commit")
            return WorkflowResult(outcome=WorkflowOutcome.NOTHING_TO_COMMIT)

        if classify_branch(state.current_branch) is BranchKind.FEATURE:
            return self._run_direct_commit(state)
        return self._run_feature_branch(state)

    # ============================================================================
    # Direct commit
    # ============================================================================

    def _run_direct_commit(self, state: RepositoryState) -> WorkflowResult:
        if not self._console.ask_confirmation("wip?", default=True):
            return WorkflowResult(outcome=WorkflowOutcome.DECLINED)

        plan = self._commit_messages.choose(CommitKind.DIRECT, funny=self._config.funny_commit)

        self._git.add_all(self._cwd)
        user_output("Staged all changes")
        self._git.commit(self._cwd, plan.message)
        user_output(f"Commit message: {click.style(plan.message, fg='yellow')}")
        self._git.push(self._cwd)
        user_output(click.style("✓", fg="green") + " Pushed changes to remote")

        return WorkflowResult(
            outcome=WorkflowOutcome.COMMITTED_DIRECTLY, branch=state.current_branch
        )

    # ============================================================================
    # Feature branch
    # ============================================================================

    def _run_feature_branch(self, state: RepositoryState) -> WorkflowResult:
        base_branch = state.current_branch

        if not self._console.ask_confirmation("Create branch?", default=True):
            return WorkflowResult(outcome=WorkflowOutcome.DECLINED)

        # Everything is asked before the first mutation
        branch = self._branch_names.synthesize().sanitized_name
        plan = self._commit_messages.choose(CommitKind.FEATURE, funny=False)
        options = self._ask_feature_branch_options(base_branch)

        self._git.checkout_new_branch(self._cwd, branch)
        user_output(f"Created and checked out branch {click.style(branch, fg='yellow')}")
        self._git.add_all(self._cwd)
        user_output("Staged all changes")
        self._git.commit(self._cwd, plan.message)
        user_output(f"Commit message: {click.style(plan.message, fg='yellow')}")
        self._git.push_set_upstream(self._cwd, branch)
        user_output(click.style("✓", fg="green") + f" Pushed branch {branch} to origin")

        pull_request: PullRequestCreated | None = None
        if options.create_pr:
            pr_result = self._github.create_pr(self._cwd, base_branch)
            if isinstance(pr_result, PullRequestCreateFailed):
                self._report_pr_create_failure(pr_result)
                return WorkflowResult(outcome=WorkflowOutcome.PR_CREATE_FAILED, branch=branch)
            pull_request = pr_result
            self._announce_pull_request(pull_request)

            if options.auto_merge and pull_request.number:
                self._enable_auto_merge(pull_request)
            elif options.auto_merge:
                user_output(
                    click.style("Warning: ", fg="yellow")
                    + "gh printed no PR URL, skipping auto-merge"
                )

        if options.back_to_default:
            user_output(f"Back to {click.style(base_branch, fg='yellow')}")
            self._git.checkout_branch(self._cwd, base_branch)

            if options.delete_branch:
                self._git.delete_branch(self._cwd, branch)
                user_output(f"Deleted branch {branch}")

        return WorkflowResult(
            outcome=WorkflowOutcome.BRANCH_PUSHED, branch=branch, pull_request=pull_request
        )

    def _ask_feature_branch_options(self, base_branch: str) -> FeatureBranchOptions:
        create_pr = self._console.ask_confirmation("Create PR?", default=self._config.create_pr)
        auto_merge = False
        if create_pr:
            auto_merge = self._console.ask_confirmation(
                "Enable auto-merge?", default=self._config.auto_merge
            )

        back_to_default = self._console.ask_confirmation(
            f"Back to {base_branch}?", default=self._config.back_to_default
        )
        delete_branch = False
        if back_to_default:
            delete_branch = self._console.ask_confirmation(
                "Delete branch?", default=self._config.delete_branch
            )

        return FeatureBranchOptions(
            create_pr=create_pr,
            auto_merge=auto_merge,
            back_to_default=back_to_default,
            delete_branch=delete_branch,
        )

    def _report_pr_create_failure(self, failure: PullRequestCreateFailed) -> None:
        user_output(click.style("Error: ", fg="red") + "Could not create PR")
        if failure.stdout.strip():
            user_output(f"gh stdout: {failure.stdout.strip()}")
        if failure.stderr.strip():
            user_output(f"gh stderr: {failure.stderr.strip()}")

    def _announce_pull_request(self, pull_request: PullRequestCreated) -> None:
        if not pull_request.url:
            user_output(click.style("✓", fg="green") + " Created PR (gh printed no URL)")
            return
        user_output(click.style("✓", fg="green") + f" Created PR: {pull_request.url}")
        if self._clipboard.copy(pull_request.url):
            user_output("Copied PR URL to clipboard")

    def _enable_auto_merge(self, pull_request: PullRequestCreated) -> None:
        merge_result = self._github.enable_auto_merge(self._cwd, pull_request.number)
        if merge_result.success:
            user_output(click.style("✓", fg="green") + " Enabled auto-merge")
            return
        user_output(click.style("Warning: ", fg="yellow") + "Could not enable auto-merge")
        if merge_result.stderr.strip():
            user_output(f"gh stderr: {merge_result.stderr.strip()}")
