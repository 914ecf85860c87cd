"""Tests for the workflow state machine.

Every external command goes through one FakeProcessRunner, so these tests
assert on the exact command sequence a run issues.
"""

import random
from pathlib import Path

import pytest

from gun.core.commit_messages import CommitMessagePoolError
from gun.core.config import WorkflowConfig
from gun.core.context import context_for_test
from gun.core.workflow import (
    DEFAULT_BRANCHES,
    BranchKind,
    RepositoryState,
    WorkflowOutcome,
    classify_branch,
)
from gun.gateway.clipboard.fake import FakeClipboard
from gun.gateway.console.fake import FakeConsole
from gun.gateway.process.fake import FakeProcessRunner, process_result
from gun.gateway.process.types import ExternalCommandError, ProcessResult

BRANCH_QUERY = ("git", "branch", "--show-current")
STATUS_QUERY = ("git", "status", "--porcelain")
PR_URL = "https://github.com/octo/repo/pull/42"

MUTATING_PREFIXES = [
    ("git", "add"),
    ("git", "commit"),
    ("git", "push"),
    ("git", "checkout"),
    ("git", "branch", "-d"),
    ("gh", "pr"),
]


def _repo_runner(
    branch: str,
    *,
    dirty: bool,
    extra: dict[tuple[str, ...], ProcessResult] | None = None,
) -> FakeProcessRunner:
    results = {
        BRANCH_QUERY: process_result(BRANCH_QUERY, stdout=f"{branch}\n"),
        STATUS_QUERY: process_result(STATUS_QUERY, stdout=" M app.py\n" if dirty else ""),
    }
    if extra is not None:
        results.update(extra)
    return FakeProcessRunner(results=results)


def _mutations(runner: FakeProcessRunner) -> list[tuple[str, ...]]:
    return [
        call
        for call in runner.calls
        if any(call[: len(prefix)] == prefix for prefix in MUTATING_PREFIXES)
    ]


# ============================================================================
# Classification
# ============================================================================


@pytest.mark.parametrize("branch", sorted(DEFAULT_BRANCHES))
def test_default_branches_classify_as_default(branch: str) -> None:
    assert classify_branch(branch) is BranchKind.DEFAULT


@pytest.mark.parametrize("branch", ["", "feature-x", "Main", "develop", "main2", "1700000000-abc"])
def test_everything_else_classifies_as_feature(branch: str) -> None:
    assert classify_branch(branch) is BranchKind.FEATURE


# ============================================================================
# Entry guard
# ============================================================================


@pytest.mark.parametrize("branch", ["main", "feature-x", ""])
def test_clean_tree_issues_no_mutations(branch: str, capsys: pytest.CaptureFixture[str]) -> None:
    runner = _repo_runner(branch, dirty=False)
    console = FakeConsole()
    ctx = context_for_test(runner=runner, console=console)

    result = ctx.build_orchestrator(WorkflowConfig()).run()

    assert result.outcome is WorkflowOutcome.NOTHING_TO_COMMIT
    assert result.exit_code == 0
    assert runner.calls == [BRANCH_QUERY, STATUS_QUERY]
    assert console.prompts == []
    assert "Nothing to commit" in capsys.readouterr().err


def test_state_is_read_exactly_once() -> None:
    runner = _repo_runner("feature-x", dirty=True)
    ctx = context_for_test(runner=runner, console=FakeConsole(confirm_responses=[True]))

    ctx.build_orchestrator(WorkflowConfig(funny_commit=False)).run()

    assert runner.calls.count(BRANCH_QUERY) == 1
    assert runner.calls.count(STATUS_QUERY) == 1


# ============================================================================
# Direct commit path
# ============================================================================


def test_direct_commit_wip_sequence() -> None:
    runner = _repo_runner("feature-x", dirty=True)
    console = FakeConsole(confirm_responses=[True])
    ctx = context_for_test(runner=runner, console=console)

    result = ctx.build_orchestrator(WorkflowConfig(funny_commit=False)).run()

    assert result.outcome is WorkflowOutcome.COMMITTED_DIRECTLY
    assert result.branch == "feature-x"
    assert result.exit_code == 0
    assert _mutations(runner) == [
        ("git", "add", "."),
        ("git", "commit", "-m", "wip"),
        ("git", "push"),
    ]
    assert console.prompts == ["wip?"]


def test_direct_commit_declined_does_nothing() -> None:
    runner = _repo_runner("feature-x", dirty=True)
    ctx = context_for_test(runner=runner, console=FakeConsole(confirm_responses=[False]))

    result = ctx.build_orchestrator(WorkflowConfig()).run()

    assert result.outcome is WorkflowOutcome.DECLINED
    assert result.exit_code == 0
    assert _mutations(runner) == []


def test_direct_commit_funny_message_from_pool(tmp_path: Path) -> None:
    pool = tmp_path / "pool.txt"
    pool.write_text("# only one\n  shaving the yak  \n", encoding="utf-8")
    runner = _repo_runner("feature-x", dirty=True)
    ctx = context_for_test(
        runner=runner, console=FakeConsole(confirm_responses=[True]), pool_path=pool
    )

    ctx.build_orchestrator(WorkflowConfig(funny_commit=True)).run()

    assert ("git", "commit", "-m", "shaving the yak") in runner.calls


def test_direct_commit_unreadable_pool_fails_before_any_mutation(tmp_path: Path) -> None:
    runner = _repo_runner("feature-x", dirty=True)
    ctx = context_for_test(
        runner=runner,
        console=FakeConsole(confirm_responses=[True]),
        pool_path=tmp_path / "missing.txt",
    )

    with pytest.raises(CommitMessagePoolError):
        ctx.build_orchestrator(WorkflowConfig(funny_commit=True)).run()

    assert _mutations(runner) == []


def test_direct_commit_stops_at_first_failing_command() -> None:
    commit = ("git", "commit", "-m", "wip")
    runner = _repo_runner(
        "feature-x",
        dirty=True,
        extra={commit: process_result(commit, returncode=1, stdout="nothing added")},
    )
    ctx = context_for_test(runner=runner, console=FakeConsole(confirm_responses=[True]))

    with pytest.raises(ExternalCommandError) as exc_info:
        ctx.build_orchestrator(WorkflowConfig(funny_commit=False)).run()

    assert exc_info.value.stdout == "nothing added"
    assert ("git", "push") not in runner.calls


def test_detached_head_takes_direct_commit_path() -> None:
    runner = _repo_runner("", dirty=True)
    ctx = context_for_test(runner=runner, console=FakeConsole(confirm_responses=[True]))

    result = ctx.build_orchestrator(WorkflowConfig(funny_commit=False)).run()

    assert result.outcome is WorkflowOutcome.COMMITTED_DIRECTLY


# ============================================================================
# Feature branch path
# ============================================================================


def test_feature_branch_declined_does_nothing() -> None:
    runner = _repo_runner("main", dirty=True)
    console = FakeConsole(confirm_responses=[False])
    ctx = context_for_test(runner=runner, console=console)

    result = ctx.build_orchestrator(WorkflowConfig()).run()

    assert result.outcome is WorkflowOutcome.DECLINED
    assert _mutations(runner) == []
    assert console.prompts == ["Create branch?"]


def test_feature_branch_without_pr_sanitizes_and_pushes() -> None:
    runner = _repo_runner("main", dirty=True)
    console = FakeConsole(
        confirm_responses=[True, False, False],
        text_responses=["My Cool Branch!", "Add cool thing"],
    )
    ctx = context_for_test(runner=runner, console=console)

    result = ctx.build_orchestrator(WorkflowConfig()).run()

    assert result.outcome is WorkflowOutcome.BRANCH_PUSHED
    assert result.branch == "my-cool-branch-"
    assert result.pull_request is None
    assert result.exit_code == 0
    assert _mutations(runner) == [
        ("git", "checkout", "-b", "my-cool-branch-"),
        ("git", "add", "."),
        ("git", "commit", "-m", "Add cool thing"),
        ("git", "push", "-u", "origin", "my-cool-branch-"),
    ]
    # Declining the PR skips the auto-merge question; declining return skips delete
    assert console.prompts == [
        "Create branch?",
        "Branch name:",
        "Commit message:",
        "Create PR?",
        "Back to main?",
    ]


def test_feature_branch_full_run_with_pr_auto_merge_and_cleanup() -> None:
    create = ("gh", "pr", "create", "-f", "-B", "master")
    runner = _repo_runner(
        "master",
        dirty=True,
        extra={create: process_result(create, stdout=f"{PR_URL}\n")},
    )
    clipboard = FakeClipboard()
    console = FakeConsole(
        confirm_responses=[True, True, True, True, True],
        text_responses=["topic", "Do the thing"],
    )
    ctx = context_for_test(runner=runner, console=console, clipboard=clipboard)

    result = ctx.build_orchestrator(WorkflowConfig()).run()

    assert result.outcome is WorkflowOutcome.BRANCH_PUSHED
    assert result.pull_request is not None
    assert result.pull_request.url == PR_URL
    assert result.pull_request.number == "42"
    assert _mutations(runner) == [
        ("git", "checkout", "-b", "topic"),
        ("git", "add", "."),
        ("git", "commit", "-m", "Do the thing"),
        ("git", "push", "-u", "origin", "topic"),
        create,
        ("gh", "pr", "merge", "--auto", "--squash", "42"),
        ("git", "checkout", "master"),
        ("git", "branch", "-d", "topic"),
    ]
    assert clipboard.copied == [PR_URL]
    assert console.prompts == [
        "Create branch?",
        "Branch name:",
        "Commit message:",
        "Create PR?",
        "Enable auto-merge?",
        "Back to master?",
        "Delete branch?",
    ]


def test_feature_branch_prompts_default_from_config() -> None:
    runner = _repo_runner("bullseye", dirty=True)
    # Only the first confirmation is scripted; the rest fall back to defaults
    console = FakeConsole(confirm_responses=[True], text_responses=["topic", "msg"])
    ctx = context_for_test(runner=runner, console=console)

    config = WorkflowConfig(create_pr=False, back_to_default=True, delete_branch=False)
    ctx.build_orchestrator(config).run()

    assert not any(call[:2] == ("gh", "pr") for call in runner.calls)
    assert ("git", "checkout", "bullseye") in runner.calls
    assert ("git", "branch", "-d", "topic") not in runner.calls


def test_pr_create_failure_skips_all_post_actions(capsys: pytest.CaptureFixture[str]) -> None:
    create = ("gh", "pr", "create", "-f", "-B", "main")
    runner = _repo_runner(
        "main",
        dirty=True,
        extra={
            create: process_result(
                create, returncode=1, stdout="partial", stderr="no commits between main and topic"
            )
        },
    )
    clipboard = FakeClipboard()
    console = FakeConsole(
        confirm_responses=[True, True, True, True, True],
        text_responses=["topic", "msg"],
    )
    ctx = context_for_test(runner=runner, console=console, clipboard=clipboard)

    result = ctx.build_orchestrator(WorkflowConfig()).run()

    assert result.outcome is WorkflowOutcome.PR_CREATE_FAILED
    assert result.exit_code != 0
    assert runner.calls[-1] == create
    assert not any(call[:3] == ("gh", "pr", "merge") for call in runner.calls)
    assert ("git", "checkout", "main") not in runner.calls
    assert ("git", "branch", "-d", "topic") not in runner.calls
    assert clipboard.copied == []
    err = capsys.readouterr().err
    assert "Could not create PR" in err
    assert "no commits between main and topic" in err
    assert "partial" in err


def test_auto_merge_failure_is_only_a_warning(capsys: pytest.CaptureFixture[str]) -> None:
    create = ("gh", "pr", "create", "-f", "-B", "main")
    merge = ("gh", "pr", "merge", "--auto", "--squash", "42")
    runner = _repo_runner(
        "main",
        dirty=True,
        extra={
            create: process_result(create, stdout=f"{PR_URL}\n"),
            merge: process_result(merge, returncode=1, stderr="auto-merge is not allowed"),
        },
    )
    console = FakeConsole(
        confirm_responses=[True, True, True, True, False],
        text_responses=["topic", "msg"],
    )
    ctx = context_for_test(runner=runner, console=console)

    result = ctx.build_orchestrator(WorkflowConfig()).run()

    assert result.outcome is WorkflowOutcome.BRANCH_PUSHED
    assert result.exit_code == 0
    assert runner.calls[-2:] == [merge, ("git", "checkout", "main")]
    err = capsys.readouterr().err
    assert "Warning" in err
    assert "auto-merge is not allowed" in err


def test_pr_created_without_url_skips_auto_merge_and_clipboard(
    capsys: pytest.CaptureFixture[str],
) -> None:
    create = ("gh", "pr", "create", "-f", "-B", "main")
    runner = _repo_runner("main", dirty=True, extra={create: process_result(create, stdout="")})
    clipboard = FakeClipboard()
    console = FakeConsole(
        confirm_responses=[True, True, True, True, False],
        text_responses=["topic", "msg"],
    )
    ctx = context_for_test(runner=runner, console=console, clipboard=clipboard)

    result = ctx.build_orchestrator(WorkflowConfig()).run()

    assert result.outcome is WorkflowOutcome.BRANCH_PUSHED
    assert result.exit_code == 0
    assert not any(call[:3] == ("gh", "pr", "merge") for call in runner.calls)
    assert runner.calls[-2:] == [create, ("git", "checkout", "main")]
    assert clipboard.copied == []
    err = capsys.readouterr().err
    assert "Created PR: " not in err
    assert "skipping auto-merge" in err

def test_clipboard_failure_is_ignored(capsys: pytest.CaptureFixture[str]) -> None:
    create = ("gh", "pr", "create", "-f", "-B", "main")
    runner = _repo_runner(
        "main", dirty=True, extra={create: process_result(create, stdout=f"{PR_URL}\n")}
    )
    console = FakeConsole(
        confirm_responses=[True, True, False, False], text_responses=["topic", "msg"]
    )
    ctx = context_for_test(
        runner=runner, console=console, clipboard=FakeClipboard(available=False)
    )

    result = ctx.build_orchestrator(WorkflowConfig()).run()

    assert result.exit_code == 0
    assert result.pull_request is not None
    assert "Copied PR URL" not in capsys.readouterr().err


def test_feature_branch_push_failure_propagates_without_rollback() -> None:
    push = ("git", "push", "-u", "origin", "topic")
    runner = _repo_runner(
        "main", dirty=True, extra={push: process_result(push, returncode=1, stderr="rejected")}
    )
    console = FakeConsole(
        confirm_responses=[True, True, True, True, True], text_responses=["topic", "msg"]
    )
    ctx = context_for_test(runner=runner, console=console)

    with pytest.raises(ExternalCommandError) as exc_info:
        ctx.build_orchestrator(WorkflowConfig()).run()

    assert exc_info.value.stderr == "rejected"
    assert runner.calls[-1] == push
    assert ("git", "checkout", "main") not in runner.calls


def test_delete_branch_failure_propagates() -> None:
    delete = ("git", "branch", "-d", "topic")
    runner = _repo_runner(
        "main",
        dirty=True,
        extra={delete: process_result(delete, returncode=1, stderr="not fully merged")},
    )
    console = FakeConsole(
        confirm_responses=[True, False, True, True], text_responses=["topic", "msg"]
    )
    ctx = context_for_test(runner=runner, console=console)

    with pytest.raises(ExternalCommandError, match="delete branch topic"):
        ctx.build_orchestrator(WorkflowConfig()).run()


def test_execute_uses_given_state_without_querying() -> None:
    runner = FakeProcessRunner()
    ctx = context_for_test(runner=runner, rng=random.Random(1))

    result = ctx.build_orchestrator(WorkflowConfig()).execute(
        RepositoryState(current_branch="main", is_clean=True)
    )

    assert result.outcome is WorkflowOutcome.NOTHING_TO_COMMIT
    assert runner.calls == []
