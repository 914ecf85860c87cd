"""Application context with dependency injection."""

from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path

from gun.core.branch_naming import BranchNameSynthesizer
from gun.core.commit_messages import CommitMessageProvider, default_pool_path
from gun.core.config import WorkflowConfig
from gun.core.workflow import WorkflowOrchestrator
from gun.gateway.clipboard.abc import Clipboard
from gun.gateway.config_store.abc import ConfigStore
from gun.gateway.console.abc import Console
from gun.gateway.git import Git
from gun.gateway.github import GitHub
from gun.gateway.process.abc import ProcessRunner
from gun.gateway.shell.abc import Shell
from gun.gateway.time.abc import Time


@dataclass(frozen=True)
class GunContext:
    """Immutable context holding all dependencies for a gun invocation.

    Created at the CLI entry point and threaded through commands via
    click's context object. Tests build one with context_for_test().
    """

    runner: ProcessRunner
    git: Git
    github: GitHub
    console: Console
    clipboard: Clipboard
    shell: Shell
    time: Time
    config_store: ConfigStore
    rng: random.Random
    pool_path: Path
    cwd: Path  # Current working directory at CLI invocation

    def build_orchestrator(self, config: WorkflowConfig) -> WorkflowOrchestrator:
        """Wire the workflow for one run with the resolved configuration."""
        return WorkflowOrchestrator(
            git=self.git,
            github=self.github,
            console=self.console,
            clipboard=self.clipboard,
            commit_messages=CommitMessageProvider(self.console, self.pool_path, self.rng),
            branch_names=BranchNameSynthesizer(self.console, self.time, self.rng),
            config=config,
            cwd=self.cwd,
        )


def create_context() -> GunContext:
    """Create the production context.

    Real gateway classes are imported inline so that importing this module
    in tests does not pull in pyperclip.
    """
    from gun.gateway.clipboard.real import RealClipboard
    from gun.gateway.config_store.real import RealConfigStore, default_config_path
    from gun.gateway.console.real import RealConsole
    from gun.gateway.process.real import RealProcessRunner
    from gun.gateway.shell.real import RealShell
    from gun.gateway.time.real import RealTime

    runner = RealProcessRunner()
    return GunContext(
        runner=runner,
        git=Git(runner),
        github=GitHub(runner),
        console=RealConsole(),
        clipboard=RealClipboard(),
        shell=RealShell(),
        time=RealTime(),
        config_store=RealConfigStore(default_config_path()),
        rng=random.Random(),
        pool_path=default_pool_path(),
        cwd=Path.cwd(),
    )


def context_for_test(
    *,
    runner: ProcessRunner | None = None,
    console: Console | None = None,
    clipboard: Clipboard | None = None,
    shell: Shell | None = None,
    time: Time | None = None,
    config_store: ConfigStore | None = None,
    rng: random.Random | None = None,
    pool_path: Path | None = None,
    cwd: Path | None = None,
) -> GunContext:
    """Create a GunContext with fakes for every dependency not supplied.

    Git and GitHub always share the given runner, so every external command
    of a run is visible on that one FakeProcessRunner.

    Example:
        >>> from gun.gateway.process.fake import FakeProcessRunner
        >>> runner = FakeProcessRunner()
        >>> ctx = context_for_test(runner=runner)
    """
    from gun.gateway.clipboard.fake import FakeClipboard
    from gun.gateway.config_store.fake import FakeConfigStore
    from gun.gateway.console.fake import FakeConsole
    from gun.gateway.process.fake import FakeProcessRunner
    from gun.gateway.shell.fake import FakeShell
    from gun.gateway.time.fake import FakeTime

    resolved_runner = runner if runner is not None else FakeProcessRunner()
    return GunContext(
        runner=resolved_runner,
        git=Git(resolved_runner),
        github=GitHub(resolved_runner),
        console=console if console is not None else FakeConsole(),
        clipboard=clipboard if clipboard is not None else FakeClipboard(),
        shell=shell
        if shell is not None
        else FakeShell(installed_tools={"git": "/usr/bin/git", "gh": "/usr/bin/gh"}),
        time=time if time is not None else FakeTime(),
        config_store=config_store if config_store is not None else FakeConfigStore(),
        rng=rng if rng is not None else random.Random(0),
        pool_path=pool_path if pool_path is not None else default_pool_path(),
        cwd=cwd if cwd is not None else Path("/fake/repo"),
    )
