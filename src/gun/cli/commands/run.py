"""The default command: commit, and branch/push/PR as needed."""

import logging

import click

from gun.cli.commands.init import run_first_run_setup
from gun.core.commit_messages import CommitMessagePoolError
from gun.core.config import WorkflowConfig
from gun.core.context import GunContext
from gun.core.first_run import load_workflow_config
from gun.gateway.process.types import ExternalCommandError
from gun.output.output import user_output

logger = logging.getLogger(__name__)


def report_external_command_error(error: ExternalCommandError) -> None:
    user_output(click.style("Error: ", fg="red") + str(error))
    if error.stdout.strip():
        user_output(f"stdout: {error.stdout.strip()}")
    if error.stderr.strip():
        user_output(f"stderr: {error.stderr.strip()}")


def run_workflow(ctx: GunContext) -> None:
    """Resolve configuration and run the workflow once.

    Without a config store this only performs first-run setup.

    Raises:
        SystemExit: With the workflow's exit code when it is non-zero, or 1
            on a failed external command or unreadable message pool
    """
    config = load_workflow_config(ctx.config_store)
    if config is None:
        run_first_run_setup(ctx, WorkflowConfig())
        return

    logger.debug("Resolved config: %s", config)
    try:
        result = ctx.build_orchestrator(config).run()
    except ExternalCommandError as exc:
        report_external_command_error(exc)
        raise SystemExit(1) from exc
    except CommitMessagePoolError as exc:
        user_output(click.style("Error: ", fg="red") + str(exc))
        raise SystemExit(1) from exc

    logger.debug("Workflow finished: %s", result.outcome.value)
    if result.exit_code != 0:
        raise SystemExit(result.exit_code)
