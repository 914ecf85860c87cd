"""`gun init`: interactive setup of the persisted configuration."""

import click

from gun.core.config import WorkflowConfig
from gun.core.context import GunContext
from gun.core.first_run import load_workflow_config, run_setup
from gun.output.output import user_output


def run_first_run_setup(ctx: GunContext, current: WorkflowConfig) -> None:
    """Run setup and exit: 0 once the store is written, 1 if tools are missing.

    Raises:
        SystemExit: Always
    """
    user_output(click.style("Setting up gun", bold=True))
    result = run_setup(
        shell=ctx.shell,
        console=ctx.console,
        config_store=ctx.config_store,
        current=current,
    )
    if result.config is None:
        user_output(
            click.style("Error: ", fg="red")
            + f"Missing required commands: {', '.join(result.missing_tools)}"
        )
        user_output("Please install and configure them and try again.")
        raise SystemExit(1)

    user_output(click.style("✓", fg="green") + f" Config file created: {ctx.config_store.path()}")
    raise SystemExit(0)


@click.command("init")
@click.pass_obj
def init_cmd(ctx: GunContext) -> None:
    """Create or rewrite the config file interactively.

    Existing values are offered as defaults.
    """
    current = load_workflow_config(ctx.config_store)
    run_first_run_setup(ctx, current if current is not None else WorkflowConfig())
