"""First-run setup and configuration resolution.

When no store exists, gun only configures itself: it checks that the
required tools are installed, asks for each toggle, writes the store and
stops. The next invocation runs the workflow.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from gun.core.config import (
    WorkflowConfig,
    format_workflow_config,
    get_config_key_descriptions,
    get_config_keys,
    parse_workflow_config,
)
from gun.gateway.config_store.abc import ConfigStore
from gun.gateway.console.abc import Console
from gun.gateway.shell.abc import Shell

logger = logging.getLogger(__name__)

REQUIRED_TOOLS = ("git", "gh")


def find_missing_tools(shell: Shell, required_tools: Sequence[str] = REQUIRED_TOOLS) -> list[str]:
    """Required executables that are not on PATH, in the order given."""
    return [tool for tool in required_tools if shell.get_installed_tool_path(tool) is None]


def load_workflow_config(config_store: ConfigStore) -> WorkflowConfig | None:
    """Parse the persisted store.

    Returns:
        The resolved configuration, or None when the store is missing or
        unreadable (first run)
    """
    text = config_store.read_text()
    if text is None:
        logger.debug("No config store at %s", config_store.path())
        return None
    return parse_workflow_config(text)


@dataclass(frozen=True)
class SetupResult:
    """Outcome of interactive setup.

    Attributes:
        config: Configuration written to the store, or None if preflight failed
        missing_tools: Required tools not found on PATH
    """

    config: WorkflowConfig | None
    missing_tools: list[str]


def run_setup(
    *,
    shell: Shell,
    console: Console,
    config_store: ConfigStore,
    current: WorkflowConfig,
) -> SetupResult:
    """Preflight, prompt for every toggle and persist the answers.

    Nothing is asked or written when a required tool is missing.

    Args:
        shell: Used to look up required tools
        console: Used to ask for each toggle
        config_store: Destination of the new store
        current: Values offered as prompt defaults
    """
    missing = find_missing_tools(shell)
    if missing:
        return SetupResult(config=None, missing_tools=missing)

    descriptions = get_config_key_descriptions()
    answers: dict[str, bool] = {}
    for key, field_name in get_config_keys().items():
        answers[field_name] = console.ask_confirmation(
            f"{descriptions[key]}?", default=getattr(current, field_name)
        )

    config = WorkflowConfig(**answers)
    config_store.write_text(format_workflow_config(config))
    return SetupResult(config=config, missing_tools=[])
