"""Workflow toggles and their persisted key=value format.

Example store (~/.gun.conf):
  CREATE_PR=true
  FUNNY_COMMIT=true
  AUTO_MERGE=true
  BACK_TO_DEFAULT=true
  DELETE_BRANCH=true
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from functools import cache

logger = logging.getLogger(__name__)

# Written by earlier releases; read as BACK_TO_DEFAULT
LEGACY_KEY_ALIASES = {"BACK_TO_MAIN": "BACK_TO_DEFAULT"}


@dataclass(frozen=True)
class WorkflowConfig:
    """Immutable set of workflow toggles, constructed once per run.

    Attributes:
        create_pr: Offer to open a pull request for new branches
        funny_commit: Use a random message from the pool on feature branches
        auto_merge: Enable squash auto-merge on created pull requests
        back_to_default: Check the base branch out again after pushing
        delete_branch: Delete the local feature branch after returning
    """

    create_pr: bool = True
    funny_commit: bool = True
    auto_merge: bool = True
    back_to_default: bool = True
    delete_branch: bool = True


@cache
def get_config_keys() -> dict[str, str]:
    """Persisted key -> WorkflowConfig field, in canonical file order."""
    return {field.name.upper(): field.name for field in fields(WorkflowConfig)}


@cache
def get_config_key_descriptions() -> dict[str, str]:
    """Persisted key -> description, for `gun config list` and first-run prompts."""
    return {
        "CREATE_PR": "Create PRs for new branches",
        "FUNNY_COMMIT": "Use funny commit messages on feature branches",
        "AUTO_MERGE": "Enable auto-merge on created PRs",
        "BACK_TO_DEFAULT": "Return to the base branch after pushing",
        "DELETE_BRANCH": "Delete the feature branch after returning",
    }


def parse_bool(value: str) -> bool | None:
    """Parse the literal strings "true"/"false"; anything else is None."""
    if value == "true":
        return True
    if value == "false":
        return False
    return None


def parse_workflow_config(text: str, *, base: WorkflowConfig | None = None) -> WorkflowConfig:
    """Parse a persisted store into a WorkflowConfig.

    Each line is split on its first `=`. Unknown keys and values other than
    `true`/`false` are logged and leave the current value untouched. Lines
    without `=`, blank lines and `#` comments are skipped silently.

    Args:
        text: Store contents
        base: Values used for keys the store does not set (all True by default)

    Returns:
        The resolved configuration
    """
    config = base if base is not None else WorkflowConfig()
    keys = get_config_keys()
    updates: dict[str, bool] = {}

    for lineno, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        raw_key, raw_value = line.split("=", 1)
        key = raw_key.strip()
        key = LEGACY_KEY_ALIASES.get(key, key)
        value = raw_value.strip()

        if key not in keys:
            logger.warning("Ignoring unknown config key %r on line %d", key, lineno)
            continue

        parsed = parse_bool(value)
        if parsed is None:
            logger.warning(
                "Ignoring invalid value %r for %s on line %d (expected true or false)",
                value,
                key,
                lineno,
            )
            continue

        updates[keys[key]] = parsed

    return replace(config, **updates)


def format_workflow_config(config: WorkflowConfig) -> str:
    """Serialize a WorkflowConfig as five KEY=value lines."""
    lines = [
        f"{key}={str(getattr(config, field_name)).lower()}"
        for key, field_name in get_config_keys().items()
    ]
    return "\n".join(lines) + "\n"
