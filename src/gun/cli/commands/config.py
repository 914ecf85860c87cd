"""`gun config`: inspect and edit the persisted workflow toggles."""

from dataclasses import replace

import click

from gun.cli.ensure import Ensure
from gun.core.config import (
    WorkflowConfig,
    format_workflow_config,
    get_config_key_descriptions,
    get_config_keys,
    parse_bool,
)
from gun.core.context import GunContext
from gun.core.first_run import load_workflow_config
from gun.output.output import machine_output, user_output


def _resolve_key(key: str) -> str:
    """Map a user-typed key (any case) to its WorkflowConfig field name."""
    keys = get_config_keys()
    canonical = key.upper()
    Ensure.invariant(
        canonical in keys, f"Invalid key: {key} (expected one of {', '.join(keys)})"
    )
    return keys[canonical]


@click.group("config")
def config_group() -> None:
    """Manage gun configuration."""


@config_group.command("list")
@click.pass_obj
def config_list(ctx: GunContext) -> None:
    """Print every configuration key with its resolved value."""
    stored = load_workflow_config(ctx.config_store)
    if stored is None:
        user_output(f"(not configured - run 'gun init' to create {ctx.config_store.path()})")
    config = stored if stored is not None else WorkflowConfig()

    descriptions = get_config_key_descriptions()
    for key, field_name in get_config_keys().items():
        value = str(getattr(config, field_name)).lower()
        machine_output(f"{key}={value}")
        user_output(click.style(f"  {descriptions[key]}", dim=True))


@config_group.command("get")
@click.argument("key", metavar="KEY")
@click.pass_obj
def config_get(ctx: GunContext, key: str) -> None:
    """Print the value of a configuration key."""
    field_name = _resolve_key(key)
    stored = load_workflow_config(ctx.config_store)
    config = stored if stored is not None else WorkflowConfig()
    machine_output(str(getattr(config, field_name)).lower())


@config_group.command("set")
@click.argument("key", metavar="KEY")
@click.argument("value", metavar="VALUE")
@click.pass_obj
def config_set(ctx: GunContext, key: str, value: str) -> None:
    """Set a configuration key to true or false."""
    field_name = _resolve_key(key)
    parsed = Ensure.not_none(
        parse_bool(value.lower()), f"Invalid boolean value: {value} (expected true or false)"
    )

    stored = load_workflow_config(ctx.config_store)
    config = stored if stored is not None else WorkflowConfig()
    ctx.config_store.write_text(format_workflow_config(replace(config, **{field_name: parsed})))
    user_output(f"Set {key.upper()}={str(parsed).lower()} in {ctx.config_store.path()}")


@config_group.command("path")
@click.pass_obj
def config_path(ctx: GunContext) -> None:
    """Print the location of the config file."""
    machine_output(str(ctx.config_store.path()))
