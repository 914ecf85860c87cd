"""Executable discovery on PATH."""

from gun.gateway.shell.abc import Shell as Shell
