"""Operator interaction (confirmations and text input)."""

from gun.gateway.console.abc import Console as Console
