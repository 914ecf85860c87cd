"""Best-effort system clipboard access."""

from gun.gateway.clipboard.abc import Clipboard as Clipboard
