"""Wall clock access."""

from gun.gateway.time.abc import Time as Time
