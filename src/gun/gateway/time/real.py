"""Real Time implementation."""

from datetime import UTC, datetime

from gun.gateway.time.abc import Time


class RealTime(Time):
    """Production clock backed by datetime.now()."""

    def now(self) -> datetime:
        return datetime.now(UTC)
