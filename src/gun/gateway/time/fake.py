"""Fake Time implementation for testing."""

from datetime import UTC, datetime

from gun.gateway.time.abc import Time

# 2024-01-01T00:00:00Z
DEFAULT_FAKE_NOW = datetime(2024, 1, 1, tzinfo=UTC)


class FakeTime(Time):
    """Clock frozen at a configured instant.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, now: datetime = DEFAULT_FAKE_NOW) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now
