"""Fake ConfigStore for testing."""

from pathlib import Path

from gun.gateway.config_store.abc import ConfigStore


class FakeConfigStore(ConfigStore):
    """In-memory store.

    This class has NO public setup methods. All state is provided via constructor.
    Writes replace the in-memory content so later reads observe them.
    """

    def __init__(self, *, content: str | None = None, path: Path = Path("/fake/home/.gun.conf")):
        """Create FakeConfigStore.

        Args:
            content: Initial store text, or None for "no store yet"
            path: Path reported by path()
        """
        self._content = content
        self._path = path
        self._writes: list[str] = []

    def path(self) -> Path:
        return self._path

    def read_text(self) -> str | None:
        return self._content

    def write_text(self, content: str) -> None:
        self._content = content
        self._writes.append(content)

    @property
    def writes(self) -> list[str]:
        """Contents written so far. For test assertions only."""
        return self._writes.copy()
