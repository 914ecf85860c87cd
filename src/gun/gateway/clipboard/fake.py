"""Fake Clipboard implementation for testing."""

from gun.gateway.clipboard.abc import Clipboard


class FakeClipboard(Clipboard):
    """In-memory clipboard that records copied text.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, available: bool = True) -> None:
        """Create FakeClipboard.

        Args:
            available: Whether copy() succeeds; when False nothing is recorded
        """
        self._available = available
        self._copied: list[str] = []

    def copy(self, text: str) -> bool:
        if not self._available:
            return False
        self._copied.append(text)
        return True

    @property
    def copied(self) -> list[str]:
        """Texts copied so far. For test assertions only."""
        return self._copied.copy()
