"""Clipboard abstraction for testing."""

from abc import ABC, abstractmethod


class Clipboard(ABC):
    """Abstract clipboard access for dependency injection."""

    @abstractmethod
    def copy(self, text: str) -> bool:
        """Copy text to the system clipboard.

        Best-effort: implementations never raise.

        Args:
            text: Text to copy

        Returns:
            True if the text was copied, False if no clipboard is available
        """
        ...
