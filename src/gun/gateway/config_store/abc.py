"""Persisted configuration store abstraction.

The store is a small text file in the user's home directory. Parsing lives
in gun.core.config; this gateway only moves text to and from storage.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ConfigStore(ABC):
    """Abstract access to the persisted key=value store."""

    @abstractmethod
    def path(self) -> Path:
        """Location of the store, for display."""
        ...

    @abstractmethod
    def read_text(self) -> str | None:
        """Read the whole store.

        Returns:
            The file contents, or None if the store does not exist or
            cannot be read
        """
        ...

    @abstractmethod
    def write_text(self, content: str) -> None:
        """Replace the store contents, creating the file if needed."""
        ...
