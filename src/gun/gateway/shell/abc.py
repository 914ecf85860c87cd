"""Shell tool discovery abstraction."""

from abc import ABC, abstractmethod


class Shell(ABC):
    """Abstract lookup of executables on PATH."""

    @abstractmethod
    def get_installed_tool_path(self, tool_name: str) -> str | None:
        """Return the absolute path of an executable, or None if not on PATH.

        Args:
            tool_name: Executable name such as "git" or "gh"
        """
        ...
