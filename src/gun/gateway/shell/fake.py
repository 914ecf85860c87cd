"""Fake Shell implementation for testing."""

from gun.gateway.shell.abc import Shell


class FakeShell(Shell):
    """In-memory shell with a fixed set of installed tools.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, installed_tools: dict[str, str] | None = None) -> None:
        """Create FakeShell.

        Args:
            installed_tools: Mapping of tool name -> path reported as installed
        """
        self._installed_tools = installed_tools if installed_tools is not None else {}

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return self._installed_tools.get(tool_name)
