"""Real Shell implementation using shutil.which."""

import shutil

from gun.gateway.shell.abc import Shell


class RealShell(Shell):
    """Production implementation resolving tools with shutil.which."""

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return shutil.which(tool_name)
