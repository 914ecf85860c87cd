"""Real ConfigStore backed by a file in the user's home directory."""

import logging
import os
from pathlib import Path

from gun.gateway.config_store.abc import ConfigStore

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".gun.conf"
CONFIG_PATH_ENV_VAR = "GUN_CONFIG"


def default_config_path() -> Path:
    """Resolve the store location.

    GUN_CONFIG wins when set. Otherwise the file lives in HOME, or in
    USERPROFILE on platforms that do not set HOME.
    """
    override = os.environ.get(CONFIG_PATH_ENV_VAR)
    if override:
        return Path(override).expanduser()
    home = os.environ.get("HOME") or os.environ.get("USERPROFILE")
    if home:
        return Path(home) / CONFIG_FILE_NAME
    return Path.home() / CONFIG_FILE_NAME


class RealConfigStore(ConfigStore):
    """Production store reading and writing a UTF-8 text file."""

    def __init__(self, config_path: Path) -> None:
        self._config_path = config_path

    def path(self) -> Path:
        return self._config_path

    def read_text(self) -> str | None:
        if not self._config_path.exists():
            return None
        try:
            return self._config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read %s: %s", self._config_path, exc)
            return None

    def write_text(self, content: str) -> None:
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        self._config_path.write_text(content, encoding="utf-8")
