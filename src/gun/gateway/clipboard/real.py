"""Real Clipboard implementation using pyperclip.

RealClipboard provides cross-platform clipboard access using pyperclip,
which handles xclip/xsel on Linux, pbcopy on macOS and clip on Windows.
"""

import logging

from gun.gateway.clipboard.abc import Clipboard

logger = logging.getLogger(__name__)


class RealClipboard(Clipboard):
    """Production implementation using pyperclip for clipboard access."""

    def copy(self, text: str) -> bool:
        # Inline import: pyperclip probes for backends at import time
        import pyperclip

        try:
            if not pyperclip.is_available():
                return False
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            logger.debug("Clipboard copy failed: %s", exc)
            return False
        return True
