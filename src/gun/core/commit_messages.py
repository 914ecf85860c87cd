"""Commit message selection.

Feature branches get an operator-typed message. Direct commits on an
existing feature branch get either the placeholder "wip" or a random line
from the bundled message pool.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from gun.gateway.console.abc import Console

logger = logging.getLogger(__name__)

WIP_MESSAGE = "wip"


def default_pool_path() -> Path:
    """Path of the message pool shipped with the package."""
    return Path(__file__).parent.parent / "resources" / "commit_messages.txt"


class CommitKind(Enum):
    """Which workflow path the commit belongs to."""

    DIRECT = "direct"
    FEATURE = "feature"


@dataclass(frozen=True)
class CommitPlan:
    """Message chosen for the commit, fixed before any git mutation."""

    message: str
    is_funny: bool


class CommitMessagePoolError(Exception):
    """Raised when the message pool cannot be read or has no usable lines."""


def parse_message_pool(text: str) -> list[str]:
    """Usable lines of a pool file: blanks and `#` lines are dropped, the rest trimmed."""
    return [
        line.strip()
        for line in text.splitlines()
        if not line.startswith("#") and line.strip() != ""
    ]


def load_message_pool(pool_path: Path) -> list[str]:
    """Read and parse the message pool.

    Raises:
        CommitMessagePoolError: If the file is unreadable or contains no messages
    """
    try:
        text = pool_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CommitMessagePoolError(f"Could not read commit message pool {pool_path}: {exc}") from exc

    messages = parse_message_pool(text)
    if not messages:
        raise CommitMessagePoolError(f"Commit message pool {pool_path} has no messages")
    logger.debug("Loaded %d messages from %s", len(messages), pool_path)
    return messages


class CommitMessageProvider:
    """Chooses the commit message for either workflow path."""

    def __init__(self, console: Console, pool_path: Path, rng: random.Random) -> None:
        self._console = console
        self._pool_path = pool_path
        self._rng = rng

    def choose(self, kind: CommitKind, *, funny: bool) -> CommitPlan:
        """Pick a message.

        Args:
            kind: DIRECT always ignores the operator; FEATURE always asks
            funny: For DIRECT, draw from the pool instead of using "wip"

        Raises:
            CommitMessagePoolError: If a funny message is needed and the pool
                cannot be loaded. There is no fallback to "wip".
        """
        if kind is CommitKind.FEATURE:
            message = self._console.ask_text("Commit message:", default=None, required=True)
            return CommitPlan(message=message, is_funny=False)

        if not funny:
            return CommitPlan(message=WIP_MESSAGE, is_funny=False)

        messages = load_message_pool(self._pool_path)
        return CommitPlan(message=self._rng.choice(messages), is_funny=True)
