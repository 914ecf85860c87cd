"""Branch name suggestion and sanitization for new feature branches."""

from __future__ import annotations

import random
import re
import string
from dataclasses import dataclass

from gun.gateway.console.abc import Console
from gun.gateway.time.abc import Time

_UNSAFE_BRANCH_CHARS_RE = re.compile(r"[^A-Za-z0-9]")

RANDOM_SUFFIX_LENGTH = 3


def sanitize_branch_name(name: str) -> str:
    """Make a name safe to use as a branch.

    Every character outside `[A-Za-z0-9]` becomes `-`, then the result is
    lowercased. No collapsing or trimming is done, so the operation is
    idempotent and the output always matches `^[a-z0-9-]*$`.

    Examples:
        >>> sanitize_branch_name("My Cool Branch!")
        'my-cool-branch-'
        >>> sanitize_branch_name("1700000000-abc")
        '1700000000-abc'
    """
    # Replace before lowercasing: lower() maps some non-ASCII letters to several chars
    return _UNSAFE_BRANCH_CHARS_RE.sub("-", name).lower()


def default_branch_suggestion(time: Time, rng: random.Random) -> str:
    """`{unix seconds}-{3 random lowercase letters}`, e.g. `1700000000-qzx`."""
    timestamp = int(time.now().timestamp())
    suffix = "".join(rng.choice(string.ascii_lowercase) for _ in range(RANDOM_SUFFIX_LENGTH))
    return f"{timestamp}-{suffix}"


@dataclass(frozen=True)
class BranchPlan:
    """Name chosen for the new branch.

    Attributes:
        raw_name: What the operator typed, or the accepted suggestion
        sanitized_name: Name actually passed to git
    """

    raw_name: str
    sanitized_name: str


class BranchNameSynthesizer:
    """Suggests a branch name, lets the operator override it, then sanitizes it."""

    def __init__(self, console: Console, time: Time, rng: random.Random) -> None:
        self._console = console
        self._time = time
        self._rng = rng

    def synthesize(self) -> BranchPlan:
        suggestion = default_branch_suggestion(self._time, self._rng)
        raw_name = self._console.ask_text("Branch name:", default=suggestion, required=True)
        return BranchPlan(raw_name=raw_name, sanitized_name=sanitize_branch_name(raw_name))
