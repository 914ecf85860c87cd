"""Clock abstraction so timestamps are deterministic in tests."""

from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    """Abstract wall clock."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""
        ...
