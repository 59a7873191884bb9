from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    @abstractmethod
    def now(self) -> datetime:
        """Return the current local time."""
        ...
