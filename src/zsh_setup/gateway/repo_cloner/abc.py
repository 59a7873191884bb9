from abc import ABC, abstractmethod
from pathlib import Path


class RepositoryCloner(ABC):
    @abstractmethod
    def clone(self, *, url: str, target: Path) -> None:
        """Clone a repository into target.

        Raises:
            RuntimeError: If the clone fails
        """
        ...
