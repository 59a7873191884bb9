"""Framework bootstrap abstraction.

The framework ships its own installer script; this gateway treats running
it as a single opaque operation that either produces the target directory
or fails.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class FrameworkInstaller(ABC):
    @abstractmethod
    def install(self, target: Path) -> None:
        """Install the framework into target without touching the login shell or ~/.zshrc.

        Raises:
            RuntimeError: If fetching or running the bootstrap installer fails
        """
        ...
