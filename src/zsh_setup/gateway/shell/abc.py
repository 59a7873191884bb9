"""Shell operations abstraction for testing."""

from abc import ABC, abstractmethod


class Shell(ABC):
    """Abstract shell environment operations for dependency injection."""

    @abstractmethod
    def get_installed_tool_path(self, tool_name: str) -> str | None:
        """Resolve a command on the search path.

        Args:
            tool_name: Command name (e.g., "zsh", "brew")

        Returns:
            Absolute path to the executable, or None if not resolvable
        """
        ...

    @abstractmethod
    def get_login_shell(self) -> str | None:
        """Return the configured login shell path ($SHELL), or None if unset."""
        ...

    @abstractmethod
    def run_quietly(self, cmd: list[str]) -> bool:
        """Run a command with its output suppressed.

        Returns:
            True if the command succeeded
        """
        ...
