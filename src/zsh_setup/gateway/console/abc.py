"""Console abstraction for user-facing output and prompts.

Every message the provisioner shows the user goes through a Console so tests
can assert on severity and text without capturing the terminal, and so
prompts can be answered with canned responses.
"""

from abc import ABC, abstractmethod
from typing import Literal

Severity = Literal["info", "success", "warning", "error"]


class Console(ABC):
    """Abstract console for dependency injection."""

    @abstractmethod
    def message(self, severity: Severity, text: str) -> None:
        """Print a message tagged with its severity (e.g. "[WARNING] ...")."""
        ...

    @abstractmethod
    def echo(self, text: str = "") -> None:
        """Print an untagged line (banners, summary bullets)."""
        ...

    @abstractmethod
    def confirm(self, prompt: str, *, default: bool) -> bool:
        """Ask a yes/no question answered with a single keypress.

        Args:
            prompt: Question text, without the "(y/N)" suffix
            default: Answer used when the user presses anything other than y/n,
                or when no interactive terminal is attached

        Returns:
            True if the user accepted
        """
        ...

    def info(self, text: str) -> None:
        self.message("info", text)

    def success(self, text: str) -> None:
        self.message("success", text)

    def warning(self, text: str) -> None:
        self.message("warning", text)

    def error(self, text: str) -> None:
        self.message("error", text)
