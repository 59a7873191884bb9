"""Fake Console implementation for testing.

FakeConsole records every message and prompt and answers prompts from a
constructor-supplied list, so tests never touch a real terminal.
"""

from zsh_setup.gateway.console.abc import Console, Severity


class FakeConsole(Console):
    """In-memory console with canned confirmation answers.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, confirm_responses: list[bool] | None = None) -> None:
        """Create FakeConsole.

        Args:
            confirm_responses: Answers returned by successive confirm() calls.
                Once exhausted, confirm() returns the prompt's default.
        """
        self._confirm_responses = list(confirm_responses) if confirm_responses else []
        self._messages: list[tuple[Severity, str]] = []
        self._lines: list[str] = []
        self._prompts: list[str] = []

    def message(self, severity: Severity, text: str) -> None:
        self._messages.append((severity, text))

    def echo(self, text: str = "") -> None:
        self._lines.append(text)

    def confirm(self, prompt: str, *, default: bool) -> bool:
        self._prompts.append(prompt)
        if self._confirm_responses:
            return self._confirm_responses.pop(0)
        return default

    @property
    def messages(self) -> list[tuple[Severity, str]]:
        return list(self._messages)

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def prompts(self) -> list[str]:
        return list(self._prompts)

    def texts(self, severity: Severity) -> list[str]:
        """Return message texts recorded at the given severity, in order."""
        return [text for sev, text in self._messages if sev == severity]

    @property
    def warnings(self) -> list[str]:
        return self.texts("warning")

    @property
    def errors(self) -> list[str]:
        return self.texts("error")

    @property
    def output(self) -> str:
        """All tagged messages and plain lines joined, for substring assertions."""
        tagged = [f"[{sev.upper()}] {text}" for sev, text in self._messages]
        return "\n".join([*tagged, *self._lines])
