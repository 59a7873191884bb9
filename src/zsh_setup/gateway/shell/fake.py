"""Fake Shell implementation for testing."""

from zsh_setup.gateway.shell.abc import Shell


class FakeShell(Shell):
    """In-memory shell with a configurable set of resolvable tools.

    Installed tools can change during a run: fake package managers call
    register_installed_tool() to simulate a package install making a
    command resolvable.
    """

    def __init__(
        self,
        *,
        installed_tools: dict[str, str] | None = None,
        login_shell: str | None = None,
        failing_commands: set[str] | None = None,
    ) -> None:
        """Create FakeShell.

        Args:
            installed_tools: Mapping of tool name to resolved path
            login_shell: Value reported as $SHELL
            failing_commands: Executable paths/names whose run_quietly() fails
        """
        self._installed_tools = dict(installed_tools) if installed_tools else {}
        self._login_shell = login_shell
        self._failing_commands = failing_commands if failing_commands is not None else set()
        self._run_calls: list[list[str]] = []
        self._lookups: list[str] = []

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        self._lookups.append(tool_name)
        return self._installed_tools.get(tool_name)

    def get_login_shell(self) -> str | None:
        return self._login_shell

    def run_quietly(self, cmd: list[str]) -> bool:
        self._run_calls.append(list(cmd))
        return cmd[0] not in self._failing_commands

    def register_installed_tool(self, tool_name: str, path: str) -> None:
        """Make a tool resolvable from now on (simulates a package install)."""
        self._installed_tools[tool_name] = path

    @property
    def run_calls(self) -> list[list[str]]:
        return [list(call) for call in self._run_calls]

    @property
    def lookups(self) -> list[str]:
        return list(self._lookups)
