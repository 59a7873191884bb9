from zsh_setup.gateway.console.abc import Console
from zsh_setup.gateway.login_shell.abc import LoginShellChanger


class DryRunLoginShellChanger(LoginShellChanger):
    """Prints privileged shell changes instead of running them; reads pass through."""

    def __init__(self, wrapped: LoginShellChanger, console: Console) -> None:
        self._wrapped = wrapped
        self._console = console

    def registered_shells(self) -> list[str]:
        return self._wrapped.registered_shells()

    def register_shell(self, shell_path: str) -> bool:
        self._console.echo(f"[DRY RUN] Would append {shell_path} to /etc/shells")
        return True

    def change_login_shell(self, shell_path: str) -> bool:
        self._console.echo(f"[DRY RUN] Would run: chsh -s {shell_path}")
        return True
