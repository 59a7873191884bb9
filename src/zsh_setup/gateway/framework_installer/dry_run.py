from pathlib import Path

from zsh_setup.gateway.console.abc import Console
from zsh_setup.gateway.framework_installer.abc import FrameworkInstaller


class DryRunFrameworkInstaller(FrameworkInstaller):
    def __init__(self, wrapped: FrameworkInstaller, console: Console) -> None:
        self._wrapped = wrapped
        self._console = console

    def install(self, target: Path) -> None:
        self._console.echo(f"[DRY RUN] Would install Oh My Zsh into {target}")
