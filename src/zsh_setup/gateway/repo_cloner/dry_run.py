"""No-op repository cloner for dry-run mode."""

from pathlib import Path

from zsh_setup.gateway.console.abc import Console
from zsh_setup.gateway.repo_cloner.abc import RepositoryCloner


class DryRunRepositoryCloner(RepositoryCloner):
    def __init__(self, wrapped: RepositoryCloner, console: Console) -> None:
        self._wrapped = wrapped
        self._console = console

    def clone(self, *, url: str, target: Path) -> None:
        self._console.echo(f"[DRY RUN] Would clone {url} into {target}")
