"""No-op package manager for dry-run mode."""

from pathlib import Path

from zsh_setup.gateway.console.abc import Console
from zsh_setup.gateway.package_manager.abc import PackageManager, PackageManagerKind


class DryRunPackageManager(PackageManager):
    """Wrapper that prints intended package operations instead of running them.

    Read-only queries (package_prefix) are delegated to the wrapped implementation.
    """

    def __init__(self, wrapped: PackageManager, console: Console) -> None:
        self._wrapped = wrapped
        self._console = console

    @property
    def kind(self) -> PackageManagerKind:
        return self._wrapped.kind

    @property
    def requires_index_refresh(self) -> bool:
        return self._wrapped.requires_index_refresh

    def refresh_index(self) -> bool:
        self._console.echo(f"[DRY RUN] Would refresh the {self.kind} package index")
        return True

    def install(self, package: str) -> bool:
        self._console.echo(f"[DRY RUN] Would install {package} via {self.kind}")
        return True

    def package_prefix(self, package: str) -> Path | None:
        return self._wrapped.package_prefix(package)
