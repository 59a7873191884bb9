"""Fake PackageManager implementation for testing."""

from pathlib import Path

from zsh_setup.gateway.package_manager.abc import PackageManager, PackageManagerKind
from zsh_setup.gateway.shell.fake import FakeShell


class FakePackageManager(PackageManager):
    """Records refresh/install calls and optionally makes tools resolvable.

    Successful installs of a package listed in ``provides`` register the
    corresponding tool on the given FakeShell, so a subsequent lookup
    finds it, matching what a real install does to PATH.
    """

    def __init__(
        self,
        *,
        kind: PackageManagerKind,
        shell: FakeShell | None = None,
        provides: dict[str, tuple[str, str]] | None = None,
        failing_packages: set[str] | None = None,
        refresh_fails: bool = False,
        prefixes: dict[str, Path] | None = None,
    ) -> None:
        """Create FakePackageManager.

        Args:
            kind: Which package manager to impersonate
            shell: FakeShell updated when an install succeeds
            provides: Mapping of package name to (tool name, tool path)
            failing_packages: Packages whose install() reports failure
            refresh_fails: Whether refresh_index() reports failure
            prefixes: Install prefixes returned by package_prefix()
        """
        self._kind = kind
        self._shell = shell
        self._provides = provides if provides is not None else {}
        self._failing_packages = failing_packages if failing_packages is not None else set()
        self._refresh_fails = refresh_fails
        self._prefixes = prefixes if prefixes is not None else {}
        self._refresh_count = 0
        self._installed: list[str] = []

    @property
    def kind(self) -> PackageManagerKind:
        return self._kind

    @property
    def requires_index_refresh(self) -> bool:
        return self._kind == "apt"

    def refresh_index(self) -> bool:
        self._refresh_count += 1
        return not self._refresh_fails

    def install(self, package: str) -> bool:
        self._installed.append(package)
        if package in self._failing_packages:
            return False
        if self._shell is not None and package in self._provides:
            tool, path = self._provides[package]
            self._shell.register_installed_tool(tool, path)
        return True

    def package_prefix(self, package: str) -> Path | None:
        return self._prefixes.get(package)

    @property
    def refresh_count(self) -> int:
        return self._refresh_count

    @property
    def installed_packages(self) -> list[str]:
        return list(self._installed)
