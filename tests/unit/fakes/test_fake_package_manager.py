"""Unit tests for FakePackageManager.

These tests verify the fake behaves like a real package manager from the
provisioner's point of view.
"""

from pathlib import Path

from zsh_setup.gateway.package_manager.fake import FakePackageManager
from zsh_setup.gateway.shell.fake import FakeShell


class TestFakePackageManager:
    def test_install_makes_provided_tool_resolvable(self) -> None:
        shell = FakeShell()
        manager = FakePackageManager(
            kind="apt", shell=shell, provides={"fd-find": ("fdfind", "/usr/bin/fdfind")}
        )

        assert manager.install("fd-find") is True

        assert shell.get_installed_tool_path("fdfind") == "/usr/bin/fdfind"

    def test_failing_package_does_not_register_tool(self) -> None:
        shell = FakeShell()
        manager = FakePackageManager(
            kind="brew", shell=shell, provides={"zsh": ("zsh", "/bin/zsh")}, failing_packages={"zsh"}
        )

        assert manager.install("zsh") is False

        assert shell.get_installed_tool_path("zsh") is None
        assert manager.installed_packages == ["zsh"]

    def test_refresh_counting(self) -> None:
        manager = FakePackageManager(kind="apt")

        manager.refresh_index()
        manager.refresh_index()

        assert manager.refresh_count == 2

    def test_only_apt_requires_refresh(self) -> None:
        assert FakePackageManager(kind="apt").requires_index_refresh is True
        assert FakePackageManager(kind="brew").requires_index_refresh is False

    def test_prefixes(self) -> None:
        manager = FakePackageManager(kind="brew", prefixes={"fzf": Path("/opt/homebrew/opt/fzf")})

        assert manager.package_prefix("fzf") == Path("/opt/homebrew/opt/fzf")
        assert manager.package_prefix("zsh") is None
