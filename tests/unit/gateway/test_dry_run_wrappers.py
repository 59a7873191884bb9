"""Dry-run wrappers print intended mutations and never call the wrapped gateway."""

from pathlib import Path

from zsh_setup.gateway.console.fake import FakeConsole
from zsh_setup.gateway.framework_installer.dry_run import DryRunFrameworkInstaller
from zsh_setup.gateway.framework_installer.fake import FakeFrameworkInstaller
from zsh_setup.gateway.login_shell.dry_run import DryRunLoginShellChanger
from zsh_setup.gateway.login_shell.fake import FakeLoginShellChanger
from zsh_setup.gateway.package_manager.dry_run import DryRunPackageManager
from zsh_setup.gateway.package_manager.fake import FakePackageManager
from zsh_setup.gateway.repo_cloner.dry_run import DryRunRepositoryCloner
from zsh_setup.gateway.repo_cloner.fake import FakeRepositoryCloner


def test_package_manager_dry_run() -> None:
    console = FakeConsole()
    wrapped = FakePackageManager(kind="apt", prefixes={"fzf": Path("/opt/fzf")})
    manager = DryRunPackageManager(wrapped, console)

    assert manager.refresh_index() is True
    assert manager.install("zsh") is True
    assert manager.package_prefix("fzf") == Path("/opt/fzf")

    assert wrapped.refresh_count == 0
    assert wrapped.installed_packages == []
    assert console.lines == [
        "[DRY RUN] Would refresh the apt package index",
        "[DRY RUN] Would install zsh via apt",
    ]


def test_cloner_dry_run(tmp_path: Path) -> None:
    wrapped = FakeRepositoryCloner()
    cloner = DryRunRepositoryCloner(wrapped, FakeConsole())

    cloner.clone(url="https://example.com/p.git", target=tmp_path / "p")

    assert wrapped.clone_calls == []
    assert not (tmp_path / "p").exists()


def test_framework_installer_dry_run(tmp_path: Path) -> None:
    wrapped = FakeFrameworkInstaller()
    DryRunFrameworkInstaller(wrapped, FakeConsole()).install(tmp_path / ".oh-my-zsh")

    assert wrapped.install_calls == []


def test_login_shell_dry_run_reads_pass_through() -> None:
    wrapped = FakeLoginShellChanger(registered_shells=["/bin/bash"])
    changer = DryRunLoginShellChanger(wrapped, FakeConsole())

    assert changer.registered_shells() == ["/bin/bash"]
    assert changer.register_shell("/bin/zsh") is True
    assert changer.change_login_shell("/bin/zsh") is True
    assert wrapped.register_calls == []
    assert wrapped.change_calls == []
