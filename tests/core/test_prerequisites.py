"""Tests for ensuring prerequisite commands."""

from tests.test_utils.context_builders import apt_provides, state_for
from zsh_setup.core.catalog import Prerequisite
from zsh_setup.core.context import SetupContext
from zsh_setup.core.prerequisites import ensure_command, ensure_prerequisites
from zsh_setup.gateway.console.fake import FakeConsole
from zsh_setup.gateway.package_manager.fake import FakePackageManager
from zsh_setup.gateway.shell.fake import FakeShell


def _context(shell: FakeShell, manager: FakePackageManager | None) -> tuple[SetupContext, FakeConsole]:
    console = FakeConsole()
    managers = {manager.kind: manager} if manager is not None else {}
    ctx = SetupContext.for_test(console=console, shell=shell, package_managers=managers)
    return ctx, console


def test_present_command_is_a_no_op() -> None:
    shell = FakeShell(installed_tools={"zsh": "/bin/zsh"})
    apt = FakePackageManager(kind="apt", shell=shell)
    ctx, console = _context(shell, apt)
    state = state_for("apt")

    result = ensure_command(ctx, state, Prerequisite("zsh"))

    assert result.status == "success"
    assert apt.refresh_count == 0
    assert apt.installed_packages == []
    assert state.apt_index_refreshed is False
    assert "zsh is installed: /bin/zsh" in console.texts("success")


def test_apt_refreshes_index_once_for_several_missing_commands() -> None:
    shell = FakeShell(installed_tools={})
    apt = FakePackageManager(kind="apt", shell=shell, provides=apt_provides("zsh", "git", "curl"))
    ctx, _ = _context(shell, apt)
    state = state_for("apt")

    result = ensure_prerequisites(ctx, state)

    assert result.status == "success"
    assert apt.refresh_count == 1
    assert apt.installed_packages == ["zsh", "git", "curl"]
    assert state.apt_index_refreshed is True


def test_apt_refresh_flag_persists_across_calls() -> None:
    shell = FakeShell(installed_tools={})
    apt = FakePackageManager(kind="apt", shell=shell, provides=apt_provides("git", "fzf"))
    ctx, _ = _context(shell, apt)
    state = state_for("apt")

    ensure_command(ctx, state, Prerequisite("git"))
    ensure_command(ctx, state, Prerequisite("fzf"))

    assert apt.refresh_count == 1
    assert apt.installed_packages == ["git", "fzf"]


def test_failed_refresh_still_attempts_install() -> None:
    shell = FakeShell(installed_tools={})
    apt = FakePackageManager(kind="apt", shell=shell, provides=apt_provides("git"), refresh_fails=True)
    ctx, console = _context(shell, apt)
    state = state_for("apt")

    result = ensure_command(ctx, state, Prerequisite("git"))

    assert result.status == "success"
    assert apt.installed_packages == ["git"]
    assert state.apt_index_refreshed is True
    assert any("apt-get update failed" in w for w in console.warnings)


def test_brew_installs_without_refresh() -> None:
    shell = FakeShell(installed_tools={})
    brew = FakePackageManager(kind="brew", shell=shell, provides={"zsh": ("zsh", "/opt/homebrew/bin/zsh")})
    ctx, console = _context(shell, brew)

    result = ensure_command(ctx, state_for("brew"), Prerequisite("zsh"))

    assert result.status == "success"
    assert brew.refresh_count == 0
    assert brew.installed_packages == ["zsh"]
    assert "zsh installed successfully: /opt/homebrew/bin/zsh" in console.texts("success")


def test_package_names_follow_the_package_manager() -> None:
    prerequisite = Prerequisite("fd", brew_package="fd", apt_package="fd-find")
    shell = FakeShell(installed_tools={})
    apt = FakePackageManager(kind="apt", shell=shell, provides={"fd-find": ("fd", "/usr/bin/fd")})
    ctx, _ = _context(shell, apt)

    result = ensure_command(ctx, state_for("apt"), prerequisite)

    assert result.status == "success"
    assert apt.installed_packages == ["fd-find"]


def test_no_package_manager_is_fatal() -> None:
    shell = FakeShell(installed_tools={})
    ctx, _ = _context(shell, None)

    result = ensure_command(ctx, state_for(None), Prerequisite("zsh"))

    assert result.is_fatal
    assert "cannot be installed automatically" in result.message


def test_install_that_leaves_command_missing_is_fatal() -> None:
    shell = FakeShell(installed_tools={})
    # Install "succeeds" but nothing becomes resolvable
    apt = FakePackageManager(kind="apt", shell=shell)
    ctx, _ = _context(shell, apt)

    result = ensure_command(ctx, state_for("apt"), Prerequisite("zsh"))

    assert result.is_fatal
    assert "could not be installed" in result.message
    # Re-checked once, never retried
    assert apt.installed_packages == ["zsh"]


def test_failed_install_is_fatal() -> None:
    shell = FakeShell(installed_tools={})
    apt = FakePackageManager(kind="apt", shell=shell, provides=apt_provides("zsh"), failing_packages={"zsh"})
    ctx, _ = _context(shell, apt)

    result = ensure_command(ctx, state_for("apt"), Prerequisite("zsh"))

    assert result.is_fatal


def test_prerequisites_stop_at_first_fatal() -> None:
    shell = FakeShell(installed_tools={"zsh": "/bin/zsh"})
    ctx, _ = _context(shell, None)

    result = ensure_prerequisites(ctx, state_for(None))

    assert result.is_fatal
    assert result.message.startswith("git ")
    # curl was never looked up
    assert shell.lookups == ["zsh", "git"]


def test_dry_run_reports_without_rechecking() -> None:
    shell = FakeShell(installed_tools={})
    apt = FakePackageManager(kind="apt", shell=shell)
    console = FakeConsole()
    ctx = SetupContext.for_test(console=console, shell=shell, package_managers={"apt": apt}, dry_run=True)

    result = ensure_command(ctx, state_for("apt"), Prerequisite("zsh"))

    assert result.status == "success"
    assert "would be installed" in result.message
