"""Application context with dependency injection."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import cache
from pathlib import Path

from zsh_setup.core.config import SetupConfig, default_config_path, load_config
from zsh_setup.gateway.console.abc import Console
from zsh_setup.gateway.console.real import InteractiveConsole
from zsh_setup.gateway.framework_installer.abc import FrameworkInstaller
from zsh_setup.gateway.framework_installer.dry_run import DryRunFrameworkInstaller
from zsh_setup.gateway.framework_installer.real import RealFrameworkInstaller
from zsh_setup.gateway.login_shell.abc import LoginShellChanger
from zsh_setup.gateway.login_shell.dry_run import DryRunLoginShellChanger
from zsh_setup.gateway.login_shell.real import RealLoginShellChanger
from zsh_setup.gateway.package_manager.abc import PackageManager, PackageManagerKind
from zsh_setup.gateway.package_manager.dry_run import DryRunPackageManager
from zsh_setup.gateway.package_manager.real import AptPackageManager, BrewPackageManager
from zsh_setup.gateway.platform_info.abc import PlatformInfo
from zsh_setup.gateway.platform_info.real import RealPlatformInfo
from zsh_setup.gateway.repo_cloner.abc import RepositoryCloner
from zsh_setup.gateway.repo_cloner.dry_run import DryRunRepositoryCloner
from zsh_setup.gateway.repo_cloner.real import RealRepositoryCloner
from zsh_setup.gateway.shell.abc import Shell
from zsh_setup.gateway.shell.real import RealShell
from zsh_setup.gateway.time.abc import Time
from zsh_setup.gateway.time.real import RealTime

STARTUP_ASSET_NAME = "zshrc"


@cache
def bundled_dotfiles_dir() -> Path:
    """Return the dotfiles directory shipped next to the package code."""
    return Path(__file__).parent.parent / "dotfiles"


@dataclass(frozen=True)
class SetupContext:
    """Immutable context holding all dependencies for a provisioning run.

    Created at the CLI entry point and threaded through every step.
    Per-run mutable state lives in ProvisioningState, not here.
    """

    console: Console
    shell: Shell
    platform_info: PlatformInfo
    package_managers: Mapping[PackageManagerKind, PackageManager]
    repo_cloner: RepositoryCloner
    framework_installer: FrameworkInstaller
    login_shell: LoginShellChanger
    time: Time
    home: Path
    dotfiles_dir: Path
    config: SetupConfig
    env: Mapping[str, str] = field(default_factory=dict)
    dry_run: bool = False

    @property
    def framework_dir(self) -> Path:
        if self.config.framework_dir is not None:
            return self.config.framework_dir
        return self.home / ".oh-my-zsh"

    @property
    def custom_dir(self) -> Path:
        """Framework custom directory, honouring $ZSH_CUSTOM."""
        override = self.env.get("ZSH_CUSTOM")
        if override:
            return Path(override).expanduser()
        return self.framework_dir / "custom"

    @property
    def plugins_dir(self) -> Path:
        return self.custom_dir / "plugins"

    @property
    def zshrc_path(self) -> Path:
        return self.home / ".zshrc"

    @property
    def startup_asset(self) -> Path:
        return self.dotfiles_dir / STARTUP_ASSET_NAME

    @staticmethod
    def for_test(
        console: Console | None = None,
        shell: Shell | None = None,
        platform_info: PlatformInfo | None = None,
        package_managers: Mapping[PackageManagerKind, PackageManager] | None = None,
        repo_cloner: RepositoryCloner | None = None,
        framework_installer: FrameworkInstaller | None = None,
        login_shell: LoginShellChanger | None = None,
        time: Time | None = None,
        home: Path | None = None,
        dotfiles_dir: Path | None = None,
        config: SetupConfig | None = None,
        env: Mapping[str, str] | None = None,
        dry_run: bool = False,
    ) -> "SetupContext":
        """Create a context with fakes for every dependency not supplied.

        Example:
            >>> ctx = SetupContext.for_test(home=tmp_path, shell=FakeShell(installed_tools={...}))
        """
        from zsh_setup.gateway.console.fake import FakeConsole
        from zsh_setup.gateway.framework_installer.fake import FakeFrameworkInstaller
        from zsh_setup.gateway.login_shell.fake import FakeLoginShellChanger
        from zsh_setup.gateway.platform_info.fake import FakePlatformInfo
        from zsh_setup.gateway.repo_cloner.fake import FakeRepositoryCloner
        from zsh_setup.gateway.shell.fake import FakeShell
        from zsh_setup.gateway.time.fake import FakeTime

        resolved_home = home if home is not None else Path("/test/home")
        return SetupContext(
            console=console or FakeConsole(),
            shell=shell or FakeShell(),
            platform_info=platform_info or FakePlatformInfo(kernel_name="Linux"),
            package_managers=package_managers if package_managers is not None else {},
            repo_cloner=repo_cloner or FakeRepositoryCloner(),
            framework_installer=framework_installer or FakeFrameworkInstaller(),
            login_shell=login_shell or FakeLoginShellChanger(),
            time=time or FakeTime(),
            home=resolved_home,
            dotfiles_dir=dotfiles_dir if dotfiles_dir is not None else bundled_dotfiles_dir(),
            config=config or SetupConfig(),
            env=env if env is not None else {},
            dry_run=dry_run,
        )


def create_context(*, dry_run: bool, dotfiles_dir: Path | None = None) -> SetupContext:
    """Create production context with real implementations.

    Args:
        dry_run: If True, wrap every mutating gateway with a dry-run wrapper
            that prints intended actions without executing them
        dotfiles_dir: Directory holding the startup file asset; defaults to the
            bundled dotfiles directory

    Raises:
        ConfigError: If the user config file is malformed
    """
    home = Path.home()
    env = dict(os.environ)
    config = load_config(default_config_path(home=home, env=env), home=home)

    console: Console = InteractiveConsole()
    package_managers: dict[PackageManagerKind, PackageManager] = {
        "brew": BrewPackageManager(),
        "apt": AptPackageManager(),
    }
    repo_cloner: RepositoryCloner = RealRepositoryCloner()
    framework_installer: FrameworkInstaller = RealFrameworkInstaller()
    login_shell: LoginShellChanger = RealLoginShellChanger()

    if dry_run:
        package_managers = {
            kind: DryRunPackageManager(manager, console) for kind, manager in package_managers.items()
        }
        repo_cloner = DryRunRepositoryCloner(repo_cloner, console)
        framework_installer = DryRunFrameworkInstaller(framework_installer, console)
        login_shell = DryRunLoginShellChanger(login_shell, console)

    return SetupContext(
        console=console,
        shell=RealShell(),
        platform_info=RealPlatformInfo(),
        package_managers=package_managers,
        repo_cloner=repo_cloner,
        framework_installer=framework_installer,
        login_shell=login_shell,
        time=RealTime(),
        home=home,
        dotfiles_dir=(dotfiles_dir or bundled_dotfiles_dir()).resolve(),
        config=config,
        env=env,
        dry_run=dry_run,
    )
