"""Platform package managers (Homebrew, apt)."""

from zsh_setup.gateway.package_manager.abc import PackageManager as PackageManager
from zsh_setup.gateway.package_manager.abc import PackageManagerKind as PackageManagerKind
from zsh_setup.gateway.package_manager.dry_run import DryRunPackageManager as DryRunPackageManager
from zsh_setup.gateway.package_manager.fake import FakePackageManager as FakePackageManager
from zsh_setup.gateway.package_manager.real import AptPackageManager as AptPackageManager
from zsh_setup.gateway.package_manager.real import BrewPackageManager as BrewPackageManager
