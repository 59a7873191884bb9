"""Bootstrap installer of the Oh My Zsh framework."""

from zsh_setup.gateway.framework_installer.abc import FrameworkInstaller as FrameworkInstaller
from zsh_setup.gateway.framework_installer.dry_run import (
    DryRunFrameworkInstaller as DryRunFrameworkInstaller,
)
from zsh_setup.gateway.framework_installer.fake import FakeFrameworkInstaller as FakeFrameworkInstaller
from zsh_setup.gateway.framework_installer.real import (
    OH_MY_ZSH_INSTALL_URL as OH_MY_ZSH_INSTALL_URL,
)
from zsh_setup.gateway.framework_installer.real import (
    RealFrameworkInstaller as RealFrameworkInstaller,
)
