"""Ensure required commands are resolvable, installing them when possible."""

import logging

from zsh_setup.core.catalog import REQUIRED_PREREQUISITES, Prerequisite
from zsh_setup.core.context import SetupContext
from zsh_setup.core.steps import ProvisioningState, StepResult

logger = logging.getLogger(__name__)


def _manual_install_result(command: str, reason: str) -> StepResult:
    return StepResult(
        status="fatal",
        message=f"{command} {reason}. Please install it manually and re-run zsh-setup.",
    )


def ensure_command(ctx: SetupContext, state: ProvisioningState, prerequisite: Prerequisite) -> StepResult:
    """Guarantee a command resolves on PATH, or report a fatal result.

    Installs through the profile's package manager when the command is
    missing and re-checks exactly once afterwards. With apt the package
    index is refreshed before the first install of the run only.
    """
    command = prerequisite.command
    existing = ctx.shell.get_installed_tool_path(command)
    if existing is not None:
        ctx.console.success(f"{command} is installed: {existing}")
        return StepResult(status="success", message=f"{command} already installed")

    kind = state.profile.package_manager if state.profile is not None else None
    manager = ctx.package_managers.get(kind) if kind is not None else None
    if manager is None:
        return _manual_install_result(command, "is not installed and cannot be installed automatically")

    if manager.kind == "brew":
        package = prerequisite.brew_package_name
        ctx.console.info(f"Installing {package} via Homebrew...")
    else:
        package = prerequisite.apt_package_name
        if manager.requires_index_refresh and not state.apt_index_refreshed:
            ctx.console.info("Updating apt package index (requires sudo)...")
            if not manager.refresh_index():
                ctx.console.warning("apt-get update failed; trying the install anyway")
            state.apt_index_refreshed = True
        ctx.console.info(f"Installing {package} via apt (requires sudo)...")

    if not manager.install(package):
        logger.debug("%s install of %s reported failure", manager.kind, package)

    if ctx.dry_run:
        return StepResult(status="success", message=f"{command} would be installed via {manager.kind}")

    installed = ctx.shell.get_installed_tool_path(command)
    if installed is None:
        return _manual_install_result(command, "could not be installed")

    ctx.console.success(f"{command} installed successfully: {installed}")
    return StepResult(status="success", message=f"{command} installed via {manager.kind}")


def ensure_prerequisites(ctx: SetupContext, state: ProvisioningState) -> StepResult:
    """Ensure zsh, git and curl, stopping at the first one that cannot be provided."""
    ctx.console.info("Checking prerequisites...")
    for prerequisite in REQUIRED_PREREQUISITES:
        result = ensure_command(ctx, state, prerequisite)
        if result.is_fatal:
            return result
    names = ", ".join(p.command for p in REQUIRED_PREREQUISITES)
    return StepResult(status="success", message=f"{names} available")
