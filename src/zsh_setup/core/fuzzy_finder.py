"""Install the optional fuzzy finder and wire up its shell integration."""

import os

from zsh_setup.core.catalog import FUZZY_FINDER
from zsh_setup.core.context import SetupContext
from zsh_setup.core.prerequisites import ensure_command
from zsh_setup.core.steps import ProvisioningState, StepResult

FZF_INSTALL_ARGS = ("--key-bindings", "--completion", "--no-update-rc")


def _run_homebrew_integration(ctx: SetupContext) -> StepResult | None:
    """Run fzf's own install script from its Homebrew prefix.

    Returns:
        None when there is no executable install script to run, otherwise
        the outcome of running it
    """
    manager = ctx.package_managers.get("brew")
    if manager is None:
        return None
    prefix = manager.package_prefix(FUZZY_FINDER.command)
    if prefix is None:
        return None
    script = prefix / "install"
    if not script.is_file() or not os.access(script, os.X_OK):
        return None

    ctx.console.info("Running fzf install script to set up key bindings and completion...")
    if ctx.dry_run:
        ctx.console.echo(f"[DRY RUN] Would run: {script} {' '.join(FZF_INSTALL_ARGS)}")
        return StepResult(status="success", message="fzf shell integration would be installed")
    if not ctx.shell.run_quietly([str(script), *FZF_INSTALL_ARGS]):
        ctx.console.warning("fzf install script failed; key bindings and completion were not set up")
        return StepResult(status="warning", message="fzf shell integration failed")
    ctx.console.success("fzf shell integrations installed")
    return StepResult(status="success", message="fzf shell integration installed")


def ensure_fuzzy_finder(ctx: SetupContext, state: ProvisioningState) -> StepResult:
    """Make fzf available when a package manager can provide it; warn otherwise."""
    command = FUZZY_FINDER.command
    ctx.console.info(f"Ensuring {command} (fuzzy finder) is installed...")
    kind = state.profile.package_manager if state.profile is not None else None

    existing = ctx.shell.get_installed_tool_path(command)
    if existing is not None:
        ctx.console.success(f"{command} is already installed: {existing}")
        result = StepResult(status="success", message=f"{command} already installed")
    elif kind in ("brew", "apt"):
        result = ensure_command(ctx, state, FUZZY_FINDER)
        if result.is_fatal:
            return result
    else:
        ctx.console.warning(f"{command} is not installed and cannot be installed automatically.")
        ctx.console.warning(f"Install {command} manually to enable fuzzy finder shortcuts used in .zshrc.")
        return StepResult(status="warning", message=f"{command} not installed")

    integration = _run_homebrew_integration(ctx) if kind == "brew" else None
    if integration is not None and integration.status == "success":
        state.installed.append(f"{command} fuzzy finder (plus shell key bindings/completion)")
        return result
    state.installed.append(f"{command} fuzzy finder")
    if integration is not None:
        return integration
    return result
