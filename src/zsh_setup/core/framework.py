"""Install the shell framework and its plugins.

Presence of a directory is the only completion signal: nothing is updated in
place and nothing is version pinned.
"""

import logging

from zsh_setup.core.backup import backup_path_for
from zsh_setup.core.catalog import FRAMEWORK_NAME
from zsh_setup.core.context import SetupContext
from zsh_setup.core.steps import ProvisioningState, StepResult

logger = logging.getLogger(__name__)


def install_framework(ctx: SetupContext, state: ProvisioningState) -> StepResult:
    """Install the framework, offering a backed-up reinstall when it already exists."""
    framework_dir = ctx.framework_dir
    ctx.console.info(f"Checking for existing {FRAMEWORK_NAME} installation...")

    if framework_dir.is_dir():
        ctx.console.warning(f"{FRAMEWORK_NAME} is already installed at {framework_dir}")
        reinstall = ctx.console.confirm(
            f"Do you want to reinstall {FRAMEWORK_NAME}? This will backup the existing installation.",
            default=False,
        )
        if not reinstall:
            ctx.console.info(f"Skipping {FRAMEWORK_NAME} installation")
            state.installed.append(f"{FRAMEWORK_NAME} framework (existing)")
            return StepResult(status="skipped", message=f"{FRAMEWORK_NAME} already installed")

        backup_dir = backup_path_for(framework_dir, ctx.time.now())
        ctx.console.info(f"Backing up existing {FRAMEWORK_NAME} installation...")
        if ctx.dry_run:
            ctx.console.echo(f"[DRY RUN] Would move {framework_dir} to {backup_dir}")
        else:
            try:
                framework_dir.rename(backup_dir)
            except OSError as e:
                return StepResult(status="fatal", message=f"Could not back up {framework_dir}: {e}")
        ctx.console.success(f"Backup created at {backup_dir}")

    ctx.console.info(f"Installing {FRAMEWORK_NAME}...")
    try:
        ctx.framework_installer.install(framework_dir)
    except RuntimeError as e:
        return StepResult(status="fatal", message=str(e))

    ctx.console.success(f"{FRAMEWORK_NAME} installed successfully")
    state.installed.append(f"{FRAMEWORK_NAME} framework")
    return StepResult(status="success", message=f"{FRAMEWORK_NAME} installed at {framework_dir}")


def install_plugins(ctx: SetupContext, state: ProvisioningState) -> StepResult:
    """Clone every configured plugin whose directory does not exist yet."""
    ctx.console.info(f"Installing {FRAMEWORK_NAME} plugins...")
    plugins_dir = ctx.plugins_dir
    logger.debug("Plugins directory: %s", plugins_dir)

    cloned: list[str] = []
    for plugin in ctx.config.plugins:
        target = plugins_dir / plugin.name
        label = f"{plugin.name} plugin"
        if plugin.description:
            label += f" ({plugin.description})"

        if target.is_dir():
            ctx.console.warning(f"{plugin.name} already installed, skipping")
            state.installed.append(label)
            continue

        ctx.console.info(f"Installing {plugin.name}...")
        try:
            ctx.repo_cloner.clone(url=plugin.url, target=target)
        except RuntimeError as e:
            return StepResult(status="fatal", message=str(e))
        ctx.console.success(f"{plugin.name} installed")
        state.installed.append(label)
        cloned.append(plugin.name)

    if not cloned:
        return StepResult(status="skipped", message="all plugins already installed")
    return StepResult(status="success", message=f"cloned {', '.join(cloned)}")
