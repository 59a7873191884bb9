"""Offer to make the target shell the user's login shell."""

from pathlib import PurePath

from zsh_setup.core.context import SetupContext
from zsh_setup.core.steps import ProvisioningState, StepResult


def current_shell_name(ctx: SetupContext) -> str:
    """Basename of $SHELL, or "unknown" when it is unset."""
    login_shell = ctx.shell.get_login_shell()
    if login_shell is None:
        return "unknown"
    return PurePath(login_shell).name


def manual_change_command(target: str) -> str:
    return f"chsh -s $(which {target})"


def maybe_change_shell(ctx: SetupContext, state: ProvisioningState) -> StepResult:
    """Prompt to change the login shell when it is not already the target shell."""
    target = ctx.config.target_shell
    ctx.console.info("Checking current shell...")
    current = current_shell_name(ctx)

    if current == target:
        ctx.console.success(f"Your default shell is already {target}")
        return StepResult(status="success", message=f"login shell is {target}")

    ctx.console.warning(f"Your current shell is {current}, not {target}")
    ctx.console.echo()
    accepted = ctx.console.confirm(f"Would you like to change your default shell to {target}?", default=False)
    if not accepted:
        ctx.console.info(f"Keeping current shell: {current}")
        ctx.console.info(
            f"You can manually change your shell later by running: {manual_change_command(target)}"
        )
        state.shell_change_deferred = True
        return StepResult(status="skipped", message="login shell change declined")

    shell_path = ctx.shell.get_installed_tool_path(target)
    if shell_path is None:
        ctx.console.warning(f"Could not find {target} on PATH; leaving your shell unchanged")
        state.shell_change_deferred = True
        return StepResult(status="warning", message=f"{target} not found on PATH")

    if shell_path not in ctx.login_shell.registered_shells():
        ctx.console.info(f"Adding {shell_path} to /etc/shells (requires sudo)...")
        if not ctx.login_shell.register_shell(shell_path):
            ctx.console.warning(f"Could not add {shell_path} to /etc/shells")
            state.shell_change_deferred = True
            return StepResult(status="warning", message="shell registry not updated")

    ctx.console.info(f"Changing default shell to {target} (requires password)...")
    if not ctx.login_shell.change_login_shell(shell_path):
        ctx.console.warning(f"chsh failed. Run it yourself later: {manual_change_command(target)}")
        state.shell_change_deferred = True
        return StepResult(status="warning", message="login shell change failed")

    ctx.console.success(f"Default shell changed to {target}")
    ctx.console.warning("You'll need to log out and log back in for the change to take effect")
    return StepResult(status="success", message=f"login shell changed to {shell_path}")
