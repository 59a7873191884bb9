"""End-of-run summary."""

from zsh_setup.core.context import SetupContext
from zsh_setup.core.login_shell import manual_change_command
from zsh_setup.core.steps import ProvisioningState, StepResult

RULE = "=" * 80

NEXT_STEPS = (
    "Start a new terminal session or run: source ~/.zshrc",
    "Try typing a command - you'll see syntax highlighting!",
    "Try 'z' to jump to frequently visited directories",
    "Use 'mkcd test' to create and enter a directory",
    "Type 'extract file.zip' to extract any archive type",
    "Run 'cheat ls' to get a quick cheatsheet for any command",
)


def print_summary(ctx: SetupContext, state: ProvisioningState) -> StepResult:
    console = ctx.console
    console.echo()
    console.echo(RULE)
    console.success("Installation complete!")
    console.echo(RULE)
    console.echo()
    console.echo("What was installed:")
    for item in state.installed:
        console.echo(f"  ✓ {item}")
    console.echo()
    console.echo("Next steps:")
    for number, step in enumerate(NEXT_STEPS, start=1):
        console.echo(f"  {number}. {step}")
    console.echo()
    if state.shell_change_deferred:
        target = ctx.config.target_shell
        console.warning(f"Remember to change your default shell to {target} for the best experience")
        console.echo(f"  Run: {manual_change_command(target)}")
        console.echo()
    console.echo(RULE)
    return StepResult(status="success", message="summary printed")
