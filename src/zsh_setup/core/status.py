"""Read-only inspection of how much of the setup is already in place."""

from dataclasses import dataclass

from zsh_setup.core.catalog import FRAMEWORK_NAME, FUZZY_FINDER, REQUIRED_PREREQUISITES
from zsh_setup.core.config_link import is_managed_stub
from zsh_setup.core.context import SetupContext
from zsh_setup.core.login_shell import current_shell_name


@dataclass(frozen=True)
class StatusCheck:
    """One row of the status report.

    Attributes:
        name: What is being checked
        done: Whether it is already in its provisioned state
        detail: Path, version or reason shown next to the result
    """

    name: str
    done: bool
    detail: str


def collect_status(ctx: SetupContext) -> list[StatusCheck]:
    """Inspect every provisioned artifact without changing anything."""
    checks: list[StatusCheck] = []

    for prerequisite in (*REQUIRED_PREREQUISITES, FUZZY_FINDER):
        path = ctx.shell.get_installed_tool_path(prerequisite.command)
        checks.append(
            StatusCheck(name=prerequisite.command, done=path is not None, detail=path or "not on PATH")
        )

    framework_dir = ctx.framework_dir
    checks.append(
        StatusCheck(
            name=FRAMEWORK_NAME,
            done=framework_dir.is_dir(),
            detail=str(framework_dir),
        )
    )

    for plugin in ctx.config.plugins:
        target = ctx.plugins_dir / plugin.name
        checks.append(StatusCheck(name=plugin.name, done=target.is_dir(), detail=str(target)))

    zshrc = ctx.zshrc_path
    if zshrc.is_file():
        managed = is_managed_stub(zshrc.read_text(encoding="utf-8", errors="replace"), ctx.startup_asset)
        detail = f"sources {ctx.startup_asset}" if managed else "not managed by zsh-setup"
    else:
        managed = False
        detail = "missing"
    checks.append(StatusCheck(name="~/.zshrc", done=managed, detail=detail))

    target = ctx.config.target_shell
    current = current_shell_name(ctx)
    checks.append(StatusCheck(name="login shell", done=current == target, detail=current))
    return checks
