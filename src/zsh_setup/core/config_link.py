"""Replace ~/.zshrc with a stub that sources the bundled startup file."""

import shutil
from datetime import datetime
from pathlib import Path

from zsh_setup.core.backup import backup_path_for
from zsh_setup.core.context import SetupContext
from zsh_setup.core.steps import ProvisioningState, StepResult

MANAGED_MARKER = "# Managed by zsh-setup"


def render_stub(asset: Path, now: datetime) -> str:
    """Build the content written to ~/.zshrc.

    The stub only sources the bundled file, which stays the single source of truth.
    """
    return (
        f"{MANAGED_MARKER} on {now.strftime('%Y-%m-%d %H:%M:%S')}\n"
        "# Keep this file lightweight so the repository version stays the single source of truth.\n"
        f'source "{asset}"\n'
    )


def is_managed_stub(content: str, asset: Path) -> bool:
    """Whether content is a stub generated for this asset."""
    return content.startswith(MANAGED_MARKER) and f'source "{asset}"' in content


def _backup_existing(ctx: SetupContext, zshrc: Path) -> StepResult | None:
    """Copy the current startup file aside.

    Returns:
        A warning result when a dangling symlink left nothing to copy, else None
    """
    backup = backup_path_for(zshrc, ctx.time.now())
    if not zshrc.exists():
        ctx.console.warning(f"{zshrc} is a broken symlink; nothing to back up")
        return StepResult(status="warning", message=f"{zshrc} was a broken symlink")

    ctx.console.warning(f"Backing up existing .zshrc to {backup}")
    if ctx.dry_run:
        ctx.console.echo(f"[DRY RUN] Would copy {zshrc} to {backup}")
    else:
        shutil.copyfile(zshrc, backup)
    return None


def link_config(ctx: SetupContext, state: ProvisioningState) -> StepResult:
    """Back up any existing ~/.zshrc and overwrite it with the sourcing stub."""
    ctx.console.info("Setting up .zshrc configuration...")
    asset = ctx.startup_asset
    if not asset.is_file():
        return StepResult(
            status="fatal",
            message=(
                f"Cannot find {asset.name} in {ctx.dotfiles_dir}. "
                "Please ensure it is in the dotfiles directory."
            ),
        )

    zshrc = ctx.zshrc_path
    degraded: StepResult | None = None
    if zshrc.exists() or zshrc.is_symlink():
        degraded = _backup_existing(ctx, zshrc)

    ctx.console.info("Linking custom .zshrc from repository")
    stub = render_stub(asset, ctx.time.now())
    if ctx.dry_run:
        ctx.console.echo(f"[DRY RUN] Would write {zshrc} sourcing {asset}")
    else:
        # Replace a symlink rather than writing through it to its target
        if zshrc.is_symlink():
            zshrc.unlink()
        zshrc.write_text(stub, encoding="utf-8")

    ctx.console.success(f"Created {zshrc} that sources {asset}")
    state.installed.append("~/.zshrc that sources the repository version, keeping config centralized")
    if degraded is not None:
        return degraded
    return StepResult(status="success", message=f"{zshrc} sources {asset}")
