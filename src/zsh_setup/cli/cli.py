import logging
from pathlib import Path

import click

from zsh_setup.cli.commands.status import status_cmd
from zsh_setup.core.config import ConfigError
from zsh_setup.core.context import SetupContext, create_context
from zsh_setup.core.provisioner import provision

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(package_name="zsh-setup")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--dry-run", is_flag=True, help="Print what would change without changing anything")
@click.option(
    "--dotfiles-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory containing the zshrc to source (defaults to the bundled one)",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, dry_run: bool, dotfiles_dir: Path | None) -> None:
    """Install Oh My Zsh, its plugins and fzf, and point ~/.zshrc at the bundled config.

    Every step is idempotent: re-running skips whatever is already in place.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(dry_run=dry_run, dotfiles_dir=dotfiles_dir)
        except ConfigError as e:
            click.echo(click.style("Error: ", fg="red") + str(e), err=True)
            raise SystemExit(1) from e

    if ctx.invoked_subcommand is not None:
        return

    setup_ctx: SetupContext = ctx.obj
    report = provision(setup_ctx)
    if report.failed:
        raise SystemExit(1)


cli.add_command(status_cmd)
