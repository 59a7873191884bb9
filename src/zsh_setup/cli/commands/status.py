"""Status command - show which parts of the setup are already in place."""

import click
from rich.console import Console
from rich.table import Table

from zsh_setup.core.context import SetupContext
from zsh_setup.core.status import collect_status


@click.command("status")
@click.pass_obj
def status_cmd(ctx: SetupContext) -> None:
    """Report what is installed without changing anything.

    Shows a table with:
    - Item: prerequisite, framework, plugin, ~/.zshrc or login shell
    - State: done/missing
    - Detail: resolved path or reason
    """
    checks = collect_status(ctx)

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Item", style="cyan", no_wrap=True)
    table.add_column("State", no_wrap=True)
    table.add_column("Detail")

    for check in checks:
        state = "[green]done[/green]" if check.done else "[yellow]missing[/yellow]"
        table.add_row(check.name, state, check.detail)

    Console(width=200).print(table)

    remaining = sum(1 for check in checks if not check.done)
    if remaining == 0:
        click.echo(click.style("Everything is set up.", fg="green"))
    else:
        click.echo(f"{remaining} item(s) not set up yet. Run 'zsh-setup' to provision them.")
