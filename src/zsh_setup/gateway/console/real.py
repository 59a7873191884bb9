"""Terminal-backed console using click for styling and single-key input."""

import logging
import sys

import click

from zsh_setup.gateway.console.abc import Console, Severity

logger = logging.getLogger(__name__)

_TAG_COLORS: dict[Severity, str] = {
    "info": "blue",
    "success": "green",
    "warning": "yellow",
    "error": "red",
}


def format_tag(severity: Severity) -> str:
    """Return the colored "[SEVERITY]" prefix for a message."""
    return click.style(f"[{severity.upper()}]", fg=_TAG_COLORS[severity], bold=severity == "warning")


class InteractiveConsole(Console):
    """Production console writing to stdout/stderr and reading keypresses from the TTY."""

    def message(self, severity: Severity, text: str) -> None:
        click.echo(f"{format_tag(severity)} {text}", err=severity == "error")

    def echo(self, text: str = "") -> None:
        click.echo(text)

    def confirm(self, prompt: str, *, default: bool) -> bool:
        suffix = "(Y/n)" if default else "(y/N)"
        if not sys.stdin.isatty():
            logger.debug("stdin is not a TTY, using default answer for: %s", prompt)
            click.echo(f"{prompt} {suffix}: {'y' if default else 'n'}")
            return default

        click.echo(f"{prompt} {suffix}: ", nl=False)
        char = click.getchar()
        click.echo()
        if char in ("y", "Y"):
            return True
        if char in ("n", "N"):
            return False
        return default
