"""zsh-setup CLI entry point.

Provisions a zsh environment (Oh My Zsh, plugins, fzf) and points ~/.zshrc
at the bundled configuration. See `zsh-setup --help` for details.
"""

from zsh_setup.cli.cli import cli


def main() -> None:
    """CLI entry point used by the `zsh-setup` console script."""
    cli()
