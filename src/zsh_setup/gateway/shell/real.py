"""Production Shell implementation backed by the process environment."""

import os
import shutil

from zsh_setup.gateway.shell.abc import Shell
from zsh_setup.subprocess_utils import run_quietly


class RealShell(Shell):
    """Resolves tools with shutil.which and reads $SHELL from os.environ."""

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return shutil.which(tool_name)

    def get_login_shell(self) -> str | None:
        shell = os.environ.get("SHELL")
        if not shell:
            return None
        return shell

    def run_quietly(self, cmd: list[str]) -> bool:
        return run_quietly(cmd)
