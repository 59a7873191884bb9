"""Production framework installer: fetch the upstream install.sh and run it unattended."""

import os
from pathlib import Path

from zsh_setup.gateway.framework_installer.abc import FrameworkInstaller
from zsh_setup.subprocess_utils import run_subprocess_with_context

OH_MY_ZSH_INSTALL_URL = "https://raw.githubusercontent.com/ohmyzsh/ohmyzsh/master/tools/install.sh"


class RealFrameworkInstaller(FrameworkInstaller):
    def __init__(self, install_url: str = OH_MY_ZSH_INSTALL_URL) -> None:
        self._install_url = install_url

    def install(self, target: Path) -> None:
        fetched = run_subprocess_with_context(
            cmd=["curl", "-fsSL", self._install_url],
            operation_context=f"download {self._install_url}",
        )
        # --unattended keeps the installer from switching shells or starting zsh;
        # KEEP_ZSHRC leaves ~/.zshrc for the config link step to manage.
        env = {**os.environ, "ZSH": str(target), "KEEP_ZSHRC": "yes"}
        run_subprocess_with_context(
            cmd=["sh", "-c", fetched.stdout, "", "--unattended"],
            operation_context="run the Oh My Zsh installer",
            env=env,
            capture_output=False,
        )
