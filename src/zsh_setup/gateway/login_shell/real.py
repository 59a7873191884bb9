import logging
import subprocess
from pathlib import Path

from zsh_setup.gateway.login_shell.abc import LoginShellChanger

logger = logging.getLogger(__name__)

SHELLS_REGISTRY = Path("/etc/shells")


def parse_shells_registry(content: str) -> list[str]:
    """Return the shell paths in /etc/shells content, skipping comments and blanks."""
    shells: list[str] = []
    for raw_line in content.splitlines():
        line = raw_line.strip()
        if line and not line.startswith("#"):
            shells.append(line)
    return shells


class RealLoginShellChanger(LoginShellChanger):
    def __init__(self, registry_path: Path = SHELLS_REGISTRY) -> None:
        self._registry_path = registry_path

    def registered_shells(self) -> list[str]:
        if not self._registry_path.exists():
            return []
        return parse_shells_registry(self._registry_path.read_text(encoding="utf-8"))

    def register_shell(self, shell_path: str) -> bool:
        cmd = ["sudo", "tee", "-a", str(self._registry_path)]
        logger.debug("Running: %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, input=f"{shell_path}\n", text=True, check=False)
        except OSError as e:
            logger.debug("Could not start sudo: %s", e)
            return False
        return result.returncode == 0

    def change_login_shell(self, shell_path: str) -> bool:
        cmd = ["chsh", "-s", shell_path]
        logger.debug("Running: %s", " ".join(cmd))
        try:
            # Inherit the terminal: chsh may prompt for a password
            result = subprocess.run(cmd, check=False)
        except OSError as e:
            logger.debug("Could not start chsh: %s", e)
            return False
        return result.returncode == 0
