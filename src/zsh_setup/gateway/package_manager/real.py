"""Production package managers invoking brew and apt-get."""

import logging
import os
import subprocess
from pathlib import Path

from zsh_setup.gateway.package_manager.abc import PackageManager, PackageManagerKind
from zsh_setup.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)


def _run_streaming(cmd: list[str]) -> bool:
    """Run a command with output going straight to the terminal."""
    logger.debug("Running: %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, check=False)
    except OSError as e:
        logger.debug("Could not start %s: %s", cmd[0], e)
        return False
    return result.returncode == 0


class BrewPackageManager(PackageManager):
    """Homebrew. Installs without an explicit index refresh."""

    @property
    def kind(self) -> PackageManagerKind:
        return "brew"

    @property
    def requires_index_refresh(self) -> bool:
        return False

    def refresh_index(self) -> bool:
        return True

    def install(self, package: str) -> bool:
        return _run_streaming(["brew", "install", package])

    def package_prefix(self, package: str) -> Path | None:
        try:
            result = run_subprocess_with_context(
                cmd=["brew", "--prefix"],
                operation_context="query Homebrew prefix",
            )
        except RuntimeError as e:
            logger.debug("%s", e)
            return None
        prefix = result.stdout.strip()
        if not prefix:
            return None
        return Path(prefix) / "opt" / package


class AptPackageManager(PackageManager):
    """apt-get on Debian-family systems. Privileged operations go through sudo."""

    def _privileged(self, cmd: list[str]) -> list[str]:
        if os.geteuid() == 0:
            return cmd
        return ["sudo", *cmd]

    @property
    def kind(self) -> PackageManagerKind:
        return "apt"

    @property
    def requires_index_refresh(self) -> bool:
        return True

    def refresh_index(self) -> bool:
        return _run_streaming(self._privileged(["apt-get", "update"]))

    def install(self, package: str) -> bool:
        return _run_streaming(self._privileged(["apt-get", "install", "-y", package]))

    def package_prefix(self, package: str) -> Path | None:
        return None
