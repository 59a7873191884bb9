"""Production PlatformInfo using platform.system() and /etc/os-release."""

import logging
import os
import platform
import shlex
from pathlib import Path

from zsh_setup.gateway.platform_info.abc import PlatformInfo

logger = logging.getLogger(__name__)

OS_RELEASE_PATH = Path("/etc/os-release")


def parse_os_release(content: str) -> dict[str, str]:
    """Parse os-release(5) content into a dict.

    Values may be quoted; comments and blank lines are ignored.

    Example:
        >>> parse_os_release('ID=ubuntu\\nID_LIKE="debian"\\n')
        {'ID': 'ubuntu', 'ID_LIKE': 'debian'}
    """
    values: dict[str, str] = {}
    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, raw_value = line.partition("=")
        try:
            parts = shlex.split(raw_value, posix=True) if raw_value else []
        except ValueError:
            logger.debug("Unbalanced quoting in os-release entry %s", key)
            parts = [raw_value.strip("\"'")]
        values[key.strip()] = parts[0] if parts else ""
    return values


class RealPlatformInfo(PlatformInfo):
    def __init__(self, os_release_path: Path = OS_RELEASE_PATH) -> None:
        self._os_release_path = os_release_path

    def kernel_name(self) -> str:
        return platform.system()

    def read_os_release(self) -> dict[str, str] | None:
        path = self._os_release_path
        if not path.is_file() or not os.access(path, os.R_OK):
            logger.debug("%s is not readable", path)
            return None
        return parse_os_release(path.read_text(encoding="utf-8", errors="replace"))
