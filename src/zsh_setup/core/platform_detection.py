"""Platform detection: turn OS identification into a PlatformProfile."""

import logging
from dataclasses import dataclass
from typing import Literal

from zsh_setup.gateway.console.abc import Console
from zsh_setup.gateway.package_manager.abc import PackageManagerKind
from zsh_setup.gateway.platform_info.abc import PlatformInfo
from zsh_setup.gateway.shell.abc import Shell

logger = logging.getLogger(__name__)

OSFamily = Literal["macOS", "Ubuntu", "OtherLinux", "Unknown"]

DEBIAN_LINEAGE = ("ubuntu", "debian")


@dataclass(frozen=True)
class PlatformProfile:
    """Detected platform, computed once per run.

    Attributes:
        family: Broad platform family driving package manager selection
        label: Human-readable name (raw distribution ID or kernel name for
            platforms outside the supported families)
        package_manager: Package manager to use, or None when automatic
            installation is unavailable
    """

    family: OSFamily
    label: str
    package_manager: PackageManagerKind | None


def _is_debian_family(os_release: dict[str, str]) -> bool:
    lineage = f"{os_release.get('ID', '')} {os_release.get('ID_LIKE', '')}".lower()
    return any(name in lineage for name in DEBIAN_LINEAGE)


def detect_platform(*, platform_info: PlatformInfo, shell: Shell, console: Console) -> PlatformProfile:
    """Detect the host platform and the package manager available on it.

    Emits warnings through the console for anything short of full support;
    never fails.
    """
    kernel = platform_info.kernel_name()
    logger.debug("Kernel name: %s", kernel)

    if kernel == "Darwin":
        if shell.get_installed_tool_path("brew") is not None:
            return PlatformProfile(family="macOS", label="macOS", package_manager="brew")
        console.warning("Homebrew is not installed. Automatic package installation will be skipped.")
        console.warning("Install Homebrew from https://brew.sh to let zsh-setup manage dependencies.")
        return PlatformProfile(family="macOS", label="macOS", package_manager=None)

    if kernel == "Linux":
        os_release = platform_info.read_os_release()
        if os_release is None:
            console.warning("Unable to read /etc/os-release. Automatic package installation may not work.")
            return PlatformProfile(family="OtherLinux", label="Linux", package_manager=None)

        logger.debug("os-release: %s", os_release)
        if _is_debian_family(os_release):
            if shell.get_installed_tool_path("apt-get") is not None:
                return PlatformProfile(family="Ubuntu", label="Ubuntu", package_manager="apt")
            console.warning("apt-get is not available. Automatic package installation will be skipped.")
            return PlatformProfile(family="Ubuntu", label="Ubuntu", package_manager=None)

        distro_id = os_release.get("ID") or "Linux"
        console.warning(f"zsh-setup is optimized for Ubuntu. Detected ID={os_release.get('ID', 'unknown')}.")
        console.warning("Automatic package installation may not work; install prerequisites manually.")
        return PlatformProfile(family="OtherLinux", label=distro_id, package_manager=None)

    console.warning(f"Unsupported OS detected: {kernel or 'unknown'}")
    console.warning("zsh-setup is tested on macOS and Ubuntu. Proceed with caution.")
    return PlatformProfile(family="Unknown", label=kernel or "unknown", package_manager=None)
