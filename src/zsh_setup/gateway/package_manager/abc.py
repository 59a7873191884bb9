"""Package manager abstraction.

One implementation exists per supported platform package manager. The
provisioner picks the one matching the detected platform; when none matches,
no PackageManager is used at all.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Literal

PackageManagerKind = Literal["brew", "apt"]


class PackageManager(ABC):
    """Abstract package manager for dependency injection."""

    @property
    @abstractmethod
    def kind(self) -> PackageManagerKind:
        """Which package manager this is."""
        ...

    @property
    @abstractmethod
    def requires_index_refresh(self) -> bool:
        """Whether refresh_index() must run before the first install of a run."""
        ...

    @abstractmethod
    def refresh_index(self) -> bool:
        """Refresh the package index.

        Returns:
            True if the refresh succeeded
        """
        ...

    @abstractmethod
    def install(self, package: str) -> bool:
        """Install a package.

        Args:
            package: Package name in this package manager's namespace

        Returns:
            True if the package manager reported success
        """
        ...

    @abstractmethod
    def package_prefix(self, package: str) -> Path | None:
        """Return the directory the package manager installed a package into.

        Returns:
            Install prefix for the package, or None when this package manager
            does not expose one
        """
        ...
