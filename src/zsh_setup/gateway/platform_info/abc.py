"""Operating system identification abstraction.

Separates reading the kernel name and distribution identifiers from the
policy that turns them into a platform profile.
"""

from abc import ABC, abstractmethod


class PlatformInfo(ABC):
    """Abstract OS identification for dependency injection."""

    @abstractmethod
    def kernel_name(self) -> str:
        """Return the kernel name as reported by uname -s (e.g., "Darwin", "Linux")."""
        ...

    @abstractmethod
    def read_os_release(self) -> dict[str, str] | None:
        """Return the key/value pairs of the distribution info file.

        Returns:
            Mapping such as {"ID": "ubuntu", "ID_LIKE": "debian"}, or None if
            the file is missing or unreadable
        """
        ...
