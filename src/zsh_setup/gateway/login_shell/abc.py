"""Login shell abstraction.

Both mutating operations need elevated privileges on a real system
(sudo for /etc/shells, the user's password for chsh).
"""

from abc import ABC, abstractmethod


class LoginShellChanger(ABC):
    @abstractmethod
    def registered_shells(self) -> list[str]:
        """Return the shell paths listed in the system registry of valid login shells."""
        ...

    @abstractmethod
    def register_shell(self, shell_path: str) -> bool:
        """Append a shell path to the registry.

        Returns:
            True if the registry was updated
        """
        ...

    @abstractmethod
    def change_login_shell(self, shell_path: str) -> bool:
        """Change the current user's login shell.

        Returns:
            True if the change succeeded
        """
        ...
