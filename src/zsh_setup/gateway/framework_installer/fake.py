from pathlib import Path

from zsh_setup.gateway.framework_installer.abc import FrameworkInstaller


class FakeFrameworkInstaller(FrameworkInstaller):
    """Creates the target directory (with a custom/ subdirectory) instead of downloading."""

    def __init__(self, *, fails: bool = False) -> None:
        self._fails = fails
        self._install_calls: list[Path] = []

    def install(self, target: Path) -> None:
        self._install_calls.append(target)
        if self._fails:
            msg = "Failed to run the Oh My Zsh installer (exit 1)"
            raise RuntimeError(msg)
        (target / "custom" / "plugins").mkdir(parents=True)

    @property
    def install_calls(self) -> list[Path]:
        return list(self._install_calls)
