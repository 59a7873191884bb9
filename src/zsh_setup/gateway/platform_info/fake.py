"""Fake PlatformInfo implementation for testing."""

from zsh_setup.gateway.platform_info.abc import PlatformInfo


class FakePlatformInfo(PlatformInfo):
    """Returns constructor-configured OS identification.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, kernel_name: str, os_release: dict[str, str] | None = None) -> None:
        self._kernel_name = kernel_name
        self._os_release = dict(os_release) if os_release is not None else None

    def kernel_name(self) -> str:
        return self._kernel_name

    def read_os_release(self) -> dict[str, str] | None:
        if self._os_release is None:
            return None
        return dict(self._os_release)
