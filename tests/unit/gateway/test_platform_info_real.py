"""Tests for os-release parsing in RealPlatformInfo."""

from pathlib import Path

from zsh_setup.core.platform_detection import PlatformProfile, detect_platform
from zsh_setup.gateway.console.fake import FakeConsole
from zsh_setup.gateway.platform_info.real import RealPlatformInfo, parse_os_release
from zsh_setup.gateway.shell.fake import FakeShell


def test_parse_os_release_handles_quotes_and_comments() -> None:
    content = (
        "# comment\n"
        'NAME="Ubuntu"\n'
        "ID=ubuntu\n"
        "ID_LIKE=debian\n"
        'VERSION="22.04.3 LTS (Jammy Jellyfish)"\n'
        "\n"
    )

    values = parse_os_release(content)

    assert values == {
        "NAME": "Ubuntu",
        "ID": "ubuntu",
        "ID_LIKE": "debian",
        "VERSION": "22.04.3 LTS (Jammy Jellyfish)",
    }


def test_parse_os_release_multi_word_id_like() -> None:
    assert parse_os_release('ID_LIKE="ubuntu debian"\n')["ID_LIKE"] == "ubuntu debian"


def test_parse_os_release_empty_value() -> None:
    assert parse_os_release("VARIANT=\n") == {"VARIANT": ""}


def test_read_os_release_from_file(tmp_path: Path) -> None:
    path = tmp_path / "os-release"
    path.write_text("ID=fedora\n", encoding="utf-8")

    assert RealPlatformInfo(os_release_path=path).read_os_release() == {"ID": "fedora"}


def test_read_os_release_missing_file(tmp_path: Path) -> None:
    assert RealPlatformInfo(os_release_path=tmp_path / "nope").read_os_release() is None


class FakeKernelPlatformInfo(RealPlatformInfo):
    """Real os-release reading with a fixed kernel name."""

    def __init__(self, *, kernel: str, os_release_path: Path) -> None:
        super().__init__(os_release_path=os_release_path)
        self._kernel = kernel

    def kernel_name(self) -> str:
        return self._kernel


def test_parse_os_release_tolerates_unbalanced_quotes() -> None:
    values = parse_os_release('ID=ubuntu\nPRETTY_NAME="Ubuntu 22.04\n')

    assert values == {"ID": "ubuntu", "PRETTY_NAME": "Ubuntu 22.04"}


def test_malformed_os_release_still_detects_ubuntu(tmp_path: Path) -> None:
    path = tmp_path / "os-release"
    path.write_text('ID=ubuntu\nPRETTY_NAME="Ubuntu 22.04\n', encoding="utf-8")
    platform_info = FakeKernelPlatformInfo(kernel="Linux", os_release_path=path)

    profile = detect_platform(
        platform_info=platform_info,
        shell=FakeShell(installed_tools={"apt-get": "/usr/bin/apt-get"}),
        console=FakeConsole(),
    )

    assert profile == PlatformProfile(family="Ubuntu", label="Ubuntu", package_manager="apt")
