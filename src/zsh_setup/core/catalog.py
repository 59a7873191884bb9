"""The fixed set of tools and plugins zsh-setup provisions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Prerequisite:
    """A command that must be resolvable on PATH.

    Package names default to the command name when a package manager names
    the package the same way.
    """

    command: str
    brew_package: str | None = None
    apt_package: str | None = None

    @property
    def brew_package_name(self) -> str:
        return self.brew_package or self.command

    @property
    def apt_package_name(self) -> str:
        return self.apt_package or self.brew_package or self.command


@dataclass(frozen=True)
class PluginSpec:
    """A framework plugin installed by cloning its repository.

    Attributes:
        name: Directory name under <custom>/plugins, also the name used in
            the plugins=(...) list of the startup file
        url: Clone URL
        description: One-line description for the summary
    """

    name: str
    url: str
    description: str = ""


REQUIRED_PREREQUISITES: tuple[Prerequisite, ...] = (
    Prerequisite("zsh"),
    Prerequisite("git"),
    Prerequisite("curl"),
)

FUZZY_FINDER = Prerequisite("fzf")

DEFAULT_PLUGINS: tuple[PluginSpec, ...] = (
    PluginSpec(
        name="zsh-autosuggestions",
        url="https://github.com/zsh-users/zsh-autosuggestions",
        description="command suggestions as you type",
    ),
    PluginSpec(
        name="zsh-history-substring-search",
        url="https://github.com/zsh-users/zsh-history-substring-search",
        description="search history with arrow keys",
    ),
    PluginSpec(
        name="zsh-syntax-highlighting",
        url="https://github.com/zsh-users/zsh-syntax-highlighting.git",
        description="green=valid, red=invalid commands",
    ),
    PluginSpec(
        name="you-should-use",
        url="https://github.com/MichaelAquilina/zsh-you-should-use.git",
        description="reminds you of available aliases",
    ),
)

FRAMEWORK_NAME = "Oh My Zsh"
DEFAULT_TARGET_SHELL = "zsh"
