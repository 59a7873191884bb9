"""Optional user configuration loaded from TOML.

Example config.toml:

    framework_dir = "~/.oh-my-zsh"
    target_shell = "zsh"

    [[plugins]]
    name = "zsh-completions"
    url = "https://github.com/zsh-users/zsh-completions"
"""

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from zsh_setup.core.catalog import DEFAULT_PLUGINS, DEFAULT_TARGET_SHELL, PluginSpec

CONFIG_ENV_VAR = "ZSH_SETUP_CONFIG"


class ConfigError(Exception):
    """Raised when the config file exists but cannot be used."""


@dataclass(frozen=True)
class SetupConfig:
    """In-memory representation of config.toml.

    framework_dir is None when not configured, meaning ~/.oh-my-zsh.
    """

    framework_dir: Path | None = None
    target_shell: str = DEFAULT_TARGET_SHELL
    extra_plugins: tuple[PluginSpec, ...] = field(default_factory=tuple)

    @property
    def plugins(self) -> tuple[PluginSpec, ...]:
        """The fixed plugins followed by any configured extras."""
        return DEFAULT_PLUGINS + self.extra_plugins


def default_config_path(*, home: Path, env: Mapping[str, str]) -> Path:
    override = env.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return home / ".config" / "zsh-setup" / "config.toml"


def _parse_plugins(raw: object, cfg_path: Path) -> tuple[PluginSpec, ...]:
    if not isinstance(raw, list):
        raise ConfigError(f"{cfg_path}: 'plugins' must be an array of tables")
    plugins: list[PluginSpec] = []
    for entry in raw:
        if not isinstance(entry, dict):
            raise ConfigError(f"{cfg_path}: each [[plugins]] entry must be a table")
        name = entry.get("name")
        url = entry.get("url")
        if not isinstance(name, str) or not isinstance(url, str) or not name or not url:
            raise ConfigError(f"{cfg_path}: [[plugins]] entries need string 'name' and 'url'")
        if "/" in name:
            raise ConfigError(f"{cfg_path}: plugin name must not contain '/': {name}")
        description = entry.get("description", "")
        plugins.append(PluginSpec(name=name, url=url, description=str(description)))

    known = {plugin.name for plugin in DEFAULT_PLUGINS}
    for plugin in plugins:
        if plugin.name in known:
            raise ConfigError(f"{cfg_path}: duplicate plugin '{plugin.name}'")
        known.add(plugin.name)
    return tuple(plugins)


def load_config(cfg_path: Path, *, home: Path) -> SetupConfig:
    """Load config.toml if present; otherwise return defaults.

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML or has values of the wrong type
    """
    if not cfg_path.exists():
        return SetupConfig()

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"{cfg_path}: {e}") from e

    framework_dir: Path | None = None
    raw_dir = data.get("framework_dir")
    if raw_dir is not None:
        if not isinstance(raw_dir, str) or not raw_dir:
            raise ConfigError(f"{cfg_path}: 'framework_dir' must be a non-empty string")
        if raw_dir.startswith("~"):
            framework_dir = home / raw_dir[1:].lstrip("/")
        else:
            framework_dir = Path(raw_dir)

    target_shell = data.get("target_shell", DEFAULT_TARGET_SHELL)
    if not isinstance(target_shell, str) or not target_shell or "/" in target_shell:
        raise ConfigError(f"{cfg_path}: 'target_shell' must be a shell name such as 'zsh'")

    extra_plugins = _parse_plugins(data.get("plugins", []), cfg_path)

    return SetupConfig(
        framework_dir=framework_dir,
        target_shell=target_shell,
        extra_plugins=extra_plugins,
    )
