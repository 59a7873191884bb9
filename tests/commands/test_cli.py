"""Tests for the zsh-setup command line."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.test_utils.context_builders import build_ubuntu_context
from zsh_setup.cli.cli import cli
from zsh_setup.core.catalog import DEFAULT_PLUGINS
from zsh_setup.gateway.repo_cloner.fake import FakeRepositoryCloner


def test_run_exits_zero_on_success(tmp_path: Path) -> None:
    ctx, console, _, _ = build_ubuntu_context(tmp_path)

    result = CliRunner().invoke(cli, [], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Installation complete!" in console.texts("success")


def test_run_exits_nonzero_on_fatal_prerequisite(tmp_path: Path) -> None:
    cloner = FakeRepositoryCloner()
    ctx, console, _, _ = build_ubuntu_context(tmp_path, installed_tools={}, repo_cloner=cloner)

    result = CliRunner().invoke(cli, [], obj=ctx)

    assert result.exit_code == 1
    assert cloner.clone_calls == []
    assert console.errors


def test_run_exits_nonzero_when_asset_missing(tmp_path: Path) -> None:
    empty = tmp_path / "empty"
    empty.mkdir()
    ctx, _, _, _ = build_ubuntu_context(tmp_path, dotfiles_dir=empty)

    result = CliRunner().invoke(cli, [], obj=ctx)

    assert result.exit_code == 1


def test_degraded_run_still_exits_zero(tmp_path: Path) -> None:
    # fzf missing and no way to install it: warning only
    tools = {"zsh": "/usr/bin/zsh", "git": "/usr/bin/git", "curl": "/usr/bin/curl"}
    ctx, console, _, _ = build_ubuntu_context(tmp_path, installed_tools=tools)

    result = CliRunner().invoke(cli, [], obj=ctx)

    assert result.exit_code == 0, result.output
    assert any("fzf is not installed" in w for w in console.warnings)


def test_status_lists_every_item(tmp_path: Path) -> None:
    ctx, _, _, _ = build_ubuntu_context(tmp_path)

    result = CliRunner().invoke(cli, ["status"], obj=ctx)

    assert result.exit_code == 0, result.output
    for plugin in DEFAULT_PLUGINS:
        assert plugin.name in result.output
    assert "~/.zshrc" in result.output
    assert "not set up yet" in result.output


def test_status_does_not_change_anything(tmp_path: Path) -> None:
    cloner = FakeRepositoryCloner()
    ctx, console, _, apt = build_ubuntu_context(tmp_path, installed_tools={}, repo_cloner=cloner)

    CliRunner().invoke(cli, ["status"], obj=ctx)

    assert apt.installed_packages == []
    assert cloner.clone_calls == []
    assert not ctx.zshrc_path.exists()
    assert console.messages == []


def test_help_mentions_dry_run() -> None:
    result = CliRunner().invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "--dry-run" in result.output
    assert "status" in result.output


def test_unreadable_config_prints_error_and_exits_one(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    cfg = tmp_path / "config.toml"
    cfg.write_bytes(b'target_shell = "\xff"\n')
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("ZSH_SETUP_CONFIG", str(cfg))

    result = CliRunner().invoke(cli, ["status"])

    assert result.exit_code == 1
    assert "Error: " in result.output
    assert "config.toml" in result.output
