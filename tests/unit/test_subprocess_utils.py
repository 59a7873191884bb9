"""Tests for subprocess_utils module."""

from subprocess import CompletedProcess
from unittest.mock import patch

import pytest

from zsh_setup.subprocess_utils import run_quietly, run_subprocess_with_context


def test_run_subprocess_with_context_returns_completed_process() -> None:
    with patch("zsh_setup.subprocess_utils.subprocess.run") as mock_run:
        mock_run.return_value = CompletedProcess(args=["git"], returncode=0, stdout="ok\n", stderr="")

        result = run_subprocess_with_context(cmd=["git", "--version"], operation_context="check git")

    assert result.stdout == "ok\n"


def test_run_subprocess_with_context_raises_with_operation_and_stderr() -> None:
    with patch("zsh_setup.subprocess_utils.subprocess.run") as mock_run:
        mock_run.return_value = CompletedProcess(
            args=["git"], returncode=128, stdout="", stderr="fatal: repository not found\n"
        )

        expected = r"Failed to clone x \(exit 128\): fatal: repository not found"
        with pytest.raises(RuntimeError, match=expected):
            run_subprocess_with_context(cmd=["git", "clone", "x"], operation_context="clone x")


def test_run_subprocess_with_context_wraps_oserror() -> None:
    with patch("zsh_setup.subprocess_utils.subprocess.run", side_effect=FileNotFoundError("git")):
        with pytest.raises(RuntimeError, match="Failed to clone x"):
            run_subprocess_with_context(cmd=["git", "clone", "x"], operation_context="clone x")


def test_run_quietly_reports_exit_status() -> None:
    with patch("zsh_setup.subprocess_utils.subprocess.run") as mock_run:
        mock_run.return_value = CompletedProcess(args=["x"], returncode=1)

        assert run_quietly(["x"]) is False


def test_run_quietly_missing_executable() -> None:
    with patch("zsh_setup.subprocess_utils.subprocess.run", side_effect=FileNotFoundError("x")):
        assert run_quietly(["x"]) is False
