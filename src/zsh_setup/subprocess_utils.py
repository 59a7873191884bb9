"""Subprocess helpers shared by the real gateway implementations."""

import logging
import subprocess
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)


def run_subprocess_with_context(
    *,
    cmd: list[str],
    operation_context: str,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
    capture_output: bool = True,
    timeout: float | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command and raise a RuntimeError describing the operation on failure.

    Args:
        cmd: Command and arguments
        operation_context: Human-readable description used in the error message
            (e.g., "clone zsh-autosuggestions")
        cwd: Working directory, or None for the current directory
        env: Full environment for the child process, or None to inherit
        capture_output: Capture stdout/stderr instead of streaming to the terminal
        timeout: Optional timeout in seconds

    Returns:
        The completed process

    Raises:
        RuntimeError: If the command exits non-zero or cannot be started
    """
    logger.debug("Running: %s", " ".join(cmd))
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            env=dict(env) if env is not None else None,
            capture_output=capture_output,
            text=True,
            check=False,
            timeout=timeout,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        msg = f"Failed to {operation_context}: {e}"
        raise RuntimeError(msg) from e

    if result.returncode != 0:
        stderr = (result.stderr or "").strip() if capture_output else ""
        msg = f"Failed to {operation_context} (exit {result.returncode})"
        if stderr:
            msg += f": {stderr}"
        raise RuntimeError(msg)

    return result


def run_quietly(cmd: list[str], *, cwd: Path | None = None) -> bool:
    """Run a command with all output discarded.

    Returns:
        True if the command exited zero, False otherwise (including when it
        could not be started)
    """
    logger.debug("Running quietly: %s", " ".join(cmd))
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as e:
        logger.debug("Could not start %s: %s", cmd[0], e)
        return False
    return result.returncode == 0
