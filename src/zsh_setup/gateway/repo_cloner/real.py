import os
from pathlib import Path

from zsh_setup.gateway.repo_cloner.abc import RepositoryCloner
from zsh_setup.subprocess_utils import run_subprocess_with_context


class RealRepositoryCloner(RepositoryCloner):
    def clone(self, *, url: str, target: Path) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        # Never block on a credential prompt for a public plugin repository
        env = {**os.environ, "GIT_TERMINAL_PROMPT": "0"}
        run_subprocess_with_context(
            cmd=["git", "clone", url, str(target)],
            operation_context=f"clone {url}",
            env=env,
        )
