from dataclasses import dataclass
from pathlib import Path

from zsh_setup.gateway.repo_cloner.abc import RepositoryCloner


@dataclass(frozen=True)
class CloneCall:
    url: str
    target: Path


class FakeRepositoryCloner(RepositoryCloner):
    """Records clones and creates the target directory to simulate a checkout."""

    def __init__(self, *, failing_urls: set[str] | None = None) -> None:
        self._failing_urls = failing_urls if failing_urls is not None else set()
        self._clone_calls: list[CloneCall] = []

    def clone(self, *, url: str, target: Path) -> None:
        self._clone_calls.append(CloneCall(url=url, target=target))
        if url in self._failing_urls:
            msg = f"Failed to clone {url} (exit 128): repository not found"
            raise RuntimeError(msg)
        if target.exists():
            msg = f"Failed to clone {url} (exit 128): destination path '{target}' already exists"
            raise RuntimeError(msg)
        target.mkdir(parents=True)

    @property
    def clone_calls(self) -> list[CloneCall]:
        return list(self._clone_calls)

    @property
    def cloned_urls(self) -> list[str]:
        return [call.url for call in self._clone_calls]
