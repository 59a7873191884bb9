"""Version-control clones of plugin repositories."""

from zsh_setup.gateway.repo_cloner.abc import RepositoryCloner as RepositoryCloner
from zsh_setup.gateway.repo_cloner.dry_run import DryRunRepositoryCloner as DryRunRepositoryCloner
from zsh_setup.gateway.repo_cloner.fake import FakeRepositoryCloner as FakeRepositoryCloner
from zsh_setup.gateway.repo_cloner.real import RealRepositoryCloner as RealRepositoryCloner
