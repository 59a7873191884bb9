"""Tool lookup, login shell detection and quiet command execution."""

from zsh_setup.gateway.shell.abc import Shell as Shell
from zsh_setup.gateway.shell.fake import FakeShell as FakeShell
from zsh_setup.gateway.shell.real import RealShell as RealShell
