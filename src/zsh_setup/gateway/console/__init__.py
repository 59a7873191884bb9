"""Tagged user-facing output and interactive confirmation."""

from zsh_setup.gateway.console.abc import Console as Console
from zsh_setup.gateway.console.fake import FakeConsole as FakeConsole
from zsh_setup.gateway.console.real import InteractiveConsole as InteractiveConsole
