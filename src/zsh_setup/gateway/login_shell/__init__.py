"""System shell registry (/etc/shells) and login shell changes."""

from zsh_setup.gateway.login_shell.abc import LoginShellChanger as LoginShellChanger
from zsh_setup.gateway.login_shell.dry_run import DryRunLoginShellChanger as DryRunLoginShellChanger
from zsh_setup.gateway.login_shell.fake import FakeLoginShellChanger as FakeLoginShellChanger
from zsh_setup.gateway.login_shell.real import RealLoginShellChanger as RealLoginShellChanger
