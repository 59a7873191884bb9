from zsh_setup.gateway.login_shell.abc import LoginShellChanger


class FakeLoginShellChanger(LoginShellChanger):
    def __init__(
        self,
        *,
        registered_shells: list[str] | None = None,
        register_fails: bool = False,
        change_fails: bool = False,
    ) -> None:
        self._registered_shells = list(registered_shells) if registered_shells else []
        self._register_fails = register_fails
        self._change_fails = change_fails
        self._register_calls: list[str] = []
        self._change_calls: list[str] = []

    def registered_shells(self) -> list[str]:
        return list(self._registered_shells)

    def register_shell(self, shell_path: str) -> bool:
        self._register_calls.append(shell_path)
        if self._register_fails:
            return False
        self._registered_shells.append(shell_path)
        return True

    def change_login_shell(self, shell_path: str) -> bool:
        self._change_calls.append(shell_path)
        return not self._change_fails

    @property
    def register_calls(self) -> list[str]:
        return list(self._register_calls)

    @property
    def change_calls(self) -> list[str]:
        return list(self._change_calls)
