from datetime import datetime

from zsh_setup.gateway.time.abc import Time

DEFAULT_FAKE_NOW = datetime(2024, 1, 15, 14, 30, 0)


class FakeTime(Time):
    """Returns a fixed instant."""

    def __init__(self, now: datetime = DEFAULT_FAKE_NOW) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now
