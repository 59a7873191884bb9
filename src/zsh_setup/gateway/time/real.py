from datetime import datetime

from zsh_setup.gateway.time.abc import Time


class RealTime(Time):
    def now(self) -> datetime:
        return datetime.now()
