"""Wall-clock access for timestamps."""

from zsh_setup.gateway.time.abc import Time as Time
from zsh_setup.gateway.time.fake import FakeTime as FakeTime
from zsh_setup.gateway.time.real import RealTime as RealTime
