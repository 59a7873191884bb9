"""Step results and the per-run provisioning state."""

from dataclasses import dataclass, field
from typing import Literal

from zsh_setup.core.platform_detection import PlatformProfile

StepStatus = Literal["success", "skipped", "warning", "fatal"]


@dataclass(frozen=True)
class StepResult:
    """Outcome of one provisioning step.

    Only "fatal" stops the run; "warning" and "skipped" are degraded but
    non-fatal outcomes.
    """

    status: StepStatus
    message: str

    @property
    def is_fatal(self) -> bool:
        return self.status == "fatal"


@dataclass
class ProvisioningState:
    """Mutable state threaded through every step of a single run.

    Attributes:
        profile: Platform detected by the first step (None before it runs)
        apt_index_refreshed: Whether the apt index was refreshed this run;
            gates refreshes so at most one happens however many installs follow
        shell_change_deferred: Whether the login shell still needs changing
            by hand after the run
        installed: Short descriptions of what the run set up, for the summary
    """

    profile: PlatformProfile | None = None
    apt_index_refreshed: bool = False
    shell_change_deferred: bool = False
    installed: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class StepOutcome:
    step: str
    result: StepResult


@dataclass(frozen=True)
class ProvisionReport:
    """Ordered outcomes of every step that ran.

    When a step was fatal it is the last outcome and ``failed`` is True.
    """

    outcomes: tuple[StepOutcome, ...]

    @property
    def failed(self) -> bool:
        return any(outcome.result.is_fatal for outcome in self.outcomes)

    @property
    def fatal_outcome(self) -> StepOutcome | None:
        for outcome in self.outcomes:
            if outcome.result.is_fatal:
                return outcome
        return None

    @property
    def steps_run(self) -> list[str]:
        return [outcome.step for outcome in self.outcomes]
