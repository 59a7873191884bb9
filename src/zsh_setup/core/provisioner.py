"""The provisioning pipeline.

Steps run in a fixed order. Each returns a StepResult; the first fatal result
stops the run, anything else continues to the next step.
"""

import logging
from collections.abc import Callable, Sequence

from zsh_setup.core.config_link import link_config
from zsh_setup.core.context import SetupContext
from zsh_setup.core.framework import install_framework, install_plugins
from zsh_setup.core.fuzzy_finder import ensure_fuzzy_finder
from zsh_setup.core.login_shell import maybe_change_shell
from zsh_setup.core.platform_detection import detect_platform
from zsh_setup.core.prerequisites import ensure_prerequisites
from zsh_setup.core.steps import ProvisioningState, ProvisionReport, StepOutcome, StepResult
from zsh_setup.core.summary import print_summary

logger = logging.getLogger(__name__)

Step = Callable[[SetupContext, ProvisioningState], StepResult]


def detect_platform_step(ctx: SetupContext, state: ProvisioningState) -> StepResult:
    ctx.console.info("Detecting platform...")
    profile = detect_platform(platform_info=ctx.platform_info, shell=ctx.shell, console=ctx.console)
    state.profile = profile
    ctx.console.success(f"Detected platform: {profile.label}")
    if profile.package_manager is None:
        return StepResult(status="warning", message=f"{profile.label} without a supported package manager")
    return StepResult(status="success", message=f"{profile.label} using {profile.package_manager}")


PIPELINE: tuple[tuple[str, Step], ...] = (
    ("detect-platform", detect_platform_step),
    ("prerequisites", ensure_prerequisites),
    ("framework", install_framework),
    ("plugins", install_plugins),
    ("fuzzy-finder", ensure_fuzzy_finder),
    ("link-config", link_config),
    ("login-shell", maybe_change_shell),
    ("summary", print_summary),
)


def run_pipeline(
    ctx: SetupContext,
    steps: Sequence[tuple[str, Step]],
    state: ProvisioningState | None = None,
) -> ProvisionReport:
    """Run steps in order, stopping after the first fatal result."""
    run_state = state if state is not None else ProvisioningState()
    outcomes: list[StepOutcome] = []
    for name, step in steps:
        logger.debug("Running step %s", name)
        result = step(ctx, run_state)
        logger.debug("Step %s finished: %s (%s)", name, result.status, result.message)
        outcomes.append(StepOutcome(step=name, result=result))
        if result.is_fatal:
            ctx.console.error(result.message)
            break
    return ProvisionReport(outcomes=tuple(outcomes))


def provision(ctx: SetupContext) -> ProvisionReport:
    """Run the full provisioning pipeline."""
    return run_pipeline(ctx, PIPELINE)
