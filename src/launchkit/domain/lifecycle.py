"""Bootstrap phase and milestone models.

The host drives its bootstrap through a fixed sequence of phases:

    UNCONFIGURED -> CONFIGURED -> LAUNCHING -> INTERPRETER_READY -> RUNNING

Each ordered milestone moves the host into the next phase. User errors are
reported from INTERPRETER_READY onwards and never change the phase.

Ordering is a host obligation. The plugin manager only observes it.
"""

from __future__ import annotations

from enum import StrEnum


class BootstrapPhase(StrEnum):
    """Phases of the host bootstrap sequence."""

    UNCONFIGURED = "unconfigured"
    CONFIGURED = "configured"
    LAUNCHING = "launching"
    INTERPRETER_READY = "interpreter_ready"
    RUNNING = "running"


class Milestone(StrEnum):
    """Bootstrap milestones, valued by the hook name they fire."""

    CONFIGURE = "configure"
    BEFORE_LAUNCH = "before_launch"
    AFTER_SETUP = "after_setup"
    AFTER_STARTUP = "after_startup"
    USER_ERROR = "on_user_error"


# --- Transition maps ---

PHASE_TRANSITIONS: dict[str, list[str]] = {
    "unconfigured": ["configured"],
    "configured": ["launching"],
    "launching": ["interpreter_ready"],
    "interpreter_ready": ["running"],
    "running": [],
}

# Phase reached once a milestone has been broadcast. USER_ERROR is absent:
# it is not part of the ordered chain.
MILESTONE_TARGETS: dict[Milestone, BootstrapPhase] = {
    Milestone.CONFIGURE: BootstrapPhase.CONFIGURED,
    Milestone.BEFORE_LAUNCH: BootstrapPhase.LAUNCHING,
    Milestone.AFTER_SETUP: BootstrapPhase.INTERPRETER_READY,
    Milestone.AFTER_STARTUP: BootstrapPhase.RUNNING,
}

# Phases in which user code may already be running.
USER_CODE_PHASES: frozenset[BootstrapPhase] = frozenset(
    {BootstrapPhase.INTERPRETER_READY, BootstrapPhase.RUNNING}
)


def is_valid_transition(
    current: str,
    target: str,
    transitions: dict[str, list[str]] = PHASE_TRANSITIONS,
) -> bool:
    """Check if transitioning from *current* to *target* is allowed."""
    allowed = transitions.get(current, [])
    return target in allowed


def target_phase(milestone: Milestone) -> BootstrapPhase | None:
    """Return the phase *milestone* leads to, or None for unordered milestones."""
    return MILESTONE_TARGETS.get(milestone)


def is_in_order(current: BootstrapPhase, milestone: Milestone) -> bool:
    """Whether firing *milestone* while in *current* follows the documented order."""
    target = target_phase(milestone)
    if target is None:
        return current in USER_CODE_PHASES
    return is_valid_transition(str(current), str(target))
