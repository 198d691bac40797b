"""
agentdesk.lifecycle
===================

State-transition guard for an :class:`agentdesk.models.Agent`.

A small finite-state machine describes which statuses are legal
successors of each status.  The helper :pyfunc:`advance_status` mutates
an agent **in-place** after validating the transition.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .errors import IllegalTransitionError
from .models import Agent, AgentStatus, parse_status

# ---------------------------------------------------------------------
# Allowed transitions: source status → ordered targets
# ---------------------------------------------------------------------
TRANSITIONS: Mapping[AgentStatus, Tuple[AgentStatus, ...]] = MappingProxyType({
    AgentStatus.AVAILABLE:  (AgentStatus.BUSY, AgentStatus.OFFLINE, AgentStatus.AWAY),
    AgentStatus.BUSY:       (AgentStatus.AVAILABLE, AgentStatus.ON_BREAK,
                             AgentStatus.IN_MEETING, AgentStatus.OFFLINE),
    AgentStatus.AWAY:       (AgentStatus.AVAILABLE, AgentStatus.OFFLINE),
    AgentStatus.OFFLINE:    (AgentStatus.AVAILABLE,),
    AgentStatus.ON_BREAK:   (AgentStatus.AVAILABLE, AgentStatus.OFFLINE),
    AgentStatus.IN_MEETING: (AgentStatus.AVAILABLE, AgentStatus.BUSY),
})


def _check_table_is_total(table: Mapping[AgentStatus, Tuple[AgentStatus, ...]]) -> None:
    missing = [s.value for s in AgentStatus if s not in table]
    if missing:
        raise RuntimeError(f"transition table has no entry for: {', '.join(missing)}")


_check_table_is_total(TRANSITIONS)


def allowed_transitions(status: AgentStatus) -> Tuple[AgentStatus, ...]:
    """Statuses reachable from *status* in one step."""
    return TRANSITIONS[status]


def can_transition(current: AgentStatus, target: AgentStatus) -> bool:
    return target in TRANSITIONS[current]


def advance_status(agent: Agent, requested: AgentStatus | str, reason: Optional[str] = None) -> Agent:
    """
    Change :pyattr:`agent.status` if the transition is legal.

    The value check runs before the legality check, so an unknown status
    always raises :class:`~agentdesk.errors.InvalidStatusError` rather
    than :class:`~agentdesk.errors.IllegalTransitionError`.  Nothing on
    *agent* changes unless both pass.

    Examples
    --------
    >>> a = Agent.new("A-001", "Ada", "ada@example.com")
    >>> advance_status(a, "busy").status
    <AgentStatus.BUSY: 'busy'>
    >>> advance_status(a, "away")
    Traceback (most recent call last):
        ...
    agentdesk.errors.IllegalTransitionError: Cannot change from busy to away. Valid: available, on_break, in_meeting, offline
    """
    target = parse_status(requested)
    current = agent.status
    if not can_transition(current, target):
        raise IllegalTransitionError(current, target, allowed_transitions(current))
    agent.apply_status_transition(target, reason)
    return agent
