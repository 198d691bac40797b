"""
tests/test_lifecycle.py
=======================

Unit tests for the transition table and agentdesk.lifecycle.advance_status
"""

import pytest

from agentdesk.errors import IllegalTransitionError, InvalidStatusError
from agentdesk.lifecycle import (
    TRANSITIONS,
    _check_table_is_total,
    advance_status,
    allowed_transitions,
    can_transition,
)
from agentdesk.models import Agent, AgentStatus


def _agent(status=AgentStatus.AVAILABLE):
    return Agent.new("AG-1", "Ada", "ada@example.com", status=status)


def _state(a):
    return a.status, list(a.status_history), a.updated_at, a.status_reason


def test_table_is_total():
    for status in AgentStatus:
        assert status in TRANSITIONS


def test_table_targets_are_statuses():
    for targets in TRANSITIONS.values():
        assert all(isinstance(t, AgentStatus) for t in targets)


def test_table_is_read_only():
    with pytest.raises(TypeError):
        TRANSITIONS[AgentStatus.OFFLINE] = ()


def test_partial_table_is_rejected():
    partial = {AgentStatus.AVAILABLE: (AgentStatus.BUSY,)}
    with pytest.raises(RuntimeError):
        _check_table_is_total(partial)


def test_available_targets():
    assert allowed_transitions(AgentStatus.AVAILABLE) == (
        AgentStatus.BUSY, AgentStatus.OFFLINE, AgentStatus.AWAY,
    )
    assert can_transition(AgentStatus.AVAILABLE, AgentStatus.BUSY)
    assert not can_transition(AgentStatus.AVAILABLE, AgentStatus.IN_MEETING)


def test_good_transition():
    """AVAILABLE → BUSY should succeed and be recorded."""
    a = _agent()
    advance_status(a, "busy", "on a call")
    assert a.status is AgentStatus.BUSY
    assert len(a.status_history) == 1
    assert a.status_history[-1].status is AgentStatus.BUSY
    assert a.status_history[-1].reason == "on a call"


def test_illegal_transition_lists_alternatives():
    """AVAILABLE → IN_MEETING is not allowed; the error names the legal targets."""
    a = _agent()
    with pytest.raises(IllegalTransitionError) as exc:
        advance_status(a, AgentStatus.IN_MEETING)
    err = exc.value
    assert err.current is AgentStatus.AVAILABLE
    assert err.requested is AgentStatus.IN_MEETING
    assert [s.value for s in err.allowed] == ["busy", "offline", "away"]
    assert str(err) == "Cannot change from available to in_meeting. Valid: busy, offline, away"


def test_illegal_transition_does_not_mutate():
    a = _agent()
    before = _state(a)
    with pytest.raises(IllegalTransitionError):
        advance_status(a, "on_break", "coffee")
    assert _state(a) == before


def test_unknown_status_wins_over_illegal_transition():
    a = _agent(AgentStatus.OFFLINE)
    before = _state(a)
    with pytest.raises(InvalidStatusError):
        advance_status(a, "vacation")
    assert _state(a) == before


def test_every_listed_transition_is_applicable():
    for source, targets in TRANSITIONS.items():
        for target in targets:
            a = _agent(source)
            advance_status(a, target)
            assert a.status is target
