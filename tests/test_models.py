"""
tests/test_models.py
====================

Unit tests for the dataclass and enum defined in agentdesk.models.

Run:  pytest -q
"""

from datetime import timedelta

import pytest

from agentdesk.errors import InvalidStatusError
from agentdesk.models import Agent, AgentStatus, parse_status


def _agent(**kw):
    data = dict(agent_code="AG-1", name="Ada", email="ada@example.com",
                department="Support", skills=["billing", "chat"])
    data.update(kw)
    return Agent.new(**data)


def test_default_status():
    """New agent defaults to AVAILABLE with an empty history."""
    a = _agent()
    assert a.status is AgentStatus.AVAILABLE
    assert a.status_history == []
    assert a.created_at == a.updated_at


def test_str_on_status():
    """Enum __str__ returns its wire value."""
    assert str(AgentStatus.ON_BREAK) == "on_break"


def test_parse_status_accepts_member_and_string():
    assert parse_status(AgentStatus.BUSY) is AgentStatus.BUSY
    assert parse_status("in_meeting") is AgentStatus.IN_MEETING


def test_parse_status_rejects_unknown_and_lists_valid():
    with pytest.raises(InvalidStatusError) as exc:
        parse_status("sleeping")
    for value in AgentStatus.values():
        assert value in str(exc.value)


def test_profile_update_only_touches_truthy_fields():
    a = _agent()
    before = a.to_external_view()
    a.apply_profile_update(department="Sales", name="", skills=[])
    after = a.to_external_view()
    assert a.department == "Sales"
    for key in ("name", "email", "skills", "status", "statusHistory", "agentCode"):
        assert after[key] == before[key]
    assert a.updated_at >= a.created_at


def test_status_transition_appends_history():
    a = _agent()
    a.apply_status_transition(AgentStatus.BUSY, "on a call")
    assert a.status is AgentStatus.BUSY
    assert a.status_reason == "on a call"
    assert len(a.status_history) == 1
    assert a.status_history[-1].status is AgentStatus.BUSY
    assert a.status_history[-1].timestamp == a.updated_at


def test_updated_at_never_moves_backwards():
    a = _agent()
    a.updated_at = a.updated_at + timedelta(hours=1)
    future = a.updated_at
    a.apply_profile_update(name="Grace")
    assert a.updated_at >= future


def test_external_view_is_detached():
    a = _agent()
    a.apply_status_transition(AgentStatus.AWAY, "lunch")
    view = a.to_external_view()
    view["skills"].append("hacking")
    view["statusHistory"].clear()
    view["status"] = "offline"
    assert a.skills == {"billing", "chat"}
    assert len(a.status_history) == 1
    assert a.status is AgentStatus.AWAY


def test_external_view_shape():
    view = _agent().to_external_view()
    assert set(view) == {
        "id", "agentCode", "name", "email", "department", "skills", "status",
        "statusReason", "statusHistory", "createdAt", "updatedAt",
    }
    assert view["skills"] == ["billing", "chat"]
    assert view["createdAt"].endswith("Z")
