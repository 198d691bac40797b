"""
agentdesk.models
================

The agent record and the closed set of statuses it can be in.  Like the
rest of the core, these objects carry **no** web-framework dependency;
the HTTP layer only ever sees the plain dicts produced by
:pymeth:`Agent.to_external_view`.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from .errors import InvalidStatusError


class AgentStatus(Enum):
    """Legal workflow states for an agent.  Values are the wire strings."""
    AVAILABLE = "available"
    BUSY = "busy"
    AWAY = "away"
    OFFLINE = "offline"
    ON_BREAK = "on_break"
    IN_MEETING = "in_meeting"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def values(cls) -> Tuple[str, ...]:
        return tuple(s.value for s in cls)


def parse_status(value: AgentStatus | str) -> AgentStatus:
    """
    Return the :class:`AgentStatus` for *value*.

    Raises :class:`~agentdesk.errors.InvalidStatusError` listing every
    valid status when *value* is not one of them.
    """
    if isinstance(value, AgentStatus):
        return value
    try:
        return AgentStatus(value)
    except ValueError:
        raise InvalidStatusError(value, AgentStatus.values()) from None


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def isoformat_utc(ts: datetime) -> str:
    return ts.isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class StatusChange:
    """One entry of :pyattr:`Agent.status_history`."""
    status: AgentStatus
    reason: Optional[str]
    timestamp: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "reason": self.reason,
            "timestamp": isoformat_utc(self.timestamp),
        }


@dataclass
class Agent:
    """
    A tracked worker.

    Parameters
    ----------
    id : str
        Opaque identifier, assigned once and used as the registry key.
    agent_code : str
        Business identifier, unique across the registry and never edited.
    name, email : str
        Contact details.
    department : str | None
        Team the agent belongs to.
    skills : set[str]
        Unordered skill tags.
    status : AgentStatus
        Current workflow state.
    status_reason : str | None
        Note attached to the most recent status change.
    status_history : list[StatusChange]
        Every applied transition, oldest first.
    """
    id: str
    agent_code: str
    name: str
    email: str
    department: Optional[str] = None
    skills: Set[str] = field(default_factory=set)
    status: AgentStatus = AgentStatus.AVAILABLE
    status_reason: Optional[str] = None
    status_history: List[StatusChange] = field(default_factory=list)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @classmethod
    def new(
        cls,
        agent_code: str,
        name: str,
        email: str,
        department: Optional[str] = None,
        skills: Iterable[str] = (),
        status: AgentStatus = AgentStatus.AVAILABLE,
    ) -> "Agent":
        """Build a fresh record with a new id and matching timestamps."""
        now = utcnow()
        return cls(
            id=uuid.uuid4().hex,
            agent_code=agent_code,
            name=name,
            email=email,
            department=department,
            skills=set(skills or ()),
            status=parse_status(status),
            created_at=now,
            updated_at=now,
        )

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------
    def _touch(self) -> datetime:
        # never step backwards, even if the wall clock does
        now = max(utcnow(), self.updated_at)
        self.updated_at = now
        return now

    def apply_profile_update(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
        department: Optional[str] = None,
        skills: Optional[Iterable[str]] = None,
    ) -> None:
        """Replace only the truthy fields given; status is never touched."""
        if name:
            self.name = name
        if email:
            self.email = email
        if department:
            self.department = department
        if skills:
            self.skills = set(skills)
        self._touch()

    def apply_status_transition(self, new_status: AgentStatus, reason: Optional[str] = None) -> None:
        """
        Move to *new_status* and record it in the history.

        No legality check happens here; callers go through
        :pyfunc:`agentdesk.lifecycle.advance_status`.
        """
        now = self._touch()
        self.status = new_status
        self.status_reason = reason
        self.status_history.append(StatusChange(new_status, reason, now))

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------
    def to_external_view(self) -> Dict[str, Any]:
        """Detached, JSON-ready snapshot of the record."""
        return {
            "id": self.id,
            "agentCode": self.agent_code,
            "name": self.name,
            "email": self.email,
            "department": self.department,
            "skills": sorted(self.skills),
            "status": self.status.value,
            "statusReason": self.status_reason,
            "statusHistory": [h.to_dict() for h in self.status_history],
            "createdAt": isoformat_utc(self.created_at),
            "updatedAt": isoformat_utc(self.updated_at),
        }
