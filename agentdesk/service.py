"""
agentdesk.service
=================

The operations the HTTP layer calls.  :class:`AgentService` owns no
state of its own: it is handed an :class:`~agentdesk.registry.AgentRegistry`
by the composition root (see :pymod:`api.deps`) and returns detached
views, never live records.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Iterable, List, Optional

from .lifecycle import advance_status, allowed_transitions
from .models import Agent, AgentStatus, isoformat_utc, parse_status, utcnow
from .registry import AgentRegistry

logger = logging.getLogger(__name__)


def _percent(count: int, total: int) -> int:
    # share first, then scale and round half-up: 23/40 -> 57, 1/8 -> 13
    if total <= 0:
        return 0
    return int(math.floor(count / total * 100 + 0.5))


class AgentService:
    """Create, read, update, delete and transition agents."""

    def __init__(
        self,
        registry: Optional[AgentRegistry] = None,
        default_status: AgentStatus | str = AgentStatus.AVAILABLE,
    ) -> None:
        self.registry = registry if registry is not None else AgentRegistry()
        self.default_status = parse_status(default_status)

    def create_agent(
        self,
        agent_code: str,
        name: str,
        email: str,
        department: Optional[str] = None,
        skills: Iterable[str] = (),
        status: AgentStatus | str | None = None,
    ) -> Dict[str, Any]:
        """Register a new agent; ``status`` falls back to the configured default."""
        initial = parse_status(status) if status else self.default_status
        agent = Agent.new(agent_code, name, email, department, skills, initial)
        with self.registry.lock:
            self.registry.insert(agent)
            view = agent.to_external_view()
        logger.info(f"Created agent {agent.id} ({agent_code}) with status {initial}")
        return view

    def get_agent(self, agent_id: str) -> Dict[str, Any]:
        with self.registry.lock:
            return self.registry.get(agent_id).to_external_view()

    def list_agents(
        self,
        status: AgentStatus | str | None = None,
        department: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        wanted = parse_status(status) if status else None
        with self.registry.lock:
            return [a.to_external_view() for a in self.registry.list(wanted, department or None)]

    def update_agent_profile(
        self,
        agent_id: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
        department: Optional[str] = None,
        skills: Optional[Iterable[str]] = None,
    ) -> Dict[str, Any]:
        """Partial update; empty values leave the current ones in place."""
        with self.registry.lock:
            agent = self.registry.get(agent_id)
            agent.apply_profile_update(name=name, email=email, department=department, skills=skills)
            view = agent.to_external_view()
        logger.info(f"Updated profile of agent {agent_id}")
        return view

    def attempt_transition(
        self,
        agent_id: str,
        status: AgentStatus | str | None,
        reason: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Look up the agent, then hand off to :pyfunc:`advance_status`."""
        with self.registry.lock:
            agent = self.registry.get(agent_id)
            previous = agent.status
            advance_status(agent, status, reason)
            view = agent.to_external_view()
        logger.info(f"Agent {agent_id} moved {previous} -> {agent.status}")
        return view

    def allowed_transitions(self, agent_id: str) -> Dict[str, Any]:
        with self.registry.lock:
            current = self.registry.get(agent_id).status
        return {
            "status": current.value,
            "allowedTransitions": [s.value for s in allowed_transitions(current)],
        }

    def delete_agent(self, agent_id: str) -> None:
        self.registry.remove(agent_id)
        logger.info(f"Deleted agent {agent_id}")

    def status_summary(self) -> Dict[str, Any]:
        """Head-count and rounded percentage per status."""
        with self.registry.lock:
            counts = self.registry.count_by_status()
        total = sum(counts.values())
        return {
            "totalAgents": total,
            "statusCounts": {s.value: n for s, n in counts.items()},
            "statusPercentages": {s.value: _percent(n, total) for s, n in counts.items()},
            "lastUpdated": isoformat_utc(utcnow()),
        }
