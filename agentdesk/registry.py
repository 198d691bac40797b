"""
agentdesk.registry
==================

An in-memory registry that stores :class:`agentdesk.models.Agent`
objects keyed by their ``id``.

Only the standard library is used, so it can be unit-tested without a
web server.  Mutations are serialised by a re-entrant lock; the lock is
public so :class:`agentdesk.service.AgentService` can hold it across a
look-up followed by a status change.
"""

from __future__ import annotations

import threading
from typing import Dict, Iterator, List, Optional

from .errors import AgentNotFoundError, DuplicateAgentCodeError
from .models import Agent, AgentStatus


class AgentRegistry:
    """
    Dictionary-backed registry of agents, in insertion order.

    Example
    -------
    >>> reg = AgentRegistry()
    >>> a = reg.insert(Agent.new("A-001", "Ada", "ada@example.com"))
    >>> reg.get(a.id) is a
    True
    """

    def __init__(self) -> None:
        self._agents: Dict[str, Agent] = {}
        self.lock = threading.RLock()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def insert(self, agent: Agent) -> Agent:
        """Add *agent*; raise if its ``agent_code`` is already taken."""
        with self.lock:
            if self.find_by_code(agent.agent_code) is not None:
                raise DuplicateAgentCodeError(agent.agent_code)
            self._agents[agent.id] = agent
            return agent

    def get(self, agent_id: str) -> Agent:
        """Retrieve by id (raise AgentNotFoundError if not present)."""
        try:
            return self._agents[agent_id]
        except KeyError:
            raise AgentNotFoundError(agent_id) from None

    def find_by_code(self, agent_code: str) -> Optional[Agent]:
        for agent in list(self._agents.values()):
            if agent.agent_code == agent_code:
                return agent
        return None

    def list(
        self,
        status: Optional[AgentStatus] = None,
        department: Optional[str] = None,
    ) -> List[Agent]:
        """All agents, optionally narrowed by exact status and/or department."""
        with self.lock:
            agents = list(self._agents.values())
        if status is not None:
            agents = [a for a in agents if a.status == status]
        if department is not None:
            agents = [a for a in agents if a.department == department]
        return agents

    def remove(self, agent_id: str) -> Agent:
        with self.lock:
            try:
                return self._agents.pop(agent_id)
            except KeyError:
                raise AgentNotFoundError(agent_id) from None

    def clear(self) -> None:
        with self.lock:
            self._agents.clear()

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------
    def count(self) -> int:
        return len(self._agents)

    def count_by_status(self) -> Dict[AgentStatus, int]:
        """Agents per status; every status is present, zero-filled."""
        counts = {s: 0 for s in AgentStatus}
        for agent in self.list():
            counts[agent.status] += 1
        return counts

    # ------------------------------------------------------------------
    # Dunder helpers for convenience
    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[Agent]:
        return iter(self.list())

    def __len__(self) -> int:
        return len(self._agents)

    def __contains__(self, agent_id: object) -> bool:
        return agent_id in self._agents
