"""
agentdesk.errors
================

Error kinds raised by the core.  Each class carries the HTTP status the
request layer answers with, so :pymod:`api.main` needs a single handler
for the whole family.
"""

from __future__ import annotations

from typing import Iterable


class AgentDeskError(Exception):
    """Base class for every caller-facing core error."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AgentNotFoundError(AgentDeskError, LookupError):
    """Referenced agent id does not exist."""

    status_code = 404

    def __init__(self, agent_id: str) -> None:
        super().__init__("Agent not found")
        self.agent_id = agent_id


class DuplicateAgentCodeError(AgentDeskError):
    """An agent with the same ``agent_code`` is already registered."""

    status_code = 409

    def __init__(self, agent_code: str) -> None:
        super().__init__(f"Agent code {agent_code} already exists")
        self.agent_code = agent_code


class InvalidStatusError(AgentDeskError, ValueError):
    """Requested status is not a member of :class:`~agentdesk.models.AgentStatus`."""

    status_code = 400

    def __init__(self, value: object, valid: Iterable[str]) -> None:
        self.value = value
        self.valid = tuple(valid)
        super().__init__(f"Invalid status. Valid: {', '.join(self.valid)}")


class IllegalTransitionError(AgentDeskError, ValueError):
    """Requested status is valid but not reachable from the current one."""

    status_code = 400

    def __init__(self, current, requested, allowed) -> None:
        self.current = current
        self.requested = requested
        self.allowed = tuple(allowed)
        valid = ", ".join(str(s) for s in self.allowed)
        super().__init__(f"Cannot change from {current} to {requested}. Valid: {valid}")
