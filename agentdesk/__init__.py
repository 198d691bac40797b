"""
AgentDesk
=========

A small administrative service for tracking support agents and moving
them through a constrained status workflow.

Import structure
----------------
`import agentdesk` is intentionally cheap: the core sub-modules use only
the standard library.  *matplotlib* is only imported when you explicitly
access :pymod:`agentdesk.viz`, and *FastAPI* lives in the separate
:pymod:`api` package.

Sub-modules
~~~~~~~~~~~
- :pymod:`agentdesk.models`     – ``Agent`` dataclass + :class:`~agentdesk.models.AgentStatus` enum
- :pymod:`agentdesk.lifecycle`  – transition table + guard (`advance_status`)
- :pymod:`agentdesk.registry`   – ``AgentRegistry`` in-memory store
- :pymod:`agentdesk.service`    – ``AgentService`` operations used by the API
- :pymod:`agentdesk.errors`     – error kinds and their HTTP status
- :pymod:`agentdesk.settings`   – environment-driven configuration
- :pymod:`agentdesk.viz`        – status summary bar chart

Quick start
-----------
>>> from agentdesk.service import AgentService
>>> svc = AgentService()
>>> a = svc.create_agent("AG-1", "Ada", "ada@example.com", department="Support")
>>> svc.attempt_transition(a["id"], "busy", "on a call")["status"]
'busy'
"""

__all__ = [
    "models",
    "lifecycle",
    "registry",
    "service",
    "errors",
    "settings",
    "viz",
]

__version__ = "0.1.0"
