"""
api.deps
========

FastAPI dependency providers.

This is the composition root: one :class:`AgentRegistry` per process,
wrapped by one :class:`AgentService`.  Tests swap either out through
``app.dependency_overrides``.
"""

from functools import lru_cache

from agentdesk.registry import AgentRegistry
from agentdesk.service import AgentService
from agentdesk.settings import Settings, settings


@lru_cache
def get_settings() -> Settings:
    """Return application settings."""
    return settings


@lru_cache
def get_registry() -> AgentRegistry:
    """Singleton in-memory registry (lives as long as the process)."""
    return AgentRegistry()


@lru_cache
def get_service() -> AgentService:
    """Singleton service bound to the process registry."""
    return AgentService(get_registry(), default_status=get_settings().default_status)
