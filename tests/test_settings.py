"""
tests/test_settings.py
======================

Environment-driven configuration and its effect on the app.
"""

from fastapi.testclient import TestClient

from agentdesk.models import AgentStatus
from agentdesk.service import AgentService
from agentdesk.settings import Settings


def test_defaults():
    s = Settings(_env_file=None)
    assert s.api_port == 8000
    assert s.default_status is AgentStatus.AVAILABLE
    assert s.seed_demo_data is False


def test_env_override(monkeypatch):
    monkeypatch.setenv("AGENTDESK_DEFAULT_STATUS", "offline")
    monkeypatch.setenv("AGENTDESK_API_PORT", "9001")
    s = Settings(_env_file=None)
    assert s.default_status is AgentStatus.OFFLINE
    assert s.api_port == 9001


def test_seed_on_startup():
    from api.deps import get_service
    from api.main import create_app

    svc = AgentService()
    app = create_app(Settings(_env_file=None, seed_demo_data=True))
    app.dependency_overrides[get_service] = lambda: svc
    with TestClient(app) as client:
        total = client.get("/api/agents/status/summary").json()["data"]["totalAgents"]
    assert total == len(svc.registry) > 0
