"""
Pytest configuration: make sure `import agentdesk` and `import api` work
regardless of where pytest is invoked, and provide fresh per-test state.

The project root (one directory above *tests/*) is prepended to
``sys.path`` **before** any tests are collected.
"""

import sys
from pathlib import Path

import pytest

# /path/to/project/tests -> project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from agentdesk.registry import AgentRegistry  # noqa: E402
from agentdesk.service import AgentService  # noqa: E402


@pytest.fixture
def registry():
    return AgentRegistry()


@pytest.fixture
def service(registry):
    return AgentService(registry)


@pytest.fixture
def client(service):
    """TestClient wired to a fresh service via dependency overrides."""
    from fastapi.testclient import TestClient

    from api.deps import get_service
    from api.main import create_app

    app = create_app()
    app.dependency_overrides[get_service] = lambda: service
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
