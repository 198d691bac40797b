"""
agentdesk.seed
==============

Sample roster used to populate a fresh registry for demos and the
dashboard.  Loading is idempotent: codes already registered are skipped.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from .service import AgentService

logger = logging.getLogger(__name__)

# Sample agents spread across departments and statuses
DEMO_AGENTS: List[Dict[str, Any]] = [
    {
        "agent_code": "AG-1001",
        "name": "Maria Garcia",
        "email": "maria.garcia@example.com",
        "department": "Support",
        "skills": ["billing", "spanish"],
        "status": "available",
    },
    {
        "agent_code": "AG-1002",
        "name": "David Kim",
        "email": "david.kim@example.com",
        "department": "Support",
        "skills": ["technical", "korean"],
        "status": "busy",
    },
    {
        "agent_code": "AG-1003",
        "name": "Patricia White",
        "email": "patricia.white@example.com",
        "department": "Sales",
        "skills": ["renewals"],
        "status": "away",
    },
    {
        "agent_code": "AG-1004",
        "name": "Thomas Brown",
        "email": "thomas.brown@example.com",
        "department": "Sales",
        "skills": ["enterprise", "upsell"],
        "status": "offline",
    },
    {
        "agent_code": "AG-1005",
        "name": "Jane Doe",
        "email": "jane.doe@example.com",
        "department": "Onboarding",
        "skills": ["training"],
        "status": "on_break",
    },
]


def seed_demo_agents(service: AgentService) -> int:
    """Insert every demo agent not already present; return how many were added."""
    added = 0
    for data in DEMO_AGENTS:
        if service.registry.find_by_code(data["agent_code"]) is not None:
            continue
        service.create_agent(**data)
        added += 1
    logger.info(f"Seeded {added} demo agents")
    return added
