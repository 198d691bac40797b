"""
api.agents
==========

``/api/agents`` endpoints.  Handlers only translate between HTTP and
:class:`agentdesk.service.AgentService`; core errors propagate to the
handlers registered in :pymod:`api.main`.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from agentdesk.service import AgentService
from .deps import get_service
from .schemas import AgentCreate, AgentUpdate, StatusChangeRequest, send_success

router = APIRouter(prefix="/api/agents", tags=["agents"])

AGENT_CREATED = "Agent created successfully"
AGENT_UPDATED = "Agent updated successfully"
AGENT_STATUS_UPDATED = "Agent status updated successfully"
AGENT_DELETED = "Agent deleted successfully"


# ---------- GET /api/agents ----------
@router.get("")
def list_agents(
    status: Optional[str] = Query(None, description="Exact status filter"),
    department: Optional[str] = Query(None, description="Exact department filter"),
    svc: AgentService = Depends(get_service),
):
    agents = svc.list_agents(status=status, department=department)
    return send_success("Agents retrieved successfully", agents)


# ---------- GET /api/agents/status/summary ----------
@router.get("/status/summary")
def status_summary(svc: AgentService = Depends(get_service)):
    """Head-count and integer percentage for every status."""
    return send_success("Status summary retrieved successfully", svc.status_summary())


@router.get("/status/summary/chart")
def status_summary_chart(svc: AgentService = Depends(get_service)):
    """The same summary rendered as a PNG bar chart."""
    from agentdesk.viz import status_chart_png

    return Response(content=status_chart_png(svc.status_summary()), media_type="image/png")


# ---------- GET /api/agents/{agent_id} ----------
@router.get("/{agent_id}")
def get_agent(agent_id: str, svc: AgentService = Depends(get_service)):
    return send_success("Agent retrieved successfully", svc.get_agent(agent_id))


@router.get("/{agent_id}/transitions")
def get_allowed_transitions(agent_id: str, svc: AgentService = Depends(get_service)):
    """Statuses the agent may move to next."""
    return send_success("Allowed transitions retrieved successfully", svc.allowed_transitions(agent_id))


# ---------- POST /api/agents ----------
@router.post("", status_code=201)
def create_agent(body: AgentCreate, svc: AgentService = Depends(get_service)):
    agent = svc.create_agent(
        agent_code=body.agent_code,
        name=body.name,
        email=body.email,
        department=body.department,
        skills=body.skills,
        status=body.status,
    )
    return send_success(AGENT_CREATED, agent, status_code=201)


# ---------- PUT /api/agents/{agent_id} ----------
@router.put("/{agent_id}")
def update_agent(agent_id: str, body: AgentUpdate, svc: AgentService = Depends(get_service)):
    agent = svc.update_agent_profile(
        agent_id,
        name=body.name,
        email=body.email,
        department=body.department,
        skills=body.skills,
    )
    return send_success(AGENT_UPDATED, agent)


# ---------- PATCH /api/agents/{agent_id}/status ----------
@router.patch("/{agent_id}/status")
def update_agent_status(agent_id: str, body: StatusChangeRequest, svc: AgentService = Depends(get_service)):
    agent = svc.attempt_transition(agent_id, body.status, body.reason)
    return send_success(AGENT_STATUS_UPDATED, agent)


# ---------- DELETE /api/agents/{agent_id} ----------
@router.delete("/{agent_id}")
def delete_agent(agent_id: str, svc: AgentService = Depends(get_service)):
    svc.delete_agent(agent_id)
    return send_success(AGENT_DELETED)
