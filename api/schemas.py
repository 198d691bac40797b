"""
api.schemas
===========

Request bodies and the uniform response envelope.

Bodies accept either the camelCase names used on the wire or their
snake_case field names; unknown keys are ignored.
"""

from __future__ import annotations

from typing import Any, List, Optional

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field


class AgentCreate(BaseModel):
    """Body of ``POST /api/agents``."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    agent_code: str = Field(..., alias="agentCode", min_length=1)
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    department: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    status: Optional[str] = None


class AgentUpdate(BaseModel):
    """Body of ``PUT /api/agents/{id}``; ``agentCode`` and ``status`` are not editable here."""
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    email: Optional[str] = None
    department: Optional[str] = None
    skills: Optional[List[str]] = None


class StatusChangeRequest(BaseModel):
    """
    Body of ``PATCH /api/agents/{id}/status``.

    ``status`` is optional here so an unknown agent answers 404 before a
    missing status answers 400.
    """
    model_config = ConfigDict(extra="ignore")

    status: Optional[str] = None
    reason: Optional[str] = None


class Envelope(BaseModel):
    success: bool
    message: str
    data: Any = None


def envelope(success: bool, message: str, data: Any = None, status_code: int = 200) -> JSONResponse:
    """Wrap *data* in ``{success, message, data}``."""
    body = Envelope(success=success, message=message, data=data)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def send_success(message: str, data: Any = None, status_code: int = 200) -> JSONResponse:
    return envelope(True, message, data, status_code)


def send_error(message: str, status_code: int) -> JSONResponse:
    return envelope(False, message, None, status_code)
