"""
agentdesk.settings
==================

Configuration settings for the AgentDesk service.

Values come from ``AGENTDESK_*`` environment variables (or a ``.env``
file) and fall back to the defaults below.
"""

from __future__ import annotations

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import AgentStatus


class Settings(BaseSettings):
    """Pydantic model for application settings, loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="AGENTDESK_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # API settings
    api_host: str = Field("127.0.0.1", description="Interface uvicorn binds to")
    api_port: int = Field(8000, description="Port uvicorn listens on")
    api_debug: bool = Field(False, description="Enable auto-reload and verbose logging")
    log_level: str = Field("INFO", description="Root logging level")
    cors_origins: List[str] = Field(
        default=[
            "http://localhost:5173",    # Vite dev server default port
            "http://127.0.0.1:5173",
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        description="Origins allowed by the CORS middleware",
    )

    # Agent workflow
    default_status: AgentStatus = Field(
        AgentStatus.AVAILABLE, description="Status given to agents created without one"
    )
    seed_demo_data: bool = Field(False, description="Load the demo roster at startup")


# Initialize settings
settings = Settings()
