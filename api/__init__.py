"""HTTP layer for AgentDesk (FastAPI)."""
