"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")


class ReadinessResponse(BaseModel):
    """Response for GET /health/ready when the task store is reachable."""

    status: str = Field(default="ok", description="Readiness status")
    backend: str = Field(..., description="Configured task store (postgres or memory)")


class ReadinessErrorResponse(BaseModel):
    """Response for GET /health/ready when the database cannot be reached (503)."""

    status: str = Field(default="not_ready", description="Readiness status")
    message: str = Field(..., description="Reason (e.g. database unreachable)")
