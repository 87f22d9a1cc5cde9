"""
API response models for FastAPI endpoints.

The success body of /api/ai/ask is raw text; these models cover the
structured error bodies and the operational endpoints.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""
    
    error: str = Field(
        description="Error category",
        examples=["Invalid request", "Invalid parameter", "Error processing your request"]
    )
    message: str = Field(
        description="Human-readable error message"
    )


class HealthResponse(BaseModel):
    """Response for health check endpoint."""
    
    status: str = Field(
        description="Overall health status",
        examples=["healthy", "unhealthy"]
    )
    version: str = Field(
        description="Gateway version",
        examples=["0.1.0"]
    )
    services: dict[str, str] = Field(
        description="Backend health status",
        examples=[{"ollama": "ok"}]
    )
    timestamp: datetime = Field(
        default_factory=datetime.utcnow,
        description="Health check timestamp (UTC)"
    )


class ServiceInfoResponse(BaseModel):
    """Response for the root endpoint."""
    
    service: str
    version: str
    docs: str = "/docs"
    health: str = "/health"
    ask: str = "/api/ai/ask"
    metrics: Optional[str] = None
