"""Pydantic schemas for API responses."""
from datetime import datetime

from pydantic import BaseModel


class StatusResponse(BaseModel):
    """Root status check."""

    status: str
    timestamp: datetime


class HealthResponse(BaseModel):
    """Health check with process uptime."""

    status: str
    uptime: float  # seconds
