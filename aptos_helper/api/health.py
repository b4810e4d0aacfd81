"""Health check endpoints."""
import time
from datetime import datetime, timezone

from fastapi import APIRouter

from aptos_helper.models.schemas import HealthResponse, StatusResponse

router = APIRouter(tags=["health"])

_started_at = time.monotonic()


def process_uptime() -> float:
    """Seconds since the process imported this module."""
    return time.monotonic() - _started_at


@router.get("/", response_model=StatusResponse)
async def status_check() -> StatusResponse:
    """Report that the bot process is running."""
    return StatusResponse(
        status="Aptos Community Helper Bot is running!",
        timestamp=datetime.now(timezone.utc),
    )


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", uptime=process_uptime())
