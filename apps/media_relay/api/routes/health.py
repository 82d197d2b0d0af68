"""Health check (excluded from request logs)."""

from datetime import datetime, timezone

from fastapi import APIRouter

from media_relay.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(timestamp=datetime.now(timezone.utc).isoformat())
