"""Health check endpoint."""

from datetime import datetime, timezone
from pathlib import Path

from fastapi import APIRouter
from pydantic import BaseModel

from ...config import settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str
    data_dir: str
    data_dir_ready: bool
    timestamp: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report service identity and whether stored pages can be read."""
    from ... import __version__

    data_dir = Path(settings.data_dir)
    ready = data_dir.is_dir()

    return HealthResponse(
        status="healthy" if ready else "degraded",
        service=settings.service_name,
        version=__version__,
        data_dir=str(data_dir),
        data_dir_ready=ready,
        timestamp=datetime.now(timezone.utc),
    )
