from datetime import datetime, timezone

from fastapi import APIRouter

from app.settings import settings
from app.models.health.responses import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        name=settings.app_name,
        version=settings.app_version,
        timestamp=datetime.now(timezone.utc),
    )
