"""
Liveness endpoint. No side effects and no dependency on the mail transport.
"""

from typing import Annotated
from fastapi import APIRouter, Depends

from app.config import Settings
from app.application.dto.notification_dto import HealthResponseDTO
from app.domain.models.booking import utc_timestamp
from app.infrastructure.web.dependencies import get_app_settings


router = APIRouter()


@router.get("/health", response_model=HealthResponseDTO)
async def health_check(settings: Annotated[Settings, Depends(get_app_settings)]):
    """Health check endpoint for monitoring."""
    return {
        "status": "ok",
        "service": settings.service_name,
        "timestamp": utc_timestamp()
    }
