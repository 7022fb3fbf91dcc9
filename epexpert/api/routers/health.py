"""Health check endpoint."""
from __future__ import annotations

from fastapi import APIRouter

from ...config import get_settings

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
def healthcheck() -> dict[str, str]:
    settings = get_settings()
    return {
        "status": "ok",
        "app": settings.app_name,
        "version": settings.api_version,
        "content_pack": settings.content_pack,
        "hestia_hemodynamic_policy": settings.hestia_hemodynamic_policy.value,
        "high_wells_ddimer_policy": settings.high_wells_ddimer_policy.value,
    }
