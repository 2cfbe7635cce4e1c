"""
Health checks - for load balancers, Kubernetes, and monitoring.
Challenge: Fast liveness; readiness confirms the timezone rules are loadable.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from transform_api.config import get_settings
from transform_api.core.errors import EnvironmentFailure
from transform_api.core.timezones import load_location

router = APIRouter()
settings = get_settings()


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready():
    """Readiness: can /json localize timestamps?"""
    try:
        load_location(settings.timezone_name)
    except EnvironmentFailure as exc:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "detail": exc.detail},
        )
    return {"status": "ready"}
