import time
from datetime import datetime, timezone
from fastapi import APIRouter
from app.core.config import get_settings
from app.db import get_pool_status
from app.schemas.health import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])

# Process start, for uptime
START_TIME = time.monotonic()

@router.get("", response_model=HealthResponse)
def get_health():
    """Basic liveness check"""
    return HealthResponse(status="OK", timestamp=datetime.now(timezone.utc))

@router.get("/detailed", response_model=HealthResponse)
def get_detailed_health():
    """Uptime, version and connection pool information"""
    settings = get_settings()
    return HealthResponse(
        status="OK",
        timestamp=datetime.now(timezone.utc),
        details={
            "uptime_ms": int((time.monotonic() - START_TIME) * 1000),
            "version": settings.API_VERSION,
            "environment": settings.ENVIRONMENT,
            "database": get_pool_status(),
        },
    )
