"""
Health check endpoints.
"""

import time

from fastapi import APIRouter

from salonstock.application.dto.responses import ComponentHealthResponse, HealthResponse
from salonstock.config import get_settings

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check.

    Returns service status and uptime.
    """
    return HealthResponse(
        status="healthy",
        version=get_settings().app_version,
        uptime_seconds=time.time() - _start_time,
    )


@router.get("/db", response_model=HealthResponse)
async def db_health() -> HealthResponse:
    """
    Database health check.

    Tests SQLite connectivity and response time.
    """
    from salonstock.infrastructure.storage.sqlite import get_pool

    try:
        pool = await get_pool()
        start = time.time()
        async with pool.acquire() as conn:
            await conn.execute("SELECT 1")
        db_status = ComponentHealthResponse(
            name="sqlite",
            status="available",
            latency_ms=(time.time() - start) * 1000,
        )
    except Exception as e:
        db_status = ComponentHealthResponse(
            name="sqlite",
            status="unavailable",
            error=str(e),
        )

    return HealthResponse(
        status="healthy" if db_status.status == "available" else "unhealthy",
        version=get_settings().app_version,
        uptime_seconds=time.time() - _start_time,
        database=db_status,
    )
