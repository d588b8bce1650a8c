# 📄 File: sportclub/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# Health check addresses that tell us whether the club API is running and whether it can reach
# its database, like a quick checkup for the system.
# 🧪 Purpose (Technical Summary):
# Liveness and readiness endpoints for load balancers and orchestrators; readiness pings the
# database through the connection manager and reports sports cache statistics.
# 🔗 Dependencies:
# FastAPI, sportclub.shared.infrastructure (database, cache), datetime
# 🔄 Connected Modules / Calls From:
# sportclub.api.v1.router, monitoring systems, load balancers

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from sportclub.shared.config.settings import get_settings
from sportclub.shared.infrastructure.cache.memory_cache import get_sports_cache
from sportclub.shared.infrastructure.database.connection import database_health_check as db_health_check

logger = logging.getLogger(__name__)

# Create router for health endpoints
health_router = APIRouter()

SERVICE_NAME = "sportclub-api"


@health_router.get("/health",
                   summary="Basic Health Check",
                   description="Basic health check endpoint for load balancers and monitoring")
async def health_check() -> JSONResponse:
    """
    Basic health check endpoint

    Returns OK as long as the process serves requests.
    """
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": SERVICE_NAME,
            "version": get_settings().APP_VERSION
        }
    )


@health_router.get("/health/live",
                   summary="Liveness Probe",
                   description="Liveness probe endpoint")
async def liveness_probe() -> Response:
    return Response(status_code=200, content="OK")


@health_router.get("/health/ready",
                   summary="Readiness Probe",
                   description="Readiness probe endpoint, checks database connectivity")
async def readiness_probe() -> JSONResponse:
    """
    Readiness probe

    Returns 200 when the database answers, 503 otherwise.
    """
    db_health = await db_health_check()
    timestamp = datetime.now(timezone.utc).isoformat()

    if db_health["status"] == "healthy":
        return JSONResponse(
            status_code=200,
            content={
                "status": "ready",
                "timestamp": timestamp,
                "components": {
                    "database": db_health,
                    "sports_cache": get_sports_cache().get_stats(),
                },
            }
        )

    logger.warning(f"Readiness probe failed: {db_health.get('error')}")
    return JSONResponse(
        status_code=503,
        content={
            "status": "not_ready",
            "reason": "database_unhealthy",
            "timestamp": timestamp,
            "components": {"database": db_health},
        }
    )
