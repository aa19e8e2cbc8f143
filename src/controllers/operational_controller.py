"""
Operational/Infrastructure endpoints
These endpoints are used by monitoring systems, load balancers, and DevOps tools
"""

import os
import time
from datetime import datetime, timezone

from fastapi import Request
from fastapi.responses import JSONResponse

from src.db.mongodb import ping_db

SERVICE_NAME = os.getenv("SERVICE_NAME", "storefront-service")

start_time = time.time()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def health(request: Request):
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "timestamp": _now(),
        "version": os.getenv("SERVICE_VERSION", "1.0.0"),
    }


async def readiness(request: Request):
    """Readiness probe - ready once MongoDB answers a ping"""
    if await ping_db():
        return {
            "status": "ready",
            "service": SERVICE_NAME,
            "timestamp": _now(),
            "checks": {"database": "connected"},
        }
    return JSONResponse(
        status_code=503,
        content={
            "status": "not ready",
            "service": SERVICE_NAME,
            "timestamp": _now(),
            "checks": {"database": "unavailable"},
        },
    )


def liveness(request: Request):
    """Liveness probe - check if the app is running"""
    return {
        "status": "alive",
        "service": SERVICE_NAME,
        "timestamp": _now(),
        "uptime": time.time() - start_time,
    }
