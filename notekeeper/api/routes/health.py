"""Probes — process liveness and store reachability.

Invariants:
    - /health/ never touches the store: it answers as long as the event loop runs
    - /health/ready answers 503 until db_manager exists and SELECT 1 succeeds
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from notekeeper.infrastructure import database

router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE = "notekeeper-api"


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness():
    return {"status": "healthy", "service": SERVICE}


@router.get("/ready")
async def readiness():
    """Ready only when the relational store answers."""
    # looked up per call: init_db replaces the module attribute at startup
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "checks": {"database": "unreachable"}},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
