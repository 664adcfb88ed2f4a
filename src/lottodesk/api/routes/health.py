"""Health check routes — liveness, readiness, and general health."""

from __future__ import annotations

import time
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from lottodesk.api.schemas.common import HealthResponse
from lottodesk.core import database

router = APIRouter()


def _database_state(request: Request) -> str:
    settings = request.app.state.settings
    if not settings.database_configured:
        return "not_configured"
    return "connected" if database.is_pool_ready() else "disconnected"


@router.get("/health", response_model=HealthResponse)
def health_check(request: Request) -> dict[str, Any]:
    """Application health check endpoint."""
    return {
        "status": "ok",
        "environment": request.app.state.settings.app_env,
        "database": _database_state(request),
    }


@router.get("/health/live")
def liveness_probe() -> dict[str, Any]:
    """Is the process alive and responding?"""
    return {"status": "alive"}


@router.get("/health/ready", response_model=None)
def readiness_probe(request: Request) -> dict[str, Any] | JSONResponse:
    """Is the database reachable?

    An unconfigured database only makes the service unready in production;
    elsewhere the API runs in its degraded "503 on /api" mode.
    """
    checks: dict[str, Any] = {}
    ready = True
    state = _database_state(request)

    if state == "connected":
        try:
            start = time.perf_counter()
            conn = database.get_connection()
            try:
                with conn.cursor() as cur:
                    cur.execute("SELECT 1 FROM DUAL")
                    cur.fetchone()
            finally:
                conn.close()
            checks["database"] = {
                "status": "ok",
                "response_time_ms": round((time.perf_counter() - start) * 1000, 1),
            }
        except Exception as exc:
            checks["database"] = {"status": "error", "detail": str(exc)}
            ready = False
    else:
        checks["database"] = {"status": state}
        if request.app.state.settings.is_production:
            ready = False

    body = {"status": "ready" if ready else "not_ready", "checks": checks}
    if not ready:
        return JSONResponse(content=body, status_code=503)
    return body
