"""Health Routes — liveness and readiness of the User Registry API.

Invariants:
    - GET /health always returns 200 while the process serves requests
    - GET /health/ready returns 503 until the lifespan has attached a
      DatabaseSessionManager and that manager answers a trivial query
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check(request: Request):
    app = request.app
    return {"status": "healthy", "service": app.title, "version": app.version}


@router.get("/ready")
async def readiness_check(request: Request):
    """Report whether the database answers a trivial query."""
    db_manager = getattr(request.app.state, "db_manager", None)
    if db_manager is None:
        reason = "database_not_configured"
    elif not await db_manager.health_check():
        reason = "database_unavailable"
    else:
        return {"status": "ready", "checks": {"database": "healthy"}}

    logger.warning(f"Not ready: {reason}", extra={"path": request.url.path})
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )
