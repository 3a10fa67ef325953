"""
Health check endpoints
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from sqlalchemy import text
from jobpay.infrastructure.database import get_db
from jobpay.schemas.common import HealthResponse, ReadyResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health():
    """Basic health check"""
    return {"status": "ok"}


@router.get(
    "/ready",
    response_model=ReadyResponse,
    responses={503: {"model": ReadyResponse}},
)
def ready(db: Session = Depends(get_db)):
    """
    Readiness check - verifies DB connectivity

    Returns:
    - 200 if the database is reachable
    - 503 otherwise
    """
    checks = {
        "status": "ok",
        "database": "unknown",
    }

    try:
        db.execute(text("SELECT 1"))
        checks["database"] = "connected"
    except Exception as e:
        checks["database"] = f"error: {e.__class__.__name__}"
        checks["status"] = "not_ready"

    status_code = 200 if checks["status"] == "ok" else 503
    return JSONResponse(status_code=status_code, content=checks)
