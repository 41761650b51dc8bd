"""Health & Readiness Probes - liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready runs SELECT 1 through get_db; an uninitialized or
      unreachable database surfaces as DatabaseError → 503 envelope
"""

import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database import get_db

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "app-backend", "version": "0.1.0"}


@router.get("/ready")
async def readiness_check(db: AsyncSession = Depends(get_db)):
    """Readiness probe, includes database connectivity."""
    await db.execute(text("SELECT 1"))
    return {"status": "ready", "checks": {"database": "healthy"}}
