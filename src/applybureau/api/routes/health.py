"""Health check endpoints."""

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from applybureau.api.deps import DbSession
from applybureau.config import get_settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check."""
    settings = get_settings()
    return {"status": "healthy", "service": settings.app_name, "environment": settings.app_env}


@router.get("/health/db")
async def database_health(db: DbSession):
    """Database connectivity check."""
    try:
        await db.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "connected"}
    except SQLAlchemyError as e:
        return {"status": "unhealthy", "database": "disconnected", "error": str(e)}
