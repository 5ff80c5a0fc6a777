# sales_dashboard/api/routes/health.py
from datetime import datetime, timezone
from fastapi import APIRouter
from typing import Dict, Any
from loguru import logger

from ...config.database import db_connection
from ...models.database import HealthResponse
from ...config.setting import settings

router = APIRouter()

@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Basic health check with MongoDB connectivity"""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        mongodb="connected" if db_connection.health_check() else "disconnected"
    )

@router.get("/ready")
def readiness_check() -> Dict[str, Any]:
    """Readiness check with database connectivity"""
    db_healthy = db_connection.health_check()
    if not db_healthy:
        logger.warning("Readiness check failed: MongoDB unreachable")

    return {
        "status": "ready" if db_healthy else "not_ready",
        "database": "connected" if db_healthy else "disconnected",
        "ready": db_healthy
    }

@router.get("/status")
def detailed_status() -> Dict[str, Any]:
    """Detailed system status"""
    return {
        "api": {
            "status": "running",
            "version": settings.API_VERSION,
            "debug_mode": settings.DEBUG
        },
        "database": {
            "mongodb": {
                "status": "connected" if db_connection.health_check() else "disconnected",
                "uri": settings.MONGODB_URI.split('@')[1] if '@' in settings.MONGODB_URI else "local",
                "database_name": settings.DATABASE_NAME,
                "collection": settings.TRANSACTIONS_COLLECTION
            }
        },
        "configuration": {
            "default_page_size": settings.DEFAULT_PAGE_SIZE,
            "max_page_size": settings.MAX_PAGE_SIZE,
            "export_max_records": settings.EXPORT_MAX_RECORDS
        }
    }
