"""Health check: liveness plus MongoDB connectivity."""
from fastapi import APIRouter

from restaurant_staff.core.config import settings
from restaurant_staff.db.mongodb import mongodb
from restaurant_staff.schemas.employee import HealthResponse
from restaurant_staff.utils.datetime_handler import DateTimeHandler

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    connected = await mongodb.ping()
    return {
        "status": "OK",
        "timestamp": DateTimeHandler.to_iso(DateTimeHandler.get_current_datetime()),
        "mongodb": "connected" if connected else "disconnected",
        "service": settings.PROJECT_NAME,
    }
