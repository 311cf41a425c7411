from datetime import datetime
from fastapi import APIRouter, Depends
from src.app.services.availability import ServiceAvailability
from src.app.services.cache import Cache
from src.depends import get_availability, get_cache

router = APIRouter()


@router.get("/health")
async def health_check(
    cache: Cache = Depends(get_cache),
    availability: ServiceAvailability = Depends(get_availability),
):
    """Liveness plus the degradation state of Redis-backed features"""
    queue_available = await availability.is_available()
    return {
        "success": True,
        "data": {
            "status": "ok",
            "timestamp": datetime.utcnow().isoformat() + "Z",
            "cache": "available" if cache.available else "unavailable",
            "export_mode": "queued" if queue_available else "inline",
        },
    }
