from datetime import datetime, timezone
from fastapi import APIRouter
from config import API_VERSION, ENVIRONMENT, GEOCODE_TIMEOUT_SECONDS, get_api_key
from services.geocoding_service import GEOCODE_URL


router = APIRouter(prefix="/v1", tags=["health"])


@router.get("/health")
async def health():
    """Liveness plus whether a geocode key can be resolved server-side."""
    return {
        "status": "healthy",
        "version": API_VERSION,
        "environment": ENVIRONMENT,
        "geocode_key_configured": get_api_key("geocode") is not None,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/version")
async def version():
    return {
        "version": API_VERSION,
        "upstream": GEOCODE_URL,
        "timeout_seconds": GEOCODE_TIMEOUT_SECONDS,
        "geocode_endpoint": "/api/v1/geocoding/geocode",
    }
