import logging

from fastapi import APIRouter, HTTPException
from api.schemas.geocoding_schemas import GeocodeRequest
from config import get_api_key
from services.exceptions import InvalidArgument, MissingCredential, RemoteAPIError, TransportFailure
from services.geocoding_service import check_status, first_location, google_geocode

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/geocoding", tags=["geocoding"])

REMOTE_STATUS_CODES = {
    "ZERO_RESULTS": 404,
    "OVER_QUERY_LIMIT": 429,
    "OVER_DAILY_LIMIT": 429,
    "REQUEST_DENIED": 403,
}


@router.post("/geocode")
def geocode(req: GeocodeRequest):
    """Geocode a single address using Google Maps API."""
    key = req.api_key or get_api_key("geocode")
    components = [c.model_dump() for c in req.components] if req.components else None

    try:
        response = google_geocode(
            req.address,
            key=key,
            bounds=req.bounds,
            language=req.language,
            region=req.region,
            components=components,
            simplify=req.simplify,
        )
        if not req.simplify:
            return {"success": True, "data": {"raw": response}}
        if req.check_status:
            check_status(response)
    except MissingCredential:
        raise HTTPException(status_code=400, detail="API key is required")
    except InvalidArgument as e:
        raise HTTPException(status_code=400, detail=str(e))
    except TransportFailure as e:
        raise HTTPException(status_code=502, detail=f"Geocoding error: {e}")
    except RemoteAPIError as e:
        logger.info("Geocoding returned status %s", e.status)
        raise HTTPException(status_code=REMOTE_STATUS_CODES.get(e.status, 400), detail=str(e))

    location = first_location(response)
    result = response.results[0] if response.results else None
    return {
        "success": True,
        "data": {
            "status": response.status,
            "latitude": location[0] if location else None,
            "longitude": location[1] if location else None,
            "formatted_address": result.formatted_address if result else None,
            "raw": response.model_dump(),
        },
    }
