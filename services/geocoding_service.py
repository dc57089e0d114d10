import logging
from typing import Any, Dict, Optional, Tuple, Union

import requests

from api.schemas.geocoding_schemas import GeocodeResponse
from services.exceptions import MissingCredential, RemoteAPIError
from services.transport import download_data
from utils.url_builder import construct_url, redact_url
from utils.validators import (
    check_address,
    check_logical,
    validate_bounds,
    validate_components,
    validate_language,
    validate_region,
)

logger = logging.getLogger(__name__)

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
OK_STATUSES = ("OK",)


def google_geocode(
    address: str,
    key: Optional[str],
    bounds: Any = None,
    language: Optional[str] = None,
    region: Optional[str] = None,
    components: Any = None,
    simplify: bool = True,
    proxies: Optional[Dict[str, str]] = None,
    session: Optional[requests.Session] = None,
) -> Union[GeocodeResponse, str]:
    """
    Geocode ``address`` with the Google Maps Geocoding API.

    The key is checked before anything else, then each parameter is validated
    in turn and the first failure is raised. Returns a ``GeocodeResponse`` when
    ``simplify`` is true, otherwise the raw JSON text. A non-OK ``status`` in
    the reply is returned as-is; see ``check_status``.
    """
    if not isinstance(key, str) or not key.strip():
        raise MissingCredential()

    simplify = check_logical(simplify)
    params = {
        "address": check_address(address),
        "bounds": validate_bounds(bounds),
        "language": validate_language(language),
        "region": validate_region(region),
        "components": validate_components(components),
        "key": key.strip(),
    }

    url = construct_url(GEOCODE_URL, params)
    logger.debug("Geocoding request %s", redact_url(url))
    return download_data(url, simplify, proxies=proxies, session=session)


def check_status(response: GeocodeResponse) -> GeocodeResponse:
    if response.status not in OK_STATUSES:
        raise RemoteAPIError(response.status, response.error_message)
    return response


def first_location(response: GeocodeResponse) -> Optional[Tuple[float, float]]:
    if not response.results:
        return None
    loc = response.results[0].geometry.location
    return loc.lat, loc.lng
