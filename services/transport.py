import logging
from typing import Any, Dict, Optional, Union

import requests
from pydantic import ValidationError

import config
from api.schemas.geocoding_schemas import GeocodeResponse
from services.exceptions import TransportFailure
from utils.url_builder import redact_url

logger = logging.getLogger(__name__)


def download_data(
    url: str,
    simplify: bool,
    proxies: Optional[Dict[str, str]] = None,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> Union[GeocodeResponse, str]:
    """
    GET ``url`` and return a ``GeocodeResponse`` (simplify) or the raw body text.
    ``proxies`` is handed to requests untouched.
    """
    http = session or requests
    safe_url = redact_url(url)
    try:
        response = http.get(
            url,
            proxies=proxies,
            timeout=timeout if timeout is not None else config.GEOCODE_TIMEOUT_SECONDS,
        )
        response.raise_for_status()
    except requests.HTTPError as exc:
        status_code = exc.response.status_code if exc.response is not None else None
        logger.warning("Geocoding request to %s failed with HTTP %s", safe_url, status_code)
        raise TransportFailure(f"Geocoding request failed with HTTP {status_code}", status_code=status_code) from exc
    except requests.RequestException as exc:
        logger.warning("Geocoding request to %s failed: %s", safe_url, exc)
        raise TransportFailure(f"Geocoding request failed: {exc}") from exc

    logger.debug("Geocoding response HTTP %s from %s", response.status_code, safe_url)
    if not simplify:
        return response.text

    try:
        payload: Any = response.json()
        return GeocodeResponse.model_validate(payload)
    except (ValueError, ValidationError) as exc:
        logger.warning("Unparseable geocoding response from %s: %s", safe_url, exc)
        raise TransportFailure(f"Malformed geocoding response: {exc}", status_code=response.status_code) from exc
