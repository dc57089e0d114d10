"""
Environment configuration and the Google API key registry.
"""
import os
from typing import Dict, Optional

from services.exceptions import InvalidArgument

ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
API_VERSION = os.getenv("API_VERSION", "1.0.0")
ALLOWED_ORIGINS_STR = os.getenv("ALLOWED_ORIGINS", "*")
ALLOWED_ORIGINS = (
    [origin.strip() for origin in ALLOWED_ORIGINS_STR.split(",")]
    if ALLOWED_ORIGINS_STR and ALLOWED_ORIGINS_STR != "*"
    else ["*"]
)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
GEOCODE_TIMEOUT_SECONDS = float(os.getenv("GEOCODE_TIMEOUT_SECONDS", "10.0"))

DEFAULT_API = "default"

_keys: Dict[str, str] = {}


def set_key(key: str, api: str = DEFAULT_API) -> None:
    if not isinstance(key, str) or not key.strip():
        raise InvalidArgument("key", "expected a non-empty string")
    _keys[api] = key.strip()


def clear_keys() -> None:
    _keys.clear()


def google_keys() -> Dict[str, str]:
    return dict(_keys)


def get_api_key(api: str) -> Optional[str]:
    """
    Resolve the key for ``api``: registered key, then the ``default`` key,
    then ``GOOGLE_<API>_API_KEY``, then ``GOOGLE_MAPS_API_KEY``.
    """
    key = _keys.get(api) or _keys.get(DEFAULT_API)
    if key:
        return key
    for var in (f"GOOGLE_{api.upper()}_API_KEY", "GOOGLE_MAPS_API_KEY"):
        value = os.getenv(var)
        if value and value.strip():
            return value.strip()
    return None
