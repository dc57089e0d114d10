from typing import Optional


STATUS_MESSAGES = {
    "ZERO_RESULTS": "Address not found - please check spelling and completeness",
    "OVER_QUERY_LIMIT": "Geocoding API quota exceeded",
    "OVER_DAILY_LIMIT": "Geocoding API daily limit exceeded or billing not enabled",
    "REQUEST_DENIED": "Geocoding API access denied - check API key permissions",
    "INVALID_REQUEST": "Invalid address format",
    "UNKNOWN_ERROR": "Geocoding service error - the request may succeed if tried again",
}


class GeocodingError(Exception):
    """Base class for every error raised while geocoding."""


class MissingCredential(GeocodingError, ValueError):
    def __init__(self, message: str = "A valid Google Developers API key is required"):
        super().__init__(message)


class InvalidArgument(GeocodingError, ValueError):
    """A parameter failed validation. ``parameter`` names the offender."""

    def __init__(self, parameter: str, message: str):
        self.parameter = parameter
        super().__init__(f"{parameter}: {message}")


class TransportFailure(GeocodingError, RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class RemoteAPIError(GeocodingError):
    """The service answered but reported a non-OK ``status``."""

    def __init__(self, status: str, error_message: Optional[str] = None):
        self.status = status
        self.error_message = error_message
        detail = describe_status(status)
        if error_message:
            detail = f"{detail} ({error_message})"
        super().__init__(detail)


def describe_status(status: Optional[str]) -> str:
    return STATUS_MESSAGES.get(status or "", f"Geocoding failed: {status}")
