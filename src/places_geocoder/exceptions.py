"""Exception hierarchy for places_geocoder."""

from typing import Optional


class GeocoderError(Exception):
    """Base class for every error raised by this package."""
    pass


class ConfigurationError(GeocoderError):
    """Raised when configuration cannot be loaded from the environment."""
    pass


class UsageError(GeocoderError, ValueError):
    """Raised when a geocoding call is made without a location."""
    pass


class MissingFilterValueError(GeocoderError, ValueError):
    """Raised when an allowed components filter has no value."""

    def __init__(self, filter_name: str):
        self.filter_name = filter_name
        super().__init__(f"Value not specified for filter {filter_name}")


class TransportError(GeocoderError):
    """Raised when the HTTP layer reports an error response."""

    def __init__(self, message: str, status_line: Optional[str] = None):
        self.status_line = status_line
        super().__init__(message)


class ParseError(GeocoderError, ValueError):
    """Raised when the response body is not a JSON object."""
    pass


class ApiStatusError(GeocoderError):
    """Raised when the API answers with a status other than OK or ZERO_RESULTS."""

    def __init__(self, url: str, status: Optional[str], error_message: Optional[str] = None):
        self.url = url
        self.status = status
        self.error_message = error_message
        message = f"{url}: Google Places API returned status '{status}'"
        if error_message:
            message = f"{message}: {error_message}"
        super().__init__(message)
