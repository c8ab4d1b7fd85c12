"""Google Places text-search geocoding client."""

import dataclasses
import json
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from requests.models import PreparedRequest

from .components import encode_components
from .config import ClientConfig
from .exceptions import ApiStatusError, ParseError, TransportError, UsageError
from .logging_config import get_logger
from .signing import sign_url
from .transport import RequestsTransport, Transport

logger = get_logger(__name__)

API_PATH = "/maps/api/place/textsearch/json"
ACCEPTED_STATUSES = ("OK", "ZERO_RESULTS")

# Option aliases accepted by GeocodingClient.create()
_OPTION_ALIASES = {
    "ua": "transport",
    "hl": "language",
    "gl": "region",
    "oe": "output_encoding",
    "client": "client_id",
    "private_key": "key",
}
_DISCARDED_OPTIONS = ("apiver",)

_SECRET_PARAM = re.compile(r"([?&](?:key|signature)=)[^&]*")

GeocodeResult = Dict[str, Any]


def redact_url(url: str) -> str:
    """Mask the key and signature query values of ``url``."""
    return _SECRET_PARAM.sub(r"\1***", url)


@dataclass(frozen=True)
class GeocodeRequest:
    """One forward or reverse lookup."""
    location: Union[str, bytes]
    reverse: bool = False

    @property
    def location_param(self) -> str:
        return "latlng" if self.reverse else "query"

    @property
    def encoded_location(self) -> bytes:
        if isinstance(self.location, bytes):
            return self.location
        return self.location.encode("utf-8")


class GeocodingClient:
    """
    Client for the Google Places text-search API.

    Example:
        client = GeocodingClient.create(key="...", language="en")
        results = client.geocode("Hollywood and Highland, Los Angeles, CA")
        place = client.reverse_geocode_first("37.778907,-122.39732")
    """

    def __init__(self, config: Optional[ClientConfig] = None, transport: Optional[Transport] = None):
        self.config = config if config is not None else ClientConfig()
        self._transport = transport

    @classmethod
    def create(cls, **options) -> 'GeocodingClient':
        """Build a client from keyword options, accepting the short aliases."""
        normalized: Dict[str, Any] = {}
        for name, value in options.items():
            if name in _DISCARDED_OPTIONS:
                continue
            canonical = _OPTION_ALIASES.get(name, name)
            # The canonical name wins when both spellings are given
            if canonical != name and canonical in options:
                continue
            normalized[canonical] = value

        transport = normalized.pop("transport", None)
        known = {field.name for field in dataclasses.fields(ClientConfig)}
        unknown = sorted(set(normalized) - known)
        if unknown:
            logger.debug("Ignoring unknown client options", options=unknown)

        settings = {name: value for name, value in normalized.items() if name in known and value is not None}
        return cls(ClientConfig(**settings), transport=transport)

    @property
    def transport(self) -> Transport:
        """The HTTP transport, created on first use."""
        if self._transport is None:
            self._transport = RequestsTransport(timeout=self.config.timeout)
        return self._transport

    @transport.setter
    def transport(self, transport: Transport) -> None:
        self._transport = transport

    @property
    def key(self) -> Optional[str]:
        return self.config.key

    @key.setter
    def key(self, key: Optional[str]) -> None:
        self.config = dataclasses.replace(self.config, key=key)

    def _query_parameters(self, request: GeocodeRequest) -> List[Tuple[str, Any]]:
        config = self.config
        params: List[Tuple[str, Any]] = [(request.location_param, request.encoded_location)]
        if config.language is not None:
            params.append(("language", config.language))
        if config.region is not None:
            params.append(("region", config.region))
        params.append(("oe", config.output_encoding))
        params.append(("sensor", "true" if config.sensor else "false"))
        components = encode_components(config.components)
        if components is not None:
            params.append(("components", components))
        return params

    def build_url(self, request: GeocodeRequest) -> str:
        """Return the URL for ``request``, signed when premier credentials are set."""
        if not request.location:
            raise UsageError("Usage: geocode(location)")

        config = self.config
        base_url = f"https://{config.host}{API_PATH}"
        params = self._query_parameters(request)

        prepared = PreparedRequest()
        if config.is_premier:
            params.append(("client", config.client_id))
            prepared.prepare_url(base_url, params)
            return sign_url(prepared.url, config.key)

        if config.has_key:
            params.append(("key", config.key))
        prepared.prepare_url(base_url, params)
        return prepared.url

    def execute(self, request: GeocodeRequest) -> List[GeocodeResult]:
        """Send ``request`` and return every result the API gave back."""
        url = self.build_url(request)
        logger.debug(
            "Sending geocode request",
            url=redact_url(url),
            reverse=request.reverse,
            signed=self.config.is_premier,
        )

        resp = self.transport.get(url)
        if resp.is_error:
            raise TransportError(
                f"Google Places API returned error: {resp.status_line}",
                status_line=resp.status_line,
            )

        try:
            data = json.loads(resp.text)
        except ValueError as exc:
            raise ParseError(f"Invalid JSON received from API: {exc}") from exc
        if not isinstance(data, dict):
            raise ParseError(f"Expected a JSON object from API, got {type(data).__name__}")

        status = data.get("status")
        if status not in ACCEPTED_STATUSES:
            logger.warning("Geocode request rejected", url=redact_url(url), status=status)
            raise ApiStatusError(url, status, data.get("error_message"))

        results = data.get("results") or []
        logger.debug("Geocode response accepted", status=status, result_count=len(results))
        return list(results)

    def geocode(self, location: Union[str, bytes], reverse: bool = False) -> List[GeocodeResult]:
        """
        Geocode a location and return all candidates.

        Non-ASCII locations may be passed either as text or as UTF-8 bytes.

        Args:
            location: Free-form place text, or "lat,lng" when reverse is set
            reverse: Send the location as ``latlng`` instead of ``query``

        Returns:
            The ``results`` records, possibly empty
        """
        if not location:
            raise UsageError("Usage: geocode(location)")
        return self.execute(GeocodeRequest(location=location, reverse=reverse))

    def geocode_first(self, location: Union[str, bytes], reverse: bool = False) -> Optional[GeocodeResult]:
        """Like geocode() but returns only the first candidate, or None."""
        results = self.geocode(location, reverse=reverse)
        return results[0] if results else None

    def reverse_geocode(self, latlng: Union[str, bytes, Tuple[float, float]]) -> List[GeocodeResult]:
        """Geocode a "lat,lng" string or a (lat, lng) pair."""
        if not latlng:
            raise UsageError("Usage: reverse_geocode(latlng)")
        if isinstance(latlng, tuple):
            if len(latlng) != 2:
                raise UsageError("Usage: reverse_geocode((lat, lng))")
            lat, lng = latlng
            latlng = f"{lat},{lng}"
        return self.geocode(latlng, reverse=True)

    def reverse_geocode_first(self, latlng: Union[str, bytes, Tuple[float, float]]) -> Optional[GeocodeResult]:
        results = self.reverse_geocode(latlng)
        return results[0] if results else None
