import json
from unittest.mock import Mock

import pytest

from places_geocoder.client import GeocodingClient
from places_geocoder.config import ClientConfig
from places_geocoder.transport import TransportResponse


ROCHESTER_PAYLOAD = {
    "status": "OK",
    "results": [
        {"geometry": {"location": {"lat": 51.372563, "lng": 0.5093407}}}
    ],
}


def make_response(payload=None, status_code=200, reason="OK", text=None):
    """Build a TransportResponse whose body is ``payload`` encoded as JSON."""
    if text is None:
        text = json.dumps(payload)
    return TransportResponse(status_code=status_code, reason=reason, text=text)


@pytest.fixture
def stub_transport():
    """A transport stub answering every GET with the Rochester payload."""
    transport = Mock()
    transport.get.return_value = make_response(ROCHESTER_PAYLOAD)
    return transport


@pytest.fixture
def create_client(stub_transport):
    """Factory fixture that returns a function to create clients on the stub transport."""
    def _factory(**overrides):
        return GeocodingClient(ClientConfig(**overrides), transport=stub_transport)

    return _factory


@pytest.fixture
def gmap_env(monkeypatch):
    """Set the environment ClientConfig.from_env() needs."""
    monkeypatch.setenv("GMAP_KEY", "test-api-key")
    for name in ("GMAP_CLIENT", "GMAP_HOST", "GMAP_LANGUAGE", "GMAP_REGION", "GMAP_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
