"""Configuration for the Google Places geocoding client."""

import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError

load_dotenv()

DEFAULT_HOST = "maps.googleapis.com"
DEFAULT_OUTPUT_ENCODING = "utf8"
DEFAULT_TIMEOUT = 10


@dataclass(frozen=True)
class ClientConfig:
    """Settings shared by every request a client makes.

    ``None`` marks an option as absent. ``key`` is the API key, and doubles as
    the premier private key once ``client_id`` is set.
    """

    host: str = DEFAULT_HOST
    language: Optional[str] = None
    region: Optional[str] = None
    output_encoding: str = DEFAULT_OUTPUT_ENCODING
    sensor: bool = False
    client_id: Optional[str] = None
    key: Optional[str] = None
    components: Optional[Mapping[str, Optional[str]]] = None
    timeout: int = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        # Detach from the caller's mapping so later edits don't leak in
        if self.components is not None:
            object.__setattr__(self, "components", dict(self.components))

    @property
    def has_key(self) -> bool:
        return bool(self.key)

    @property
    def is_premier(self) -> bool:
        """True when requests must be signed with the premier credentials."""
        return bool(self.client_id) and self.has_key

    @classmethod
    def from_env(cls) -> 'ClientConfig':
        """Create configuration from environment variables."""
        key = os.getenv("GMAP_KEY")
        if not key:
            raise ConfigurationError("GMAP_KEY environment variable not set")

        timeout_raw = os.getenv("GMAP_TIMEOUT")
        timeout = DEFAULT_TIMEOUT
        if timeout_raw:
            try:
                timeout = int(timeout_raw)
            except ValueError as exc:
                raise ConfigurationError(
                    f"GMAP_TIMEOUT must be an integer, got {timeout_raw!r}"
                ) from exc
            if timeout <= 0:
                raise ConfigurationError("GMAP_TIMEOUT must be positive")

        return cls(
            host=os.getenv("GMAP_HOST") or DEFAULT_HOST,
            language=os.getenv("GMAP_LANGUAGE") or None,
            region=os.getenv("GMAP_REGION") or None,
            client_id=os.getenv("GMAP_CLIENT") or None,
            key=key,
            timeout=timeout,
        )


def components_from_pairs(pairs) -> Dict[str, str]:
    """Turn ``NAME=VALUE`` strings into a components mapping."""
    components: Dict[str, str] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise ConfigurationError(f"Invalid component {pair!r}, expected NAME=VALUE")
        components[name.strip()] = value.strip()
    return components
