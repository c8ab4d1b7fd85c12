"""HTTP transport used by the geocoding client."""

from dataclasses import dataclass
from typing import Optional, Protocol

import requests

from .exceptions import TransportError

VERSION = "0.5.0"
USER_AGENT = f"places-geocoder/{VERSION}"


@dataclass
class TransportResponse:
    """What the client needs from an HTTP response."""
    status_code: int
    reason: str
    text: str

    @property
    def is_error(self) -> bool:
        return not 200 <= self.status_code < 300

    @property
    def status_line(self) -> str:
        return f"{self.status_code} {self.reason}".strip()


class Transport(Protocol):
    """Anything that can perform a blocking GET and return a TransportResponse."""

    def get(self, url: str) -> TransportResponse:
        ...


class RequestsTransport:
    """Default transport backed by a ``requests.Session``.

    The session is exposed so callers can add proxies or headers.
    """

    def __init__(
        self,
        timeout: Optional[float] = 10,
        user_agent: str = USER_AGENT,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.session.headers["User-Agent"] = user_agent

    @property
    def user_agent(self) -> str:
        return self.session.headers["User-Agent"]

    def get(self, url: str) -> TransportResponse:
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as exc:
            raise TransportError(f"Network error: {exc}") from exc

        # The API always answers in UTF-8, whatever the Content-Type claims
        resp.encoding = "utf-8"
        return TransportResponse(
            status_code=resp.status_code,
            reason=resp.reason or "",
            text=resp.text,
        )
