"""Test configuration and fixtures for vulnscan."""

from typing import Dict, List, Optional, Union

import pytest

from vulnscan.errors import TransportError
from vulnscan.probe import ProbeResponse

ALL_SECURITY_HEADERS = {
    "Strict-Transport-Security": "max-age=31536000",
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Content-Security-Policy": "default-src 'self'",
}


class FakeProbe:
    """Stand-in for ProbeClient that answers from a url -> response table.

    Urls missing from the table fail like a refused connection.
    """

    def __init__(self, responses: Optional[Dict[str, Union[ProbeResponse, Exception]]] = None):
        self.responses = responses or {}
        self.calls: List[str] = []
        self.timeouts: List[Optional[float]] = []
        self.entered = 0

    async def __aenter__(self) -> "FakeProbe":
        self.entered += 1
        return self

    async def __aexit__(self, *exc) -> None:
        return None

    async def fetch(self, url: str, timeout: Optional[float] = None) -> ProbeResponse:
        self.calls.append(url)
        self.timeouts.append(timeout)
        answer = self.responses.get(url)
        if answer is None:
            raise TransportError(url, "connection refused")
        if isinstance(answer, Exception):
            raise answer
        return answer


def respond(url: str, status: int = 200, headers: Optional[Dict[str, str]] = None) -> ProbeResponse:
    return ProbeResponse(url=url, status=status, headers=dict(headers or {}))


@pytest.fixture
def fake_probe() -> FakeProbe:
    """A probe where every request fails at the transport level."""
    return FakeProbe()


@pytest.fixture
def hardened_probe() -> FakeProbe:
    """A probe for https://example.com that sends every security header and hides all paths."""
    return FakeProbe({"https://example.com": respond("https://example.com", 200, ALL_SECURITY_HEADERS)})
