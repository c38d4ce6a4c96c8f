# vulnscan/probe.py
"""
Outbound HTTP probing.

A ProbeClient wraps a single httpx.AsyncClient for the lifetime of one scan.
Certificate validation is disabled on purpose: a broken certificate on the
target is something to report, not a reason to stop scanning.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

import httpx

from .config import Settings, settings as default_settings
from .errors import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProbeResponse:
    url: str
    status: int
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def has_header(self, name: str) -> bool:
        name = name.lower()
        return any(k.lower() == name for k in self.headers)


class ProbeClient:
    def __init__(self, settings: Optional[Settings] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings or default_settings
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "ProbeClient":
        s = self.settings
        limits = httpx.Limits(max_connections=s.max_connections, max_keepalive_connections=s.max_connections)
        self._client = httpx.AsyncClient(
            verify=False,
            timeout=httpx.Timeout(s.header_timeout),
            follow_redirects=s.follow_redirects,
            limits=limits,
            headers={"User-Agent": s.user_agent},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch(self, url: str, timeout: Optional[float] = None) -> ProbeResponse:
        """GET `url` and return its status and headers, or raise TransportError."""
        if self._client is None:
            raise RuntimeError("ProbeClient used outside of 'async with'")
        try:
            resp = await self._client.get(url, timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT)
        except httpx.TimeoutException as e:
            raise TransportError(url, f"timed out: {e}") from e
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            # InvalidURL is not an HTTPError; malformed hosts can also surface as ValueError/UnicodeError
            raise TransportError(url, f"{type(e).__name__}: {e}") from e
        return ProbeResponse(url=url, status=resp.status_code, headers=dict(resp.headers.items()))
