# vulnscan/scans/sensitive_paths.py
SCAN_NAME = "Sensitive Files & Directories"

import asyncio
import logging
from typing import List, Optional, Sequence

from ..config import Settings, settings as default_settings
from ..errors import TransportError
from ..models import Finding, Severity, Target

logger = logging.getLogger(__name__)

SENSITIVE_PATHS = (
    "/.git/config",
    "/.env",
    "/config.php",
    "/wp-config.php",
    "/admin",
    "/phpmyadmin",
)


async def run(
    target: Target,
    probe,
    paths: Optional[Sequence[str]] = None,
    timeout: Optional[float] = None,
    concurrency: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> List[Finding]:
    settings = settings or default_settings
    paths = SENSITIVE_PATHS if paths is None else paths
    if timeout is None:
        timeout = settings.path_timeout
    if concurrency is None:
        concurrency = settings.path_concurrency
    semaphore = asyncio.Semaphore(max(1, concurrency))
    base = target.base

    async def check_path(path: str) -> Optional[Finding]:
        url = base + path
        async with semaphore:
            try:
                resp = await probe.fetch(url, timeout=timeout)
            except TransportError as e:
                logger.warning("Probe of %s failed: %s", url, e.reason)
                return None
        if not resp.ok:
            logger.debug("%s returned %s", url, resp.status)
            return None
        return Finding(
            kind="Sensitive File Exposed",
            severity=Severity.HIGH,
            description=f"Sensitive file or directory accessible: {path}",
            location=url,
            recommendation="Restrict access to sensitive files and directories. Use .htaccess or server configuration.",
        )

    # gather keeps path-list order regardless of which probe finishes first
    results = await asyncio.gather(*(check_path(p) for p in paths))
    return [f for f in results if f is not None]
