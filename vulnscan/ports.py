# vulnscan/ports.py
import asyncio
import logging
from typing import Dict, List, Optional, Sequence

from .config import settings
from .errors import ValidationError
from .models import PortResult, PortScanResponse

logger = logging.getLogger(__name__)

DEFAULT_PORTS = [21, 22, 23, 25, 80, 110, 143, 443, 445, 3306, 3389, 5432, 8080]

SERVICES: Dict[int, str] = {
    20: "FTP-Data",
    21: "FTP",
    22: "SSH",
    23: "Telnet",
    25: "SMTP",
    53: "DNS",
    80: "HTTP",
    110: "POP3",
    143: "IMAP",
    443: "HTTPS",
    445: "SMB",
    3306: "MySQL",
    3389: "RDP",
    5432: "PostgreSQL",
    5900: "VNC",
    8080: "HTTP-Proxy",
    8443: "HTTPS-Alt",
    27017: "MongoDB",
}


async def probe_port(host: str, port: int, timeout: float) -> PortResult:
    try:
        _, writer = await asyncio.wait_for(asyncio.open_connection(host, port), timeout)
    except (OSError, asyncio.TimeoutError, ValueError):
        # closed/filtered/unreachable; ValueError covers hosts that fail IDNA encoding
        return PortResult(port=port, status="closed", service="")
    writer.close()
    try:
        await writer.wait_closed()
    except OSError:
        pass
    return PortResult(port=port, status="open", service=SERVICES.get(port, "Unknown"))


async def scan_ports(
    host: str,
    ports: Optional[Sequence[int]] = None,
    timeout: Optional[float] = None,
    concurrency: Optional[int] = None,
) -> PortScanResponse:
    host = (host or "").strip()
    if not host:
        raise ValidationError("Invalid input", "Host is required")
    for p in ports or ():
        if not 0 < p < 65536:
            raise ValidationError("Invalid input", f"Port out of range: {p}")

    ports = list(ports) if ports else list(DEFAULT_PORTS)
    if timeout is None:
        timeout = settings.port_timeout
    if concurrency is None:
        concurrency = settings.port_concurrency
    semaphore = asyncio.Semaphore(max(1, concurrency))
    logger.info("Starting port scan for host %s, %d ports", host, len(ports))

    async def bounded(port: int) -> PortResult:
        async with semaphore:
            return await probe_port(host, port, timeout)

    results: List[PortResult] = await asyncio.gather(*(bounded(p) for p in ports))
    open_count = sum(1 for r in results if r.status == "open")
    logger.info("Port scan for %s finished: %d/%d open", host, open_count, len(ports))
    return PortScanResponse(host=host, results=results, total_scanned=len(ports), open_ports=open_count)
