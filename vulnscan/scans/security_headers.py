# vulnscan/scans/security_headers.py
SCAN_NAME = "HTTP Security Headers"

import logging
from typing import List, Optional

from ..config import Settings, settings as default_settings
from ..errors import TransportError
from ..models import Finding, Severity, Target

logger = logging.getLogger(__name__)

# (header, finding kind, severity, description, recommendation), in check order
SECURITY_HEADERS = (
    (
        "Strict-Transport-Security",
        "Missing HSTS Header",
        Severity.MEDIUM,
        "HTTP Strict Transport Security (HSTS) header not found. This allows downgrade attacks.",
        "Add 'Strict-Transport-Security: max-age=31536000; includeSubDomains' header",
    ),
    (
        "X-Frame-Options",
        "Missing X-Frame-Options",
        Severity.MEDIUM,
        "X-Frame-Options header not set. Site may be vulnerable to clickjacking attacks.",
        "Add 'X-Frame-Options: DENY' or 'X-Frame-Options: SAMEORIGIN' header",
    ),
    (
        "X-Content-Type-Options",
        "Missing X-Content-Type-Options",
        Severity.LOW,
        "X-Content-Type-Options header not found. Browser may interpret files as different MIME type.",
        "Add 'X-Content-Type-Options: nosniff' header",
    ),
    (
        "Content-Security-Policy",
        "Missing Content-Security-Policy",
        Severity.HIGH,
        "Content Security Policy (CSP) not implemented. Site may be vulnerable to XSS attacks.",
        "Implement a strong Content-Security-Policy header to prevent XSS attacks",
    ),
)


async def run(
    target: Target,
    probe,
    timeout: Optional[float] = None,
    settings: Optional[Settings] = None,
) -> List[Finding]:
    settings = settings or default_settings
    if timeout is None:
        timeout = settings.header_timeout
    findings: List[Finding] = []
    try:
        resp = await probe.fetch(target.url, timeout=timeout)
    except TransportError as e:
        logger.warning("Could not fetch headers from %s: %s", target.url, e.reason)
        return findings

    for name, kind, severity, description, recommendation in SECURITY_HEADERS:
        if not resp.has_header(name):
            findings.append(Finding(
                kind=kind,
                severity=severity,
                description=description,
                location=target.url,
                recommendation=recommendation,
            ))
    return findings
