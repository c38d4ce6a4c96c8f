# vulnscan/scans/transport_security.py
SCAN_NAME = "Transport Security"

from typing import List

from ..models import Finding, Severity, Target

# local development targets are not reported
EXEMPT_HOSTS = ("localhost",)


async def run(target: Target, probe=None, settings=None) -> List[Finding]:
    """Flag plain-http targets. Looks at the URL only, no request is made."""
    findings: List[Finding] = []
    if target.scheme == "http" and target.host.lower() not in EXEMPT_HOSTS:
        findings.append(Finding(
            kind="Insecure Connection (HTTP)",
            severity=Severity.CRITICAL,
            description="Website is using HTTP instead of HTTPS. All data is transmitted in plaintext.",
            location=target.url,
            recommendation="Implement HTTPS with a valid SSL/TLS certificate. Use Let's Encrypt for free certificates.",
        ))
    return findings
