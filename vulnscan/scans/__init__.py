# vulnscan/scans/__init__.py
"""
Check modules.

Every check is a module exposing ``SCAN_NAME`` and
``async run(target, probe, settings=None) -> List[Finding]``. DEFAULT_CHECKS fixes the
order in which their findings appear in a report.
"""
from . import security_headers, sensitive_paths, transport_security

DEFAULT_CHECKS = (
    security_headers,
    transport_security,
    sensitive_paths,
)

__all__ = ["DEFAULT_CHECKS", "security_headers", "sensitive_paths", "transport_security"]
