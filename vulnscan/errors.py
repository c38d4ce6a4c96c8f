# vulnscan/errors.py
"""
Failure kinds raised by the scanning core.

Only ValidationError and InternalError ever reach the HTTP layer.
TransportError is raised by the probe client and absorbed by the checks.
"""


class ScanError(Exception):
    status_code = 500

    def __init__(self, error: str, message: str):
        super().__init__(f"{error}: {message}")
        self.error = error
        self.message = message


class ValidationError(ScanError):
    status_code = 400


class TransportError(ScanError):
    status_code = 502

    def __init__(self, url: str, reason: str):
        super().__init__("Transport error", reason)
        self.url = url
        self.reason = reason


class InternalError(ScanError):
    status_code = 500
