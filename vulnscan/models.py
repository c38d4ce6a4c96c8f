# vulnscan/models.py
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


@dataclass(frozen=True)
class Target:
    """A URL that already passed validation."""
    url: str

    @property
    def scheme(self) -> str:
        return self.url.split(":", 1)[0].lower()

    @property
    def host(self) -> str:
        try:
            return urlsplit(self.url).hostname or ""
        except ValueError:
            # e.g. an unclosed IPv6 bracket
            return ""

    @property
    def base(self) -> str:
        return self.url.rstrip("/")


class ScanRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: Optional[str] = ""
    # accepted for compatibility with clients; every scan runs the full check set
    scan_type: str = Field(default="quick", alias="scanType")


class Finding(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: str = Field(alias="vulnType")
    severity: Severity
    description: str
    location: str
    recommendation: str


class ScanReport(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    findings: List[Finding] = Field(default_factory=list, alias="vulnerabilities")
    severity_score: int = Field(default=0, ge=0, alias="severityScore")
    duration_ms: int = Field(default=0, ge=0, alias="scanDurationMs")


class ErrorResponse(BaseModel):
    error: str
    message: str


class PortScanRequest(BaseModel):
    host: str = ""
    ports: List[int] = Field(default_factory=list)


class PortResult(BaseModel):
    port: int
    status: str
    service: str = ""


class PortScanResponse(BaseModel):
    host: str
    results: List[PortResult] = Field(default_factory=list)
    total_scanned: int = 0
    open_ports: int = 0


class AvailableScans(BaseModel):
    available: List[str] = Field(default_factory=list)


class HealthStatus(BaseModel):
    status: str = "healthy"
    service: str = "vulnerability-scanner"
    version: Optional[str] = None
