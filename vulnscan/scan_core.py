# vulnscan/scan_core.py
import asyncio
import logging
import time
from typing import Callable, Dict, Iterable, List, Optional

from .config import Settings, settings as default_settings
from .errors import InternalError, ScanError, ValidationError
from .models import Finding, ScanReport, Target
from .probe import ProbeClient
from .scans import DEFAULT_CHECKS

SEVERITY_WEIGHTS: Dict[str, int] = {
    "Critical": 10,
    "High": 7,
    "Medium": 4,
    "Low": 1,
}


def validate_target(url: Optional[str]) -> Target:
    if not url:
        raise ValidationError("Invalid input", "URL cannot be empty")
    if not (url.startswith("http://") or url.startswith("https://")):
        raise ValidationError("Invalid URL", "URL must start with http:// or https://")
    return Target(url)


def severity_score(findings: Iterable[Finding]) -> int:
    total = 0
    for f in findings:
        sev = getattr(f.severity, "value", f.severity)
        total += SEVERITY_WEIGHTS.get(sev, 0)
    return total


class Scanner:
    """
    Runs every check against one target and folds the results into a report.

    Holds no per-scan state, so one instance can serve concurrent scans.
      - checks: modules exposing SCAN_NAME and async run(target, probe, settings=None)
      - probe_factory: returns an async context manager with fetch(url, timeout)
      - logger: where scan progress and failures are reported
    """

    def __init__(
        self,
        checks: Optional[Iterable] = None,
        probe_factory: Optional[Callable] = None,
        settings: Optional[Settings] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.settings = settings or default_settings
        self.checks = tuple(checks) if checks is not None else DEFAULT_CHECKS
        self.probe_factory = probe_factory or (lambda: ProbeClient(self.settings))
        self.log = logger or logging.getLogger(__name__)

    def check_names(self) -> List[str]:
        return [getattr(c, "SCAN_NAME", getattr(c, "__name__", repr(c))) for c in self.checks]

    async def scan(self, url: str, scan_type: Optional[str] = None) -> ScanReport:
        target = validate_target(url)
        self.log.info("Scanning %s (scan type: %s)", target.url, scan_type or "default")
        start = time.perf_counter()
        try:
            findings = await self._run_checks(target)
        except (ScanError, asyncio.CancelledError):
            raise
        except Exception as e:
            self.log.exception("Scan of %s failed", target.url)
            raise InternalError("Scan failed", f"Unexpected {type(e).__name__} while scanning") from e

        report = ScanReport(
            findings=findings,
            severity_score=severity_score(findings),
            duration_ms=int((time.perf_counter() - start) * 1000),
        )
        self.log.info(
            "Scan of %s completed: %d findings, score %d, %d ms",
            target.url, len(report.findings), report.severity_score, report.duration_ms,
        )
        return report

    async def _run_checks(self, target: Target) -> List[Finding]:
        async with self.probe_factory() as probe:
            tasks = [
                asyncio.ensure_future(check.run(target, probe, settings=self.settings))
                for check in self.checks
            ]
            timeout = self.settings.scan_timeout
            try:
                if timeout and timeout > 0:
                    try:
                        results = await asyncio.wait_for(asyncio.gather(*tasks), timeout)
                    except asyncio.TimeoutError:
                        raise InternalError("Scan failed", f"Scan timed out after {timeout:g}s")
                else:
                    results = await asyncio.gather(*tasks)
            except BaseException:
                # no check may outlive the probe client
                for t in tasks:
                    t.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise

        findings: List[Finding] = []
        for res in results:
            findings.extend(res)
        return findings


async def run_scan(url: str, scan_type: Optional[str] = None) -> ScanReport:
    return await Scanner().scan(url, scan_type)


def available_scans() -> List[str]:
    return Scanner().check_names()
