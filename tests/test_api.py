"""Tests for the HTTP API."""

from types import SimpleNamespace

import pytest
from conftest import FakeProbe, respond
from fastapi.testclient import TestClient

from vulnscan.main import app
from vulnscan.router import get_scanner
from vulnscan.scan_core import Scanner


@pytest.fixture
def probe() -> FakeProbe:
    base = "http://example.com"
    return FakeProbe({
        base: respond(base, 200, {"Content-Security-Policy": "default-src 'self'"}),
        base + "/.git/config": respond(base + "/.git/config", 200),
    })


@pytest.fixture
def client(probe):
    app.dependency_overrides[get_scanner] = lambda: Scanner(probe_factory=lambda: probe)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "healthy"
    assert body["service"] == "vulnerability-scanner"


def test_scan_success(client):
    resp = client.post("/api/scan", json={"url": "http://example.com", "scanType": "quick"})

    assert resp.status_code == 200
    body = resp.json()
    assert set(body) == {"vulnerabilities", "severityScore", "scanDurationMs"}
    assert [v["vulnType"] for v in body["vulnerabilities"]] == [
        "Missing HSTS Header",
        "Missing X-Frame-Options",
        "Missing X-Content-Type-Options",
        "Insecure Connection (HTTP)",
        "Sensitive File Exposed",
    ]
    assert body["vulnerabilities"][3]["severity"] == "Critical"
    assert body["vulnerabilities"][4]["location"] == "http://example.com/.git/config"
    assert set(body["vulnerabilities"][0]) == {"vulnType", "severity", "description", "location", "recommendation"}
    assert body["severityScore"] == 4 + 4 + 1 + 10 + 7
    assert isinstance(body["scanDurationMs"], int)


def test_scan_type_is_optional(client):
    resp = client.post("/api/scan", json={"url": "https://localhost"})
    assert resp.status_code == 200


def test_empty_url(client, probe):
    resp = client.post("/api/scan", json={"url": "", "scanType": "quick"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid input", "message": "URL cannot be empty"}
    assert probe.calls == []


def test_bad_scheme(client, probe):
    resp = client.post("/api/scan", json={"url": "ftp://example.com", "scanType": "quick"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid URL", "message": "URL must start with http:// or https://"}
    assert probe.calls == []


def test_internal_failure(probe):
    async def broken(target, probe, settings=None):
        raise RuntimeError("database password is hunter2")

    scanner = Scanner(checks=[SimpleNamespace(SCAN_NAME="broken", run=broken)], probe_factory=lambda: probe)
    app.dependency_overrides[get_scanner] = lambda: scanner
    try:
        with TestClient(app) as c:
            resp = c.post("/api/scan", json={"url": "https://example.com", "scanType": "quick"})
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 500
    body = resp.json()
    assert body["error"] == "Scan failed"
    assert "hunter2" not in body["message"]


def test_available_scans(client):
    resp = client.get("/api/scan/available")
    assert resp.status_code == 200
    assert resp.json()["available"] == [
        "HTTP Security Headers",
        "Transport Security",
        "Sensitive Files & Directories",
    ]


def test_port_scan_requires_host(client):
    resp = client.post("/api/ports", json={"host": "", "ports": [80]})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid input", "message": "Host is required"}


def test_cors_preflight(client):
    resp = client.options(
        "/api/scan",
        headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "POST"},
    )
    assert resp.status_code == 200
    assert "access-control-allow-origin" in resp.headers


def test_null_url(client, probe):
    resp = client.post("/api/scan", json={"url": None, "scanType": "quick"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid input", "message": "URL cannot be empty"}
    assert probe.calls == []


def test_port_scan_malformed_host(client):
    resp = client.post("/api/ports", json={"host": "a..b", "ports": [80]})

    assert resp.status_code == 200
    body = resp.json()
    assert body["results"] == [{"port": 80, "status": "closed", "service": ""}]
    assert body["open_ports"] == 0
