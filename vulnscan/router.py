# vulnscan/router.py
import logging

from fastapi import APIRouter, Depends

from .models import (
    AvailableScans,
    ErrorResponse,
    PortScanRequest,
    PortScanResponse,
    ScanReport,
    ScanRequest,
)
from .ports import scan_ports
from .scan_core import Scanner

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["scan"])

_scanner = Scanner()


def get_scanner() -> Scanner:
    return _scanner


@router.post(
    "/scan",
    response_model=ScanReport,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def scan_endpoint(request: ScanRequest, scanner: Scanner = Depends(get_scanner)):
    logger.info("Received scan request: url=%s type=%s", request.url, request.scan_type)
    return await scanner.scan(request.url, request.scan_type)


@router.get("/scan/available", response_model=AvailableScans)
async def list_available_scans(scanner: Scanner = Depends(get_scanner)):
    return {"available": scanner.check_names()}


@router.post("/ports", response_model=PortScanResponse, responses={400: {"model": ErrorResponse}})
async def port_scan_endpoint(request: PortScanRequest):
    return await scan_ports(request.host, request.ports)
