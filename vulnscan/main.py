# vulnscan/main.py
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .config import settings
from .errors import InternalError, ScanError
from .models import ErrorResponse, HealthStatus
from .router import router

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Web Vulnerability Scanner",
    description="API to run opportunistic security checks against a single URL.",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=3600,
)

app.include_router(router)


@app.exception_handler(ScanError)
async def scan_error_handler(request: Request, exc: ScanError):
    if isinstance(exc, InternalError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    body = ErrorResponse(error=exc.error, message=exc.message)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


@app.get("/health", response_model=HealthStatus)
async def health_check():
    return HealthStatus(version=__version__)


def run():
    uvicorn.run("vulnscan.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    uvicorn.run("vulnscan.main:app", host=settings.host, port=settings.port, reload=True)
