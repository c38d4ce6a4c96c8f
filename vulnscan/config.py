# vulnscan/config.py
import os
import logging
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

load_dotenv()
logger = logging.getLogger(__name__)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid value for %s (%r), using %s", name, raw, default)
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid value for %s (%r), using %s", name, raw, default)
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    header_timeout: float = 10.0
    path_timeout: float = 5.0
    path_concurrency: int = 6
    max_connections: int = 20
    follow_redirects: bool = True
    scan_timeout: float = 0.0
    port_timeout: float = 2.0
    port_concurrency: int = 50
    cors_origins: tuple = ("*",)
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    user_agent: str = "vulnscan/0.1"


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


def load_settings() -> Settings:
    """Build settings from the environment (and a .env file, if any)."""
    return Settings(
        header_timeout=_env_float("VULNSCAN_HEADER_TIMEOUT", 10.0),
        path_timeout=_env_float("VULNSCAN_PATH_TIMEOUT", 5.0),
        path_concurrency=max(1, _env_int("VULNSCAN_PATH_CONCURRENCY", 6)),
        max_connections=max(1, _env_int("VULNSCAN_MAX_CONNECTIONS", 20)),
        follow_redirects=_env_bool("VULNSCAN_FOLLOW_REDIRECTS", True),
        scan_timeout=_env_float("VULNSCAN_SCAN_TIMEOUT", 0.0),
        port_timeout=_env_float("VULNSCAN_PORT_TIMEOUT", 2.0),
        port_concurrency=max(1, _env_int("VULNSCAN_PORT_CONCURRENCY", 50)),
        cors_origins=tuple(_split_origins(os.getenv("VULNSCAN_CORS_ORIGINS", "*"))) or ("*",),
        host=os.getenv("VULNSCAN_HOST", "0.0.0.0"),
        port=_env_int("VULNSCAN_PORT", 8080),
        log_level=os.getenv("VULNSCAN_LOG_LEVEL", "INFO").upper(),
        user_agent=os.getenv("VULNSCAN_USER_AGENT", "vulnscan/0.1"),
    )


settings = load_settings()
