"""Runtime configuration for userapi.

Settings come from environment variables (optionally a local `.env` file).
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

from userapi.models.constants import (
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    DEFAULT_SERVICE_NAME,
)

load_dotenv()


def _env_bool(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).lower() == "true"


def parse_origins(raw: str) -> List[str]:
    """Split a comma-separated CORS origin list, dropping blanks."""
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    """Server and application settings."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    reload: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    service_name: str = DEFAULT_SERVICE_NAME
    cors_allow_origins: List[str] = field(default_factory=lambda: ["*"])


def load_settings() -> Settings:
    """Build Settings from the environment.

    Raises:
        ValueError: If USERAPI_PORT is not an integer
    """
    return Settings(
        host=os.getenv("USERAPI_HOST", DEFAULT_HOST),
        port=int(os.getenv("USERAPI_PORT", str(DEFAULT_PORT))),
        reload=_env_bool("USERAPI_RELOAD"),
        log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).lower(),
        service_name=os.getenv("USERAPI_SERVICE_NAME", DEFAULT_SERVICE_NAME),
        cors_allow_origins=parse_origins(os.getenv("CORS_ALLOW_ORIGINS", "*")),
    )


def configure_logging(level: str) -> None:
    """Configure root logging for the process.

    Levels unknown to the logging module (uvicorn's "trace") fall back to DEBUG.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.DEBUG),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
