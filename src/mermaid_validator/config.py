"""Service configuration from environment variables."""

from __future__ import annotations

import os
import sys

from loguru import logger
from pydantic import BaseModel, Field

LOG_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"


class ServiceConfig(BaseModel):
    """Runtime settings for the HTTP and MCP entry points."""
    host: str = "0.0.0.0"
    port: int = Field(default=3001, ge=1, le=65535)
    log_level: str = "INFO"
    max_body_bytes: int = Field(default=10 * 1024 * 1024, gt=0)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> ServiceConfig:
        """Build config from HOST, PORT, LOG_LEVEL, MAX_BODY_BYTES and CORS_ORIGINS."""
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=os.getenv("PORT", "3001"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            max_body_bytes=os.getenv("MAX_BODY_BYTES", str(10 * 1024 * 1024)),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        )


def configure_logging(level: str) -> None:
    """Send loguru output to stderr at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
