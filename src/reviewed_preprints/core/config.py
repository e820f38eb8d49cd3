"""
Runtime configuration.

Values come from environment variables; the command line entry point
can override them. Priority: explicit args > environment > defaults.

Environment Variables:
    PREPRINTS_API_URL: Base URL of the upstream preprint service
    PREPRINTS_API_TIMEOUT: Upstream request timeout in seconds
    REVIEWED_PREPRINTS_HOST: Host to bind the HTTP server to
    REVIEWED_PREPRINTS_PORT: Port to bind the HTTP server to
    LOG_LEVEL: Logging level name (DEBUG, INFO, ...)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any

from .exceptions import ConfigurationError

DEFAULT_UPSTREAM_URL = "http://localhost:3000"
DEFAULT_UPSTREAM_TIMEOUT = 30.0
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    """Settings for the HTTP server and its upstream client."""

    upstream_url: str = DEFAULT_UPSTREAM_URL
    upstream_timeout: float = DEFAULT_UPSTREAM_TIMEOUT
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        """Build settings from environment variables."""
        env = os.environ if environ is None else environ

        timeout_raw = env.get("PREPRINTS_API_TIMEOUT", "").strip()
        port_raw = env.get("REVIEWED_PREPRINTS_PORT", "").strip()
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_UPSTREAM_TIMEOUT
        except ValueError as e:
            raise ConfigurationError(f"PREPRINTS_API_TIMEOUT must be a number, got {timeout_raw!r}") from e
        try:
            port = int(port_raw) if port_raw else DEFAULT_PORT
        except ValueError as e:
            raise ConfigurationError(f"REVIEWED_PREPRINTS_PORT must be an integer, got {port_raw!r}") from e

        return cls(
            upstream_url=env.get("PREPRINTS_API_URL", "").strip() or DEFAULT_UPSTREAM_URL,
            upstream_timeout=timeout,
            host=env.get("REVIEWED_PREPRINTS_HOST", "").strip() or DEFAULT_HOST,
            port=port,
            log_level=(env.get("LOG_LEVEL", "").strip() or DEFAULT_LOG_LEVEL).upper(),
        )

    def override(self, **overrides: Any) -> Settings:
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure root logging once for the process."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ConfigurationError(f"Unknown log level: {level!r}")
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
