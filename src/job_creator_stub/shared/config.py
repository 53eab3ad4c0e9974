"""
Application Settings

Environment-based configuration for the job creator stub.

Responsibility:
    - Read configuration from environment variables (optionally from .env)
    - Validate numeric values at startup
    - Parse BIND_ADDR into host and port for uvicorn

Architecture Notes:
    - Part of Shared layer (used by API and entry point)
    - Settings is an immutable dataclass, cached by get_settings()
    - create_app() accepts explicit Settings so tests never touch the cache

Environment Variables:
    BIND_ADDR                     ":20100"
    JOB_COMPLETION_DELAY_SECONDS  "4"
    REQUEST_TIMEOUT_SECONDS       "10"
    REQUEST_ID_LENGTH             "16"
    RESULT_URL                    "https://www.ons.gov.uk"
    STUB_FILE_NAMES               "example.csv"
    LOG_LEVEL                     "INFO"
    SERVICE_NAMESPACE             "dp-dd-job-creator-api-stub"
"""

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_BIND_ADDR = ":20100"
DEFAULT_HOST = "0.0.0.0"


def _read_float(
    env: Mapping[str, str], name: str, default: str, positive: bool = False
) -> float:
    raw = env.get(name, default)
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")
    if positive and value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {raw!r}")
    return value


def _read_int(env: Mapping[str, str], name: str, default: str) -> int:
    raw = env.get(name, default)
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def _read_log_level(env: Mapping[str, str]) -> str:
    raw = env.get("LOG_LEVEL", "INFO")
    level = raw.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"LOG_LEVEL must be a logging level name, got {raw!r}")
    return level


def parse_bind_addr(bind_addr: str) -> Tuple[str, int]:
    """
    Split a Go-style bind address into host and port.

    An empty host means "all interfaces".

    Args:
        bind_addr: Address in "host:port" or ":port" form

    Returns:
        (host, port) tuple for uvicorn

    Raises:
        ValueError: If the port is missing or not a valid TCP port

    Examples:
        >>> parse_bind_addr(":20100")
        ('0.0.0.0', 20100)
        >>> parse_bind_addr("127.0.0.1:8080")
        ('127.0.0.1', 8080)
    """
    host, sep, port_str = bind_addr.rpartition(":")
    if not sep:
        raise ValueError(f"BIND_ADDR must be in host:port form, got {bind_addr!r}")

    try:
        port = int(port_str)
    except ValueError:
        raise ValueError(f"BIND_ADDR has invalid port, got {bind_addr!r}")
    if not 0 < port < 65536:
        raise ValueError(f"BIND_ADDR port out of range, got {bind_addr!r}")

    # IPv6 literals come as "[::1]:8080"
    host = host.strip("[]")
    return host or DEFAULT_HOST, port


@dataclass(frozen=True)
class Settings:
    """
    Runtime configuration of the stub.

    Attributes:
        bind_addr: Listen address, Go style (":20100")
        job_completion_delay_seconds: How long a new job stays "Pending"
        request_timeout_seconds: Max handler time before a 503 is returned
        request_id_length: Length of generated X-Request-Id values
        result_url: URL reported for files of a completed job
        file_names: File names listed in every status response
        log_level: Root logging level name
        service_namespace: Service name used in startup logs
    """

    bind_addr: str = DEFAULT_BIND_ADDR
    job_completion_delay_seconds: float = 4.0
    request_timeout_seconds: float = 10.0
    request_id_length: int = 16
    result_url: str = "https://www.ons.gov.uk"
    file_names: Tuple[str, ...] = field(default=("example.csv",))
    log_level: str = "INFO"
    service_namespace: str = "dp-dd-job-creator-api-stub"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build Settings from environment variables.

        Args:
            env: Mapping to read from (defaults to os.environ)

        Returns:
            Settings instance

        Raises:
            ValueError: If a numeric variable or LOG_LEVEL cannot be parsed
        """
        env = os.environ if env is None else env

        bind_addr = env.get("BIND_ADDR") or DEFAULT_BIND_ADDR
        # Fail fast on a bad address instead of at uvicorn startup
        parse_bind_addr(bind_addr)

        file_names = tuple(
            name.strip()
            for name in env.get("STUB_FILE_NAMES", "example.csv").split(",")
            if name.strip()
        )

        return cls(
            bind_addr=bind_addr,
            job_completion_delay_seconds=_read_float(
                env, "JOB_COMPLETION_DELAY_SECONDS", "4"
            ),
            # A zero timeout would fail every request with 503
            request_timeout_seconds=_read_float(
                env, "REQUEST_TIMEOUT_SECONDS", "10", positive=True
            ),
            request_id_length=_read_int(env, "REQUEST_ID_LENGTH", "16"),
            result_url=env.get("RESULT_URL", "https://www.ons.gov.uk"),
            file_names=file_names or ("example.csv",),
            log_level=_read_log_level(env),
            service_namespace=env.get(
                "SERVICE_NAMESPACE", "dp-dd-job-creator-api-stub"
            ),
        )

    @property
    def host(self) -> str:
        return parse_bind_addr(self.bind_addr)[0]

    @property
    def port(self) -> int:
        return parse_bind_addr(self.bind_addr)[1]


@lru_cache
def get_settings() -> Settings:
    """Return process-wide Settings read from the environment (cached)."""
    return Settings.from_env()
