"""
Centralized settings for the price gateway.

Values are read once from the environment at startup and never mutated.
"""
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from ..errors import ConfigError


DRIVERS_URL = "https://order.printfactory.cloud/PF/_driverList.asp?Product=PrintFactory"
PRICES_URL = "https://order.printfactory.cloud/PF/_prices.asp"

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 3000
DEFAULT_CORS_ORIGINS = ("http://localhost:3000", "https://app.ripee.fr")


def _parse_port(raw: str) -> int:
    """Parse PORT as an unsigned 16-bit integer."""
    value = raw
    if not (value.isascii() and value.isdigit()):
        raise ConfigError(f"PORT should be an unsigned integer, got {raw!r}")
    port = int(value)
    if port > 65535:
        raise ConfigError(f"PORT out of range: {port}")
    return port


def _parse_origins(raw: str) -> tuple[str, ...]:
    return tuple(o.strip() for o in raw.split(',') if o.strip())


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Unknown LOG_LEVEL: {raw!r}")
    return level


@dataclass(frozen=True)
class Settings:
    """Application settings with sensible defaults."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    # CORS allow-list
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    cors_methods: tuple[str, ...] = ("GET",)

    # Upstream vendor endpoints
    drivers_url: str = DRIVERS_URL
    prices_url: str = PRICES_URL

    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """Load settings from environment variables (HOST, PORT, CORS_ORIGINS, LOG_LEVEL)."""
        env = os.environ if environ is None else environ

        port = DEFAULT_PORT
        if 'PORT' in env:
            port = _parse_port(env['PORT'])

        origins = DEFAULT_CORS_ORIGINS
        if env.get('CORS_ORIGINS'):
            origins = _parse_origins(env['CORS_ORIGINS'])

        return cls(
            host=env.get('HOST', DEFAULT_HOST),
            port=port,
            cors_origins=origins,
            log_level=_parse_log_level(env.get('LOG_LEVEL', 'INFO')),
        )


def configure_logging(level: str = "INFO"):
    """Set up root logging for the process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
