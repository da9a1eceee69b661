"""Runtime configuration for Registrar, read from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from registrar.logging import DEFAULT_LOG_DIR, DEFAULT_LOG_LEVEL

DEFAULT_DB_PATH = "registrar.db"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


class ConfigError(Exception):
    """Raised when configuration is invalid."""


@dataclass(frozen=True)
class Settings:
    """Service settings.

    Attributes:
        db_path: SQLite database file, or ":memory:".
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
        log_dir: Directory for rotating log files.
        log_level: Log level name (DEBUG, INFO, WARNING, ERROR).
    """

    db_path: str = DEFAULT_DB_PATH
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_dir: str = DEFAULT_LOG_DIR
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from REGISTRAR_* environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Raises:
            ConfigError: If REGISTRAR_PORT is not a valid port number
        """
        env = os.environ if environ is None else environ

        raw_port = env.get("REGISTRAR_PORT", str(DEFAULT_PORT))
        try:
            port = int(raw_port)
        except ValueError as e:
            raise ConfigError(f"REGISTRAR_PORT must be an integer, got '{raw_port}'") from e
        if not 0 < port < 65536:
            raise ConfigError(f"REGISTRAR_PORT out of range: {port}")

        return cls(
            db_path=env.get("REGISTRAR_DB_PATH", DEFAULT_DB_PATH),
            host=env.get("REGISTRAR_HOST", DEFAULT_HOST),
            port=port,
            log_dir=env.get("REGISTRAR_LOG_DIR", DEFAULT_LOG_DIR),
            log_level=env.get("REGISTRAR_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
