"""Command-line entry point for the Registrar service."""

from __future__ import annotations

import sys

import click
import uvicorn

from registrar.config import ConfigError, Settings
from registrar.logging import get_logger, setup_logging
from registrar.student_store import StudentStore


def _load_settings() -> Settings:
    try:
        return Settings.from_env()
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(package_name="registrar")
def main() -> None:
    """Registrar - student record management service."""


@main.command()
@click.option("--host", default=None, help="Interface to bind (default: REGISTRAR_HOST).")
@click.option("--port", type=int, default=None, help="Port to listen on (default: REGISTRAR_PORT).")
@click.option("--db-path", default=None, help="SQLite database file (default: REGISTRAR_DB_PATH).")
@click.option("--log-level", default=None, help="Log level (default: REGISTRAR_LOG_LEVEL).")
@click.option("--no-console-log", is_flag=True, help="Log to file only.")
def serve(
    host: str | None,
    port: int | None,
    db_path: str | None,
    log_level: str | None,
    no_console_log: bool,
) -> None:
    """Run the HTTP API."""
    from registrar.api.app import create_app  # noqa: PLC0415

    settings = _load_settings()
    level = log_level or settings.log_level
    setup_logging(log_dir=settings.log_dir, level=level, console=not no_console_log)

    app = create_app(db_path or settings.db_path)
    uvicorn.run(
        app,
        host=host or settings.host,
        port=port or settings.port,
        log_level=level.lower(),
        # Server logs go through the handlers setup_logging attached
        log_config=None,
    )


@main.command("init-db")
@click.option("--db-path", default=None, help="SQLite database file (default: REGISTRAR_DB_PATH).")
def init_db(db_path: str | None) -> None:
    """Create the students table if it does not exist."""
    settings = _load_settings()
    path = db_path or settings.db_path
    store = StudentStore(path)
    store.close()
    get_logger("cli").info("Initialized database at %s", path)
    click.echo(f"Initialized database at {path}")


if __name__ == "__main__":
    main()
