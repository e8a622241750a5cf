#!/usr/bin/env python3
"""
Main CLI entry point for the staffql server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from staffql import __version__
from staffql.config import ConfigurationError, get_settings
from staffql.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="staffql")
def cli() -> None:
    """staffql CLI - run the server and manage the database."""
    pass


@cli.command()
@click.option("--host", default=None, help="Host to bind to (default: STAFFQL_API_HOST)")
@click.option(
    "--port", default=None, type=int, help="Port to bind to (default: STAFFQL_API_PORT)"
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str | None, port: int | None, reload: bool, log_level: str) -> None:
    """Start the staffql API server."""
    settings = get_settings()
    configure_logging(debug=(log_level == "debug"), level=log_level)

    host = host or settings.api_host
    port = port or settings.api_port

    try:
        settings.validate_startup()
    except ConfigurationError as e:
        logger.error("Invalid configuration", error=str(e))
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    logger.info("Starting staffql API server", host=host, port=port, reload=reload)

    # create_app re-reads settings in the uvicorn process; pass the chosen level through
    os.environ["STAFFQL_LOG_LEVEL"] = log_level
    if log_level == "debug":
        os.environ["STAFFQL_DEBUG"] = "true"

    try:
        uvicorn.run(
            "staffql.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("create-indexes")
def create_indexes() -> None:
    """Create the unique email indexes in the configured database."""
    from staffql.database.factory import create_repository

    settings = get_settings()
    configure_logging(debug=settings.debug, level=settings.log_level)

    async def do_create():
        repository = create_repository(settings)
        try:
            # connect() ensures the indexes exist
            await repository.connect()
        finally:
            await repository.close()

    try:
        asyncio.run(do_create())
    except Exception as e:
        logger.error("Failed to create indexes", error=str(e))
        click.echo(f"✗ Error creating indexes: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Indexes ready in database '{settings.mongo_db}'")


@cli.command("check-config")
def check_config() -> None:
    """Validate configuration and database connectivity."""
    from staffql.database.factory import create_repository

    settings = get_settings()
    configure_logging(debug=settings.debug, level=settings.log_level)

    try:
        settings.validate_startup()
    except ConfigurationError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)
    click.echo("✓ Configuration valid")

    async def do_ping() -> bool:
        repository = create_repository(settings)
        try:
            await repository.connect()
            return await repository.ping()
        finally:
            await repository.close()

    try:
        reachable = asyncio.run(do_ping())
    except Exception as e:
        logger.error("Database check failed", error=str(e))
        reachable = False

    if not reachable:
        click.echo(f"✗ Database '{settings.database_backend}' unreachable", err=True)
        sys.exit(1)
    click.echo(f"✓ Database '{settings.database_backend}' reachable")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
