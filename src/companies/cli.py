#!/usr/bin/env python3
"""
Main CLI entry point for the Companies server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from companies import __version__
from companies.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="companies")
def cli() -> None:
    """Companies CLI - run the server and manage sample data."""
    pass


@cli.command()
@click.option(
    "--host",
    default="0.0.0.0",
    help="Host to bind to (default: 0.0.0.0)",
)
@click.option(
    "--port",
    default=8088,
    type=int,
    help="Port to bind to (default: 8088)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--workers",
    default=1,
    type=int,
    help="Number of worker processes (default: 1)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(
    host: str,
    port: int,
    reload: bool,
    workers: int,
    log_level: str,
) -> None:
    """Start the Companies API server."""
    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    logger.info(
        "Starting Companies API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # Settings are read at import time, so pass them down through the environment
    if log_level == "debug":
        os.environ["COMPANIES_DEBUG"] = "true"
        os.environ["COMPANIES_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("COMPANIES_DEBUG", "false")
        os.environ.setdefault("COMPANIES_LOG_LEVEL", log_level)

    try:
        if reload or workers > 1:
            uvicorn.run(
                "companies.api.app:app",
                host=host,
                port=port,
                reload=reload,
                workers=(workers if not reload else 1),
                log_level=log_level,
                access_log=True,
            )
        else:
            from companies.api.app import app

            uvicorn.run(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.option(
    "--count",
    default=None,
    type=click.IntRange(min=0),
    help="Number of sample companies to insert (default: all)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def seed(count: int | None, log_level: str) -> None:
    """Insert sample companies into the database."""
    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    from companies.database.connection import get_async_session
    from companies.database.seed_data import seed_companies

    async def _seed() -> int:
        async with get_async_session() as session:
            created = await seed_companies(session, count)
            return len(created)

    try:
        created = asyncio.run(_seed())
    except Exception as e:
        logger.error("Seeding failed", error=str(e))
        sys.exit(1)

    click.echo(f"Created {created} sample companies")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
