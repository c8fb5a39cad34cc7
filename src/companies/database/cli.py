#!/usr/bin/env python3
"""
Schema migrations for the companies table.

Wraps Alembic so deploy scripts can upgrade the database, see which
revision it is on, and gate a release on it being current.
"""

import sys
from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import Any

import click

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from companies import __version__
from companies.database.connection import get_engine
from companies.logging import configure_logging, get_logger

logger = get_logger(__name__)

# alembic.ini and alembic/ live at the project root, next to src/
PROJECT_DIR = Path(__file__).resolve().parents[3]


def get_alembic_config() -> Config:
    alembic_ini = PROJECT_DIR / "alembic.ini"
    if not alembic_ini.exists():
        raise FileNotFoundError(f"alembic.ini not found at {alembic_ini}")

    config = Config(str(alembic_ini))
    config.set_main_option("script_location", str(PROJECT_DIR / "alembic"))
    return config


def get_revisions(config: Config) -> tuple[str | None, str | None]:
    """Return the (database, head) revisions; the database one is None before any upgrade."""
    head = ScriptDirectory.from_config(config).get_current_head()
    with get_engine().connect() as conn:
        current = MigrationContext.configure(conn).get_current_revision()
    return current, head


def exits_on_failure(action: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Log a failed migration step and exit with status 1."""

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.error(f"{action} failed", error=str(e))
                sys.exit(1)

        return wrapper

    return decorator


@click.group()
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.version_option(version=__version__, prog_name="companies-migrate")
def main(log_level: str) -> None:
    """Manage the companies database schema."""
    configure_logging(debug=(log_level == "debug"), log_level=log_level)


@main.command()
@click.argument("revision", default="head")
@exits_on_failure("Upgrade")
def upgrade(revision: str) -> None:
    """Upgrade the schema to REVISION (default: head)."""
    config = get_alembic_config()
    command.upgrade(config, revision)
    current, _ = get_revisions(config)
    logger.info("Schema upgraded", target=revision, revision=current)


@main.command()
@click.argument("revision", default="-1")
@exits_on_failure("Downgrade")
def downgrade(revision: str) -> None:
    """Downgrade the schema to REVISION (default: one step back)."""
    config = get_alembic_config()
    command.downgrade(config, revision)
    current, _ = get_revisions(config)
    logger.info("Schema downgraded", target=revision, revision=current)


@main.command()
@click.option("-m", "--message", required=True, help="Revision message")
@click.option("--autogenerate/--no-autogenerate", default=True, help="Diff against the ORM models")
@exits_on_failure("Revision")
def revision(message: str, autogenerate: bool) -> None:
    """Create a new migration from the current ORM models."""
    command.revision(get_alembic_config(), message=message, autogenerate=autogenerate)


@main.command()
@exits_on_failure("Reading the current revision")
def current() -> None:
    """Show the database revision next to the latest one."""
    database, head = get_revisions(get_alembic_config())
    click.echo(f"database: {database or '<none>'}")
    click.echo(f"head:     {head or '<none>'}")


@main.command()
@exits_on_failure("Reading migration history")
def history() -> None:
    """List migrations newest first, marking the one the database is on."""
    config = get_alembic_config()
    database, _ = get_revisions(config)
    for script in ScriptDirectory.from_config(config).walk_revisions():
        marker = "*" if script.revision == database else " "
        click.echo(f"{marker} {script.revision}  {script.doc}")


@main.command()
@exits_on_failure("Checking the schema revision")
def check() -> None:
    """Exit with status 1 unless the database is at the latest revision."""
    database, head = get_revisions(get_alembic_config())
    if database != head:
        click.echo(f"Schema out of date: database at {database or '<none>'}, head is {head}")
        sys.exit(1)
    click.echo(f"Schema up to date at {head}")


if __name__ == "__main__":
    main()
