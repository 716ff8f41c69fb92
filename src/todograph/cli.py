"""CLI for todograph.

Provides the command-line interface for serving the API and migrating the
database.
"""

from __future__ import annotations

import asyncio
import logging
import sys

import click

from .config import DEFAULT_HOST, DEFAULT_PORT, Settings
from .database import (
    DEFAULT_DB_PATH,
    DEFAULT_MAX_WORKERS,
    MigrationError,
    StoreError,
    TodoGraphDB,
    log_error_chain,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(quiet: bool, verbose: int) -> int:
    """Set up logging as specified by the ``-q`` and ``-v`` flags.

    Returns:
        The root log level chosen.
    """
    if quiet:
        level = logging.ERROR
    elif verbose >= 1:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", force=True)
    return level


@click.group()
@click.option("--quiet", "-q", is_flag=True, help="Turn off message output")
@click.option("--verbose", "-v", count=True, help="Increase the verbosity")
@click.pass_context
def cli(ctx: click.Context, quiet: bool, verbose: int) -> None:
    """todograph - a todo tracker with dependencies between todos."""
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = configure_logging(quiet, verbose)


def _db_option(func):  # type: ignore[no-untyped-def]
    return click.option(
        "--db",
        "database_path",
        envvar="DATABASE_PATH",
        default=str(DEFAULT_DB_PATH),
        show_default=True,
        type=click.Path(dir_okay=False),
        help="The name of the SQLite database file",
    )(func)


@cli.command()
@_db_option
@click.option("--host", "-H", envvar="HOST", default=DEFAULT_HOST, show_default=True,
              help="The host to serve on")
@click.option("--port", "-P", envvar="PORT", default=DEFAULT_PORT, show_default=True,
              type=click.IntRange(0, 65535), help="The port to serve on")
@click.option("--username", envvar="USERNAME", required=True,
              help="The username to require for auth")
@click.option("--password", envvar="PASSWORD", required=True,
              help="The password to require for auth")
@click.option("--workers", "-w", "max_workers", envvar="MAX_WORKERS",
              default=DEFAULT_MAX_WORKERS, show_default=True, type=click.IntRange(1, 64),
              help="Max store operations in flight at once")
@click.option("--reload", is_flag=True, help="Enable auto-reload on code changes")
@click.pass_context
def serve(
    ctx: click.Context,
    database_path: str,
    host: str,
    port: int,
    username: str,
    password: str,
    max_workers: int,
    reload: bool,
) -> None:
    """Start the API server."""
    settings = Settings(
        database_path=database_path,
        host=host,
        port=port,
        username=username,
        password=password,
        max_workers=max_workers,
    )

    # Migrate up front so a broken database stops the process before binding.
    if not _migrate(settings.database_path):
        sys.exit(1)

    from todograph.api.serve import run_server

    log_level = logging.getLevelName(ctx.obj.get("log_level", logging.INFO)).lower()
    logger.info("Serving on %s:%d", settings.host, settings.port)
    run_server(settings, log_level=log_level, reload=reload)


@cli.command()
@_db_option
def migrate(database_path: str) -> None:
    """Apply pending schema migrations and exit."""
    if not _migrate(database_path, report=True):
        sys.exit(1)


def _migrate(database_path: str, report: bool = False) -> bool:
    """Open the database, apply migrations, and close it again.

    Returns:
        True on success. Failures are logged with their cause chain.
    """
    try:
        applied = asyncio.run(_migrate_async(database_path))
    except (MigrationError, StoreError) as exc:
        log_error_chain(exc, logger)
        return False

    if report:
        if applied:
            click.echo(f"Applied {len(applied)} migration(s): {', '.join(applied)}")
        else:
            click.echo("Database schema is up to date")
    return True


async def _migrate_async(database_path: str) -> list[str]:
    """Async implementation of the migration step."""
    async with TodoGraphDB(database_path) as db:
        return list(db.applied_migrations)


def main() -> None:
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
