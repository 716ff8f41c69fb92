"""Versioned schema migrations.

Migrations are plain SQL files shipped inside the package under
``sql/`` and named ``<version>_<name>.sql``. Applied versions are
recorded in a bookkeeping table, so running the migrations against an
up-to-date database is a no-op and running them against an empty file
creates the full schema.
"""

from __future__ import annotations

import logging
import re
import sys
from dataclasses import dataclass
from importlib.resources import files
from typing import TextIO

import aiosqlite

from .errors import MigrationError

logger = logging.getLogger(__name__)

MIGRATIONS_TABLE = "__todograph_schema_migrations"

_MIGRATION_FILE_RE = re.compile(r"^(?P<version>\d+)_(?P<name>\w+)\.sql$")


@dataclass(frozen=True)
class Migration:
    """A single schema migration."""

    version: str
    name: str
    sql: str


def load_migrations() -> list[Migration]:
    """Load the bundled migrations, ordered by version.

    Returns:
        List of migrations in the order they must be applied.
    """
    migrations: list[Migration] = []
    for entry in files(__package__).joinpath("sql").iterdir():
        match = _MIGRATION_FILE_RE.match(entry.name)
        if match is None:
            continue
        migrations.append(
            Migration(
                version=match["version"],
                name=match["name"],
                sql=entry.read_text(encoding="utf-8"),
            )
        )
    migrations.sort(key=lambda m: int(m.version))
    return migrations


async def applied_versions(conn: aiosqlite.Connection) -> set[str]:
    """Return the set of migration versions already applied."""
    await conn.execute(
        f"""
        CREATE TABLE IF NOT EXISTS {MIGRATIONS_TABLE} (
            version VARCHAR(50) PRIMARY KEY NOT NULL,
            run_on TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
        )
        """
    )
    await conn.commit()
    async with conn.execute(f"SELECT version FROM {MIGRATIONS_TABLE}") as cursor:
        return {row[0] for row in await cursor.fetchall()}


async def run_migrations(
    conn: aiosqlite.Connection,
    migrations: list[Migration] | None = None,
    output: TextIO | None = None,
) -> list[str]:
    """Apply every pending migration in order.

    Each migration runs in its own transaction together with the row that
    records it, so a failing migration leaves neither schema changes nor a
    bookkeeping entry behind.

    Args:
        conn: Open database connection.
        migrations: Migrations to apply. Defaults to the bundled ones.
        output: Stream for progress messages. Defaults to ``sys.stderr``.

    Returns:
        Versions applied by this call, in order. Empty if the schema was
        already current.

    Raises:
        MigrationError: If a migration cannot be applied.
    """
    if migrations is None:
        migrations = load_migrations()
    if output is None:
        output = sys.stderr

    done = await applied_versions(conn)
    pending = [m for m in migrations if m.version not in done]
    if not pending:
        logger.debug("Database schema is up to date")
        return []

    applied: list[str] = []
    for migration in pending:
        output.write(f"Running migration {migration.version}_{migration.name}\n")
        logger.info("Applying migration %s (%s)", migration.version, migration.name)
        script = (
            "BEGIN;\n"
            f"{migration.sql}\n"
            f"INSERT INTO {MIGRATIONS_TABLE} (version) VALUES ('{migration.version}');\n"
            "COMMIT;\n"
        )
        try:
            await conn.executescript(script)
        except Exception as e:
            await conn.rollback()
            raise MigrationError(migration.version, migration.name) from e
        applied.append(migration.version)

    output.flush()
    return applied
