"""
PostgreSQL repository adapters - Implement the registration and config ports.

This module provides the PostgreSQL implementations of the domain's
repository ports using psycopg3 with raw SQL.

Storage layout:
- registrations: one row per address, referrer nullable
- config: singleton row (id = 1) holding admin and deadline

Every write runs in its own transaction, so each domain operation
commits fully or not at all. Driver failures are re-raised as the
domain's HostError.
"""

import logging
from pathlib import Path

import psycopg
from psycopg_pool import ConnectionPool

from src.domain.exceptions import HostError
from src.domain.models import Config, Registration

logger = logging.getLogger(__name__)


class PostgresRegistrationRepository:
    """
    Implements RegistrationRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def get(self, identity: str) -> Registration | None:
        sql = "SELECT address, referrer FROM registrations WHERE address = %s"

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (identity,))
                row = cursor.fetchone()
        except psycopg.Error as e:
            raise HostError(f"Failed to read registration: {identity}") from e

        if row is None:
            return None
        return Registration(address=row[0], referrer=row[1])

    def insert(self, identity: str, record: Registration) -> bool:
        """
        Atomically claim identity for a new registration.

        Uses INSERT ... ON CONFLICT DO NOTHING; the primary key on address
        ensures only one concurrent claim succeeds.

        Returns:
            True if the row was inserted, False if address already existed
        """
        sql = """
            INSERT INTO registrations (address, referrer)
            VALUES (%s, %s)
            ON CONFLICT (address) DO NOTHING
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (identity, record.referrer))
                conn.commit()
                return cursor.rowcount == 1
        except psycopg.Error as e:
            raise HostError(f"Failed to store registration: {identity}") from e

    def put(self, identity: str, record: Registration) -> None:
        """
        Insert or overwrite the registration for identity.

        Uses INSERT ... ON CONFLICT DO UPDATE; no create-vs-update
        distinction is made here.
        """
        sql = """
            INSERT INTO registrations (address, referrer)
            VALUES (%s, %s)
            ON CONFLICT (address) DO UPDATE
            SET referrer = EXCLUDED.referrer
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (identity, record.referrer))
                conn.commit()
        except psycopg.Error as e:
            raise HostError(f"Failed to store registration: {identity}") from e

    def delete(self, identity: str) -> None:
        sql = "DELETE FROM registrations WHERE address = %s"

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (identity,))
                conn.commit()
        except psycopg.Error as e:
            raise HostError(f"Failed to delete registration: {identity}") from e


class PostgresConfigRepository:
    """Implements ConfigRepository protocol on the singleton config row."""

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    def load(self) -> Config | None:
        sql = "SELECT admin, deadline FROM config WHERE id = 1"

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql)
                row = cursor.fetchone()
        except psycopg.Error as e:
            raise HostError("Failed to read config") from e

        if row is None:
            return None
        return Config(admin=row[0], deadline=row[1])

    def save(self, config: Config) -> None:
        sql = """
            INSERT INTO config (id, admin, deadline)
            VALUES (1, %s, %s)
            ON CONFLICT (id) DO UPDATE
            SET admin = EXCLUDED.admin,
                deadline = EXCLUDED.deadline
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (config.admin, config.deadline))
                conn.commit()
        except psycopg.Error as e:
            raise HostError("Failed to store config") from e


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
