"""
PostgreSQL repository adapter - Implements UserRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Duplicate Arbitration:
----------------------
The domain performs a read-before-write existence check, which cannot
prevent two concurrent registrations of the same email from both passing.
The ``users.email`` UNIQUE constraint is the real guarantee: ``create``
inserts with ``ON CONFLICT (email) DO NOTHING`` so the losing request gets
no row back and the domain reports a creation failure instead of a driver
exception.

License and domain records are stored as JSONB documents on the user row;
their images are opaque references.
"""

import logging
from pathlib import Path

from psycopg.types.json import Jsonb
from psycopg_pool import ConnectionPool

from src.domain.profile import NewUser

logger = logging.getLogger(__name__)


class PostgresUserRepository:
    """
    Implements UserRepository protocol via psycopg3.

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

    def exists_by_email(self, email: str) -> bool:
        """
        Check whether a user is registered under the email.

        Args:
            email: Normalized email address (lowercase, stripped)

        Returns:
            True if a row with this email exists
        """
        sql = "SELECT EXISTS (SELECT 1 FROM users WHERE email = %s)"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (email,))
            row = cursor.fetchone()
            return bool(row and row[0])

    def create(self, user: NewUser) -> int | None:
        """
        Insert a new user row.

        Args:
            user: Commit-ready user from the domain layer

        Returns:
            The new user id, or None if the email was taken in the meantime
        """
        sql = """
            INSERT INTO users (first_name, last_name, email, date_of_birth, password_hash, license, domains)
            VALUES (%s, %s, %s, %s, %s, %s, %s)
            ON CONFLICT (email) DO NOTHING
            RETURNING id
        """
        license_document = Jsonb(user.license.as_document()) if user.license else None
        domains_document = Jsonb([domain.as_document() for domain in user.domains])

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(
                sql,
                (
                    user.first_name,
                    user.last_name,
                    user.email,
                    user.date_of_birth,
                    user.password_hash,
                    license_document,
                    domains_document,
                ),
            )
            row = cursor.fetchone()
            conn.commit()

        if row is None:
            logger.warning("User insert skipped: email already taken by a concurrent registration")
            return None
        return row[0]


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
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
