"""
Shared fixtures for adversarial tests.

Provides common test infrastructure for race condition tests.
"""

from collections.abc import Callable
from datetime import date

import pytest
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import PostgresUserRepository
from src.domain.profile import DomainAffiliation, NewUser

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


@pytest.fixture
def repository(pool: ConnectionPool, clean_database: None) -> PostgresUserRepository:
    """Create repository instance over a clean users table."""
    return PostgresUserRepository(pool)


@pytest.fixture
def make_user() -> Callable[[str], NewUser]:
    """Factory for commit-ready users."""

    def build(email: str) -> NewUser:
        return NewUser(
            first_name="Mallory",
            last_name="Attacker",
            email=email,
            date_of_birth=date(1990, 1, 1),
            password_hash="$2b$10$attackhash",
            license=None,
            domains=(
                DomainAffiliation(name="Acme", id="A1", start_date="2020-01-01", images=("f", "b")),
            ),
        )

    return build
