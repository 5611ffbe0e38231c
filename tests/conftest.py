"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A valid registration payload and a fixed validation date
- Database connection pool for integration and adversarial tests
"""

import copy
from collections.abc import Generator
from datetime import date
from typing import Any

import pytest
from psycopg_pool import ConnectionPool, PoolTimeout

from src.adapters.repository.postgres import run_migrations
from src.config.settings import get_settings
from src.domain.validation import ProfileValidator

# Day the age rule is evaluated against in validator tests
TODAY = date(2026, 6, 15)

VALID_PAYLOAD: dict[str, Any] = {
    "firstName": "Jane",
    "lastName": "Doe",
    "email": "jane.doe@example.com",
    "dateOfBirth": "1990-04-12",
    "password": "Secure1@pass",
    "license": {"number": "DL123456", "images": ["license-front.jpg", "license-back.jpg"]},
    "domain": [
        {
            "name": "Acme",
            "id": "ACME001",
            "startDate": "2015-09-01",
            "endDate": "2020-06-30",
            "images": ["id-front.jpg", "id-back.jpg"],
        }
    ],
}


@pytest.fixture
def valid_payload() -> dict[str, Any]:
    """Fresh copy of a payload that passes every field rule."""
    return copy.deepcopy(VALID_PAYLOAD)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def validator() -> ProfileValidator:
    """Validator with a fixed clock."""
    return ProfileValidator(today=lambda: TODAY)


@pytest.fixture(scope="session")
def pool() -> Generator[ConnectionPool, None, None]:
    """Connection pool against the configured database; skips if unreachable."""
    settings = get_settings()
    pool = ConnectionPool(conninfo=settings.database_url, min_size=1, max_size=10, open=False)
    try:
        pool.open(wait=True, timeout=5.0)
    except PoolTimeout:
        pool.close()
        pytest.skip("PostgreSQL is not reachable")
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Clean users table before each test."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM users")
        conn.commit()
    yield
