"""
Registration service entry point.

Builds the FastAPI app that serves ``POST /v1/register``. The users table
is migrated before the first request is accepted, and ``/health`` reports
whether registrations can currently be committed.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.api.v1 import router as v1_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

tags_metadata = [
    {
        "name": "v1",
        "description": "Identity Registration API v1 - Validate and register new users",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the user store pool, migrate the users table, close the pool on exit."""
    settings = get_settings()

    logger.info(
        "Registration service starting (minimum age %d, domain ID pattern %s, all domains %s)",
        settings.minimum_age,
        "on" if settings.validate_domain_id_pattern else "off",
        "on" if settings.validate_all_domains else "off",
    )

    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
        open=True,
    )
    run_migrations(pool)
    logger.info("User store ready (pool size %d-%d)", settings.pool_min_size, settings.pool_max_size)

    app.state.pool = pool

    yield

    pool.close()
    logger.info("Registration service stopped; user store pool closed")


app = FastAPI(
    title="identity-registration",
    description="Identity Registration API - Validates registration profiles and stores new users",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check(request: Request) -> dict[str, str]:
    """
    Report whether new users can be committed.

    Healthy means the user store answers and the users table exists.
    A missing table answers 503.
    """
    pool = request.app.state.pool
    with pool.connection() as conn:
        row = conn.execute("SELECT to_regclass('users') IS NOT NULL").fetchone()

    if not row or not row[0]:
        logger.warning("Health check failed: users table is missing")
        raise HTTPException(status_code=503, detail="users table is missing")

    return {"status": "healthy"}
