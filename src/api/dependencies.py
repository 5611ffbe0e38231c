"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import PostgresUserRepository
from src.config.settings import get_settings
from src.domain.registration import RegistrationService
from src.domain.validation import ProfileValidator


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresUserRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresUserRepository(pool)


def get_profile_validator() -> ProfileValidator:
    """Build the profile validator from settings."""
    settings = get_settings()
    return ProfileValidator(
        minimum_age=settings.minimum_age,
        check_domain_id_pattern=settings.validate_domain_id_pattern,
        check_all_domains=settings.validate_all_domains,
    )


def get_registration_service(request: Request) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the repository, validator and hashing cost for the
    domain service. A new service is built per request; it holds no state.
    """
    return RegistrationService(
        repository=get_repository(request),
        validator=get_profile_validator(),
        bcrypt_cost=get_settings().bcrypt_cost,
    )
