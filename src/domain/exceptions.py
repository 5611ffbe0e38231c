"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .validation import ErrorMap

USER_ALREADY_EXISTS = "User already exists"
USER_CREATION_FAILED = "Error Occurred while creating user"


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class InvalidProfile(RegistrationError):
    """One or more field rules failed; carries the full error map."""

    def __init__(self, errors: "ErrorMap") -> None:
        super().__init__(f"Invalid registration profile: {', '.join(errors)}")
        self.errors = errors


class UserAlreadyExists(RegistrationError):
    """An account is already registered under this email."""

    pass


class UserCreationFailed(RegistrationError):
    """The store reported that the user record could not be created."""

    pass


class PasswordHashingFailed(RegistrationError):
    """The hashing primitive failed; the request cannot continue."""

    pass
