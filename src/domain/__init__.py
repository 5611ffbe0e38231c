"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for identity registration:
profile value types, field validation rules and the registration service.
It defines its own port interfaces for infrastructure abstraction, ensuring
true hexagonal architecture decoupling.
"""

from .exceptions import (
    InvalidProfile,
    PasswordHashingFailed,
    RegistrationError,
    UserAlreadyExists,
    UserCreationFailed,
)
from .ports import UserRepository
from .profile import DomainAffiliation, LicenseRecord, NewUser, RegistrationProfile
from .registration import RegistrationService
from .validation import ErrorMap, FieldError, ProfileValidator

__all__ = [
    "DomainAffiliation",
    "ErrorMap",
    "FieldError",
    "InvalidProfile",
    "LicenseRecord",
    "NewUser",
    "PasswordHashingFailed",
    "ProfileValidator",
    "RegistrationError",
    "RegistrationProfile",
    "RegistrationService",
    "UserAlreadyExists",
    "UserCreationFailed",
    "UserRepository",
]
