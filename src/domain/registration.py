"""
Registration domain service - Validate-then-commit pipeline.

This module contains the core business logic for user registration:
validation of the submitted profile, duplicate detection, password
hashing and the create call against the persistence port.

Registration Pipeline
=====================

    Received -> Validating -> Rejected            (InvalidProfile)
                           -> Validated -> Conflict   (UserAlreadyExists)
                                        -> Hashing -> Committing -> Committed
                                                                 -> CommitFailed (UserCreationFailed)

Each terminal state maps to exactly one outcome: a returned user id or one
of the domain exceptions above. Nothing is retried.

Note: the existence check is best-effort. Two concurrent requests for the
same email can both pass it; the UNIQUE constraint on the store decides
which create succeeds and the other ends in CommitFailed.
"""

from dataclasses import dataclass, field

import bcrypt

from .exceptions import (
    USER_ALREADY_EXISTS,
    USER_CREATION_FAILED,
    InvalidProfile,
    PasswordHashingFailed,
    UserAlreadyExists,
    UserCreationFailed,
)
from .ports import UserRepository
from .profile import NewUser, RegistrationProfile
from .validation import ErrorMap, ProfileValidator, parse_iso_date


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Orchestrates the registration flow: profile validation, existence
    check, password hashing and record creation.
    """

    repository: UserRepository
    validator: ProfileValidator = field(default_factory=ProfileValidator)
    bcrypt_cost: int = 10

    def register(self, profile: RegistrationProfile) -> int:
        """
        Register a new user from a submitted profile.

        Args:
            profile: Candidate registration profile (password in plaintext)

        Returns:
            Identifier of the created user

        Raises:
            InvalidProfile: If any field rule fails (repository untouched)
            UserAlreadyExists: If the email is already registered
            PasswordHashingFailed: If bcrypt rejects the password
            UserCreationFailed: If the store reports the create as failed
        """
        errors = self.validator.validate(profile)
        if errors:
            raise InvalidProfile(errors)

        email = self._normalize_email(profile.email or "")
        if self.repository.exists_by_email(email):
            raise UserAlreadyExists(USER_ALREADY_EXISTS)

        new_user = self.prepare_new_user(profile, errors)

        user_id = self.repository.create(new_user)
        if user_id is None:
            raise UserCreationFailed(USER_CREATION_FAILED)
        return user_id

    def prepare_new_user(self, profile: RegistrationProfile, errors: ErrorMap) -> NewUser:
        """
        Turn a validated profile into a commit-ready record.

        This is the only place the plaintext password is replaced by its
        hash. It refuses to run for a profile that has not passed every
        rule, so a partially valid password is never hashed.

        Args:
            profile: Profile that was validated
            errors: Error map produced for that profile

        Returns:
            NewUser with normalized email and bcrypt password hash

        Raises:
            InvalidProfile: If the error map is not empty
            PasswordHashingFailed: If bcrypt rejects the password
        """
        if errors:
            raise InvalidProfile(errors)

        date_of_birth = parse_iso_date(profile.date_of_birth)
        if (
            date_of_birth is None
            or profile.first_name is None
            or profile.last_name is None
            or profile.email is None
            or profile.password is None
            or not profile.domains
        ):
            raise ValueError("prepare_new_user requires a fully validated profile")

        return NewUser(
            first_name=profile.first_name,
            last_name=profile.last_name,
            email=self._normalize_email(profile.email),
            date_of_birth=date_of_birth,
            password_hash=self._hash_password(profile.password),
            license=profile.license,
            domains=profile.domains,
        )

    def _normalize_email(self, email: str) -> str:
        """
        Normalize email address for consistent storage and lookup.

        Applies: strip whitespace + lowercase
        """
        return email.strip().lower()

    def _hash_password(self, password: str) -> str:
        """Hash password using bcrypt with the configured cost factor."""
        try:
            hashed = bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self.bcrypt_cost))
        except (ValueError, TypeError) as e:
            raise PasswordHashingFailed("Password could not be hashed") from e
        return hashed.decode()
