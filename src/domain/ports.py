"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Protocol

from .profile import NewUser


class UserRepository(Protocol):
    """Port interface for user persistence."""

    def exists_by_email(self, email: str) -> bool:
        """
        Check whether an account is already registered under an email.

        This is a read-before-write heuristic only. Under concurrent writers
        two requests can both observe False; the store's uniqueness
        constraint decides which create wins.

        Args:
            email: Normalized email address

        Returns:
            True if a user with this email exists
        """
        ...

    def create(self, user: NewUser) -> int | None:
        """
        Persist a new user record.

        Failures the store reports as a value, including a uniqueness
        conflict lost to a concurrent registration, return None. Driver
        errors propagate as exceptions.

        Args:
            user: Commit-ready user with hashed password

        Returns:
            Identifier of the created user, or None if creation failed
        """
        ...
