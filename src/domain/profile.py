"""
Registration profile - Value types for an inbound registration.

A ``RegistrationProfile`` is built fresh for every request from the
JSON-shaped payload and is never mutated. Once it has passed validation it
is turned into a ``NewUser`` whose plaintext password has been replaced by
its hash; that is the only form handed to the persistence port.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date
from typing import Any


def _images(value: Sequence[str] | None) -> tuple[str, ...] | None:
    if value is None:
        return None
    return tuple(value)


@dataclass(frozen=True)
class LicenseRecord:
    """Government-issued license with front/back document images."""

    number: str | None = None
    images: tuple[str, ...] | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | None) -> "LicenseRecord | None":
        """
        Build a license record, or None when the object carries no keys.

        An empty object means the applicant did not submit a license at all,
        so no license rules apply to it.
        """
        if not payload:
            return None
        return cls(number=payload.get("number"), images=_images(payload.get("images")))

    def as_document(self) -> dict[str, Any]:
        return {"number": self.number, "images": list(self.images or ())}


@dataclass(frozen=True)
class DomainAffiliation:
    """Organisation/institution the applicant belongs to."""

    name: str | None = None
    id: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    images: tuple[str, ...] | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "DomainAffiliation":
        return cls(
            name=payload.get("name"),
            id=payload.get("id"),
            start_date=payload.get("startDate"),
            end_date=payload.get("endDate"),
            images=_images(payload.get("images")),
        )

    def as_document(self) -> dict[str, Any]:
        document: dict[str, Any] = {
            "name": self.name,
            "id": self.id,
            "startDate": self.start_date,
            "images": list(self.images or ()),
        }
        if self.end_date:
            document["endDate"] = self.end_date
        return document


@dataclass(frozen=True)
class RegistrationProfile:
    """
    Candidate profile submitted for registration.

    Every field is optional at this stage; presence is a validation rule,
    not a construction requirement. The password is excluded from repr so
    it cannot leak through logging of the profile.
    """

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    date_of_birth: str | None = None
    password: str | None = field(default=None, repr=False)
    license: LicenseRecord | None = None
    domains: tuple[DomainAffiliation, ...] | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "RegistrationProfile":
        """
        Build a profile from a camelCase JSON-shaped mapping.

        Args:
            payload: Request body with keys such as ``firstName`` and ``domain``.
                Keys that were not submitted must be absent, not None, for
                the optional license block to be skipped correctly.

        Returns:
            Unvalidated RegistrationProfile
        """
        raw_domains = payload.get("domain")
        domains = None
        if raw_domains is not None:
            domains = tuple(DomainAffiliation.from_payload(entry) for entry in raw_domains)

        return cls(
            first_name=payload.get("firstName"),
            last_name=payload.get("lastName"),
            email=payload.get("email"),
            date_of_birth=payload.get("dateOfBirth"),
            password=payload.get("password"),
            license=LicenseRecord.from_payload(payload.get("license")),
            domains=domains,
        )


@dataclass(frozen=True)
class NewUser:
    """Commit-ready user record: normalized email, parsed birth date, hashed password."""

    first_name: str
    last_name: str
    email: str
    date_of_birth: date
    password_hash: str = field(repr=False)
    license: LicenseRecord | None
    domains: tuple[DomainAffiliation, ...]
