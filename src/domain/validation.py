"""
Profile validation - Field rules for a registration profile.

Each field is checked by its own rule chain, evaluated in a fixed order:

1. Presence - a missing value reports the "required" message and stops.
2. Shape - length and count checks.
3. Pattern - capitalization, alphanumeric and email patterns.

The first failing rule of a chain wins, so a field carries at most one
message. Chains are independent: a failure in one field never hides the
result of another.

Errors are reported under flat keys (``licenseNo``, ``domainStartDate``)
that clients already consume, while each ``FieldError`` also carries the
dotted path into the nested payload (``license.number``,
``domain[0].startDate``) so keys never collide as nesting grows.

Validation is pure: it reads the injected clock and nothing else, and it
never mutates the profile. Password hashing belongs to the registrar.
"""

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from datetime import date, datetime
from types import MappingProxyType

from .patterns import (
    ALPHANUMERIC,
    ALPHANUMERIC_WITH_FIRST_CAPITAL_LETTER,
    DIGIT,
    EMAIL,
    ISO_DATE,
    ISO_DATE_FORMAT,
    LOWERCASE,
    PASSWORD,
    SPECIAL,
    SPECIAL_CHARACTERS,
    UPPERCASE,
)
from .profile import DomainAffiliation, LicenseRecord, RegistrationProfile

MINIMUM_IMAGES = 2

# bcrypt only hashes the first 72 bytes and newer releases refuse longer input
MAXIMUM_PASSWORD_BYTES = 72


@dataclass(frozen=True)
class FieldError:
    """A single failed field rule."""

    key: str
    path: str
    message: str


class ErrorMap(Mapping[str, str]):
    """
    Immutable mapping of field key to error message.

    Built once from the finished sequence of field errors. An empty map
    means the profile is persist-eligible.
    """

    __slots__ = ("_errors", "_messages")

    def __init__(self, errors: Iterable[FieldError] = ()) -> None:
        messages: dict[str, str] = {}
        kept: list[FieldError] = []
        for error in errors:
            if error.key in messages:
                continue
            messages[error.key] = error.message
            kept.append(error)
        self._errors = tuple(kept)
        self._messages = MappingProxyType(messages)

    def __getitem__(self, key: str) -> str:
        return self._messages[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __repr__(self) -> str:
        return f"ErrorMap({dict(self._messages)!r})"

    @property
    def errors(self) -> tuple[FieldError, ...]:
        """Field errors in rule-evaluation order."""
        return self._errors

    def by_path(self) -> dict[str, str]:
        """Messages keyed by dotted payload path instead of flat key."""
        return {error.path: error.message for error in self._errors}

    def to_dict(self) -> dict[str, str]:
        return dict(self._messages)


def parse_iso_date(value: object) -> date | None:
    """
    Parse a strict ``YYYY-MM-DD`` calendar date.

    Returns None for anything that is not a zero-padded ISO date or that
    names a day which does not exist (``2023-02-30``).
    """
    if not isinstance(value, str) or not ISO_DATE.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, ISO_DATE_FORMAT).date()
    except ValueError:
        return None


def age_on(birth: date, today: date) -> int:
    """Age in completed years on the given day."""
    had_birthday = (today.month, today.day) >= (birth.month, birth.day)
    return today.year - birth.year - (0 if had_birthday else 1)


def _field(key: str, path: str, message: str | None) -> FieldError | None:
    if message is None:
        return None
    return FieldError(key=key, path=path, message=message)


def _check_name(value: str | None, label: str, pattern_message: str) -> str | None:
    if not value:
        return f"{label} is required"
    if len(value) <= 2:
        return f"{label} must contain 3 chars"
    if not ALPHANUMERIC_WITH_FIRST_CAPITAL_LETTER.fullmatch(value):
        return pattern_message
    return None


def _check_email(value: str | None) -> str | None:
    if not value:
        return "Email ID is required"
    if not EMAIL.fullmatch(value):
        return "Invalid Email ID"
    return None


def _check_password(value: str | None) -> str | None:
    if not value:
        return "Password is required"
    if len(value) < 6:
        return "Password must be at least 6 characters long"
    if not LOWERCASE.search(value):
        return "Password must contain at least one lowercase letter"
    if not UPPERCASE.search(value):
        return "Password must contain at least one uppercase letter"
    if not DIGIT.search(value):
        return "Password must contain at least one number"
    if not SPECIAL.search(value):
        specials = ", ".join(SPECIAL_CHARACTERS)
        return f"Password must contain at least one special character ({specials})"
    if len(value.encode("utf-8")) > MAXIMUM_PASSWORD_BYTES:
        return f"Password must not exceed {MAXIMUM_PASSWORD_BYTES} bytes"
    if not PASSWORD.fullmatch(value):
        return "Password must meet all the requirements"
    return None


def _check_images(images: tuple[str, ...] | None, required_message: str) -> str | None:
    # An empty list counts as present; only the count rule rejects it
    if images is None:
        return required_message
    if len(images) < MINIMUM_IMAGES:
        return "Front and Back side images are required"
    return None


def _license_errors(license: LicenseRecord) -> Iterator[FieldError | None]:
    yield _field(
        "licenseNo", "license.number", None if license.number else "License is required"
    )
    yield _field(
        "licenseImage",
        "license.images",
        _check_images(license.images, "License Images are required"),
    )


@dataclass(frozen=True)
class ProfileValidator:
    """
    Rule set for registration profiles.

    Attributes:
        minimum_age: Youngest accepted age in whole years.
        check_domain_id_pattern: Also require the domain ID to be
            alphanumeric. Off by default: historically only presence of the
            ID was enforced and existing clients rely on that.
        check_all_domains: Validate every domain entry, not only the first.
            Entries after the first report under index-suffixed keys
            (``domainName[1]``).
        today: Clock used for the age rule.
    """

    minimum_age: int = 18
    check_domain_id_pattern: bool = False
    check_all_domains: bool = False
    today: Callable[[], date] = date.today

    def validate(self, profile: RegistrationProfile) -> ErrorMap:
        """
        Compute the error map for a profile.

        Args:
            profile: Candidate registration profile

        Returns:
            ErrorMap, empty when the profile is persist-eligible
        """
        return ErrorMap(error for error in self._field_errors(profile) if error is not None)

    def _field_errors(self, profile: RegistrationProfile) -> Iterator[FieldError | None]:
        yield _field(
            "firstName",
            "firstName",
            _check_name(profile.first_name, "First Name", "First Name must start with a letter."),
        )
        yield _field(
            "lastName",
            "lastName",
            _check_name(profile.last_name, "Last Name", "Last Name must start with a letter"),
        )
        yield _field("email", "email", _check_email(profile.email))
        yield _field("dateOfBirth", "dateOfBirth", self._check_date_of_birth(profile.date_of_birth))
        yield _field("password", "password", _check_password(profile.password))

        if profile.license is not None:
            yield from _license_errors(profile.license)

        if not profile.domains:
            yield FieldError(
                key="domain",
                path="domain",
                message="Organisation/Institution name is required",
            )
            return

        entries = profile.domains if self.check_all_domains else profile.domains[:1]
        for index, entry in enumerate(entries):
            yield from self._domain_errors(entry, index)

    def _check_date_of_birth(self, value: str | None) -> str | None:
        if not value:
            return "Date of Birth is required"
        birth = parse_iso_date(value)
        if birth is None:
            return "Date of Birth is Invalid"
        if age_on(birth, self.today()) < self.minimum_age:
            return f"You must be greater than {self.minimum_age} years old"
        return None

    def _domain_errors(self, entry: DomainAffiliation, index: int) -> Iterator[FieldError | None]:
        suffix = "" if index == 0 else f"[{index}]"
        prefix = f"domain[{index}]"

        if not entry.name:
            name_message = "Name is required"
        elif not ALPHANUMERIC_WITH_FIRST_CAPITAL_LETTER.fullmatch(entry.name):
            name_message = "Name must be Alphanumeric"
        else:
            name_message = None
        yield _field(f"domainName{suffix}", f"{prefix}.name", name_message)

        if not entry.id:
            id_message = "Organisation/Institution ID is required"
        elif self.check_domain_id_pattern and not ALPHANUMERIC.fullmatch(entry.id):
            id_message = "Domain ID must be Alphanumeric"
        else:
            id_message = None
        yield _field(f"domainID{suffix}", f"{prefix}.id", id_message)

        if not entry.start_date:
            start_message = "Start Date is required"
        elif parse_iso_date(entry.start_date) is None:
            start_message = "Start Date is Invalid"
        else:
            start_message = None
        yield _field(f"domainStartDate{suffix}", f"{prefix}.startDate", start_message)

        end_message = None
        if entry.end_date and parse_iso_date(entry.end_date) is None:
            end_message = "End Date is Invalid"
        yield _field(f"domainEndDate{suffix}", f"{prefix}.endDate", end_message)

        yield _field(
            f"domainIDImages{suffix}",
            f"{prefix}.images",
            _check_images(entry.images, "Domain ID Images are required"),
        )
