"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.

Request fields are all optional on purpose: presence, length and pattern
rules are enforced by the domain validator so every failing field is
reported in one error map, rather than by FastAPI's 422 handler. Pydantic
still rejects payloads with the wrong JSON types.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exchanging camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel)


class LicensePayload(CamelModel):
    """Government-issued license submitted with a registration."""

    number: str | None = None
    images: list[str] | None = Field(default=None, description="Front and back image references")


class DomainPayload(CamelModel):
    """Organisation/institution affiliation submitted with a registration."""

    name: str | None = None
    id: str | None = None
    start_date: str | None = Field(default=None, description="YYYY-MM-DD")
    end_date: str | None = Field(default=None, description="YYYY-MM-DD, optional")
    images: list[str] | None = Field(default=None, description="Front and back ID image references")


class RegisterRequest(CamelModel):
    """Request model for user registration."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    date_of_birth: str | None = Field(default=None, description="YYYY-MM-DD")
    password: str | None = Field(default=None, repr=False)
    license: LicensePayload | None = None
    domain: list[DomainPayload] | None = None


class ErrorResponse(BaseModel):
    """
    Standard error response model.

    Exactly one of ``message`` and ``customMessage`` is set: a single
    message for pipeline failures, or the field error map when the profile
    failed validation.
    """

    code: int
    message: str | None = None
    custom_message: dict[str, str] | None = Field(default=None, serialization_alias="customMessage")
