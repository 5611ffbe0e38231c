"""
Unit tests for API request/response models.

Tests Pydantic model parsing for the registration endpoint.
"""

import pytest
from pydantic import ValidationError

from src.api.models import ErrorResponse, RegisterRequest


class TestRegisterRequest:
    """Tests for RegisterRequest model."""

    def test_accepts_camel_case_payload(self, valid_payload: dict) -> None:
        """camelCase keys populate snake_case fields."""
        request = RegisterRequest.model_validate(valid_payload)

        assert request.first_name == "Jane"
        assert request.date_of_birth == "1990-04-12"
        assert request.domain is not None
        assert request.domain[0].start_date == "2015-09-01"

    def test_all_fields_optional(self) -> None:
        """Empty body parses; presence is a domain rule."""
        request = RegisterRequest.model_validate({})
        assert request.first_name is None
        assert request.domain is None

    def test_dump_round_trips_camel_case_keys(self, valid_payload: dict) -> None:
        """Dumping by alias restores the submitted payload."""
        request = RegisterRequest.model_validate(valid_payload)
        assert request.model_dump(by_alias=True, exclude_unset=True) == valid_payload

    def test_dump_keeps_empty_license_object(self) -> None:
        """Empty license object survives as an empty dict."""
        request = RegisterRequest.model_validate({"license": {}})
        assert request.model_dump(by_alias=True, exclude_unset=True) == {"license": {}}

    def test_dump_omits_unset_fields(self) -> None:
        """Fields not submitted are absent from the dump."""
        request = RegisterRequest.model_validate({"email": "user@example.com"})
        assert request.model_dump(by_alias=True, exclude_unset=True) == {
            "email": "user@example.com"
        }

    def test_wrong_type_rejected(self) -> None:
        """Non-string name raises ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            RegisterRequest.model_validate({"firstName": 123})
        assert "firstName" in str(exc_info.value)

    def test_domain_must_be_list(self) -> None:
        """Domain given as an object raises ValidationError."""
        with pytest.raises(ValidationError):
            RegisterRequest.model_validate({"domain": {"name": "Acme"}})

    def test_password_not_in_repr(self, valid_payload: dict) -> None:
        """Password is hidden from repr."""
        request = RegisterRequest.model_validate(valid_payload)
        assert "Secure1@pass" not in repr(request)


class TestErrorResponse:
    """Tests for ErrorResponse model."""

    def test_message_response(self) -> None:
        """Message-only response omits customMessage when dumped."""
        response = ErrorResponse(code=500, message="User already exists")
        assert response.model_dump(by_alias=True, exclude_none=True) == {
            "code": 500,
            "message": "User already exists",
        }

    def test_custom_message_uses_camel_case_key(self) -> None:
        """Field error map is serialized under customMessage."""
        response = ErrorResponse(code=500, custom_message={"email": "Invalid Email ID"})
        assert response.model_dump(by_alias=True, exclude_none=True) == {
            "code": 500,
            "customMessage": {"email": "Invalid Email ID"},
        }
