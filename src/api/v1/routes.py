"""
API v1 routes.

Defines REST endpoints for the identity registration API.
"""

import asyncio
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_registration_service
from src.api.errors import REGISTRATION_FAILED, report_error
from src.api.models import ErrorResponse, RegisterRequest
from src.domain.exceptions import (
    USER_ALREADY_EXISTS,
    USER_CREATION_FAILED,
    InvalidProfile,
    UserAlreadyExists,
    UserCreationFailed,
)
from src.domain.profile import RegistrationProfile
from src.domain.registration import RegistrationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["v1"])

# Every pipeline failure is reported with the same status; clients tell
# them apart by the body (message vs customMessage).
FAILURE_STATUS = status.HTTP_500_INTERNAL_SERVER_ERROR


@router.post(
    "/register",
    response_model=bool,
    status_code=status.HTTP_200_OK,
    responses={
        500: {
            "model": ErrorResponse,
            "description": "Invalid profile, user already exists, or creation failed",
        },
        422: {"description": "Malformed request body"},
    },
    summary="Register a new user",
    description="Submit a registration profile. Every field rule is checked and all "
    "failing fields are reported together; a valid profile is stored with its "
    "password hashed.",
)
async def register(
    request_data: RegisterRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> bool | JSONResponse:
    """
    Validate and persist a registration profile.

    - **firstName**, **lastName**: at least 3 characters, starting with a capital letter
    - **email**: valid email address, must not be registered yet
    - **dateOfBirth**: YYYY-MM-DD, applicant must be at least 18
    - **password**: 6+ characters with lowercase, uppercase, digit and one of @$!%*?&
    - **license**: optional; number plus front and back images
    - **domain**: at least one organisation with name, id, startDate and images

    Returns `true` on success.
    """
    profile = RegistrationProfile.from_payload(
        request_data.model_dump(by_alias=True, exclude_unset=True)
    )

    try:
        user_id = await asyncio.to_thread(service.register, profile)
    except InvalidProfile as e:
        logger.warning("Registration rejected, invalid fields: %s", ", ".join(e.errors))
        return report_error(FAILURE_STATUS, custom_message=e.errors)
    except UserAlreadyExists:
        logger.info("Registration rejected, email already registered")
        return report_error(FAILURE_STATUS, message=USER_ALREADY_EXISTS)
    except UserCreationFailed:
        logger.error("Registration failed, user record was not created")
        return report_error(FAILURE_STATUS, message=USER_CREATION_FAILED)
    except Exception:
        logger.exception("Registration failed unexpectedly")
        return report_error(FAILURE_STATUS, message=REGISTRATION_FAILED)

    logger.info("User registered: id=%s", user_id)
    return True
