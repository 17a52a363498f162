"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the profile service."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    IDENTITY_VALIDATION_FAILED = "IDENTITY_VALIDATION_FAILED"

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"

    # Conflict errors (409)
    USER_ALREADY_EXISTS = "USER_ALREADY_EXISTS"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class IdentityValidationError(AuthenticationError):
    """The identity provider did not supply a required attribute."""

    def __init__(self, message: str) -> None:
        super().__init__(
            message=message,
            error_code=ErrorCode.IDENTITY_VALIDATION_FAILED,
        )


class DuplicateUserError(AppException):
    """A profile with the same external identity key or email already exists."""

    def __init__(self, field: str, value: str | None) -> None:
        if field == "uid":
            message = f"User with Uid {value} already exist"
        elif field == "email":
            message = f"User with email id {value} already exist"
        else:
            message = "User already exist"
        super().__init__(
            error_code=ErrorCode.USER_ALREADY_EXISTS,
            message=message,
            status_code=409,
            details={"field": field, "value": value},
        )


class ProfileNotFoundError(AppException):
    """Profile not found."""

    def __init__(self, profile_id: int | str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"Profile with id: {profile_id} doesn't exist",
            status_code=404,
            details={"profile_id": str(profile_id)},
        )
