# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors should tell HOW to fix, not just WHAT failed.
#
# Auth-facing errors also carry a "notice" (title + description) that the
# frontend shows as a toast.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again."


class FileAIException(Exception):
    """
    Base exception for the FileAI API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "FILEAI_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
        notice_title: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}
        self.notice_title = notice_title

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result: dict[str, Any] = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        if self.notice_title:
            result["notice"] = {
                "title": self.notice_title,
                "description": self.message,
                "variant": "destructive",
            }
        return result


# =============================================================================
# Form / Auth Exceptions
# =============================================================================

class FormValidationError(FileAIException):
    """Raised when a login or signup form fails field validation."""

    def __init__(self, errors: dict[str, str]):
        super().__init__(
            message="Please correct the highlighted fields",
            code="FORM_VALIDATION_ERROR",
            status_code=422,
            suggestion="Fix the fields listed in details.errors and submit again",
            details={"errors": errors},
        )
        self.errors = errors


class AuthProviderError(FileAIException):
    """
    Raised when the identity provider rejects a sign-in or sign-up.

    The provider's message is passed through verbatim.
    """

    def __init__(self, message: str, title: str = "Login Failed", status_code: int = 401):
        super().__init__(
            message=message,
            code="AUTH_PROVIDER_ERROR",
            status_code=status_code,
            notice_title=title,
        )


class NotAuthenticatedError(FileAIException):
    """Raised when a request has no valid session token."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(
            message=message,
            code="NOT_AUTHENTICATED",
            status_code=401,
            suggestion="Sign in at /auth?mode=login and send the access token as a Bearer header",
        )


class UnexpectedAuthError(FileAIException):
    """Raised when the submit handler fails for a reason nobody anticipated."""

    def __init__(self, error: str):
        super().__init__(
            message=GENERIC_ERROR_MESSAGE,
            code="UNEXPECTED_AUTH_ERROR",
            status_code=500,
            details={"error": error},
            notice_title="Error",
        )


class SubmissionInProgressError(FileAIException):
    """Raised when a form is submitted again while the first submit is running."""

    def __init__(self):
        super().__init__(
            message="A submission is already in progress",
            code="SUBMISSION_IN_PROGRESS",
            status_code=409,
            suggestion="Wait for the current request to finish",
        )


# =============================================================================
# Avatar Exceptions
# =============================================================================

class InvalidAvatarError(FileAIException):
    """Raised when the uploaded avatar is not an image."""

    def __init__(self, filename: str, content_type: str | None):
        super().__init__(
            message=f"Avatar must be an image: {filename}",
            code="INVALID_AVATAR",
            status_code=400,
            suggestion="Upload a PNG, JPEG, GIF or WebP image",
            details={"filename": filename, "content_type": content_type},
        )


class AvatarTooLargeError(FileAIException):
    """Raised when the uploaded avatar exceeds the size limit."""

    def __init__(self, size_mb: float, max_mb: int):
        super().__init__(
            message=f"Avatar too large: {size_mb:.1f}MB (max: {max_mb}MB)",
            code="AVATAR_TOO_LARGE",
            status_code=413,
            suggestion=f"Upload an image smaller than {max_mb}MB",
            details={"size_mb": size_mb, "max_mb": max_mb},
        )


# =============================================================================
# Profile / Provisioning Exceptions
# =============================================================================

class ProfileNotFoundError(FileAIException):
    """Raised when a user has no profile row."""

    def __init__(self, user_id: str):
        super().__init__(
            message=f"Profile not found for user: {user_id}",
            code="PROFILE_NOT_FOUND",
            status_code=404,
            suggestion="The profile is written at signup; it may have failed to save",
            details={"user_id": user_id},
        )


class ProvisioningError(FileAIException):
    """Raised by the provisioning function when an index cannot be created."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="PROVISIONING_ERROR",
            status_code=500,
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def fileai_exception_handler(
    request: Request,
    exc: FileAIException
) -> JSONResponse:
    """
    Convert FileAIException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    - notice: Toast payload (auth errors only)
    """
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, NotAuthenticatedError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
        headers=headers,
    )
