# =============================================================================
# core/models/auth.py - Login / Signup Schemas
# =============================================================================
# These models define the auth form contract:
# - LoginRequest: Credentials for signing in
# - SignupRequest: Fields for creating an account
# - AvatarUpload: Optional avatar image sent with a signup
# - AuthSession / AuthResponse: What the API returns after auth calls
#
# Field validators produce the exact human-readable messages the form shows
# next to each field. Both snake_case and camelCase keys are accepted, and
# errors are always reported under the snake_case field name.
# =============================================================================

import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

MIN_PASSWORD_LENGTH = 6

INVALID_EMAIL_MESSAGE = "Please enter a valid email address"
SHORT_PASSWORD_MESSAGE = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
FIRST_NAME_REQUIRED_MESSAGE = "First name is required"
LAST_NAME_REQUIRED_MESSAGE = "Last name is required"
PASSWORDS_MISMATCH_MESSAGE = "Passwords don't match"

EMAIL_PATTERN = re.compile(
    r"^(?!\.)(?!.*\.\.)([A-Z0-9_'+\-.]*)[A-Z0-9_+\-]@([A-Z0-9][A-Z0-9\-]*\.)+[A-Z]{2,}$",
    re.IGNORECASE,
)


class AuthMode(str, Enum):
    """Which form is being submitted (matches the ?mode= query parameter)."""
    LOGIN = "login"
    SIGNUP = "signup"


class _FormModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        loc_by_alias=False,
        # Missing fields default to "" and still get their field message
        validate_default=True,
    )


def _check_email(value: str) -> str:
    value = value.strip()
    if not EMAIL_PATTERN.match(value):
        raise PydanticCustomError("invalid_email", INVALID_EMAIL_MESSAGE)
    return value


def _check_password(value: str) -> str:
    if len(value) < MIN_PASSWORD_LENGTH:
        raise PydanticCustomError("password_too_short", SHORT_PASSWORD_MESSAGE)
    return value


class LoginRequest(_FormModel):
    """
    Credentials for signing in.

    Transient: never persisted by this service.

    Example:
        {"email": "ada@example.com", "password": "hunter22"}
    """

    email: str = ""
    password: str = ""

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _check_email(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return _check_password(value)


class SignupRequest(_FormModel):
    """
    Fields for creating an account.

    confirm_password must equal password; a mismatch is reported on
    confirm_password.

    Example:
        {
            "firstName": "Ada",
            "lastName": "Lovelace",
            "email": "ada@example.com",
            "password": "hunter22",
            "confirmPassword": "hunter22"
        }
    """

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""

    @field_validator("first_name")
    @classmethod
    def validate_first_name(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("first_name_required", FIRST_NAME_REQUIRED_MESSAGE)
        return value

    @field_validator("last_name")
    @classmethod
    def validate_last_name(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("last_name_required", LAST_NAME_REQUIRED_MESSAGE)
        return value

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _check_email(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return _check_password(value)

    @model_validator(mode="after")
    def passwords_match(self) -> "SignupRequest":
        if self.password != self.confirm_password:
            raise PydanticCustomError("passwords_mismatch", PASSWORDS_MISMATCH_MESSAGE)
        return self

    def user_metadata(self) -> dict[str, str]:
        """Metadata stored on the auth user at sign-up."""
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
        }


class AvatarUpload(BaseModel):
    """An avatar image attached to a signup."""

    filename: str
    content: bytes
    content_type: str | None = None

    @property
    def size_bytes(self) -> int:
        return len(self.content)


# =============================================================================
# Responses
# =============================================================================

class AuthSession(BaseModel):
    """
    Session issued by the identity provider.

    This service only reads it to decide where the user may navigate.
    """

    access_token: str
    refresh_token: str | None = None
    expires_at: int | None = None
    user_id: str
    email: str | None = None


class SignUpOutcome(BaseModel):
    """What the provider returned for a sign-up."""

    user_id: str | None = None
    email: str | None = None
    # None when the project requires email confirmation first
    session: AuthSession | None = None


class Notice(BaseModel):
    """A toast shown to the user."""

    title: str
    description: str
    variant: str = "default"


class AuthResponse(BaseModel):
    """Returned by login and logout."""

    notice: Notice
    redirect_to: str | None = Field(
        default=None,
        description="Route the client should navigate to"
    )
    session: AuthSession | None = None


def field_errors_from(errors: list[dict[str, Any]]) -> dict[str, str]:
    """
    Collapse pydantic error dicts to one message per field.

    The first message for a field wins. Model-level password mismatch errors
    are attached to confirm_password.
    """
    result: dict[str, str] = {}
    for error in errors:
        loc = error.get("loc") or ()
        if loc:
            field = str(loc[0])
        elif error.get("type") == "passwords_mismatch":
            field = "confirm_password"
        else:
            field = "form"
        result.setdefault(field, error.get("msg", "Invalid value"))
    return result
