# =============================================================================
# core/validation.py - Auth Form Validation
# =============================================================================
# Validates a login or signup field set against static rules:
# - email shape
# - password length
# - first/last name present (signup)
# - password confirmation matches (signup)
#
# Pure function, no side effects. Nothing else (password strength, email
# uniqueness) is checked here; the identity provider owns those rules.
#
# Usage:
#   from core.validation import validate_form
#   result = validate_form({"email": "a@b.co", "password": "secret1"}, AuthMode.LOGIN)
#   if not result.ok:
#       print(result.errors)  # {"password": "..."}
# =============================================================================

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from core.models.auth import (
    PASSWORDS_MISMATCH_MESSAGE,
    AuthMode,
    LoginRequest,
    SignupRequest,
    field_errors_from,
)


@dataclass
class ValidationResult:
    """Either an accepted request or a field -> message mapping."""

    request: LoginRequest | SignupRequest | None = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.request is not None and not self.errors


def _passwords_differ(fields: Mapping[str, Any]) -> bool:
    password = fields.get("password", "")
    confirm = fields.get("confirm_password", fields.get("confirmPassword", ""))
    return password != confirm


def validate_form(fields: Mapping[str, Any], mode: AuthMode | str) -> ValidationResult:
    """
    Validate a login or signup field set.

    Args:
        fields: Raw form values (snake_case or camelCase keys)
        mode: AuthMode.LOGIN or AuthMode.SIGNUP

    Returns:
        ValidationResult with the normalized request, or one message per
        invalid field. A signup password mismatch is always reported on
        confirm_password, even when other fields are also invalid.
    """
    mode = AuthMode(mode)
    model = LoginRequest if mode is AuthMode.LOGIN else SignupRequest

    try:
        request = model.model_validate(dict(fields))
    except ValidationError as e:
        errors = field_errors_from(e.errors())
        # Field errors stop the model-level check from running
        if mode is AuthMode.SIGNUP and "confirm_password" not in errors and _passwords_differ(fields):
            errors["confirm_password"] = PASSWORDS_MISMATCH_MESSAGE
        return ValidationResult(errors=errors)

    return ValidationResult(request=request)
