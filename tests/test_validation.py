# =============================================================================
# tests/test_validation.py - Form Validation Tests
# =============================================================================
# Tests for login/signup field validation:
# - Accepted requests are normalized
# - Each invalid field gets exactly one human-readable message
# - Password mismatches land on confirm_password
#
# Run with: pytest tests/test_validation.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models.auth import (
    INVALID_EMAIL_MESSAGE,
    PASSWORDS_MISMATCH_MESSAGE,
    SHORT_PASSWORD_MESSAGE,
    AuthMode,
    LoginRequest,
    SignupRequest,
)
from core.validation import validate_form


# =============================================================================
# Login
# =============================================================================

class TestLoginValidation:
    """Tests for login mode."""

    def test_valid_login(self, login_fields):
        result = validate_form(login_fields, AuthMode.LOGIN)

        assert result.ok
        assert isinstance(result.request, LoginRequest)
        assert result.request.email == "ada@example.com"
        assert result.errors == {}

    @pytest.mark.parametrize("email", [
        "",
        "not-an-email",
        "missing@tld",
        "@example.com",
        "two@@example.com",
        ".leading@example.com",
        "double..dot@example.com",
    ])
    def test_invalid_email(self, email):
        result = validate_form({"email": email, "password": "hunter22"}, AuthMode.LOGIN)

        assert not result.ok
        assert result.errors == {"email": INVALID_EMAIL_MESSAGE}

    def test_short_password(self):
        result = validate_form({"email": "ada@example.com", "password": "12345"}, "login")

        assert not result.ok
        assert result.errors == {"password": SHORT_PASSWORD_MESSAGE}

    def test_six_character_password_is_enough(self):
        result = validate_form({"email": "ada@example.com", "password": "123456"}, "login")
        assert result.ok

    def test_missing_fields_report_field_messages(self):
        result = validate_form({}, AuthMode.LOGIN)

        assert result.errors == {
            "email": INVALID_EMAIL_MESSAGE,
            "password": SHORT_PASSWORD_MESSAGE,
        }

    def test_email_whitespace_is_stripped(self):
        result = validate_form({"email": "  ada@example.com ", "password": "hunter22"}, "login")

        assert result.ok
        assert result.request.email == "ada@example.com"


# =============================================================================
# Signup
# =============================================================================

class TestSignupValidation:
    """Tests for signup mode."""

    def test_valid_signup(self, signup_fields):
        result = validate_form(signup_fields, AuthMode.SIGNUP)

        assert result.ok
        assert isinstance(result.request, SignupRequest)
        assert result.request.user_metadata() == {"first_name": "Ada", "last_name": "Lovelace"}

    def test_camel_case_keys_accepted(self):
        fields = {
            "firstName": "Ada",
            "lastName": "Lovelace",
            "email": "ada@example.com",
            "password": "hunter22",
            "confirmPassword": "hunter22",
        }

        result = validate_form(fields, AuthMode.SIGNUP)

        assert result.ok
        assert result.request.first_name == "Ada"

    def test_password_mismatch_on_confirm_field(self, signup_fields):
        signup_fields["confirm_password"] = "hunter23"

        result = validate_form(signup_fields, AuthMode.SIGNUP)

        assert not result.ok
        assert result.errors == {"confirm_password": PASSWORDS_MISMATCH_MESSAGE}

    def test_mismatch_reported_alongside_field_errors(self, signup_fields):
        signup_fields["email"] = "nope"
        signup_fields["confirm_password"] = "different"

        result = validate_form(signup_fields, AuthMode.SIGNUP)

        assert result.errors["email"] == INVALID_EMAIL_MESSAGE
        assert result.errors["confirm_password"] == PASSWORDS_MISMATCH_MESSAGE

    def test_camel_case_mismatch_keyed_snake_case(self):
        fields = {
            "firstName": "Ada",
            "lastName": "",
            "email": "ada@example.com",
            "password": "hunter22",
            "confirmPassword": "other",
        }

        result = validate_form(fields, AuthMode.SIGNUP)

        assert result.errors["last_name"] == "Last name is required"
        assert result.errors["confirm_password"] == PASSWORDS_MISMATCH_MESSAGE

    def test_names_required(self, signup_fields):
        signup_fields["first_name"] = ""
        signup_fields["last_name"] = ""

        result = validate_form(signup_fields, AuthMode.SIGNUP)

        assert result.errors == {
            "first_name": "First name is required",
            "last_name": "Last name is required",
        }

    def test_one_message_per_field(self, signup_fields):
        signup_fields["password"] = "abc"
        signup_fields["confirm_password"] = "abc"

        result = validate_form(signup_fields, AuthMode.SIGNUP)

        assert result.errors == {"password": SHORT_PASSWORD_MESSAGE}


class TestSignupRequestModel:
    """The model enforces the same rules when constructed directly."""

    def test_direct_mismatch_raises(self):
        with pytest.raises(ValidationError):
            SignupRequest(
                first_name="Ada",
                last_name="Lovelace",
                email="ada@example.com",
                password="hunter22",
                confirm_password="hunter99",
            )
