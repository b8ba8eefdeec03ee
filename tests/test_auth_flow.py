# =============================================================================
# tests/test_auth_flow.py - Login / Signup Flow Tests
# =============================================================================
# Tests the orchestration with every collaborator mocked:
# - Invalid forms never reach the identity provider
# - Successful auth navigates to /dashboard with a notice
# - Avatar, provisioning and profile failures do not abort signup
# - Re-submitting while a submission is running is refused
# =============================================================================

from unittest.mock import MagicMock, patch

import pytest

from app.exceptions import (
    AuthProviderError,
    FormValidationError,
    SubmissionInProgressError,
    UnexpectedAuthError,
)
from core.models.auth import AuthSession, AvatarUpload, SignUpOutcome
from core.models.signup import SignupStage, StepStatus
from core.services.auth_flow import AuthFlow
from core.services.storage_service import AvatarStorage
from lib.supabase_client import SupabaseClientError
from tests.conftest import TEST_USER_ID


@pytest.fixture
def gateway():
    gateway = MagicMock()
    gateway.sign_in.return_value = AuthSession(
        access_token="access-token-123",
        user_id=TEST_USER_ID,
        email="ada@example.com",
    )
    gateway.sign_up.return_value = SignUpOutcome(user_id=TEST_USER_ID, email="ada@example.com")
    return gateway


@pytest.fixture
def storage():
    storage = MagicMock()
    storage.upload_avatar.return_value = "https://cdn.example.com/avatars/a.png"
    return storage


@pytest.fixture
def provisioning():
    provisioning = MagicMock()
    provisioning.invoke.return_value = "user-550e8400e29b41d4a716"
    return provisioning


@pytest.fixture
def profiles():
    profiles = MagicMock()
    profiles.create_profile.return_value = {"user_id": TEST_USER_ID}
    return profiles


@pytest.fixture
def flow(gateway, storage, provisioning, profiles):
    return AuthFlow(
        gateway=gateway,
        storage=storage,
        provisioning=provisioning,
        profiles=profiles,
    )


@pytest.fixture
def avatar():
    return AvatarUpload(filename="me.png", content=b"\x89PNG", content_type="image/png")


# =============================================================================
# Login
# =============================================================================

class TestLogin:

    def test_success_redirects_to_dashboard(self, flow, gateway, login_fields):
        response = flow.login(login_fields)

        gateway.sign_in.assert_called_once_with("ada@example.com", "hunter22")
        assert response.redirect_to == "/dashboard"
        assert response.notice.title == "Welcome back!"
        assert response.session.access_token == "access-token-123"
        assert flow.is_loading is False

    def test_invalid_form_skips_provider(self, flow, gateway):
        with pytest.raises(FormValidationError) as exc_info:
            flow.login({"email": "nope", "password": "hunter22"})

        gateway.sign_in.assert_not_called()
        assert exc_info.value.errors == {"email": "Please enter a valid email address"}
        assert flow.is_loading is False

    def test_provider_error_propagates(self, flow, gateway, login_fields):
        gateway.sign_in.side_effect = AuthProviderError("Invalid login credentials")

        with pytest.raises(AuthProviderError) as exc_info:
            flow.login(login_fields)

        notice = exc_info.value.to_dict()["notice"]
        assert notice["title"] == "Login Failed"
        assert notice["description"] == "Invalid login credentials"
        assert notice["variant"] == "destructive"

    def test_unexpected_error_wrapped(self, flow, gateway, login_fields):
        gateway.sign_in.side_effect = RuntimeError("socket closed")

        with pytest.raises(UnexpectedAuthError):
            flow.login(login_fields)

        assert flow.is_loading is False

    def test_resubmit_while_loading_refused(self, flow, gateway, login_fields):
        flow.is_loading = True

        with pytest.raises(SubmissionInProgressError):
            flow.login(login_fields)

        gateway.sign_in.assert_not_called()


# =============================================================================
# Signup
# =============================================================================

class TestSignup:

    def test_full_signup(self, flow, gateway, storage, provisioning, profiles, signup_fields, avatar):
        result = flow.signup(signup_fields, avatar)

        gateway.sign_up.assert_called_once_with(
            "ada@example.com",
            "hunter22",
            metadata={"first_name": "Ada", "last_name": "Lovelace"},
            redirect_to="http://localhost:3000/",
        )
        storage.upload_avatar.assert_called_once_with(
            TEST_USER_ID, "me.png", b"\x89PNG", "image/png"
        )
        provisioning.invoke.assert_called_once_with(TEST_USER_ID, "ada@example.com")

        profile = profiles.create_profile.call_args.args[0]
        assert profile.user_id == TEST_USER_ID
        assert profile.first_name == "Ada"
        assert profile.last_name == "Lovelace"
        assert profile.avatar_url == "https://cdn.example.com/avatars/a.png"
        assert profile.pinecone_index == "user-550e8400e29b41d4a716"

        assert result.stage is SignupStage.DONE
        assert result.redirect_to == "/dashboard"
        assert result.notice.title == "Account Created!"
        assert result.profile_saved is True
        assert [step.stage for step in result.steps] == [
            SignupStage.CREATING_ACCOUNT,
            SignupStage.UPLOADING_AVATAR,
            SignupStage.PROVISIONING_INDEX,
            SignupStage.WRITING_PROFILE,
        ]
        assert flow.stage is SignupStage.DONE
        assert flow.is_loading is False

    def test_without_avatar(self, flow, storage, profiles, signup_fields):
        result = flow.signup(signup_fields)

        storage.upload_avatar.assert_not_called()
        profile = profiles.create_profile.call_args.args[0]
        assert profile.avatar_url is None
        assert profile.pinecone_index == "user-550e8400e29b41d4a716"
        assert result.outcome(SignupStage.UPLOADING_AVATAR).status is StepStatus.SKIPPED

    def test_password_mismatch_skips_provider(self, flow, gateway, signup_fields):
        signup_fields["confirm_password"] = "hunter23"

        with pytest.raises(FormValidationError) as exc_info:
            flow.signup(signup_fields)

        gateway.sign_up.assert_not_called()
        assert exc_info.value.errors == {"confirm_password": "Passwords don't match"}
        assert flow.stage is SignupStage.IDLE

    def test_provisioning_failure_saves_profile_without_index(
        self, flow, provisioning, profiles, signup_fields
    ):
        provisioning.invoke.return_value = None

        result = flow.signup(signup_fields)

        profile = profiles.create_profile.call_args.args[0]
        assert profile.pinecone_index is None
        assert result.pinecone_index is None
        assert result.outcome(SignupStage.PROVISIONING_INDEX).status is StepStatus.FAILED
        assert result.redirect_to == "/dashboard"

    def test_avatar_failure_continues(self, flow, storage, profiles, signup_fields, avatar):
        storage.upload_avatar.return_value = None

        result = flow.signup(signup_fields, avatar)

        assert profiles.create_profile.call_args.args[0].avatar_url is None
        assert result.outcome(SignupStage.UPLOADING_AVATAR).status is StepStatus.FAILED
        assert result.stage is SignupStage.DONE

    def test_profile_failure_still_navigates(self, flow, profiles, signup_fields):
        profiles.create_profile.return_value = None

        result = flow.signup(signup_fields)

        assert result.profile_saved is False
        assert result.outcome(SignupStage.WRITING_PROFILE).status is StepStatus.FAILED
        assert result.redirect_to == "/dashboard"

    def test_provider_returns_no_user(self, flow, gateway, provisioning, profiles, signup_fields):
        gateway.sign_up.return_value = SignUpOutcome(email="ada@example.com")

        with pytest.raises(AuthProviderError) as exc_info:
            flow.signup(signup_fields)

        provisioning.invoke.assert_not_called()
        profiles.create_profile.assert_not_called()
        assert exc_info.value.status_code == 400
        assert exc_info.value.notice_title == "Sign Up Failed"
        assert flow.stage is SignupStage.IDLE

    def test_storage_client_failure_still_completes(
        self, gateway, provisioning, profiles, signup_fields, avatar
    ):
        flow = AuthFlow(
            gateway=gateway,
            storage=AvatarStorage,
            provisioning=provisioning,
            profiles=profiles,
        )
        error = SupabaseClientError("bad key", code="CLIENT_INIT_FAILED")

        with patch("core.services.storage_service.SupabaseClient.get_client", side_effect=error):
            result = flow.signup(signup_fields, avatar)

        assert result.stage is SignupStage.DONE
        assert result.redirect_to == "/dashboard"
        assert result.avatar_url is None
        assert result.outcome(SignupStage.UPLOADING_AVATAR).status is StepStatus.FAILED
        assert profiles.create_profile.call_args.args[0].avatar_url is None

    def test_provider_error_aborts(self, flow, gateway, provisioning, signup_fields):
        gateway.sign_up.side_effect = AuthProviderError(
            "User already registered", title="Sign Up Failed", status_code=400
        )

        with pytest.raises(AuthProviderError):
            flow.signup(signup_fields)

        provisioning.invoke.assert_not_called()
        assert flow.stage is SignupStage.IDLE
        assert flow.is_loading is False


# =============================================================================
# Logout
# =============================================================================

class TestLogout:

    def test_logout_returns_home(self, flow, gateway):
        response = flow.logout("access-token-123")

        gateway.sign_out.assert_called_once_with("access-token-123")
        assert response.redirect_to == "/"
        assert response.notice.title == "Signed Out"
