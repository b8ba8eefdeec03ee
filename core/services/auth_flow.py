# =============================================================================
# core/services/auth_flow.py - Login and Signup Flows
# =============================================================================
# Orchestrates the form submit sequence:
#
#   login:  validate -> sign in -> navigate to /dashboard
#   signup: validate -> create account -> (upload avatar) -> provision index
#           -> write profile -> navigate to /dashboard
#
# Error policy:
# - validation errors abort before the provider is called
# - identity provider errors abort and are shown to the user verbatim
# - avatar, provisioning and profile failures are recorded in the step
#   outcomes and logged; the flow still completes
#
# There is no retry and no rollback. A created account stays created even if
# every later step fails.
# =============================================================================

import logging
from collections.abc import Mapping
from typing import Any

from app.config import settings
from app.exceptions import (
    AuthProviderError,
    FileAIException,
    FormValidationError,
    SubmissionInProgressError,
    UnexpectedAuthError,
)
from core.models.auth import AuthMode, AuthResponse, AvatarUpload, Notice, SignupRequest
from core.models.profile import ProfileCreate
from core.models.signup import SignupResult, SignupStage, StepOutcome, StepStatus
from core.services.auth_service import AuthGateway
from core.services.profile_service import ProfileService
from core.services.provisioning_service import ProvisioningClient
from core.services.storage_service import AvatarStorage
from core.validation import validate_form

logger = logging.getLogger(__name__)

DASHBOARD_ROUTE = "/dashboard"
HOME_ROUTE = "/"


class AuthFlow:
    """
    One auth form instance.

    `is_loading` is True while a submission runs; submitting again on the
    same instance in that window raises SubmissionInProgressError.

    Example:
        flow = AuthFlow()
        result = flow.signup(form_fields, avatar=None)
        result.redirect_to  # "/dashboard"
    """

    def __init__(
        self,
        gateway: AuthGateway | None = None,
        storage: type[AvatarStorage] = AvatarStorage,
        provisioning: ProvisioningClient | None = None,
        profiles: type[ProfileService] = ProfileService,
    ):
        self._gateway = gateway
        self.storage = storage
        self.provisioning = provisioning or ProvisioningClient()
        self.profiles = profiles
        self.is_loading = False
        self.stage = SignupStage.IDLE

    @property
    def gateway(self) -> AuthGateway:
        if self._gateway is None:
            self._gateway = AuthGateway()
        return self._gateway

    def _begin(self) -> None:
        if self.is_loading:
            raise SubmissionInProgressError()
        self.is_loading = True

    def _finish(self) -> None:
        self.is_loading = False
        if self.stage is not SignupStage.DONE:
            self.stage = SignupStage.IDLE

    # -------------------------------------------------------------------------
    # Login
    # -------------------------------------------------------------------------

    def login(self, fields: Mapping[str, Any]) -> AuthResponse:
        """
        Validate credentials and sign in.

        Raises:
            FormValidationError: If a field is invalid (provider not called)
            AuthProviderError: If the provider rejects the credentials
            UnexpectedAuthError: If anything else goes wrong
        """
        self._begin()
        try:
            result = validate_form(fields, AuthMode.LOGIN)
            if not result.ok:
                raise FormValidationError(result.errors)

            request = result.request
            session = self.gateway.sign_in(request.email, request.password)

            return AuthResponse(
                notice=Notice(
                    title="Welcome back!",
                    description="You have successfully logged in.",
                ),
                redirect_to=DASHBOARD_ROUTE,
                session=session,
            )
        except FileAIException:
            raise
        except Exception as e:
            logger.exception(f"Auth error: {e}")
            raise UnexpectedAuthError(str(e))
        finally:
            self._finish()

    # -------------------------------------------------------------------------
    # Signup
    # -------------------------------------------------------------------------

    def signup(
        self,
        fields: Mapping[str, Any],
        avatar: AvatarUpload | None = None,
    ) -> SignupResult:
        """
        Validate, create the account, then run the best-effort steps.

        Raises:
            FormValidationError: If a field is invalid (provider not called)
            AuthProviderError: If the provider refuses the sign-up or returns
                no user
            UnexpectedAuthError: If anything else goes wrong
        """
        self._begin()
        try:
            self.stage = SignupStage.VALIDATING
            result = validate_form(fields, AuthMode.SIGNUP)
            if not result.ok:
                raise FormValidationError(result.errors)

            return self._run_signup(result.request, avatar)
        except FileAIException:
            raise
        except Exception as e:
            logger.exception(f"Auth error: {e}")
            raise UnexpectedAuthError(str(e))
        finally:
            self._finish()

    def _run_signup(self, request: SignupRequest, avatar: AvatarUpload | None) -> SignupResult:
        steps: list[StepOutcome] = []

        self.stage = SignupStage.CREATING_ACCOUNT
        outcome = self.gateway.sign_up(
            request.email,
            request.password,
            metadata=request.user_metadata(),
            redirect_to=settings.email_redirect_url,
        )

        if outcome.user_id is None:
            # No user to attach a profile to
            logger.warning(f"Sign-up for {request.email} returned no user")
            raise AuthProviderError(
                "The account could not be created. Please try again.",
                title="Sign Up Failed",
                status_code=400,
            )

        user_id = outcome.user_id
        steps.append(StepOutcome(stage=SignupStage.CREATING_ACCOUNT, status=StepStatus.SUCCEEDED))

        avatar_url = self._upload_avatar(user_id, avatar, steps)
        pinecone_index = self._provision_index(user_id, request.email, steps)
        profile_saved = self._write_profile(
            ProfileCreate(
                user_id=user_id,
                first_name=request.first_name,
                last_name=request.last_name,
                email=request.email,
                avatar_url=avatar_url,
                pinecone_index=pinecone_index,
            ),
            steps,
        )

        self.stage = SignupStage.DONE
        return SignupResult(
            stage=SignupStage.DONE,
            user_id=user_id,
            email=request.email,
            avatar_url=avatar_url,
            pinecone_index=pinecone_index,
            profile_saved=profile_saved,
            steps=steps,
            notice=Notice(
                title="Account Created!",
                description="Welcome to AI Smart File Assistant.",
            ),
            redirect_to=DASHBOARD_ROUTE,
            session=outcome.session,
        )

    def _upload_avatar(
        self,
        user_id: str,
        avatar: AvatarUpload | None,
        steps: list[StepOutcome],
    ) -> str | None:
        if avatar is None:
            steps.append(StepOutcome(stage=SignupStage.UPLOADING_AVATAR, status=StepStatus.SKIPPED))
            return None

        self.stage = SignupStage.UPLOADING_AVATAR
        avatar_url = self.storage.upload_avatar(
            user_id,
            avatar.filename,
            avatar.content,
            avatar.content_type,
        )
        if avatar_url is None:
            steps.append(StepOutcome(
                stage=SignupStage.UPLOADING_AVATAR,
                status=StepStatus.FAILED,
                detail="Avatar upload failed; continuing without an avatar",
            ))
        else:
            steps.append(StepOutcome(stage=SignupStage.UPLOADING_AVATAR, status=StepStatus.SUCCEEDED))
        return avatar_url

    def _provision_index(self, user_id: str, email: str, steps: list[StepOutcome]) -> str | None:
        self.stage = SignupStage.PROVISIONING_INDEX
        index_name = self.provisioning.invoke(user_id, email)
        if index_name is None:
            steps.append(StepOutcome(
                stage=SignupStage.PROVISIONING_INDEX,
                status=StepStatus.FAILED,
                detail="Index provisioning failed; profile saved without an index",
            ))
        else:
            steps.append(StepOutcome(
                stage=SignupStage.PROVISIONING_INDEX,
                status=StepStatus.SUCCEEDED,
                detail=index_name,
            ))
        return index_name

    def _write_profile(self, profile: ProfileCreate, steps: list[StepOutcome]) -> bool:
        self.stage = SignupStage.WRITING_PROFILE
        row = self.profiles.create_profile(profile)
        if row is None:
            steps.append(StepOutcome(
                stage=SignupStage.WRITING_PROFILE,
                status=StepStatus.FAILED,
                detail="Profile row was not saved",
            ))
            return False

        steps.append(StepOutcome(stage=SignupStage.WRITING_PROFILE, status=StepStatus.SUCCEEDED))
        return True

    # -------------------------------------------------------------------------
    # Logout
    # -------------------------------------------------------------------------

    def logout(self, access_token: str) -> AuthResponse:
        """Sign out and send the user back to the landing page."""
        self.gateway.sign_out(access_token)
        return AuthResponse(
            notice=Notice(
                title="Signed Out",
                description="You have been successfully signed out.",
            ),
            redirect_to=HOME_ROUTE,
        )
