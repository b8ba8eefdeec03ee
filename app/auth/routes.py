# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# API endpoints behind the login and signup forms:
# - POST /login    validate + sign in
# - POST /signup   validate + create account + avatar + index + profile
# - POST /logout   revoke the current session
# - GET  /session  is there a live session?
# - GET  /me       the signed-in user's profile
# - GET  /verify   is this token valid?
# =============================================================================

import logging
from typing import Annotated, Any, Optional

from fastapi import APIRouter, Body, Depends, File, Form, UploadFile, status
from fastapi.security import HTTPAuthorizationCredentials

from app.auth.dependencies import get_current_user, security_optional
from app.auth.models import AuthUser, SessionStatus
from app.config import settings
from app.dependencies import AuthFlowDep, AuthGatewayDep, ProfileServiceDep
from app.exceptions import AvatarTooLargeError, InvalidAvatarError, ProfileNotFoundError
from core.models.auth import AuthResponse, AvatarUpload
from core.models.profile import ProfileResponse
from core.models.signup import SignupResult

logger = logging.getLogger(__name__)

router = APIRouter()


async def _read_avatar(avatar: UploadFile | None) -> AvatarUpload | None:
    """Read and check the optional avatar upload."""
    if avatar is None or not avatar.filename:
        return None

    content_type = avatar.content_type
    if not content_type or not content_type.startswith("image/"):
        raise InvalidAvatarError(avatar.filename, content_type)

    content = await avatar.read()
    if len(content) > settings.max_avatar_size_bytes:
        raise AvatarTooLargeError(len(content) / (1024 * 1024), settings.MAX_AVATAR_SIZE_MB)

    return AvatarUpload(filename=avatar.filename, content=content, content_type=content_type)


# =============================================================================
# Endpoints
# =============================================================================

@router.post("/login", response_model=AuthResponse)
async def login(
    flow: AuthFlowDep,
    fields: Annotated[dict[str, Any], Body(description="email and password")],
) -> AuthResponse:
    """
    Sign in with email and password.

    Returns the session and `redirect_to="/dashboard"`.

    Raises:
        422: If a field is invalid (details.errors maps field -> message)
        401: If the identity provider rejects the credentials
    """
    return flow.login(fields)


@router.post("/signup", response_model=SignupResult, status_code=status.HTTP_201_CREATED)
async def signup(
    flow: AuthFlowDep,
    first_name: Annotated[str, Form()] = "",
    last_name: Annotated[str, Form()] = "",
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
    confirm_password: Annotated[str, Form()] = "",
    avatar: Annotated[Optional[UploadFile], File(description="Optional avatar image")] = None,
) -> SignupResult:
    """
    Create an account.

    This endpoint:
    1. Validates the form fields
    2. Creates the account with the identity provider
    3. Uploads the avatar (if any)
    4. Provisions the user's vector index
    5. Writes the profile row

    Steps 3-5 are best-effort; their outcomes are listed in `steps`.

    Raises:
        422: If a field is invalid
        400: If the identity provider refuses the sign-up
    """
    avatar_upload = await _read_avatar(avatar)
    fields = {
        "first_name": first_name,
        "last_name": last_name,
        "email": email,
        "password": password,
        "confirm_password": confirm_password,
    }
    return flow.signup(fields, avatar=avatar_upload)


@router.post("/logout", response_model=AuthResponse)
async def logout(
    flow: AuthFlowDep,
    user: AuthUser = Depends(get_current_user),
) -> AuthResponse:
    """
    Sign out the current session.

    Returns `redirect_to="/"`.
    """
    return flow.logout(user.access_token)


@router.get("/session", response_model=SessionStatus)
async def get_session(
    gateway: AuthGatewayDep,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_optional),
) -> SessionStatus:
    """
    Report whether the Bearer token belongs to a live session.

    Asks the identity provider, so revoked tokens report as signed out.
    """
    token = credentials.credentials if credentials else None
    session = gateway.get_session(token)

    if session is None:
        return SessionStatus(authenticated=False)
    return SessionStatus(authenticated=True, user_id=session.user_id, email=session.email)


@router.get("/me", response_model=ProfileResponse)
async def get_current_user_info(
    profiles: ProfileServiceDep,
    user: AuthUser = Depends(get_current_user),
) -> ProfileResponse:
    """
    Get the current user's profile.

    Raises:
        401: If not authenticated
        404: If the profile row was never written
    """
    profile = profiles.get_profile(user.id)
    if profile is None:
        raise ProfileNotFoundError(str(user.id))
    return profile


@router.get("/verify")
async def verify_token(
    user: AuthUser = Depends(get_current_user)
) -> dict:
    """
    Verify that the current token is valid.

    Returns:
        dict: Confirmation with user_id
    """
    return {
        "valid": True,
        "user_id": str(user.id),
        "email": user.email
    }
