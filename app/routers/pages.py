# =============================================================================
# app/routers/pages.py - Client-Visible Page Routes
# =============================================================================
# The three routes a visitor navigates between:
# - /            marketing page (public)
# - /auth        login/signup form; signed-in users go to /dashboard
# - /dashboard   signed-in users only; others go to /auth?mode=login
#
# Session presence comes from the Bearer token of the request.
# =============================================================================

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse

from app.auth import AuthUser, get_current_user_optional
from app.dependencies import ProfileServiceDep
from core.models.auth import AuthMode
from core.models.site import AuthPage, DashboardPage, LandingPage
from core.services.auth_flow import DASHBOARD_ROUTE
from core.site_content import LOGIN_ROUTE, auth_page, dashboard_page, landing_page

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=LandingPage)
async def index():
    """Marketing page content."""
    return landing_page()


@router.get("/auth", response_model=AuthPage)
async def auth(
    mode: Annotated[str, Query(description="login or signup")] = AuthMode.LOGIN.value,
    user: Optional[AuthUser] = Depends(get_current_user_optional),
):
    """
    Login or signup form.

    Any mode other than "signup" shows the login form. A request that
    already carries a session is sent to the dashboard.
    """
    if user is not None:
        return RedirectResponse(DASHBOARD_ROUTE)

    form_mode = AuthMode.SIGNUP if mode == AuthMode.SIGNUP.value else AuthMode.LOGIN
    return auth_page(form_mode)


@router.get("/dashboard", response_model=DashboardPage)
async def dashboard(
    profiles: ProfileServiceDep,
    user: Optional[AuthUser] = Depends(get_current_user_optional),
):
    """
    Dashboard shell for the signed-in user.

    Without a session the visitor is sent to the login form.
    """
    if user is None:
        return RedirectResponse(LOGIN_ROUTE)

    profile = profiles.get_profile(user.id)
    if profile is None:
        logger.warning(f"No profile for signed-in user {user.id}")
    return dashboard_page(profile)
