# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# JWT-based session context using Supabase Auth, plus the login/signup
# endpoints.
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

from app.auth.dependencies import (
    get_current_user,
    get_current_user_optional,
    verify_function_caller,
)
from app.auth.models import AuthUser, SessionStatus

__all__ = [
    "get_current_user",
    "get_current_user_optional",
    "verify_function_caller",
    "AuthUser",
    "SessionStatus",
]
