# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Resolves the Bearer token of a request into an AuthUser. The resolved user
# is the session context handed to routes; nothing listens for session
# changes globally.
#
# Supports both:
# - ES256 (new Supabase JWT signing keys) via JWKS
# - HS256 (legacy Supabase JWT secret), only when SUPABASE_JWT_SECRET is set
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

import logging
import time
from typing import Optional
from uuid import UUID

import httpx
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt

from app.auth.models import AuthUser
from app.config import settings
from app.exceptions import NotAuthenticatedError

logger = logging.getLogger(__name__)

# HTTP Bearer token extractor
security = HTTPBearer()
security_optional = HTTPBearer(auto_error=False)

# Cache for JWKS keys
_jwks_cache: dict = {}
_jwks_cache_time: float = 0
JWKS_CACHE_TTL = 3600  # 1 hour

# Algorithms verified against the project JWKS
JWKS_ALGORITHMS = ("ES256", "RS256")


def _get_jwks_url() -> str:
    """JWKS URL of the Supabase project (https://<project-ref>.supabase.co)."""
    supabase_url = settings.SUPABASE_URL.rstrip("/")
    return f"{supabase_url}/auth/v1/.well-known/jwks.json"


def _fetch_jwks() -> dict:
    """Fetch JWKS from Supabase with caching."""
    global _jwks_cache, _jwks_cache_time

    current_time = time.time()
    if _jwks_cache and (current_time - _jwks_cache_time) < JWKS_CACHE_TTL:
        return _jwks_cache

    try:
        response = httpx.get(_get_jwks_url(), timeout=10)
        response.raise_for_status()
        _jwks_cache = response.json()
        _jwks_cache_time = current_time
        return _jwks_cache
    except httpx.HTTPError as e:
        logger.warning(f"Failed to fetch JWKS: {e}")
        # Stale keys beat no keys
        return _jwks_cache or {"keys": []}


def _get_signing_key(token: str) -> tuple[str | dict, str]:
    """
    Pick the key and algorithm to verify a token with.

    HS256 tokens need SUPABASE_JWT_SECRET; asymmetric tokens need a JWKS key
    with a matching kid. There is no fallback between the two.

    Returns:
        Tuple of (key, algorithm)

    Raises:
        NotAuthenticatedError: If no trusted key can verify the token
    """
    try:
        header = jwt.get_unverified_header(token)
    except JWTError:
        raise _unauthorized("Invalid token: malformed header")

    alg = header.get("alg", "HS256")
    kid = header.get("kid")

    if alg == "HS256":
        if not settings.SUPABASE_JWT_SECRET:
            logger.warning("Rejected HS256 token: SUPABASE_JWT_SECRET is not set")
            raise _unauthorized("Invalid token: HS256 tokens are not accepted")
        return settings.SUPABASE_JWT_SECRET, "HS256"

    if alg in JWKS_ALGORITHMS and kid:
        for key in _fetch_jwks().get("keys", []):
            if key.get("kid") == kid:
                return key, alg

    logger.warning(f"Could not find key for alg={alg}, kid={kid}")
    raise _unauthorized("Invalid token: unknown signing key")


def _unauthorized(detail: str) -> NotAuthenticatedError:
    return NotAuthenticatedError(detail)


def decode_access_token(token: str) -> AuthUser:
    """
    Verify a Supabase access token and build the AuthUser it names.

    Raises:
        NotAuthenticatedError: 401 if the token is invalid or expired
    """
    try:
        signing_key, algorithm = _get_signing_key(token)
        payload = jwt.decode(
            token,
            signing_key,
            algorithms=[algorithm],
            audience="authenticated",
        )
    except ExpiredSignatureError:
        logger.warning("JWT token has expired")
        raise _unauthorized("Token has expired")
    except JWTError as e:
        logger.warning(f"JWT validation failed: {e}")
        raise _unauthorized(f"Invalid token: {e}")

    user_id = payload.get("sub")
    if not user_id:
        raise _unauthorized("Invalid token: missing user ID")

    try:
        user_uuid = UUID(user_id)
    except ValueError:
        raise _unauthorized("Invalid token: malformed user ID")

    return AuthUser(id=user_uuid, email=payload.get("email"), access_token=token)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> AuthUser:
    """
    Extract and validate the user from a Supabase JWT.

    Raises:
        NotAuthenticatedError: 401 if token is invalid or expired
    """
    user = decode_access_token(credentials.credentials)
    logger.debug(f"Authenticated user: {user.id}")
    return user


async def get_current_user_optional(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_optional)
) -> Optional[AuthUser]:
    """
    Optionally get the current user from a JWT.

    Returns None if no token is provided or the token is invalid. Pages use
    this to decide between rendering and redirecting.
    """
    if credentials is None:
        return None

    try:
        return decode_access_token(credentials.credentials)
    except NotAuthenticatedError:
        return None


async def verify_function_caller(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> str:
    """
    Guard for remote-function endpoints.

    Accepts the project's anon or service key, or any valid user JWT, the
    same callers Supabase lets through to an edge function.

    Returns:
        "anon", "service" or the calling user's ID
    """
    token = credentials.credentials
    if token == settings.SUPABASE_ANON_KEY:
        return "anon"
    if token == settings.SUPABASE_SERVICE_KEY:
        return "service"
    return str(decode_access_token(token).id)
