# =============================================================================
# core/services/auth_service.py - Identity Provider Gateway
# =============================================================================
# Thin call-through to Supabase Auth: sign in, sign up, session lookup,
# sign out, and session-change subscriptions.
#
# The provider is a black box. Its error messages are passed to the user
# verbatim through AuthProviderError.
#
# Each AuthGateway wraps its own anon-key client, so a signed-in session
# never leaks into another request.
# =============================================================================

import logging
from collections.abc import Callable
from typing import Any

from supabase import AuthError, Client

from app.exceptions import AuthProviderError
from core.models.auth import AuthSession, SignUpOutcome
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

SessionListener = Callable[[str, Any], None]


def _to_session(session: Any) -> AuthSession | None:
    """Convert a provider session object into an AuthSession."""
    if session is None or not getattr(session, "access_token", None):
        return None

    user = getattr(session, "user", None)
    return AuthSession(
        access_token=session.access_token,
        refresh_token=getattr(session, "refresh_token", None),
        expires_at=getattr(session, "expires_at", None),
        user_id=str(user.id) if user is not None else "",
        email=getattr(user, "email", None),
    )


class AuthGateway:
    """
    Gateway to the identity provider.

    Example:
        gateway = AuthGateway()
        session = gateway.sign_in("ada@example.com", "hunter22")
    """

    def __init__(self, client: Client | None = None):
        self._client = client or SupabaseClient.create_auth_client()

    def sign_in(self, email: str, password: str) -> AuthSession:
        """
        Sign in with email and password.

        Raises:
            AuthProviderError: If the provider rejects the credentials
        """
        try:
            response = self._client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except AuthError as e:
            logger.info(f"Sign-in rejected for {email}: {e.message}")
            raise AuthProviderError(e.message, title="Login Failed", status_code=401)

        session = _to_session(response.session)
        if session is None:
            raise AuthProviderError("No session returned", title="Login Failed", status_code=401)

        logger.info(f"User signed in: {session.user_id}")
        return session

    def sign_up(
        self,
        email: str,
        password: str,
        metadata: dict[str, Any] | None = None,
        redirect_to: str | None = None,
    ) -> SignUpOutcome:
        """
        Create an account.

        Args:
            email: Account email
            password: Account password
            metadata: User metadata stored by the provider (first/last name)
            redirect_to: Where the confirmation email should send the user

        Raises:
            AuthProviderError: If the provider refuses the sign-up
        """
        options: dict[str, Any] = {"data": metadata or {}}
        if redirect_to:
            options["email_redirect_to"] = redirect_to

        try:
            response = self._client.auth.sign_up(
                {"email": email, "password": password, "options": options}
            )
        except AuthError as e:
            logger.info(f"Sign-up rejected for {email}: {e.message}")
            raise AuthProviderError(e.message, title="Sign Up Failed", status_code=400)

        user = response.user
        if user is None:
            logger.warning(f"Sign-up for {email} returned no user")
            return SignUpOutcome(email=email)

        logger.info(f"Created account: {user.id}")
        return SignUpOutcome(
            user_id=str(user.id),
            email=getattr(user, "email", None) or email,
            session=_to_session(response.session),
        )

    def get_session(self, access_token: str | None) -> AuthSession | None:
        """
        Look up the session behind an access token.

        Returns None if there is no token or the provider does not accept it.
        """
        if not access_token:
            return None

        try:
            response = self._client.auth.get_user(access_token)
        except AuthError as e:
            logger.debug(f"Session lookup failed: {e.message}")
            return None

        user = getattr(response, "user", None)
        if user is None:
            return None

        return AuthSession(
            access_token=access_token,
            user_id=str(user.id),
            email=getattr(user, "email", None),
        )

    def sign_out(self, access_token: str) -> None:
        """
        Revoke the session behind an access token.

        Raises:
            AuthProviderError: If the provider refuses the sign-out
        """
        try:
            self._client.auth.admin.sign_out(access_token)
        except AuthError as e:
            raise AuthProviderError(e.message, title="Sign Out Failed", status_code=400)
        logger.info("User signed out")

    def on_session_change(self, listener: SessionListener) -> Any:
        """
        Subscribe to session changes of this gateway's client.

        The listener is called with (event, session). The returned
        subscription has an unsubscribe() method.
        """
        return self._client.auth.on_auth_state_change(listener)
