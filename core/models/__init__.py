# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - auth.py: Login/signup forms, sessions, notices
# - profile.py: Profile row schemas
# - provisioning.py: create-pinecone-index function contract
# - signup.py: Signup flow stages and per-step outcomes
# - site.py: Landing, auth and dashboard page view models
#
# These models define the "contract" between API and clients.
# =============================================================================

from .auth import (
    AuthMode,
    AuthResponse,
    AuthSession,
    AvatarUpload,
    LoginRequest,
    Notice,
    SignUpOutcome,
    SignupRequest,
)
from .profile import ProfileCreate, ProfileResponse
from .provisioning import (
    ProvisionErrorResponse,
    ProvisionIndexRequest,
    ProvisionIndexResponse,
)
from .signup import SignupResult, SignupStage, StepOutcome, StepStatus
from .site import AuthPage, DashboardPage, LandingPage

__all__ = [
    # Auth
    "AuthMode",
    "AuthResponse",
    "AuthSession",
    "AvatarUpload",
    "LoginRequest",
    "Notice",
    "SignUpOutcome",
    "SignupRequest",
    # Profile
    "ProfileCreate",
    "ProfileResponse",
    # Provisioning
    "ProvisionErrorResponse",
    "ProvisionIndexRequest",
    "ProvisionIndexResponse",
    # Signup flow
    "SignupResult",
    "SignupStage",
    "StepOutcome",
    "StepStatus",
    # Pages
    "AuthPage",
    "DashboardPage",
    "LandingPage",
]
