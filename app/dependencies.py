# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# Each request gets its own AuthFlow / AuthGateway so no signed-in session
# is shared between users. Tests swap these out with
# app.dependency_overrides.
# =============================================================================

from typing import Annotated

from fastapi import Depends

from core.services.auth_flow import AuthFlow
from core.services.auth_service import AuthGateway
from core.services.profile_service import ProfileService
from core.services.provisioning_service import IndexProvisioner


def get_auth_gateway() -> AuthGateway:
    """Gateway to the identity provider, one per request."""
    return AuthGateway()


def get_auth_flow(gateway: AuthGateway = Depends(get_auth_gateway)) -> AuthFlow:
    """A fresh login/signup form instance."""
    return AuthFlow(gateway=gateway)


def get_profile_service() -> type[ProfileService]:
    """Profile service (stateless)."""
    return ProfileService


def get_index_provisioner() -> IndexProvisioner:
    """Provisioner used by the create-pinecone-index function."""
    return IndexProvisioner()


# Type aliases for dependency injection
AuthGatewayDep = Annotated[AuthGateway, Depends(get_auth_gateway)]
AuthFlowDep = Annotated[AuthFlow, Depends(get_auth_flow)]
ProfileServiceDep = Annotated[type[ProfileService], Depends(get_profile_service)]
IndexProvisionerDep = Annotated[IndexProvisioner, Depends(get_index_provisioner)]
