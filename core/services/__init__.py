# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .auth_flow import AuthFlow
from .auth_service import AuthGateway
from .profile_service import ProfileService
from .provisioning_service import IndexProvisioner, ProvisioningClient, index_name_for
from .storage_service import AvatarStorage

__all__ = [
    "AuthFlow",
    "AuthGateway",
    "ProfileService",
    "IndexProvisioner",
    "ProvisioningClient",
    "index_name_for",
    "AvatarStorage",
]
