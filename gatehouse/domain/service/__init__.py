"""Domain services."""

from .base import Service
from .identity_service import IdentityClient, IdentityService
from .invite_service import InviteService
from .jwt_service import JWTService
from .membership_service import MembershipService
from .organization_service import OrganizationService
from .user_service import UserService

__all__ = [
    "IdentityClient",
    "IdentityService",
    "InviteService",
    "JWTService",
    "MembershipService",
    "OrganizationService",
    "Service",
    "UserService",
]
