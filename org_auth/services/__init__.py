"""
Org Auth 业务逻辑服务
"""

from .token_service import Identity, TokenService, TokenSettings
from .permission_service import PermissionService
from .user_service import UserService
from .organisation_service import OrganisationService
from .auth_service import AuthService

__all__ = [
    'Identity',
    'TokenService',
    'TokenSettings',
    'PermissionService',
    'UserService',
    'OrganisationService',
    'AuthService'
]
