"""
认证服务 - 注册与登录流程
"""

import logging
from typing import Dict, List, Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from django.db import DatabaseError, transaction

from ..models import AuditLog
from ..conf import get_auth_setting
from ..constants import (
    AUDIT_ACTIONS,
    DEFAULT_ORGANISATION_NAME,
    LOGIN_REQUIRED_FIELDS,
    REGISTRATION_REQUIRED_FIELDS,
)
from ..exceptions import (
    AuthenticationFailed,
    RegistrationFailed,
    StoreError,
    UserNotFoundError,
    ValidationError,
)
from ..hashers import PasswordHasher
from .organisation_service import OrganisationService
from .permission_service import PermissionService
from .token_service import Identity, TokenService
from .user_service import UserService


logger = logging.getLogger(__name__)


def _is_blank(value) -> bool:
    return not isinstance(value, str) or not value.strip()


def _missing_fields(payload: Dict, required_fields) -> List[Dict[str, str]]:
    return [
        {'field': field, 'message': message}
        for field, message in required_fields
        if _is_blank(payload.get(field))
    ]


def validate_registration(payload) -> List[Dict[str, str]]:
    """
    注册字段校验

    Returns:
        List[Dict[str, str]]: 逐字段错误，空列表表示通过
    """
    if not isinstance(payload, dict):
        payload = {}

    errors = _missing_fields(payload, REGISTRATION_REQUIRED_FIELDS)

    email = payload.get('email')
    if not _is_blank(email):
        try:
            validate_email(email.strip())
        except DjangoValidationError:
            errors.append({'field': 'email', 'message': 'Email is invalid'})

    phone = payload.get('phone')
    if phone is not None and not isinstance(phone, str):
        errors.append({'field': 'phone', 'message': 'Phone must be a string'})

    return errors


class AuthService:
    """认证服务"""

    def __init__(
        self,
        token_service: Optional[TokenService] = None,
        user_service: Optional[UserService] = None,
        organisation_service: Optional[OrganisationService] = None,
        hasher: Optional[PasswordHasher] = None,
    ):
        self.token_service = token_service or TokenService()
        self.user_service = user_service or UserService()
        self.organisation_service = organisation_service or OrganisationService()
        self.hasher = hasher or PasswordHasher()

    def register_user(self, payload: Dict, ip_address: str = None, user_agent: str = None) -> Dict[str, any]:
        """
        用户注册

        创建用户、创建以名字命名的默认组织并加为成员，全部在一个事务中完成。

        Args:
            payload: firstName / lastName / email / password / phone
            ip_address: IP地址
            user_agent: User Agent

        Returns:
            Dict[str, any]: {'accessToken': ..., 'user': 公开视图}

        Raises:
            ValidationError: 字段缺失或无效，此时未触碰存储
            RegistrationFailed: 任何存储失败，包括邮箱重复
        """
        errors = validate_registration(payload)
        if errors:
            raise ValidationError(errors)

        first_name = payload['firstName'].strip()
        organisation_name = get_auth_setting('DEFAULT_ORGANISATION_NAME', DEFAULT_ORGANISATION_NAME)

        try:
            with transaction.atomic():
                user = self.user_service.create_user({
                    'first_name': first_name,
                    'last_name': payload['lastName'].strip(),
                    'email': payload['email'],
                    'password': self.hasher.hash(payload['password']),
                    'phone': payload.get('phone'),
                })

                self.organisation_service.create_organisation(
                    name=organisation_name.format(first_name=first_name),
                    creator_id=user.user_id
                )

                AuditLog.log_action(
                    user=user,
                    action=AUDIT_ACTIONS['USER_REGISTERED'],
                    resource_type='user',
                    resource_id=user.user_id,
                    ip_address=ip_address,
                    user_agent=user_agent
                )
        except (StoreError, UserNotFoundError, DatabaseError) as e:
            logger.warning(f"Registration failed: {e.__class__.__name__}")
            raise RegistrationFailed()

        # 只返回能读回的记录
        stored_user = self.user_service.find_user_by_id(user.user_id)
        if stored_user is None:
            logger.error(f"Registration failed: user {user.user_id} not readable after commit")
            raise RegistrationFailed()

        logger.info(f"User registered: {stored_user.user_id}")
        return {
            'accessToken': self.token_service.issue(stored_user.user_id),
            'user': stored_user.to_public_dict(),
        }

    def authenticate_user(self, email: str, password: str, ip_address: str = None, user_agent: str = None) -> Dict[str, any]:
        """
        用户登录

        Args:
            email: 邮箱
            password: 密码
            ip_address: IP地址
            user_agent: User Agent

        Returns:
            Dict[str, any]: {'accessToken': ..., 'user': 公开视图}

        Raises:
            ValidationError: 字段缺失
            AuthenticationFailed: 用户不存在或密码错误，两者对调用方相同
        """
        errors = _missing_fields({'email': email, 'password': password}, LOGIN_REQUIRED_FIELDS)
        if errors:
            raise ValidationError(errors)

        user = self.user_service.find_user_by_email(email)

        if user is None:
            self.hasher.burn(password)
            AuditLog.log_action(
                user=None,
                action=AUDIT_ACTIONS['USER_LOGIN'],
                resource_type='user',
                metadata={'success': False, 'reason': 'user_not_found'},
                ip_address=ip_address,
                user_agent=user_agent
            )
            logger.warning("Login failed: unknown email")
            raise AuthenticationFailed()

        if not self.hasher.verify(password, user.password):
            AuditLog.log_action(
                user=user,
                action=AUDIT_ACTIONS['USER_LOGIN'],
                resource_type='user',
                resource_id=user.user_id,
                metadata={'success': False, 'reason': 'invalid_password'},
                ip_address=ip_address,
                user_agent=user_agent
            )
            logger.warning(f"Login failed: invalid password for {user.user_id}")
            raise AuthenticationFailed()

        AuditLog.log_action(
            user=user,
            action=AUDIT_ACTIONS['USER_LOGIN'],
            resource_type='user',
            resource_id=user.user_id,
            metadata={'success': True},
            ip_address=ip_address,
            user_agent=user_agent
        )

        logger.info(f"User logged in: {user.user_id}")
        return {
            'accessToken': self.token_service.issue(user.user_id),
            'user': user.to_public_dict(),
        }

    def get_identity(self, authorization_header) -> Identity:
        """
        从 Authorization 头获取身份

        Raises:
            TokenVerificationError: 头缺失/格式错误、签名不匹配或已过期
        """
        return self.token_service.verify_bearer(authorization_header)

    def get_user_profile(self, identity: Identity, target_user_id) -> Dict[str, any]:
        """
        获取用户资料，只能读取自己的

        先做授权判定，不暴露其他用户是否存在。

        Raises:
            AccessDenied: 目标不是自己
            UserNotFoundError: 自己的记录不存在
        """
        PermissionService().ensure_self(identity, target_user_id)

        user = self.user_service.find_user_by_id(identity.user_id)
        if user is None:
            raise UserNotFoundError()
        return user.to_public_dict()
