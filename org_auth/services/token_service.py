"""
Token签发与验证服务

无状态: 有效性只由签名和过期时间决定，不保存会话也没有吊销列表。
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from ..constants import (
    ACCESS_TOKEN_LIFETIME,
    BEARER_PREFIX,
    TOKEN_ALGORITHM,
    TOKEN_REQUIRED_CLAIMS,
)
from ..exceptions import (
    InvalidSignatureError,
    MalformedTokenError,
    TokenExpiredError,
)


@dataclass(frozen=True)
class TokenSettings:
    """启动时加载的只读签名配置"""

    secret_key: str
    algorithm: str = TOKEN_ALGORITHM
    lifetime: int = ACCESS_TOKEN_LIFETIME


@dataclass(frozen=True)
class Identity:
    """Token验证通过后确认的身份"""

    user_id: str
    issued_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None


class TokenService:
    """Token签发与验证"""

    def __init__(self, token_settings: Optional[TokenSettings] = None):
        self.token_settings = token_settings or self._load_startup_settings()

    @staticmethod
    def _load_startup_settings() -> TokenSettings:
        from django.apps import apps

        app_config = apps.get_app_config('org_auth')
        if app_config.token_settings is None:
            # ready() 尚未执行的场景，例如脚本直接调用
            from ..conf import auth_settings
            app_config.token_settings = auth_settings.token_settings()
        return app_config.token_settings

    def issue(self, user_id, now: Optional[datetime] = None) -> str:
        """
        签发Token

        Args:
            user_id: 用户ID
            now: 签发时间，默认当前UTC时间

        Returns:
            str: 携带 user_id / iat / exp 的签名Token
        """
        issued_at = now or datetime.now(tz=timezone.utc)
        expires_at = issued_at + timedelta(seconds=self.token_settings.lifetime)

        payload = {
            'user_id': str(user_id),
            'iat': int(issued_at.timestamp()),
            'exp': int(expires_at.timestamp()),
        }

        return jwt.encode(
            payload,
            self.token_settings.secret_key,
            algorithm=self.token_settings.algorithm
        )

    def verify(self, token) -> Identity:
        """
        验证Token

        Args:
            token: 签名Token

        Returns:
            Identity: 确认的身份

        Raises:
            MalformedTokenError: 结构无法解析或缺少必需声明
            InvalidSignatureError: 签名不匹配
            TokenExpiredError: 当前时间 >= exp
        """
        if not isinstance(token, str) or not token:
            raise MalformedTokenError()

        try:
            payload = jwt.decode(
                token,
                self.token_settings.secret_key,
                algorithms=[self.token_settings.algorithm],
                options={'require': TOKEN_REQUIRED_CLAIMS}
            )
        except jwt.ExpiredSignatureError:
            raise TokenExpiredError()
        # InvalidSignatureError 是 DecodeError 的子类，必须先捕获
        except jwt.InvalidSignatureError:
            raise InvalidSignatureError()
        except jwt.InvalidTokenError:
            raise MalformedTokenError()

        user_id = payload['user_id']
        try:
            user_id = str(uuid.UUID(str(user_id)))
        except ValueError:
            raise MalformedTokenError()

        return Identity(
            user_id=user_id,
            issued_at=datetime.fromtimestamp(payload['iat'], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload['exp'], tz=timezone.utc),
        )

    def verify_bearer(self, authorization_header) -> Identity:
        """从 Authorization 头验证身份"""
        return self.verify(extract_bearer_token(authorization_header))


def extract_bearer_token(authorization_header) -> str:
    """
    解析 "Authorization: Bearer <token>"

    头缺失、方案不是Bearer或Token为空都视为格式错误。
    """
    if not isinstance(authorization_header, str):
        raise MalformedTokenError('Missing authorization header')

    parts = authorization_header.split()
    if len(parts) != 2 or parts[0].lower() != BEARER_PREFIX.lower():
        raise MalformedTokenError('Malformed authorization header')

    return parts[1]
