"""
Org Auth Library - 极简配置
只有签名密钥是必需的，其他都有默认值
"""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from decouple import config as env_config

from .constants import (
    ACCESS_TOKEN_LIFETIME,
    DEFAULT_ORGANISATION_NAME,
    JWT_SECRET_KEY_MIN_LENGTH,
    TOKEN_ALGORITHM,
)


class OrgAuthSettings:
    """
    配置读取顺序: settings.ORG_AUTH -> ORG_AUTH_<NAME> 环境变量(.env) -> 默认值
    """

    DEFAULTS = {
        # 签名密钥 - 唯一必需的配置，不回退到Django的SECRET_KEY
        'JWT_SECRET_KEY': '',
        'JWT_ALGORITHM': TOKEN_ALGORITHM,

        'DEFAULT_ORGANISATION_NAME': DEFAULT_ORGANISATION_NAME,
        'ENABLE_AUDIT_LOG': True,
    }

    @property
    def user_settings(self):
        # 每次读取，兼容 override_settings
        return getattr(settings, 'ORG_AUTH', {})

    def __getattr__(self, name):
        if name not in self.DEFAULTS:
            raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}'")

        if name in self.user_settings:
            return self.user_settings[name]

        default_value = self.DEFAULTS[name]
        cast = bool if isinstance(default_value, bool) else str
        return env_config(f'ORG_AUTH_{name}', default=default_value, cast=cast)

    def validate(self):
        """启动时校验，缺失密钥直接失败而不是等到请求时"""
        secret_key = self.JWT_SECRET_KEY
        if not secret_key:
            raise ImproperlyConfigured(
                "ORG_AUTH JWT_SECRET_KEY is required. "
                "Configure ORG_AUTH['JWT_SECRET_KEY'] in settings.py or set ORG_AUTH_JWT_SECRET_KEY"
            )
        if len(secret_key) < JWT_SECRET_KEY_MIN_LENGTH:
            raise ImproperlyConfigured(
                f"ORG_AUTH JWT_SECRET_KEY must be at least {JWT_SECRET_KEY_MIN_LENGTH} characters long"
            )
        if self.JWT_ALGORITHM != TOKEN_ALGORITHM:
            raise ImproperlyConfigured(
                f"ORG_AUTH JWT_ALGORITHM must be {TOKEN_ALGORITHM}"
            )

        # 模板只能引用 {first_name}，否则每次注册都会失败
        organisation_name = self.DEFAULT_ORGANISATION_NAME
        try:
            organisation_name.format(first_name='Ann')
        except (AttributeError, KeyError, IndexError, ValueError):
            raise ImproperlyConfigured(
                "ORG_AUTH DEFAULT_ORGANISATION_NAME must be a string that only uses the {first_name} placeholder"
            )

    def token_settings(self):
        """校验后生成不可变的Token配置"""
        from .services.token_service import TokenSettings

        self.validate()
        return TokenSettings(
            secret_key=self.JWT_SECRET_KEY,
            algorithm=self.JWT_ALGORITHM,
            lifetime=ACCESS_TOKEN_LIFETIME,
        )


# 全局配置实例
auth_settings = OrgAuthSettings()


# 便捷函数
def get_auth_setting(name, default=None):
    """便捷函数：获取配置项"""
    try:
        return getattr(auth_settings, name)
    except AttributeError:
        return default


def is_audit_log_enabled():
    return bool(get_auth_setting('ENABLE_AUDIT_LOG', True))
