import logging

from django.apps import AppConfig


logger = logging.getLogger(__name__)


class OrgAuthConfig(AppConfig):
    """Org Auth 应用配置"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'org_auth'
    verbose_name = 'Org Auth'

    token_settings = None

    def ready(self):
        """启动时加载签名配置，缺失即失败"""
        from .conf import auth_settings

        # ImproperlyConfigured 直接向上抛出，进程无法启动
        self.token_settings = auth_settings.token_settings()
        logger.info("Org Auth configuration validated")
