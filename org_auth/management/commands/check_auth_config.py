"""
检查Org Auth配置
"""

import uuid

from django.core.exceptions import ImproperlyConfigured
from django.core.management.base import BaseCommand, CommandError

from ...conf import auth_settings
from ...exceptions import TokenVerificationError
from ...services import TokenService


class Command(BaseCommand):
    help = 'Check Org Auth configuration'

    def handle(self, *args, **options):
        """执行配置检查"""
        self.stdout.write("Checking Org Auth configuration...")
        self.stdout.write("=" * 60)

        secret_key = auth_settings.JWT_SECRET_KEY
        self.stdout.write("\nConfiguration Variables:")
        self.stdout.write(f"  JWT Secret: {'set (%d chars)' % len(secret_key) if secret_key else 'missing'}")
        self.stdout.write(f"  JWT Algorithm: {auth_settings.JWT_ALGORITHM}")
        self.stdout.write(f"  Default Organisation Name: {auth_settings.DEFAULT_ORGANISATION_NAME}")
        self.stdout.write(f"  Audit Log: {'enabled' if auth_settings.ENABLE_AUDIT_LOG else 'disabled'}")

        try:
            token_settings = auth_settings.token_settings()
        except ImproperlyConfigured as e:
            raise CommandError(f"Configuration check failed: {str(e)}")

        self.stdout.write(f"  Token Lifetime: {token_settings.lifetime}s")

        # 签发并验证一次Token
        self.stdout.write("\nToken Round Trip:")
        probe_user_id = str(uuid.uuid4())
        token_service = TokenService(token_settings)
        try:
            identity = token_service.verify(token_service.issue(probe_user_id))
        except TokenVerificationError as e:
            raise CommandError(f"Token round trip failed: {e.message}")

        if identity.user_id != probe_user_id:
            raise CommandError("Token round trip failed: user id mismatch")
        self.stdout.write("  Token issued and verified")

        self.stdout.write(f"\n{'=' * 60}")
        self.stdout.write(self.style.SUCCESS('Configuration check completed!'))
