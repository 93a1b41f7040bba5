"""
审计日志模型
"""

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_ipv46_address
from django.db import models

from .base import BaseModel


class AuditLog(BaseModel):
    """审计日志模型"""

    user = models.ForeignKey(
        'User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='audit_logs',
        help_text="操作用户，登录失败且用户不存在时为空"
    )
    action = models.CharField(
        max_length=100,
        db_index=True,
        help_text="操作类型"
    )
    resource_type = models.CharField(
        max_length=50,
        null=True,
        blank=True,
        help_text="资源类型"
    )
    resource_id = models.CharField(
        max_length=64,
        null=True,
        blank=True,
        help_text="资源ID"
    )
    ip_address = models.GenericIPAddressField(
        null=True,
        blank=True,
        help_text="IP地址"
    )
    user_agent = models.TextField(
        null=True,
        blank=True,
        help_text="User Agent"
    )
    metadata = models.JSONField(
        default=dict,
        help_text="附加元数据"
    )

    class Meta(BaseModel.Meta):
        db_table = 'org_auth_audit_log'
        indexes = [
            models.Index(fields=['resource_type', 'resource_id'], name='org_auth_audit_resource_idx'),
        ]

    def __str__(self):
        return f"{self.user or '-'} - {self.action} - {self.created_at}"

    @classmethod
    def log_action(
        cls,
        user,
        action,
        resource_type=None,
        resource_id=None,
        ip_address=None,
        user_agent=None,
        metadata=None
    ):
        """记录操作日志，关闭 ENABLE_AUDIT_LOG 时返回 None"""
        from ..conf import is_audit_log_enabled

        if not is_audit_log_enabled():
            return None

        return cls.objects.create(
            user=user,
            action=action,
            resource_type=resource_type,
            resource_id=str(resource_id) if resource_id is not None else None,
            ip_address=ip_address,
            user_agent=user_agent,
            metadata=metadata or {}
        )

    @staticmethod
    def get_client_ip(request):
        """获取客户端IP地址，取不到合法地址时返回 None"""
        candidates = []
        x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
        if x_forwarded_for:
            candidates.append(x_forwarded_for.split(',')[0].strip())
        candidates.append(request.META.get('REMOTE_ADDR'))

        for candidate in candidates:
            if not candidate:
                continue
            try:
                validate_ipv46_address(candidate)
            except DjangoValidationError:
                continue
            return candidate
        return None
