"""
基础模型类
"""

from django.db import models


class BaseModel(models.Model):
    """基础模型类"""

    created_at = models.DateTimeField(
        auto_now_add=True
    )
    updated_at = models.DateTimeField(
        auto_now=True
    )

    class Meta:
        abstract = True
        ordering = ['-created_at']


def normalize_email(email: str) -> str:
    """邮箱统一小写去空白，唯一性基于规范化后的值"""
    return (email or '').strip().lower()
