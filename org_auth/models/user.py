"""
用户模型
"""

import uuid

from django.db import models

from .base import BaseModel, normalize_email


class UserManager(models.Manager):
    """用户管理器"""

    def create_user(self, email, password_digest, **extra_fields):
        """创建用户，password_digest 必须是已哈希的摘要"""
        if not email:
            raise ValueError('Email is required')

        return self.create(
            email=normalize_email(email),
            password=password_digest,
            **extra_fields
        )


class User(BaseModel):
    """用户模型，注册后不可变"""

    user_id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    first_name = models.CharField(
        max_length=150
    )
    last_name = models.CharField(
        max_length=150
    )
    email = models.EmailField(
        max_length=255,
        unique=True
    )
    password = models.CharField(
        max_length=255,
        help_text="加盐密码摘要"
    )
    phone = models.CharField(
        max_length=32,
        null=True,
        blank=True
    )

    objects = UserManager()

    class Meta(BaseModel.Meta):
        db_table = 'org_auth_user'

    def __str__(self):
        return self.email

    def to_public_dict(self):
        """公开视图，不包含密码摘要"""
        return {
            'userId': str(self.user_id),
            'firstName': self.first_name,
            'lastName': self.last_name,
            'email': self.email,
            'phone': self.phone,
        }
