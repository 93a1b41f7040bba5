"""
用户凭据存储服务
"""

import logging
from typing import Dict, Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, transaction

from ..models import User
from ..models.base import normalize_email
from ..exceptions import EmailAlreadyExistsError


logger = logging.getLogger(__name__)


class UserService:
    """用户凭据存储"""

    def create_user(self, fields: Dict) -> User:
        """
        创建用户

        Args:
            fields: first_name / last_name / email / password(摘要) / phone

        Returns:
            User: 创建的用户

        Raises:
            EmailAlreadyExistsError: 邮箱已存在(由数据库唯一约束判定)
        """
        fields = dict(fields)
        email = fields.pop('email')
        password_digest = fields.pop('password')

        try:
            # 独立保存点，外层事务中捕获 IntegrityError 后仍可继续
            with transaction.atomic():
                return User.objects.create_user(email, password_digest, **fields)
        except IntegrityError:
            logger.warning("User creation rejected: duplicate email")
            raise EmailAlreadyExistsError()

    def find_user_by_email(self, email) -> Optional[User]:
        if not isinstance(email, str) or not email.strip():
            return None
        return User.objects.filter(email=normalize_email(email)).first()

    def find_user_by_id(self, user_id) -> Optional[User]:
        """格式错误的ID按不存在处理"""
        try:
            return User.objects.filter(user_id=user_id).first()
        except (ValueError, DjangoValidationError):
            return None

