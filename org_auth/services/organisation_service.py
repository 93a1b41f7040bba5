"""
组织成员关系服务
"""

import logging
from typing import List, Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction

from ..models import AuditLog, Organisation, User
from ..constants import AUDIT_ACTIONS
from ..exceptions import OrganisationNotFoundError, UserNotFoundError


logger = logging.getLogger(__name__)


class OrganisationService:
    """组织成员关系管理服务"""

    def create_organisation(self, name: str, creator_id, description: Optional[str] = None) -> Organisation:
        """
        创建组织并把创建者加为成员

        组织与创建者的成员关系在同一事务中提交，不会出现没有成员的组织。

        Args:
            name: 组织名称
            creator_id: 创建者用户ID
            description: 组织描述

        Returns:
            Organisation: 创建的组织

        Raises:
            UserNotFoundError: 创建者不存在
        """
        creator = self._get_user(creator_id)

        with transaction.atomic():
            organisation = Organisation.objects.create(
                name=name,
                description=description
            )
            organisation.members.add(creator)

            AuditLog.log_action(
                user=creator,
                action=AUDIT_ACTIONS['ORGANISATION_CREATED'],
                resource_type='organisation',
                resource_id=organisation.org_id,
                metadata={'name': name}
            )

        logger.info(f"Organisation created: {organisation.org_id} by {creator.user_id}")
        return organisation

    def find_organisation_by_id(self, org_id, with_members: bool = False) -> Optional[Organisation]:
        """格式错误的ID按不存在处理"""
        queryset = Organisation.objects.all()
        if with_members:
            queryset = queryset.prefetch_related('members')

        try:
            return queryset.filter(org_id=org_id).first()
        except (ValueError, DjangoValidationError):
            return None

    def list_organisations_for_user(self, user_id) -> List[Organisation]:
        try:
            return list(Organisation.objects.filter(members__user_id=user_id).distinct())
        except (ValueError, DjangoValidationError):
            return []

    def add_member(self, org_id, user_id, added_by=None) -> Organisation:
        """
        添加组织成员，已是成员时不做任何改变

        Args:
            org_id: 组织ID
            user_id: 要添加的用户ID
            added_by: 操作人用户ID

        Returns:
            Organisation: 组织对象

        Raises:
            OrganisationNotFoundError: 组织不存在
            UserNotFoundError: 用户不存在
        """
        organisation = self.find_organisation_by_id(org_id)
        if organisation is None:
            raise OrganisationNotFoundError()

        user = self._get_user(user_id)

        if organisation.members.filter(pk=user.pk).exists():
            return organisation

        with transaction.atomic():
            organisation.members.add(user)

            AuditLog.log_action(
                user=user,
                action=AUDIT_ACTIONS['ORGANISATION_MEMBER_ADDED'],
                resource_type='organisation',
                resource_id=organisation.org_id,
                metadata={'added_by': str(added_by) if added_by else None}
            )

        logger.info(f"Organisation member added: {user.user_id} to {organisation.org_id}")
        return organisation

    def _get_user(self, user_id) -> User:
        try:
            user = User.objects.filter(user_id=user_id).first()
        except (ValueError, DjangoValidationError):
            user = None

        if user is None:
            raise UserNotFoundError()
        return user
