"""
组织模型
"""

import uuid

from django.db import models

from .base import BaseModel


class Organisation(BaseModel):
    """组织模型，成员之间没有角色区分"""

    org_id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    name = models.CharField(
        max_length=255,
        help_text="组织名称"
    )
    description = models.TextField(
        null=True,
        blank=True,
        help_text="组织描述"
    )
    members = models.ManyToManyField(
        'User',
        related_name='organisations',
        db_table='org_auth_membership',
        help_text="组织成员"
    )

    class Meta(BaseModel.Meta):
        db_table = 'org_auth_organisation'

    def __str__(self):
        return f"{self.name} ({self.org_id})"

    @property
    def member_ids(self):
        """成员用户ID集合，预取 members 时不再查询"""
        return frozenset(str(member.user_id) for member in self.members.all())

    def to_public_dict(self):
        return {
            'orgId': str(self.org_id),
            'name': self.name,
            'description': self.description,
        }
