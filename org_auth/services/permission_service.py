"""
访问控制引擎 - 默认拒绝

判定函数是纯函数，只依赖传入的身份和成员关系事实，
任何未命中允许规则的输入都返回 DENY。
"""

import logging
import uuid
from typing import Optional

from ..constants import Action, Decision
from ..exceptions import AccessDenied


logger = logging.getLogger(__name__)


def _normalize_id(value) -> Optional[str]:
    if value is None:
        return None
    try:
        return str(uuid.UUID(str(value)))
    except (ValueError, TypeError, AttributeError):
        return None


def _identity_user_id(identity) -> Optional[str]:
    return _normalize_id(getattr(identity, 'user_id', None))


def authorize_self(identity, target_user_id) -> Decision:
    """仅当身份就是目标用户时允许"""
    user_id = _identity_user_id(identity)
    if user_id is None:
        return Decision.DENY

    if user_id == _normalize_id(target_user_id):
        return Decision.ALLOW
    return Decision.DENY


def _is_member(identity, org) -> bool:
    user_id = _identity_user_id(identity)
    if user_id is None or org is None:
        return False

    member_ids = getattr(org, 'member_ids', None) or ()
    return user_id in {_normalize_id(member_id) for member_id in member_ids}


def authorize_org_read(identity, org) -> Decision:
    """成员可读"""
    return Decision.ALLOW if _is_member(identity, org) else Decision.DENY


def authorize_org_write(identity, org) -> Decision:
    """成员可写，没有单独的所有者角色"""
    return Decision.ALLOW if _is_member(identity, org) else Decision.DENY


ORG_POLICIES = {
    Action.READ: authorize_org_read,
    Action.WRITE: authorize_org_write,
}


class PermissionService:
    """访问控制服务，判定为 DENY 时抛出 AccessDenied"""

    def check_org_permission(self, identity, org, action) -> Decision:
        """
        组织权限检查

        Args:
            identity: 已验证的身份
            org: 组织(需提供 member_ids)
            action: 'read' 或 'write'

        Returns:
            Decision: 判定结果，未知操作返回 DENY
        """
        try:
            policy = ORG_POLICIES[Action(action)]
        except ValueError:
            return Decision.DENY
        return policy(identity, org)

    def ensure_self(self, identity, target_user_id):
        if not authorize_self(identity, target_user_id).allowed:
            logger.warning(
                f"Access denied: user={_identity_user_id(identity)} target_user={target_user_id}"
            )
            raise AccessDenied()

    def ensure_org_permission(self, identity, org, action):
        if not self.check_org_permission(identity, org, action).allowed:
            logger.warning(
                f"Access denied: user={_identity_user_id(identity)} "
                f"organisation={getattr(org, 'org_id', None)} action={action}"
            )
            raise AccessDenied()

    def ensure_org_read(self, identity, org):
        self.ensure_org_permission(identity, org, Action.READ)

    def ensure_org_write(self, identity, org):
        self.ensure_org_permission(identity, org, Action.WRITE)
