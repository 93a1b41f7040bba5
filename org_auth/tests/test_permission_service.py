"""
测试访问控制引擎
"""

import uuid
from types import SimpleNamespace

from django.test import SimpleTestCase, TestCase

from ..constants import Action, Decision
from ..exceptions import AccessDenied
from ..services import Identity, OrganisationService, PermissionService
from ..services.permission_service import (
    authorize_org_read,
    authorize_org_write,
    authorize_self,
)
from .factories import OrganisationFactory, UserFactory


def make_org(*member_ids):
    return SimpleNamespace(org_id=str(uuid.uuid4()), member_ids=frozenset(str(m) for m in member_ids))


class DecisionFunctionTest(SimpleTestCase):
    """测试纯判定函数"""

    def setUp(self):
        self.user_id = str(uuid.uuid4())
        self.other_id = str(uuid.uuid4())
        self.identity = Identity(user_id=self.user_id)

    def test_authorize_self(self):
        self.assertEqual(authorize_self(self.identity, self.user_id), Decision.ALLOW)
        self.assertEqual(authorize_self(self.identity, uuid.UUID(self.user_id)), Decision.ALLOW)
        self.assertEqual(authorize_self(self.identity, self.user_id.upper()), Decision.ALLOW)
        self.assertEqual(authorize_self(self.identity, self.other_id), Decision.DENY)

    def test_authorize_self_default_deny(self):
        for identity, target in [
            (None, self.user_id),
            (self.identity, None),
            (self.identity, 'not-a-uuid'),
            (Identity(user_id='not-a-uuid'), 'not-a-uuid'),
            (object(), self.user_id),
        ]:
            with self.subTest(identity=identity, target=target):
                self.assertEqual(authorize_self(identity, target), Decision.DENY)

    def test_member_can_read_and_write(self):
        org = make_org(self.user_id, self.other_id)

        self.assertEqual(authorize_org_read(self.identity, org), Decision.ALLOW)
        self.assertEqual(authorize_org_write(self.identity, org), Decision.ALLOW)

    def test_non_member_denied(self):
        org = make_org(self.other_id)

        self.assertEqual(authorize_org_read(self.identity, org), Decision.DENY)
        self.assertEqual(authorize_org_write(self.identity, org), Decision.DENY)

    def test_org_default_deny(self):
        for identity, org in [
            (None, make_org(self.user_id)),
            (self.identity, None),
            (self.identity, SimpleNamespace()),
            (self.identity, make_org()),
        ]:
            with self.subTest(identity=identity, org=org):
                self.assertEqual(authorize_org_read(identity, org), Decision.DENY)
                self.assertEqual(authorize_org_write(identity, org), Decision.DENY)

    def test_decision_allowed(self):
        self.assertTrue(Decision.ALLOW.allowed)
        self.assertFalse(Decision.DENY.allowed)


class PermissionServiceTest(SimpleTestCase):
    """测试PermissionService"""

    def setUp(self):
        self.permission_service = PermissionService()
        self.identity = Identity(user_id=str(uuid.uuid4()))

    def test_check_org_permission(self):
        org = make_org(self.identity.user_id)

        self.assertEqual(self.permission_service.check_org_permission(self.identity, org, 'read'), Decision.ALLOW)
        self.assertEqual(self.permission_service.check_org_permission(self.identity, org, Action.WRITE), Decision.ALLOW)

    def test_unknown_action_denied(self):
        org = make_org(self.identity.user_id)

        for action in ['delete', None, 'admin']:
            with self.subTest(action=action):
                self.assertEqual(
                    self.permission_service.check_org_permission(self.identity, org, action),
                    Decision.DENY
                )

    def test_ensure_raises_access_denied(self):
        org = make_org(str(uuid.uuid4()))

        with self.assertRaises(AccessDenied):
            self.permission_service.ensure_org_read(self.identity, org)
        with self.assertRaises(AccessDenied):
            self.permission_service.ensure_org_write(self.identity, org)
        with self.assertRaises(AccessDenied):
            self.permission_service.ensure_self(self.identity, str(uuid.uuid4()))

    def test_ensure_passes_for_allowed(self):
        org = make_org(self.identity.user_id)

        self.permission_service.ensure_org_read(self.identity, org)
        self.permission_service.ensure_org_write(self.identity, org)
        self.permission_service.ensure_self(self.identity, self.identity.user_id)


class MembershipAuthorizationTest(TestCase):
    """测试基于数据库成员关系的授权"""

    def setUp(self):
        self.organisation_service = OrganisationService()
        self.owner = UserFactory()
        self.outsider = UserFactory()
        self.organisation = OrganisationFactory(members=[self.owner])

    def _load(self):
        return self.organisation_service.find_organisation_by_id(
            self.organisation.org_id,
            with_members=True
        )

    def test_denied_before_and_allowed_after_add(self):
        identity = Identity(user_id=str(self.outsider.user_id))

        organisation = self._load()
        self.assertEqual(authorize_org_read(identity, organisation), Decision.DENY)
        self.assertEqual(authorize_org_write(identity, organisation), Decision.DENY)

        self.organisation_service.add_member(self.organisation.org_id, self.outsider.user_id)

        organisation = self._load()
        self.assertEqual(authorize_org_read(identity, organisation), Decision.ALLOW)
        self.assertEqual(authorize_org_write(identity, organisation), Decision.ALLOW)

    def test_prefetched_members_need_no_queries(self):
        organisation = self._load()
        identity = Identity(user_id=str(self.owner.user_id))

        with self.assertNumQueries(0):
            self.assertEqual(authorize_org_read(identity, organisation), Decision.ALLOW)
