"""
测试认证与组织权限装饰器
"""

import json
import uuid

from django.db import DatabaseError
from django.http import HttpResponse
from django.test import RequestFactory, SimpleTestCase, TestCase
from rest_framework.exceptions import UnsupportedMediaType

from ..decorators import api_errors, require_auth, require_org_read, require_org_write
from ..exceptions import AccessDenied
from ..services import TokenService
from .factories import OrganisationFactory, UserFactory


@require_auth
def whoami(request):
    return HttpResponse(request.identity.user_id)


@require_auth
@require_org_read()
def read_org(request, org_id, organisation):
    return HttpResponse(organisation.name)


@require_auth
@require_org_write()
def write_org(request, org_id, organisation):
    return HttpResponse('ok')


def _body(response):
    return json.loads(response.content)


class RequireAuthTest(SimpleTestCase):
    """测试 require_auth"""

    def setUp(self):
        self.factory = RequestFactory()
        self.user_id = str(uuid.uuid4())
        self.token = TokenService().issue(self.user_id)

    def test_valid_token_sets_identity(self):
        request = self.factory.get('/', HTTP_AUTHORIZATION=f'Bearer {self.token}')

        response = whoami(request)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.content.decode(), self.user_id)

    def test_rejected_headers(self):
        for headers in [{}, {'HTTP_AUTHORIZATION': self.token}, {'HTTP_AUTHORIZATION': 'Bearer x.y.z'}]:
            with self.subTest(headers=headers):
                response = whoami(self.factory.get('/', **headers))

                self.assertEqual(response.status_code, 401)
                self.assertEqual(_body(response)['status'], 'Unauthorized')


class ApiErrorsTest(SimpleTestCase):
    """测试 api_errors"""

    def setUp(self):
        self.request = RequestFactory().get('/')

    def test_service_error_mapped(self):
        @api_errors('Client error')
        def view(request):
            raise AccessDenied()

        response = view(self.request)

        self.assertEqual(response.status_code, 403)
        self.assertEqual(_body(response), {'status': 'Forbidden', 'message': 'Access denied', 'statusCode': 403})

    def test_request_error_mapped(self):
        @api_errors('Client error')
        def view(request):
            raise UnsupportedMediaType('text/plain')

        response = view(self.request)

        self.assertEqual(response.status_code, 415)
        self.assertEqual(_body(response), {
            'status': 'Unsupported media type',
            'message': 'Unsupported media type "text/plain" in request.',
            'statusCode': 415,
        })

    def test_database_error_mapped(self):
        @api_errors('Error retrieving user')
        def view(request):
            raise DatabaseError('connection lost')

        response = view(self.request)

        self.assertEqual(response.status_code, 400)
        self.assertEqual(_body(response)['message'], 'Error retrieving user')


class RequireOrgAccessTest(TestCase):
    """测试 require_org_read / require_org_write"""

    def setUp(self):
        self.factory = RequestFactory()
        self.member = UserFactory()
        self.outsider = UserFactory()
        self.organisation = OrganisationFactory(name='Acme', members=[self.member])

    def call(self, view, user, org_id):
        token = TokenService().issue(user.user_id)
        request = self.factory.get('/', HTTP_AUTHORIZATION=f'Bearer {token}')
        return view(request, org_id=str(org_id))

    def test_member_allowed(self):
        response = self.call(read_org, self.member, self.organisation.org_id)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.content.decode(), 'Acme')
        self.assertEqual(self.call(write_org, self.member, self.organisation.org_id).status_code, 200)

    def test_non_member_denied(self):
        for view in (read_org, write_org):
            with self.subTest(view=view.__name__):
                response = self.call(view, self.outsider, self.organisation.org_id)

                self.assertEqual(response.status_code, 403)

    def test_missing_organisation(self):
        for org_id in (uuid.uuid4(), 'not-a-uuid'):
            with self.subTest(org_id=org_id):
                response = self.call(read_org, self.member, org_id)

                self.assertEqual(response.status_code, 404)
                self.assertEqual(_body(response)['message'], 'Organisation not found')
