"""
Org Auth REST API 视图
"""

from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.exceptions import ParseError

from ..constants import Action, HttpStatus
from ..decorators import api_errors, require_auth, require_org_access
from ..exceptions import ValidationError
from ..models import AuditLog
from ..services import AuthService, OrganisationService
from .responses import success_response


def _payload(request):
    """请求体，无法解析或不是对象时按空对象处理"""
    try:
        data = request.data
    except ParseError:
        return {}
    return data if isinstance(data, dict) else {}


def _client_info(request):
    return {
        'ip_address': AuditLog.get_client_ip(request),
        'user_agent': request.META.get('HTTP_USER_AGENT', ''),
    }


@api_view(['POST'])
@authentication_classes([])
@permission_classes([])
@api_errors('Registration unsuccessful')
def register(request):
    """POST /auth/register"""
    result = AuthService().register_user(_payload(request), **_client_info(request))
    return success_response('Registration successful', result, HttpStatus.CREATED)


@api_view(['POST'])
@authentication_classes([])
@permission_classes([])
@api_errors('Authentication failed')
def login(request):
    """POST /auth/login"""
    payload = _payload(request)
    result = AuthService().authenticate_user(
        payload.get('email'),
        payload.get('password'),
        **_client_info(request)
    )
    return success_response('Login successful', result)


@api_view(['GET'])
@authentication_classes([])
@permission_classes([])
@api_errors('Error retrieving user')
@require_auth
def user_detail(request, user_id):
    """GET /api/users/<user_id> - 只能读取自己的资料"""
    profile = AuthService().get_user_profile(request.identity, user_id)
    return success_response('User retrieved successfully', profile)


@api_view(['GET', 'POST'])
@authentication_classes([])
@permission_classes([])
@api_errors('Client error')
@require_auth
def organisations(request):
    """GET 列出当前用户所属组织 / POST 创建组织"""
    if request.method == 'POST':
        return _create_organisation(request)

    organisation_list = OrganisationService().list_organisations_for_user(request.identity.user_id)
    return success_response('Organisations retrieved successfully', {
        'organisations': [org.to_public_dict() for org in organisation_list],
    })


def _create_organisation(request):
    payload = _payload(request)

    name = payload.get('name')
    if not isinstance(name, str) or not name.strip():
        raise ValidationError([{'field': 'name', 'message': 'Name is required'}])

    description = payload.get('description')
    if description is not None and not isinstance(description, str):
        raise ValidationError([{'field': 'description', 'message': 'Description must be a string'}])

    organisation = OrganisationService().create_organisation(
        name=name.strip(),
        creator_id=request.identity.user_id,
        description=description
    )
    return success_response(
        'Organisation created successfully',
        organisation.to_public_dict(),
        HttpStatus.CREATED
    )


@api_view(['GET'])
@authentication_classes([])
@permission_classes([])
@api_errors('Error retrieving organisation')
@require_auth
@require_org_access(Action.READ)
def organisation_detail(request, org_id, organisation):
    """GET /api/organisations/<org_id> - 仅成员可见"""
    return success_response('Organisation retrieved successfully', organisation.to_public_dict())


@api_view(['POST'])
@authentication_classes([])
@permission_classes([])
@api_errors('Client error')
@require_auth
@require_org_access(Action.WRITE)
def organisation_add_user(request, org_id, organisation):
    """POST /api/organisations/<org_id>/users - 任何成员都可以添加成员"""
    user_id = _payload(request).get('userId')
    if not isinstance(user_id, str) or not user_id.strip():
        raise ValidationError([{'field': 'userId', 'message': 'User ID is required'}])

    OrganisationService().add_member(
        organisation.org_id,
        user_id.strip(),
        added_by=request.identity.user_id
    )
    return success_response('User added to organisation successfully')
