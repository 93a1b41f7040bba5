"""
Org Auth 装饰器 - 认证与组织权限检查
"""

import logging
from functools import wraps

from django.db import DatabaseError
from rest_framework.exceptions import APIException

from .api.responses import api_exception_response, error_response
from .constants import Action
from .exceptions import OrgAuthError, OrganisationNotFoundError, StoreError
from .services import OrganisationService, PermissionService, TokenService


logger = logging.getLogger(__name__)


def api_errors(failure_message):
    """
    把服务层异常转换为失败响应

    Args:
        failure_message: 存储异常时返回给调用方的400提示，例如 "Client error"
    """
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            try:
                return view_func(request, *args, **kwargs)
            except OrgAuthError as e:
                return error_response(e)
            except APIException as e:
                return api_exception_response(e)
            except DatabaseError as e:
                logger.error(f"Database error in {view_func.__name__}: {str(e)}")
                return error_response(StoreError(failure_message))

        return wrapper
    return decorator


def require_auth(view_func):
    """
    Bearer Token认证装饰器

    验证 "Authorization: Bearer <token>"，通过后设置 request.identity。

    使用示例:
        @require_auth
        def get_profile(request, user_id):
            request.identity.user_id
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        try:
            request.identity = TokenService().verify_bearer(
                request.headers.get('Authorization')
            )
        except OrgAuthError as e:
            return error_response(e)

        return view_func(request, *args, **kwargs)

    return wrapper


def require_org_access(action=Action.READ, org_id='org_id'):
    """
    组织权限检查装饰器，需在 require_auth 之后

    Args:
        action: 'read' 或 'write'
        org_id: 组织ID所在的视图参数名

    从视图参数加载组织(含成员)，不存在返回404，非成员返回403，
    通过后以 organisation 参数注入视图。
    """
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            try:
                organisation = OrganisationService().find_organisation_by_id(
                    kwargs.get(org_id),
                    with_members=True
                )
                if organisation is None:
                    raise OrganisationNotFoundError()

                PermissionService().ensure_org_permission(
                    getattr(request, 'identity', None),
                    organisation,
                    action
                )
            except OrgAuthError as e:
                return error_response(e)

            kwargs['organisation'] = organisation
            return view_func(request, *args, **kwargs)

        return wrapper
    return decorator


# 便捷装饰器别名
def require_org_read(org_id='org_id'):
    return require_org_access(action=Action.READ, org_id=org_id)


def require_org_write(org_id='org_id'):
    return require_org_access(action=Action.WRITE, org_id=org_id)
