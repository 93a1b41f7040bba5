"""
统一响应格式

成功: {status: "success", message, statusCode, data?}
失败: {status, message, statusCode}，验证失败额外带 errors
"""

from django.http import JsonResponse
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import set_rollback

from ..constants import HttpStatus
from ..exceptions import OrgAuthError, RequestError, ValidationError


def success_response(message, data=None, status_code=HttpStatus.OK):
    body = {
        'status': 'success',
        'message': message,
        'statusCode': status_code,
    }
    if data is not None:
        body['data'] = data
    return Response(body, status=status_code)


def error_response(exc):
    body = {
        'status': exc.status_text,
        'message': exc.message,
        'statusCode': exc.status_code,
    }
    if isinstance(exc, ValidationError):
        body['errors'] = exc.errors
    return JsonResponse(body, status=exc.status_code)


def api_exception_response(exc):
    """DRF请求层异常 (415、405等) 使用同样的失败格式"""
    detail = exc.detail if isinstance(exc.detail, str) else exc.default_detail
    return error_response(RequestError(exc.status_code, str(detail)))


def exception_handler(exc, context):
    """
    DRF 异常处理器，在视图函数之外抛出的异常 (例如 405) 也返回统一格式

    settings.py:
        REST_FRAMEWORK = {
            'EXCEPTION_HANDLER': 'org_auth.api.responses.exception_handler',
        }
    """
    if isinstance(exc, OrgAuthError):
        response = error_response(exc)
    elif isinstance(exc, APIException):
        response = api_exception_response(exc)
    else:
        return None

    set_rollback()
    return response
