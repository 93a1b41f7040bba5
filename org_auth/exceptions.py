"""
Org Auth 自定义异常
"""

from http import HTTPStatus
from typing import Dict, List, Optional

from .constants import ErrorCode, HttpStatus


class OrgAuthError(Exception):
    """Org Auth 基础异常"""

    status_code = HttpStatus.BAD_REQUEST
    status_text = 'Bad request'
    default_message = 'Client error'

    def __init__(self, message: Optional[str] = None, error_code: Optional[str] = None):
        self.message = message or self.default_message
        self.error_code = error_code
        super().__init__(self.message)


class ValidationError(OrgAuthError):
    """验证错误，携带逐字段信息"""

    status_code = HttpStatus.UNPROCESSABLE_ENTITY
    status_text = 'Unprocessable entity'
    default_message = 'Validation failed'

    def __init__(self, errors: List[Dict[str, str]], message: Optional[str] = None):
        self.errors = errors
        super().__init__(message, ErrorCode.VALIDATION_ERROR)


class AuthenticationFailed(OrgAuthError):
    """凭据错误。用户不存在与密码错误对调用方不可区分"""

    status_code = HttpStatus.UNAUTHORIZED
    default_message = 'Authentication failed'

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, ErrorCode.INVALID_CREDENTIALS)


class TokenVerificationError(OrgAuthError):
    """Token验证错误基类"""

    status_code = HttpStatus.UNAUTHORIZED
    status_text = 'Unauthorized'
    default_message = 'Invalid token'


class MalformedTokenError(TokenVerificationError):
    """Token无法解析，或Authorization头缺失/格式错误"""

    default_message = 'Malformed token'

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, ErrorCode.TOKEN_MALFORMED)


class InvalidSignatureError(TokenVerificationError):
    """Token签名不匹配"""

    default_message = 'Invalid token signature'

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, ErrorCode.TOKEN_INVALID)


class TokenExpiredError(TokenVerificationError):
    """Token过期错误"""

    default_message = 'Token has expired'

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, ErrorCode.TOKEN_EXPIRED)


class AccessDenied(OrgAuthError):
    """已认证但无权限"""

    status_code = HttpStatus.FORBIDDEN
    status_text = 'Forbidden'
    default_message = 'Access denied'

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, ErrorCode.PERMISSION_DENIED)


class NotFoundError(OrgAuthError):
    """资源不存在错误基类"""

    status_code = HttpStatus.NOT_FOUND
    status_text = 'Not found'
    default_message = 'Resource not found'


class UserNotFoundError(NotFoundError):
    """用户不存在错误"""

    default_message = 'User not found'

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, ErrorCode.USER_NOT_FOUND)


class OrganisationNotFoundError(NotFoundError):
    """组织不存在错误"""

    default_message = 'Organisation not found'

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, ErrorCode.ORGANISATION_NOT_FOUND)


class RequestError(OrgAuthError):
    """请求层错误，例如不支持的媒体类型或请求方法"""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        self.status_text = HTTPStatus(status_code).phrase.capitalize()
        super().__init__(message, ErrorCode.REQUEST_ERROR)


class StoreError(OrgAuthError):
    """存储层错误"""

    def __init__(self, message: Optional[str] = None, error_code: Optional[str] = None):
        super().__init__(message, error_code or ErrorCode.STORE_ERROR)


class EmailAlreadyExistsError(StoreError):
    """邮箱已存在错误"""

    default_message = 'Email already exists'

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, ErrorCode.EMAIL_ALREADY_EXISTS)


class RegistrationFailed(StoreError):
    """注册失败，调用方视为没有任何状态被提交"""

    default_message = 'Registration unsuccessful'

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, ErrorCode.REGISTRATION_FAILED)
