"""
Org Auth 常量定义
"""

import enum

# Token 固定有效期，不可配置
ACCESS_TOKEN_LIFETIME = 60 * 60  # 1小时
TOKEN_ALGORITHM = 'HS256'
TOKEN_REQUIRED_CLAIMS = ['user_id', 'iat', 'exp']

# 签名密钥最小长度
JWT_SECRET_KEY_MIN_LENGTH = 32

# 注册时自动创建的默认组织名称
DEFAULT_ORGANISATION_NAME = "{first_name}'s Organisation"

BEARER_PREFIX = 'Bearer'

# 注册必填字段: (请求字段, 错误提示)
REGISTRATION_REQUIRED_FIELDS = [
    ('firstName', 'First name is required'),
    ('lastName', 'Last name is required'),
    ('email', 'Email is required'),
    ('password', 'Password is required'),
]

LOGIN_REQUIRED_FIELDS = [
    ('email', 'Email is required'),
    ('password', 'Password is required'),
]


class Decision(str, enum.Enum):
    """访问控制判定结果"""

    ALLOW = 'allow'
    DENY = 'deny'

    @property
    def allowed(self) -> bool:
        return self is Decision.ALLOW


class Action(str, enum.Enum):
    """组织资源操作类型"""

    READ = 'read'
    WRITE = 'write'


# 审计动作类型
AUDIT_ACTIONS = {
    'USER_REGISTERED': 'user_registered',
    'USER_LOGIN': 'user_login',
    'ORGANISATION_CREATED': 'organisation_created',
    'ORGANISATION_MEMBER_ADDED': 'organisation_member_added',
}


# HTTP 状态码
class HttpStatus:
    OK = 200
    CREATED = 201
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    UNPROCESSABLE_ENTITY = 422


# 错误代码
class ErrorCode:
    # 认证错误
    INVALID_CREDENTIALS = 'invalid_credentials'
    TOKEN_MALFORMED = 'token_malformed'
    TOKEN_INVALID = 'token_invalid'
    TOKEN_EXPIRED = 'token_expired'

    # 权限错误
    PERMISSION_DENIED = 'permission_denied'

    # 资源错误
    USER_NOT_FOUND = 'user_not_found'
    ORGANISATION_NOT_FOUND = 'organisation_not_found'

    # 验证错误
    VALIDATION_ERROR = 'validation_error'
    REQUEST_ERROR = 'request_error'

    # 存储错误
    STORE_ERROR = 'store_error'
    EMAIL_ALREADY_EXISTS = 'email_already_exists'
    REGISTRATION_FAILED = 'registration_failed'
