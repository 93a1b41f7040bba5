"""
Org Auth 数据模型
"""

from .user import User
from .organisation import Organisation
from .audit import AuditLog

__all__ = [
    'User',
    'Organisation',
    'AuditLog'
]
