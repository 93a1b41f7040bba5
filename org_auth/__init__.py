"""
Org Auth Library

面向多租户资源 API 的极简身份认证与访问控制库。

核心设计原则：
- 无状态令牌: 签名 + 过期时间即有效性，不保存会话
- 扁平成员关系: 组织成员即拥有读写权限，不区分角色
- 默认拒绝: 任何未命中允许规则的请求一律拒绝
- 存储负责唯一性与原子性，核心逻辑不持有可变共享状态
"""

__version__ = "1.0.0"
__author__ = "Org Auth Team"
__description__ = "极简组织成员认证权限库"
