"""
密码哈希

基于 Django 已配置的 PASSWORD_HASHERS：
- 每次哈希生成新盐并嵌入摘要字符串
- 校验使用 constant_time_compare
"""

from django.contrib.auth.hashers import check_password, make_password


class PasswordHasher:
    """密码单向哈希与校验"""

    def hash(self, plaintext: str) -> str:
        """
        生成加盐摘要

        Args:
            plaintext: 明文密码

        Returns:
            str: 形如 "<algorithm>$...$<salt>$<hash>" 的摘要
        """
        return make_password(plaintext)

    def verify(self, plaintext: str, digest: str) -> bool:
        """
        校验明文是否与摘要匹配

        摘要格式错误时返回 False，不抛异常。
        """
        if not isinstance(plaintext, str) or not isinstance(digest, str) or not digest:
            return False
        try:
            return check_password(plaintext, digest)
        except (ValueError, TypeError):
            # 已知算法前缀但字段残缺，例如 "pbkdf2_sha256$abc"
            return False

    def burn(self, plaintext) -> None:
        """执行一次哈希并丢弃，使"用户不存在"与"密码错误"耗时接近"""
        make_password(plaintext if isinstance(plaintext, str) else '')

