"""
安全验证器模块
校验词典源地址和用户输入文本
"""

import logging
from typing import Iterable, List, Optional
from urllib.parse import urlparse

# 配置日志
logger = logging.getLogger(__name__)


# ==================== 异常类定义 ====================


class SecurityError(Exception):
    """安全相关异常"""

    pass


class URLValidationError(SecurityError):
    """URL校验失败"""

    pass


# ==================== 输入验证器 ====================


class InputValidator:
    """输入验证器 - 验证用户输入"""

    @staticmethod
    def validate_text_input(
        text: str, max_length: int = 10000, min_length: int = 1, context: str = "输入"
    ) -> str:
        """
        验证文本输入

        Args:
            text: 输入文本
            max_length: 最大长度
            min_length: 最小长度
            context: 上下文信息

        Returns:
            去除首尾空白后的文本
        """
        if not isinstance(text, str):
            raise ValueError(f"{context}: 类型错误，期望str")

        text = text.strip()

        if len(text) < min_length:
            raise ValueError(f"{context}: 长度不足（最小{min_length}）")

        if len(text) > max_length:
            raise ValueError(f"{context}: 长度超限（最大{max_length}）")

        return text

    @staticmethod
    def validate_url_length(url: str, max_length: int = 2000) -> str:
        """验证URL长度"""
        if len(url) > max_length:
            raise ValueError(f"URL过长: {len(url)} > {max_length}")
        return url


# ==================== URL验证器 ====================


class URLValidator:
    """URL验证器 - 词典源只允许http/https地址"""

    ALLOWED_SCHEMES = ("http", "https")

    @staticmethod
    def validate_url(
        url: str,
        allowed_schemes: Iterable[str] = ALLOWED_SCHEMES,
        blocked_domains: Optional[List[str]] = None,
    ) -> str:
        """
        验证URL

        Args:
            url: 待验证的URL
            allowed_schemes: 允许的协议
            blocked_domains: 禁止的域名（包含子域名）

        Returns:
            验证后的URL

        Raises:
            URLValidationError: URL无效
        """
        if not isinstance(url, str) or not url.strip():
            raise URLValidationError("URL不能为空")

        url = url.strip()
        try:
            InputValidator.validate_url_length(url)
        except ValueError as e:
            raise URLValidationError(str(e)) from e

        parsed = urlparse(url)
        if parsed.scheme.lower() not in tuple(allowed_schemes):
            raise URLValidationError(f"不支持的URL协议: {url}")

        host = (parsed.hostname or "").lower()
        if not host:
            raise URLValidationError(f"URL缺少主机名: {url}")

        for domain in blocked_domains or []:
            domain = domain.lower()
            if host == domain or host.endswith("." + domain):
                raise URLValidationError(f"域名已被禁止: {host}")

        return url

    @staticmethod
    def filter_valid_urls(urls: Iterable[str]) -> List[str]:
        """过滤掉无效URL，保持原有顺序"""
        valid = []
        for url in urls:
            try:
                valid.append(URLValidator.validate_url(url))
            except URLValidationError as e:
                logger.warning(f"忽略无效的词典源: {e}")
        return valid
