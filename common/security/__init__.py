"""
安全验证模块
包含所有安全验证器和异常类
"""

from .validators import (
    # 异常类
    SecurityError,
    URLValidationError,

    # 验证器类
    InputValidator,
    URLValidator,
)

__all__ = [
    # 异常
    'SecurityError',
    'URLValidationError',

    # 验证器
    'InputValidator',
    'URLValidator',
]
