#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
词典获取异常定义
所有单个词典源的失败都用这些异常表示，由 DictionaryAcquirer 统一收敛
"""

from typing import Optional


class DictionaryError(Exception):
    """词典相关异常基类"""

    def __init__(self, message: str, source: str = ""):
        super().__init__(message)
        self.source = source


class NetworkError(DictionaryError):
    """传输失败或HTTP状态码非成功"""

    def __init__(self, message: str, source: str = "", status_code: Optional[int] = None):
        super().__init__(message, source)
        self.status_code = status_code


class FetchTimeoutError(DictionaryError, TimeoutError):
    """在超时时间内没有收到响应"""

    pass


class ParseError(DictionaryError):
    """响应内容不是合法的词条映射"""

    pass


class CacheReadError(DictionaryError):
    """缓存不可读或已损坏（只在内部使用，对外降级为缓存未命中）"""

    pass
