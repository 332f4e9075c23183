#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
词典源下载器
对单个词典源做一次有时限的下载，并解析为词条映射
"""

import json
import time
import logging
from typing import Dict, Optional

import requests

from .errors import DictionaryError, FetchTimeoutError, NetworkError, ParseError
from .interfaces import ITransport
from .translation_dictionary import TranslationDictionary

logger = logging.getLogger("SmartTranslator.SourceFetcher")

DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Accept": "application/json,text/plain;q=0.9,*/*;q=0.8",
    "Accept-Language": "zh-CN,zh;q=0.9,en;q=0.8",
}


class HttpTransport(ITransport):
    """基于requests的HTTP传输"""

    def __init__(self, headers: Optional[Dict[str, str]] = None):
        self.headers = dict(DEFAULT_HEADERS if headers is None else headers)

    def fetch(self, url: str, timeout: float) -> bytes:
        try:
            response = requests.get(url, headers=self.headers, timeout=timeout)
        except requests.Timeout as e:
            raise FetchTimeoutError(f"加载超时: {url}", source=url) from e
        except requests.RequestException as e:
            raise NetworkError(f"请求失败: {e}", source=url) from e

        if not response.ok:
            raise NetworkError(
                f"HTTP状态异常: {response.status_code}",
                source=url,
                status_code=response.status_code,
            )

        return response.content


def parse_dictionary(payload: bytes, source: str = "") -> TranslationDictionary:
    """解析词典源返回的JSON内容

    内容必须是字符串到字符串的JSON对象；译文为空的词条会被丢弃

    Args:
        payload: 响应体字节
        source: 词典源地址，仅用于错误信息

    Returns:
        翻译词典

    Raises:
        ParseError: 内容不是合法的词条映射或没有可用词条
    """
    try:
        document = json.loads(payload.decode("utf-8-sig"))
    except (UnicodeDecodeError, ValueError) as e:
        raise ParseError(f"响应不是合法的JSON: {e}", source=source) from e

    if not isinstance(document, dict):
        raise ParseError(
            f"响应不是词条对象: {type(document).__name__}", source=source
        )

    entries: Dict[str, str] = {}
    for term, translation in document.items():
        if not isinstance(translation, str):
            raise ParseError(f"词条 {term!r} 的译文不是字符串", source=source)
        if term.strip() and translation.strip():
            entries[term] = translation

    if not entries:
        raise ParseError("响应中没有可用词条", source=source)

    return TranslationDictionary(entries)


class SourceFetcher:
    """词典源下载器"""

    def __init__(self, transport: Optional[ITransport] = None):
        """初始化下载器

        Args:
            transport: 网络传输，默认使用HttpTransport
        """
        self._transport = transport or HttpTransport()

    def fetch(self, url: str, timeout_ms: int) -> TranslationDictionary:
        """下载并解析一个词典源

        Args:
            url: 词典源地址
            timeout_ms: 超时时间（毫秒）

        Returns:
            翻译词典

        Raises:
            NetworkError: 传输失败或状态码非成功
            FetchTimeoutError: 超时时间内没有收到响应
            ParseError: 响应不是合法的词条映射
        """
        if timeout_ms <= 0:
            raise ValueError("超时时间必须大于0")

        timeout = timeout_ms / 1000.0
        started = time.monotonic()

        try:
            payload = self._transport.fetch(url, timeout)
        except DictionaryError:
            raise
        except TimeoutError as e:
            raise FetchTimeoutError(f"加载超时: {url}", source=url) from e
        except OSError as e:
            raise NetworkError(f"请求失败: {e}", source=url) from e

        elapsed = time.monotonic() - started
        if elapsed >= timeout:
            raise FetchTimeoutError(
                f"加载超时: {url}（{elapsed:.2f}秒 >= {timeout:.2f}秒）", source=url
            )

        dictionary = parse_dictionary(payload, source=url)
        logger.info(f"词典源加载成功: {url} | {len(dictionary)} 个词条 | 耗时: {elapsed:.2f}秒")
        return dictionary
