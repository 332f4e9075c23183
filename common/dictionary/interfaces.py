#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
词典协作者接口定义
存储和网络都通过接口注入，便于在测试中替换为假实现
"""

from abc import ABC, abstractmethod
from typing import Optional


class IDictionaryStorage(ABC):
    """键值存储接口

    词典缓存只依赖这两个方法
    """

    @abstractmethod
    def read(self, key: str) -> Optional[bytes]:
        """读取键对应的数据

        Args:
            key: 存储键

        Returns:
            存储的字节内容，不存在时返回None
        """
        pass

    @abstractmethod
    def write(self, key: str, data: bytes) -> None:
        """写入数据（覆盖已有内容）

        Args:
            key: 存储键
            data: 字节内容
        """
        pass


class ITransport(ABC):
    """网络传输接口"""

    @abstractmethod
    def fetch(self, url: str, timeout: float) -> bytes:
        """下载URL内容

        Args:
            url: 词典源地址
            timeout: 超时时间（秒）

        Returns:
            响应体字节

        Raises:
            NetworkError: 传输失败或状态码非成功
            FetchTimeoutError: 超时
        """
        pass
