#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
pytest配置文件
提供测试fixtures和假的存储/网络/时钟实现
"""

import sys
import json
import threading
from pathlib import Path
from typing import Callable, Dict, List, Union

# 将项目根目录添加到Python路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from common.dictionary import MemoryStorage, TranslationDictionary
from common.dictionary.interfaces import ITransport


class CountingStorage(MemoryStorage):
    """记录读写次数的内存存储"""

    def __init__(self):
        super().__init__()
        self.reads = 0
        self.writes = 0

    def read(self, key):
        self.reads += 1
        return super().read(key)

    def write(self, key, data):
        self.writes += 1
        super().write(key, data)


class FailingStorage(MemoryStorage):
    """读写都失败的存储"""

    def read(self, key):
        raise OSError("磁盘不可读")

    def write(self, key, data):
        raise OSError("磁盘已满")


Response = Union[bytes, Exception, Callable[[], bytes]]


class FakeTransport(ITransport):
    """按URL返回预设结果的假网络

    预设值可以是字节、异常实例或返回字节的函数
    """

    def __init__(self, responses: Dict[str, Response]):
        self.responses = responses
        self.calls: List[str] = []
        self._lock = threading.Lock()

    def fetch(self, url, timeout):
        with self._lock:
            self.calls.append(url)
        response = self.responses[url]
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response()
        return response


class FakeClock:
    """可手动推进的毫秒时钟"""

    def __init__(self, now: int = 1_700_000_000_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


def dictionary_payload(entries: Dict[str, str]) -> bytes:
    """把词条编码为词典源的响应体"""
    return json.dumps(entries, ensure_ascii=False).encode("utf-8")


@pytest.fixture(scope="function")
def counting_storage():
    return CountingStorage()


@pytest.fixture(scope="function")
def fake_clock():
    return FakeClock()


@pytest.fixture(scope="function")
def sample_dictionary():
    """测试用词典"""
    return TranslationDictionary({
        "hello": "你好",
        "world": "世界",
        "look": "看",
        "look for": "寻找",
        "look forward to": "期待",
        "for": "为了",
        "in": "在",
        "in front": "前面",
        "Identify": "识别",
        "new york": "纽约",
        "new": "新的",
        "city": "城市",
    })


@pytest.fixture(scope="function")
def release_event():
    """用于阻塞假网络请求的事件，测试结束时释放避免线程泄漏"""
    event = threading.Event()
    yield event
    event.set()
