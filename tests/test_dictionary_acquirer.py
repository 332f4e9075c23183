#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
词典获取器单元测试
覆盖缓存命中、多源竞速、超时和内置词典兜底
"""

import sys
import time
import queue
import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from common.dictionary import (
    DictionaryAcquirer,
    DictionaryCache,
    DictionaryOrigin,
    FetchTimeoutError,
    NetworkError,
    SourceFetcher,
    config,
)

from conftest import FailingStorage, FakeTransport, dictionary_payload

SOURCES = [
    "https://a.example.com/dict.json",
    "https://b.example.com/dict.json",
    "https://c.example.com/dict.json",
]


def make_acquirer(responses, storage=None, clock=None, timeout_ms=1000, sources=None):
    transport = FakeTransport(responses)
    cache = None
    if storage is not None:
        cache = DictionaryCache(storage, clock=clock) if clock else DictionaryCache(storage)
    acquirer = DictionaryAcquirer(
        SOURCES if sources is None else sources,
        fetcher=SourceFetcher(transport),
        cache=cache,
        timeout_ms=timeout_ms,
    )
    return acquirer, transport


@pytest.mark.unit
class TestNetworkAcquisition:
    """网络竞速测试"""

    def test_first_successful_source_wins(self, counting_storage):
        """测试失败的源被跳过，成功的源胜出且只写一次缓存"""
        acquirer, _ = make_acquirer(
            {
                SOURCES[0]: FetchTimeoutError("加载超时", source=SOURCES[0]),
                SOURCES[1]: NetworkError("HTTP状态异常: 500", source=SOURCES[1], status_code=500),
                SOURCES[2]: dictionary_payload({"hello": "你好"}),
            },
            storage=counting_storage,
        )

        result = acquirer.acquire()

        assert result.mapping == {"hello": "你好"}
        assert result.origin is DictionaryOrigin.NETWORK
        assert result.from_network is True
        assert result.source_url == SOURCES[2]
        assert counting_storage.writes == 1

    def test_all_sources_are_requested(self):
        """测试所有源同时发起请求"""
        acquirer, transport = make_acquirer({url: b"bad" for url in SOURCES})
        acquirer.acquire()
        assert sorted(transport.calls) == sorted(SOURCES)

    def test_fast_source_wins_over_slow_one(self, release_event, counting_storage):
        """测试先返回的源胜出，不等待慢的源，且慢源完成后不再写缓存"""

        def blocked():
            release_event.wait(5)
            return dictionary_payload({"slow": "慢"})

        acquirer, _ = make_acquirer(
            {SOURCES[0]: blocked, SOURCES[1]: dictionary_payload({"fast": "快"})},
            storage=counting_storage,
            timeout_ms=5000,
            sources=SOURCES[:2],
        )

        started = time.monotonic()
        result = acquirer.acquire()

        assert time.monotonic() - started < 2
        assert result.mapping == {"fast": "快"}
        assert result.source_url == SOURCES[1]

        release_event.set()
        time.sleep(0.1)
        assert counting_storage.writes == 1

    def test_tie_goes_to_lowest_index(self):
        """测试同一轮内都已完成时取配置中靠前的源"""

        def slightly_slower():
            time.sleep(0.02)
            return dictionary_payload({"zero": "零"})

        class BatchingQueue(queue.Queue):
            """阻塞读取时先等两个结果都到达"""

            def get(self, block=True, timeout=None):
                if block:
                    deadline = time.monotonic() + 2
                    while self.qsize() < 2 and time.monotonic() < deadline:
                        time.sleep(0.005)
                return super().get(block, timeout)

        acquirer, _ = make_acquirer(
            {SOURCES[0]: slightly_slower, SOURCES[1]: dictionary_payload({"one": "一"})},
            sources=SOURCES[:2],
        )

        with patch("common.dictionary.dictionary_acquirer.queue.Queue", BatchingQueue):
            result = acquirer.acquire()

        assert result.source_url == SOURCES[0]
        assert result.mapping == {"zero": "零"}

    def test_blocking_source_times_out(self, release_event):
        """测试超过时限的源被放弃，最终使用内置词典"""

        def blocked():
            release_event.wait(5)
            return dictionary_payload({"late": "迟"})

        acquirer, _ = make_acquirer({SOURCES[0]: blocked}, timeout_ms=100, sources=SOURCES[:1])

        started = time.monotonic()
        result = acquirer.acquire()

        assert time.monotonic() - started < 2
        assert result.origin is DictionaryOrigin.BUILTIN

    def test_plain_mapping_from_fetcher(self):
        """测试下载器返回普通dict时也能使用"""
        fetcher = Mock(spec=SourceFetcher)
        fetcher.fetch.return_value = {"hello": "你好"}
        acquirer = DictionaryAcquirer(SOURCES[:1], fetcher=fetcher)

        result = acquirer.acquire()

        assert result.mapping == {"hello": "你好"}
        fetcher.fetch.assert_called_once_with(SOURCES[0], config.source_timeout_ms)

    def test_empty_mapping_is_failure(self):
        """测试返回空词典的源视为失败"""
        fetcher = Mock(spec=SourceFetcher)
        fetcher.fetch.return_value = {}
        result = DictionaryAcquirer(SOURCES[:1], fetcher=fetcher).acquire()

        assert result.origin is DictionaryOrigin.BUILTIN

    def test_unexpected_error_is_contained(self):
        """测试意外异常不会中断获取流程"""
        fetcher = Mock(spec=SourceFetcher)
        fetcher.fetch.side_effect = RuntimeError("boom")
        result = DictionaryAcquirer(SOURCES, fetcher=fetcher).acquire()

        assert result.origin is DictionaryOrigin.BUILTIN


@pytest.mark.unit
class TestCacheAcquisition:
    """缓存相关测试"""

    def test_valid_cache_skips_network(self, counting_storage, fake_clock):
        """测试有效缓存命中时不发起网络请求"""
        DictionaryCache(counting_storage, clock=fake_clock).write({"cached": "缓存"})
        fake_clock.advance(60 * 1000)

        acquirer, transport = make_acquirer(
            {url: dictionary_payload({"hello": "你好"}) for url in SOURCES},
            storage=counting_storage,
            clock=fake_clock,
        )
        result = acquirer.acquire()

        assert result.origin is DictionaryOrigin.CACHE
        assert result.mapping == {"cached": "缓存"}
        assert result.source_url is None
        assert transport.calls == []
        assert counting_storage.writes == 1

    def test_expired_cache_is_refreshed(self, counting_storage, fake_clock):
        """测试缓存过期后重新从网络获取并覆盖缓存"""
        DictionaryCache(counting_storage, clock=fake_clock).write({"cached": "缓存"})
        fake_clock.advance(config.cache_ttl_ms)

        acquirer, transport = make_acquirer(
            {url: dictionary_payload({"hello": "你好"}) for url in SOURCES},
            storage=counting_storage,
            clock=fake_clock,
        )
        result = acquirer.acquire()

        assert result.origin is DictionaryOrigin.NETWORK
        assert transport.calls
        assert counting_storage.writes == 2

        entry = DictionaryCache(counting_storage, clock=fake_clock).read()
        assert entry.mapping == {"hello": "你好"}

    def test_cache_failures_do_not_block_network(self):
        """测试缓存读写失败不影响网络结果"""
        acquirer, _ = make_acquirer(
            {url: dictionary_payload({"hello": "你好"}) for url in SOURCES},
            storage=FailingStorage(),
        )
        result = acquirer.acquire()

        assert result.origin is DictionaryOrigin.NETWORK
        assert result.mapping == {"hello": "你好"}

    def test_cache_exception_is_contained(self):
        """测试缓存对象本身抛出异常时按未命中处理"""
        cache = Mock(spec=DictionaryCache)
        cache.read.side_effect = RuntimeError("broken")
        cache.write.side_effect = RuntimeError("broken")
        acquirer = DictionaryAcquirer(
            SOURCES[:1],
            fetcher=SourceFetcher(FakeTransport({SOURCES[0]: dictionary_payload({"a": "甲"})})),
            cache=cache,
        )

        assert acquirer.acquire().origin is DictionaryOrigin.NETWORK

    def test_builtin_fallback_is_not_cached(self, counting_storage):
        """测试内置词典不写入缓存"""
        acquirer, _ = make_acquirer({url: b"bad" for url in SOURCES}, storage=counting_storage)
        result = acquirer.acquire()

        assert result.origin is DictionaryOrigin.BUILTIN
        assert counting_storage.writes == 0


@pytest.mark.unit
class TestBuiltinFallback:
    """内置词典兜底测试"""

    def test_all_sources_fail(self):
        """测试所有源失败时使用内置词典"""
        acquirer, _ = make_acquirer({
            SOURCES[0]: NetworkError("HTTP状态异常: 404", source=SOURCES[0], status_code=404),
            SOURCES[1]: b"<html></html>",
            SOURCES[2]: TimeoutError("timed out"),
        })
        result = acquirer.acquire()

        assert result.origin is DictionaryOrigin.BUILTIN
        assert result.from_network is False
        assert result.source_url is None
        assert result.mapping == config.builtin_dictionary

    def test_no_sources(self):
        """测试没有配置词典源时直接使用内置词典"""
        acquirer, transport = make_acquirer({}, sources=[])
        result = acquirer.acquire()

        assert result.origin is DictionaryOrigin.BUILTIN
        assert transport.calls == []

    def test_custom_fallback(self):
        """测试自定义兜底词典"""
        acquirer = DictionaryAcquirer([], fallback={"hi": "嗨"})
        assert acquirer.acquire().mapping == {"hi": "嗨"}

    def test_builtin_dictionary_contents(self):
        """测试内置词典包含常用词条"""
        builtin = DictionaryAcquirer([]).acquire().mapping
        assert builtin.lookup("identify") == "识别"
        assert builtin.lookup("work") == "工作"
        assert builtin.lookup("city") == "城市"

    def test_invalid_timeout(self):
        """测试无效的超时时间"""
        with pytest.raises(ValueError):
            DictionaryAcquirer(SOURCES, timeout_ms=0)


SLOW_SOURCE_SCRIPT = """
import sys
import time

sys.path.insert(0, {root!r})

from common.dictionary import DictionaryAcquirer, SourceFetcher
from common.dictionary.interfaces import ITransport


class SlowFirstTransport(ITransport):
    def fetch(self, url, timeout):
        if url.endswith("/slow"):
            time.sleep(8)
        return b'{{"hello": "hi"}}'


result = DictionaryAcquirer(
    ["http://mirror.test/slow", "http://mirror.test/fast"],
    fetcher=SourceFetcher(SlowFirstTransport()),
    timeout_ms=20000,
).acquire()
print(result.source_url)
"""


@pytest.mark.unit
class TestProcessExit:
    """未完成的请求不阻止进程退出"""

    def test_process_exits_after_winner(self):
        """测试胜出后进程立即退出，不等待慢的词典源"""
        root = str(Path(__file__).parent.parent)

        started = time.monotonic()
        completed = subprocess.run(
            [sys.executable, "-c", SLOW_SOURCE_SCRIPT.format(root=root)],
            capture_output=True,
            text=True,
            timeout=30,
            cwd=root,
        )
        elapsed = time.monotonic() - started

        assert completed.returncode == 0, completed.stderr
        assert completed.stdout.strip() == "http://mirror.test/fast"
        assert elapsed < 5
