#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
词典获取器
依次尝试：本地缓存 -> 并行竞速所有词典源 -> 内置基础词典
获取过程永远不会失败，只会降级
"""

import time
import queue
import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple

from .dictionary_cache import CacheEntry, DictionaryCache
from .dictionary_config import config
from .errors import DictionaryError, FetchTimeoutError
from .source_fetcher import SourceFetcher
from .translation_dictionary import TranslationDictionary

logger = logging.getLogger("SmartTranslator.DictionaryAcquirer")


class DictionaryOrigin(str, Enum):
    """词典来源"""

    NETWORK = "network"
    CACHE = "cache"
    BUILTIN = "builtin"


@dataclass(frozen=True)
class AcquisitionResult:
    """词典获取结果"""

    mapping: TranslationDictionary
    origin: DictionaryOrigin
    source_url: Optional[str] = None  # 仅当来自网络时有值

    @property
    def from_network(self) -> bool:
        return self.origin is DictionaryOrigin.NETWORK


class DictionaryAcquirer:
    """词典获取器

    所有词典源同时发起请求，每个请求有独立的超时时间，
    第一个成功返回非空词典的源胜出；同一轮中同时完成的，按配置顺序取靠前的源。
    胜出结果只写入一次缓存，之后完成的请求结果直接丢弃。
    """

    def __init__(
        self,
        sources: Iterable[str],
        fetcher: Optional[SourceFetcher] = None,
        cache: Optional[DictionaryCache] = None,
        fallback: Optional[Dict[str, str]] = None,
        timeout_ms: int = config.source_timeout_ms,
    ):
        """初始化词典获取器

        Args:
            sources: 词典源地址列表（有序）
            fetcher: 词典源下载器，默认使用HTTP下载
            cache: 词典缓存，None表示不使用缓存
            fallback: 内置兜底词典，默认使用 DictionaryConfig.builtin_dictionary
            timeout_ms: 单个词典源的超时时间（毫秒）
        """
        if timeout_ms <= 0:
            raise ValueError("超时时间必须大于0")

        self.sources = list(sources)
        self.timeout_ms = timeout_ms
        self._fetcher = fetcher or SourceFetcher()
        self._cache = cache
        self._fallback = TranslationDictionary(
            config.builtin_dictionary if fallback is None else fallback
        )

    def acquire(self) -> AcquisitionResult:
        """获取当前会话使用的词典

        Returns:
            获取结果，包含词典和来源
        """
        entry = self._read_cache()
        if entry is not None:
            logger.info(f"使用缓存词典，共 {len(entry.mapping)} 个词条")
            return AcquisitionResult(mapping=entry.mapping, origin=DictionaryOrigin.CACHE)

        winner = self._race_sources()
        if winner is not None:
            url, mapping = winner
            self._write_cache(mapping)
            return AcquisitionResult(
                mapping=mapping, origin=DictionaryOrigin.NETWORK, source_url=url
            )

        logger.warning(
            f"所有词典源均失败，使用内置基础词典 v{config.builtin_dictionary_version}"
            f"（{len(self._fallback)} 个词条）"
        )
        return AcquisitionResult(mapping=self._fallback, origin=DictionaryOrigin.BUILTIN)

    def _read_cache(self) -> Optional[CacheEntry]:
        if self._cache is None:
            return None
        try:
            return self._cache.read()
        except Exception as e:
            logger.warning(f"读取词典缓存异常，按未命中处理: {e!r}")
            return None

    def _write_cache(self, mapping: TranslationDictionary) -> None:
        if self._cache is None:
            return
        try:
            self._cache.write(mapping)
        except Exception as e:
            logger.warning(f"写入词典缓存异常: {e!r}")

    def _race_sources(self) -> Optional[Tuple[str, TranslationDictionary]]:
        """竞速所有词典源

        每个源在独立的守护线程中请求，结果通过队列汇总；
        胜出后不再等待其余请求，它们也不会阻止进程退出

        Returns:
            (胜出的源地址, 词典)，全部失败时返回None
        """
        if not self.sources:
            logger.warning("未配置任何词典源")
            return None

        timeout = self.timeout_ms / 1000.0
        start_time = time.time()
        logger.info(f"启动{len(self.sources)}个词典源并行加载...")

        results: "queue.Queue[Tuple[int, Any]]" = queue.Queue()
        deadlines: Dict[int, float] = {}

        for index, url in enumerate(self.sources):
            thread = threading.Thread(
                target=self._run_attempt,
                args=(index, url, results),
                name=f"dict-source-{index}",
                daemon=True,
            )
            deadlines[index] = time.monotonic() + timeout
            thread.start()

        pending = set(deadlines)
        while pending:
            now = time.monotonic()
            expired = sorted(index for index in pending if deadlines[index] <= now)
            for index in expired:
                logger.warning(f"词典源 {index} 加载超时: {self.sources[index]}")
            pending.difference_update(expired)
            if not pending:
                break

            wait_for = min(deadlines[index] for index in pending) - now
            try:
                finished = [results.get(timeout=wait_for)]
            except queue.Empty:
                continue

            # 同一时刻已经完成的请求一起处理
            while True:
                try:
                    finished.append(results.get_nowait())
                except queue.Empty:
                    break

            for index, outcome in sorted(finished, key=lambda item: item[0]):
                if index not in pending:
                    # 已判定超时的请求，迟到的结果直接丢弃
                    continue
                pending.discard(index)

                mapping = self._settle(index, outcome)
                if mapping is not None:
                    elapsed = time.time() - start_time
                    logger.info(
                        f"词典源 {index} 胜出: {self.sources[index]} | "
                        f"{len(mapping)} 个词条 | 耗时: {elapsed:.2f}秒"
                    )
                    return self.sources[index], mapping

        return None

    def _run_attempt(self, index: int, url: str, results: "queue.Queue[Tuple[int, Any]]") -> None:
        """在工作线程中请求单个词典源，成功或失败都放入结果队列"""
        try:
            outcome = self._fetcher.fetch(url, self.timeout_ms)
        except Exception as e:
            outcome = e
        results.put((index, outcome))

    def _settle(self, index: int, outcome: Any) -> Optional[TranslationDictionary]:
        """检查单个请求的结果，失败只记录日志"""
        url = self.sources[index]
        if isinstance(outcome, FetchTimeoutError):
            logger.warning(f"词典源 {index} 加载超时: {outcome}")
            return None
        if isinstance(outcome, DictionaryError):
            logger.warning(f"词典源 {index} 加载失败: {url} | {type(outcome).__name__}: {outcome}")
            return None
        if isinstance(outcome, Exception):
            logger.warning(f"词典源 {index} 出现意外错误: {url} | {outcome!r}")
            return None

        try:
            mapping = (
                outcome
                if isinstance(outcome, TranslationDictionary)
                else TranslationDictionary(outcome)
            )
        except (AttributeError, TypeError, ValueError) as e:
            logger.warning(f"词典源 {index} 返回的词条无效: {url} | {e}")
            return None

        if len(mapping) == 0:
            logger.warning(f"词典源 {index} 返回空词典: {url}")
            return None

        return mapping
