#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
词典缓存
在固定键下保存一份带时间戳的词典，超过有效期后在下次读取时视为未命中
"""

import json
import time
import logging
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from .dictionary_config import config
from .errors import CacheReadError
from .interfaces import IDictionaryStorage
from .translation_dictionary import TranslationDictionary

logger = logging.getLogger("SmartTranslator.DictionaryCache")


def current_time_ms() -> int:
    """当前时间（Unix毫秒）"""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class CacheEntry:
    """缓存条目"""

    mapping: TranslationDictionary
    stored_at: int  # 写入时间（Unix毫秒）

    def is_valid(self, now_ms: int, ttl_ms: int) -> bool:
        return now_ms - self.stored_at < ttl_ms


class DictionaryCache:
    """词典缓存

    存储格式为一个JSON文档: {"stored_at": <毫秒>, "mapping": {...}}
    读取失败、内容损坏、已过期都按未命中处理，不向调用方抛出异常
    """

    def __init__(
        self,
        storage: IDictionaryStorage,
        key: str = config.cache_key,
        ttl_ms: int = config.cache_ttl_ms,
        clock: Callable[[], int] = current_time_ms,
    ):
        """初始化词典缓存

        Args:
            storage: 键值存储
            key: 缓存键
            ttl_ms: 有效期（毫秒）
            clock: 返回当前Unix毫秒的函数，测试时可替换
        """
        if ttl_ms <= 0:
            raise ValueError("缓存有效期必须大于0")

        self._storage = storage
        self.key = key
        self.ttl_ms = ttl_ms
        self._clock = clock

    def read(self) -> Optional[CacheEntry]:
        """读取有效的缓存条目

        Returns:
            未过期的缓存条目；不存在、损坏或过期时返回None
        """
        try:
            entry = self._load()
        except CacheReadError as e:
            logger.warning(f"读取词典缓存失败，按未命中处理: {e}")
            return None

        if entry is None:
            logger.debug("词典缓存不存在")
            return None

        now = self._clock()
        if not entry.is_valid(now, self.ttl_ms):
            logger.info(f"词典缓存已过期（缓存于 {(now - entry.stored_at) / 1000:.0f} 秒前）")
            return None

        return entry

    def write(self, mapping: Mapping[str, str]) -> bool:
        """写入词典（覆盖已有缓存）

        Args:
            mapping: 词条映射

        Returns:
            是否写入成功
        """
        document = {"stored_at": self._clock(), "mapping": dict(mapping)}
        data = json.dumps(document, ensure_ascii=False).encode("utf-8")

        try:
            self._storage.write(self.key, data)
        except (OSError, ValueError) as e:
            logger.warning(f"写入词典缓存失败: {e}")
            return False

        logger.info(f"词典已缓存，共 {len(document['mapping'])} 个词条")
        return True

    def _load(self) -> Optional[CacheEntry]:
        """从存储加载缓存条目（不检查有效期）

        Raises:
            CacheReadError: 存储不可读或内容损坏
        """
        # 存储实现可能抛出任意异常或返回非字节内容，统一按不可读处理
        try:
            raw = self._storage.read(self.key)
            if raw is None:
                return None
            document = json.loads(bytes(raw).decode("utf-8"))
        except Exception as e:
            raise CacheReadError(f"缓存不可读或无法解析: {e!r}") from e

        if not isinstance(document, dict):
            raise CacheReadError("缓存内容格式错误")

        stored_at = document.get("stored_at")
        mapping = document.get("mapping")
        if isinstance(stored_at, bool) or not isinstance(stored_at, int):
            raise CacheReadError("缓存时间戳无效")
        if not isinstance(mapping, dict) or not mapping:
            raise CacheReadError("缓存词典无效")

        try:
            dictionary = TranslationDictionary(mapping)
        except (TypeError, ValueError) as e:
            raise CacheReadError(f"缓存词条无效: {e}") from e

        return CacheEntry(mapping=dictionary, stored_at=stored_at)
