"""
翻译组件工厂模块
根据配置统一创建词典缓存、词典获取器和翻译引擎
"""

from typing import Optional

import config
from common.dictionary import (
    AcquisitionResult,
    DictionaryAcquirer,
    DictionaryCache,
    DictionaryOrigin,
    FileStorage,
    SourceFetcher,
)
from common.dictionary.interfaces import IDictionaryStorage, ITransport
from common.logger import info
from common.security import URLValidator
from translate_text import SubstitutionEngine


class TranslatorFactory:
    """翻译组件工厂类 - 统一管理组件的创建"""

    @staticmethod
    def create_cache(
        use_cache: bool = True, storage: Optional[IDictionaryStorage] = None
    ) -> Optional[DictionaryCache]:
        """创建词典缓存

        Args:
            use_cache: 是否启用缓存
            storage: 存储实现，默认使用缓存目录下的文件存储

        Returns:
            词典缓存实例，如果禁用则返回None
        """
        if not use_cache:
            return None
        return DictionaryCache(
            storage if storage is not None else FileStorage(config.CACHE_DIR),
            key=config.DICTIONARY_CACHE_KEY,
            ttl_ms=config.DICTIONARY_CACHE_TTL_MS,
        )

    @staticmethod
    def create_acquirer(
        use_cache: bool = True,
        timeout_ms: Optional[int] = None,
        offline: bool = False,
        storage: Optional[IDictionaryStorage] = None,
        transport: Optional[ITransport] = None,
    ) -> DictionaryAcquirer:
        """创建词典获取器

        Args:
            use_cache: 是否启用词典缓存
            timeout_ms: 单个词典源超时（毫秒），默认取配置
            offline: 离线模式，不请求任何词典源
            storage: 缓存存储实现
            transport: 网络传输实现

        Returns:
            词典获取器实例
        """
        return DictionaryAcquirer(
            sources=[] if offline else URLValidator.filter_valid_urls(config.DICTIONARY_SOURCES),
            fetcher=SourceFetcher(transport),
            cache=TranslatorFactory.create_cache(use_cache, storage),
            timeout_ms=timeout_ms or config.SOURCE_TIMEOUT_MS,
        )

    @staticmethod
    def create_engine(result: AcquisitionResult, is_online: bool = True) -> SubstitutionEngine:
        """基于获取到的词典创建翻译引擎"""
        return SubstitutionEngine(
            result.mapping,
            is_online=is_online,
            max_cache_size=config.TRANSLATION_CACHE_SIZE,
        )

    @staticmethod
    def describe_result(result: AcquisitionResult) -> str:
        """生成词典状态描述（用于状态显示）"""
        count = len(result.mapping)
        if result.from_network:
            return f"✅ 词典加载完成，已加载 {count} 个词条"
        if result.origin is DictionaryOrigin.CACHE:
            return f"✅ 使用缓存词典，已加载 {count} 个词条"
        return f"⚠️ 网络加载失败，使用内置基础词典（{count} 个词条）"

    @staticmethod
    def print_initialization_status(result: AcquisitionResult) -> None:
        """输出词典初始化状态"""
        info("词典", TranslatorFactory.describe_result(result))
        if result.source_url:
            info("词典", f"词典源: {result.source_url}")
