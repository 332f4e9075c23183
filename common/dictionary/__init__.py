#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
字典模块
提供词典获取（缓存、多源竞速、内置兜底）和只读翻译词典
"""

from .interfaces import IDictionaryStorage, ITransport
from .errors import (
    DictionaryError,
    NetworkError,
    FetchTimeoutError,
    ParseError,
    CacheReadError,
)
from .translation_dictionary import TranslationDictionary
from .storage import MemoryStorage, FileStorage
from .dictionary_cache import CacheEntry, DictionaryCache, current_time_ms
from .source_fetcher import HttpTransport, SourceFetcher, parse_dictionary
from .dictionary_acquirer import AcquisitionResult, DictionaryAcquirer, DictionaryOrigin
from .dictionary_config import DictionaryConfig, config

__all__ = [
    'IDictionaryStorage',
    'ITransport',
    'DictionaryError',
    'NetworkError',
    'FetchTimeoutError',
    'ParseError',
    'CacheReadError',
    'TranslationDictionary',
    'MemoryStorage',
    'FileStorage',
    'CacheEntry',
    'DictionaryCache',
    'current_time_ms',
    'HttpTransport',
    'SourceFetcher',
    'parse_dictionary',
    'AcquisitionResult',
    'DictionaryAcquirer',
    'DictionaryOrigin',
    'DictionaryConfig',
    'config',
]
