#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
替换式翻译模块
基于词典的逐词/短语替换翻译，优先匹配多词短语，并记忆已翻译过的文本
"""

import re
import logging
from collections import OrderedDict
from typing import Any, Dict, Iterable, List, Optional

from common.dictionary import TranslationDictionary, config
from common.text import find_phrase, split_sentences, tokenize

# 重组时去掉这些标点前面的空白
_SPACE_BEFORE_PUNCT = re.compile(r"\s+([" + re.escape(config.no_space_before) + r"])")


def reconstruct_sentence(pieces: List[str]) -> str:
    """用单个空格重组词元，并去掉 . , ! ? 前面的空格"""
    return _SPACE_BEFORE_PUNCT.sub(r"\1", " ".join(pieces))


class SubstitutionEngine:
    """替换式翻译引擎

    对同一个词典的翻译是确定性的；唯一的副作用是更新自身的翻译缓存（LRU）。
    is_online 只影响日志，不改变翻译逻辑。
    """

    def __init__(
        self,
        mapping: TranslationDictionary,
        is_online: bool = True,
        max_cache_size: Optional[int] = 1000,
        prepositions: Optional[Iterable[str]] = None,
    ):
        """初始化翻译引擎

        Args:
            mapping: 只读翻译词典
            is_online: 网络是否可用，仅用于状态日志
            max_cache_size: 翻译缓存最大条目数，None表示不限制
            prepositions: 介词列表，默认使用 DictionaryConfig.prepositions
        """
        if max_cache_size is not None and max_cache_size <= 0:
            raise ValueError("翻译缓存大小必须大于0")

        self._mapping = mapping
        self.is_online = is_online
        self._max_cache_size = max_cache_size
        self._cache: "OrderedDict[str, str]" = OrderedDict()  # LRU缓存
        self._hits = 0
        self._misses = 0
        self._prepositions = frozenset(
            word.lower() for word in (config.prepositions if prepositions is None else prepositions)
        )
        self.logger = logging.getLogger("SmartTranslator.SubstitutionEngine")

    @property
    def mapping(self) -> TranslationDictionary:
        return self._mapping

    def translate(self, text: str) -> str:
        """翻译文本

        Args:
            text: 待翻译文本

        Returns:
            译文；词典中没有的词原样保留
        """
        if text in self._cache:
            self._hits += 1
            # 更新访问顺序（移动到最近使用）
            self._cache.move_to_end(text)
            return self._cache[text]

        self._misses += 1
        if not self.is_online:
            self.logger.warning("离线模式下，使用缓存和基础词典翻译")

        result = " ".join(
            self.translate_sentence(sentence) for sentence in split_sentences(text)
        )
        self._remember(text, result)
        return result

    def translate_sentence(self, sentence: str) -> str:
        """翻译单个句子"""
        tokens = tokenize(sentence)
        pieces: List[str] = []

        index = 0
        while index < len(tokens):
            token = tokens[index]
            if not token.is_word:
                pieces.append(token.text)
                index += 1
                continue

            # 介词不作为短语起点
            if token.text.lower() not in self._prepositions:
                phrase = find_phrase(tokens, index, self._mapping)
                if phrase is not None:
                    pieces.append(self._mapping.translate_word(phrase))
                    index += len(phrase.split(" "))
                    continue

            pieces.append(self._mapping.translate_word(token.text))
            index += 1

        return reconstruct_sentence(pieces)

    def _remember(self, text: str, result: str) -> None:
        self._cache[text] = result
        # 如果缓存超过最大大小，移除最久未使用的条目
        if self._max_cache_size is not None and len(self._cache) > self._max_cache_size:
            self._cache.popitem(last=False)

    def clear_cache(self) -> None:
        """清空翻译缓存"""
        self._cache.clear()
        self._hits = 0
        self._misses = 0

    def get_cache_info(self) -> Dict[str, Any]:
        """获取翻译缓存统计信息"""
        return {
            "hits": self._hits,
            "misses": self._misses,
            "size": len(self._cache),
            "max_size": self._max_cache_size,
            "hit_rate": self._hits / (self._hits + self._misses)
            if (self._hits + self._misses) > 0
            else 0.0,
        }
