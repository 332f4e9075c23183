#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
翻译词典模块
英文词汇/短语到中文的只读映射，一次获取后在整个会话中保持不变
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, Optional, Union


class TranslationDictionary(Mapping):
    """翻译词典类

    只读的词条映射：
    - 键唯一，值为非空字符串
    - 查询时先按小写查找，再按原样查找，最后按大小写折叠后的索引查找
    - 与普通dict按内容比较相等
    """

    def __init__(self, entries: Optional[Dict[str, str]] = None):
        """初始化翻译词典

        Args:
            entries: 词条字典，会被复制，之后对原字典的修改不影响本实例

        Raises:
            TypeError: 键或值不是字符串
            ValueError: 值为空字符串
        """
        data: Dict[str, str] = {}
        for source, target in (entries or {}).items():
            if not isinstance(source, str) or not isinstance(target, str):
                raise TypeError(f"词条必须是字符串映射: {source!r} -> {target!r}")
            if not target:
                raise ValueError(f"词条译文不能为空: {source!r}")
            data[source] = target

        self._entries = MappingProxyType(data)

        # 大小写折叠索引，同一折叠键保留最先出现的词条
        folded: Dict[str, str] = {}
        for source, target in data.items():
            folded.setdefault(source.lower(), target)
        self._folded = MappingProxyType(folded)

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} entries)"

    def lookup(self, term: str) -> Optional[str]:
        """查询词条译文

        Args:
            term: 单词或以单个空格连接的短语

        Returns:
            译文，不存在时返回None
        """
        clean_term = term.strip().lower()
        if clean_term in self._entries:
            return self._entries[clean_term]
        if term in self._entries:
            return self._entries[term]
        return self._folded.get(clean_term)

    def translate_word(self, word: str) -> str:
        """翻译单个词，词典中没有时原样返回"""
        translation = self.lookup(word)
        return translation if translation is not None else word

    def get_dictionary_stats(self) -> Dict[str, Union[int, float]]:
        """获取词典统计信息"""
        phrase_entries = sum(1 for source in self._entries if " " in source.strip())
        return {
            "total_entries": len(self._entries),
            "word_entries": len(self._entries) - phrase_entries,
            "phrase_entries": phrase_entries,
        }
