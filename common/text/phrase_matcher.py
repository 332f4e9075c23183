#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
短语匹配
从指定位置开始，优先匹配最长的多词短语
"""

from typing import Optional, Sequence

from common.dictionary import TranslationDictionary

from .tokenizer import Token

# 依次尝试的短语长度（从长到短）
PHRASE_LENGTHS = (3, 2)


def find_phrase(
    tokens: Sequence[Token], start_index: int, mapping: TranslationDictionary
) -> Optional[str]:
    """查找从start_index开始的最长词典短语

    只有完全由词（不含标点）组成且不越界的片段才会被尝试，
    片段中的词以单个空格连接后在词典中查询

    Args:
        tokens: 句子的词元序列
        start_index: 起始位置
        mapping: 翻译词典

    Returns:
        命中的短语，未命中返回None
    """
    for length in PHRASE_LENGTHS:
        end_index = start_index + length
        if start_index < 0 or end_index > len(tokens):
            continue

        span = tokens[start_index:end_index]
        if not all(token.is_word for token in span):
            continue

        phrase = " ".join(token.text for token in span)
        if mapping.lookup(phrase) is not None:
            return phrase

    return None
