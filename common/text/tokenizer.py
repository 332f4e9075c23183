#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
分句和分词
纯函数，无共享状态
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List

from common.dictionary.dictionary_config import config

# 句末标点后紧跟的空白处切分
_SENTENCE_BOUNDARY = re.compile(r"(?<=[" + re.escape(config.sentence_terminators) + r"])\s+")

# 词：字母、数字、撇号的最长连续串；其余每个非空白字符单独成为一个标点
_TOKEN_PATTERN = re.compile(r"(?P<word>[\w']+)|(?P<punct>[^\w\s])")


class TokenKind(Enum):
    """词元类型"""

    WORD = "word"
    PUNCT = "punct"


@dataclass(frozen=True)
class Token:
    """词元"""

    text: str
    kind: TokenKind

    @property
    def is_word(self) -> bool:
        return self.kind is TokenKind.WORD


def split_sentences(text: str) -> List[str]:
    """按句末标点切分句子

    Args:
        text: 原始文本

    Returns:
        句子列表，已去除空句，保持原有顺序
    """
    if not text:
        return []
    return [sentence for sentence in _SENTENCE_BOUNDARY.split(text) if sentence.strip()]


def tokenize(sentence: str) -> List[Token]:
    """把句子切分为词和标点

    Args:
        sentence: 单个句子

    Returns:
        词元列表，保留所有标点
    """
    tokens = []
    for match in _TOKEN_PATTERN.finditer(sentence):
        kind = TokenKind.WORD if match.lastgroup == "word" else TokenKind.PUNCT
        tokens.append(Token(text=match.group(), kind=kind))
    return tokens
