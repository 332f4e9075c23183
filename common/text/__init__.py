"""
文本处理模块
分句、分词和短语匹配
"""

from .tokenizer import Token, TokenKind, split_sentences, tokenize
from .phrase_matcher import PHRASE_LENGTHS, find_phrase

__all__ = [
    'Token',
    'TokenKind',
    'split_sentences',
    'tokenize',
    'PHRASE_LENGTHS',
    'find_phrase',
]
