#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
分句、分词和短语匹配单元测试
"""

import pytest

from common.dictionary import TranslationDictionary
from common.text import Token, TokenKind, find_phrase, split_sentences, tokenize


def words(*texts):
    return [Token(text, TokenKind.WORD) for text in texts]


@pytest.mark.unit
class TestSplitSentences:
    """分句测试"""

    def test_split_on_terminal_punctuation(self):
        """测试按句末标点切分"""
        assert split_sentences("A. B! C?") == ["A.", "B!", "C?"]

    def test_requires_whitespace_after_terminator(self):
        """测试句末标点后没有空白时不切分"""
        assert split_sentences("version 1.2 is out. Next") == ["version 1.2 is out.", "Next"]

    def test_drops_empty_pieces(self):
        """测试去除空句"""
        assert split_sentences("Hi.   \n  ") == ["Hi."]
        assert split_sentences("") == []
        assert split_sentences("   ") == []

    def test_keeps_text_without_terminator(self):
        """测试没有句末标点的文本作为一个句子"""
        assert split_sentences("no ending here") == ["no ending here"]

    def test_multiple_whitespace_kinds(self):
        """测试换行和制表符也作为分隔"""
        assert split_sentences("One!\n\tTwo?  Three.") == ["One!", "Two?", "Three."]


@pytest.mark.unit
class TestTokenize:
    """分词测试"""

    def test_words_and_punctuation(self):
        """测试词和标点的切分"""
        tokens = tokenize("Hello, world!")
        assert [t.text for t in tokens] == ["Hello", ",", "world", "!"]
        assert [t.kind for t in tokens] == [
            TokenKind.WORD,
            TokenKind.PUNCT,
            TokenKind.WORD,
            TokenKind.PUNCT,
        ]

    def test_apostrophe_and_digits_stay_in_word(self):
        """测试撇号和数字属于词"""
        assert [t.text for t in tokenize("don't take 42 apples")] == [
            "don't", "take", "42", "apples",
        ]

    def test_every_symbol_is_kept(self):
        """测试所有标点都被保留，且每个符号单独成词元"""
        tokens = tokenize("a--b (c)")
        assert [t.text for t in tokens] == ["a", "-", "-", "b", "(", "c", ")"]
        assert [t.is_word for t in tokens] == [True, False, False, True, False, True, False]

    def test_empty_sentence(self):
        """测试空句子"""
        assert tokenize("") == []
        assert tokenize("   ") == []


@pytest.mark.unit
class TestFindPhrase:
    """短语匹配测试"""

    def test_prefers_three_words(self, sample_dictionary):
        """测试三词短语优先于两词短语"""
        tokens = words("look", "forward", "to", "it")
        assert find_phrase(tokens, 0, sample_dictionary) == "look forward to"

    def test_two_word_match(self, sample_dictionary):
        """测试两词短语匹配"""
        tokens = words("look", "for", "it")
        assert find_phrase(tokens, 0, sample_dictionary) == "look for"

    def test_case_insensitive_match(self, sample_dictionary):
        """测试短语查询不区分大小写"""
        tokens = words("New", "York", "City")
        assert find_phrase(tokens, 0, sample_dictionary) == "New York"

    def test_no_match_returns_none(self, sample_dictionary):
        """测试没有匹配时返回None"""
        tokens = words("hello", "world")
        assert find_phrase(tokens, 0, sample_dictionary) is None

    def test_single_word_is_not_a_phrase(self, sample_dictionary):
        """测试单词不算短语"""
        assert find_phrase(words("look"), 0, sample_dictionary) is None

    def test_out_of_bounds_spans_are_skipped(self, sample_dictionary):
        """测试越界的片段不会被尝试"""
        tokens = words("it", "look", "for")
        assert find_phrase(tokens, 1, sample_dictionary) == "look for"
        assert find_phrase(tokens, 2, sample_dictionary) is None
        assert find_phrase(tokens, 5, sample_dictionary) is None

    def test_punctuation_breaks_phrase(self, sample_dictionary):
        """测试标点打断短语"""
        tokens = tokenize("look, for it")
        assert find_phrase(tokens, 0, sample_dictionary) is None

    def test_phrase_keys_only(self):
        """测试只返回词典中存在的长度"""
        mapping = TranslationDictionary({"a b c": "三", "a b": "二"})
        assert find_phrase(words("a", "b", "c"), 0, mapping) == "a b c"
        assert find_phrase(words("a", "b", "d"), 0, mapping) == "a b"
