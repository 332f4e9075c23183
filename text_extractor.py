"""
文本提取模块
从纯文本或HTML中提取可翻译的正文
"""

import re
from typing import Optional

from bs4 import BeautifulSoup

import config

# 粗略判断输入是否为HTML
_HTML_TAG = re.compile(r"<\s*(?:[a-zA-Z][\w-]*|!doctype|/[a-zA-Z][\w-]*)[^>]*>", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")

# 没有可翻译内容时对用户展示的唯一失败信息
NO_TEXT_MESSAGE = "未找到可翻译的文本内容"

# 不可见的内容，提取前整体移除
_SKIP_TAGS = ["script", "style", "noscript", "template", "head"]

# 正文候选区域，按顺序取第一个文本足够长的元素
CONTENT_SELECTORS = [
    ".content",
    ".main",
    ".article",
    ".post",
    ".text",
    "article",
    "main",
    "p",
    "body",
]


def _visible_text(element) -> str:
    return _WHITESPACE.sub(" ", element.get_text(separator=" ", strip=True)).strip()


def html_to_text(html_text: str, min_length: int = 0) -> str:
    """把HTML转换为正文文本

    依次尝试 CONTENT_SELECTORS，返回第一个文本长度超过 min_length 的元素；
    都没有时退回整个文档的可见文本

    Args:
        html_text: HTML内容
        min_length: 候选元素文本需要超过的长度
    """
    soup = BeautifulSoup(html_text, "html.parser")
    for tag in soup(_SKIP_TAGS):
        tag.extract()

    for selector in CONTENT_SELECTORS:
        for element in soup.select(selector):
            text = _visible_text(element)
            if len(text) > min_length:
                return text

    return _visible_text(soup)


def extract_text(
    raw: Optional[str],
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
) -> Optional[str]:
    """
    提取可翻译文本

    Args:
        raw: 原始输入（纯文本或HTML）
        min_length: 文本长度不超过该值时视为没有可翻译内容
        max_length: 最大长度，超出部分截断

    Returns:
        规整后的文本；没有可翻译内容时返回None
    """
    if min_length is None:
        min_length = config.MIN_TEXT_LENGTH
    if max_length is None:
        max_length = config.MAX_TEXT_LENGTH

    if not raw:
        return None

    text = html_to_text(raw, min_length) if _HTML_TAG.search(raw) else raw
    text = _WHITESPACE.sub(" ", text).strip()

    if len(text) <= min_length:
        return None

    return text[:max_length].rstrip()
