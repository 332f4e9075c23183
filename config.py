"""
配置文件 - 智能翻译工具
管理词典源、缓存和运行参数，均可通过环境变量覆盖
"""

import os
from pathlib import Path

from common.dictionary.dictionary_config import config as dictionary_config


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"环境变量 {name} 必须是整数: {value!r}") from e


# ==================== 词典源配置 ====================
# 词典源地址，逗号分隔；未设置时使用内置的多CDN镜像列表
# 设置方式: export SMART_TRANSLATOR_SOURCES="https://a/dict.json,https://b/dict.json"
_sources_env = os.getenv("SMART_TRANSLATOR_SOURCES")
DICTIONARY_SOURCES = (
    [url.strip() for url in _sources_env.split(",") if url.strip()]
    if _sources_env
    else list(dictionary_config.default_sources)
)

# 单个词典源超时时间（毫秒）
SOURCE_TIMEOUT_MS = _int_env("SMART_TRANSLATOR_SOURCE_TIMEOUT_MS", dictionary_config.source_timeout_ms)

# ==================== 缓存配置 ====================
# 词典缓存目录（首次写入时创建）
CACHE_DIR = Path(
    os.getenv("SMART_TRANSLATOR_CACHE_DIR", str(Path.home() / ".cache" / "smart_translator"))
)

# 词典缓存键与有效期（毫秒，默认24小时）
DICTIONARY_CACHE_KEY = os.getenv("SMART_TRANSLATOR_CACHE_KEY", dictionary_config.cache_key)
DICTIONARY_CACHE_TTL_MS = _int_env("SMART_TRANSLATOR_CACHE_TTL_MS", dictionary_config.cache_ttl_ms)

# 翻译结果缓存条目上限（LRU）
TRANSLATION_CACHE_SIZE = _int_env("SMART_TRANSLATOR_TRANSLATION_CACHE_SIZE", 1000)

# ==================== 文本提取配置 ====================
# 不超过该长度的文本视为没有可翻译内容
MIN_TEXT_LENGTH = _int_env("SMART_TRANSLATOR_MIN_TEXT_LENGTH", 10)

# 单次翻译的最大文本长度，超出部分截断
MAX_TEXT_LENGTH = _int_env("SMART_TRANSLATOR_MAX_TEXT_LENGTH", 500)

# ==================== 日志配置 ====================
LOG_LEVEL = os.getenv("SMART_TRANSLATOR_LOG_LEVEL", "INFO")

# 日志文件路径，留空表示只输出到终端
LOG_FILE = os.getenv("SMART_TRANSLATOR_LOG_FILE") or None


# ==================== 验证函数 ====================
def validate_config():
    """验证配置是否正确"""
    from common.security import URLValidator, URLValidationError

    if not DICTIONARY_SOURCES:
        raise ValueError("未配置任何词典源，请设置 SMART_TRANSLATOR_SOURCES")

    for url in DICTIONARY_SOURCES:
        try:
            URLValidator.validate_url(url)
        except URLValidationError as e:
            raise ValueError(f"词典源配置无效: {e}") from e

    if SOURCE_TIMEOUT_MS <= 0:
        raise ValueError("SMART_TRANSLATOR_SOURCE_TIMEOUT_MS 必须大于0")

    if DICTIONARY_CACHE_TTL_MS <= 0:
        raise ValueError("SMART_TRANSLATOR_CACHE_TTL_MS 必须大于0")

    if TRANSLATION_CACHE_SIZE <= 0:
        raise ValueError("SMART_TRANSLATOR_TRANSLATION_CACHE_SIZE 必须大于0")

    if not 0 <= MIN_TEXT_LENGTH < MAX_TEXT_LENGTH:
        raise ValueError("文本长度配置无效，需满足 0 <= MIN_TEXT_LENGTH < MAX_TEXT_LENGTH")

    return True
