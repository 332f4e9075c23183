"""
API 数据模型
定义API请求和响应的数据结构
"""

from pydantic import BaseModel, Field
from typing import List, Optional
from enum import Enum


class DictionaryOriginEnum(str, Enum):
    """词典来源枚举"""
    NETWORK = "network"
    CACHE = "cache"
    BUILTIN = "builtin"


# ==================== 请求模型 ====================

class TranslateRequest(BaseModel):
    """翻译请求"""
    text: str = Field(..., description="待翻译内容 - 纯文本或HTML页面")


# ==================== 响应模型 ====================

class TranslateResponse(BaseModel):
    """翻译响应"""
    original: str = Field(..., description="提取后的原文")
    translation: str = Field(..., description="译文")
    dictionary_origin: DictionaryOriginEnum


class TranslationCacheInfo(BaseModel):
    """翻译缓存统计"""
    hits: int
    misses: int
    size: int
    max_size: Optional[int] = None
    hit_rate: float


class DictionaryStatusResponse(BaseModel):
    """词典状态响应"""
    entry_count: int
    word_entries: int
    phrase_entries: int
    origin: DictionaryOriginEnum
    from_network: bool
    source_url: Optional[str] = None
    message: str
    translation_cache: TranslationCacheInfo
    messages: List[str] = []


class HealthResponse(BaseModel):
    """健康检查响应"""
    status: str
    dictionary_loaded: bool
