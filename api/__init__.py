"""
SmartTranslator API 模块
提供REST翻译接口和词典状态查询
"""

from .api_config import API_HOST, API_PORT, API_BASE_URL
from .api_models import (
    DictionaryOriginEnum,
    TranslateRequest,
    TranslateResponse,
    TranslationCacheInfo,
    DictionaryStatusResponse,
    HealthResponse,
)
from .api_server import app, create_app, run_server

__all__ = [
    "API_HOST",
    "API_PORT",
    "API_BASE_URL",
    "DictionaryOriginEnum",
    "TranslateRequest",
    "TranslateResponse",
    "TranslationCacheInfo",
    "DictionaryStatusResponse",
    "HealthResponse",
    "app",
    "create_app",
    "run_server",
]
